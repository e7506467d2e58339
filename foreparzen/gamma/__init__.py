from .base import GammaStrategy
from .default import CallableGammaStrategy, FractionGammaStrategy, SqrtGammaStrategy
from .factory import build_gamma_strategy

__all__ = [
    "GammaStrategy",
    "CallableGammaStrategy",
    "FractionGammaStrategy",
    "SqrtGammaStrategy",
    "build_gamma_strategy",
]
