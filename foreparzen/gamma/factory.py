from __future__ import annotations

from typing import Any

from .base import GammaStrategy
from .default import CallableGammaStrategy, FractionGammaStrategy, SqrtGammaStrategy


def build_gamma_strategy(gamma: Any, gamma_strategy: str = "fraction") -> GammaStrategy:
    if isinstance(gamma, GammaStrategy):
        return gamma
    if callable(gamma):
        return CallableGammaStrategy(gamma)
    key = str(gamma_strategy or "fraction").lower()
    if key == "sqrt":
        return SqrtGammaStrategy()
    if key in {"fraction", "fixed"}:
        return FractionGammaStrategy(gamma)
    raise ValueError(f"Unknown gamma_strategy '{gamma_strategy}'")
