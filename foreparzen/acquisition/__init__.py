from .base import AcquisitionStrategy
from .density_ratio import DensityRatioAcquisition
from .factory import build_acquisition_strategy

__all__ = [
    "AcquisitionStrategy",
    "DensityRatioAcquisition",
    "build_acquisition_strategy",
]
