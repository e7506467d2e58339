from __future__ import annotations

from .base import AcquisitionStrategy
from .density_ratio import DensityRatioAcquisition


def build_acquisition_strategy(*args, **kwargs) -> AcquisitionStrategy:
    return DensityRatioAcquisition(*args, **kwargs)
