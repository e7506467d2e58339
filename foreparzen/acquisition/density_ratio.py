from __future__ import annotations

import numpy as np

from ..kde import DensityMixture
from .base import AcquisitionStrategy


class DensityRatioAcquisition(AcquisitionStrategy):
    """
    Score ``l(x) / g(x)``: density under the good mixture over density under the
    bad one. With ``log_space`` the score is ``log l(x) - log g(x)``, which
    ranks candidates identically.
    """

    def __init__(self, log_space: bool = False):
        self.log_space = bool(log_space)

    def score(
        self,
        candidates: np.ndarray,
        good: DensityMixture,
        bad: DensityMixture,
    ) -> np.ndarray:
        x = np.asarray(candidates, dtype=float)
        if self.log_space:
            return np.asarray(good.log_density(x), dtype=float) - np.asarray(
                bad.log_density(x), dtype=float
            )
        l = np.asarray(good.density(x), dtype=float)
        g = np.asarray(bad.density(x), dtype=float)
        with np.errstate(divide="ignore", invalid="ignore"):
            ratio = np.where(g > 0.0, l / g, np.where(l > 0.0, np.inf, 0.0))
        return ratio
