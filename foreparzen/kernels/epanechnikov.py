from __future__ import annotations

import math

import numpy as np

from ..utils import sample_epanechnikov_unit
from .base import Kernel

SQRT_5 = math.sqrt(5.0)


class Epanechnikov(Kernel):
    """
    Standardised Epanechnikov (parabolic) kernel over ``location ± √5·bandwidth``.
    Zero density outside that interval.
    """

    name = "epanechnikov"

    @property
    def half_width(self) -> float:
        return SQRT_5 * self.bandwidth

    def _density(self, x: np.ndarray) -> np.ndarray:
        z = (x - self.location) / self.half_width
        inside = np.abs(z) <= 1.0
        return np.where(inside, 0.75 * (1.0 - z * z) / self.half_width, 0.0)

    def sample(self, rng: np.random.Generator) -> float:
        return float(self.location + self.half_width * sample_epanechnikov_unit(rng))
