from __future__ import annotations

import math

import numpy as np

from .base import Kernel

FRAC_1_SQRT_TAU = 1.0 / math.sqrt(2.0 * math.pi)


class Gaussian(Kernel):
    """Normal kernel. Unbounded: samples may land outside the domain."""

    name = "gaussian"

    def _density(self, x: np.ndarray) -> np.ndarray:
        z = (x - self.location) / self.bandwidth
        return FRAC_1_SQRT_TAU * np.exp(-0.5 * z * z) / self.bandwidth

    def sample(self, rng: np.random.Generator) -> float:
        return float(rng.normal(loc=self.location, scale=self.bandwidth))
