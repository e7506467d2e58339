from __future__ import annotations

import numpy as np
from scipy.stats import binom

from ..utils import round_half_up
from .base import DiscreteKernel


class Binomial(DiscreteKernel):
    """
    Symmetric binomial kernel on the integers.

    Uses ``n = 2·max(1, round(2·bandwidth²))`` experiments with ``p = 1/2`` and
    shifts the support by ``n/2`` so the mass is centred on ``location``. The
    standard deviation ``√n/2`` then tracks the bandwidth.
    """

    name = "binomial"
    p = 0.5

    def __init__(self, location: float, bandwidth: float):
        super().__init__(location, bandwidth)
        self.n = 2 * max(1, round_half_up(2.0 * self.bandwidth * self.bandwidth))

    @property
    def offset(self) -> int:
        return self.location - self.n // 2

    @property
    def std(self) -> float:
        return float(np.sqrt(self.n * self.p * (1.0 - self.p)))

    def _density(self, x: np.ndarray) -> np.ndarray:
        # pmf is zero off the integers
        return binom.pmf(x - self.offset, self.n, self.p)

    def sample(self, rng: np.random.Generator) -> int:
        return int(self.offset + rng.binomial(self.n, self.p))
