from __future__ import annotations

import math
from typing import Optional, Tuple

import numpy as np

from ..exceptions import InvalidDomain
from ..utils import round_half_up, sample_uniform
from .base import DiscreteKernel, Kernel

SQRT_3 = math.sqrt(3.0)


class Uniform(Kernel):
    """Boxcar kernel over ``location ± √3·bandwidth``."""

    name = "uniform"

    def __init__(
        self,
        location: float,
        bandwidth: float,
        window: Optional[Tuple[float, float]] = None,
    ):
        super().__init__(location, bandwidth)
        if window is None:
            h = SQRT_3 * self.bandwidth
            window = (self.location - h, self.location + h)
        self.low, self.high = float(window[0]), float(window[1])

    @classmethod
    def with_bounds(cls, low: float, high: float) -> "Uniform":
        """Box spanning exactly ``[low, high]``."""
        lo, hi = float(low), float(high)
        if lo > hi:
            raise InvalidDomain(f"low ({lo}) must not exceed high ({hi})")
        return cls((lo + hi) / 2.0, (hi - lo) / (2.0 * SQRT_3), window=(lo, hi))

    def _density(self, x: np.ndarray) -> np.ndarray:
        inside = (x >= self.low) & (x <= self.high)
        return np.where(inside, 1.0 / (self.high - self.low), 0.0)

    def sample(self, rng: np.random.Generator) -> float:
        return sample_uniform(rng, self.low, self.high)


class DiscreteUniform(DiscreteKernel):
    """
    Equal mass on every integer of a window.

    Built around a location, the window is ``location ± h`` with
    ``h = max(1, round(√3·bandwidth))``; ``with_bounds`` spans given integers.
    """

    name = "uniform"

    def __init__(
        self,
        location: float,
        bandwidth: float,
        window: Optional[Tuple[int, int]] = None,
    ):
        super().__init__(location, bandwidth)
        if window is None:
            h = max(1, round_half_up(SQRT_3 * self.bandwidth))
            window = (self.location - h, self.location + h)
        self.low, self.high = int(window[0]), int(window[1])

    @classmethod
    def with_bounds(cls, low: int, high: int) -> "DiscreteUniform":
        lo, hi = int(low), int(high)
        if lo > hi:
            raise InvalidDomain(f"low ({lo}) must not exceed high ({hi})")
        count = hi - lo + 1
        std = math.sqrt((count * count - 1) / 12.0)
        # a single-integer window has zero spread; keep the bandwidth valid
        return cls((lo + hi) / 2.0, max(std, 0.5), window=(lo, hi))

    @property
    def count(self) -> int:
        return self.high - self.low + 1

    def _density(self, x: np.ndarray) -> np.ndarray:
        inside = (x >= self.low) & (x <= self.high) & (np.floor(x) == x)
        return np.where(inside, 1.0 / self.count, 0.0)

    def sample(self, rng: np.random.Generator) -> int:
        return sample_uniform(rng, self.low, self.high, integral=True)
