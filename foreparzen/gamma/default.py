from __future__ import annotations

import math
from typing import Callable

from ..utils import round_half_up
from .base import GammaStrategy


class FractionGammaStrategy(GammaStrategy):
    """The best ``gamma`` fraction of trials is good, never fewer than one."""

    def __init__(self, gamma: float):
        gamma = float(gamma)
        if not (0.0 < gamma <= 1.0):
            raise ValueError(f"split fraction must be in (0, 1], got {gamma}")
        self.gamma = gamma

    def n_good(self, n_obs: int) -> int:
        if n_obs <= 0:
            return 0
        return min(n_obs, max(1, round_half_up(self.gamma * n_obs)))


class SqrtGammaStrategy(GammaStrategy):
    def n_good(self, n_obs: int) -> int:
        if n_obs <= 0:
            return 0
        return min(n_obs, max(1, int(math.sqrt(n_obs))))


class CallableGammaStrategy(GammaStrategy):
    """Wraps a user function ``n_obs -> n_good``; the result is clipped to [1, n_obs]."""

    def __init__(self, fn: Callable[[int], int]):
        self.fn = fn

    def n_good(self, n_obs: int) -> int:
        if n_obs <= 0:
            return 0
        return min(n_obs, max(1, int(self.fn(n_obs))))
