"""Random-source helpers shared by kernels, mixtures and the optimizer."""

from __future__ import annotations

from typing import Union

import numpy as np

from .numerics import safe_normalize

SeedLike = Union[None, int, np.random.Generator]


def ensure_rng(seed: SeedLike = None) -> np.random.Generator:
    """
    Return a generator for ``seed``. An existing ``Generator`` is borrowed as is,
    so the caller keeps control over its state.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def choose_index(rng: np.random.Generator, weights: np.ndarray) -> int:
    """Pick an index with probability proportional to ``weights``."""
    w = np.asarray(weights, dtype=float)
    if w.size == 1:
        return 0
    return int(rng.choice(w.size, p=safe_normalize(w)))


def sample_epanechnikov_unit(rng: np.random.Generator) -> float:
    """
    Draw from the parabolic density 3/4 (1 - u^2) on [-1, 1].

    Of three iid U(-1, 1) draws, return the second when the third has the
    largest magnitude, the third otherwise (Devroye's order-statistic method).
    """
    u1, u2, u3 = rng.uniform(-1.0, 1.0, size=3)
    if abs(u3) >= abs(u2) and abs(u3) >= abs(u1):
        return float(u2)
    return float(u3)


def sample_uniform(
    rng: np.random.Generator, lo: float, hi: float, integral: bool = False
) -> float | int:
    if integral:
        return int(rng.integers(int(lo), int(hi), endpoint=True))
    return float(rng.uniform(lo, hi))
