from __future__ import annotations

import math

import numpy as np


def safe_normalize(w: np.ndarray) -> np.ndarray:
    w = np.asarray(w, dtype=float)
    s = float(np.sum(w))
    if s > 1e-12:
        return w / s
    if w.size == 0:
        return w
    return np.full_like(w, 1.0 / float(len(w)))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from zero (unlike ``round``)."""
    return int(math.floor(abs(x) + 0.5)) * (1 if x >= 0 else -1)


def as_output(values: np.ndarray, scalar: bool):
    """Return a Python float for scalar inputs, the array otherwise."""
    if scalar:
        return float(np.asarray(values).reshape(-1)[0])
    return values


def robust_scale_1d(values: np.ndarray) -> float:
    """
    Robust scale estimate: min(std, IQR/1.349). Falls back safely.
    """
    v = np.asarray(values, dtype=float)
    if v.size <= 1:
        return 0.0
    std = float(np.std(v))
    q25, q75 = np.percentile(v, [25, 75])
    iqr = float(q75 - q25)
    robust = iqr / 1.349 if iqr > 0 else std
    if std > 0 and robust > 0:
        return float(min(std, robust))
    return float(max(std, robust, 0.0))
