from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import numpy as np

from ..utils import robust_scale_1d
from .base import BandwidthRule, check_bandwidths

if TYPE_CHECKING:
    from ..domain import Domain


class SpanBandwidth(BandwidthRule):
    """Same bandwidth for every kernel: ``span / subset_size``."""

    def _raw_bandwidths(self, locations: np.ndarray, domain: "Domain") -> np.ndarray:
        n = int(locations.size)
        return np.full(n, domain.span / max(n, 1), dtype=float)


class NeighborBandwidth(BandwidthRule):
    """
    Each kernel spans the larger gap to its sorted neighbours, so kernels
    tighten as trials cluster. Gaps are taken between distinct locations;
    repeated trials share the bandwidth of their location. A single distinct
    location reaches the farther domain bound.
    """

    def _raw_bandwidths(self, locations: np.ndarray, domain: "Domain") -> np.ndarray:
        uniq, inverse = np.unique(locations, return_inverse=True)
        if uniq.size == 1:
            x = float(uniq[0])
            width = max(x - float(domain.low), float(domain.high) - x)
            return np.full(locations.shape, width, dtype=float)
        gaps = np.diff(uniq)
        left = np.concatenate(([0.0], gaps))
        right = np.concatenate((gaps, [0.0]))
        return np.maximum(left, right)[inverse.reshape(-1)]


class SilvermanBandwidth(BandwidthRule):
    """Silverman's rule on a robust scale; a lone trial falls back to the span."""

    def _raw_bandwidths(self, locations: np.ndarray, domain: "Domain") -> np.ndarray:
        n = int(locations.size)
        scale = robust_scale_1d(locations)
        if n <= 1 or scale <= 0.0:
            return np.full(n, domain.span / max(n, 1), dtype=float)
        return np.full(n, 1.06 * scale * n ** (-0.2), dtype=float)


class CallableBandwidth(BandwidthRule):
    """User rule ``(locations, domain) -> bandwidths``; must return positive values."""

    def __init__(self, fn: Callable[[np.ndarray, "Domain"], np.ndarray], **kwargs):
        super().__init__(**kwargs)
        self.fn = fn

    def _raw_bandwidths(self, locations: np.ndarray, domain: "Domain") -> np.ndarray:
        out = np.broadcast_to(
            np.asarray(self.fn(locations, domain), dtype=float), locations.shape
        )
        return check_bandwidths(out)
