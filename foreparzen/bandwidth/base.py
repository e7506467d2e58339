from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Sequence

import numpy as np

from ..exceptions import InvalidBandwidth

if TYPE_CHECKING:
    from ..domain import Domain

DISCRETE_MIN_BANDWIDTH = 0.5


class BandwidthRule(ABC):
    """
    Maps the locations of one trial subset to one bandwidth per location.

    ``bandwidths`` applies the floor ``max(min_bandwidth, min_bandwidth_factor·span)``
    (and 0.5 on integral domains) to whatever ``_raw_bandwidths`` proposes.
    """

    def __init__(
        self,
        bandwidth_factor: float = 1.0,
        min_bandwidth: float = 1e-3,
        min_bandwidth_factor: float = 0.05,
    ):
        self.bandwidth_factor = float(bandwidth_factor)
        self.min_bandwidth = float(min_bandwidth)
        self.min_bandwidth_factor = float(min_bandwidth_factor)

    @abstractmethod
    def _raw_bandwidths(self, locations: np.ndarray, domain: "Domain") -> np.ndarray:
        pass

    def floor(self, domain: "Domain") -> float:
        bw_floor = max(self.min_bandwidth, self.min_bandwidth_factor * domain.span)
        if domain.is_integral:
            bw_floor = max(bw_floor, DISCRETE_MIN_BANDWIDTH)
        return float(bw_floor)

    def bandwidths(self, locations: Sequence[Any], domain: "Domain") -> np.ndarray:
        locs = np.asarray(locations, dtype=float)
        if locs.size == 0:
            return np.zeros(0, dtype=float)
        raw = self.bandwidth_factor * np.asarray(
            self._raw_bandwidths(locs, domain), dtype=float
        )
        return check_bandwidths(np.maximum(raw, self.floor(domain)))


def check_bandwidths(bw: np.ndarray) -> np.ndarray:
    bw = np.asarray(bw, dtype=float)
    bad = ~np.isfinite(bw) | (bw <= 0.0)
    if np.any(bad):
        raise InvalidBandwidth(
            f"bandwidth rule produced non-positive values: {bw[bad].tolist()}"
        )
    return bw
