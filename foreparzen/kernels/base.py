from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from ..exceptions import InvalidBandwidth
from ..utils import as_output


class Kernel(ABC):
    """
    Probability density centred at ``location`` with spread ``bandwidth``.

    Every kernel is standardised so that its unscaled shape has unit standard
    deviation; the bandwidth is therefore the kernel's standard deviation and
    shapes are interchangeable under one bandwidth rule.
    """

    name: str = "kernel"
    discrete: bool = False

    def __init__(self, location: float, bandwidth: float):
        bw = float(bandwidth)
        if not math.isfinite(bw) or bw <= 0.0:
            raise InvalidBandwidth(
                f"{type(self).__name__} bandwidth must be positive, got {bandwidth!r}"
            )
        self.location = self._coerce_location(location)
        self.bandwidth = bw

    def _coerce_location(self, location: Any) -> float:
        return float(location)

    @property
    def std(self) -> float:
        return self.bandwidth

    @abstractmethod
    def _density(self, x: np.ndarray) -> np.ndarray:
        pass

    @abstractmethod
    def sample(self, rng: np.random.Generator) -> Any:
        pass

    def density(self, x: Any):
        arr = np.asarray(x, dtype=float)
        return as_output(self._density(np.atleast_1d(arr)), arr.ndim == 0)

    def log_density(self, x: Any):
        d = np.asarray(self.density(x), dtype=float)
        with np.errstate(divide="ignore"):
            out = np.log(d)
        return as_output(out, out.ndim == 0)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(location={self.location!r}, bandwidth={self.bandwidth:.6g})"


class DiscreteKernel(Kernel):
    """Kernel over the integers; locations and samples are Python ints."""

    discrete = True

    def _coerce_location(self, location: Any) -> int:
        return int(round(float(location)))
