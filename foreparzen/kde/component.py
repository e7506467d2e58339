from __future__ import annotations

import math
from dataclasses import dataclass

from ..kernels import Kernel


@dataclass(frozen=True)
class Component:
    """One weighted kernel of a density mixture."""

    kernel: Kernel
    weight: float = 1.0

    def __post_init__(self):
        w = float(self.weight)
        if not math.isfinite(w) or w < 0.0:
            raise ValueError(f"Component weight must be finite and >= 0, got {self.weight!r}")
        object.__setattr__(self, "weight", w)

    @property
    def location(self):
        return self.kernel.location

    @property
    def bandwidth(self) -> float:
        return self.kernel.bandwidth
