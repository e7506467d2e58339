from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Tuple, Union

from .exceptions import InvalidDomain
from .kernels import DiscreteUniform, Kernel, Uniform
from .utils import _clamp, _reflect_into_bounds

_KINDS = ("float", "int")


def _is_integral(x: Any) -> bool:
    if isinstance(x, bool):
        return False
    if isinstance(x, int):
        return True
    try:
        f = float(x)
    except (TypeError, ValueError):
        return False
    return math.isfinite(f) and f.is_integer()


@dataclass(frozen=True)
class Domain:
    """
    Closed range ``[low, high]`` of a single searched parameter.

    ``kind`` is ``"float"`` for real-valued parameters or ``"int"`` for
    integral ones; it decides which kernels may be attached.
    """

    low: Union[float, int]
    high: Union[float, int]
    kind: str = "float"

    def __post_init__(self):
        kind = str(self.kind).lower()
        if kind not in _KINDS:
            raise InvalidDomain(f"Unknown domain kind '{self.kind}'; expected {_KINDS}")
        object.__setattr__(self, "kind", kind)

        try:
            lo, hi = float(self.low), float(self.high)
        except (TypeError, ValueError) as e:
            raise InvalidDomain(f"Domain bounds must be numeric: {e}") from e
        if not (math.isfinite(lo) and math.isfinite(hi)):
            raise InvalidDomain(f"Domain bounds must be finite, got [{self.low}, {self.high}]")
        if lo > hi:
            raise InvalidDomain(f"low ({self.low}) must not exceed high ({self.high})")

        if kind == "int":
            if not (_is_integral(self.low) and _is_integral(self.high)):
                raise InvalidDomain(
                    f"int domain needs integral bounds, got [{self.low}, {self.high}]"
                )
            object.__setattr__(self, "low", int(lo))
            object.__setattr__(self, "high", int(hi))
        else:
            object.__setattr__(self, "low", lo)
            object.__setattr__(self, "high", hi)

    @classmethod
    def real(cls, low: float, high: float) -> "Domain":
        return cls(low, high, "float")

    @classmethod
    def integer(cls, low: int, high: int) -> "Domain":
        return cls(low, high, "int")

    @classmethod
    def parse(cls, value: Union["Domain", Tuple[str, Tuple[Any, Any]]]) -> "Domain":
        """Accept a ``Domain`` or the config-space tuple ``(kind, (low, high))``."""
        if isinstance(value, Domain):
            return value
        try:
            kind, (lo, hi) = value
        except (TypeError, ValueError) as e:
            raise InvalidDomain(
                f"Expected Domain or (kind, (low, high)), got {value!r}"
            ) from e
        return cls(lo, hi, kind)

    @property
    def is_integral(self) -> bool:
        return self.kind == "int"

    @property
    def span(self) -> float:
        return float(self.high - self.low)

    def contains(self, x: Any) -> bool:
        if isinstance(x, bool):
            return False
        try:
            f = float(x)
        except (TypeError, ValueError):
            return False
        if not math.isfinite(f) or f < self.low or f > self.high:
            return False
        return f.is_integer() if self.is_integral else True

    def coerce(self, x: Any) -> Union[float, int]:
        return int(round(float(x))) if self.is_integral else float(x)

    def clip(self, x: Any) -> Union[float, int]:
        """Bring a kernel sample back into the domain (reflect, then clamp)."""
        y = _reflect_into_bounds(float(x), float(self.low), float(self.high))
        if self.is_integral:
            return int(_clamp(int(round(y)), self.low, self.high))
        return _clamp(y, self.low, self.high)

    def default_prior(self) -> Kernel:
        """Flat kernel over the whole domain."""
        if self.is_integral:
            return DiscreteUniform.with_bounds(self.low, self.high)
        if self.span == 0.0:
            # degenerate range: a very narrow box keeps the prior density positive
            return Uniform(self.low, 1e-12)
        return Uniform.with_bounds(self.low, self.high)

    def __str__(self) -> str:
        return f"{self.kind}[{self.low}, {self.high}]"
