"""Error conditions signalled by the optimizer."""

from __future__ import annotations


class ParzenError(Exception):
    """Base class for every error raised by foreparzen."""


class InvalidDomain(ParzenError, ValueError):
    """Malformed bounds, or a kernel whose numeric kind does not match the domain."""


class InvalidBandwidth(ParzenError, ValueError):
    """A kernel bandwidth that is zero, negative or not finite."""


class OutOfDomainParameter(ParzenError, ValueError):
    """A reported parameter lies outside the domain."""


class InvalidMetric(ParzenError, ValueError):
    """A metric that cannot be ranked (NaN)."""


class NoTrialsYet(ParzenError, LookupError):
    """Raised when a best trial is requested from an empty history."""


__all__ = [
    "ParzenError",
    "InvalidDomain",
    "InvalidBandwidth",
    "OutOfDomainParameter",
    "InvalidMetric",
    "NoTrialsYet",
]
