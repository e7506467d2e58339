from __future__ import annotations

from typing import Any

from .base import BandwidthRule
from .rules import CallableBandwidth, NeighborBandwidth, SilvermanBandwidth, SpanBandwidth

_RULES = {
    "span": SpanBandwidth,
    "neighbor": NeighborBandwidth,
    "silverman": SilvermanBandwidth,
}


def build_bandwidth_rule(
    rule: Any = "neighbor",
    *,
    bandwidth_factor: float = 1.0,
    min_bandwidth: float = 1e-3,
    min_bandwidth_factor: float = 0.05,
) -> BandwidthRule:
    if isinstance(rule, BandwidthRule):
        return rule
    kwargs = dict(
        bandwidth_factor=bandwidth_factor,
        min_bandwidth=min_bandwidth,
        min_bandwidth_factor=min_bandwidth_factor,
    )
    if callable(rule):
        return CallableBandwidth(rule, **kwargs)
    key = str(rule).lower()
    if key not in _RULES:
        raise ValueError(f"Unknown bandwidth_rule '{rule}'; expected one of {sorted(_RULES)}")
    return _RULES[key](**kwargs)
