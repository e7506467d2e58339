from .base import BandwidthRule
from .factory import build_bandwidth_rule
from .rules import CallableBandwidth, NeighborBandwidth, SilvermanBandwidth, SpanBandwidth

__all__ = [
    "BandwidthRule",
    "CallableBandwidth",
    "NeighborBandwidth",
    "SilvermanBandwidth",
    "SpanBandwidth",
    "build_bandwidth_rule",
]
