from __future__ import annotations


def _clamp(x: float, lo: float, hi: float) -> float:
    return float(min(max(x, lo), hi))


def _reflect_into_bounds(x: float, lo: float, hi: float) -> float:
    """
    Reflect x into [lo, hi]. This reduces boundary bias compared to raw clamp.
    """
    if lo >= hi:
        return float(lo)

    width = hi - lo
    # Map into [0, 2*width) then reflect
    y = (x - lo) % (2.0 * width)
    if y > width:
        y = 2.0 * width - y
    return float(lo + y)
