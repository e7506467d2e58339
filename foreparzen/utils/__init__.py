from .bounds import _clamp, _reflect_into_bounds
from .numerics import (
    as_output,
    robust_scale_1d,
    round_half_up,
    safe_normalize,
)
from .random import (
    SeedLike,
    choose_index,
    ensure_rng,
    sample_epanechnikov_unit,
    sample_uniform,
)

__all__ = [
    "_clamp",
    "_reflect_into_bounds",
    "as_output",
    "robust_scale_1d",
    "round_half_up",
    "safe_normalize",
    "SeedLike",
    "choose_index",
    "ensure_rng",
    "sample_epanechnikov_unit",
    "sample_uniform",
]
