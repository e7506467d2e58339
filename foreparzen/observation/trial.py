from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Trial:
    """
    One observation. ``index`` is the insertion number and breaks metric ties,
    so the earlier trial ranks better.
    """

    parameter: Number
    metric: Number
    index: int = 0
