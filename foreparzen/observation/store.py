from __future__ import annotations

import logging
import math
import numbers
from typing import Iterator, List, Tuple, Union

from ..exceptions import InvalidMetric, NoTrialsYet
from ..gamma import GammaStrategy, build_gamma_strategy
from .trial import Number, Trial

logger = logging.getLogger(__name__)

DIRECTIONS = ("minimize", "maximize")


class TrialHistory:
    """
    Insertion-ordered record of trials plus the good/bad split policy.

    The split is recomputed on every call from the metric ranking; nothing
    derived from it is stored.
    """

    def __init__(self, direction: str = "minimize"):
        direction = str(direction).lower()
        if direction not in DIRECTIONS:
            raise ValueError(f"direction must be one of {DIRECTIONS}, got '{direction}'")
        self.direction = direction
        self._trials: List[Trial] = []

    def __len__(self) -> int:
        return len(self._trials)

    def __iter__(self) -> Iterator[Trial]:
        return iter(self._trials)

    @property
    def trials(self) -> Tuple[Trial, ...]:
        return tuple(self._trials)

    def record(self, parameter: Number, metric: Number) -> Trial:
        if isinstance(metric, bool) or not isinstance(metric, numbers.Real):
            raise InvalidMetric(
                f"metric for parameter {parameter!r} must be a real number, got {metric!r}"
            )
        value = float(metric)
        if math.isnan(value):
            raise InvalidMetric(f"metric for parameter {parameter!r} is NaN")
        trial = Trial(parameter=parameter, metric=value, index=len(self._trials))
        self._trials.append(trial)
        logger.debug(f"Recorded trial #{trial.index}: {parameter!r} -> {value!r}")
        return trial

    def _rank_key(self, trial: Trial):
        if self.direction == "maximize":
            return (-trial.metric, trial.index)
        return (trial.metric, trial.index)

    def sorted_trials(self) -> List[Trial]:
        """Best first; ties keep insertion order."""
        return sorted(self._trials, key=self._rank_key)

    @staticmethod
    def split_good_bad(
        sorted_trials: List[Trial], n_good: int
    ) -> Tuple[List[Trial], List[Trial]]:
        if not sorted_trials:
            return [], []
        n = len(sorted_trials)
        k = int(max(1, min(n_good, n)))
        return sorted_trials[:k], sorted_trials[k:]

    def partition(
        self, gamma: Union[float, GammaStrategy] = 0.25
    ) -> Tuple[List[Trial], List[Trial]]:
        strategy = build_gamma_strategy(gamma)
        ranked = self.sorted_trials()
        return self.split_good_bad(ranked, strategy.n_good(len(ranked)))

    def best(self) -> Trial:
        if not self._trials:
            raise NoTrialsYet("No trials have been reported yet")
        return min(self._trials, key=self._rank_key)

    def parameters(self) -> List[Number]:
        return [t.parameter for t in self._trials]

    def metrics(self) -> List[Number]:
        return [t.metric for t in self._trials]
