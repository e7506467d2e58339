from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from ..kde import DensityMixture


class AcquisitionStrategy(ABC):
    @abstractmethod
    def score(
        self,
        candidates: np.ndarray,
        good: DensityMixture,
        bad: DensityMixture,
    ) -> np.ndarray:
        pass

    @staticmethod
    def best_index(scores: np.ndarray) -> int:
        """Index of the highest score; ``argmax`` keeps the first of equal scores."""
        return int(np.argmax(scores))
