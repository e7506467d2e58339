from .store import DIRECTIONS, TrialHistory
from .trial import Trial

__all__ = ["DIRECTIONS", "Trial", "TrialHistory"]
