"""Progress Tracking Services"""

from .score_engine import ScoreEngine
from .streak_engine import StreakEngine
from .win_generator import WinGenerator
from .progress_aggregator import ProgressAggregator

__all__ = [
    "ScoreEngine",
    "StreakEngine",
    "WinGenerator",
    "ProgressAggregator",
]
