"""Progress Tracking Models"""

from .score import DailyScoreEntry, ScoreDisplayCategory, clamp_score
from .progress import ProgressSummary, ProgressTrend, ProgressWin, classify_trend
from .streak import StreakState, StreakUpdate

__all__ = [
    "DailyScoreEntry",
    "ScoreDisplayCategory",
    "clamp_score",
    "ProgressSummary",
    "ProgressTrend",
    "ProgressWin",
    "classify_trend",
    "StreakState",
    "StreakUpdate",
]
