"""Plan Generation Models"""

from .theme import DayTheme
from .plan import (
    WEEK_LENGTH,
    MicroSession,
    DayPlanItem,
    WeeklyPlan,
    DailyPlan,
    PlanGenerationResult,
    StarterReset,
)
from .progression import ProgressionResult

__all__ = [
    "DayTheme",
    "WEEK_LENGTH",
    "MicroSession",
    "DayPlanItem",
    "WeeklyPlan",
    "DailyPlan",
    "PlanGenerationResult",
    "StarterReset",
    "ProgressionResult",
]
