"""Weekly progress models"""

from datetime import date
from enum import Enum
from typing import List, Sequence

from pydantic import BaseModel, Field, field_validator

from progress_tracking.config import settings
from progress_tracking.models.score import DailyScoreEntry, clamp_score


class ProgressTrend(str, Enum):
    """Direction of the active-day scores over the week"""

    IMPROVING = "improving"
    NEUTRAL = "neutral"
    DECLINING = "declining"

    @property
    def display_name(self) -> str:
        return {
            ProgressTrend.IMPROVING: "Trending up",
            ProgressTrend.NEUTRAL: "Steady",
            ProgressTrend.DECLINING: "Room to grow",
        }[self]

    @property
    def icon(self) -> str:
        return {
            ProgressTrend.IMPROVING: "arrow.up.right",
            ProgressTrend.NEUTRAL: "arrow.right",
            ProgressTrend.DECLINING: "arrow.down.right",
        }[self]

    @property
    def encouragement(self) -> str:
        return {
            ProgressTrend.IMPROVING: "Your week is trending up!",
            ProgressTrend.NEUTRAL: "You're maintaining consistency.",
            ProgressTrend.DECLINING: "Small resets can turn it around.",
        }[self]


def classify_trend(scores: Sequence[int], deadband: int = 5, min_days: int = 2) -> ProgressTrend:
    """
    Compare the earlier half of the scores with the later half

    Args:
        scores: active-day scores, oldest first
        deadband: mean difference treated as steady
        min_days: scores needed before a direction is reported

    Returns:
        ProgressTrend
    """
    if len(scores) < max(2, min_days):
        return ProgressTrend.NEUTRAL

    half = len(scores) // 2
    earlier = scores[:half]
    later = scores[-half:]

    earlier_avg = sum(earlier) // len(earlier)
    later_avg = sum(later) // len(later)

    if later_avg > earlier_avg + deadband:
        return ProgressTrend.IMPROVING
    elif later_avg < earlier_avg - deadband:
        return ProgressTrend.DECLINING
    return ProgressTrend.NEUTRAL


class ProgressWin(BaseModel):
    """Achievement badge for the week"""

    title: str
    description: str
    icon: str = Field(default="star.fill", description="SF Symbol name")


class ProgressSummary(BaseModel):
    """Weekly roll-up of the last 7 daily entries (derived, not stored)"""

    week_start_date: date = Field(..., description="Monday of the current week")
    weekly_average_score: int = Field(default=0, ge=0, le=100)
    weekly_sessions_completed: int = Field(default=0, ge=0)
    weekly_minutes_completed: int = Field(default=0, ge=0)
    streak_days: int = Field(default=0, ge=0)
    last_7_days: List[DailyScoreEntry] = Field(
        default_factory=list, description="Oldest first, gaps filled with empty days"
    )
    wins: List[ProgressWin] = Field(default_factory=list)

    @field_validator("weekly_average_score", mode="before")
    @classmethod
    def _clamp_average(cls, v):
        return clamp_score(v) if v is not None else 0

    @property
    def has_enough_data(self) -> bool:
        """At least one day with a completed session"""
        return any(entry.has_activity for entry in self.last_7_days)

    @property
    def active_days_count(self) -> int:
        return sum(1 for entry in self.last_7_days if entry.has_activity)

    @property
    def trend(self) -> ProgressTrend:
        scores = [entry.score for entry in self.last_7_days if entry.has_activity]
        return classify_trend(
            scores, settings.trend_deadband, settings.min_active_days_for_trend
        )

    @property
    def focus_areas_covered(self) -> List[str]:
        areas = {area.value for entry in self.last_7_days for area in entry.focus_areas}
        return sorted(areas)

    @property
    def average_score_display(self) -> str:
        return str(self.weekly_average_score)

    @property
    def score_progress(self) -> float:
        """Fraction for the score ring"""
        return self.weekly_average_score / 100.0

    @property
    def streak_display(self) -> str:
        if self.streak_days == 0:
            return "Start your streak"
        elif self.streak_days == 1:
            return "1 day"
        return f"{self.streak_days} days"

    @property
    def sessions_display(self) -> str:
        if self.weekly_sessions_completed == 0:
            return "No sessions"
        elif self.weekly_sessions_completed == 1:
            return "1 session"
        return f"{self.weekly_sessions_completed} sessions"

    @property
    def minutes_display(self) -> str:
        return f"{self.weekly_minutes_completed} min"

    @classmethod
    def empty(cls, week_start_date: date) -> "ProgressSummary":
        """Summary for a new user"""
        return cls(week_start_date=week_start_date)
