"""Daily score models"""

from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from shared.models import FocusArea, StiffnessTime
from shared.utils.tags import parse_tags


def clamp_score(value: int) -> int:
    return max(0, min(100, int(value)))


class ScoreDisplayCategory(str, Enum):
    """Score band shown to the user"""

    EXCELLENT = "excellent"  # 85-100
    GOOD = "good"            # 70-84
    BUILDING = "building"    # 50-69
    STARTING = "starting"    # < 50

    @classmethod
    def from_score(cls, score: int) -> "ScoreDisplayCategory":
        if score >= 85:
            return cls.EXCELLENT
        elif score >= 70:
            return cls.GOOD
        elif score >= 50:
            return cls.BUILDING
        return cls.STARTING

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def encouragement(self) -> str:
        return {
            ScoreDisplayCategory.EXCELLENT: "Outstanding consistency!",
            ScoreDisplayCategory.GOOD: "Keep up the great work!",
            ScoreDisplayCategory.BUILDING: "You're building momentum.",
            ScoreDisplayCategory.STARTING: "Every reset counts.",
        }[self]


class DailyScoreEntry(BaseModel):
    """One calendar day of activity

    Created or updated as sessions complete that day.
    """

    entry_date: date = Field(..., description="Calendar day")
    score: int = Field(default=0, ge=0, le=100, description="Daily score (0-100)")
    minutes_completed: int = Field(default=0, ge=0)
    sessions_completed: int = Field(default=0, ge=0)
    focus_areas: List[FocusArea] = Field(default_factory=list, description="Areas touched")
    stiffness_times_triggered: List[StiffnessTime] = Field(
        default_factory=list, description="Stiffness times a session was done in"
    )
    notes: Optional[str] = Field(default=None)
    updated_at: Optional[datetime] = Field(default=None)

    @field_validator("score", mode="before")
    @classmethod
    def _clamp_score(cls, v):
        return clamp_score(v) if v is not None else 0

    @field_validator("focus_areas", mode="before")
    @classmethod
    def _parse_focus_areas(cls, v):
        return parse_tags(v, FocusArea, "entry focus_area")

    @field_validator("stiffness_times_triggered", mode="before")
    @classmethod
    def _parse_stiffness_times(cls, v):
        return parse_tags(v, StiffnessTime, "entry stiffness_time")

    @property
    def has_activity(self) -> bool:
        return self.sessions_completed > 0

    @property
    def score_category(self) -> ScoreDisplayCategory:
        return ScoreDisplayCategory.from_score(self.score)

    @classmethod
    def placeholder(cls, entry_date: date) -> "DailyScoreEntry":
        """Empty day used to fill gaps in the weekly view (scores 0, not the base score)"""
        return cls(entry_date=entry_date)
