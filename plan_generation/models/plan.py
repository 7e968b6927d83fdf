"""Plan models

WeeklyPlan is the unit handed to the persistence collaborator. It
round-trips through JSON (model_dump_json / model_validate_json) and
carries schema_version for stored documents.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from shared.models import ExerciseRecord, ProfileSnapshot, SessionType

WEEK_LENGTH = 7


class MicroSession(BaseModel):
    """Scheduled session (a few exercises in one slot)"""

    id: str = Field(..., description="Session ID")
    title: str = Field(..., description="Session title, e.g. 'Morning Reset'")
    session_type: SessionType = Field(..., description="Daily slot")
    exercise_ids: List[str] = Field(default_factory=list, description="Ordered exercise IDs")
    duration_seconds: int = Field(default=0, ge=0, description="Total duration (seconds)")
    is_completed: bool = Field(default=False)
    completed_at: Optional[datetime] = Field(default=None)

    @property
    def duration_minutes(self) -> int:
        """Rounded to the nearest minute"""
        return (self.duration_seconds + 30) // 60

    @property
    def display_duration(self) -> str:
        return f"{self.duration_minutes} min"


class DayPlanItem(BaseModel):
    """One day of a weekly plan"""

    id: str = Field(..., description="Day ID")
    day_index: int = Field(..., ge=0, le=WEEK_LENGTH - 1, description="Day 0-6")
    sessions: List[MicroSession] = Field(default_factory=list)
    focus_label: str = Field(default="", description="e.g. 'Neck & Shoulders'")
    theme: str = Field(default="", description="e.g. 'Foundation'")

    @property
    def session_count(self) -> int:
        return len(self.sessions)

    @property
    def total_duration_seconds(self) -> int:
        return sum(s.duration_seconds for s in self.sessions)

    @property
    def total_duration_minutes(self) -> int:
        return (self.total_duration_seconds + 30) // 60

    @property
    def completed_session_count(self) -> int:
        return sum(1 for s in self.sessions if s.is_completed)

    @property
    def is_fully_completed(self) -> bool:
        return all(s.is_completed for s in self.sessions)

    def session(self, session_id: str) -> Optional[MicroSession]:
        for s in self.sessions:
            if s.id == session_id:
                return s
        return None


class WeeklyPlan(BaseModel):
    """7-day plan"""

    id: str = Field(..., description="Plan ID")
    schema_version: int = Field(default=1, description="Stored document schema version")
    version: int = Field(default=1, ge=1, description="Incremented on progression")
    week_start_date: date = Field(..., description="Monday of the plan week")
    profile_snapshot: ProfileSnapshot = Field(..., description="Profile used to build the plan")
    catalog_version: str = Field(default="", description="Exercise catalog version used")
    daily_plans: List[DayPlanItem] = Field(
        ..., min_length=WEEK_LENGTH, max_length=WEEK_LENGTH
    )
    completed_sessions_this_week: int = Field(default=0, ge=0)
    progression_applied: bool = Field(default=False)

    def plan(self, day_index: int) -> Optional[DayPlanItem]:
        if 0 <= day_index < len(self.daily_plans):
            return self.daily_plans[day_index]
        return None

    def day_index_for(self, on_date: date) -> int:
        """Day index of a date, clamped into 0-6"""
        days = (on_date - self.week_start_date).days
        return min(WEEK_LENGTH - 1, max(0, days))

    def plan_for_date(self, on_date: date) -> Optional[DayPlanItem]:
        days = (on_date - self.week_start_date).days
        return self.plan(days)

    def should_apply_progression(self, threshold: int = 5) -> bool:
        """Enough sessions completed this week and not escalated yet"""
        return self.completed_sessions_this_week >= threshold and not self.progression_applied

    @property
    def total_week_duration_seconds(self) -> int:
        return sum(day.total_duration_seconds for day in self.daily_plans)

    @property
    def average_daily_duration_seconds(self) -> int:
        if not self.daily_plans:
            return 0
        return self.total_week_duration_seconds // len(self.daily_plans)


class DailyPlan(BaseModel):
    """Single-day plan with fixed morning / midday / afternoon slots"""

    plan_date: date = Field(..., description="Plan day")
    sessions: List[MicroSession] = Field(default_factory=list)

    @property
    def session_count(self) -> int:
        return len(self.sessions)

    @property
    def completed_session_count(self) -> int:
        return sum(1 for s in self.sessions if s.is_completed)


class PlanGenerationResult(BaseModel):
    """Weekly plan plus the copy shown alongside it"""

    plan: WeeklyPlan
    why_this_fits: List[str] = Field(default_factory=list, max_length=3)
    progression_promise: str = Field(default="")


class StarterReset(BaseModel):
    """First reset offered at the end of onboarding"""

    title: str
    exercises: List[ExerciseRecord] = Field(default_factory=list)

    @property
    def duration_seconds(self) -> int:
        return sum(e.duration_seconds for e in self.exercises)
