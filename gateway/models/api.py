"""App-facing request/response models for Gateway endpoints.

Requests carry every piece of state an operation needs; the gateway keeps
nothing between calls.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from shared.models import FocusArea, ProfileSnapshot, StiffnessTime
from plan_generation.models import DayPlanItem
from progress_tracking.models import (
    DailyScoreEntry,
    ProgressSummary,
    ProgressTrend,
    ProgressWin,
    ScoreDisplayCategory,
)
from insight_engine.models import DailyInsight

PROFILE_EXAMPLE = {
    "goal": "reduce_stiffness",
    "focus_areas": ["neck", "upper_back"],
    "pain_areas": ["neck"],
    "posture_issues": ["forward_head"],
    "stiffness_times": ["morning"],
    "work_type": "desk_office",
    "sedentary_hours_bucket": "more_than_8",
    "exercise_frequency": "rarely",
    "motivation_level": "ready",
    "daily_time_minutes": 5,
}


class WeeklyPlanRequest(BaseModel):
    """Weekly plan request"""

    model_config = ConfigDict(
        json_schema_extra={"example": {"profile": PROFILE_EXAMPLE, "week_start": "2025-01-06"}}
    )

    profile: ProfileSnapshot
    week_start: Optional[date] = Field(
        default=None, description="Any day of the plan week (default: current week)"
    )


class DailyPlanRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={"example": {"profile": PROFILE_EXAMPLE, "plan_date": "2025-01-08"}}
    )

    profile: ProfileSnapshot
    plan_date: date


class DailyScoreRequest(BaseModel):
    """Daily score request"""

    entry_date: date
    sessions_completed: int = Field(default=0, ge=0)
    minutes_completed: int = Field(default=0, ge=0)
    focus_areas: List[FocusArea] = Field(default_factory=list)
    stiffness_times_triggered: List[StiffnessTime] = Field(default_factory=list)
    current_streak: int = Field(default=0, ge=0)
    profile: Optional[ProfileSnapshot] = None


class DailyScoreResponse(BaseModel):
    entry: DailyScoreEntry
    category: ScoreDisplayCategory
    breakdown: str = Field(..., description="e.g. 'Base: 45 • Sessions: +8'")
    projected_score: int = Field(..., description="Score after one more session")
    message: str


class ProgressSummaryRequest(BaseModel):
    entries: List[DailyScoreEntry] = Field(default_factory=list)
    today: date
    streak_days: Optional[int] = Field(
        default=None, ge=0, description="Known streak (default: derived from entries)"
    )


class ProgressSummaryResponse(BaseModel):
    summary: ProgressSummary
    trend: ProgressTrend
    has_enough_data: bool
    wins: List[ProgressWin] = Field(default_factory=list)


class DailyInsightsRequest(BaseModel):
    on_date: date
    profile: Optional[ProfileSnapshot] = None
    progress_summary: Optional[ProgressSummary] = None
    todays_plan: Optional[DayPlanItem] = None


class DailyInsightsResponse(BaseModel):
    insights: List[DailyInsight]


class AnalysisRequest(BaseModel):
    profile: ProfileSnapshot
    report_id: Optional[str] = None
    created_at: Optional[datetime] = None
