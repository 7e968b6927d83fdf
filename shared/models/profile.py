"""Onboarding profile snapshot (shared)

Immutable summary of the onboarding answers. Every personalization
service takes this model as input.
"""

import hashlib
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shared.models.enums import (
    ExerciseFrequency,
    FocusArea,
    MotivationLevel,
    PainArea,
    PostureIssue,
    SedentaryHoursBucket,
    StiffnessTime,
    UserGoal,
    WorkType,
)
from shared.utils.tags import parse_tag, parse_tags


class ProfileSnapshot(BaseModel):
    """Onboarding profile snapshot

    Example:
    {
        "goal": "reduce_stiffness",
        "focus_areas": ["neck", "upper_back"],
        "pain_areas": ["neck"],
        "posture_issues": ["forward_head"],
        "stiffness_times": ["morning"],
        "work_type": "desk_office",
        "sedentary_hours_bucket": "more_than_8",
        "exercise_frequency": "rarely",
        "motivation_level": "ready",
        "daily_time_minutes": 5
    }
    """

    model_config = ConfigDict(frozen=True)

    goal: Optional[UserGoal] = Field(default=None, description="Primary goal")
    focus_areas: List[FocusArea] = Field(default_factory=list, description="Chosen focus areas")
    pain_areas: List[PainArea] = Field(default_factory=list, description="Reported pain areas")
    posture_issues: List[PostureIssue] = Field(
        default_factory=list, description="Reported posture issues"
    )
    stiffness_times: List[StiffnessTime] = Field(
        default_factory=list, description="Times of day the user feels stiffest"
    )
    work_type: Optional[WorkType] = Field(default=None, description="Work environment")
    sedentary_hours_bucket: Optional[SedentaryHoursBucket] = Field(
        default=None, description="Daily sitting time bucket"
    )
    exercise_frequency: Optional[ExerciseFrequency] = Field(
        default=None, description="Current exercise frequency"
    )
    motivation_level: Optional[MotivationLevel] = Field(
        default=None, description="Motivation level"
    )
    daily_time_minutes: int = Field(
        default=5, ge=0, le=120, description="Daily time budget (minutes)"
    )
    work_start_minutes: int = Field(
        default=540, ge=0, le=1440, description="Work start (minutes since midnight)"
    )
    work_end_minutes: int = Field(
        default=1020, ge=0, le=1440, description="Work end (minutes since midnight)"
    )

    @field_validator("goal", mode="before")
    @classmethod
    def _parse_goal(cls, v):
        return parse_tag(v, UserGoal, "goal")

    @field_validator("focus_areas", mode="before")
    @classmethod
    def _parse_focus_areas(cls, v):
        return parse_tags(v, FocusArea, "focus_area")

    @field_validator("pain_areas", mode="before")
    @classmethod
    def _parse_pain_areas(cls, v):
        return parse_tags(v, PainArea, "pain_area")

    @field_validator("posture_issues", mode="before")
    @classmethod
    def _parse_posture_issues(cls, v):
        return parse_tags(v, PostureIssue, "posture_issue")

    @field_validator("stiffness_times", mode="before")
    @classmethod
    def _parse_stiffness_times(cls, v):
        return parse_tags(v, StiffnessTime, "stiffness_time")

    @field_validator("work_type", mode="before")
    @classmethod
    def _parse_work_type(cls, v):
        return parse_tag(v, WorkType, "work_type")

    @field_validator("sedentary_hours_bucket", mode="before")
    @classmethod
    def _parse_sedentary(cls, v):
        return parse_tag(v, SedentaryHoursBucket, "sedentary_hours_bucket")

    @field_validator("exercise_frequency", mode="before")
    @classmethod
    def _parse_frequency(cls, v):
        return parse_tag(v, ExerciseFrequency, "exercise_frequency")

    @field_validator("motivation_level", mode="before")
    @classmethod
    def _parse_motivation(cls, v):
        return parse_tag(v, MotivationLevel, "motivation_level")

    @property
    def sessions_per_day(self) -> int:
        """Sessions per day from the daily time budget (<=4 min: 1, 5-8: 2, else 3)"""
        if self.daily_time_minutes <= 4:
            return 1
        elif self.daily_time_minutes <= 8:
            return 2
        return 3

    @property
    def work_hours(self) -> Optional[int]:
        """Whole work hours, None when the work window is missing or inverted"""
        if self.work_end_minutes <= self.work_start_minutes:
            return None
        return (self.work_end_minutes - self.work_start_minutes) // 60

    @property
    def has_all_day_stiffness(self) -> bool:
        return len(self.stiffness_times) == len(StiffnessTime)

    @property
    def plan_descriptor(self) -> str:
        """Short label, e.g. "Desk work • Morning stiffness • Neck + Upper Back" """
        parts = []

        if self.work_type in (WorkType.DESK_OFFICE, WorkType.DESK_HOME):
            parts.append("Desk work")
        elif self.work_type is WorkType.HYBRID:
            parts.append("Hybrid work")
        elif self.work_type is WorkType.STANDING:
            parts.append("Standing desk")
        elif self.work_type is WorkType.MIXED:
            parts.append("Active work")

        if len(self.stiffness_times) == 1:
            parts.append(f"{self.stiffness_times[0].display_name} stiffness")
        elif self.stiffness_times:
            parts.append("All-day stiffness")

        focus_names = [area.display_name for area in self.focus_areas[:2]]
        if focus_names:
            parts.append(" + ".join(focus_names))

        return " • ".join(parts)

    def stable_hash(self) -> int:
        """Content hash that does not change between interpreter runs"""
        digest = hashlib.sha256(self.model_dump_json().encode("utf-8")).hexdigest()
        return int(digest[:12], 16)
