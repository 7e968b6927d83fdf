"""Shared models"""

from .enums import (
    FocusArea,
    UserGoal,
    PainArea,
    PostureIssue,
    ExerciseIssueTag,
    StiffnessTime,
    WorkType,
    SedentaryHoursBucket,
    ExerciseFrequency,
    MotivationLevel,
    Difficulty,
    ExerciseIntentTag,
    ExerciseContextTag,
    Equipment,
    SessionType,
)
from .profile import ProfileSnapshot
from .exercise import ExerciseRecord

__all__ = [
    "FocusArea",
    "UserGoal",
    "PainArea",
    "PostureIssue",
    "ExerciseIssueTag",
    "StiffnessTime",
    "WorkType",
    "SedentaryHoursBucket",
    "ExerciseFrequency",
    "MotivationLevel",
    "Difficulty",
    "ExerciseIntentTag",
    "ExerciseContextTag",
    "Equipment",
    "SessionType",
    "ProfileSnapshot",
    "ExerciseRecord",
]
