"""Shared module - domain types used by plan generation, progress tracking and insights"""

from shared.models import ProfileSnapshot, ExerciseRecord

__all__ = [
    "ProfileSnapshot",
    "ExerciseRecord",
]
