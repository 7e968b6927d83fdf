"""Day themes for the weekly plan"""

from enum import Enum
from typing import FrozenSet

from shared.models import ExerciseIntentTag


class DayTheme(str, Enum):
    """Presentational theme of a plan day"""

    FOUNDATION = "foundation"
    MOBILITY = "mobility"
    BUILD_STRENGTH = "build_strength"
    RECOVERY = "recovery"
    ACTIVE_RECOVERY = "active_recovery"

    @property
    def display_name(self) -> str:
        return {
            DayTheme.FOUNDATION: "Foundation",
            DayTheme.MOBILITY: "Mobility",
            DayTheme.BUILD_STRENGTH: "Build Strength",
            DayTheme.RECOVERY: "Recovery",
            DayTheme.ACTIVE_RECOVERY: "Active Recovery",
        }[self]

    @property
    def preferred_intents(self) -> FrozenSet[ExerciseIntentTag]:
        return _PREFERRED_INTENTS[self]


_PREFERRED_INTENTS = {
    DayTheme.FOUNDATION: frozenset(
        {ExerciseIntentTag.MOBILITY, ExerciseIntentTag.STRETCHING, ExerciseIntentTag.ACTIVATION}
    ),
    DayTheme.MOBILITY: frozenset({ExerciseIntentTag.MOBILITY, ExerciseIntentTag.DECOMPRESSION}),
    DayTheme.BUILD_STRENGTH: frozenset(
        {ExerciseIntentTag.STRENGTHENING, ExerciseIntentTag.ACTIVATION}
    ),
    DayTheme.RECOVERY: frozenset(
        {ExerciseIntentTag.STRETCHING, ExerciseIntentTag.BREATHING, ExerciseIntentTag.DECOMPRESSION}
    ),
    DayTheme.ACTIVE_RECOVERY: frozenset(
        {ExerciseIntentTag.MOBILITY, ExerciseIntentTag.BREATHING, ExerciseIntentTag.STRETCHING}
    ),
}
