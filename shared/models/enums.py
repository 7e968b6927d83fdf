"""Onboarding and exercise tag enums (shared)

Raw values are the strings stored by the app and in the exercise catalog.
"""

from enum import Enum
from typing import List


class FocusArea(str, Enum):
    """Body area a user wants to work on"""

    NECK = "neck"
    SHOULDERS = "shoulders"
    UPPER_BACK = "upper_back"
    LOWER_BACK = "lower_back"
    WRISTS = "wrists"
    HIPS = "hips"

    @property
    def display_name(self) -> str:
        return _FOCUS_AREA_NAMES[self]


_FOCUS_AREA_NAMES = {
    FocusArea.NECK: "Neck",
    FocusArea.SHOULDERS: "Shoulders",
    FocusArea.UPPER_BACK: "Upper Back",
    FocusArea.LOWER_BACK: "Lower Back",
    FocusArea.WRISTS: "Wrists",
    FocusArea.HIPS: "Hips",
}


class UserGoal(str, Enum):
    """Primary goal picked during onboarding"""

    MOVE_MORE = "move_more"
    REDUCE_STIFFNESS = "reduce_stiffness"
    BUILD_HABIT = "build_habit"
    IMPROVE_POSTURE = "improve_posture"

    @property
    def display_name(self) -> str:
        return {
            UserGoal.MOVE_MORE: "Move More",
            UserGoal.REDUCE_STIFFNESS: "Reduce Stiffness",
            UserGoal.BUILD_HABIT: "Build a Habit",
            UserGoal.IMPROVE_POSTURE: "Improve Posture",
        }[self]


class PainArea(str, Enum):
    """Area where the user reports discomfort"""

    NECK = "neck"
    SHOULDERS = "shoulders"
    UPPER_BACK = "upper_back"
    LOWER_BACK = "lower_back"
    WRISTS = "wrists"
    HIPS = "hips"
    HEADACHES = "headaches"

    @property
    def display_name(self) -> str:
        if self is PainArea.HEADACHES:
            return "Headaches"
        return FocusArea(self.value).display_name

    @property
    def related_focus_areas(self) -> List[FocusArea]:
        """Focus areas whose exercises address this pain area"""
        if self is PainArea.HEADACHES:
            return [FocusArea.NECK, FocusArea.SHOULDERS]
        return [FocusArea(self.value)]


class ExerciseIssueTag(str, Enum):
    """Posture pattern an exercise is tagged to address"""

    FORWARD_HEAD = "forward_head"
    TEXT_NECK = "text_neck"
    ROUNDED_SHOULDERS = "rounded_shoulders"
    THORACIC_STIFFNESS = "thoracic_stiffness"
    SLOUCHING = "slouching"
    HIP_IMBALANCE = "hip_imbalance"
    ANTERIOR_PELVIC_TILT = "anterior_pelvic_tilt"
    TIGHT_HIP_FLEXORS = "tight_hip_flexors"
    WRIST_STRAIN = "wrist_strain"


class PostureIssue(str, Enum):
    """Self-reported posture issue"""

    FORWARD_HEAD = "forward_head"
    TEXT_NECK = "text_neck"
    ROUNDED_SHOULDERS = "rounded_shoulders"
    SLOUCHING = "slouching"
    UNEVEN_HIPS = "uneven_hips"
    ANTERIOR_PELVIC_TILT = "anterior_pelvic_tilt"

    @property
    def display_name(self) -> str:
        return {
            PostureIssue.FORWARD_HEAD: "Forward Head",
            PostureIssue.TEXT_NECK: "Text Neck",
            PostureIssue.ROUNDED_SHOULDERS: "Rounded Shoulders",
            PostureIssue.SLOUCHING: "Slouching",
            PostureIssue.UNEVEN_HIPS: "Uneven Hips",
            PostureIssue.ANTERIOR_PELVIC_TILT: "Anterior Pelvic Tilt",
        }[self]

    @property
    def related_focus_areas(self) -> List[FocusArea]:
        return _POSTURE_FOCUS_AREAS[self]

    @property
    def exercise_issue_tags(self) -> List[ExerciseIssueTag]:
        return _POSTURE_ISSUE_TAGS[self]


_POSTURE_FOCUS_AREAS = {
    PostureIssue.FORWARD_HEAD: [FocusArea.NECK],
    PostureIssue.TEXT_NECK: [FocusArea.NECK, FocusArea.UPPER_BACK],
    PostureIssue.ROUNDED_SHOULDERS: [FocusArea.SHOULDERS, FocusArea.UPPER_BACK],
    PostureIssue.SLOUCHING: [FocusArea.UPPER_BACK, FocusArea.LOWER_BACK],
    PostureIssue.UNEVEN_HIPS: [FocusArea.HIPS, FocusArea.LOWER_BACK],
    PostureIssue.ANTERIOR_PELVIC_TILT: [FocusArea.HIPS, FocusArea.LOWER_BACK],
}

_POSTURE_ISSUE_TAGS = {
    PostureIssue.FORWARD_HEAD: [ExerciseIssueTag.FORWARD_HEAD],
    PostureIssue.TEXT_NECK: [ExerciseIssueTag.TEXT_NECK, ExerciseIssueTag.FORWARD_HEAD],
    PostureIssue.ROUNDED_SHOULDERS: [
        ExerciseIssueTag.ROUNDED_SHOULDERS,
        ExerciseIssueTag.THORACIC_STIFFNESS,
    ],
    PostureIssue.SLOUCHING: [ExerciseIssueTag.SLOUCHING, ExerciseIssueTag.THORACIC_STIFFNESS],
    PostureIssue.UNEVEN_HIPS: [ExerciseIssueTag.HIP_IMBALANCE],
    PostureIssue.ANTERIOR_PELVIC_TILT: [
        ExerciseIssueTag.ANTERIOR_PELVIC_TILT,
        ExerciseIssueTag.TIGHT_HIP_FLEXORS,
    ],
}


class SessionType(str, Enum):
    """Daily session slot"""

    MORNING = "morning"
    MIDDAY = "midday"
    AFTERNOON = "afternoon"

    @property
    def default_title(self) -> str:
        return {
            SessionType.MORNING: "Morning Reset",
            SessionType.MIDDAY: "Midday Refresh",
            SessionType.AFTERNOON: "Afternoon Stretch",
        }[self]

    @property
    def context_tag(self) -> "ExerciseContextTag":
        # afternoon sessions use exercises tagged for the evening
        return {
            SessionType.MORNING: ExerciseContextTag.MORNING,
            SessionType.MIDDAY: ExerciseContextTag.MIDDAY,
            SessionType.AFTERNOON: ExerciseContextTag.EVENING,
        }[self]

    @property
    def stiffness_time(self) -> "StiffnessTime":
        return StiffnessTime(self.context_tag.value)


class StiffnessTime(str, Enum):
    """Time of day the user feels stiffest"""

    MORNING = "morning"
    MIDDAY = "midday"
    EVENING = "evening"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def preferred_first_session(self) -> SessionType:
        return {
            StiffnessTime.MORNING: SessionType.MORNING,
            StiffnessTime.MIDDAY: SessionType.MIDDAY,
            StiffnessTime.EVENING: SessionType.AFTERNOON,
        }[self]


class WorkType(str, Enum):
    """Working environment"""

    DESK_OFFICE = "desk_office"
    DESK_HOME = "desk_home"
    HYBRID = "hybrid"
    STANDING = "standing"
    MIXED = "mixed"

    @property
    def display_name(self) -> str:
        return {
            WorkType.DESK_OFFICE: "Office desk",
            WorkType.DESK_HOME: "Home desk",
            WorkType.HYBRID: "Hybrid",
            WorkType.STANDING: "Standing desk",
            WorkType.MIXED: "Mixed",
        }[self]


class SedentaryHoursBucket(str, Enum):
    """Daily sitting time"""

    LESS_THAN_2 = "less_than_2"
    TWO_TO_FOUR = "two_to_four"
    FOUR_TO_SIX = "four_to_six"
    SIX_TO_EIGHT = "six_to_eight"
    MORE_THAN_8 = "more_than_8"

    @property
    def display_name(self) -> str:
        return {
            SedentaryHoursBucket.LESS_THAN_2: "under 2 hours",
            SedentaryHoursBucket.TWO_TO_FOUR: "2-4 hours",
            SedentaryHoursBucket.FOUR_TO_SIX: "4-6 hours",
            SedentaryHoursBucket.SIX_TO_EIGHT: "6-8 hours",
            SedentaryHoursBucket.MORE_THAN_8: "8+ hours",
        }[self]

    @property
    def is_high_risk(self) -> bool:
        return self in (SedentaryHoursBucket.SIX_TO_EIGHT, SedentaryHoursBucket.MORE_THAN_8)


class Difficulty(str, Enum):
    """Exercise difficulty"""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def sort_order(self) -> int:
        return _DIFFICULTY_ORDER.index(self)

    def harder(self) -> "Difficulty":
        """One level up, capped at hard"""
        return _DIFFICULTY_ORDER[min(self.sort_order + 1, len(_DIFFICULTY_ORDER) - 1)]


_DIFFICULTY_ORDER = [Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD]


class ExerciseFrequency(str, Enum):
    """How often the user exercises today"""

    RARELY = "rarely"
    ONCE_WEEK = "once_week"
    TWO_THREE_WEEK = "two_three_week"
    FOUR_PLUS_WEEK = "four_plus_week"
    DAILY = "daily"

    @property
    def suggested_difficulty(self) -> Difficulty:
        return {
            ExerciseFrequency.RARELY: Difficulty.EASY,
            ExerciseFrequency.ONCE_WEEK: Difficulty.EASY,
            ExerciseFrequency.TWO_THREE_WEEK: Difficulty.MEDIUM,
            ExerciseFrequency.FOUR_PLUS_WEEK: Difficulty.MEDIUM,
            ExerciseFrequency.DAILY: Difficulty.HARD,
        }[self]


class MotivationLevel(str, Enum):
    CURIOUS = "curious"
    READY = "ready"
    VERY_MOTIVATED = "very_motivated"


class ExerciseIntentTag(str, Enum):
    MOBILITY = "mobility"
    STRETCHING = "stretching"
    ACTIVATION = "activation"
    STRENGTHENING = "strengthening"
    DECOMPRESSION = "decompression"
    BREATHING = "breathing"


class ExerciseContextTag(str, Enum):
    DESK = "desk"
    MORNING = "morning"
    MIDDAY = "midday"
    EVENING = "evening"
    MICROBREAK = "microbreak"


class Equipment(str, Enum):
    NONE = "none"
    CHAIR = "chair"
    WALL = "wall"
    DOORWAY = "doorway"
    DESK = "desk"
