"""Exercise record model (shared)"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shared.models.enums import (
    Difficulty,
    Equipment,
    ExerciseContextTag,
    ExerciseIntentTag,
    ExerciseIssueTag,
    FocusArea,
)
from shared.utils.tags import parse_tag, parse_tags

DESK_EQUIPMENT = {Equipment.NONE, Equipment.CHAIR, Equipment.DESK}


class ExerciseRecord(BaseModel):
    """Catalog exercise

    Loaded once from the exercise catalog and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Exercise ID")
    name: str = Field(..., description="Display name")
    description: str = Field(default="", description="Short description")
    cue: str = Field(default="", description="Coaching cue")
    duration_seconds: int = Field(..., ge=1, le=600, description="Duration (seconds)")
    focus_areas: List[FocusArea] = Field(default_factory=list)
    difficulty: Difficulty = Field(default=Difficulty.EASY)
    contraindication: str = Field(default="", description="Safety note")
    issue_tags: List[ExerciseIssueTag] = Field(default_factory=list)
    intent_tags: List[ExerciseIntentTag] = Field(default_factory=list)
    context_tags: List[ExerciseContextTag] = Field(default_factory=list)
    equipment: Equipment = Field(default=Equipment.NONE)
    image_asset: Optional[str] = Field(default=None)
    animation_asset: Optional[str] = Field(default=None)

    @field_validator("focus_areas", mode="before")
    @classmethod
    def _parse_focus_areas(cls, v):
        return parse_tags(v, FocusArea, "exercise focus_area")

    @field_validator("issue_tags", mode="before")
    @classmethod
    def _parse_issue_tags(cls, v):
        return parse_tags(v, ExerciseIssueTag, "exercise issue_tag")

    @field_validator("intent_tags", mode="before")
    @classmethod
    def _parse_intent_tags(cls, v):
        return parse_tags(v, ExerciseIntentTag, "exercise intent_tag")

    @field_validator("context_tags", mode="before")
    @classmethod
    def _parse_context_tags(cls, v):
        return parse_tags(v, ExerciseContextTag, "exercise context_tag")

    @field_validator("difficulty", mode="before")
    @classmethod
    def _parse_difficulty(cls, v):
        return parse_tag(v, Difficulty, "difficulty") or Difficulty.EASY

    @field_validator("equipment", mode="before")
    @classmethod
    def _parse_equipment(cls, v):
        return parse_tag(v, Equipment, "equipment") or Equipment.NONE

    @property
    def is_desk_friendly(self) -> bool:
        """Can be done at or next to a desk"""
        desk_context = (
            ExerciseContextTag.DESK in self.context_tags
            or ExerciseContextTag.MICROBREAK in self.context_tags
        )
        return desk_context or self.equipment in DESK_EQUIPMENT
