"""Plan generation settings

Environment variables (prefix PLAN_):
- PLAN_CATALOG_PATH: exercise catalog JSON path
- PLAN_PROGRESSION_SESSION_THRESHOLD: completed sessions that unlock progression
"""

from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlanGenerationSettings(BaseSettings):
    """Plan generation settings"""

    model_config = SettingsConfigDict(
        env_prefix="PLAN_",
        env_file=".env",
        extra="ignore",
    )

    # Catalog
    catalog_path: Path = Field(
        default=Path(__file__).parent.parent / "data" / "exercises.json",
        description="Exercise catalog JSON",
    )

    # Selection weights
    context_match_bonus: int = Field(default=3, description="Session slot context match")
    intent_match_points: int = Field(default=2, description="Points per theme intent match")
    exact_difficulty_bonus: int = Field(default=2, description="Difficulty equals target")
    easier_difficulty_bonus: int = Field(default=1, description="Difficulty below target")

    # Session fill
    max_focus_overlap: int = Field(
        default=2, description="Focus areas an exercise may share with the session so far"
    )
    min_exercises_before_overlap_check: int = Field(
        default=2, description="Exercises admitted before the overlap rule applies"
    )

    # Desk-friendly filtering
    restricted_work_types: List[str] = Field(
        default=["desk_office", "hybrid"],
        description="Work types limited to desk-friendly exercises",
    )

    # Progression
    progression_session_threshold: int = Field(
        default=5, description="Completed sessions per week that unlock progression"
    )
    progression_extra_seconds: int = Field(
        default=30, description="Extra per-session target after progression"
    )

    # Starter reset
    starter_reset_seconds: int = Field(default=60, description="Starter reset target")


settings = PlanGenerationSettings()
