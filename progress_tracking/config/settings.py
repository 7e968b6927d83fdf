"""Progress tracking settings

Environment variables (prefix PROGRESS_):
- PROGRESS_BASE_SCORE: score of a day with no activity
- PROGRESS_TREND_DEADBAND: points between half-week means treated as steady
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProgressSettings(BaseSettings):
    """Score, streak and weekly summary settings"""

    model_config = SettingsConfigDict(
        env_prefix="PROGRESS_",
        env_file=".env",
        extra="ignore",
    )

    # Daily score
    base_score: int = Field(default=45, description="Score with no activity")
    min_score: int = Field(default=30, description="Lower clamp of the daily score")
    max_score: int = Field(default=100, description="Upper clamp of the daily score")

    points_per_session: int = Field(default=8, description="Points per completed session")
    max_session_points: int = Field(default=25, description="Cap on session points")
    points_per_minute: int = Field(default=1, description="Points per active minute")
    max_minute_points: int = Field(default=10, description="Cap on minute points")
    points_per_streak_day: int = Field(default=2, description="Points per streak day")
    max_streak_points: int = Field(default=10, description="Cap on streak points")
    points_per_stiffness_match: int = Field(
        default=3, description="Points per session done at a stiffness time"
    )
    max_stiffness_points: int = Field(default=6, description="Cap on timing points")

    # Sedentary penalty, only applied on days without sessions
    sedentary_penalties: List[int] = Field(
        default=[0, 0, 3, 6, 10],
        description="Penalty per sedentary bucket (<2, 2-4, 4-6, 6-8, 8+)",
    )

    # Weekly summary
    trend_deadband: int = Field(default=5, description="Half-week mean difference for a trend")
    min_active_days_for_trend: int = Field(default=2, description="Active days needed for a trend")

    # Streak
    streak_milestones: List[int] = Field(
        default=[3, 7, 14, 30, 60, 100],
        description="Streak lengths reported to analytics",
    )


settings = ProgressSettings()
