"""Insight engine settings

Environment variables (prefix INSIGHT_):
- INSIGHT_TERTIARY_STREAK_THRESHOLD: streak that unlocks a third daily insight
- INSIGHT_TERTIARY_SESSIONS_THRESHOLD: weekly sessions that unlock a third daily insight
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class InsightSettings(BaseSettings):
    """Insight and analysis settings"""

    model_config = SettingsConfigDict(
        env_prefix="INSIGHT_",
        env_file=".env",
        extra="ignore",
    )

    # Daily insights
    max_insights: int = Field(default=3, description="Maximum daily insights")
    tertiary_streak_threshold: int = Field(
        default=3, description="Streak days that unlock the third insight"
    )
    tertiary_sessions_threshold: int = Field(
        default=5, description="Weekly sessions that unlock the third insight"
    )
    seed_modulus: int = Field(default=1000, description="Daily rotation seed range")

    # Analysis report
    min_cards: int = Field(default=3, description="Minimum analysis cards")
    max_cards: int = Field(default=6, description="Maximum analysis cards")
    max_risk_factors: int = Field(default=8, description="Maximum risk factor lines")
    max_priorities: int = Field(default=4, description="Maximum recommended priorities")
    max_weekly_actions: int = Field(default=4, description="Maximum weekly actions")


settings = InsightSettings()
