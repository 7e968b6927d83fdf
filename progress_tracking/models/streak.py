"""Streak models"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class StreakState(BaseModel):
    """Persisted streak counters"""

    current_streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)
    last_session_date: Optional[date] = Field(default=None, description="Last active day")


class StreakUpdate(BaseModel):
    """Result of a streak update"""

    state: StreakState
    previous_streak: int = Field(default=0, ge=0)
    milestone: Optional[int] = Field(default=None, description="Milestone reached by this update")

    @property
    def changed(self) -> bool:
        return self.state.current_streak != self.previous_streak
