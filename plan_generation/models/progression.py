"""Progression result models"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from plan_generation.models.plan import WeeklyPlan


class ProgressionResult(BaseModel):
    """Result of a progression check

    status:
    - applied: remaining days were regenerated at a higher level
    - already_applied: escalation already happened this week (no-op)
    - not_enough_sessions: threshold not reached yet (no-op)
    """

    status: Literal["applied", "already_applied", "not_enough_sessions"]
    plan: WeeklyPlan
    regenerated_days: List[int] = Field(default_factory=list, description="Day indices rebuilt")
    sessions_remaining: Optional[int] = Field(
        default=None, description="Sessions still needed to unlock progression"
    )
    message: str = Field(default="")

    @property
    def applied(self) -> bool:
        return self.status == "applied"
