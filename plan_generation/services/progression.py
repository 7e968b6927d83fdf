"""Weekly plan progression service

Cases:
1. mark_session_completed: flip one session to completed (idempotent)
2. apply_progression: once enough sessions are completed this week,
   rebuild the days after today at a higher level, once per week
"""

import logging
from datetime import date, datetime
from typing import Optional

from langsmith import traceable

from plan_generation.config import settings
from plan_generation.models import WEEK_LENGTH, ProgressionResult, WeeklyPlan
from plan_generation.services.plan_generator import PlanGenerator

logger = logging.getLogger(__name__)


class ProgressionService:
    """Session completion and mid-week progression"""

    def __init__(
        self,
        generator: Optional[PlanGenerator] = None,
        session_threshold: int = None,
        extra_seconds: int = None,
    ):
        """
        Args:
            generator: plan generator used to rebuild remaining days
            session_threshold: completed sessions that unlock progression
            extra_seconds: extra per-session target after progression
        """
        self.generator = generator or PlanGenerator()
        self.session_threshold = (
            session_threshold if session_threshold is not None
            else settings.progression_session_threshold
        )
        self.extra_seconds = (
            extra_seconds if extra_seconds is not None else settings.progression_extra_seconds
        )

    def mark_session_completed(
        self,
        plan: WeeklyPlan,
        day_index: int,
        session_id: str,
        completed_at: datetime,
    ) -> WeeklyPlan:
        """
        Mark a session completed

        Args:
            plan: current weekly plan (not modified)
            day_index: 0-6
            session_id: session to complete
            completed_at: completion timestamp

        Returns:
            updated copy of the plan (unchanged if already completed)
        """
        day = plan.plan(day_index)
        if day is None:
            raise ValueError(f"day_index must be 0-{WEEK_LENGTH - 1}, got {day_index}")
        session = day.session(session_id)
        if session is None:
            raise ValueError(f"Session '{session_id}' not found on day {day_index}")

        if session.is_completed:
            logger.debug(f"Session {session_id} already completed")
            return plan

        updated = plan.model_copy(deep=True)
        target = updated.daily_plans[day_index].session(session_id)
        target.is_completed = True
        target.completed_at = completed_at
        updated.completed_sessions_this_week += 1

        logger.info(
            f"Session {session_id} completed "
            f"({updated.completed_sessions_this_week} this week)"
        )
        return updated

    @traceable(name="plan_progression")
    def apply_progression(self, plan: WeeklyPlan, today: date) -> ProgressionResult:
        """
        Escalate the days after today

        Rebuilds only days strictly after today's index that have no
        completed sessions, with the target difficulty one level higher
        and a longer per-session target. History is never rewritten.

        Args:
            plan: current weekly plan (not modified)
            today: reference date

        Returns:
            ProgressionResult
        """
        if plan.progression_applied:
            return ProgressionResult(
                status="already_applied",
                plan=plan,
                message="Progression already applied this week.",
            )

        if not plan.should_apply_progression(self.session_threshold):
            remaining = self.session_threshold - plan.completed_sessions_this_week
            return ProgressionResult(
                status="not_enough_sessions",
                plan=plan,
                sessions_remaining=remaining,
                message=f"{remaining} more session{'' if remaining == 1 else 's'} to unlock the next level.",
            )

        profile = plan.profile_snapshot
        new_version = plan.version + 1
        target_difficulty = self.generator.target_difficulty(profile).harder()
        first_index = max(0, (today - plan.week_start_date).days + 1)

        daily_plans = list(plan.daily_plans)
        regenerated = []
        for day_index in range(first_index, WEEK_LENGTH):
            if daily_plans[day_index].completed_session_count > 0:
                continue
            previous = daily_plans[day_index - 1] if day_index > 0 else None
            previous_ids = (
                [i for s in previous.sessions for i in s.exercise_ids] if previous else []
            )
            daily_plans[day_index] = self.generator.generate_day(
                profile,
                plan.week_start_date,
                day_index,
                previous_ids=previous_ids,
                target_difficulty=target_difficulty,
                extra_seconds=self.extra_seconds,
                version=new_version,
            )
            regenerated.append(day_index)

        updated = plan.model_copy(
            update={
                "daily_plans": daily_plans,
                "version": new_version,
                "progression_applied": True,
                "catalog_version": self.generator.catalog.version,
            }
        )

        logger.info(
            f"Progression applied to plan {plan.id} (v{new_version}): "
            f"days={regenerated}, difficulty={target_difficulty.value}"
        )

        return ProgressionResult(
            status="applied",
            plan=updated,
            regenerated_days=regenerated,
            message="Nice work! The rest of your week steps up a level.",
        )
