"""Streak engine

Rules for update_streak (one call per completed session):
1. no prior session day: streak = 1
2. same day: unchanged
3. next day: streak + 1, longest streak updated
4. gap of more than one day: streak restarts at 1

check_and_reset runs when the app comes to the foreground and zeroes
a stale streak, so a returning user never sees an old count.
"""

import logging
from datetime import date, timedelta
from typing import Iterable, Optional

from shared.utils.analytics import AnalyticsSink, LoggingAnalyticsSink
from progress_tracking.config import settings
from progress_tracking.models import DailyScoreEntry, StreakState, StreakUpdate

logger = logging.getLogger(__name__)


class StreakEngine:
    """Consecutive active day tracking"""

    def __init__(
        self,
        analytics: Optional[AnalyticsSink] = None,
        milestones: Optional[Iterable[int]] = None,
    ):
        """
        Args:
            analytics: sink for milestone events
            milestones: streak lengths reported once when reached
        """
        self.analytics = analytics or LoggingAnalyticsSink()
        self.milestones = frozenset(milestones if milestones is not None else settings.streak_milestones)

    def update_streak(self, state: StreakState, today: date) -> StreakUpdate:
        """
        Record activity on `today`

        Args:
            state: current streak state (not modified)
            today: day of the completed session

        Returns:
            StreakUpdate with the new state and any milestone reached
        """
        previous = state.current_streak

        if state.last_session_date is None:
            current = 1
        else:
            gap = (today - state.last_session_date).days
            if gap == 0:
                current = previous
            elif gap == 1:
                current = previous + 1
            elif gap > 1:
                current = 1
            else:
                logger.warning(
                    f"Session date {today} is before last session {state.last_session_date}, "
                    f"streak unchanged"
                )
                return StreakUpdate(state=state, previous_streak=previous)

        new_state = StreakState(
            current_streak=current,
            longest_streak=max(state.longest_streak, current),
            last_session_date=today,
        )

        milestone = None
        if current != previous and current in self.milestones:
            milestone = current
            self.analytics.track("streak_milestone", {"days": current})
            logger.info(f"Streak milestone reached: {current} days")

        return StreakUpdate(state=new_state, previous_streak=previous, milestone=milestone)

    def check_and_reset(self, state: StreakState, today: date) -> StreakUpdate:
        """Zero the streak when more than one day passed without activity"""
        previous = state.current_streak
        if state.last_session_date is None or previous == 0:
            return StreakUpdate(state=state, previous_streak=previous)

        gap = (today - state.last_session_date).days
        if gap <= 1:
            return StreakUpdate(state=state, previous_streak=previous)

        logger.info(f"Streak of {previous} days reset after {gap} days without activity")
        return StreakUpdate(
            state=state.model_copy(update={"current_streak": 0}),
            previous_streak=previous,
        )

    @staticmethod
    def streak_from_entries(entries: Iterable[DailyScoreEntry], today: date) -> int:
        """
        Consecutive active days ending today

        Counting starts from yesterday when today has no activity yet,
        so an open day does not break the streak.
        """
        active_days = {entry.entry_date for entry in entries if entry.has_activity}
        if not active_days:
            return 0

        check = today if today in active_days else today - timedelta(days=1)
        streak = 0
        while check in active_days:
            streak += 1
            check = check - timedelta(days=1)
        return streak
