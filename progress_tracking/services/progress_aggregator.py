"""Progress aggregation

Read-side roll-up of daily score entries into the weekly summary, and
merging of a completed session into that day's entry.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from langsmith import traceable

from shared.models import FocusArea, ProfileSnapshot
from progress_tracking.models import DailyScoreEntry, ProgressSummary
from progress_tracking.services.score_engine import ScoreEngine
from progress_tracking.services.streak_engine import StreakEngine
from progress_tracking.services.win_generator import WinGenerator

logger = logging.getLogger(__name__)

WINDOW_DAYS = 7


def _by_date(entries: Iterable[DailyScoreEntry]) -> Dict[date, DailyScoreEntry]:
    """Index entries by day, the later entry wins on duplicates"""
    indexed: Dict[date, DailyScoreEntry] = {}
    for entry in entries:
        indexed[entry.entry_date] = entry
    return indexed


class ProgressAggregator:
    """Weekly summary builder"""

    def __init__(
        self,
        score_engine: Optional[ScoreEngine] = None,
        win_generator: Optional[WinGenerator] = None,
    ):
        self.score_engine = score_engine or ScoreEngine()
        self.win_generator = win_generator or WinGenerator()

    @staticmethod
    def last_7_days(entries: Iterable[DailyScoreEntry], today: date) -> List[DailyScoreEntry]:
        """The 7 days ending today, oldest first, gaps filled with empty days"""
        indexed = _by_date(entries)
        days = []
        for offset in range(WINDOW_DAYS - 1, -1, -1):
            day = today - timedelta(days=offset)
            days.append(indexed.get(day) or DailyScoreEntry.placeholder(day))
        return days

    @traceable(name="progress_summary")
    def summarize(
        self,
        entries: Sequence[DailyScoreEntry],
        today: date,
        streak_days: Optional[int] = None,
    ) -> ProgressSummary:
        """
        Weekly summary

        The average spans all 7 calendar days. A day with no stored entry
        counts as 0, while a stored day without sessions keeps the score it
        was given (the base score, less any sedentary penalty). Callers that
        store an entry for every day therefore see higher averages for the
        same inactivity.

        Args:
            entries: stored daily entries (any order, any range)
            today: reference day
            streak_days: current streak (default: derived from entries)

        Returns:
            ProgressSummary (valid for a new user with no entries)
        """
        window = self.last_7_days(entries, today)

        if streak_days is None:
            streak_days = StreakEngine.streak_from_entries(entries, today)

        summary = ProgressSummary(
            week_start_date=today - timedelta(days=today.weekday()),
            weekly_average_score=self.score_engine.weekly_average(window, WINDOW_DAYS),
            weekly_sessions_completed=self.score_engine.total_sessions(window),
            weekly_minutes_completed=self.score_engine.total_minutes(window),
            streak_days=streak_days,
            last_7_days=window,
        )

        wins = []
        if summary.has_enough_data:
            wins = self.win_generator.generate(
                streak_days=summary.streak_days,
                weekly_sessions_completed=summary.weekly_sessions_completed,
                weekly_average_score=summary.weekly_average_score,
                trend=summary.trend,
                focus_areas_covered=self.score_engine.collect_focus_areas(window),
            )

        logger.debug(
            f"Summary {today}: avg={summary.weekly_average_score}, "
            f"sessions={summary.weekly_sessions_completed}, streak={streak_days}, "
            f"trend={summary.trend.value}, wins={len(wins)}"
        )
        return summary.model_copy(update={"wins": wins})

    def record_session(
        self,
        entries: Sequence[DailyScoreEntry],
        completed_at: datetime,
        duration_seconds: int,
        focus_areas: Sequence[FocusArea],
        profile: Optional[ProfileSnapshot],
        current_streak: int,
    ) -> List[DailyScoreEntry]:
        """
        Merge a completed session into that day's entry

        Args:
            entries: stored daily entries (not modified)
            completed_at: session completion time
            duration_seconds: session length
            focus_areas: areas the session covered
            profile: profile for stiffness matching and sedentary penalty
            current_streak: streak after this session

        Returns:
            entries sorted by date with the day's entry replaced
        """
        if duration_seconds < 0:
            raise ValueError(f"duration_seconds must be >= 0, got {duration_seconds}")

        day = completed_at.date()
        indexed = _by_date(entries)
        current = indexed.get(day)

        merged_areas = list(current.focus_areas) if current else []
        for area in focus_areas:
            if area not in merged_areas:
                merged_areas.append(area)

        triggered = list(current.stiffness_times_triggered) if current else []
        session_time = self.score_engine.session_time_category(completed_at)
        if session_time not in triggered:
            triggered.append(session_time)

        indexed[day] = self.score_engine.calculate_daily_score(
            entry_date=day,
            sessions_completed=(current.sessions_completed if current else 0) + 1,
            minutes_completed=(current.minutes_completed if current else 0) + duration_seconds // 60,
            focus_areas=merged_areas,
            stiffness_times_triggered=triggered,
            profile=profile,
            current_streak=current_streak,
            updated_at=completed_at,
        )

        return [indexed[d] for d in sorted(indexed)]
