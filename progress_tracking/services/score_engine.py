"""Daily score engine

Deterministic 0-100 score for a day of activity.

Scoring rules:
- everyone starts from a base score, a day with no activity stays
  in the "starting" band
- sessions, active minutes, streak and stiffness timing add capped bonuses
- a sedentary penalty applies only on days with no sessions
- the result is clamped into [min_score, max_score]

Every term is non-decreasing in its input, so more activity never
lowers the score.
"""

import logging
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence

from langsmith import traceable

from shared.models import FocusArea, ProfileSnapshot, SedentaryHoursBucket, StiffnessTime
from progress_tracking.config import ProgressSettings, settings
from progress_tracking.models import DailyScoreEntry, ProgressTrend

logger = logging.getLogger(__name__)

_SEDENTARY_ORDER = list(SedentaryHoursBucket)


class ScoreEngine:
    """Daily score calculation"""

    def __init__(self, config: Optional[ProgressSettings] = None):
        """
        Args:
            config: score constants (default: module settings)
        """
        self.config = config or settings

    # === Score terms ===

    def session_points(self, sessions_completed: int) -> int:
        return min(max(0, sessions_completed) * self.config.points_per_session, self.config.max_session_points)

    def minute_points(self, minutes_completed: int) -> int:
        return min(max(0, minutes_completed) * self.config.points_per_minute, self.config.max_minute_points)

    def streak_points(self, streak_days: int) -> int:
        return min(max(0, streak_days) * self.config.points_per_streak_day, self.config.max_streak_points)

    def stiffness_points(self, stiffness_times_matched: int) -> int:
        return min(
            max(0, stiffness_times_matched) * self.config.points_per_stiffness_match,
            self.config.max_stiffness_points,
        )

    def sedentary_penalty(self, bucket: Optional[SedentaryHoursBucket]) -> int:
        if bucket is None:
            return 0
        penalties = self.config.sedentary_penalties
        index = _SEDENTARY_ORDER.index(bucket)
        return penalties[index] if index < len(penalties) else 0

    @staticmethod
    def variety_points(focus_areas: Iterable) -> int:
        count = len(set(focus_areas))
        if count >= 3:
            return 2
        elif count >= 2:
            return 1
        return 0

    def clamp(self, score: int) -> int:
        return max(self.config.min_score, min(self.config.max_score, score))

    # === Score calculation ===

    def score(
        self,
        sessions_completed: int,
        minutes_completed: int,
        streak_days: int,
        *,
        stiffness_times_matched: int = 0,
        sedentary_bucket: Optional[SedentaryHoursBucket] = None,
        focus_areas: Sequence[FocusArea] = (),
    ) -> int:
        """
        Score for a day

        Args:
            sessions_completed: sessions done today
            minutes_completed: active minutes today
            streak_days: current streak
            stiffness_times_matched: sessions done at the user's stiffness times
            sedentary_bucket: daily sitting time (penalty on inactive days)
            focus_areas: focus areas covered today

        Returns:
            score between min_score and max_score
        """
        total = self.config.base_score
        total += self.session_points(sessions_completed)
        total += self.minute_points(minutes_completed)
        total += self.streak_points(streak_days)
        total += self.stiffness_points(stiffness_times_matched)

        if sessions_completed <= 0:
            total -= self.sedentary_penalty(sedentary_bucket)

        total += self.variety_points(focus_areas)

        return self.clamp(total)

    @traceable(name="daily_score_calculation")
    def calculate_daily_score(
        self,
        entry_date: date,
        sessions_completed: int,
        minutes_completed: int,
        focus_areas: Sequence[FocusArea],
        stiffness_times_triggered: Sequence[StiffnessTime],
        profile: Optional[ProfileSnapshot],
        current_streak: int,
        updated_at: Optional[datetime] = None,
    ) -> DailyScoreEntry:
        """Score a day with full profile context"""
        user_times = set(profile.stiffness_times) if profile else set()
        matched = [time for time in stiffness_times_triggered if time in user_times]

        score = self.score(
            sessions_completed,
            minutes_completed,
            current_streak,
            stiffness_times_matched=len(matched),
            sedentary_bucket=profile.sedentary_hours_bucket if profile else None,
            focus_areas=focus_areas,
        )

        logger.debug(
            f"Daily score {entry_date}: {score} "
            f"(sessions={sessions_completed}, minutes={minutes_completed}, "
            f"streak={current_streak}, matched={len(matched)})"
        )

        return DailyScoreEntry(
            entry_date=entry_date,
            score=score,
            minutes_completed=minutes_completed,
            sessions_completed=sessions_completed,
            focus_areas=list(focus_areas),
            stiffness_times_triggered=list(stiffness_times_triggered),
            updated_at=updated_at,
        )

    @staticmethod
    def session_time_category(at: datetime) -> StiffnessTime:
        """Stiffness time a session timestamp falls into"""
        if 5 <= at.hour < 12:
            return StiffnessTime.MORNING
        elif 12 <= at.hour < 17:
            return StiffnessTime.MIDDAY
        return StiffnessTime.EVENING

    def explain_score(
        self,
        sessions_completed: int,
        minutes_completed: int,
        streak_days: int,
        stiffness_times_matched: int = 0,
    ) -> str:
        """e.g. "Base: 45 • Sessions: +16 • Minutes: +6 • Streak: +4" """
        parts = [f"Base: {self.config.base_score}"]

        if sessions_completed > 0:
            parts.append(f"Sessions: +{self.session_points(sessions_completed)}")
        if minutes_completed > 0:
            parts.append(f"Minutes: +{self.minute_points(minutes_completed)}")
        if streak_days > 0:
            parts.append(f"Streak: +{self.streak_points(streak_days)}")
        if stiffness_times_matched > 0:
            parts.append(f"Timing: +{self.stiffness_points(stiffness_times_matched)}")

        return " • ".join(parts)

    # === Projection ===

    def projected_score_after_session(
        self,
        current_score: int,
        current_sessions: int,
        streak_days: int = 0,
    ) -> int:
        """Score after one more session (session points only)"""
        delta = self.session_points(current_sessions + 1) - self.session_points(current_sessions)
        return min(current_score + delta, self.config.max_score)

    @staticmethod
    def motivational_message(projected_gain: int) -> str:
        if projected_gain >= 8:
            return "One session could boost your score significantly!"
        elif projected_gain > 0:
            return "Keep building. Small resets add up."
        return "You're already at a great score for today!"

    @staticmethod
    def day_over_day_trend(today_score: int, yesterday_score: Optional[int]) -> ProgressTrend:
        """Direction from yesterday's score to today's"""
        if yesterday_score is None or today_score == yesterday_score:
            return ProgressTrend.NEUTRAL
        if today_score > yesterday_score:
            return ProgressTrend.IMPROVING
        return ProgressTrend.DECLINING

    # === Weekly helpers ===

    @staticmethod
    def weekly_average(entries: Sequence[DailyScoreEntry], days: int = 7) -> int:
        """Average over a fixed number of calendar days (missing days count as 0)"""
        if days <= 0:
            return 0
        return sum(entry.score for entry in entries) // days

    @staticmethod
    def total_sessions(entries: Sequence[DailyScoreEntry]) -> int:
        return sum(entry.sessions_completed for entry in entries)

    @staticmethod
    def total_minutes(entries: Sequence[DailyScoreEntry]) -> int:
        return sum(entry.minutes_completed for entry in entries)

    @staticmethod
    def collect_focus_areas(entries: Sequence[DailyScoreEntry]) -> List[FocusArea]:
        """Distinct focus areas, first-seen order"""
        areas: List[FocusArea] = []
        for entry in entries:
            for area in entry.focus_areas:
                if area not in areas:
                    areas.append(area)
        return areas
