"""Plan generation service

Builds the 7-day plan, the legacy single-day plan and the onboarding
starter reset from a ProfileSnapshot and the exercise catalog.

Generation is deterministic: ranking ties fall back to catalog order
and every id is derived from the week start, day, slot and version.
"""

import logging
import uuid
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Sequence, Set

from langsmith import traceable

from shared.models import (
    Difficulty,
    ExerciseRecord,
    FocusArea,
    MotivationLevel,
    ProfileSnapshot,
    SessionType,
    StiffnessTime,
    WorkType,
)
from plan_generation.config import settings
from plan_generation.models import (
    WEEK_LENGTH,
    DailyPlan,
    DayPlanItem,
    DayTheme,
    MicroSession,
    PlanGenerationResult,
    StarterReset,
    WeeklyPlan,
)
from plan_generation.services.catalog import ExerciseCatalog
from plan_generation.services.relevance import RelevanceScorer

logger = logging.getLogger(__name__)

PLAN_NAMESPACE = uuid.UUID("6f1c2d4e-8a7b-4c3d-9e2f-1a0b5c6d7e8f")

F, M, BS, R, AR = (
    DayTheme.FOUNDATION,
    DayTheme.MOBILITY,
    DayTheme.BUILD_STRENGTH,
    DayTheme.RECOVERY,
    DayTheme.ACTIVE_RECOVERY,
)

# Weekly theme sequence by motivation level
THEMES_BY_MOTIVATION: Dict[Optional[MotivationLevel], List[DayTheme]] = {
    MotivationLevel.CURIOUS: [F, M, F, R, M, F, R],
    MotivationLevel.VERY_MOTIVATED: [F, BS, M, BS, AR, BS, R],
}
DEFAULT_THEMES = [F, M, BS, R, F, M, AR]

STIFFNESS_TITLES = {
    SessionType.MORNING: "Morning Relief",
    SessionType.MIDDAY: "Midday Unwind",
    SessionType.AFTERNOON: "Evening Reset",
}

WORK_TYPE_BULLETS = {
    WorkType.DESK_OFFICE: "Designed for desk workers with exercises you can do at your workspace",
    WorkType.DESK_HOME: "Designed for desk workers with exercises you can do at your workspace",
    WorkType.HYBRID: "Flexible exercises that work whether you're at home or the office",
    WorkType.STANDING: "Includes movements to complement your standing desk routine",
    WorkType.MIXED: "Balanced mix of seated and standing exercises for your varied workday",
}

PROGRESSION_PROMISES = {
    MotivationLevel.CURIOUS: "We'll keep it light and build up gradually as you get comfortable.",
    MotivationLevel.VERY_MOTIVATED: "Complete 5 sessions this week to unlock more challenging exercises.",
}
DEFAULT_PROGRESSION_PROMISE = "Stick with it for a week and you'll start feeling the difference."

STARTER_TITLES = {
    StiffnessTime.MORNING: "Morning Wake-Up",
    StiffnessTime.MIDDAY: "Quick Desk Reset",
    StiffnessTime.EVENING: "End-of-Day Unwind",
}

# Starter reset stops once it is this close to the target
STARTER_TOLERANCE_SECONDS = 10


def join_names(names: Sequence[str]) -> str:
    """English list join, e.g. "neck, shoulders and hips" """
    if len(names) <= 1:
        return "".join(names)
    return ", ".join(names[:-1]) + " and " + names[-1]


class PlanGenerator:
    """Weekly / daily plan generator"""

    def __init__(
        self,
        catalog: Optional[ExerciseCatalog] = None,
        scorer: Optional[RelevanceScorer] = None,
        context_match_bonus: int = None,
        intent_match_points: int = None,
        exact_difficulty_bonus: int = None,
        easier_difficulty_bonus: int = None,
        max_focus_overlap: int = None,
        min_exercises_before_overlap_check: int = None,
        restricted_work_types: Optional[List[str]] = None,
        starter_reset_seconds: int = None,
    ):
        """
        Args:
            catalog: exercise catalog (default: loaded from settings.catalog_path)
            scorer: relevance scorer
            remaining args: selection weights, default from settings
        """
        self.catalog = catalog if catalog is not None else ExerciseCatalog()
        self.scorer = scorer or RelevanceScorer()

        self.context_match_bonus = _pick(context_match_bonus, settings.context_match_bonus)
        self.intent_match_points = _pick(intent_match_points, settings.intent_match_points)
        self.exact_difficulty_bonus = _pick(exact_difficulty_bonus, settings.exact_difficulty_bonus)
        self.easier_difficulty_bonus = _pick(easier_difficulty_bonus, settings.easier_difficulty_bonus)
        self.max_focus_overlap = _pick(max_focus_overlap, settings.max_focus_overlap)
        self.min_exercises_before_overlap_check = _pick(
            min_exercises_before_overlap_check, settings.min_exercises_before_overlap_check
        )
        self.restricted_work_types = set(
            _pick(restricted_work_types, settings.restricted_work_types)
        )
        self.starter_reset_seconds = _pick(starter_reset_seconds, settings.starter_reset_seconds)

    # === Weekly plan ===

    @staticmethod
    def week_start_for(on_date: date) -> date:
        """Monday of the week containing on_date"""
        return on_date - timedelta(days=on_date.weekday())

    @staticmethod
    def plan_id_for(profile: ProfileSnapshot, week_start: date) -> str:
        return str(uuid.uuid5(PLAN_NAMESPACE, f"weekly:{week_start.isoformat()}:{profile.stable_hash()}"))

    @traceable(name="weekly_plan_generation")
    def generate_weekly_plan(
        self,
        profile: ProfileSnapshot,
        week_start: date,
    ) -> PlanGenerationResult:
        """
        Build a 7-day plan

        Args:
            profile: onboarding profile snapshot
            week_start: Monday of the plan week

        Returns:
            PlanGenerationResult (plan + why-this-fits copy)
        """
        target_difficulty = self.target_difficulty(profile)

        daily_plans: List[DayPlanItem] = []
        previous_ids: Set[str] = set()
        for day_index in range(WEEK_LENGTH):
            day = self.generate_day(
                profile,
                week_start,
                day_index,
                previous_ids=previous_ids,
                target_difficulty=target_difficulty,
            )
            daily_plans.append(day)
            previous_ids = _exercise_ids(day)

        plan = WeeklyPlan(
            id=self.plan_id_for(profile, week_start),
            week_start_date=week_start,
            profile_snapshot=profile,
            catalog_version=self.catalog.version,
            daily_plans=daily_plans,
        )

        logger.info(
            f"Weekly plan {plan.id} for {week_start}: "
            f"{profile.sessions_per_day} sessions/day, difficulty={target_difficulty.value}, "
            f"catalog={self.catalog.version}"
        )

        return PlanGenerationResult(
            plan=plan,
            why_this_fits=self.why_this_fits(profile),
            progression_promise=self.progression_promise(profile),
        )

    def generate_day(
        self,
        profile: ProfileSnapshot,
        week_start: date,
        day_index: int,
        previous_ids: Iterable[str] = (),
        target_difficulty: Optional[Difficulty] = None,
        extra_seconds: int = 0,
        version: int = 1,
    ) -> DayPlanItem:
        """
        Build one day of the weekly plan

        Args:
            profile: onboarding profile snapshot
            week_start: Monday of the plan week
            day_index: 0-6
            previous_ids: exercise ids used the day before (sorted after equal alternatives)
            target_difficulty: default from exercise frequency
            extra_seconds: added to each session target (progression)
            version: plan version used in the ids
        """
        if not 0 <= day_index < WEEK_LENGTH:
            raise ValueError(f"day_index must be 0-{WEEK_LENGTH - 1}, got {day_index}")

        target_difficulty = target_difficulty or self.target_difficulty(profile)
        theme = self.themes_for(profile)[day_index]
        day_focus = self.day_focus_areas(profile, day_index)
        previous = set(previous_ids)
        pool = self.candidate_pool(profile)

        slots = self.session_slots(profile)
        target_seconds = self.session_target_seconds(profile, len(slots)) + extra_seconds

        day_prefix = f"{week_start.isoformat()}-d{day_index}"
        used_today: Set[str] = set()
        sessions = []
        for slot in slots:
            exercises = self._fill_session(
                pool, profile, day_focus, theme, slot, target_difficulty, previous, used_today, target_seconds
            )
            used_today.update(ex.id for ex in exercises)
            sessions.append(
                MicroSession(
                    id=f"{day_prefix}-{slot.value}-v{version}",
                    title=self.session_title(slot, theme, profile),
                    session_type=slot,
                    exercise_ids=[ex.id for ex in exercises],
                    duration_seconds=sum(ex.duration_seconds for ex in exercises),
                )
            )

        return DayPlanItem(
            id=f"{day_prefix}-v{version}",
            day_index=day_index,
            sessions=sessions,
            focus_label=" & ".join(area.display_name for area in day_focus),
            theme=theme.display_name,
        )

    # === Legacy single-day plan ===

    @traceable(name="daily_plan_generation")
    def generate_daily_plan(self, profile: ProfileSnapshot, on_date: date) -> DailyPlan:
        """Single-day plan with fixed morning / midday / afternoon slots"""
        day_index = on_date.weekday()
        theme = self.themes_for(profile)[day_index]
        day_focus = self.day_focus_areas(profile, day_index)
        target_difficulty = self.target_difficulty(profile)
        pool = self.candidate_pool(profile)

        slots = list(SessionType)
        target_seconds = self.session_target_seconds(profile, len(slots))

        used_today: Set[str] = set()
        sessions = []
        for slot in slots:
            exercises = self._fill_session(
                pool, profile, day_focus, theme, slot, target_difficulty, set(), used_today, target_seconds
            )
            used_today.update(ex.id for ex in exercises)
            if slot.stiffness_time in profile.stiffness_times:
                title = STIFFNESS_TITLES[slot]
            else:
                title = slot.default_title
            sessions.append(
                MicroSession(
                    id=f"{on_date.isoformat()}-{slot.value}",
                    title=title,
                    session_type=slot,
                    exercise_ids=[ex.id for ex in exercises],
                    duration_seconds=sum(ex.duration_seconds for ex in exercises),
                )
            )

        logger.info(f"Daily plan for {on_date}: {len(sessions)} sessions")
        return DailyPlan(plan_date=on_date, sessions=sessions)

    # === Starter reset ===

    @traceable(name="starter_reset_generation")
    def generate_starter_reset(
        self,
        focus_areas: Sequence[FocusArea],
        stiffness_times: Sequence[StiffnessTime] = (),
        target_seconds: int = None,
    ) -> StarterReset:
        """
        First reset offered at the end of onboarding

        Picks the most relevant easy exercises without exceeding the
        target, stopping once within a few seconds of it.
        """
        target_seconds = _pick(target_seconds, self.starter_reset_seconds)

        pool = [ex for ex in self.catalog.all() if ex.difficulty is Difficulty.EASY]
        if not pool:
            pool = self.catalog.all()

        ranked = sorted(
            pool,
            key=lambda ex: (
                -self.scorer.score(ex, focus_areas, stiffness_times=stiffness_times),
                self.catalog.position(ex.id),
            ),
        )

        selected: List[ExerciseRecord] = []
        total = 0
        for ex in ranked:
            if total >= target_seconds - STARTER_TOLERANCE_SECONDS:
                break
            if total + ex.duration_seconds <= target_seconds:
                selected.append(ex)
                total += ex.duration_seconds

        if not selected and ranked:
            selected = [ranked[0]]

        return StarterReset(title=self.starter_title(stiffness_times), exercises=selected)

    @staticmethod
    def starter_title(stiffness_times: Sequence[StiffnessTime]) -> str:
        times = list(dict.fromkeys(stiffness_times))
        if not times:
            return "Your First Reset"
        if len(times) == len(StiffnessTime):
            return "Your Daily Reset"
        if len(times) == 1:
            return STARTER_TITLES[times[0]]
        return "Your First Reset"

    # === Building blocks ===

    def target_difficulty(self, profile: ProfileSnapshot) -> Difficulty:
        if profile.exercise_frequency is None:
            return Difficulty.EASY
        return profile.exercise_frequency.suggested_difficulty

    @staticmethod
    def themes_for(profile: ProfileSnapshot) -> List[DayTheme]:
        return THEMES_BY_MOTIVATION.get(profile.motivation_level, DEFAULT_THEMES)

    @staticmethod
    def effective_focus_areas(profile: ProfileSnapshot) -> List[FocusArea]:
        """Pain areas first, then posture issues, then stated focus (deduped)"""
        areas: List[FocusArea] = []
        for pain in profile.pain_areas:
            areas.extend(pain.related_focus_areas)
        for issue in profile.posture_issues:
            areas.extend(issue.related_focus_areas)
        areas.extend(profile.focus_areas)

        areas = list(dict.fromkeys(areas))
        return areas or list(FocusArea)

    def day_focus_areas(self, profile: ProfileSnapshot, day_index: int) -> List[FocusArea]:
        """Two areas per day, rotating through the effective focus list"""
        areas = self.effective_focus_areas(profile)
        n = len(areas)
        return list(dict.fromkeys([areas[day_index % n], areas[(day_index + 1) % n]]))

    @staticmethod
    def session_slots(profile: ProfileSnapshot) -> List[SessionType]:
        count = profile.sessions_per_day
        if count == 1:
            if profile.stiffness_times:
                return [profile.stiffness_times[0].preferred_first_session]
            return [SessionType.MIDDAY]
        if count == 2:
            return [SessionType.MORNING, SessionType.AFTERNOON]
        return [SessionType.MORNING, SessionType.MIDDAY, SessionType.AFTERNOON]

    @staticmethod
    def session_target_seconds(profile: ProfileSnapshot, session_count: int) -> int:
        # at least one exercise per session even with a zero budget
        return max(1, profile.daily_time_minutes * 60 // max(1, session_count))

    def candidate_pool(self, profile: ProfileSnapshot) -> List[ExerciseRecord]:
        """Catalog, limited to desk-friendly exercises for restricted work types"""
        exercises = self.catalog.all()
        if profile.work_type is None or profile.work_type.value not in self.restricted_work_types:
            return exercises

        desk_friendly = [ex for ex in exercises if ex.is_desk_friendly]
        if not desk_friendly:
            logger.warning(
                f"No desk-friendly exercises in catalog {self.catalog.version}, using full catalog"
            )
            return exercises
        return desk_friendly

    def selection_score(
        self,
        exercise: ExerciseRecord,
        profile: ProfileSnapshot,
        day_focus: Sequence[FocusArea],
        theme: DayTheme,
        slot: SessionType,
        target_difficulty: Difficulty,
    ) -> int:
        """Relevance plus slot, theme and difficulty bonuses"""
        score = self.scorer.score(
            exercise,
            day_focus,
            profile.pain_areas,
            profile.posture_issues,
            profile.stiffness_times,
        )

        if slot.context_tag in exercise.context_tags:
            score += self.context_match_bonus

        score += self.intent_match_points * len(theme.preferred_intents.intersection(exercise.intent_tags))

        if exercise.difficulty is target_difficulty:
            score += self.exact_difficulty_bonus
        elif exercise.difficulty.sort_order < target_difficulty.sort_order:
            score += self.easier_difficulty_bonus

        return score

    def _fill_session(
        self,
        pool: List[ExerciseRecord],
        profile: ProfileSnapshot,
        day_focus: Sequence[FocusArea],
        theme: DayTheme,
        slot: SessionType,
        target_difficulty: Difficulty,
        previous_ids: Set[str],
        used_today: Set[str],
        target_seconds: int,
    ) -> List[ExerciseRecord]:
        """Greedy fill until the session target is met or exceeded"""
        ranked = sorted(
            pool,
            key=lambda ex: (
                -self.selection_score(ex, profile, day_focus, theme, slot, target_difficulty),
                ex.id in previous_ids,
                self.catalog.position(ex.id),
            ),
        )

        fresh = [ex for ex in ranked if ex.id not in used_today]
        selected = self._greedy_fill(fresh, target_seconds)
        if not selected:
            # every candidate already used today
            selected = self._greedy_fill(ranked, target_seconds)

        logger.debug(
            f"{slot.value} session ({theme.value}): {[ex.id for ex in selected]} "
            f"for target {target_seconds}s"
        )
        return selected

    def _greedy_fill(self, ranked: List[ExerciseRecord], target_seconds: int) -> List[ExerciseRecord]:
        selected: List[ExerciseRecord] = []
        used_areas: Set[FocusArea] = set()
        total = 0
        for ex in ranked:
            if total >= target_seconds:
                break
            overlap = len(used_areas.intersection(ex.focus_areas))
            if overlap < self.max_focus_overlap or len(selected) < self.min_exercises_before_overlap_check:
                selected.append(ex)
                used_areas.update(ex.focus_areas)
                total += ex.duration_seconds
        return selected

    # === Copy ===

    @staticmethod
    def session_title(slot: SessionType, theme: DayTheme, profile: ProfileSnapshot) -> str:
        if slot.stiffness_time in profile.stiffness_times:
            return STIFFNESS_TITLES[slot]

        if theme is DayTheme.RECOVERY:
            return "Gentle Recovery"
        if theme is DayTheme.ACTIVE_RECOVERY:
            return "Light Movement"
        if theme is DayTheme.BUILD_STRENGTH:
            return "Morning Activation" if slot is SessionType.MORNING else "Desk Strengthener"
        if theme is DayTheme.MOBILITY:
            return "Wake-Up Flow" if slot is SessionType.MORNING else "Mobility Break"
        return slot.default_title

    def why_this_fits(self, profile: ProfileSnapshot) -> List[str]:
        """Up to three bullets explaining the plan"""
        bullets = []

        if profile.pain_areas:
            names = [pain.display_name.lower() for pain in profile.pain_areas[:2]]
            bullets.append(f"Targets your {join_names(names)} with specific relief exercises")
        elif profile.focus_areas:
            names = [area.display_name.lower() for area in profile.focus_areas[:2]]
            bullets.append(f"Focuses on your {join_names(names)} as requested")

        count = profile.sessions_per_day
        noun = "session" if count == 1 else "sessions"
        bullets.append(
            f"{count} quick {noun} per day that fit your {profile.daily_time_minutes}-minute window"
        )

        if profile.has_all_day_stiffness:
            bullets.append("Spread throughout your day to combat all-day stiffness")
        elif profile.stiffness_times:
            names = [time.display_name.lower() for time in profile.stiffness_times]
            bullets.append(f"Timed for when you feel stiffest: {join_names(names)}")

        if len(bullets) < 3 and profile.work_type is not None:
            bullets.append(WORK_TYPE_BULLETS[profile.work_type])

        return bullets[:3]

    @staticmethod
    def progression_promise(profile: ProfileSnapshot) -> str:
        return PROGRESSION_PROMISES.get(profile.motivation_level, DEFAULT_PROGRESSION_PROMISE)


def _pick(value, default):
    return default if value is None else value


def _exercise_ids(day: DayPlanItem) -> Set[str]:
    return {exercise_id for session in day.sessions for exercise_id in session.exercise_ids}
