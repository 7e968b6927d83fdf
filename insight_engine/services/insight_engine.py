"""Daily insight engine

Picks up to three short insights for the home screen:
1. primary: pain area, then high sedentary load, then stiffness timing,
   otherwise motivational
2. secondary: category rotated by weekday and seed, never repeating the
   primary category
3. tertiary: only for engaged users (streak or weekly session count)

Output is fully determined by the profile, progress summary, today's
plan and the date passed in.
"""

import logging
import uuid
from datetime import date
from typing import Dict, List, Optional, Sequence, Set, Union

from langsmith import traceable

from shared.models import ProfileSnapshot
from shared.utils.analytics import AnalyticsSink, LoggingAnalyticsSink
from shared.utils.seeding import day_of_year
from plan_generation.models import DailyPlan, DayPlanItem
from progress_tracking.models import ProgressSummary, ProgressTrend
from insight_engine.config import settings
from insight_engine.models import DailyInsight, InsightCategory, InsightTemplate
from insight_engine.services import templates

logger = logging.getLogger(__name__)

INSIGHT_NAMESPACE = uuid.UUID("5b1f5c8e-2f4a-4d0c-9a57-3f4c7f0d2e61")

ROTATION: List[InsightCategory] = [
    InsightCategory.PROGRESS_TIP,
    InsightCategory.PLAN_TIP,
    InsightCategory.MOTIVATIONAL,
    InsightCategory.RECOVERY,
    InsightCategory.WORK_ENVIRONMENT,
    InsightCategory.SEDENTARY_RISK,
    InsightCategory.STIFFNESS_TIMING,
]

TodaysPlan = Union[DayPlanItem, DailyPlan]


def fill(text: str, values: Dict[str, str]) -> str:
    """Replace {key} placeholders, leaving unknown ones untouched"""
    for key, value in values.items():
        text = text.replace("{" + key + "}", value)
    return text


def secondary_category(category: InsightCategory) -> InsightCategory:
    """Category actually produced when the rotation lands on `category`"""
    # sedentary and stiffness copy needs profile detail the rotation slot lacks
    if category in (InsightCategory.SEDENTARY_RISK, InsightCategory.STIFFNESS_TIMING):
        return InsightCategory.MOTIVATIONAL
    return category


class InsightEngine:
    """Deterministic daily insight selection"""

    def __init__(
        self,
        analytics: Optional[AnalyticsSink] = None,
        tertiary_streak_threshold: int = None,
        tertiary_sessions_threshold: int = None,
    ):
        self.analytics = analytics or LoggingAnalyticsSink()
        self.tertiary_streak_threshold = (
            tertiary_streak_threshold if tertiary_streak_threshold is not None
            else settings.tertiary_streak_threshold
        )
        self.tertiary_sessions_threshold = (
            tertiary_sessions_threshold if tertiary_sessions_threshold is not None
            else settings.tertiary_sessions_threshold
        )

    @traceable(name="daily_insights")
    def insights(
        self,
        profile: Optional[ProfileSnapshot],
        progress_summary: Optional[ProgressSummary],
        todays_plan: Optional[TodaysPlan],
        on_date: date,
    ) -> List[DailyInsight]:
        """
        Generate today's insights

        Args:
            profile: onboarding snapshot (None for users who skipped onboarding)
            progress_summary: current weekly summary, if any
            todays_plan: today's plan, if any
            on_date: day the insights are for

        Returns:
            1-3 DailyInsight, primary first
        """
        seed = self.seed_for(on_date, profile)
        used: Set[InsightCategory] = set()
        results: List[DailyInsight] = []

        primary = self._primary(profile, seed)
        results.append(primary)
        used.add(primary.category)

        secondary = self._secondary(profile, progress_summary, todays_plan, used, seed, on_date)
        results.append(secondary)
        used.add(secondary.category)

        tertiary = self._tertiary(progress_summary, used, seed)
        if tertiary is not None:
            results.append(tertiary)

        results = results[: settings.max_insights]
        stamped = [
            insight.model_copy(
                update={
                    "id": self.insight_id(on_date, slot, insight),
                    "generated_on": on_date,
                }
            )
            for slot, insight in enumerate(results)
        ]

        persona = self.persona_hash(profile)
        for insight in stamped:
            self.analytics.track(
                "insight_generated",
                {"category": insight.category.value, "persona_hash": persona},
            )

        logger.info(
            f"Generated {len(stamped)} insights for {on_date}: "
            f"{[i.category.value for i in stamped]}"
        )
        return stamped

    # === Seeding ===

    @staticmethod
    def seed_for(on_date: date, profile: Optional[ProfileSnapshot]) -> int:
        profile_hash = profile.stable_hash() if profile is not None else 0
        return (day_of_year(on_date) + profile_hash) % settings.seed_modulus

    @staticmethod
    def weekday_number(on_date: date) -> int:
        """Weekday numbered 1-7 starting on Sunday"""
        return on_date.isoweekday() % 7 + 1

    @staticmethod
    def insight_id(on_date: date, slot: int, insight: DailyInsight) -> str:
        key = f"{on_date.isoformat()}:{slot}:{insight.category.value}:{insight.title}"
        return str(uuid.uuid5(INSIGHT_NAMESPACE, key))

    @staticmethod
    def persona_hash(profile: Optional[ProfileSnapshot]) -> str:
        """Coarse, non-identifying persona label for analytics"""
        if profile is None:
            return "unknown"

        components = []
        if profile.pain_areas:
            components.append(f"pain_{len(profile.pain_areas)}")
        if profile.sedentary_hours_bucket is not None:
            components.append(f"sed_{profile.sedentary_hours_bucket.value}")
        if profile.stiffness_times:
            components.append(f"stiff_{len(profile.stiffness_times)}")
        return "_".join(components)

    # === Slots ===

    def _primary(self, profile: Optional[ProfileSnapshot], seed: int) -> DailyInsight:
        if profile is None:
            return self.motivational(seed)

        if profile.pain_areas:
            return self.pain_specific(profile, seed)
        if profile.sedentary_hours_bucket is not None and profile.sedentary_hours_bucket.is_high_risk:
            return self.sedentary_risk(profile, seed)
        if profile.stiffness_times:
            return self.stiffness_timing(profile, seed)
        return self.motivational(seed)

    def _secondary(
        self,
        profile: Optional[ProfileSnapshot],
        summary: Optional[ProgressSummary],
        todays_plan: Optional[TodaysPlan],
        used: Set[InsightCategory],
        seed: int,
        on_date: date,
    ) -> DailyInsight:
        start = (self.weekday_number(on_date) + seed) % len(ROTATION)
        category = InsightCategory.MOTIVATIONAL
        for offset in range(len(ROTATION)):
            candidate = secondary_category(ROTATION[(start + offset) % len(ROTATION)])
            if candidate not in used:
                category = candidate
                break

        if category is InsightCategory.PROGRESS_TIP:
            return self.progress(summary, seed)
        if category is InsightCategory.PLAN_TIP:
            return self.plan(todays_plan, profile, seed)
        if category is InsightCategory.RECOVERY:
            return self.recovery(seed)
        if category is InsightCategory.WORK_ENVIRONMENT:
            return self.work_environment(profile, seed)
        return self.motivational(seed)

    def _tertiary(
        self,
        summary: Optional[ProgressSummary],
        used: Set[InsightCategory],
        seed: int,
    ) -> Optional[DailyInsight]:
        if summary is None:
            return None
        engaged = (
            summary.streak_days >= self.tertiary_streak_threshold
            or summary.weekly_sessions_completed >= self.tertiary_sessions_threshold
        )
        if not engaged:
            return None

        if InsightCategory.MOTIVATIONAL not in used:
            return self.motivational(seed + 100)
        if InsightCategory.RECOVERY not in used:
            return self.recovery(seed)
        return None

    # === Category builders ===

    def pain_specific(self, profile: ProfileSnapshot, seed: int) -> DailyInsight:
        pain = profile.pain_areas[0]
        sedentary = (
            profile.sedentary_hours_bucket.display_name
            if profile.sedentary_hours_bucket is not None
            else "desk time"
        )
        index, template = self._pick(templates.PAIN_TEMPLATES, seed)
        return self._build(
            InsightCategory.PAIN_SPECIFIC,
            template,
            title_values={"pain_area": pain.display_name},
            body_values={"pain_area": pain.display_name.lower(), "sedentary": sedentary},
            debug_tags=[f"pain_{pain.value}", f"template_{index}"],
        )

    def sedentary_risk(self, profile: ProfileSnapshot, seed: int) -> DailyInsight:
        bucket = profile.sedentary_hours_bucket
        if profile.stiffness_times:
            timing = "in the " + " and ".join(t.display_name.lower() for t in profile.stiffness_times)
        else:
            timing = "throughout the day"
        index, template = self._pick(templates.SEDENTARY_TEMPLATES, seed)
        return self._build(
            InsightCategory.SEDENTARY_RISK,
            template,
            body_values={"hours": bucket.display_name, "timing": timing},
            debug_tags=[f"sedentary_{bucket.value}", f"template_{index}"],
        )

    def stiffness_timing(self, profile: ProfileSnapshot, seed: int) -> DailyInsight:
        time = profile.stiffness_times[0]
        focus = " and ".join(area.display_name.lower() for area in profile.focus_areas[:2])
        index, template = self._pick(templates.STIFFNESS_TEMPLATES, seed)
        return self._build(
            InsightCategory.STIFFNESS_TIMING,
            template,
            title_values={"time": time.display_name},
            body_values={"time": time.display_name.lower(), "focus": focus or "your target areas"},
            debug_tags=[f"stiffness_{time.value}", f"template_{index}"],
        )

    def progress(self, summary: Optional[ProgressSummary], seed: int) -> DailyInsight:
        pool: Sequence[InsightTemplate] = templates.PROGRESS_TEMPLATES
        if summary is not None:
            if summary.trend is ProgressTrend.IMPROVING:
                pool = templates.PROGRESS_IMPROVING_TEMPLATES
            elif summary.streak_days >= 3:
                pool = templates.PROGRESS_STREAK_TEMPLATES
            elif summary.weekly_sessions_completed == 0:
                pool = templates.PROGRESS_RESTART_TEMPLATES

        index, template = self._pick(pool, seed)
        values = {
            "streak": str(summary.streak_days if summary else 0),
            "sessions": str(summary.weekly_sessions_completed if summary else 0),
            "score": str(summary.weekly_average_score if summary else 0),
        }
        return self._build(
            InsightCategory.PROGRESS_TIP,
            template,
            title_values=values,
            body_values=values,
            debug_tags=["progress", f"template_{index}"],
        )

    def plan(
        self,
        todays_plan: Optional[TodaysPlan],
        profile: Optional[ProfileSnapshot],
        seed: int,
    ) -> DailyInsight:
        session_count = todays_plan.session_count if todays_plan is not None else 3
        focus_names = (
            [area.display_name.lower() for area in profile.focus_areas[:2]]
            if profile is not None
            else []
        )
        focus = " and ".join(focus_names) or "your focus areas"
        index, template = self._pick(templates.PLAN_TEMPLATES, seed)
        return self._build(
            InsightCategory.PLAN_TIP,
            template,
            body_values={"session_count": str(session_count), "focus": focus},
            debug_tags=["plan", f"template_{index}"],
        )

    def motivational(self, seed: int) -> DailyInsight:
        index, template = self._pick(templates.MOTIVATIONAL_TEMPLATES, seed)
        return self._build(
            InsightCategory.MOTIVATIONAL,
            template,
            debug_tags=["motivational", f"template_{index}"],
        )

    def recovery(self, seed: int) -> DailyInsight:
        index, template = self._pick(templates.RECOVERY_TEMPLATES, seed)
        return self._build(
            InsightCategory.RECOVERY,
            template,
            debug_tags=["recovery", f"template_{index}"],
        )

    def work_environment(self, profile: Optional[ProfileSnapshot], seed: int) -> DailyInsight:
        work_type = (
            profile.work_type.display_name.lower()
            if profile is not None and profile.work_type is not None
            else "desk"
        )
        index, template = self._pick(templates.WORK_ENVIRONMENT_TEMPLATES, seed)
        return self._build(
            InsightCategory.WORK_ENVIRONMENT,
            template,
            body_values={"work_type": work_type},
            debug_tags=["work_environment", f"template_{index}"],
        )

    # === Helpers ===

    @staticmethod
    def _pick(pool: Sequence[InsightTemplate], seed: int):
        index = seed % len(pool)
        return index, pool[index]

    @staticmethod
    def _build(
        category: InsightCategory,
        template: InsightTemplate,
        title_values: Optional[Dict[str, str]] = None,
        body_values: Optional[Dict[str, str]] = None,
        debug_tags: Optional[List[str]] = None,
    ) -> DailyInsight:
        # id and generated_on are stamped once the slot is known
        return DailyInsight(
            id="",
            category=category,
            title=fill(template.title, title_values or {}),
            body=fill(template.body, body_values or {}),
            badge=template.badge,
            cta_text=template.cta,
            debug_tags=debug_tags or [],
            generated_on=date.min,
        )
