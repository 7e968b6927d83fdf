"""Onboarding analysis engine

Builds the one-time AnalysisReport shown after onboarding. The load score
adds six weighted components and normalizes them to 0-100, so more risk
factors always mean a higher score. Same profile, same report.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from langsmith import traceable

from shared.models import (
    ExerciseFrequency,
    MotivationLevel,
    PainArea,
    PostureIssue,
    ProfileSnapshot,
    SedentaryHoursBucket,
    StiffnessTime,
    WorkType,
)
from shared.utils.seeding import sorted_join, stable_int
from insight_engine.config import settings
from insight_engine.models import (
    AnalysisReport,
    AnalysisScore,
    InsightCard,
    RiskCategory,
    Severity,
)

logger = logging.getLogger(__name__)

# === Score components (max points) ===

SEDENTARY_POINTS = {
    SedentaryHoursBucket.LESS_THAN_2: 5,
    SedentaryHoursBucket.TWO_TO_FOUR: 10,
    SedentaryHoursBucket.FOUR_TO_SIX: 15,
    SedentaryHoursBucket.SIX_TO_EIGHT: 20,
    SedentaryHoursBucket.MORE_THAN_8: 25,
}
SEDENTARY_DEFAULT = 12
SEDENTARY_MAX = 25

STIFFNESS_POINTS = [5, 8, 14, 20]   # by number of stiffness times
STIFFNESS_MAX = 20

PAIN_POINTS = [0, 5, 10, 14, 17, 20]  # by pain area count, capped
PAIN_MAX = 20

POSTURE_POINTS = [0, 4, 8, 11, 15]
POSTURE_MAX = 15

FREQUENCY_POINTS = {
    ExerciseFrequency.RARELY: 15,
    ExerciseFrequency.ONCE_WEEK: 12,
    ExerciseFrequency.TWO_THREE_WEEK: 8,
    ExerciseFrequency.FOUR_PLUS_WEEK: 4,
    ExerciseFrequency.DAILY: 2,
}
FREQUENCY_DEFAULT = 8
FREQUENCY_MAX = 15

WORK_HOURS_MAX = 5

MAX_POINTS = SEDENTARY_MAX + STIFFNESS_MAX + PAIN_MAX + POSTURE_MAX + FREQUENCY_MAX + WORK_HOURS_MAX

# === Card icons ===

ICON_SEDENTARY = "chair.fill"
ICON_STIFFNESS = "clock.fill"
ICON_NECK_UPPER_BACK = "figure.stand"
ICON_LOWER_BACK_HIPS = "figure.walk"
ICON_RECOVERY = "moon.fill"
ICON_MOVEMENT = "figure.run"
ICON_TIME = "timer"
ICON_WORK = "desktopcomputer"

SUMMARIES = {
    RiskCategory.LOW: (
        "Your desk habits show lower risk factors",
        "Based on your answers, you have a solid foundation. Your plan can help you maintain "
        "good habits and address any specific areas you'd like to improve.",
    ),
    RiskCategory.MODERATE: (
        "Your routine has patterns worth addressing",
        "Your answers reveal some common desk-related patterns that can contribute to stiffness "
        "over time. Targeted micro-movements can make a real difference.",
    ),
    RiskCategory.ELEVATED: (
        "Your habits suggest room for improvement",
        "Based on what you've shared, your daily patterns may be contributing to the discomfort "
        "you're experiencing. A consistent movement routine can help address these factors.",
    ),
}

WORK_CONTEXT_COPY = {
    WorkType.DESK_OFFICE: (
        "Office desk work often means less control over your environment and potentially more "
        "screen time. Your plan will include exercises suitable for an office setting.",
        "We'll focus on discreet, desk-friendly movements.",
    ),
    WorkType.DESK_HOME: (
        "Working from home can blur boundaries between work and rest. Your flexible setup can "
        "help, since we can include exercises that use your space effectively.",
        "We'll include exercises you can do right at your desk.",
    ),
    WorkType.HYBRID: (
        "Switching between locations means varying setups and routines. Consistent movement "
        "habits can help maintain comfort across both environments.",
        "We'll create a routine that works in any setting.",
    ),
    WorkType.STANDING: (
        "Standing desks can help reduce sitting time, but static standing often creates its own "
        "patterns. We'll balance your routine accordingly.",
        "We'll include exercises for standing desk users.",
    ),
    WorkType.MIXED: (
        "Moving between desk work and other activities means varied physical demands. Your "
        "routine can complement this variety.",
        "We'll design a flexible routine for your active workday.",
    ),
}

MOTIVATION_ACTIONS = {
    MotivationLevel.CURIOUS: "Gentle progression as you build your routine",
    MotivationLevel.READY: "Steady progression through the week",
    MotivationLevel.VERY_MOTIVATED: "Progressive challenge to match your motivation",
}

DEFAULT_PRIORITIES = ["General mobility", "Posture awareness", "Movement breaks"]


def points_by_count(table: List[int], count: int) -> int:
    return table[min(count, len(table) - 1)]


def severity_by_count(count: int, medium_from: int, high_from: int) -> Severity:
    if count >= high_from:
        return Severity.HIGH
    if count >= medium_from:
        return Severity.MEDIUM
    return Severity.LOW


class AnalysisEngine:
    """Onboarding analysis report builder"""

    def __init__(self, max_cards: int = None, min_cards: int = None):
        self.max_cards = max_cards if max_cards is not None else settings.max_cards
        self.min_cards = min_cards if min_cards is not None else settings.min_cards

    @traceable(name="analysis_report")
    def analyze(
        self,
        profile: ProfileSnapshot,
        report_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> AnalysisReport:
        """
        Build the analysis report for a profile

        Args:
            profile: onboarding snapshot
            report_id: ID assigned by the caller (storage is external)
            created_at: timestamp assigned by the caller

        Returns:
            AnalysisReport
        """
        score = self.calculate_score(profile)
        headline, body = SUMMARIES[score.category]

        report = AnalysisReport(
            id=report_id,
            created_at=created_at,
            summary_headline=headline,
            summary_body=body,
            score=score,
            insights=self.generate_cards(profile),
            risk_factors=self.risk_factors(profile),
            focus_areas=self.derive_focus_areas(profile),
            recommended_priorities=self.recommended_priorities(profile),
            weekly_actions=self.weekly_actions(profile),
        )

        logger.info(
            f"Analysis report: score={score.value} ({score.category.value}), "
            f"cards={len(report.insights)}, risk_factors={len(report.risk_factors)}"
        )
        return report

    # === Score ===

    def calculate_score(self, profile: ProfileSnapshot) -> AnalysisScore:
        """Load score, 0-100. Higher means more desk-related risk factors."""
        points = self.score_components(profile)
        total = sum(points.values())
        logger.debug(f"Analysis score components: {points} (total {total}/{MAX_POINTS})")
        return AnalysisScore(value=total * 100 // MAX_POINTS)

    def score_components(self, profile: ProfileSnapshot) -> dict:
        bucket = profile.sedentary_hours_bucket
        frequency = profile.exercise_frequency
        return {
            "sedentary": SEDENTARY_POINTS[bucket] if bucket is not None else SEDENTARY_DEFAULT,
            "stiffness": points_by_count(STIFFNESS_POINTS, len(profile.stiffness_times)),
            "pain": points_by_count(PAIN_POINTS, len(profile.pain_areas)),
            "posture": points_by_count(POSTURE_POINTS, len(profile.posture_issues)),
            "frequency": FREQUENCY_POINTS[frequency] if frequency is not None else FREQUENCY_DEFAULT,
            "work_hours": self.work_hours_points(profile.work_hours),
        }

    @staticmethod
    def work_hours_points(work_hours: Optional[int]) -> int:
        if work_hours is None:
            return 2
        if work_hours <= 6:
            return 1
        elif work_hours <= 8:
            return 2
        elif work_hours <= 10:
            return 4
        return WORK_HOURS_MAX

    # === Cards ===

    @staticmethod
    def template_seed(profile: ProfileSnapshot) -> int:
        """Rotation seed from the answers that shape the copy"""
        bucket = profile.sedentary_hours_bucket
        return stable_int(
            sorted_join(p.value for p in profile.pain_areas),
            sorted_join(t.value for t in profile.stiffness_times),
            bucket.value if bucket is not None else "",
            sorted_join(f.value for f in profile.focus_areas),
        ) % 100

    def generate_cards(self, profile: ProfileSnapshot) -> List[InsightCard]:
        """3-6 cards sorted high to low severity"""
        seed = self.template_seed(profile)
        generators: List[Callable[[ProfileSnapshot, int], Optional[InsightCard]]] = [
            self.sedentary_load_card,
            self.stiffness_timing_card,
            self.neck_upper_back_card,
            self.lower_back_hips_card,
            self.movement_baseline_card,
            self.time_efficiency_card,
            self.work_context_card,
        ]
        cards = [card for card in (generate(profile, seed) for generate in generators) if card]

        # stable sort keeps generator order within a severity
        cards.sort(key=lambda c: c.severity.sort_order)
        cards = cards[: self.max_cards]

        for filler in (self.recovery_card(), self.posture_awareness_card(), self.movement_breaks_card()):
            if len(cards) >= self.min_cards:
                break
            if all(card.id != filler.id for card in cards):
                cards.append(filler)

        cards.sort(key=lambda c: c.severity.sort_order)
        return cards

    def sedentary_load_card(self, profile: ProfileSnapshot, seed: int) -> Optional[InsightCard]:
        bucket = profile.sedentary_hours_bucket
        if bucket is None or not bucket.is_high_risk:
            return None

        hours = bucket.display_name
        templates: List[Tuple[str, str, str]] = [
            (
                "Sedentary Load",
                f"Sitting {hours} daily is commonly linked with increased muscle tension and "
                "reduced circulation. Regular movement breaks can help counteract these effects.",
                "We'll schedule micro-resets throughout your workday.",
            ),
            (
                "Extended Sitting Pattern",
                f"Desk days of {hours} may contribute to the stiffness you're experiencing. "
                "Brief, targeted movements throughout the day often help.",
                "Your plan includes exercises timed for your work schedule.",
            ),
            (
                "Desk Time Impact",
                f"With {hours} of daily sitting, muscle tension can accumulate gradually. "
                "Consistent movement breaks are often effective at managing this.",
                "We'll help you build a sustainable movement routine.",
            ),
        ]
        title, body, action = templates[seed % len(templates)]
        return InsightCard(
            id="sedentary_load",
            title=title,
            body=body,
            severity=Severity.HIGH if bucket is SedentaryHoursBucket.MORE_THAN_8 else Severity.MEDIUM,
            action_label=action,
            tags=["sedentary", "sitting", bucket.value],
            icon=ICON_SEDENTARY,
        )

    def stiffness_timing_card(self, profile: ProfileSnapshot, seed: int) -> Optional[InsightCard]:
        times = sorted(set(profile.stiffness_times), key=lambda t: t.value)
        if len(times) < 2:
            return None

        all_day = len(times) == len(StiffnessTime)
        times_text = " and ".join(t.display_name.lower() for t in times)
        templates = [
            (
                "Stiffness Pattern",
                "You're experiencing stiffness throughout your entire day. This widespread "
                "pattern often correlates with prolonged sitting and limited movement variety.",
                f"You feel stiffest during the {times_text}. This timing pattern can help us "
                "target your exercises when they'll have the most impact.",
                "We'll spread exercises across your day for continuous relief.",
                "We'll prioritize sessions during your peak stiffness times.",
            ),
            (
                "Your Stiffness Rhythm",
                "All-day stiffness suggests your body may need more frequent movement "
                "throughout your workday. Small, consistent breaks often help.",
                f"Your {times_text} stiffness pattern tells us when your body most needs "
                "movement. We'll time your resets accordingly.",
                "Your plan includes exercises distributed throughout the day.",
                "Sessions are timed for when you typically feel most tense.",
            ),
            (
                "Timing Matters",
                "Feeling stiff all day can indicate tension is accumulating faster than it's "
                "releasing. More frequent micro-movements can help break this cycle.",
                f"The {times_text} stiffness you mentioned points to specific windows where "
                "movement can be most beneficial.",
                "We'll help you build movement habits for every part of your day.",
                "Your resets are scheduled for maximum impact.",
            ),
        ]
        title, body_all_day, body_partial, action_all_day, action_partial = templates[
            seed % len(templates)
        ]
        return InsightCard(
            id="stiffness_timing",
            title=title,
            body=body_all_day if all_day else body_partial,
            severity=Severity.HIGH if all_day else Severity.MEDIUM,
            action_label=action_all_day if all_day else action_partial,
            tags=["stiffness", "timing"] + [t.value for t in times],
            icon=ICON_STIFFNESS,
        )

    def neck_upper_back_card(self, profile: ProfileSnapshot, seed: int) -> Optional[InsightCard]:
        pain = set(profile.pain_areas)
        posture = set(profile.posture_issues)

        triggers = [
            PainArea.NECK in pain,
            PainArea.SHOULDERS in pain,
            PainArea.UPPER_BACK in pain,
            PainArea.HEADACHES in pain,
            PostureIssue.FORWARD_HEAD in posture,
            PostureIssue.TEXT_NECK in posture,
            PostureIssue.ROUNDED_SHOULDERS in posture,
        ]
        count = sum(triggers)
        if count == 0:
            return None

        concerns = []
        if PainArea.NECK in pain:
            concerns.append("neck discomfort")
        if PainArea.SHOULDERS in pain:
            concerns.append("shoulder tension")
        if PainArea.UPPER_BACK in pain:
            concerns.append("upper back stiffness")
        if PostureIssue.FORWARD_HEAD in posture or PostureIssue.TEXT_NECK in posture:
            concerns.append("forward head positioning")
        if PostureIssue.ROUNDED_SHOULDERS in posture:
            concerns.append("rounded shoulders")
        if PainArea.HEADACHES in pain:
            concerns.append("tension headaches")
        concerns_text = " and ".join(concerns[:2])

        templates = [
            (
                "Neck & Upper Back Focus",
                f"Your {concerns_text} may be connected to desk posture habits. These areas "
                "often benefit from targeted mobility and strengthening exercises.",
                "We'll include specific neck and upper back exercises in your plan.",
            ),
            (
                "Upper Body Attention",
                f"The {concerns_text} you mentioned is common among desk workers. Gentle, "
                "consistent movement can help address the underlying tension patterns.",
                "Your plan prioritizes exercises for these key areas.",
            ),
            (
                "Targeting Your Tension",
                f"Screen time and desk positioning often contribute to {concerns_text}. Regular "
                "mobility work can help maintain comfort throughout your day.",
                "We've designed exercises specifically for your upper body needs.",
            ),
        ]
        title, body, action = templates[seed % len(templates)]
        return InsightCard(
            id="neck_upper_back",
            title=title,
            body=body,
            severity=severity_by_count(count, medium_from=2, high_from=4),
            action_label=action,
            tags=["neck", "upper_back", "shoulders", "posture"],
            icon=ICON_NECK_UPPER_BACK,
        )

    def lower_back_hips_card(self, profile: ProfileSnapshot, seed: int) -> Optional[InsightCard]:
        pain = set(profile.pain_areas)
        posture = set(profile.posture_issues)
        high_sedentary = profile.sedentary_hours_bucket is SedentaryHoursBucket.MORE_THAN_8

        triggers = [
            PainArea.LOWER_BACK in pain,
            PainArea.HIPS in pain,
            PostureIssue.UNEVEN_HIPS in posture,
            PostureIssue.ANTERIOR_PELVIC_TILT in posture,
            PostureIssue.SLOUCHING in posture and high_sedentary,
        ]
        count = sum(triggers)
        if count == 0:
            return None

        concerns = []
        if PainArea.LOWER_BACK in pain:
            concerns.append("lower back discomfort")
        if PainArea.HIPS in pain:
            concerns.append("hip tightness")
        if PostureIssue.UNEVEN_HIPS in posture:
            concerns.append("uneven hips")
        if PostureIssue.ANTERIOR_PELVIC_TILT in posture:
            concerns.append("pelvic positioning")
        concerns_text = " and ".join(concerns[:2]) or "lower body tension"

        return InsightCard(
            id="lower_back_hips",
            title="Lower Back & Hips",
            body=(
                f"Your {concerns_text} can be influenced by prolonged sitting. Hip flexors often "
                "tighten while glutes weaken, creating imbalances that may affect the lower back."
            ),
            severity=severity_by_count(count, medium_from=2, high_from=3),
            action_label="We'll add hip mobility and lower back relief exercises.",
            tags=["lower_back", "hips", "mobility"],
            icon=ICON_LOWER_BACK_HIPS,
        )

    def movement_baseline_card(self, profile: ProfileSnapshot, seed: int) -> Optional[InsightCard]:
        frequency = profile.exercise_frequency
        if frequency not in (ExerciseFrequency.RARELY, ExerciseFrequency.ONCE_WEEK):
            return None

        if frequency is ExerciseFrequency.RARELY:
            body = (
                "Starting from a lower activity baseline means your body may respond quickly to "
                "consistent movement. We'll start gentle and build progressively."
            )
        else:
            body = (
                "With once-weekly activity, adding daily micro-movements can help maintain "
                "flexibility between your regular workouts."
            )

        return InsightCard(
            id="movement_baseline",
            title="Movement Baseline",
            body=body,
            severity=Severity.MEDIUM if frequency is ExerciseFrequency.RARELY else Severity.LOW,
            action_label="We'll start with approachable exercises and progress as you build consistency.",
            tags=["exercise", "baseline", frequency.value],
            icon=ICON_MOVEMENT,
        )

    def time_efficiency_card(self, profile: ProfileSnapshot, seed: int) -> Optional[InsightCard]:
        if profile.daily_time_minutes > 5:
            return None

        minutes = profile.daily_time_minutes
        return InsightCard(
            id="time_efficiency",
            title="Time-Efficient Approach",
            body=(
                f"You've got {minutes} minute{'' if minutes == 1 else 's'} to work with. Research "
                "suggests even brief, consistent movement breaks can help reduce stiffness and "
                "improve focus."
            ),
            severity=Severity.LOW,
            action_label="We'll design quick, focused sessions that fit your schedule.",
            tags=["time", "efficiency", "micro_sessions"],
            icon=ICON_TIME,
        )

    def work_context_card(self, profile: ProfileSnapshot, seed: int) -> Optional[InsightCard]:
        if profile.work_type is None:
            return None

        body, action = WORK_CONTEXT_COPY[profile.work_type]
        return InsightCard(
            id="work_context",
            title="Work Environment",
            body=body,
            severity=Severity.LOW,
            action_label=action,
            tags=["work", profile.work_type.value],
            icon=ICON_WORK,
        )

    @staticmethod
    def recovery_card() -> InsightCard:
        return InsightCard(
            id="recovery",
            title="Rest & Recovery",
            body=(
                "Recovery between sessions is part of progress. Gentle movement on lighter days "
                "can help your body adapt without overdoing it."
            ),
            severity=Severity.LOW,
            action_label="We'll balance active days with lighter resets.",
            tags=["recovery"],
            icon=ICON_RECOVERY,
        )

    @staticmethod
    def posture_awareness_card() -> InsightCard:
        return InsightCard(
            id="posture_awareness",
            title="Posture Awareness",
            body=(
                "Noticing how you sit is often the first step. Brief posture check-ins during the "
                "day can help you catch tension before it builds."
            ),
            severity=Severity.LOW,
            action_label="We'll add quick posture resets to your routine.",
            tags=["posture", "awareness"],
            icon=ICON_NECK_UPPER_BACK,
        )

    @staticmethod
    def movement_breaks_card() -> InsightCard:
        return InsightCard(
            id="movement_breaks",
            title="Movement Breaks",
            body=(
                "Short breaks spread across the day often do more than one long session. A few "
                "minutes at a time can help keep stiffness from building."
            ),
            severity=Severity.LOW,
            action_label="We'll space your resets through the workday.",
            tags=["movement", "breaks"],
            icon=ICON_MOVEMENT,
        )

    # === Report sections ===

    def risk_factors(self, profile: ProfileSnapshot) -> List[str]:
        factors = []
        pain = set(profile.pain_areas)
        posture = set(profile.posture_issues)

        bucket = profile.sedentary_hours_bucket
        if bucket is SedentaryHoursBucket.MORE_THAN_8:
            factors.append("Sitting 8+ hours daily can contribute to muscle tension and reduced circulation")
        elif bucket is SedentaryHoursBucket.SIX_TO_EIGHT:
            factors.append("6-8 hours of daily sitting may increase likelihood of stiffness buildup")
        elif bucket is SedentaryHoursBucket.FOUR_TO_SIX:
            factors.append("4-6 hours of sitting is common but benefits from regular movement breaks")

        stiffness_count = len(set(profile.stiffness_times))
        if stiffness_count == len(StiffnessTime):
            factors.append("All-day stiffness pattern often correlates with limited movement variety")
        elif stiffness_count == 2:
            factors.append("Stiffness at multiple times of day may indicate cumulative tension")

        if PainArea.NECK in pain:
            factors.append("Neck discomfort is commonly linked with screen positioning and forward head posture")
        if PainArea.LOWER_BACK in pain:
            factors.append("Lower back discomfort may correlate with prolonged sitting and hip tightness")
        if PainArea.SHOULDERS in pain:
            factors.append("Shoulder tension often develops from keyboard and mouse positioning")
        if PainArea.WRISTS in pain:
            factors.append("Wrist strain can result from repetitive typing and mouse movements")
        if PainArea.HEADACHES in pain:
            factors.append("Tension headaches may be connected to neck and shoulder tightness")

        if PostureIssue.FORWARD_HEAD in posture or PostureIssue.TEXT_NECK in posture:
            factors.append("Forward head posture can increase strain on neck muscles")
        if PostureIssue.ROUNDED_SHOULDERS in posture:
            factors.append("Rounded shoulders may contribute to upper back and chest tightness")
        if PostureIssue.SLOUCHING in posture:
            factors.append("Slouching patterns often lead to reduced core engagement and back support")
        if PostureIssue.ANTERIOR_PELVIC_TILT in posture:
            factors.append("Anterior pelvic tilt can affect lower back comfort during sitting")

        if profile.exercise_frequency is ExerciseFrequency.RARELY:
            factors.append("Limited regular exercise may reduce muscle support for desk posture")
        elif profile.exercise_frequency is ExerciseFrequency.ONCE_WEEK:
            factors.append("Once-weekly activity may not fully offset daily sitting effects")

        work_hours = profile.work_hours
        if work_hours is not None and work_hours >= 10:
            factors.append(f"Extended work hours ({work_hours}+ hours) can increase cumulative sitting time")

        return factors[: settings.max_risk_factors]

    @staticmethod
    def derive_focus_areas(profile: ProfileSnapshot) -> List[str]:
        names = {p.display_name for p in profile.pain_areas}
        names.update(i.display_name for i in profile.posture_issues)
        names.update(f.display_name for f in profile.focus_areas)
        return sorted(names)

    @staticmethod
    def recommended_priorities(profile: ProfileSnapshot) -> List[str]:
        pain = set(profile.pain_areas)
        posture = set(profile.posture_issues)

        priorities = []
        if PainArea.NECK in pain or posture & {PostureIssue.FORWARD_HEAD, PostureIssue.TEXT_NECK}:
            priorities.append("Neck mobility")
        if PainArea.SHOULDERS in pain or PostureIssue.ROUNDED_SHOULDERS in posture:
            priorities.append("Shoulder opening")
        if PainArea.UPPER_BACK in pain or PostureIssue.SLOUCHING in posture:
            priorities.append("Upper back activation")
        if PainArea.HIPS in pain or PostureIssue.ANTERIOR_PELVIC_TILT in posture:
            priorities.append("Hip flexor stretching")
        if PainArea.LOWER_BACK in pain or PostureIssue.UNEVEN_HIPS in posture:
            priorities.append("Lower back relief")
        if PainArea.WRISTS in pain:
            priorities.append("Wrist mobility")

        return (priorities or list(DEFAULT_PRIORITIES))[: settings.max_priorities]

    @staticmethod
    def weekly_actions(profile: ProfileSnapshot) -> List[str]:
        sessions = profile.sessions_per_day
        actions = [
            f"{sessions} quick session{'' if sessions == 1 else 's'} per day, "
            f"{profile.daily_time_minutes} minutes total"
        ]

        times = sorted(set(profile.stiffness_times), key=lambda t: t.value)
        if len(times) == len(StiffnessTime):
            actions.append("Exercises spread throughout your day for all-day relief")
        elif times:
            names = " and ".join(t.display_name.lower() for t in times)
            actions.append(f"Sessions timed for your {names} stiffness")

        if profile.focus_areas:
            areas = " and ".join(a.display_name.lower() for a in profile.focus_areas[:2])
            actions.append(f"Targeted exercises for your {areas}")

        if profile.motivation_level is not None:
            actions.append(MOTIVATION_ACTIONS[profile.motivation_level])
        else:
            actions.append("Progressive exercises that build throughout the week")

        return actions[: settings.max_weekly_actions]
