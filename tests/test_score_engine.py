from datetime import date, datetime

import pytest

from shared.models import FocusArea, ProfileSnapshot, SedentaryHoursBucket, StiffnessTime
from progress_tracking.config import ProgressSettings
from progress_tracking.models import DailyScoreEntry, ProgressTrend, ScoreDisplayCategory
from progress_tracking.services import ScoreEngine


@pytest.fixture
def engine():
    return ScoreEngine()


def test_inactive_day_is_starting(engine):
    score = engine.score(0, 0, 0)
    assert score == 45
    assert ScoreDisplayCategory.from_score(score) is ScoreDisplayCategory.STARTING


def test_inactive_day_with_sedentary_penalty_stays_above_floor(engine):
    score = engine.score(0, 0, 0, sedentary_bucket=SedentaryHoursBucket.MORE_THAN_8)
    assert score == 35
    # penalty only applies without sessions
    assert engine.score(1, 0, 0, sedentary_bucket=SedentaryHoursBucket.MORE_THAN_8) == 53


def test_score_is_monotonic_in_activity(engine):
    bucket = SedentaryHoursBucket.MORE_THAN_8
    for sessions in range(0, 5):
        for minutes in range(0, 15):
            for streak in range(0, 8):
                score = engine.score(sessions, minutes, streak, sedentary_bucket=bucket)
                assert engine.score(sessions + 1, minutes, streak, sedentary_bucket=bucket) >= score
                assert engine.score(sessions, minutes + 1, streak, sedentary_bucket=bucket) >= score
                assert engine.score(sessions, minutes, streak + 1, sedentary_bucket=bucket) >= score


def test_score_bounds(engine):
    best = engine.score(
        20, 200, 100,
        stiffness_times_matched=3,
        focus_areas=[FocusArea.NECK, FocusArea.HIPS, FocusArea.WRISTS],
    )
    assert best == 45 + 25 + 10 + 10 + 6 + 2
    assert best <= 100

    low = ScoreEngine(config=ProgressSettings(base_score=10))
    assert low.score(0, 0, 0) == 30


def test_category_boundaries():
    assert ScoreDisplayCategory.from_score(85) is ScoreDisplayCategory.EXCELLENT
    assert ScoreDisplayCategory.from_score(84) is ScoreDisplayCategory.GOOD
    assert ScoreDisplayCategory.from_score(70) is ScoreDisplayCategory.GOOD
    assert ScoreDisplayCategory.from_score(69) is ScoreDisplayCategory.BUILDING
    assert ScoreDisplayCategory.from_score(50) is ScoreDisplayCategory.BUILDING
    assert ScoreDisplayCategory.from_score(49) is ScoreDisplayCategory.STARTING


def test_calculate_daily_score_matches_user_stiffness_times(engine, desk_worker):
    entry = engine.calculate_daily_score(
        entry_date=date(2025, 1, 8),
        sessions_completed=1,
        minutes_completed=5,
        focus_areas=[FocusArea.NECK],
        stiffness_times_triggered=[StiffnessTime.MORNING, StiffnessTime.EVENING],
        profile=desk_worker,
        current_streak=1,
    )

    # only morning is one of the user's stiffness times
    assert entry.score == 45 + 8 + 5 + 2 + 3
    assert entry.sessions_completed == 1
    assert entry.stiffness_times_triggered == [StiffnessTime.MORNING, StiffnessTime.EVENING]


def test_calculate_daily_score_without_profile(engine):
    entry = engine.calculate_daily_score(
        entry_date=date(2025, 1, 8),
        sessions_completed=0,
        minutes_completed=0,
        focus_areas=[],
        stiffness_times_triggered=[StiffnessTime.MORNING],
        profile=None,
        current_streak=0,
    )
    assert entry.score == 45
    assert not entry.has_activity


def test_explain_score(engine):
    assert engine.explain_score(2, 6, 2) == "Base: 45 • Sessions: +16 • Minutes: +6 • Streak: +4"
    assert engine.explain_score(0, 0, 0) == "Base: 45"
    assert engine.explain_score(1, 0, 0, 2).endswith("Timing: +6")


def test_projection_and_message(engine):
    assert engine.projected_score_after_session(71, 2) == 79
    # session points cap at 25
    assert engine.projected_score_after_session(90, 3) == 91
    assert engine.projected_score_after_session(99, 0) == 100

    assert engine.motivational_message(8).startswith("One session")
    assert engine.motivational_message(1).startswith("Keep building")
    assert engine.motivational_message(0).startswith("You're already")


def test_session_time_category():
    assert ScoreEngine.session_time_category(datetime(2025, 1, 8, 9, 0)) is StiffnessTime.MORNING
    assert ScoreEngine.session_time_category(datetime(2025, 1, 8, 13, 0)) is StiffnessTime.MIDDAY
    assert ScoreEngine.session_time_category(datetime(2025, 1, 8, 20, 0)) is StiffnessTime.EVENING
    assert ScoreEngine.session_time_category(datetime(2025, 1, 8, 3, 0)) is StiffnessTime.EVENING


def test_day_over_day_trend():
    assert ScoreEngine.day_over_day_trend(60, None) is ProgressTrend.NEUTRAL
    assert ScoreEngine.day_over_day_trend(60, 50) is ProgressTrend.IMPROVING
    assert ScoreEngine.day_over_day_trend(40, 50) is ProgressTrend.DECLINING


def test_entry_score_is_clamped():
    assert DailyScoreEntry(entry_date=date(2025, 1, 8), score=140).score == 100
    assert DailyScoreEntry(entry_date=date(2025, 1, 8), score=-3).score == 0


def test_profile_without_stiffness_gets_no_timing_points(engine):
    entry = engine.calculate_daily_score(
        entry_date=date(2025, 1, 8),
        sessions_completed=1,
        minutes_completed=0,
        focus_areas=[],
        stiffness_times_triggered=[StiffnessTime.MIDDAY],
        profile=ProfileSnapshot(),
        current_streak=0,
    )
    assert entry.score == 45 + 8
