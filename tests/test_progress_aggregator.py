from datetime import date, datetime

import pytest

from shared.models import FocusArea, StiffnessTime
from progress_tracking.models import DailyScoreEntry, ProgressTrend, classify_trend
from progress_tracking.services import ProgressAggregator

TODAY = date(2025, 1, 12)


@pytest.fixture
def aggregator():
    return ProgressAggregator()


def _entry(day, score, sessions=1, minutes=5, focus=("neck",)):
    return DailyScoreEntry(
        entry_date=date(2025, 1, day),
        score=score,
        sessions_completed=sessions,
        minutes_completed=minutes,
        focus_areas=list(focus),
    )


def test_new_user_gets_placeholder_week(aggregator):
    summary = aggregator.summarize([], TODAY)

    assert len(summary.last_7_days) == 7
    assert summary.last_7_days[0].entry_date == date(2025, 1, 6)
    assert summary.last_7_days[-1].entry_date == TODAY
    assert summary.weekly_average_score == 0
    assert summary.streak_days == 0
    assert not summary.has_enough_data
    assert summary.wins == []
    assert summary.trend is ProgressTrend.NEUTRAL
    assert summary.week_start_date == date(2025, 1, 6)


def test_inactive_week_has_no_data_and_no_wins(aggregator):
    entries = [_entry(day, 45, sessions=0, minutes=0) for day in range(6, 13)]
    summary = aggregator.summarize(entries, TODAY, streak_days=5)

    assert not summary.has_enough_data
    assert summary.wins == []


def test_weekly_average_counts_all_seven_days(aggregator):
    summary = aggregator.summarize([_entry(10, 70), _entry(11, 70)], TODAY)

    assert summary.weekly_average_score == 20
    assert summary.weekly_sessions_completed == 2
    assert summary.weekly_minutes_completed == 10
    assert summary.has_enough_data
    assert summary.active_days_count == 2


def test_entries_outside_window_are_ignored(aggregator):
    summary = aggregator.summarize([_entry(1, 90), _entry(12, 70)], TODAY)

    assert summary.weekly_sessions_completed == 1
    assert summary.weekly_average_score == 10


def test_streak_derived_from_entries(aggregator):
    summary = aggregator.summarize([_entry(10, 60), _entry(11, 60), _entry(12, 60)], TODAY)
    assert summary.streak_days == 3

    explicit = aggregator.summarize([_entry(12, 60)], TODAY, streak_days=9)
    assert explicit.streak_days == 9


def test_classify_trend():
    assert classify_trend([50, 52, 70, 75]) is ProgressTrend.IMPROVING
    assert classify_trend([80, 78, 60, 55]) is ProgressTrend.DECLINING
    assert classify_trend([60, 64]) is ProgressTrend.NEUTRAL
    assert classify_trend([90]) is ProgressTrend.NEUTRAL
    assert classify_trend([]) is ProgressTrend.NEUTRAL


def test_summary_trend_uses_active_days(aggregator):
    entries = [_entry(6, 50), _entry(7, 52), _entry(9, 0, sessions=0), _entry(11, 70), _entry(12, 75)]
    summary = aggregator.summarize(entries, TODAY)
    assert summary.trend is ProgressTrend.IMPROVING


def test_wins_for_a_strong_week(aggregator):
    entries = [_entry(day, 90, sessions=3, minutes=9) for day in range(6, 13)]
    summary = aggregator.summarize(entries, TODAY)

    assert summary.streak_days == 7
    assert [win.title for win in summary.wins] == ["Week Warrior", "Reset Champion", "High Performer"]


def test_well_rounded_and_momentum_wins(aggregator):
    entries = [
        _entry(10, 60, focus=("neck", "hips")),
        _entry(11, 60, focus=("wrists",)),
        _entry(12, 60, focus=("lower_back",)),
    ]
    titles = [win.title for win in aggregator.summarize(entries, TODAY).wins]
    assert titles == ["Building Momentum", "Well-Rounded"]


def test_record_session_creates_and_merges_entries(aggregator, desk_worker):
    entries = aggregator.record_session(
        [], datetime(2025, 1, 8, 9, 0), 300, [FocusArea.NECK], desk_worker, current_streak=1
    )
    assert len(entries) == 1
    first = entries[0]
    assert first.sessions_completed == 1
    assert first.minutes_completed == 5
    assert first.stiffness_times_triggered == [StiffnessTime.MORNING]
    assert first.score == 45 + 8 + 5 + 2 + 3

    entries = aggregator.record_session(
        entries, datetime(2025, 1, 8, 14, 0), 240, [FocusArea.SHOULDERS], desk_worker, current_streak=1
    )
    assert len(entries) == 1
    merged = entries[0]
    assert merged.sessions_completed == 2
    assert merged.minutes_completed == 9
    assert merged.focus_areas == [FocusArea.NECK, FocusArea.SHOULDERS]
    assert merged.stiffness_times_triggered == [StiffnessTime.MORNING, StiffnessTime.MIDDAY]
    assert merged.score == 45 + 16 + 9 + 2 + 6 + 1
    assert merged.updated_at == datetime(2025, 1, 8, 14, 0)


def test_record_session_keeps_other_days_sorted(aggregator):
    entries = aggregator.record_session(
        [_entry(9, 60)], datetime(2025, 1, 7, 18, 0), 120, [], None, current_streak=1
    )
    assert [e.entry_date for e in entries] == [date(2025, 1, 7), date(2025, 1, 9)]


def test_record_session_rejects_negative_duration(aggregator):
    with pytest.raises(ValueError):
        aggregator.record_session([], datetime(2025, 1, 8, 9, 0), -60, [], None, current_streak=0)


def test_summary_display_strings(aggregator):
    summary = aggregator.summarize([_entry(12, 60)], TODAY)
    assert summary.streak_display == "1 day"
    assert summary.sessions_display == "1 session"
    assert summary.minutes_display == "5 min"


def test_flat_scores_are_neutral(aggregator):
    assert classify_trend([70] * 7) is ProgressTrend.NEUTRAL

    summary = aggregator.summarize([_entry(day, 70) for day in range(6, 13)], TODAY)
    assert summary.trend is ProgressTrend.NEUTRAL


def test_stored_inactive_day_keeps_its_score_in_the_average(aggregator):
    assert aggregator.summarize([], TODAY).weekly_average_score == 0

    summary = aggregator.summarize([_entry(12, 45, sessions=0, minutes=0)], TODAY)
    assert summary.weekly_average_score == 45 // 7
    assert not summary.has_enough_data
