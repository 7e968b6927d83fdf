from datetime import date, datetime

import pytest

from plan_generation.services import ProgressionService

WEEK_START = date(2025, 1, 6)


@pytest.fixture
def service(generator):
    return ProgressionService(generator=generator)


@pytest.fixture
def plan(generator, desk_worker):
    return generator.generate_weekly_plan(desk_worker, WEEK_START).plan


def _complete(service, plan, count):
    """Complete sessions in order, Monday first"""
    done = 0
    for day in plan.daily_plans:
        for session in day.sessions:
            if done == count:
                return plan
            plan = service.mark_session_completed(
                plan, day.day_index, session.id, datetime(2025, 1, 6 + day.day_index, 12, 0)
            )
            done += 1
    return plan


def test_mark_session_completed(service, plan):
    session = plan.daily_plans[0].sessions[0]
    updated = service.mark_session_completed(plan, 0, session.id, datetime(2025, 1, 6, 9, 30))

    assert updated.completed_sessions_this_week == 1
    assert updated.daily_plans[0].sessions[0].is_completed
    assert updated.daily_plans[0].sessions[0].completed_at == datetime(2025, 1, 6, 9, 30)
    # the input plan is not modified
    assert not plan.daily_plans[0].sessions[0].is_completed
    assert plan.completed_sessions_this_week == 0


def test_mark_session_completed_is_idempotent(service, plan):
    session_id = plan.daily_plans[0].sessions[0].id
    once = service.mark_session_completed(plan, 0, session_id, datetime(2025, 1, 6, 9, 30))
    twice = service.mark_session_completed(once, 0, session_id, datetime(2025, 1, 6, 10, 0))

    assert twice.completed_sessions_this_week == 1
    assert twice.daily_plans[0].sessions[0].completed_at == datetime(2025, 1, 6, 9, 30)


def test_mark_session_completed_rejects_unknown_targets(service, plan):
    with pytest.raises(ValueError):
        service.mark_session_completed(plan, 9, "x", datetime(2025, 1, 6))
    with pytest.raises(ValueError):
        service.mark_session_completed(plan, 0, "no-such-session", datetime(2025, 1, 6))


def test_progression_applies_after_threshold(service, plan):
    plan = _complete(service, plan, 5)
    result = service.apply_progression(plan, today=date(2025, 1, 8))

    assert result.applied
    assert result.regenerated_days == [3, 4, 5, 6]

    updated = result.plan
    assert updated.version == 2
    assert updated.progression_applied
    for index in result.regenerated_days:
        day = updated.daily_plans[index]
        assert day.id.endswith("-v2")
        for session in day.sessions:
            assert session.id.endswith("-v2")
            assert session.duration_seconds >= 180

    # history and today are untouched
    for index in range(3):
        assert updated.daily_plans[index] == plan.daily_plans[index]


def test_progression_applies_once_per_week(service, plan):
    plan = _complete(service, plan, 5)
    applied = service.apply_progression(plan, today=date(2025, 1, 8)).plan

    again = service.apply_progression(applied, today=date(2025, 1, 9))
    assert again.status == "already_applied"
    assert again.plan == applied


def test_progression_needs_enough_sessions(service, plan):
    plan = _complete(service, plan, 4)
    result = service.apply_progression(plan, today=date(2025, 1, 8))

    assert result.status == "not_enough_sessions"
    assert result.sessions_remaining == 1
    assert result.message == "1 more session to unlock the next level."
    assert result.plan == plan


def test_progression_skips_days_with_completed_sessions(service, plan):
    plan = _complete(service, plan, 5)
    # a session already done later in the week
    later = plan.daily_plans[5].sessions[0].id
    plan = service.mark_session_completed(plan, 5, later, datetime(2025, 1, 11, 8, 0))

    result = service.apply_progression(plan, today=date(2025, 1, 8))
    assert result.regenerated_days == [3, 4, 6]
    assert result.plan.daily_plans[5] == plan.daily_plans[5]


def test_progression_on_last_day_regenerates_nothing(service, plan):
    plan = _complete(service, plan, 5)
    result = service.apply_progression(plan, today=date(2025, 1, 12))

    assert result.applied
    assert result.regenerated_days == []
    assert result.plan.progression_applied


def test_should_apply_progression(plan):
    assert not plan.should_apply_progression()
    ready = plan.model_copy(update={"completed_sessions_this_week": 5})
    assert ready.should_apply_progression()
    assert not ready.model_copy(update={"progression_applied": True}).should_apply_progression()
