import pytest
from fastapi.testclient import TestClient

from gateway.main import app
from gateway.models.api import PROFILE_EXAMPLE


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["catalog_version"] == "1.0.0"


def test_weekly_plan(client):
    response = client.post(
        "/api/v1/plans/weekly",
        json={"profile": PROFILE_EXAMPLE, "week_start": "2025-01-08"},
    )

    assert response.status_code == 200
    plan = response.json()["plan"]
    assert plan["week_start_date"] == "2025-01-06"
    assert len(plan["daily_plans"]) == 7
    assert all(len(day["sessions"]) == 2 for day in plan["daily_plans"])
    assert len(response.json()["why_this_fits"]) <= 3


def test_daily_plan(client):
    response = client.post(
        "/api/v1/plans/daily",
        json={"profile": PROFILE_EXAMPLE, "plan_date": "2025-01-08"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["plan_date"] == "2025-01-08"
    assert [s["session_type"] for s in body["sessions"]] == ["morning", "midday", "afternoon"]


def test_daily_score_for_inactive_day(client):
    response = client.post("/api/v1/scores/daily", json={"entry_date": "2025-01-08"})

    assert response.status_code == 200
    body = response.json()
    assert body["entry"]["score"] == 45
    assert body["category"] == "starting"
    assert body["breakdown"] == "Base: 45"
    assert body["projected_score"] == 53


def test_daily_score_with_profile(client):
    response = client.post(
        "/api/v1/scores/daily",
        json={
            "entry_date": "2025-01-08",
            "sessions_completed": 2,
            "minutes_completed": 6,
            "current_streak": 2,
            "stiffness_times_triggered": ["morning"],
            "profile": PROFILE_EXAMPLE,
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["entry"]["score"] == 45 + 16 + 6 + 4 + 3
    assert body["breakdown"].endswith("Timing: +3")


def test_breakdown_ignores_unmatched_stiffness_times(client):
    response = client.post(
        "/api/v1/scores/daily",
        json={"entry_date": "2025-01-08", "sessions_completed": 1, "stiffness_times_triggered": ["evening"]},
    )

    assert response.status_code == 200
    assert "Timing" not in response.json()["breakdown"]


def test_progress_summary_without_entries(client):
    response = client.post("/api/v1/progress/summary", json={"today": "2025-01-12"})

    assert response.status_code == 200
    body = response.json()
    assert body["has_enough_data"] is False
    assert body["wins"] == []
    assert body["trend"] == "neutral"
    assert len(body["summary"]["last_7_days"]) == 7


def test_daily_insights(client):
    response = client.post(
        "/api/v1/insights/daily",
        json={"on_date": "2025-01-08", "profile": PROFILE_EXAMPLE},
    )

    assert response.status_code == 200
    insights = response.json()["insights"]
    assert 1 <= len(insights) <= 3
    assert insights[0]["category"] == "pain_specific"
    assert insights[0]["generated_on"] == "2025-01-08"


def test_analysis(client):
    response = client.post(
        "/api/v1/analysis",
        json={"profile": PROFILE_EXAMPLE, "report_id": "r-42"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "r-42"
    assert body["score"]["category"] in {"low", "moderate", "elevated"}
    assert 3 <= len(body["insights"]) <= 6


def test_invalid_profile_is_rejected(client):
    profile = dict(PROFILE_EXAMPLE, daily_time_minutes=-1)
    response = client.post("/api/v1/plans/weekly", json={"profile": profile})

    assert response.status_code == 422


def test_unknown_tags_are_ignored(client):
    profile = dict(PROFILE_EXAMPLE, focus_areas=["neck", "elbows"])
    response = client.post(
        "/api/v1/plans/daily",
        json={"profile": profile, "plan_date": "2025-01-08"},
    )
    assert response.status_code == 200


def test_malformed_tag_list_is_treated_as_absent(client):
    response = client.post(
        "/api/v1/plans/weekly",
        json={"profile": {"focus_areas": 5}, "week_start": "2025-01-08"},
    )

    assert response.status_code == 200
    assert response.json()["plan"]["profile_snapshot"]["focus_areas"] == []
