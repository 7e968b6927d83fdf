from datetime import date

import pytest
from pydantic import ValidationError

from plan_generation.models import WeeklyPlan
from insight_engine.models import AnalysisReport
from insight_engine.services import AnalysisEngine


def test_weekly_plan_json_round_trip(generator, desk_worker):
    plan = generator.generate_weekly_plan(desk_worker, date(2025, 1, 6)).plan

    restored = WeeklyPlan.model_validate_json(plan.model_dump_json())

    assert restored == plan
    assert restored.schema_version == 1
    assert restored.profile_snapshot.stable_hash() == desk_worker.stable_hash()


def test_weekly_plan_enums_serialize_as_raw_values(generator, desk_worker):
    plan = generator.generate_weekly_plan(desk_worker, date(2025, 1, 6)).plan
    data = plan.model_dump(mode="json")

    assert data["week_start_date"] == "2025-01-06"
    assert data["daily_plans"][0]["sessions"][0]["session_type"] == "morning"
    assert data["profile_snapshot"]["work_type"] == "desk_office"


def test_analysis_report_json_round_trip(desk_worker):
    report = AnalysisEngine().analyze(desk_worker, report_id="r-1")
    data = report.model_dump(mode="json")

    assert data["score"] == {"value": 80, "category": "elevated"}

    restored = AnalysisReport.model_validate_json(report.model_dump_json())
    assert restored == report


def test_analysis_report_requires_both_disclaimers(desk_worker):
    data = AnalysisEngine().analyze(desk_worker, report_id="r-1").model_dump(mode="json")
    data["disclaimers"] = data["disclaimers"][:1]

    with pytest.raises(ValidationError):
        AnalysisReport.model_validate(data)
