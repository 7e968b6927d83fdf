import pytest

from shared.models import ExerciseRecord, ProfileSnapshot
from shared.utils.analytics import RecordingAnalyticsSink
from plan_generation.services import ExerciseCatalog, PlanGenerator
from insight_engine.services.personas import ACTIVE_USER, DESK_WORKER, MODERATE_USER


@pytest.fixture(scope="session")
def catalog():
    return ExerciseCatalog()


@pytest.fixture
def generator(catalog):
    return PlanGenerator(catalog=catalog)


@pytest.fixture
def desk_worker():
    return DESK_WORKER


@pytest.fixture
def active_user():
    return ACTIVE_USER


@pytest.fixture
def moderate_user():
    return MODERATE_USER


@pytest.fixture
def neck_only_profile():
    return ProfileSnapshot(
        focus_areas=["neck"],
        pain_areas=["neck"],
        work_type="desk_home",
        daily_time_minutes=5,
    )


@pytest.fixture
def analytics():
    return RecordingAnalyticsSink()


@pytest.fixture
def make_exercise():
    """Factory for inline catalog records"""

    def _make(exercise_id, **overrides):
        data = {
            "id": exercise_id,
            "name": exercise_id.replace("_", " ").title(),
            "duration_seconds": 30,
            "focus_areas": ["neck"],
            "difficulty": "easy",
            "context_tags": ["desk"],
            "equipment": "none",
        }
        data.update(overrides)
        return ExerciseRecord(**data)

    return _make
