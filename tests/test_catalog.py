import json

import pytest
from pydantic import ValidationError

from shared.models import FocusArea, SessionType
from plan_generation.models import MicroSession
from plan_generation.services import ExerciseCatalog


def test_bundled_catalog_loads(catalog):
    assert catalog.version == "1.0.0"
    assert len(catalog) == 33
    assert catalog.all()[0].id == "chin_tucks"


def test_get_and_get_many_skip_unknown(catalog):
    assert catalog.get("no_such_exercise") is None

    resolved = catalog.get_many(["shoulder_rolls", "ghost", "chin_tucks"])
    assert [ex.id for ex in resolved] == ["shoulder_rolls", "chin_tucks"]


def test_resolve_tolerates_dangling_ids(catalog):
    session = MicroSession(
        id="s1",
        title="Morning Reset",
        session_type=SessionType.MORNING,
        exercise_ids=["chin_tucks", "retired_exercise"],
        duration_seconds=60,
    )
    assert [ex.id for ex in catalog.resolve(session)] == ["chin_tucks"]
    assert catalog.resolved_duration_seconds(session) == 30


def test_position_follows_catalog_order(catalog):
    assert catalog.position("chin_tucks") == 0
    assert catalog.position("neck_side_stretch") == 1
    assert catalog.position("unknown") == len(catalog)


def test_for_focus_areas(catalog):
    wrists = catalog.for_focus_areas([FocusArea.WRISTS])
    assert wrists
    assert all(FocusArea.WRISTS in ex.focus_areas for ex in wrists)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ExerciseCatalog(path=tmp_path / "missing.json")


def test_load_from_file_with_unknown_tags(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({
        "version": "2.0.0",
        "exercises": [
            {
                "id": "elbow_thing",
                "name": "Elbow Thing",
                "duration_seconds": 30,
                "focus_areas": ["neck", "elbows"],
                "difficulty": "extreme",
                "context_tags": ["desk", "underwater"],
            }
        ],
    }))

    catalog = ExerciseCatalog(path=path)
    exercise = catalog.get("elbow_thing")

    assert catalog.version == "2.0.0"
    assert exercise.focus_areas == [FocusArea.NECK]
    assert exercise.difficulty.value == "easy"
    assert [tag.value for tag in exercise.context_tags] == ["desk"]


def test_duplicate_ids_keep_first(make_exercise):
    first = make_exercise("a", duration_seconds=30)
    duplicate = make_exercise("a", duration_seconds=45)
    catalog = ExerciseCatalog(exercises=[first, duplicate, make_exercise("b")], version="t")

    assert len(catalog) == 2
    assert catalog.get("a").duration_seconds == 30
    assert catalog.position("b") == 1


def test_empty_catalog_is_valid():
    catalog = ExerciseCatalog(exercises=[])
    assert len(catalog) == 0
    assert catalog.all() == []


def test_desk_friendly_flag(catalog):
    assert catalog.get("chin_tucks").is_desk_friendly
    assert not catalog.get("doorway_chest_stretch").is_desk_friendly
    assert not catalog.get("wall_sit").is_desk_friendly


def test_record_is_frozen(make_exercise):
    exercise = make_exercise("a")
    with pytest.raises(ValidationError):
        exercise.duration_seconds = 90
