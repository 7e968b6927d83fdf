from shared.models import FocusArea, PainArea, ProfileSnapshot, StiffnessTime


def test_scalar_tag_list_is_treated_as_absent():
    profile = ProfileSnapshot.model_validate({"focus_areas": 5, "pain_areas": {"neck": 1}})

    assert profile.focus_areas == []
    assert profile.pain_areas == []


def test_single_string_is_wrapped_in_a_list():
    profile = ProfileSnapshot.model_validate({"focus_areas": "neck", "stiffness_times": "evening"})

    assert profile.focus_areas == [FocusArea.NECK]
    assert profile.stiffness_times == [StiffnessTime.EVENING]


def test_unknown_and_duplicate_tags_are_dropped():
    profile = ProfileSnapshot.model_validate({"pain_areas": ["neck", "elbows", "neck", None]})

    assert profile.pain_areas == [PainArea.NECK]


def test_plan_descriptor_with_several_stiffness_times(desk_worker):
    assert desk_worker.plan_descriptor == "Desk work • All-day stiffness • Neck + Upper Back"


def test_plan_descriptor_with_one_stiffness_time(active_user):
    assert active_user.plan_descriptor == "Hybrid work • Evening stiffness • Shoulders + Upper Back"


def test_plan_descriptor_keeps_top_two_focus_areas():
    profile = ProfileSnapshot(work_type="mixed", focus_areas=["hips", "neck", "wrists"])

    assert profile.plan_descriptor == "Active work • Hips + Neck"


def test_empty_profile_has_empty_descriptor():
    assert ProfileSnapshot().plan_descriptor == ""
