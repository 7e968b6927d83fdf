from shared.models import FocusArea, PainArea, PostureIssue, StiffnessTime
from plan_generation.services import RelevanceScorer


def test_focus_overlap_three_points_each(make_exercise):
    exercise = make_exercise("a", focus_areas=["neck", "shoulders"], context_tags=[])
    scorer = RelevanceScorer()

    assert scorer.score(exercise, [FocusArea.NECK]) == 3
    assert scorer.score(exercise, [FocusArea.NECK, FocusArea.SHOULDERS]) == 6
    assert scorer.score(exercise, [FocusArea.HIPS]) == 0


def test_pain_areas_weigh_four(make_exercise):
    exercise = make_exercise("a", focus_areas=["neck", "shoulders"], context_tags=[])
    scorer = RelevanceScorer()

    # headaches map to neck and shoulders
    assert scorer.score(exercise, [], pain_areas=[PainArea.HEADACHES]) == 8
    assert scorer.score(exercise, [], pain_areas=[PainArea.NECK]) == 4


def test_posture_issue_tags_weigh_four(make_exercise):
    exercise = make_exercise(
        "a", focus_areas=[], issue_tags=["forward_head", "text_neck"], context_tags=[]
    )
    scorer = RelevanceScorer()

    assert scorer.score(exercise, [], posture_issues=[PostureIssue.FORWARD_HEAD]) == 4
    assert scorer.score(exercise, [], posture_issues=[PostureIssue.TEXT_NECK]) == 8


def test_stiffness_time_two_points_per_matching_time(make_exercise):
    exercise = make_exercise("a", focus_areas=[], context_tags=["morning", "evening"])
    scorer = RelevanceScorer()

    assert scorer.score(exercise, [], stiffness_times=[StiffnessTime.MORNING]) == 2
    assert scorer.score(
        exercise, [], stiffness_times=[StiffnessTime.MORNING, StiffnessTime.EVENING]
    ) == 4
    assert scorer.score(exercise, [], stiffness_times=[StiffnessTime.MIDDAY]) == 0


def test_components_add_up(make_exercise):
    exercise = make_exercise(
        "a",
        focus_areas=["neck"],
        issue_tags=["forward_head"],
        context_tags=["morning"],
    )
    score = RelevanceScorer().score(
        exercise,
        [FocusArea.NECK],
        pain_areas=[PainArea.NECK],
        posture_issues=[PostureIssue.FORWARD_HEAD],
        stiffness_times=[StiffnessTime.MORNING],
    )
    assert score == 3 + 4 + 4 + 2


def test_score_for_profile_uses_profile_focus(make_exercise, neck_only_profile):
    exercise = make_exercise("a", focus_areas=["neck"], context_tags=[])
    assert RelevanceScorer().score_for_profile(exercise, neck_only_profile) == 3 + 4
