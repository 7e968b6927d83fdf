"""Relevance scoring

Weighted tag overlap between one exercise and the user's profile.
Weights are fixed so stored plans stay reproducible.
"""

from typing import Iterable, Set

from shared.models import (
    ExerciseContextTag,
    ExerciseIssueTag,
    ExerciseRecord,
    FocusArea,
    PainArea,
    PostureIssue,
    StiffnessTime,
)

FOCUS_MATCH_POINTS = 3
PAIN_MATCH_POINTS = 4
POSTURE_MATCH_POINTS = 4
STIFFNESS_MATCH_POINTS = 2


class RelevanceScorer:
    """Stateless exercise-to-profile scorer"""

    def score(
        self,
        exercise: ExerciseRecord,
        target_focus_areas: Iterable[FocusArea],
        pain_areas: Iterable[PainArea] = (),
        posture_issues: Iterable[PostureIssue] = (),
        stiffness_times: Iterable[StiffnessTime] = (),
    ) -> int:
        """
        Relevance of an exercise for a profile

        Args:
            exercise: catalog exercise
            target_focus_areas: focus areas of the day or profile
            pain_areas: reported pain areas
            posture_issues: reported posture issues
            stiffness_times: times of day the user feels stiff

        Returns:
            non-negative score, unbounded above
        """
        exercise_areas = set(exercise.focus_areas)
        total = 0

        # 1. focus overlap
        total += len(exercise_areas & set(target_focus_areas)) * FOCUS_MATCH_POINTS

        # 2. pain areas, weighted above stated focus
        pain_focus: Set[FocusArea] = set()
        for pain in pain_areas:
            pain_focus.update(pain.related_focus_areas)
        total += len(exercise_areas & pain_focus) * PAIN_MATCH_POINTS

        # 3. posture issue tags
        issue_tags: Set[ExerciseIssueTag] = set()
        for issue in posture_issues:
            issue_tags.update(issue.exercise_issue_tags)
        total += len(set(exercise.issue_tags) & issue_tags) * POSTURE_MATCH_POINTS

        # 4. one match per user stiffness time
        context_tags = set(exercise.context_tags)
        for time in set(stiffness_times):
            if ExerciseContextTag(time.value) in context_tags:
                total += STIFFNESS_MATCH_POINTS

        return total

    def score_for_profile(self, exercise: ExerciseRecord, profile, target_focus_areas=None) -> int:
        """Score against a ProfileSnapshot (focus defaults to the profile's)"""
        return self.score(
            exercise,
            target_focus_areas if target_focus_areas is not None else profile.focus_areas,
            profile.pain_areas,
            profile.posture_issues,
            profile.stiffness_times,
        )
