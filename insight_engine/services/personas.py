"""Reference personas

Fixed profiles used for previews, demo requests and tests.
"""

from shared.models import ProfileSnapshot

# 8+ hours sitting, neck pain, morning + midday stiffness, rarely exercises
DESK_WORKER = ProfileSnapshot(
    goal="reduce_stiffness",
    focus_areas=["neck", "upper_back"],
    pain_areas=["neck", "upper_back", "lower_back"],
    posture_issues=["forward_head", "rounded_shoulders"],
    stiffness_times=["morning", "midday"],
    work_type="desk_office",
    sedentary_hours_bucket="more_than_8",
    exercise_frequency="rarely",
    motivation_level="ready",
    daily_time_minutes=5,
    work_start_minutes=540,
    work_end_minutes=1080,
)

# moderate sitting, rounded shoulders, exercises 2-3 times a week
ACTIVE_USER = ProfileSnapshot(
    goal="improve_posture",
    focus_areas=["shoulders", "upper_back"],
    pain_areas=["shoulders"],
    posture_issues=["rounded_shoulders"],
    stiffness_times=["evening"],
    work_type="hybrid",
    sedentary_hours_bucket="four_to_six",
    exercise_frequency="two_three_week",
    motivation_level="very_motivated",
    daily_time_minutes=10,
    work_start_minutes=540,
    work_end_minutes=1020,
)

# 4-6 hours sitting, lower back pain, evening stiffness
MODERATE_USER = ProfileSnapshot(
    goal="reduce_stiffness",
    focus_areas=["lower_back", "hips"],
    pain_areas=["lower_back"],
    posture_issues=["slouching"],
    stiffness_times=["evening"],
    work_type="desk_home",
    sedentary_hours_bucket="four_to_six",
    exercise_frequency="once_week",
    motivation_level="curious",
    daily_time_minutes=5,
    work_start_minutes=480,
    work_end_minutes=1020,
)

PERSONAS = {
    "desk_worker": DESK_WORKER,
    "active_user": ACTIVE_USER,
    "moderate_user": MODERATE_USER,
}
