"""Daily insight copy templates

Placeholders are filled by the insight engine. Bodies stay hedged
("may", "can help", "often", "typically", "commonly") and never make
absolute medical claims.
"""

from typing import Dict, List

from insight_engine.models import InsightCategory, InsightTemplate

T = InsightTemplate

PAIN_TEMPLATES: List[InsightTemplate] = [
    T(
        title="{pain_area} Relief Focus",
        body="Your {pain_area} discomfort may be connected to {sedentary} of sitting. Today's resets "
             "target this area with gentle mobility exercises that can help reduce tension buildup.",
        badge="Personalized",
        cta="Start your first reset",
    ),
    T(
        title="Targeting Your {pain_area}",
        body="Many desk workers experience {pain_area} tension from sustained positioning. Regular "
             "micro-movements can help maintain comfort throughout your workday.",
        cta="See today's plan",
    ),
    T(
        title="{pain_area} Care Today",
        body="Based on your profile, we've included exercises that often help with {pain_area} "
             "discomfort. Even brief movement breaks can make a noticeable difference.",
        badge="For You",
    ),
    T(
        title="Movement for {pain_area}",
        body="Desk-related {pain_area} tension typically responds well to consistent, gentle "
             "stretching. Your plan today includes targeted exercises for this area.",
        cta="View exercises",
    ),
    T(
        title="{pain_area} + Desk Work",
        body="With {sedentary} of daily sitting, your {pain_area} may benefit from movement variety. "
             "Today's resets are designed to address common desk-posture patterns.",
        badge="Customized",
    ),
]

SEDENTARY_TEMPLATES: List[InsightTemplate] = [
    T(
        title="Movement Matters",
        body="Sitting {hours} a day can contribute to muscle tension. Breaking this up with brief "
             "resets {timing} may help maintain comfort and energy.",
        badge="Health Tip",
        cta="Start a quick reset",
    ),
    T(
        title="Break Up Your Sitting",
        body="Research suggests that regular movement breaks during {hours} of sitting can help "
             "reduce stiffness. Your resets are timed {timing}.",
    ),
    T(
        title="Combat Desk Fatigue",
        body="Extended sitting ({hours}) often leads to feeling stiff {timing}. A few minutes of "
             "targeted movement can help reset your body.",
        badge="Did You Know?",
        cta="See how it works",
    ),
    T(
        title="Your Sitting Profile",
        body="With {hours} of daily desk time, micro-movements become especially valuable. We've "
             "scheduled resets for when you typically feel most stiff.",
        badge="Personalized",
    ),
]

STIFFNESS_TEMPLATES: List[InsightTemplate] = [
    T(
        title="{time} Stiffness Pattern",
        body="You mentioned feeling stiffest in the {time}. Resets timed for this window can help, "
             "so today's plan targets {focus} when it matters most.",
        badge="Timed for You",
        cta="Check your schedule",
    ),
    T(
        title="Best Time to Reset",
        body="Since the {time} is when stiffness typically peaks for you, we've prioritized "
             "exercises for {focus} during these hours.",
    ),
    T(
        title="{time} Movement Routine",
        body="Consistent {time} movement can help address the tension buildup you experience. "
             "Today's plan focuses on {focus}.",
        badge="Smart Timing",
        cta="Start now",
    ),
    T(
        title="Timed for Your Body",
        body="Your {time} stiffness pattern may come from accumulated tension during sustained "
             "positioning. Brief resets at this time can help.",
    ),
]

PROGRESS_IMPROVING_TEMPLATES: List[InsightTemplate] = [
    T(
        title="You're Improving!",
        body="Your weekly average is trending upward. Consistent daily resets often make a real "
             "difference. Keep it going!",
        badge="Trending Up",
    ),
    T(
        title="Positive Momentum",
        body="Your scores show improvement over the past week. This kind of consistency often leads "
             "to noticeable changes in how you feel.",
    ),
    T(
        title="Great Progress",
        body="Your movement routine appears to be paying off. An upward trend like this typically "
             "reflects steady daily resets.",
        badge="Keep Going",
    ),
]

PROGRESS_STREAK_TEMPLATES: List[InsightTemplate] = [
    T(
        title="{streak}-Day Streak!",
        body="You've completed resets {streak} days in a row. Consistency like this can help build "
             "lasting movement habits.",
        badge="On Fire",
        cta="Keep the streak alive",
    ),
    T(
        title="Streak Building",
        body="Day {streak} of consistent movement! Your body may already be adapting to this "
             "healthy routine.",
    ),
    T(
        title="Consistency Wins",
        body="A {streak}-day streak shows real commitment. Regular movement often leads to less "
             "stiffness over time.",
        badge="Milestone",
    ),
]

PROGRESS_RESTART_TEMPLATES: List[InsightTemplate] = [
    T(
        title="Fresh Start Today",
        body="Ready to get back into your routine? Even one reset can help you feel better. Every "
             "session counts.",
        badge="New Day",
        cta="Start your first reset",
    ),
    T(
        title="Pick Up Where You Left Off",
        body="It's been a few days since your last reset. No worries, jumping back in with today's "
             "plan can help you find your rhythm again.",
        cta="See today's plan",
    ),
    T(
        title="Let's Get Moving",
        body="Your body may be feeling the effects of recent inactivity. A quick reset can help get "
             "things flowing again.",
        cta="Start now",
    ),
]

PROGRESS_GENERAL_TEMPLATES: List[InsightTemplate] = [
    T(
        title="Building Habits",
        body="You've completed {sessions} sessions this week. Each one can help build your overall "
             "comfort and mobility.",
    ),
    T(
        title="Week in Review",
        body="Your weekly score of {score} typically reflects your movement consistency. Keep "
             "building on this foundation.",
    ),
]

PROGRESS_TEMPLATES: List[InsightTemplate] = (
    PROGRESS_IMPROVING_TEMPLATES
    + PROGRESS_STREAK_TEMPLATES
    + PROGRESS_RESTART_TEMPLATES
    + PROGRESS_GENERAL_TEMPLATES
)

PLAN_TEMPLATES: List[InsightTemplate] = [
    T(
        title="Today's Focus",
        body="You have {session_count} resets planned today, targeting {focus}. Each session is "
             "designed around patterns desk workers commonly experience.",
        badge="Your Plan",
        cta="View full plan",
    ),
    T(
        title="Personalized Sessions",
        body="Today's {session_count} resets focus on {focus}, the areas you identified during "
             "setup. Short breaks like these can help you stay comfortable.",
    ),
    T(
        title="Made for You",
        body="Based on your profile, today targets {focus} with {session_count} quick sessions. "
             "Spreading movement across the day often works better than one long session.",
        badge="Custom Plan",
        cta="See the exercises",
    ),
    T(
        title="Your Daily Resets",
        body="We've scheduled {session_count} movement breaks that can help with {focus}. Short, "
             "targeted sessions that fit your day.",
    ),
]

MOTIVATIONAL_TEMPLATES: List[InsightTemplate] = [
    T(
        title="Small Steps, Big Impact",
        body="Just 5 minutes of movement can help shift how your body feels. Your next reset is "
             "ready when you are.",
        badge="Motivation",
        cta="Start a quick reset",
    ),
    T(
        title="Your Body Will Thank You",
        body="Taking time for movement is an investment in your comfort. A few minutes now can help "
             "you feel better for hours.",
    ),
    T(
        title="Every Reset Counts",
        body="Whether you're feeling stiff or not, regular movement can help maintain flexibility. "
             "Keep building the habit.",
        badge="Daily Tip",
    ),
    T(
        title="Move for Energy",
        body="Feeling sluggish? A brief movement break can help boost circulation and alertness. "
             "Give it a try.",
        cta="Quick reset",
    ),
    T(
        title="Consistency Over Intensity",
        body="Short, daily movement sessions often have more impact than occasional long workouts. "
             "You're on the right track.",
        badge="Pro Tip",
    ),
    T(
        title="Break the Cycle",
        body="Sitting for long periods commonly creates patterns of tension. Regular resets can "
             "help break this cycle before discomfort builds.",
    ),
]

RECOVERY_TEMPLATES: List[InsightTemplate] = [
    T(
        title="Rest is Progress",
        body="Your muscles adapt and recover between sessions. If you're feeling sore, lighter "
             "movement today can help you stay mobile.",
        badge="Recovery",
    ),
    T(
        title="Listen to Your Body",
        body="Some days call for gentle movement rather than intense stretching. Easing off when "
             "you feel sore is often the smarter choice.",
        cta="Try a gentle reset",
    ),
    T(
        title="Active Recovery",
        body="Light movement on rest days can help maintain flexibility without overtaxing your "
             "body. Balance is key.",
        badge="Wellness Tip",
    ),
    T(
        title="Gentle Movement Day",
        body="Consider today a maintenance day. Even minimal movement can help keep joints mobile "
             "and muscles happy.",
    ),
]

WORK_ENVIRONMENT_TEMPLATES: List[InsightTemplate] = [
    T(
        title="Desk Posture Check",
        body="Long days at your {work_type} setup often lead to subtle posture shifts. Your resets "
             "can help counteract these patterns.",
        badge="Workspace Tip",
    ),
    T(
        title="Work Smart, Move Often",
        body="With your {work_type} setup, sustained positions are part of your day. Strategic "
             "movement breaks can help maintain comfort.",
    ),
    T(
        title="Environment Matters",
        body="Whether you're at your {work_type} setup or elsewhere, brief movement resets can help "
             "your body adapt to sustained positions.",
        badge="Did You Know?",
    ),
    T(
        title="Desk-Friendly Exercises",
        body="Today's resets are designed for your {work_type} setup. Discreet movements like these "
             "can typically be done anywhere.",
        badge="Practical",
        cta="View exercises",
    ),
]

TEMPLATES_BY_CATEGORY: Dict[InsightCategory, List[InsightTemplate]] = {
    InsightCategory.PAIN_SPECIFIC: PAIN_TEMPLATES,
    InsightCategory.SEDENTARY_RISK: SEDENTARY_TEMPLATES,
    InsightCategory.STIFFNESS_TIMING: STIFFNESS_TEMPLATES,
    InsightCategory.PROGRESS_TIP: PROGRESS_TEMPLATES,
    InsightCategory.PLAN_TIP: PLAN_TEMPLATES,
    InsightCategory.MOTIVATIONAL: MOTIVATIONAL_TEMPLATES,
    InsightCategory.RECOVERY: RECOVERY_TEMPLATES,
    InsightCategory.WORK_ENVIRONMENT: WORK_ENVIRONMENT_TEMPLATES,
}


def all_templates() -> List[InsightTemplate]:
    return [template for templates in TEMPLATES_BY_CATEGORY.values() for template in templates]
