"""Weekly win badges

Each rule is independent, several wins may fire in the same week.
"""

from typing import List, Sequence

from progress_tracking.models import ProgressTrend, ProgressWin


class WinGenerator:
    """Threshold rules over the weekly summary"""

    def generate(
        self,
        streak_days: int,
        weekly_sessions_completed: int,
        weekly_average_score: int,
        trend: ProgressTrend,
        focus_areas_covered: Sequence,
    ) -> List[ProgressWin]:
        wins: List[ProgressWin] = []

        # Streak
        if streak_days >= 7:
            wins.append(ProgressWin(
                title="Week Warrior",
                description=f"{streak_days} days consistent",
                icon="flame.fill",
            ))
        elif streak_days >= 3:
            wins.append(ProgressWin(
                title="Building Momentum",
                description=f"{streak_days} days in a row",
                icon="bolt.fill",
            ))

        # Sessions
        if weekly_sessions_completed >= 15:
            wins.append(ProgressWin(
                title="Reset Champion",
                description=f"{weekly_sessions_completed} sessions this week",
                icon="trophy.fill",
            ))
        elif weekly_sessions_completed >= 7:
            wins.append(ProgressWin(
                title="Active Week",
                description=f"{weekly_sessions_completed} sessions completed",
                icon="checkmark.seal.fill",
            ))

        # Score
        if weekly_average_score >= 80:
            wins.append(ProgressWin(
                title="High Performer",
                description="Weekly score above 80",
                icon="star.fill",
            ))

        # Trend
        if trend is ProgressTrend.IMPROVING:
            wins.append(ProgressWin(
                title="On the Rise",
                description="Your scores are improving",
                icon="arrow.up.circle.fill",
            ))

        # Focus area coverage
        covered = len(set(focus_areas_covered))
        if covered >= 4:
            wins.append(ProgressWin(
                title="Well-Rounded",
                description=f"Targeting {covered} focus areas",
                icon="circle.hexagongrid.fill",
            ))

        return wins
