"""Progress Tracking - scores, streaks and weekly summaries

Main features:
- Daily score (0-100) with display bands
- Streak updates and milestone events
- Weekly summary with trend and wins
"""

__version__ = "1.0.0"
