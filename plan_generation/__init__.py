"""Plan Generation - desk mobility plans

Main features:
- Versioned exercise catalog
- Relevance scoring (focus, pain, posture, stiffness timing)
- 7-day plan, legacy single-day plan, onboarding starter reset
- Mid-week progression (once per week)
"""

__version__ = "1.0.0"
