"""Insight Engine - daily insights and onboarding analysis

Main features:
- 1-3 deterministic daily insights (pain, sitting load, stiffness timing, progress)
- One-time onboarding analysis report (load score, cards, risk factors)
- Reminder copy with an injectable random source
"""

__version__ = "1.0.0"
