"""Plan Generation Services"""

from .catalog import ExerciseCatalog
from .relevance import RelevanceScorer
from .plan_generator import PlanGenerator
from .progression import ProgressionService

__all__ = [
    "ExerciseCatalog",
    "RelevanceScorer",
    "PlanGenerator",
    "ProgressionService",
]
