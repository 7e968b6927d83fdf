"""Insight Engine Services"""

from .insight_engine import InsightEngine
from .analysis_engine import AnalysisEngine
from .reminder_copy import ReminderCopyPicker
from .personas import PERSONAS, DESK_WORKER, ACTIVE_USER, MODERATE_USER

__all__ = [
    "InsightEngine",
    "AnalysisEngine",
    "ReminderCopyPicker",
    "PERSONAS",
    "DESK_WORKER",
    "ACTIVE_USER",
    "MODERATE_USER",
]
