"""Insight Engine Models"""

from .insight import DailyInsight, InsightCategory, InsightTemplate
from .report import (
    DEFAULT_DISCLAIMERS,
    AnalysisReport,
    AnalysisScore,
    InsightCard,
    RiskCategory,
    Severity,
)

__all__ = [
    "DailyInsight",
    "InsightCategory",
    "InsightTemplate",
    "DEFAULT_DISCLAIMERS",
    "AnalysisReport",
    "AnalysisScore",
    "InsightCard",
    "RiskCategory",
    "Severity",
]
