"""Gateway Models - app-facing API models"""

from .api import (
    WeeklyPlanRequest,
    DailyPlanRequest,
    DailyScoreRequest,
    DailyScoreResponse,
    ProgressSummaryRequest,
    ProgressSummaryResponse,
    DailyInsightsRequest,
    DailyInsightsResponse,
    AnalysisRequest,
)

__all__ = [
    "WeeklyPlanRequest",
    "DailyPlanRequest",
    "DailyScoreRequest",
    "DailyScoreResponse",
    "ProgressSummaryRequest",
    "ProgressSummaryResponse",
    "DailyInsightsRequest",
    "DailyInsightsResponse",
    "AnalysisRequest",
]
