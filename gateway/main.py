"""Gateway Service - desk mobility API server

Usage:
    python -m gateway.main

Port: 8000 (default)
"""

from contextlib import asynccontextmanager
from datetime import date, datetime, timezone
import os

from dotenv import load_dotenv
load_dotenv(override=True)

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from shared.utils.logging import get_logger
from plan_generation.models import DailyPlan, PlanGenerationResult
from plan_generation.services import ExerciseCatalog, PlanGenerator
from progress_tracking.models import ScoreDisplayCategory
from progress_tracking.services import ProgressAggregator, ScoreEngine
from insight_engine.models import AnalysisReport
from insight_engine.services import AnalysisEngine, InsightEngine
from gateway.models import (
    AnalysisRequest,
    DailyInsightsRequest,
    DailyInsightsResponse,
    DailyPlanRequest,
    DailyScoreRequest,
    DailyScoreResponse,
    ProgressSummaryRequest,
    ProgressSummaryResponse,
    WeeklyPlanRequest,
)

logger = get_logger("gateway")


class EngineServices:
    """Stateless services shared by every request (catalog loaded once)"""

    def __init__(self):
        self.catalog = ExerciseCatalog()
        self.plan_generator = PlanGenerator(catalog=self.catalog)
        self.score_engine = ScoreEngine()
        self.progress_aggregator = ProgressAggregator(score_engine=self.score_engine)
        self.insight_engine = InsightEngine()
        self.analysis_engine = AnalysisEngine()


services: EngineServices = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """App lifecycle"""
    global services
    logger.info("Gateway Service starting...")
    services = EngineServices()
    logger.info(
        f"Gateway Service ready (catalog v{services.catalog.version}, "
        f"{len(services.catalog)} exercises)"
    )
    yield
    logger.info("Gateway Service stopped")


app = FastAPI(
    title="Desk Mobility Gateway API",
    description="Plans, scores, progress summaries, daily insights and onboarding analysis",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_payload(error: Exception, hint: str = None) -> dict:
    """Error response payload"""
    return {
        "error": str(error),
        "type": type(error).__name__,
        "hint": hint,
    }


def _server_error(e: Exception) -> HTTPException:
    logger.exception(f"Unexpected error: {e}")
    return HTTPException(
        status_code=500,
        detail=_error_payload(e, hint="Check the exercise catalog file and server logs."),
    )


@app.get("/health")
async def health_check():
    """Health check"""
    return {
        "status": "healthy",
        "service": "gateway",
        "catalog_version": services.catalog.version if services else None,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.post("/api/v1/plans/weekly", response_model=PlanGenerationResult)
async def generate_weekly_plan(request: WeeklyPlanRequest):
    """7-day plan for the week containing week_start"""
    try:
        week_start = PlanGenerator.week_start_for(request.week_start or date.today())
        return services.plan_generator.generate_weekly_plan(request.profile, week_start)
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail=_error_payload(e, hint="Check profile fields and week_start."),
        )
    except Exception as e:
        raise _server_error(e)


@app.post("/api/v1/plans/daily", response_model=DailyPlan)
async def generate_daily_plan(request: DailyPlanRequest):
    """Single-day plan (morning, midday, afternoon)"""
    try:
        return services.plan_generator.generate_daily_plan(request.profile, request.plan_date)
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail=_error_payload(e, hint="Check profile fields and plan_date."),
        )
    except Exception as e:
        raise _server_error(e)


@app.post("/api/v1/scores/daily", response_model=DailyScoreResponse)
async def calculate_daily_score(request: DailyScoreRequest):
    """Score one day of activity"""
    engine = services.score_engine
    try:
        entry = engine.calculate_daily_score(
            entry_date=request.entry_date,
            sessions_completed=request.sessions_completed,
            minutes_completed=request.minutes_completed,
            focus_areas=request.focus_areas,
            stiffness_times_triggered=request.stiffness_times_triggered,
            profile=request.profile,
            current_streak=request.current_streak,
        )
        projected = engine.projected_score_after_session(
            entry.score, request.sessions_completed, request.current_streak
        )
        user_times = set(request.profile.stiffness_times) if request.profile else set()
        matched = [t for t in entry.stiffness_times_triggered if t in user_times]
        return DailyScoreResponse(
            entry=entry,
            category=ScoreDisplayCategory.from_score(entry.score),
            breakdown=engine.explain_score(
                request.sessions_completed,
                request.minutes_completed,
                request.current_streak,
                len(matched),
            ),
            projected_score=projected,
            message=engine.motivational_message(projected - entry.score),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail=_error_payload(e, hint="Sessions, minutes and streak must be non-negative."),
        )
    except Exception as e:
        raise _server_error(e)


@app.post("/api/v1/progress/summary", response_model=ProgressSummaryResponse)
async def summarize_progress(request: ProgressSummaryRequest):
    """Weekly summary from the caller's daily entries"""
    try:
        summary = services.progress_aggregator.summarize(
            request.entries, request.today, streak_days=request.streak_days
        )
        return ProgressSummaryResponse(
            summary=summary,
            trend=summary.trend,
            has_enough_data=summary.has_enough_data,
            wins=summary.wins,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail=_error_payload(e, hint="Check entry dates and counters."),
        )
    except Exception as e:
        raise _server_error(e)


@app.post("/api/v1/insights/daily", response_model=DailyInsightsResponse)
async def daily_insights(request: DailyInsightsRequest):
    """1-3 insights for on_date"""
    try:
        insights = services.insight_engine.insights(
            request.profile,
            request.progress_summary,
            request.todays_plan,
            request.on_date,
        )
        return DailyInsightsResponse(insights=insights)
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail=_error_payload(e, hint="Check profile, summary and plan fields."),
        )
    except Exception as e:
        raise _server_error(e)


@app.post("/api/v1/analysis", response_model=AnalysisReport)
async def analyze_profile(request: AnalysisRequest):
    """Onboarding analysis report"""
    try:
        return services.analysis_engine.analyze(
            request.profile,
            report_id=request.report_id,
            created_at=request.created_at,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail=_error_payload(e, hint="Check profile fields."),
        )
    except Exception as e:
        raise _server_error(e)


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("GATEWAY_HOST", "0.0.0.0")
    port = int(os.getenv("GATEWAY_PORT", "8000"))

    logger.info(f"Gateway Service starting: http://{host}:{port}")
    uvicorn.run(
        "gateway.main:app",
        host=host,
        port=port,
        reload=True,
    )
