"""Daily insight models"""

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class InsightCategory(str, Enum):
    """Daily insight category"""

    PAIN_SPECIFIC = "pain_specific"
    SEDENTARY_RISK = "sedentary_risk"
    STIFFNESS_TIMING = "stiffness_timing"
    PROGRESS_TIP = "progress_tip"
    PLAN_TIP = "plan_tip"
    MOTIVATIONAL = "motivational"
    RECOVERY = "recovery"
    WORK_ENVIRONMENT = "work_environment"

    @property
    def display_name(self) -> str:
        return {
            InsightCategory.PAIN_SPECIFIC: "Pain Relief",
            InsightCategory.SEDENTARY_RISK: "Movement",
            InsightCategory.STIFFNESS_TIMING: "Timing",
            InsightCategory.PROGRESS_TIP: "Progress",
            InsightCategory.PLAN_TIP: "Today's Focus",
            InsightCategory.MOTIVATIONAL: "Motivation",
            InsightCategory.RECOVERY: "Recovery",
            InsightCategory.WORK_ENVIRONMENT: "Work Wellness",
        }[self]

    @property
    def icon(self) -> str:
        return {
            InsightCategory.PAIN_SPECIFIC: "bandage",
            InsightCategory.SEDENTARY_RISK: "figure.walk",
            InsightCategory.STIFFNESS_TIMING: "clock",
            InsightCategory.PROGRESS_TIP: "chart.line.uptrend.xyaxis",
            InsightCategory.PLAN_TIP: "calendar",
            InsightCategory.MOTIVATIONAL: "sparkles",
            InsightCategory.RECOVERY: "moon.stars",
            InsightCategory.WORK_ENVIRONMENT: "desktopcomputer",
        }[self]


class InsightTemplate(BaseModel):
    """Copy template with {placeholder} fields"""

    model_config = ConfigDict(frozen=True)

    title: str
    body: str
    badge: Optional[str] = None
    cta: Optional[str] = None


class DailyInsight(BaseModel):
    """Short personalized message shown on the home screen"""

    id: str = Field(..., description="Deterministic insight ID")
    category: InsightCategory
    title: str
    body: str
    badge: Optional[str] = None
    cta_text: Optional[str] = None
    debug_tags: List[str] = Field(default_factory=list)
    generated_on: date = Field(..., description="Day the insight was generated for")
