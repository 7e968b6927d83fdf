"""Onboarding analysis report models"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator

DEFAULT_DISCLAIMERS = [
    "This assessment is based on your self-reported answers and is not a medical diagnosis.",
    "Consult a healthcare professional if you experience persistent pain or discomfort.",
    "Results are meant to guide your movement routine, not replace professional advice.",
]


class RiskCategory(str, Enum):
    """Analysis score band"""

    LOW = "low"              # 0-33
    MODERATE = "moderate"    # 34-66
    ELEVATED = "elevated"    # 67-100

    @classmethod
    def from_score(cls, score: int) -> "RiskCategory":
        if score <= 33:
            return cls.LOW
        elif score <= 66:
            return cls.MODERATE
        return cls.ELEVATED

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return {
            RiskCategory.LOW: "Your current habits show lower risk factors for desk-related discomfort.",
            RiskCategory.MODERATE: "Your routine has some patterns commonly linked with stiffness and tension.",
            RiskCategory.ELEVATED: "Your answers suggest higher likelihood of desk-related discomfort building up.",
        }[self]


class Severity(str, Enum):
    """Insight card severity, sorted high first"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def sort_order(self) -> int:
        return {Severity.HIGH: 0, Severity.MEDIUM: 1, Severity.LOW: 2}[self]


class AnalysisScore(BaseModel):
    """Load score, higher means more desk-related risk factors"""

    value: int = Field(..., ge=0, le=100)

    @field_validator("value", mode="before")
    @classmethod
    def _clamp(cls, v):
        return max(0, min(100, int(v)))

    @computed_field
    @property
    def category(self) -> RiskCategory:
        return RiskCategory.from_score(self.value)

    @property
    def display_value(self) -> str:
        return str(self.value)


class InsightCard(BaseModel):
    """Card in the analysis report"""

    id: str = Field(..., description="Card ID (stable per card type)")
    title: str
    body: str
    severity: Severity
    action_label: str
    tags: List[str] = Field(default_factory=list)
    icon: str = Field(default="lightbulb.fill", description="SF Symbol name")


class AnalysisReport(BaseModel):
    """One-time onboarding assessment

    Example:
    {
        "summary_headline": "Your habits suggest room for improvement",
        "score": {"value": 72, "category": "elevated"},
        "insights": [...],
        "disclaimers": [...]
    }
    """

    id: Optional[str] = Field(default=None, description="Report ID (assigned by the caller)")
    created_at: Optional[datetime] = Field(default=None)
    summary_headline: str
    summary_body: str
    score: AnalysisScore
    insights: List[InsightCard] = Field(..., min_length=3, max_length=6)
    risk_factors: List[str] = Field(default_factory=list, max_length=8)
    focus_areas: List[str] = Field(default_factory=list)
    recommended_priorities: List[str] = Field(default_factory=list, max_length=4)
    weekly_actions: List[str] = Field(default_factory=list, max_length=4)
    disclaimers: List[str] = Field(
        default_factory=lambda: list(DEFAULT_DISCLAIMERS), min_length=2
    )
