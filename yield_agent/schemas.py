"""Pydantic models and enums for the Yield Agent planning API."""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RiskTolerance(str, Enum):
    """Enumerate the supported risk bands."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def order(self) -> int:
        """Return the band position used to measure adjacency."""
        band_order = {
            RiskTolerance.LOW: 0,
            RiskTolerance.MEDIUM: 1,
            RiskTolerance.HIGH: 2,
        }
        return band_order[self]


class Preference(str, Enum):
    """Enumerate the kinds of work a user can prefer."""

    SERVICE = "service"
    PRODUCT = "product"
    AUTOMATION = "automation"
    SAAS = "saas"
    CONTENT = "content"


class Asset(str, Enum):
    """Enumerate the assets a user can leverage."""

    NEWSLETTER = "Newsletter"
    AUDIENCE = "Audience"
    AUTOMATION_TOOLS = "Automation tools"
    CONSULTING_CASE_STUDIES = "Consulting case studies"
    DESIGN_PORTFOLIO = "Design portfolio"
    CODEBASE = "Codebase"
    CAPITAL_ACCESS = "Capital access"
    SALES_SCRIPTS = "Sales scripts"


class CamelModel(BaseModel):
    """Base model that speaks camelCase to the presentation layer."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProfileRequest(CamelModel):
    """Raw form payload; every field is accepted as-is and normalized later."""

    goal: Any = Field(default="", description="Free-form target outcome.")
    skills: Any = Field(
        default="",
        description="Comma separated skills or a list of skill strings.",
    )
    time_per_week: Any = Field(default=0, description="Hours available per week.")
    available_capital: Any = Field(default=0, description="Capital available to invest.")
    risk_tolerance: Any = Field(default="medium", description="One of low, medium or high.")
    assets: Any = Field(default_factory=list, description="Asset tags the user can leverage.")
    preferences: Any = Field(default_factory=list, description="Preferred kinds of work.")


class Profile(CamelModel):
    """Canonical profile produced by the normalizer."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    goal: str
    skills: Tuple[str, ...]
    time_per_week: float
    available_capital: float
    risk_tolerance: RiskTolerance
    assets: Tuple[Asset, ...]
    preferences: Tuple[Preference, ...]


class ActionStep(CamelModel):
    """A single labelled step of a strategy."""

    label: str
    detail: str


class Strategy(CamelModel):
    """A catalog template instantiated for one profile."""

    id: str
    risk_level: RiskTolerance
    title: str
    description: str
    rationale: str
    fit_score: float
    startup_cost: float
    timeline_weeks: int
    projected_monthly_revenue: float
    actions: List[ActionStep]
    leverage_points: List[str]
    reinvestment: str


class TimelineEntry(CamelModel):
    """A week range of the 90-day execution plan."""

    week: str
    focus: str
    deliverables: List[str]


class Metric(CamelModel):
    """A success metric tracked across the plan."""

    label: str
    target: str
    why_it_matters: str


class AgentResponse(CamelModel):
    """The complete plan returned for one profile."""

    headline: str
    quick_wins: List[str]
    strategies: List[Strategy]
    timeline: List[TimelineEntry]
    metrics: List[Metric]
    reinvestments: List[str]


class OptionDefinition(CamelModel):
    """Expose a vocabulary entry to the form."""

    value: str
    label: str


class OptionsResponse(CamelModel):
    """All vocabularies the form can offer."""

    risk_tolerances: List[OptionDefinition]
    assets: List[OptionDefinition]
    preferences: List[OptionDefinition]


class PlanExport(CamelModel):
    """A plan bundled with its rendered markdown and headline totals."""

    plan: AgentResponse
    markdown: str
    projected_monthly_total: float
    projected_annual_total: float
