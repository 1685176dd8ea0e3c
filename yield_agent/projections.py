"""Startup cost, timeline and revenue projections for selected templates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict

from .catalog import StrategyTemplate
from .schemas import Profile, RiskTolerance

MIN_TIMELINE_WEEKS = 2
TIME_MULTIPLIER_RANGE = (0.25, 1.5)
CAPITAL_MULTIPLIER_RANGE = (0.5, 1.5)
TIME_SHARE = 0.6
CAPITAL_SHARE = 0.4
RISK_FACTORS: Dict[RiskTolerance, float] = {
    RiskTolerance.LOW: 0.8,
    RiskTolerance.MEDIUM: 1.0,
    RiskTolerance.HIGH: 1.25,
}


@dataclass(frozen=True)
class Projection:
    """Financial figures for one template; currency stays unrounded."""

    startup_cost: float
    timeline_weeks: int
    projected_monthly_revenue: float


def _clamp(value: float, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return max(low, min(value, high))


def startup_cost(template: StrategyTemplate, profile: Profile) -> float:
    """Scale the base cost down when capital is short, never below the floor."""

    capital_share = min(profile.available_capital / template.reference_capital, 1.0)
    return max(template.min_startup_cost, template.base_startup_cost * capital_share)


def timeline_weeks(template: StrategyTemplate, profile: Profile) -> int:
    """Compress the base timeline when hours exceed the reference commitment."""

    weeks = template.base_timeline_weeks
    if profile.time_per_week > template.reference_hours:
        weeks = math.ceil(template.base_timeline_weeks * template.reference_hours / profile.time_per_week)
    return max(MIN_TIMELINE_WEEKS, weeks)


def max_revenue_multiplier(risk: RiskTolerance) -> float:
    """Return the largest multiplier reachable at the given risk tolerance."""

    return (
        TIME_SHARE * TIME_MULTIPLIER_RANGE[1] + CAPITAL_SHARE * CAPITAL_MULTIPLIER_RANGE[1]
    ) * RISK_FACTORS[risk]


def revenue_multiplier(template: StrategyTemplate, profile: Profile) -> float:
    """Bounded, monotonic multiplier applied to the base monthly revenue."""

    time_multiplier = _clamp(profile.time_per_week / template.reference_hours, TIME_MULTIPLIER_RANGE)
    capital_multiplier = _clamp(
        profile.available_capital / template.reference_capital, CAPITAL_MULTIPLIER_RANGE
    )
    blended = TIME_SHARE * time_multiplier + CAPITAL_SHARE * capital_multiplier
    return blended * RISK_FACTORS[profile.risk_tolerance]


def project_template(template: StrategyTemplate, profile: Profile) -> Projection:
    return Projection(
        startup_cost=startup_cost(template, profile),
        timeline_weeks=timeline_weeks(template, profile),
        projected_monthly_revenue=template.base_monthly_revenue * revenue_multiplier(template, profile),
    )
