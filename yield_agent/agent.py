"""Assemble the commercialization plan for a monetization profile."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Sequence

from .catalog import StrategyTemplate
from .metrics import build_metrics
from .profile import normalize_profile
from .projections import project_template
from .schemas import (
    ActionStep,
    AgentResponse,
    Metric,
    Profile,
    ProfileRequest,
    RiskTolerance,
    Strategy,
    TimelineEntry,
)
from .scoring import ScoredTemplate, select_templates, skill_matches
from .timeline import build_timeline

logger = logging.getLogger(__name__)

QUICK_WIN_COUNT = 2
FALLBACK_SKILL = "your core skills"
FALLBACK_ASSET = "your existing network"
FALLBACK_GOAL = "start compounding cash within 30 days"


def resolve_risk_level(template: StrategyTemplate, risk: RiskTolerance) -> RiskTolerance:
    """Use the profile's band when the template allows it, else the nearest one."""

    if risk in template.risk_bands:
        return risk
    return min(template.risk_bands, key=lambda band: (abs(band.order - risk.order), band.order))


def _rationale(template: StrategyTemplate, profile: Profile) -> str:
    skill = next(
        (skill for skill in profile.skills if skill_matches([skill], template.keywords)),
        profile.skills[0] if profile.skills else FALLBACK_SKILL,
    )
    asset = next(
        (f"your {asset.value.lower()}" for asset in profile.assets if asset in template.asset_affinities),
        FALLBACK_ASSET,
    )
    return template.rationale.format(skill=skill.lower(), asset=asset)


def build_strategy(scored: ScoredTemplate, profile: Profile) -> Strategy:
    """Instantiate a fresh strategy from a scored template."""

    template = scored.template
    projection = project_template(template, profile)
    return Strategy(
        id=template.id,
        risk_level=resolve_risk_level(template, profile.risk_tolerance),
        title=template.title,
        description=template.description,
        rationale=_rationale(template, profile),
        fit_score=scored.score,
        startup_cost=projection.startup_cost,
        timeline_weeks=projection.timeline_weeks,
        projected_monthly_revenue=projection.projected_monthly_revenue,
        actions=[ActionStep(label=action.label, detail=action.detail) for action in template.actions],
        leverage_points=list(template.leverage_points),
        reinvestment=template.reinvestment,
    )


def _goal_clause(goal: str) -> str:
    clause = goal.strip().rstrip(".!?").strip()
    if not clause:
        return FALLBACK_GOAL
    # Acronyms and brand names such as "AI" or "SaaS" stay as typed.
    first_word = clause.split()[0]
    if any(char.isupper() for char in first_word[1:]):
        return clause
    return clause[0].lower() + clause[1:]


def assemble_response(
    profile: Profile,
    strategies: Sequence[Strategy],
    timeline: Sequence[TimelineEntry],
    metrics: Sequence[Metric],
) -> AgentResponse:
    """Compose the final plan without recomputing anything."""

    top = strategies[0]
    headline = f"Lead with {top.title} to {_goal_clause(profile.goal)}."
    quick_wins = [
        f"{strategy.actions[0].label}: {strategy.actions[0].detail}"
        for strategy in strategies[:QUICK_WIN_COUNT]
        if strategy.actions
    ]
    return AgentResponse(
        headline=headline,
        quick_wins=quick_wins,
        strategies=list(strategies),
        timeline=list(timeline),
        metrics=list(metrics),
        reinvestments=[strategy.reinvestment for strategy in strategies],
    )


def run_earnings_agent(raw: ProfileRequest | Profile | Mapping[str, Any] | None) -> AgentResponse:
    """Compute a complete plan for one profile submission."""

    profile = normalize_profile(raw)
    selected = select_templates(profile)
    strategies: List[Strategy] = [build_strategy(scored, profile) for scored in selected]
    timeline = build_timeline(strategies)
    metrics = build_metrics(strategies)

    logger.info(
        "Plan computed for %s risk, preferences=%s: %s",
        profile.risk_tolerance.value,
        ",".join(preference.value for preference in profile.preferences),
        ", ".join(strategy.id for strategy in strategies),
    )
    return assemble_response(profile, strategies, timeline, metrics)
