"""Fit scoring and top-N selection of catalog templates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .catalog import STRATEGY_CATALOG, StrategyTemplate
from .schemas import Profile, RiskTolerance

logger = logging.getLogger(__name__)

SELECTION_COUNT = 3
ASSET_MATCH_CAP = 3
ADJACENT_RISK_SHARE = 0.5
BELOW_CAPITAL_BAND_FACTOR = 0.5
ABOVE_CAPITAL_BAND_FACTOR = 0.8
MIN_SKILL_TOKEN_LENGTH = 3


@dataclass(frozen=True)
class ScoredTemplate:
    """A template with its fit score for one profile.

    ``score`` is zero for templates that fail the hours filter; ``raw_score``
    keeps the ungated sum so those templates can still be ranked for backfill.
    """

    template: StrategyTemplate
    index: int
    score: float
    raw_score: float
    eligible: bool


def risk_distance(band: RiskTolerance, template: StrategyTemplate) -> int:
    """Return the smallest band distance between ``band`` and the template."""

    return min(abs(band.order - candidate.order) for candidate in template.risk_bands)


def _risk_alignment(template: StrategyTemplate, profile: Profile) -> float:
    distance = risk_distance(profile.risk_tolerance, template)
    if distance == 0:
        return template.weights.risk
    if distance == 1:
        return template.weights.risk * ADJACENT_RISK_SHARE
    return 0.0


def _asset_affinity(template: StrategyTemplate, profile: Profile) -> float:
    matches = sum(1 for asset in profile.assets if asset in template.asset_affinities)
    return template.weights.assets * min(matches, ASSET_MATCH_CAP) / ASSET_MATCH_CAP


def _headroom(value: float, reference: float) -> float:
    return min(value / reference, 1.0)


def _capacity_fit(template: StrategyTemplate, profile: Profile) -> float:
    capital = profile.available_capital
    headroom = (
        _headroom(profile.time_per_week, template.reference_hours)
        + _headroom(capital, template.reference_capital)
    ) / 2
    bonus = template.weights.capacity * headroom
    if capital < template.min_capital:
        bonus *= BELOW_CAPITAL_BAND_FACTOR
    elif capital > template.max_capital:
        bonus *= ABOVE_CAPITAL_BAND_FACTOR
    return bonus


def skill_matches(skills: Iterable[str], keywords: Iterable[str]) -> bool:
    """True when any skill and keyword contain one another, ignoring case."""

    lowered_keywords = [keyword.casefold() for keyword in keywords]
    for skill in skills:
        token = skill.casefold()
        if len(token) < MIN_SKILL_TOKEN_LENGTH:
            continue
        if any(keyword in token or token in keyword for keyword in lowered_keywords):
            return True
    return False


def score_template(template: StrategyTemplate, profile: Profile, index: int) -> ScoredTemplate:
    """Compute the weighted fit score of one template."""

    weights = template.weights
    raw_score = 0.0
    if template.preferences.intersection(profile.preferences):
        raw_score += weights.preference
    raw_score += _risk_alignment(template, profile)
    raw_score += _asset_affinity(template, profile)
    raw_score += _capacity_fit(template, profile)
    if skill_matches(profile.skills, template.keywords):
        raw_score += weights.skills

    eligible = profile.time_per_week >= template.min_hours
    return ScoredTemplate(
        template=template,
        index=index,
        score=raw_score if eligible else 0.0,
        raw_score=raw_score,
        eligible=eligible,
    )


def score_catalog(
    profile: Profile, catalog: Sequence[StrategyTemplate] = STRATEGY_CATALOG
) -> List[ScoredTemplate]:
    """Score every template in catalog order."""

    return [score_template(template, profile, index) for index, template in enumerate(catalog)]


def select_templates(
    profile: Profile,
    catalog: Sequence[StrategyTemplate] = STRATEGY_CATALOG,
    count: int = SELECTION_COUNT,
) -> List[ScoredTemplate]:
    """Return the ``count`` best templates, backfilling from ineligible ones.

    Ties fall back to catalog order so identical input always yields the
    same ranking.
    """

    scored = score_catalog(profile, catalog)
    eligible = sorted(
        (item for item in scored if item.eligible),
        key=lambda item: (-item.score, item.index),
    )
    backfill = sorted(
        (item for item in scored if not item.eligible),
        key=lambda item: (-item.raw_score, item.index),
    )

    selected = eligible[:count]
    if len(selected) < count:
        logger.debug(
            "Only %d templates fit %.1f hours/week; backfilling %d",
            len(selected),
            profile.time_per_week,
            count - len(selected),
        )
        selected.extend(backfill[: count - len(selected)])
    return selected
