from __future__ import annotations

from yield_agent.agent import build_strategy
from yield_agent.catalog import get_template
from yield_agent.metrics import HIGH_RISK_WHY, METRIC_COUNT, STEADY_WHY, build_metrics
from yield_agent.profile import normalize_profile
from yield_agent.report import format_currency
from yield_agent.scoring import score_template


def _strategies(ids: list[str], risk: str = "medium"):
    profile = normalize_profile({"timePerWeek": 20, "availableCapital": 1_000, "riskTolerance": risk})
    return [build_strategy(score_template(get_template(slug), profile, index), profile) for index, slug in enumerate(ids)]


def test_revenue_metric_leads_and_matches_projections() -> None:
    strategies = _strategies(["productized-service-sprint", "sponsored-newsletter", "niche-micro-saas"])

    metrics = build_metrics(strategies)

    total = sum(strategy.projected_monthly_revenue for strategy in strategies)
    assert len(metrics) == METRIC_COUNT
    assert metrics[0].label == "Monthly revenue run-rate"
    assert metrics[0].target.startswith(format_currency(total))
    assert metrics[0].why_it_matters == STEADY_WHY


def test_distinct_focuses_are_preferred() -> None:
    strategies = _strategies(["sponsored-newsletter", "cohort-course", "done-for-you-automation"])

    labels = [metric.label for metric in build_metrics(strategies)]

    # Both content strategies measure reach, so the automation metric wins the last slot.
    assert labels == ["Monthly revenue run-rate", "Engaged subscribers", "Build delivery time"]


def test_same_focus_strategies_still_fill_the_set() -> None:
    strategies = _strategies(["sponsored-newsletter", "cohort-course", "digital-template-shop"])

    labels = [metric.label for metric in build_metrics(strategies)]

    assert labels == ["Monthly revenue run-rate", "Engaged subscribers", "Waitlist size"]


def test_high_risk_strategies_change_the_revenue_rationale() -> None:
    strategies = _strategies(["automation-agency", "niche-micro-saas", "acquire-online-business"], risk="high")

    assert build_metrics(strategies)[0].why_it_matters == HIGH_RISK_WHY


def test_metric_targets_use_strategy_figures() -> None:
    strategies = _strategies(["done-for-you-automation", "sponsored-newsletter", "cohort-course"])

    metrics = build_metrics(strategies)

    assert f"within {strategies[0].timeline_weeks} weeks" in metrics[1].target


def test_no_strategies_means_no_metrics() -> None:
    assert build_metrics([]) == []
