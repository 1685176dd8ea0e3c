"""Success metrics derived from the selected strategies."""

from __future__ import annotations

import math
from typing import List, Sequence

from .catalog import MetricFocus, get_template
from .report import format_currency
from .schemas import Metric, RiskTolerance, Strategy

METRIC_COUNT = 3
HIGH_RISK_WHY = (
    "Higher-variance plays need a hard revenue checkpoint before more capital goes in."
)
STEADY_WHY = "Cash flow proves the offers work and funds every reinvestment step."


def _revenue_metric(strategies: Sequence[Strategy]) -> Metric:
    total = sum(strategy.projected_monthly_revenue for strategy in strategies)
    checkpoint = max(strategy.timeline_weeks for strategy in strategies)
    high_risk = any(strategy.risk_level is RiskTolerance.HIGH for strategy in strategies)
    return Metric(
        label="Monthly revenue run-rate",
        target=f"{format_currency(total)} per month by week {checkpoint}",
        why_it_matters=HIGH_RISK_WHY if high_risk else STEADY_WHY,
    )


def _strategy_metric(strategy: Strategy) -> tuple[MetricFocus, Metric]:
    template = get_template(strategy.id).metric
    units = max(1, math.ceil(strategy.projected_monthly_revenue / template.unit_value))
    target = template.target.format(
        revenue=format_currency(strategy.projected_monthly_revenue),
        cost=format_currency(strategy.startup_cost),
        weeks=strategy.timeline_weeks,
        units=f"{units:,}",
    )
    return template.focus, Metric(label=template.label, target=target, why_it_matters=template.why)


def build_metrics(strategies: Sequence[Strategy]) -> List[Metric]:
    """Return the revenue metric plus strategy metrics, distinct focuses first."""

    if not strategies:
        return []

    metrics = [_revenue_metric(strategies)]
    candidates = [_strategy_metric(strategy) for strategy in strategies]

    used_focuses = set()
    leftovers = []
    for focus, metric in candidates:
        if focus in used_focuses:
            leftovers.append(metric)
            continue
        used_focuses.add(focus)
        metrics.append(metric)

    for metric in leftovers:
        if all(existing.label != metric.label for existing in metrics):
            metrics.append(metric)
    return metrics[:METRIC_COUNT]
