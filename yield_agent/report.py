"""Presentation helpers: currency formatting, totals and markdown export."""

from __future__ import annotations

from typing import Iterable

from .schemas import AgentResponse, PlanExport, Strategy

MONTHS_PER_YEAR = 12


def format_currency(value: float) -> str:
    """Round to whole units for display only."""

    return f"${value:,.0f}"


def monthly_total(plan: AgentResponse) -> float:
    """Sum of projected monthly revenue across the plan's strategies."""

    return sum(strategy.projected_monthly_revenue for strategy in plan.strategies)


def _bullet_list(items: Iterable[str]) -> str:
    return "\n".join(f"- {item}" for item in items if item)


def _format_strategy_markdown(rank: int, strategy: Strategy) -> str:
    action_lines = [f"**{action.label}** - {action.detail}" for action in strategy.actions]
    return "\n\n".join(
        section
        for section in [
            f"### {rank}. {strategy.title}",
            f"*{strategy.risk_level.value.upper()} RISK* | {strategy.description}",
            (
                f"*Startup cost:* {format_currency(strategy.startup_cost)} | "
                f"*Timeline:* {strategy.timeline_weeks} weeks | "
                f"*Monthly:* {format_currency(strategy.projected_monthly_revenue)}"
            ),
            strategy.rationale,
            f"#### Actions\n\n{_bullet_list(action_lines)}" if action_lines else "",
            f"#### Leverage Plays\n\n{_bullet_list(strategy.leverage_points)}" if strategy.leverage_points else "",
            f"#### Reinvestment\n\n{strategy.reinvestment}" if strategy.reinvestment else "",
        ]
        if section
    )


def render_markdown(plan: AgentResponse) -> str:
    """Render a plan as a markdown document."""

    total = monthly_total(plan)
    timeline_blocks = [
        f"**{entry.week}: {entry.focus}**\n{_bullet_list(entry.deliverables)}" for entry in plan.timeline
    ]
    metric_lines = [
        f"**{metric.label}** - {metric.target}. {metric.why_it_matters}" for metric in plan.metrics
    ]
    reinvestment_lines = [f"{index}. {idea}" for index, idea in enumerate(plan.reinvestments, start=1)]

    return "\n\n".join(
        section
        for section in [
            f"## {plan.headline}",
            (
                f"*Projected monthly stack:* {format_currency(total)} | "
                f"*12-month upside:* {format_currency(total * MONTHS_PER_YEAR)}"
            ),
            f"## Quick Wins\n\n{_bullet_list(plan.quick_wins)}" if plan.quick_wins else "",
            "## Strategies" if plan.strategies else "",
            "\n\n".join(
                _format_strategy_markdown(rank, strategy)
                for rank, strategy in enumerate(plan.strategies, start=1)
            ),
            "## 90-Day Execution Timeline\n\n" + "\n\n".join(timeline_blocks) if timeline_blocks else "",
            f"## Scoreboard\n\n{_bullet_list(metric_lines)}" if metric_lines else "",
            "## Reinvestment Flywheel\n\n" + "\n".join(reinvestment_lines) if reinvestment_lines else "",
        ]
        if section
    )


def build_export(plan: AgentResponse) -> PlanExport:
    """Bundle a plan with its markdown rendering and revenue totals."""

    total = monthly_total(plan)
    return PlanExport(
        plan=plan,
        markdown=render_markdown(plan),
        projected_monthly_total=total,
        projected_annual_total=total * MONTHS_PER_YEAR,
    )
