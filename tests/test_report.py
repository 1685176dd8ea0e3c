from __future__ import annotations

from yield_agent.agent import run_earnings_agent
from yield_agent.report import build_export, format_currency, render_markdown


def _plan():
    return run_earnings_agent(
        {
            "goal": "Quit my job",
            "skills": "python",
            "timePerWeek": 25,
            "availableCapital": 3_333,
            "riskTolerance": "medium",
            "preferences": ["saas"],
        }
    )


def test_currency_is_rounded_only_for_display() -> None:
    assert format_currency(1234.5) == "$1,234"
    assert format_currency(1235.5) == "$1,236"
    assert format_currency(0) == "$0"


def test_markdown_contains_every_section() -> None:
    plan = _plan()

    markdown = render_markdown(plan)

    assert markdown.startswith(f"## {plan.headline}")
    for heading in ["## Quick Wins", "## Strategies", "## 90-Day Execution Timeline", "## Scoreboard", "## Reinvestment Flywheel"]:
        assert heading in markdown
    for strategy in plan.strategies:
        assert strategy.title in markdown
        assert format_currency(strategy.projected_monthly_revenue) in markdown


def test_export_totals_are_unrounded() -> None:
    plan = _plan()

    export = build_export(plan)

    total = sum(strategy.projected_monthly_revenue for strategy in plan.strategies)
    assert export.projected_monthly_total == total
    assert export.projected_annual_total == total * 12
    assert export.plan == plan
