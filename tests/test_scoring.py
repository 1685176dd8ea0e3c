from __future__ import annotations

import pytest

from yield_agent.catalog import STRATEGY_CATALOG, get_template
from yield_agent.profile import normalize_profile
from yield_agent.scoring import SELECTION_COUNT, score_template, select_templates, skill_matches


def _profile(**overrides: object):
    data: dict[str, object] = {
        "timePerWeek": 40,
        "availableCapital": 5_000,
        "riskTolerance": "medium",
        "preferences": ["service"],
    }
    data.update(overrides)
    return normalize_profile(data)


def test_preference_match_adds_weight() -> None:
    template = get_template("sponsored-newsletter")

    matched = score_template(template, _profile(preferences=["content"]), 0)
    unmatched = score_template(template, _profile(preferences=["saas"]), 0)

    assert matched.score - unmatched.score == pytest.approx(template.weights.preference)


def test_risk_alignment_is_full_adjacent_or_zero() -> None:
    template = get_template("digital-template-shop")  # low band only

    low = score_template(template, _profile(riskTolerance="low"), 0).score
    medium = score_template(template, _profile(riskTolerance="medium"), 0).score
    high = score_template(template, _profile(riskTolerance="high"), 0).score

    assert low - high == pytest.approx(template.weights.risk)
    assert medium - high == pytest.approx(template.weights.risk / 2)


def test_asset_affinity_is_capped() -> None:
    template = get_template("automation-agency")
    baseline = score_template(template, _profile(), 0).score

    two = score_template(template, _profile(assets=["Automation tools", "Codebase"]), 0).score
    four = score_template(
        template,
        _profile(assets=["Automation tools", "Codebase", "Sales scripts", "Capital access"]),
        0,
    ).score

    assert two - baseline == pytest.approx(template.weights.assets * 2 / 3)
    assert four - baseline == pytest.approx(template.weights.assets)


def test_hours_below_minimum_fail_the_hard_filter() -> None:
    template = get_template("automation-agency")

    scored = score_template(template, _profile(timePerWeek=template.min_hours - 1), 0)

    assert not scored.eligible
    assert scored.score == 0.0
    assert scored.raw_score > 0.0


def test_skill_bonus_uses_case_insensitive_substrings() -> None:
    assert skill_matches(["Python scripting"], ["python"])
    assert skill_matches(["copy"], ["copywriting"])
    assert not skill_matches(["ai"], ["ai"])
    assert not skill_matches(["Gardening"], ["python", "sales"])

    template = get_template("niche-micro-saas")
    with_skill = score_template(template, _profile(skills="JavaScript"), 0).score
    without = score_template(template, _profile(skills="pottery"), 0).score
    assert with_skill - without == pytest.approx(template.weights.skills)


def test_selection_returns_fixed_count_without_duplicates() -> None:
    selected = select_templates(_profile())

    assert len(selected) == SELECTION_COUNT
    assert len({item.template.id for item in selected}) == SELECTION_COUNT
    scores = [item.score for item in selected]
    assert scores == sorted(scores, reverse=True)


def test_ties_keep_catalog_order() -> None:
    profile = _profile()
    twin = STRATEGY_CATALOG[0]

    selected = select_templates(profile, catalog=(twin, twin, twin, twin), count=3)

    assert [item.index for item in selected] == [0, 1, 2]


def test_backfill_when_too_few_templates_fit_the_hours() -> None:
    profile = _profile(timePerWeek=4)
    eligible_ids = {t.id for t in STRATEGY_CATALOG if t.min_hours <= 4}

    selected = select_templates(profile)

    assert eligible_ids == {"digital-template-shop", "sponsored-newsletter"}
    assert len(selected) == SELECTION_COUNT
    assert [item.eligible for item in selected] == [True, True, False]
    assert {item.template.id for item in selected[:2]} == eligible_ids


def test_zero_hours_still_selects_by_raw_score() -> None:
    selected = select_templates(_profile(timePerWeek=0, riskTolerance="low"))

    assert len(selected) == SELECTION_COUNT
    assert not any(item.eligible for item in selected)
    assert [item.template.id for item in selected][:2] == [
        "productized-service-sprint",
        "done-for-you-automation",
    ]
