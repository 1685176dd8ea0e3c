from __future__ import annotations

import pytest

from yield_agent.profile import BASELINE_PREFERENCE, MAX_CAPITAL, MAX_HOURS_PER_WEEK, normalize_profile
from yield_agent.schemas import Asset, Preference, ProfileRequest, RiskTolerance


def test_skills_are_split_and_trimmed() -> None:
    profile = normalize_profile({"skills": " Copywriting, automation ,, sales enablement ,"})

    assert profile.skills == ("Copywriting", "automation", "sales enablement")


def test_skill_lists_are_flattened() -> None:
    profile = normalize_profile({"skills": ["python, sql", "  ", 42, "design"]})

    assert profile.skills == ("python", "sql", "design")


@pytest.mark.parametrize(
    "value, hours, capital",
    [
        (-5, 0.0, 0.0),
        ("12", 12.0, 12.0),
        ("twelve", 0.0, 0.0),
        (None, 0.0, 0.0),
        (True, 0.0, 0.0),
        (float("nan"), 0.0, 0.0),
        ("nan", 0.0, 0.0),
        (float("-inf"), 0.0, 0.0),
        (-(10**400), 0.0, 0.0),
        (float("inf"), MAX_HOURS_PER_WEEK, MAX_CAPITAL),
        ("1e309", MAX_HOURS_PER_WEEK, MAX_CAPITAL),
        (10**400, MAX_HOURS_PER_WEEK, MAX_CAPITAL),
        (7.5, 7.5, 7.5),
    ],
)
def test_numbers_are_clamped_or_zeroed(value: object, hours: float, capital: float) -> None:
    profile = normalize_profile({"timePerWeek": value, "available_capital": value})

    assert profile.time_per_week == hours
    assert profile.available_capital == capital


def test_hours_are_capped_at_a_full_week() -> None:
    profile = normalize_profile({"time_per_week": 500, "available_capital": 500})

    assert profile.time_per_week == MAX_HOURS_PER_WEEK
    assert profile.available_capital == 500


def test_unknown_tags_are_dropped() -> None:
    profile = normalize_profile(
        {
            "assets": ["capital access", "Yacht", "Newsletter", "Newsletter"],
            "preferences": ["SAAS", "gambling", "content"],
        }
    )

    assert profile.assets == (Asset.NEWSLETTER, Asset.CAPITAL_ACCESS)
    assert profile.preferences == (Preference.SAAS, Preference.CONTENT)


def test_empty_preferences_default_to_baseline() -> None:
    profile = normalize_profile({"preferences": ["unknown"]})

    assert profile.preferences == (BASELINE_PREFERENCE,)
    assert BASELINE_PREFERENCE is Preference.SERVICE


def test_unknown_risk_falls_back_to_medium() -> None:
    assert normalize_profile({"riskTolerance": "reckless"}).risk_tolerance is RiskTolerance.MEDIUM
    assert normalize_profile({"riskTolerance": " HIGH "}).risk_tolerance is RiskTolerance.HIGH


@pytest.mark.parametrize("raw", [None, {}, [], "garbage", {"goal": 12, "skills": 3, "assets": 7}])
def test_malformed_input_never_raises(raw: object) -> None:
    profile = normalize_profile(raw)  # type: ignore[arg-type]

    assert profile.goal == ""
    assert profile.skills == ()
    assert profile.assets == ()
    assert profile.preferences == (BASELINE_PREFERENCE,)


def test_request_model_is_accepted() -> None:
    request = ProfileRequest.model_validate(
        {"goal": "  Earn $5k/month  ", "timePerWeek": "20", "riskTolerance": "low", "preferences": ["product"]}
    )

    profile = normalize_profile(request)

    assert profile.goal == "Earn $5k/month"
    assert profile.time_per_week == 20.0
    assert profile.risk_tolerance is RiskTolerance.LOW
    assert profile.preferences == (Preference.PRODUCT,)


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {
            "goal": "Replace my salary",
            "skills": "Copywriting, automation",
            "timePerWeek": 12,
            "availableCapital": 300,
            "riskTolerance": "medium",
            "assets": ["Audience", "Codebase"],
            "preferences": ["service", "saas"],
        },
        {"skills": ["a, b"], "timePerWeek": -3, "assets": ["nope"], "preferences": []},
    ],
)
def test_normalization_is_idempotent(raw: dict[str, object]) -> None:
    once = normalize_profile(raw)

    assert normalize_profile(once) == once
    assert normalize_profile(once.model_dump()) == once
    assert normalize_profile(once.model_dump(by_alias=True)) == once
