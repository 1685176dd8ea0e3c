"""Normalize raw form input into a canonical :class:`Profile`."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Iterable, List, Mapping, Tuple, Type, TypeVar

from .schemas import Asset, Preference, Profile, ProfileRequest, RiskTolerance

SKILL_DELIMITER = ","
MAX_HOURS_PER_WEEK = 168.0
# Far above every capital band; projection ratios saturate long before it.
MAX_CAPITAL = 1e12
DEFAULT_RISK = RiskTolerance.MEDIUM
# Scoring assumes at least one active preference category.
BASELINE_PREFERENCE = Preference.SERVICE

VocabularyT = TypeVar("VocabularyT", bound=Enum)


def _raw_value(raw: Mapping[str, Any], name: str, camel: str, default: Any) -> Any:
    if name in raw:
        return raw[name]
    return raw.get(camel, default)


def _coerce_number(value: Any, upper: float) -> float:
    """Return a non-negative float capped at ``upper``.

    Non-numeric values, NaN and negatives become zero; values too large for
    a float, including infinity, land on the cap.
    """

    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int):
        try:
            number = float(value)
        except OverflowError:
            number = math.inf if value > 0 else -math.inf
    elif isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0

    if math.isnan(number) or number < 0:
        return 0.0
    return min(number, upper)


def _split_skills(value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        chunks: Iterable[Any] = [value]
    elif isinstance(value, (list, tuple)):
        chunks = value
    else:
        return ()

    skills: List[str] = []
    for chunk in chunks:
        if not isinstance(chunk, str):
            continue
        for part in chunk.split(SKILL_DELIMITER):
            skill = part.strip()
            if skill:
                skills.append(skill)
    return tuple(skills)


def _tag_key(item: Any) -> str | None:
    if isinstance(item, Enum):
        item = item.value
    if not isinstance(item, str):
        return None
    return item.strip().casefold()


def _filter_vocabulary(value: Any, vocabulary: Type[VocabularyT]) -> Tuple[VocabularyT, ...]:
    """Keep known tags only, in vocabulary order and without duplicates."""

    if isinstance(value, (str, Enum)):
        items: Iterable[Any] = [value]
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = value
    else:
        return ()

    wanted = {key for key in (_tag_key(item) for item in items) if key}
    return tuple(member for member in vocabulary if member.value.casefold() in wanted)


def _coerce_risk(value: Any) -> RiskTolerance:
    key = _tag_key(value)
    for member in RiskTolerance:
        if member.value == key:
            return member
    return DEFAULT_RISK


def normalize_profile(raw: ProfileRequest | Profile | Mapping[str, Any] | None) -> Profile:
    """Turn possibly malformed input into a canonical profile.

    Out-of-range numbers are clamped, unknown tags are dropped and an empty
    preference selection falls back to the baseline preference. The function
    never raises for bad values, and normalizing a normalized profile returns
    an equal profile.
    """

    if raw is None:
        data: Mapping[str, Any] = {}
    elif isinstance(raw, (ProfileRequest, Profile)):
        data = raw.model_dump()
    elif isinstance(raw, Mapping):
        data = raw
    else:
        data = {}

    goal = _raw_value(data, "goal", "goal", "")
    preferences = _filter_vocabulary(
        _raw_value(data, "preferences", "preferences", ()), Preference
    )
    if not preferences:
        preferences = (BASELINE_PREFERENCE,)

    return Profile(
        goal=goal.strip() if isinstance(goal, str) else "",
        skills=_split_skills(_raw_value(data, "skills", "skills", ())),
        time_per_week=_coerce_number(
            _raw_value(data, "time_per_week", "timePerWeek", 0), upper=MAX_HOURS_PER_WEEK
        ),
        available_capital=_coerce_number(
            _raw_value(data, "available_capital", "availableCapital", 0), upper=MAX_CAPITAL
        ),
        risk_tolerance=_coerce_risk(_raw_value(data, "risk_tolerance", "riskTolerance", None)),
        assets=_filter_vocabulary(_raw_value(data, "assets", "assets", ()), Asset),
        preferences=preferences,
    )
