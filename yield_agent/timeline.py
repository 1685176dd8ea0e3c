"""Merge the selected strategies' action steps into a 90-day schedule."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .schemas import Strategy, TimelineEntry

HORIZON_WEEKS = 13
RANK_STAGGER_WEEKS = 1
BUCKET_THEMES: Tuple[str, ...] = (
    "Foundation & offer design",
    "First revenue push",
    "Delivery & proof",
    "Systemize",
    "Scale the winner",
    "Review & reinvest",
)


@dataclass(frozen=True)
class _ScheduledStep:
    week: int
    rank: int
    position: int
    text: str


def bucket_ranges(horizon_weeks: int = HORIZON_WEEKS, buckets: int = len(BUCKET_THEMES)) -> List[Tuple[int, int]]:
    """Split the horizon into contiguous, 1-based week ranges."""

    ranges = []
    for index in range(buckets):
        start = index * horizon_weeks // buckets + 1
        end = (index + 1) * horizon_weeks // buckets
        ranges.append((start, end))
    return ranges


def _week_label(start: int, end: int) -> str:
    if start == end:
        return f"Week {start}"
    return f"Weeks {start}-{end}"


def _schedule(strategies: Sequence[Strategy]) -> List[_ScheduledStep]:
    steps = []
    for rank, strategy in enumerate(strategies):
        start_week = 1 + rank * RANK_STAGGER_WEEKS
        action_count = len(strategy.actions)
        for position, action in enumerate(strategy.actions):
            offset = position * strategy.timeline_weeks // action_count
            week = min(start_week + offset, HORIZON_WEEKS)
            steps.append(
                _ScheduledStep(
                    week=week,
                    rank=rank,
                    position=position,
                    text=f"{action.label}: {action.detail}",
                )
            )
    steps.sort(key=lambda step: (step.week, step.rank, step.position))
    return steps


def _follow_ups(strategies: Sequence[Strategy]) -> List[str]:
    """Leverage points in rank-rotating order, used to fill idle weeks."""

    follow_ups = []
    depth = max((len(strategy.leverage_points) for strategy in strategies), default=0)
    for level in range(depth):
        for strategy in strategies:
            if level < len(strategy.leverage_points):
                follow_ups.append(f"Double down on {strategy.title}: {strategy.leverage_points[level]}")
    return follow_ups


def build_timeline(strategies: Sequence[Strategy]) -> List[TimelineEntry]:
    """Build one entry per week bucket covering the whole horizon.

    Higher ranked strategies start earlier, and a short strategy timeline
    packs its actions into the first buckets.
    """

    steps = _schedule(strategies)
    follow_ups = _follow_ups(strategies)
    entries = []
    idle_count = 0
    for (start, end), theme in zip(bucket_ranges(), BUCKET_THEMES):
        deliverables = [step.text for step in steps if start <= step.week <= end]
        if not deliverables and follow_ups:
            deliverables = [follow_ups[idle_count % len(follow_ups)]]
            idle_count += 1
        entries.append(TimelineEntry(week=_week_label(start, end), focus=theme, deliverables=deliverables))
    return entries
