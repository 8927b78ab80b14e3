from __future__ import annotations

from datetime import timedelta
from typing import Iterable, Sequence

from ..swipes.model import SwipeRecord
from .model import BurstRecord, BurstStatistics


def detect_bursts(swipes: Iterable[SwipeRecord], threshold_minutes: float) -> list[BurstRecord]:
    """Group each person's swipes into bursts.

    A swipe joins the current burst when it follows the previous swipe by at
    most ``threshold_minutes`` (inclusive). Result is ordered by burst start.
    """
    threshold = timedelta(minutes=threshold_minutes)

    by_user: dict[str, list[SwipeRecord]] = {}
    for swipe in swipes:
        by_user.setdefault(swipe.name, []).append(swipe)

    bursts: list[BurstRecord] = []
    for name, user_swipes in by_user.items():
        user_swipes.sort(key=lambda s: s.timestamp)
        bursts.extend(_detect_user_bursts(name, user_swipes, threshold))

    bursts.sort(key=lambda b: b.burst_start)
    return bursts


def _detect_user_bursts(name: str, swipes: Sequence[SwipeRecord], threshold: timedelta) -> list[BurstRecord]:
    bursts: list[BurstRecord] = []
    current: list[SwipeRecord] = []

    for swipe in swipes:
        if current and swipe.timestamp - current[-1].timestamp > threshold:
            bursts.append(_make_burst(name, current, len(bursts)))
            current = []
        current.append(swipe)

    if current:
        bursts.append(_make_burst(name, current, len(bursts)))
    return bursts


def _make_burst(name: str, swipes: Sequence[SwipeRecord], counter: int) -> BurstRecord:
    timestamps = [s.timestamp for s in swipes]
    return BurstRecord(
        name=name,
        burst_id=f"{name}_burst_{counter}",
        burst_start=min(timestamps),
        burst_end=max(timestamps),
        swipe_count=len(swipes),
        swipes=tuple(swipes),
    )


def burst_statistics(bursts: Sequence[BurstRecord]) -> BurstStatistics:
    total_swipes = sum(b.swipe_count for b in bursts)
    return BurstStatistics(
        total_bursts=len(bursts),
        total_swipes=total_swipes,
        average_swipes_per_burst=total_swipes / len(bursts) if bursts else 0.0,
        user_count=len({b.name for b in bursts}),
    )
