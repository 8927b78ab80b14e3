from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..bursts.model import BurstRecord
from ..common.timeofday import TimeOfDay, format_time, is_time_in_range, seconds_apart
from ..shifts.model import ShiftConfig
from .model import NO_BREAK, BreakTimes


def detect_break(bursts: Iterable[BurstRecord], config: ShiftConfig) -> BreakTimes:
    """Find the break-out / break-in pair among one shift instance's bursts.

    Gap detection is tried first; the midpoint split is only a fallback for
    when no gap reaches ``minimum_break_gap_minutes``.
    """
    candidates = [b for b in bursts if _in_break_window(b, config)]
    if not candidates:
        return NO_BREAK

    candidates.sort(key=lambda b: b.burst_start)

    by_gap = _break_by_gap(candidates, config)
    if by_gap is not None:
        return by_gap
    return _break_by_midpoint(candidates, config)


def _in_break_window(burst: BurstRecord, config: ShiftConfig) -> bool:
    return any(
        is_time_in_range(TimeOfDay.of(ts), config.break_search_start, config.break_search_end)
        for ts in (burst.burst_start, burst.burst_end)
    )


def _qualifying_gaps(bursts: Sequence[BurstRecord], minimum_minutes: float) -> list[int]:
    """Indexes ``i`` where the gap from ``bursts[i]`` to ``bursts[i + 1]`` is long enough."""
    return [
        i
        for i in range(len(bursts) - 1)
        if (bursts[i + 1].burst_start - bursts[i].burst_end).total_seconds() / 60 >= minimum_minutes
    ]


def _pair(break_out: Optional[datetime], break_in: Optional[datetime]) -> BreakTimes:
    return BreakTimes(
        break_out=format_time(break_out) if break_out else "",
        break_in=format_time(break_in) if break_in else "",
        break_in_time=TimeOfDay.of(break_in) if break_in else None,
    )


def _break_by_gap(bursts: Sequence[BurstRecord], config: ShiftConfig) -> Optional[BreakTimes]:
    gaps = _qualifying_gaps(bursts, config.minimum_break_gap_minutes)
    if not gaps:
        return None

    # min() keeps the earliest gap on equal distance.
    out_gap = min(gaps, key=lambda i: seconds_apart(TimeOfDay.of(bursts[i].burst_end), config.break_out_checkpoint))
    in_gap = min(gaps, key=lambda i: seconds_apart(TimeOfDay.of(bursts[i + 1].burst_start), config.break_in_on_time_cutoff))

    return _pair(bursts[out_gap].burst_end, bursts[in_gap + 1].burst_start)


def _first_gap(bursts: Sequence[BurstRecord], minimum_minutes: float) -> Optional[BreakTimes]:
    gaps = _qualifying_gaps(bursts, minimum_minutes)
    if not gaps:
        return None
    i = gaps[0]
    return _pair(bursts[i].burst_end, bursts[i + 1].burst_start)


def _break_by_midpoint(bursts: Sequence[BurstRecord], config: ShiftConfig) -> BreakTimes:
    midpoint = config.midpoint.seconds
    before = [b for b in bursts if TimeOfDay.of(b.burst_end).seconds <= midpoint]
    after = [b for b in bursts if TimeOfDay.of(b.burst_start).seconds > midpoint]

    if before and after:
        return _pair(before[-1].burst_end, after[0].burst_start)

    if before:
        return _first_gap(before, config.minimum_break_gap_minutes) or _pair(before[-1].burst_end, None)

    if after:
        return _first_gap(after, config.minimum_break_gap_minutes) or _pair(None, after[0].burst_start)

    return NO_BREAK
