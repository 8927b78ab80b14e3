from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable, Mapping, Optional, Sequence

from ..bursts.model import BurstRecord
from ..common.timeofday import TimeOfDay, is_time_in_range
from .model import ShiftConfig, ShiftInstance, ShiftStatistics

MINUTES_PER_DAY = 24 * 60


@dataclass
class _OpenShift:
    config: ShiftConfig
    window_start: datetime
    window_end: datetime
    bursts: list[BurstRecord] = field(default_factory=list)

    def contains(self, burst: BurstRecord) -> bool:
        return any(
            self.window_start <= _floor_minute(ts) <= self.window_end
            for ts in (burst.burst_start, burst.burst_end)
        )

    def close(self) -> ShiftInstance:
        first, last = self.bursts[0], self.bursts[-1]
        return ShiftInstance(
            shift_code=self.config.code,
            name=first.name,
            shift_date=first.burst_start.date(),
            check_in=first.burst_start,
            check_out=last.burst_end,
            bursts=tuple(self.bursts),
            employee_id=first.swipes[0].employee_id if first.swipes else "",
        )


def _floor_minute(value: datetime) -> datetime:
    return value.replace(second=0, microsecond=0)


def activity_window(config: ShiftConfig, opened_at: datetime) -> tuple[datetime, datetime]:
    """Absolute ``[check-in start, check-out end]`` span for a shift opened at ``opened_at``.

    The span starts on the opening day, or the day before when the check-in
    range wraps midnight and the shift was opened after midnight.
    """
    start_minute = config.activity_start.minute_of_day
    opened_minute = TimeOfDay.of(opened_at).minute_of_day

    midnight = datetime.combine(opened_at.date(), datetime.min.time())
    start = midnight + timedelta(minutes=start_minute)
    if opened_minute < start_minute:
        start -= timedelta(days=1)

    length = (config.activity_end.minute_of_day - start_minute) % MINUTES_PER_DAY or MINUTES_PER_DAY
    return start, start + timedelta(minutes=length)


def match_check_in(burst: BurstRecord, shift_configs: Mapping[str, ShiftConfig]) -> Optional[ShiftConfig]:
    """First shift code, in declared order, whose check-in range holds the burst start."""
    at = TimeOfDay.of(burst.burst_start)
    for config in shift_configs.values():
        if is_time_in_range(at, config.check_in_start, config.check_in_end):
            return config
    return None


def detect_shifts(bursts: Iterable[BurstRecord], shift_configs: Mapping[str, ShiftConfig]) -> list[ShiftInstance]:
    """Assign bursts to per-employee, per-day shift instances.

    Bursts matching no check-in range while no shift is open are orphans and
    do not appear in the result.
    """
    by_user: dict[str, list[BurstRecord]] = {}
    for burst in bursts:
        by_user.setdefault(burst.name, []).append(burst)

    shifts: list[ShiftInstance] = []
    for user_bursts in by_user.values():
        user_bursts.sort(key=lambda b: b.burst_start)
        shifts.extend(_detect_user_shifts(user_bursts, shift_configs))
    return shifts


def _detect_user_shifts(bursts: Sequence[BurstRecord], shift_configs: Mapping[str, ShiftConfig]) -> list[ShiftInstance]:
    closed: list[ShiftInstance] = []
    current: Optional[_OpenShift] = None

    for burst in bursts:
        if current is not None and current.contains(burst):
            current.bursts.append(burst)
            continue

        if current is not None:
            closed.append(current.close())
            current = None

        config = match_check_in(burst, shift_configs)
        if config is None:
            continue

        start, end = activity_window(config, burst.burst_start)
        current = _OpenShift(config=config, window_start=start, window_end=end, bursts=[burst])

    if current is not None:
        closed.append(current.close())
    return closed


def shift_statistics(shifts: Sequence[ShiftInstance]) -> ShiftStatistics:
    total_bursts = sum(len(s.bursts) for s in shifts)
    return ShiftStatistics(
        total_shifts=len(shifts),
        user_count=len({s.name for s in shifts}),
        shifts_by_type=dict(Counter(s.shift_code for s in shifts)),
        average_bursts_per_shift=total_bursts / len(shifts) if shifts else 0.0,
    )
