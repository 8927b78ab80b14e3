from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date, datetime
from typing import Optional

from ..bursts.model import BurstRecord
from ..common.timeofday import TimeOfDay, as_time_of_day


@dataclass(frozen=True)
class ShiftConfig:
    """Rule set of one shift code (A, B, C, ...).

    Time fields accept ``TimeOfDay`` or ``"HH:MM[:SS]"`` text; text is
    converted on construction so the rest of the pipeline only sees
    ``TimeOfDay`` values.
    """

    code: str
    display_name: str
    check_in_start: TimeOfDay
    check_in_end: TimeOfDay
    shift_start: TimeOfDay
    check_in_on_time_cutoff: TimeOfDay
    check_in_late_threshold: TimeOfDay
    check_out_start: TimeOfDay
    check_out_end: TimeOfDay
    break_search_start: TimeOfDay
    break_search_end: TimeOfDay
    break_out_checkpoint: TimeOfDay
    midpoint: TimeOfDay
    minimum_break_gap_minutes: float
    break_end_time: TimeOfDay
    break_in_on_time_cutoff: TimeOfDay
    break_in_late_threshold: TimeOfDay

    def __post_init__(self):
        for f in fields(self):
            if f.name in {"code", "display_name", "minimum_break_gap_minutes"}:
                continue
            object.__setattr__(self, f.name, as_time_of_day(getattr(self, f.name)))

    @property
    def activity_start(self) -> TimeOfDay:
        return self.check_in_start

    @property
    def activity_end(self) -> TimeOfDay:
        return self.check_out_end


@dataclass(frozen=True)
class ShiftInstance:
    """One employee's work period on one day under one shift code."""

    shift_code: str
    name: str
    shift_date: date
    check_in: datetime
    check_out: Optional[datetime]
    bursts: tuple[BurstRecord, ...]
    # badge id of the opening swipe; "" when bursts carry no swipes
    employee_id: str = ""


@dataclass(frozen=True)
class ShiftStatistics:
    total_shifts: int
    user_count: int
    shifts_by_type: dict[str, int]
    average_bursts_per_shift: float
