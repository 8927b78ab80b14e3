from __future__ import annotations

from typing import Optional, Union

from ..common.timeofday import TimeOfDay, as_time_of_day
from ..core.enums import LatenessStatus
from ..shifts.model import ShiftConfig

TimeValue = Union[TimeOfDay, str, None]


def classify(value: TimeValue, on_time_cutoff: TimeOfDay, late_threshold: TimeOfDay) -> LatenessStatus:
    """On time up to the cutoff, late from the threshold; anything between stays unclassified."""
    if value is None or value == "":
        return LatenessStatus.UNCLASSIFIED

    at = as_time_of_day(value)
    if at <= on_time_cutoff:
        return LatenessStatus.ON_TIME
    if at >= late_threshold:
        return LatenessStatus.LATE
    return LatenessStatus.UNCLASSIFIED


def check_in_status(value: TimeValue, config: ShiftConfig) -> LatenessStatus:
    return classify(value, config.check_in_on_time_cutoff, config.check_in_late_threshold)


def break_in_status(value: Optional[TimeValue], config: ShiftConfig) -> LatenessStatus:
    return classify(value, config.break_in_on_time_cutoff, config.break_in_late_threshold)
