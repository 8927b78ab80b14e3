from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Union

from ..core.exceptions import ConfigurationError

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """Wall-clock time without a date, stored as seconds since midnight.

    Configured shift boundaries and the time part of swipe timestamps are both
    expressed with this type, so range checks never depend on a timezone or on
    the calendar date of the swipe.
    """

    seconds: int

    def __post_init__(self):
        if not 0 <= self.seconds < SECONDS_PER_DAY:
            raise ConfigurationError(f"Time of day out of range: {self.seconds}s")

    @classmethod
    def parse(cls, value: str) -> "TimeOfDay":
        """Parse ``HH:MM`` or ``HH:MM:SS``."""
        parts = str(value).strip().split(":")
        if len(parts) not in (2, 3):
            raise ConfigurationError(f"Invalid time string: {value!r}")
        try:
            hours, minutes = int(parts[0]), int(parts[1])
            seconds = int(parts[2]) if len(parts) == 3 and parts[2] else 0
        except ValueError as exc:
            raise ConfigurationError(f"Invalid time string: {value!r}") from exc
        if not (0 <= hours < 24 and 0 <= minutes < 60 and 0 <= seconds < 60):
            raise ConfigurationError(f"Invalid time string: {value!r}")
        return cls(hours * 3600 + minutes * 60 + seconds)

    @classmethod
    def of(cls, value: Union[datetime, time]) -> "TimeOfDay":
        return cls(value.hour * 3600 + value.minute * 60 + value.second)

    @property
    def minute_of_day(self) -> int:
        return self.seconds // 60

    def __str__(self) -> str:
        return f"{self.seconds // 3600:02d}:{(self.seconds % 3600) // 60:02d}:{self.seconds % 60:02d}"


def as_time_of_day(value: Union["TimeOfDay", str, datetime, time]) -> TimeOfDay:
    if isinstance(value, TimeOfDay):
        return value
    if isinstance(value, (datetime, time)):
        return TimeOfDay.of(value)
    return TimeOfDay.parse(value)


def is_time_in_range(value: TimeOfDay, start: TimeOfDay, end: TimeOfDay) -> bool:
    """Inclusive, minute-resolution range test; ``start > end`` wraps midnight."""
    t, lo, hi = value.minute_of_day, start.minute_of_day, end.minute_of_day
    if lo <= hi:
        return lo <= t <= hi
    return t >= lo or t <= hi


def seconds_apart(a: TimeOfDay, b: TimeOfDay) -> int:
    """Absolute distance in seconds, measured within the same day."""
    return abs(a.seconds - b.seconds)


def format_time(value: datetime) -> str:
    return value.strftime("%H:%M:%S")
