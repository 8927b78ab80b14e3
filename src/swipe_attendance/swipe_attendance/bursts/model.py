from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..swipes.model import SwipeRecord


@dataclass(frozen=True)
class BurstRecord:
    """Consecutive swipes by one person collapsed into a single event."""

    name: str
    burst_id: str
    burst_start: datetime
    burst_end: datetime
    swipe_count: int
    swipes: tuple[SwipeRecord, ...] = ()


@dataclass(frozen=True)
class BurstStatistics:
    total_bursts: int
    total_swipes: int
    average_swipes_per_burst: float
    user_count: int
