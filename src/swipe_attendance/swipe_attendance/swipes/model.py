from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class SwipeRecord:
    """One raw badge event as read from the access-control export."""

    employee_id: str
    name: str
    timestamp: datetime
    time: str
    status: str


@dataclass(frozen=True)
class SwipeBatch:
    """Parsed rows plus the bookkeeping of what was dropped and why."""

    swipes: list[SwipeRecord]
    total_rows: int
    filtered_by_status: int = 0
    filtered_by_user: int = 0
    warnings: list[str] = field(default_factory=list)
