from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.timeofday import TimeOfDay


@dataclass(frozen=True)
class BreakTimes:
    break_out: str = ""
    break_in: str = ""
    break_in_time: Optional[TimeOfDay] = None


NO_BREAK = BreakTimes()
