from __future__ import annotations

import re
from datetime import datetime

from ..core.exceptions import ValidationError

_FALLBACK_FORMATS = (
    "%d/%m/%Y %H:%M:%S",
    "%d/%m/%Y %H:%M",
    "%d-%m-%Y %H:%M:%S",
    "%d-%m-%Y %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y.%m.%d %H:%M:%S",
    "%Y.%m.%d %H:%M",
)


def parse_date_time(date_text: str, time_text: str) -> datetime:
    """Combine the Date and Time cells of a swipe row into one timestamp.

    Dates may use ``/``, ``-`` or ``.`` as separator. A leading part above 31
    is read as the year (Y-M-D); anything else is read day first (D-M-Y).
    """
    date_parts = re.split(r"[/.\-]", date_text.strip())
    time_parts = time_text.strip().split(":")

    if len(date_parts) == 3 and len(time_parts) >= 2:
        try:
            first, second, third = (int(p) for p in date_parts)
            hour, minute = int(time_parts[0]), int(time_parts[1])
            sec = int(time_parts[2]) if len(time_parts) > 2 and time_parts[2] else 0
            if first > 31:
                return datetime(first, second, third, hour, minute, sec)
            return datetime(third, second, first, hour, minute, sec)
        except ValueError:
            pass

    combined = f"{date_text.strip()} {time_text.strip()}"
    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(combined, fmt)
        except ValueError:
            continue

    raise ValidationError(f"Unable to parse date/time: {combined}")
