from __future__ import annotations

from enum import Enum


class LatenessStatus(str, Enum):
    """Label written into the check-in / break-in status columns."""

    ON_TIME = "On Time"
    LATE = "Late"
    UNCLASSIFIED = ""
