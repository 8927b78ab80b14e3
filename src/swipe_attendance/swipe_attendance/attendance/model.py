from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..core.enums import LatenessStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """One output row: a detected shift with its break and lateness labels."""

    date: date
    employee_id: str
    name: str
    shift: str
    check_in: str
    break_out: str
    break_in: str
    check_out: str
    check_in_status: LatenessStatus
    break_in_status: LatenessStatus


@dataclass(frozen=True)
class ProcessingResult:
    records: list[AttendanceRecord]
    records_processed: int
    bursts_detected: int
    shift_instances_found: int
    warnings: list[str] = field(default_factory=list)
    # row bookkeeping, filled only when processing tabular rows
    total_rows: int = 0
    filtered_by_status: int = 0
    filtered_by_user: int = 0

    @property
    def attendance_records_generated(self) -> int:
        return len(self.records)

    @property
    def message(self) -> str:
        if not self.records:
            return "No attendance records generated"
        return (
            f"Processed {self.records_processed} swipes -> {self.bursts_detected} bursts -> "
            f"{self.shift_instances_found} shifts -> {self.attendance_records_generated} attendance records"
        )
