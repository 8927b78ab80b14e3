from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import pandas as pd

from ..attendance.model import AttendanceRecord, ProcessingResult
from ..core.enums import LatenessStatus

COLUMNS = [
    "Date",
    "ID",
    "Name",
    "Shift",
    "Check In",
    "Break Out",
    "Break In",
    "Check Out",
    "Check In Status",
    "Break In Status",
]


@dataclass(frozen=True)
class ReportData:
    rows: pd.DataFrame
    summary: pd.DataFrame


def records_to_frame(records: Sequence[AttendanceRecord]) -> pd.DataFrame:
    """Tabular view handed to spreadsheet writers and dashboards."""
    data = [
        {
            "Date": r.date.strftime("%Y-%m-%d"),
            "ID": r.employee_id,
            "Name": r.name,
            "Shift": r.shift,
            "Check In": r.check_in,
            "Break Out": r.break_out,
            "Break In": r.break_in,
            "Check Out": r.check_out,
            "Check In Status": r.check_in_status.value,
            "Break In Status": r.break_in_status.value,
        }
        for r in records
    ]
    return pd.DataFrame(data, columns=COLUMNS)


def summarize_by_employee(records: Sequence[AttendanceRecord]) -> pd.DataFrame:
    """Per employee: shift count, late check-ins and late break-ins."""
    frame = records_to_frame(records)
    if frame.empty:
        return pd.DataFrame(columns=["ID", "Name", "Shifts", "Late Check Ins", "Late Break Ins"])

    late = LatenessStatus.LATE.value
    frame = frame.assign(
        late_check_in=(frame["Check In Status"] == late).astype(int),
        late_break_in=(frame["Break In Status"] == late).astype(int),
    )
    summary = (
        frame.groupby(["ID", "Name"], sort=False)
        .agg(
            Shifts=("Date", "size"),
            **{
                "Late Check Ins": ("late_check_in", "sum"),
                "Late Break Ins": ("late_break_in", "sum"),
            },
        )
        .reset_index()
    )
    return summary.sort_values(["Shifts", "Name"], ascending=[False, True], kind="stable").reset_index(drop=True)


def build_attendance_report(records: Sequence[AttendanceRecord]) -> ReportData:
    return ReportData(rows=records_to_frame(records), summary=summarize_by_employee(records))


class AttendanceReportService:
    """Builds the tabular report for one processing result."""

    def build_attendance_report(self, records: Sequence[AttendanceRecord]) -> ReportData:
        return build_attendance_report(records)

    def build_from_result(self, result: ProcessingResult) -> ReportData:
        return build_attendance_report(result.records)
