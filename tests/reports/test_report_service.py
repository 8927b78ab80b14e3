from datetime import date

from src.swipe_attendance.swipe_attendance.attendance.model import AttendanceRecord
from src.swipe_attendance.swipe_attendance.core.enums import LatenessStatus
from src.swipe_attendance.swipe_attendance.reports.service import COLUMNS, build_attendance_report, records_to_frame


def _record(name, day, check_in_status=LatenessStatus.ON_TIME, break_in_status=LatenessStatus.UNCLASSIFIED):
    return AttendanceRecord(
        date=date(2024, 1, day),
        employee_id=f"ID-{name}",
        name=name,
        shift="Morning",
        check_in="06:00:00",
        break_out="",
        break_in="",
        check_out="14:00:00",
        check_in_status=check_in_status,
        break_in_status=break_in_status,
    )


def test_frame_has_output_columns_in_order():
    frame = records_to_frame([_record("John", 1, LatenessStatus.LATE)])

    assert list(frame.columns) == COLUMNS
    row = frame.iloc[0]
    assert row["Date"] == "2024-01-01"
    assert row["Check In Status"] == "Late"
    assert row["Break In Status"] == ""


def test_empty_report():
    report = build_attendance_report([])

    assert report.rows.empty
    assert list(report.rows.columns) == COLUMNS
    assert report.summary.empty


def test_summary_counts_shifts_and_late_arrivals():
    records = [
        _record("John", 1, LatenessStatus.LATE),
        _record("John", 2, LatenessStatus.ON_TIME, LatenessStatus.LATE),
        _record("Amy", 1),
        _record("Zed", 1, LatenessStatus.LATE),
        _record("Zed", 2),
        _record("Zed", 3),
    ]

    summary = build_attendance_report(records).summary

    assert summary["Name"].tolist() == ["Zed", "John", "Amy"]
    assert summary["Shifts"].tolist() == [3, 2, 1]
    assert summary["Late Check Ins"].tolist() == [1, 1, 0]
    assert summary["Late Break Ins"].tolist() == [0, 1, 0]
