from datetime import datetime

import pytest

from src.swipe_attendance.swipe_attendance.common.datetime_utils import parse_date_time
from src.swipe_attendance.swipe_attendance.core.exceptions import ValidationError
from src.swipe_attendance.swipe_attendance.swipes.parser import (
    parse_swipe_row,
    parse_swipe_rows,
    validate_required_columns,
)


def _row(name="Silver_Bui", date="01/01/2024", time="06:00:00", status="Success", id_="101"):
    return {"ID": id_, "Name": name, "Date": date, "Time": time, "Status": status}


@pytest.mark.parametrize(
    "date_text, expected",
    [
        ("02/01/2024", datetime(2024, 1, 2, 6, 0)),
        ("02-01-2024", datetime(2024, 1, 2, 6, 0)),
        ("2024.01.02", datetime(2024, 1, 2, 6, 0)),
        ("2024-01-02", datetime(2024, 1, 2, 6, 0)),
    ],
)
def test_parse_date_time_separators(date_text, expected):
    assert parse_date_time(date_text, "06:00") == expected


def test_parse_date_time_rejects_garbage():
    with pytest.raises(ValidationError):
        parse_date_time("someday", "06:00")


def test_parse_row_accepts_lowercase_keys_and_trims():
    swipe = parse_swipe_row(
        {"id": " 7 ", "name": " Minh ", "date": "03/01/2024", "time": "22:01:05", "status": "Success"}, 0
    )

    assert swipe.employee_id == "7"
    assert swipe.name == "Minh"
    assert swipe.timestamp == datetime(2024, 1, 3, 22, 1, 5)


def test_parse_row_missing_field_raises():
    with pytest.raises(ValidationError):
        parse_swipe_row(_row(status=""), 3)


def test_parse_rows_skips_bad_rows_and_keeps_going():
    rows = [_row(), _row(time=""), _row(time="06:01:00")]

    batch = parse_swipe_rows(rows, status_filter=("Success",))

    assert len(batch.swipes) == 2
    assert batch.total_rows == 3
    assert batch.warnings == ["Row 3: Invalid row at index 1: missing required fields"]


def test_parse_rows_applies_status_then_user_filter():
    rows = [_row(status="Failed"), _row(name="Stranger"), _row()]

    batch = parse_swipe_rows(rows, status_filter=("Success",), allowed_users={"Silver_Bui"})

    assert [s.name for s in batch.swipes] == ["Silver_Bui"]
    assert batch.filtered_by_status == 1
    assert batch.filtered_by_user == 1


def test_validate_required_columns_names_missing_ones():
    with pytest.raises(ValidationError, match="Status"):
        validate_required_columns([{"ID": 1, "Name": "a", "Date": "x", "Time": "y"}])
