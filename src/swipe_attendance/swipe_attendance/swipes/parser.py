from __future__ import annotations

import logging
from typing import Any, Collection, Iterable, Mapping, Optional

from ..common.datetime_utils import parse_date_time
from ..common.validators import clean_cell, require_columns
from ..core.constants import DEFAULT_STATUS_FILTER, REQUIRED_COLUMNS
from ..core.exceptions import ValidationError
from .model import SwipeBatch, SwipeRecord

logger = logging.getLogger(__name__)


def _cell(row: Mapping[str, Any], column: str) -> str:
    value = clean_cell(row.get(column))
    return value or clean_cell(row.get(column.lower()))


def parse_swipe_row(row: Mapping[str, Any], index: int) -> SwipeRecord:
    """Build a SwipeRecord from one tabular row (``ID``/``Name``/``Date``/``Time``/``Status``)."""
    employee_id = _cell(row, "ID")
    name = _cell(row, "Name")
    date_text = _cell(row, "Date")
    time_text = _cell(row, "Time")
    status = _cell(row, "Status")

    if not (employee_id and name and date_text and time_text and status):
        raise ValidationError(f"Invalid row at index {index}: missing required fields")

    return SwipeRecord(
        employee_id=employee_id,
        name=name,
        timestamp=parse_date_time(date_text, time_text),
        time=time_text,
        status=status,
    )


def validate_required_columns(rows: list[Mapping[str, Any]], columns=REQUIRED_COLUMNS) -> None:
    require_columns(rows, columns)


def parse_swipe_rows(
    rows: Iterable[Mapping[str, Any]],
    *,
    status_filter: Collection[str] = DEFAULT_STATUS_FILTER,
    allowed_users: Optional[Collection[str]] = None,
) -> SwipeBatch:
    """Parse rows, keeping only accepted statuses and (optionally) known users.

    A malformed row never aborts the batch: it is skipped and reported as a
    warning numbered like the spreadsheet row it came from (header is row 1).
    """
    swipes: list[SwipeRecord] = []
    warnings: list[str] = []
    filtered_by_status = 0
    filtered_by_user = 0
    total = 0

    for i, row in enumerate(rows):
        total += 1
        try:
            swipe = parse_swipe_row(row, i)
        except ValidationError as exc:
            warnings.append(f"Row {i + 2}: {exc}")
            continue

        if swipe.status not in status_filter:
            filtered_by_status += 1
            continue

        if allowed_users is not None and swipe.name not in allowed_users:
            filtered_by_user += 1
            logger.debug("Filtered out unauthorized user: %s (ID: %s)", swipe.name, swipe.employee_id)
            continue

        swipes.append(swipe)

    if warnings or filtered_by_status or filtered_by_user:
        logger.info(
            "Parsed %d/%d rows (status filtered=%d, user filtered=%d, invalid=%d)",
            len(swipes),
            total,
            filtered_by_status,
            filtered_by_user,
            len(warnings),
        )

    return SwipeBatch(
        swipes=swipes,
        total_rows=total,
        filtered_by_status=filtered_by_status,
        filtered_by_user=filtered_by_user,
        warnings=warnings,
    )
