from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Collection, Iterable, Mapping, Optional, Sequence

from ..breaks.detector import detect_break
from ..bursts.detector import detect_bursts
from ..common.timeofday import format_time
from ..core.constants import DEFAULT_BURST_THRESHOLD_MINUTES, DEFAULT_STATUS_FILTER, MAX_REPORTED_WARNINGS
from ..shifts.detector import detect_shifts
from ..shifts.model import ShiftConfig, ShiftInstance
from ..swipes.model import SwipeRecord
from ..swipes.parser import parse_swipe_rows, validate_required_columns
from ..users.mapping import UserMapping
from .model import AttendanceRecord, ProcessingResult
from .status import break_in_status, check_in_status

logger = logging.getLogger(__name__)


class AttendanceProcessingService:
    """Runs swipes through bursts -> shifts -> breaks -> statuses.

    Holds only read-only configuration; every call is an independent batch.
    """

    def __init__(
        self,
        shift_configs: Mapping[str, ShiftConfig],
        *,
        burst_threshold_minutes: float = DEFAULT_BURST_THRESHOLD_MINUTES,
        user_mapping: Optional[UserMapping] = None,
        status_filter: Collection[str] = DEFAULT_STATUS_FILTER,
        allowed_users: Optional[Collection[str]] = None,
    ):
        self._shift_configs = dict(shift_configs)
        self._threshold = float(burst_threshold_minutes)
        self._users = user_mapping or UserMapping()
        self._status_filter = tuple(status_filter)
        self._allowed_users = frozenset(allowed_users) if allowed_users else None

    @property
    def shift_configs(self) -> Mapping[str, ShiftConfig]:
        return self._shift_configs

    def process(self, swipes: Iterable[SwipeRecord], *, warnings: Sequence[str] = ()) -> ProcessingResult:
        swipes = list(swipes)
        bursts = detect_bursts(swipes, self._threshold)
        shifts = detect_shifts(bursts, self._shift_configs)
        records = [self._to_record(shift) for shift in shifts]

        result = ProcessingResult(
            records=records,
            records_processed=len(swipes),
            bursts_detected=len(bursts),
            shift_instances_found=len(shifts),
            warnings=list(warnings)[:MAX_REPORTED_WARNINGS],
        )
        logger.info(result.message)
        return result

    def process_rows(self, rows: Sequence[Mapping[str, Any]]) -> ProcessingResult:
        """Parse tabular swipe rows, then process the accepted swipes."""
        validate_required_columns(list(rows))
        batch = parse_swipe_rows(rows, status_filter=self._status_filter, allowed_users=self._allowed_users)
        result = self.process(batch.swipes, warnings=batch.warnings)
        return replace(
            result,
            total_rows=batch.total_rows,
            filtered_by_status=batch.filtered_by_status,
            filtered_by_user=batch.filtered_by_user,
        )

    def _to_record(self, shift: ShiftInstance) -> AttendanceRecord:
        config = self._shift_configs[shift.shift_code]
        breaks = detect_break(shift.bursts, config)
        identity = self._users.map(shift.name, default_id=shift.employee_id)
        check_in = format_time(shift.check_in)

        return AttendanceRecord(
            date=shift.shift_date,
            employee_id=identity.employee_id,
            name=identity.name,
            shift=config.display_name,
            check_in=check_in,
            break_out=breaks.break_out,
            break_in=breaks.break_in,
            check_out=format_time(shift.check_out) if shift.check_out else "",
            check_in_status=check_in_status(check_in, config),
            break_in_status=break_in_status(breaks.break_in_time, config),
        )
