from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceProcessingService
from .reports.service import AttendanceReportService
from .shifts.model import ShiftConfig
from .shifts.rules import burst_threshold_from_rules, load_rule_file, merge_shift_configs, status_filter_from_rules
from .users.mapping import UserMapping, load_users_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    rules: dict
    shift_configs: dict[str, ShiftConfig]
    user_mapping: UserMapping

    processing_service: AttendanceProcessingService
    report_service: AttendanceReportService


def build_container(*, app_config: dict) -> Container:
    rule_file: Optional[str] = app_config.get("rule_file")
    users_file: Optional[str] = app_config.get("users_file")

    rules = load_rule_file(rule_file) if rule_file else {}
    user_mapping = load_users_file(users_file) if users_file else UserMapping()
    shift_configs = merge_shift_configs(rules)

    threshold = app_config.get("burst_threshold_minutes") or burst_threshold_from_rules(rules)
    status_filter = app_config.get("status_filter") or status_filter_from_rules(rules)
    # Empty allow-list means no identity filtering.
    allowed_users = user_mapping.allowed_users(rules) or None

    logger.debug(
        "Shift codes=%s threshold=%smin status_filter=%s allowed_users=%s",
        list(shift_configs),
        threshold,
        list(status_filter),
        sorted(allowed_users) if allowed_users else "any",
    )

    processing_service = AttendanceProcessingService(
        shift_configs,
        burst_threshold_minutes=threshold,
        user_mapping=user_mapping,
        status_filter=status_filter,
        allowed_users=allowed_users,
    )

    return Container(
        rules=rules,
        shift_configs=shift_configs,
        user_mapping=user_mapping,
        processing_service=processing_service,
        report_service=AttendanceReportService(),
    )
