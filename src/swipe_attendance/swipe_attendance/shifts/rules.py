from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from ..common.timeofday import TimeOfDay
from ..core.constants import DEFAULT_BURST_THRESHOLD_MINUTES, DEFAULT_STATUS_FILTER, MAX_RULE_FILE_BYTES
from ..core.exceptions import ConfigurationError
from .defaults import DEFAULT_SHIFT_CONFIGS
from .model import ShiftConfig

logger = logging.getLogger(__name__)


class _RuleLoader(yaml.SafeLoader):
    """SafeLoader that keeps ``14:05:00`` as text instead of a base-60 integer."""


_RuleLoader.yaml_implicit_resolvers = {
    first: [(tag, rx) for tag, rx in resolvers if tag != "tag:yaml.org,2002:int"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_RuleLoader.add_implicit_resolver(
    "tag:yaml.org,2002:int",
    re.compile(r"^(?:[-+]?0b[0-1_]+|[-+]?0[0-7_]+|[-+]?(?:0|[1-9][0-9_]*)|[-+]?0x[0-9a-fA-F_]+)$"),
    list("-+0123456789"),
)


def read_yaml_file(path: Union[str, Path], *, fallback: Any) -> Any:
    """Load a YAML document, returning ``fallback`` for a missing, empty or oversized file."""
    path = Path(path)
    if not path.exists():
        logger.warning("YAML file not found: %s", path)
        return fallback
    if not path.is_file():
        logger.error("Path is not a file: %s", path)
        return fallback

    size = path.stat().st_size
    if size == 0:
        logger.warning("YAML file is empty: %s", path)
        return fallback
    if size > MAX_RULE_FILE_BYTES:
        logger.error("YAML file too large: %s (%d bytes)", path, size)
        return fallback

    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.load(fh, Loader=_RuleLoader)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Cannot read {path.name}: {exc}") from exc
    return fallback if data is None else data


def load_rule_file(path: Union[str, Path]) -> dict:
    data = read_yaml_file(path, fallback={})
    if not isinstance(data, dict):
        raise ConfigurationError(f"{Path(path).name} must contain a mapping at top level")
    return data


def _split_range(value: str) -> tuple[TimeOfDay, TimeOfDay]:
    parts = str(value).split("-")
    if len(parts) != 2:
        raise ConfigurationError(f"Invalid search range: {value!r}")
    return TimeOfDay.parse(parts[0]), TimeOfDay.parse(parts[1])


def _shift_config(code: str, shift: Mapping[str, Any], breaks: Mapping[str, Any]) -> ShiftConfig:
    try:
        check_in = shift["check_in"]
        check_in_start, check_in_end = _split_range(check_in["search_range"])
        check_out_start, check_out_end = _split_range(shift["check_out"]["search_range"])
        break_start, break_end = _split_range(breaks["break_out"]["search_range"])
        break_in = breaks["break_in"]

        return ShiftConfig(
            code=code,
            display_name=str(shift.get("name", code)),
            check_in_start=check_in_start,
            check_in_end=check_in_end,
            shift_start=str(check_in["shift_start"]),
            check_in_on_time_cutoff=str(check_in["on_time_cutoff"]),
            check_in_late_threshold=str(check_in["late_threshold"]),
            check_out_start=check_out_start,
            check_out_end=check_out_end,
            break_search_start=break_start,
            break_search_end=break_end,
            break_out_checkpoint=str(breaks["break_out"]["checkpoint"]),
            midpoint=str(breaks["midpoint_checkpoint"]),
            minimum_break_gap_minutes=float(breaks["minimum_break_gap_minutes"]),
            break_end_time=str(break_in["break_end_time"]),
            break_in_on_time_cutoff=str(break_in["on_time_cutoff"]),
            break_in_late_threshold=str(break_in["late_threshold"]),
        )
    except (KeyError, TypeError) as exc:
        raise ConfigurationError(f"Incomplete rules for shift {code}: missing {exc}") from exc


def shift_configs_from_rules(rules: Mapping[str, Any]) -> dict[str, ShiftConfig]:
    """Convert the ``shift_structure`` / ``break_detection`` sections into ShiftConfigs.

    A shift is converted only when both its shift entry and its
    ``<code>_shift`` break parameters exist.
    """
    shifts = (rules.get("shift_structure") or {}).get("shifts")
    breaks = (rules.get("break_detection") or {}).get("parameters")

    if not shifts or not breaks:
        logger.warning("Missing shift or break configuration in rules, using defaults")
        return {}

    configs: dict[str, ShiftConfig] = {}
    for code, shift in shifts.items():
        code = str(code)
        shift_breaks = breaks.get(f"{code}_shift")
        if shift_breaks is None:
            logger.warning("No break parameters for shift %s, skipping it", code)
            continue
        configs[code] = _shift_config(code, shift, shift_breaks)
    return configs


def merge_shift_configs(rules: Optional[Mapping[str, Any]] = None) -> dict[str, ShiftConfig]:
    """Built-in A/B/C rules overlaid by whatever the rule document defines.

    Declared order (defaults first, then extra codes) is the check-in
    matching priority used by the shift detector.
    """
    merged = dict(DEFAULT_SHIFT_CONFIGS)
    merged.update(shift_configs_from_rules(rules or {}))
    return merged


def burst_threshold_from_rules(rules: Mapping[str, Any]) -> float:
    return float(rules.get("burst_threshold_minutes") or DEFAULT_BURST_THRESHOLD_MINUTES)


def status_filter_from_rules(rules: Mapping[str, Any]) -> tuple[str, ...]:
    value = rules.get("status_filter") or DEFAULT_STATUS_FILTER
    # a single status may be written as a plain scalar
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value)
