from dataclasses import replace
from datetime import datetime
from typing import Optional

from src.swipe_attendance.swipe_attendance.breaks.detector import detect_break
from src.swipe_attendance.swipe_attendance.bursts.model import BurstRecord
from src.swipe_attendance.swipe_attendance.common.timeofday import TimeOfDay


def _at(hhmm: str) -> datetime:
    h, m = hhmm.split(":")
    return datetime(2024, 1, 1, int(h), int(m))


def _burst(start: str, end: Optional[str] = None) -> BurstRecord:
    return BurstRecord(name="John", burst_id=f"John_{start}", burst_start=_at(start), burst_end=_at(end or start), swipe_count=1)


def test_gap_above_minimum_gives_break(morning_config):
    result = detect_break([_burst("09:55", "10:00"), _burst("10:25", "10:30")], morning_config)

    assert result.break_out == "10:00:00"
    assert result.break_in == "10:25:00"
    assert result.break_in_time == TimeOfDay.parse("10:25:00")


def test_only_the_long_gap_qualifies(morning_config):
    result = detect_break([_burst("10:00"), _burst("10:03"), _burst("10:20")], morning_config)

    # 10:03 -> 10:20 is a qualifying gap, so this is still gap detection
    assert result.break_out == "10:03:00"
    assert result.break_in == "10:20:00"


def test_equidistant_break_out_keeps_first_gap(morning_config):
    result = detect_break([_burst("09:50", "09:55"), _burst("10:05"), _burst("10:15")], morning_config)

    assert result.break_out == "09:55:00"


def test_break_in_closest_to_cutoff(morning_config):
    result = detect_break([_burst("09:55"), _burst("10:05"), _burst("10:30")], morning_config)

    assert result.break_in == "10:30:00"


def test_break_out_and_in_come_from_different_gaps(morning_config):
    result = detect_break([_burst("09:55", "09:58"), _burst("10:08"), _burst("10:34")], morning_config)

    assert result.break_out == "09:58:00"
    assert result.break_in == "10:34:00"


def test_midpoint_split_without_qualifying_gap(morning_config):
    morning_config = replace(morning_config, minimum_break_gap_minutes=10)
    result = detect_break([_burst("10:10"), _burst("10:12"), _burst("10:20")], morning_config)

    assert result.break_out == "10:12:00"
    assert result.break_in == "10:20:00"


def test_all_before_midpoint_with_gap(morning_config):
    result = detect_break([_burst("10:00"), _burst("10:10")], morning_config)

    assert (result.break_out, result.break_in) == ("10:00:00", "10:10:00")


def test_all_before_midpoint_without_gap(morning_config):
    result = detect_break([_burst("10:10"), _burst("10:12")], morning_config)

    assert result.break_out == "10:12:00"
    assert result.break_in == ""
    assert result.break_in_time is None


def test_all_after_midpoint_with_gap(morning_config):
    result = detect_break([_burst("10:20"), _burst("10:30")], morning_config)

    assert (result.break_out, result.break_in) == ("10:20:00", "10:30:00")


def test_all_after_midpoint_without_gap(morning_config):
    result = detect_break([_burst("10:20"), _burst("10:22")], morning_config)

    assert result.break_out == ""
    assert result.break_in == "10:20:00"
    assert result.break_in_time == TimeOfDay.parse("10:20:00")


def test_single_burst_each_side_of_midpoint(morning_config):
    before = detect_break([_burst("10:10")], morning_config)
    after = detect_break([_burst("10:20")], morning_config)

    assert (before.break_out, before.break_in, before.break_in_time) == ("10:10:00", "", None)
    assert (after.break_out, after.break_in) == ("", "10:20:00")


def test_uses_burst_end_for_out_and_start_for_in(morning_config):
    result = detect_break([_burst("09:55", "10:01"), _burst("10:25", "10:30")], morning_config)

    assert result.break_out == "10:01:00"
    assert result.break_in == "10:25:00"


def test_bursts_outside_break_window_are_ignored(morning_config):
    result = detect_break([_burst("06:00"), _burst("14:00")], morning_config)

    assert (result.break_out, result.break_in, result.break_in_time) == ("", "", None)


def test_burst_overlapping_window_start_counts(morning_config):
    result = detect_break([_burst("09:45", "09:51"), _burst("10:25")], morning_config)

    assert result.break_out == "09:51:00"
    assert result.break_in == "10:25:00"


def test_night_break_after_midnight(shift_configs):
    night = shift_configs["C"]
    bursts = [
        BurstRecord(name="N", burst_id="N_0", burst_start=datetime(2024, 1, 1, 22, 0), burst_end=datetime(2024, 1, 1, 22, 0), swipe_count=1),
        BurstRecord(name="N", burst_id="N_1", burst_start=datetime(2024, 1, 2, 2, 0), burst_end=datetime(2024, 1, 2, 2, 1), swipe_count=2),
        BurstRecord(name="N", burst_id="N_2", burst_start=datetime(2024, 1, 2, 2, 40), burst_end=datetime(2024, 1, 2, 2, 40), swipe_count=1),
    ]

    result = detect_break(bursts, night)

    assert result.break_out == "02:01:00"
    assert result.break_in == "02:40:00"


def test_empty_input(morning_config):
    assert detect_break([], morning_config).break_in_time is None
