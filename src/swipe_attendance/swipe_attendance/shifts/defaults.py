"""Built-in shift rules used when the rule file does not override a shift."""

from .model import ShiftConfig

DEFAULT_SHIFT_CONFIGS: dict[str, ShiftConfig] = {
    "A": ShiftConfig(
        code="A",
        display_name="Morning",
        check_in_start="05:30:00",
        check_in_end="06:35:00",
        shift_start="06:00:00",
        check_in_on_time_cutoff="06:04:59",
        check_in_late_threshold="06:05:00",
        check_out_start="13:30:00",
        check_out_end="14:35:00",
        break_search_start="09:50:00",
        break_search_end="10:35:00",
        break_out_checkpoint="10:00:00",
        midpoint="10:15:00",
        minimum_break_gap_minutes=5,
        break_end_time="10:30:00",
        break_in_on_time_cutoff="10:34:59",
        break_in_late_threshold="10:35:00",
    ),
    "B": ShiftConfig(
        code="B",
        display_name="Afternoon",
        check_in_start="13:30:00",
        check_in_end="14:35:00",
        shift_start="14:00:00",
        check_in_on_time_cutoff="14:04:59",
        check_in_late_threshold="14:05:00",
        check_out_start="21:30:00",
        check_out_end="22:35:00",
        break_search_start="17:50:00",
        break_search_end="18:35:00",
        break_out_checkpoint="18:00:00",
        midpoint="18:15:00",
        minimum_break_gap_minutes=5,
        break_end_time="18:30:00",
        break_in_on_time_cutoff="18:34:59",
        break_in_late_threshold="18:35:00",
    ),
    "C": ShiftConfig(
        code="C",
        display_name="Night",
        check_in_start="21:30:00",
        check_in_end="22:35:00",
        shift_start="22:00:00",
        check_in_on_time_cutoff="22:04:59",
        check_in_late_threshold="22:05:00",
        check_out_start="05:30:00",
        check_out_end="06:35:00",
        break_search_start="01:50:00",
        break_search_end="02:50:00",
        break_out_checkpoint="02:00:00",
        midpoint="02:22:30",
        minimum_break_gap_minutes=5,
        break_end_time="02:45:00",
        break_in_on_time_cutoff="02:49:59",
        break_in_late_threshold="02:50:00",
    ),
}
