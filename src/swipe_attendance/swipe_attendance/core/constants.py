"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_BURST_THRESHOLD_MINUTES = 2
DEFAULT_STATUS_FILTER = ("Success",)
REQUIRED_COLUMNS = ("ID", "Name", "Date", "Time", "Status")
MAX_RULE_FILE_BYTES = 1024 * 1024
MAX_REPORTED_WARNINGS = 10
