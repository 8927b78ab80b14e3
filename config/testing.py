import os

# No rule files by default: built-in shift rules, no operator mapping
RULE_FILE = os.getenv("RULE_FILE")
USERS_FILE = os.getenv("USERS_FILE")

BURST_THRESHOLD_MINUTES = 2
STATUS_FILTER = ("Success",)

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
