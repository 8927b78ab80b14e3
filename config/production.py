import os

from config import env_float, env_list

RULE_FILE = os.getenv("RULE_FILE", "/etc/swipe-attendance/rule.yaml")
USERS_FILE = os.getenv("USERS_FILE", "/etc/swipe-attendance/users.yaml")

BURST_THRESHOLD_MINUTES = env_float("BURST_THRESHOLD_MINUTES")
STATUS_FILTER = env_list("STATUS_FILTER")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
