import os

from config import env_float, env_list

# Rule / operator files (see rule.yaml, users.yaml at the project root)
RULE_FILE = os.getenv("RULE_FILE", "rule.yaml")
USERS_FILE = os.getenv("USERS_FILE", "users.yaml")

# Optional overrides of the values found in the rule file
BURST_THRESHOLD_MINUTES = env_float("BURST_THRESHOLD_MINUTES")
STATUS_FILTER = env_list("STATUS_FILTER")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
