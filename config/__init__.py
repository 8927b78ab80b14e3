import os

def get_settings_module() -> str:
    # APP_ENV selects the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def env_list(name: str):
    """Comma separated env value as a tuple, or None when unset."""
    raw = os.getenv(name)
    if not raw:
        return None
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def env_float(name: str):
    raw = os.getenv(name)
    return float(raw) if raw else None
