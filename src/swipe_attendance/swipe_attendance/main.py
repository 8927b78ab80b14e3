from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container


def create_container() -> Container:
    """Load .env and the APP_ENV settings module, then wire the pipeline."""
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if getattr(settings, "DEBUG", False):
        logging.getLogger(__name__).debug("[swipe-attendance] settings=%s", settings_module)

    return build_container(
        app_config={
            "rule_file": getattr(settings, "RULE_FILE", None),
            "users_file": getattr(settings, "USERS_FILE", None),
            "burst_threshold_minutes": getattr(settings, "BURST_THRESHOLD_MINUTES", None),
            "status_filter": getattr(settings, "STATUS_FILTER", None),
        }
    )


def create_processor():
    return create_container().processing_service
