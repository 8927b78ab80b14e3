from __future__ import annotations

from datetime import datetime

import pytest

from src.swipe_attendance.swipe_attendance.shifts.defaults import DEFAULT_SHIFT_CONFIGS


@pytest.fixture
def shift_configs():
    return dict(DEFAULT_SHIFT_CONFIGS)


@pytest.fixture
def morning_config():
    return DEFAULT_SHIFT_CONFIGS["A"]


@pytest.fixture
def fixed_day():
    return datetime(2024, 1, 1)
