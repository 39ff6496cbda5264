from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest


@pytest.fixture
def school_tz() -> ZoneInfo:
    return ZoneInfo("Asia/Jakarta")


@pytest.fixture
def fixed_now(school_tz) -> datetime:
    # Monday 2026-02-02 08:05 school time.
    return datetime(2026, 2, 2, 8, 5, 0, tzinfo=school_tz)
