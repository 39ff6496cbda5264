from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from school_attendance.common.datetime_utils import (
    format_snapshot_date,
    format_snapshot_time,
    parse_instant,
    system_clock,
    weekday_label,
)
from school_attendance.common.validators import bearer_token


def test_weekday_labels(fixed_now):
    assert weekday_label(fixed_now, "en") == "Monday"
    assert weekday_label(fixed_now, "id") == "Senin"
    assert weekday_label(fixed_now + timedelta(days=6), "en") == "Sunday"
    assert weekday_label(fixed_now + timedelta(days=4), "id") == "Jumat"


def test_unknown_locale_raises(fixed_now):
    with pytest.raises(ValueError):
        weekday_label(fixed_now, "fr")


def test_parse_instant_accepts_datetimes_and_iso_strings():
    aware = datetime(2026, 2, 2, 1, 0, tzinfo=timezone.utc)

    assert parse_instant(aware) == aware
    assert parse_instant(datetime(2026, 2, 2, 1, 0)) == aware
    assert parse_instant("2026-02-02T01:00:00Z") == aware
    assert parse_instant("2026-02-02T08:00:00+07:00") == aware


@pytest.mark.parametrize("value", [None, "", "not a date", 1738458000, {"seconds": 1}])
def test_parse_instant_treats_garbage_as_missing(value):
    assert parse_instant(value) is None


def test_snapshot_formats(school_tz):
    end = datetime(2026, 2, 2, 0, 5, tzinfo=timezone.utc)

    assert format_snapshot_date(datetime(2026, 2, 2, 8, 5, tzinfo=school_tz)) == "02/02/2026"
    assert format_snapshot_time(end, school_tz) == "07:05"


def test_system_clock_is_aware(school_tz):
    now = system_clock(school_tz)()

    assert now.tzinfo is school_tz


@pytest.mark.parametrize(
    "header, expected",
    [
        ("Bearer abc.def", "abc.def"),
        ("bearer   abc", "abc"),
        ("Bearer ", None),
        ("Basic abc", None),
        ("", None),
        (None, None),
    ],
)
def test_bearer_token(header, expected):
    assert bearer_token(header) == expected
