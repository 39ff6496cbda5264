from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Any, Callable, Optional
from zoneinfo import ZoneInfo

from ..core.constants import SNAPSHOT_DATE_FORMAT, SNAPSHOT_TIME_FORMAT

Clock = Callable[[], datetime]

# Monday first, matching datetime.weekday().
WEEKDAY_LABELS = {
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    "id": ("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu"),
}


def school_zone(name: str) -> tzinfo:
    return ZoneInfo(name)


def system_clock(zone: tzinfo) -> Clock:
    """Clock returning the current time in the school time zone.

    Note: Injected into services so tests can pass a fixed clock instead.
    """

    def now() -> datetime:
        return datetime.now(zone)

    return now


def weekday_label(moment: datetime, locale: str) -> str:
    try:
        labels = WEEKDAY_LABELS[locale]
    except KeyError:
        raise ValueError(f"Unsupported weekday locale: {locale!r}") from None
    return labels[moment.weekday()]


def parse_instant(value: Any) -> Optional[datetime]:
    """Normalize a stored timestamp into an aware datetime.

    Firestore returns Timestamp fields as datetime subclasses (UTC). Older
    documents may hold ISO-8601 strings. Anything else is treated as missing.
    """

    if value is None:
        return None

    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str):
        try:
            moment = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def format_snapshot_date(moment: datetime) -> str:
    return moment.strftime(SNAPSHOT_DATE_FORMAT)


def format_snapshot_time(moment: datetime, zone: tzinfo) -> str:
    """Hour:minute (24h, zero padded) of an instant in the school time zone."""
    return moment.astimezone(zone).strftime(SNAPSHOT_TIME_FORMAT)
