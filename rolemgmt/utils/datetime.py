"""Rendering of database timestamps for API responses."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from rolemgmt.config import get_settings

_FALLBACK_TIMEZONE: Final[str] = "America/Bogota"
_FIXED_OFFSET: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2}):?(?P<minutes>\d{2})?$",
    re.IGNORECASE,
)


def format_timestamp(value: datetime | None) -> str | None:
    """Render ``value`` as ISO-8601 with milliseconds and a UTC offset.

    ``DATETIME`` columns come back without offset; those values are taken to
    be local to ``APP_TIMEZONE``. Aware values are converted to it.
    """

    if value is None:
        return None

    tz = _app_timezone()
    local = value.replace(tzinfo=tz) if value.tzinfo is None else value.astimezone(tz)
    return local.isoformat(timespec="milliseconds")


@lru_cache(maxsize=1)
def _app_timezone() -> tzinfo:
    name = (get_settings().app_timezone or "").strip()
    return _resolve_timezone(name or _FALLBACK_TIMEZONE)


def _resolve_timezone(name: str) -> tzinfo:
    """Return a fixed offset for ``UTC-05:00`` style names, else an IANA zone."""

    match = _FIXED_OFFSET.match(name)
    if match:
        offset = timedelta(
            hours=int(match.group("hours")), minutes=int(match.group("minutes") or 0)
        )
        return timezone(-offset if match.group("sign") == "-" else offset)

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return ZoneInfo(_FALLBACK_TIMEZONE)
