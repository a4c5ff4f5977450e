from datetime import datetime, timedelta, timezone

from rolemgmt.utils import format_timestamp
from rolemgmt.utils.datetime import _resolve_timezone


def test_resolve_timezone_accepts_fixed_offsets() -> None:
    assert _resolve_timezone("UTC-05:00") == timezone(-timedelta(hours=5))
    assert _resolve_timezone("GMT+0130") == timezone(timedelta(hours=1, minutes=30))


def test_format_timestamp_assumes_app_timezone_for_naive_values() -> None:
    assert format_timestamp(datetime(2024, 3, 1, 8, 30, 15)) == "2024-03-01T08:30:15.000-05:00"


def test_format_timestamp_converts_aware_values() -> None:
    value = datetime(2024, 3, 1, 13, 30, 15, 250000, tzinfo=timezone.utc)

    assert format_timestamp(value) == "2024-03-01T08:30:15.250-05:00"


def test_format_timestamp_keeps_missing_values() -> None:
    assert format_timestamp(None) is None
