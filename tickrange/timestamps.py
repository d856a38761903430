"""Timestamp coercion and the wall-clock source.

Range endpoints are absolute instants, represented as timezone-aware
datetimes in UTC. Inputs in other zones are converted, so equal instants
compare and hash equal no matter where they came from.
"""

from datetime import datetime, timezone
from typing import Any, Literal

from dateutil.parser import isoparse


def utc_now() -> datetime:
    """Return the current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def coerce_timestamp(value: Any, edge: Literal["start", "end"]) -> datetime | None:
    """Convert an endpoint to an aware UTC datetime.

    Accepts:
    - None: Absent (passed through so the caller can default it)
    - datetime: Must be timezone-aware, converted to UTC
    - int/float: Unix timestamp in seconds
    - str: ISO-8601 timestamp; a string without an offset is read as UTC

    Raises:
        TypeError: If value is an unsupported type or a naive datetime
        ValueError: If a string is not a valid ISO-8601 timestamp
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.utcoffset() is None:
            raise TypeError(
                f"TickRange {edge} must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return value.astimezone(timezone.utc)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str):
        try:
            parsed = isoparse(value)
        except ValueError as exc:
            raise ValueError(
                f"TickRange {edge} is not an ISO-8601 timestamp: {value!r}\n"
                f"Example: '2016-02-14T03:17:27Z'"
            ) from exc
        if parsed.utcoffset() is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    raise TypeError(
        f"TickRange {edge} must be datetime, int, float, str, or None.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  TickRange(datetime(2016,2,14,3,tzinfo=timezone.utc), None)  "
        f"# timezone-aware datetime\n"
        f"  TickRange(1455419847, 1455428597)  # int (Unix seconds)\n"
        f"  TickRange('2016-02-14T03:17:27Z', '2016-02-14T05:43:17Z')"
    )
