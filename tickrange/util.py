"""Utility constants and helpers for tickrange.

Time unit constants represent fixed durations as timedeltas.
Every unit divides a day evenly, so truncation anchored at the epoch
lines up with UTC midnight.
"""

from datetime import datetime, timedelta, timezone

# Time unit constants (fixed durations)
MICROSECOND = timedelta(microseconds=1)
MILLISECOND = timedelta(milliseconds=1)
SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
HALF_DAY = timedelta(hours=12)
DAY = timedelta(days=1)

# Anchor for truncation
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
