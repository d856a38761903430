"""Tick granularities.

A granularity is a fixed-duration unit used both to truncate range endpoints
and to step between ticks. Only units that divide a day evenly are offered:
weeks, months and years have no fixed step that truncation can align to.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Any

from tickrange.util import (
    DAY,
    EPOCH,
    HALF_DAY,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    SECOND,
)

# Calendar units that are recognised but cannot be expressed as a fixed step
_CALENDAR_UNITS = frozenset(
    {"week", "weeks", "month", "months", "year", "years", "decade", "decades"}
)


class Granularity(Enum):
    MICROSECONDS = MICROSECOND
    MILLISECONDS = MILLISECOND
    SECONDS = SECOND
    MINUTES = MINUTE
    HOURS = HOUR
    HALF_DAYS = HALF_DAY
    DAYS = DAY

    @property
    def step(self) -> timedelta:
        """Duration of one tick."""
        return self.value

    def truncate(self, instant: datetime) -> datetime:
        """Floor an aware instant to the start of its unit.

        Truncation is anchored at the Unix epoch, so DAYS lands on UTC
        midnight and HALF_DAYS on UTC midnight or noon.
        """
        return EPOCH + ((instant - EPOCH) // self.value) * self.value

    def between(self, start: datetime, end: datetime) -> int:
        """Return the number of whole units elapsed from start to end."""
        return (end - start) // self.value

    @classmethod
    def coerce(cls, value: Any) -> "Granularity":
        """Resolve a member, a unit name, or None (the default) to a member.

        Names are case-insensitive and may be singular ("hour") or plural
        ("hours").

        Raises:
            ValueError: If the name is unknown or names a calendar unit
            TypeError: If value is neither a member, a string nor None
        """
        if value is None:
            return DEFAULT_GRANULARITY
        if isinstance(value, Granularity):
            return value
        if not isinstance(value, str):
            raise TypeError(
                f"Granularity must be a Granularity member, a unit name, or None.\n"
                f"Got {type(value).__name__!r}: {value!r}\n"
                f"Hint: TickRange(start, end, Granularity.MINUTES)  "
                f"# or granularity='minutes'"
            )

        key = value.strip().upper()
        if key in cls.__members__:
            return cls[key]
        if f"{key}S" in cls.__members__:
            return cls[f"{key}S"]

        valid = ", ".join(member.name.lower() for member in cls)
        if key.lower() in _CALENDAR_UNITS:
            raise ValueError(
                f"Granularity {value!r} is a calendar unit with no fixed duration.\n"
                f"Supported granularities: {valid}\n"
                f"Hint: Ticks are fixed steps; use 'days' and group the ticks "
                f"by calendar field if needed"
            )
        raise ValueError(f"Invalid granularity {value!r}. Valid granularities: {valid}")


DEFAULT_GRANULARITY = Granularity.HOURS
