"""Ranges of evenly spaced time points.

A TickRange is an immutable, restartable sequence of "ticks" between two
instants at a fixed granularity. Both endpoints are truncated to the start
of their unit, so 2016-02-14T03:17:27Z..2016-02-14T05:43:17Z at hourly
granularity yields 03:00, 04:00 and 05:00.
"""

import logging
from collections.abc import Callable, Iterator
from datetime import datetime
from typing import Any

from typing_extensions import override

from tickrange.core import ReadOnlyCollection, UnsupportedOperation
from tickrange.timestamps import coerce_timestamp, utc_now
from tickrange.units import Granularity

LOGGER = logging.getLogger(__name__)


class TickRange(ReadOnlyCollection[datetime]):
    """Inclusive range of ticks from start to end, one granularity apart.

    The endpoints may be given in either order; start is always the earlier.
    Note that is_empty() and size() deliberately disagree for a degenerate
    range: when start == end the range reports itself empty, yet it still
    has (and iterates) exactly one tick.
    """

    __slots__ = ("_start", "_end", "_granularity")

    def __init__(
        self,
        start: Any = None,
        end: Any = None,
        granularity: Granularity | str | None = None,
        *,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize a tick range.

        Args:
            start: One endpoint, truncated to the granularity.
                   Defaults to now less one unit.
            end: The other endpoint, truncated to the granularity.
                 Defaults to now.
            granularity: Tick size, a Granularity or unit name such as
                         "minutes". Defaults to hours.
            clock: Wall-clock source, only consulted when an endpoint is absent

        Example:
            >>> TickRange("2016-02-14T03:17:27Z", "2016-02-14T05:43:17Z")
            >>> TickRange(end_dt, start_dt, Granularity.MINUTES)  # order-insensitive
        """
        unit = Granularity.coerce(granularity)

        trial_start = coerce_timestamp(start, "start")
        trial_end = coerce_timestamp(end, "end")
        if trial_start is None or trial_end is None:
            now = coerce_timestamp(clock(), "end")
            if trial_start is None:
                trial_start = now - unit.step
                LOGGER.debug("Defaulted start to %s", trial_start.isoformat())
            if trial_end is None:
                trial_end = now
                LOGGER.debug("Defaulted end to %s", trial_end.isoformat())

        trial_start = unit.truncate(trial_start)
        trial_end = unit.truncate(trial_end)
        if trial_end < trial_start:
            LOGGER.debug("Swapped endpoints given in descending order")
            trial_start, trial_end = trial_end, trial_start

        object.__setattr__(self, "_start", trial_start)
        object.__setattr__(self, "_end", trial_end)
        object.__setattr__(self, "_granularity", unit)

    @property
    def start(self) -> datetime:
        """The earlier, truncated endpoint."""
        return self._start

    @property
    def end(self) -> datetime:
        """The later, truncated endpoint."""
        return self._end

    @property
    def granularity(self) -> Granularity:
        return self._granularity

    def size(self) -> int:
        """Return the number of ticks, counting both endpoints."""
        return self._granularity.between(self._start, self._end) + 1

    def is_empty(self) -> bool:
        """True only when start == end, even though such a range has one tick."""
        return self._start == self._end

    @override
    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    @override
    def __iter__(self) -> Iterator[datetime]:
        """Yield start, start + 1 unit, ... up to and including end."""
        step = self._granularity.step
        end = self._end
        current = self._start
        while True:
            yield current
            if current >= end:
                return
            current += step

    @override
    def contains(self, candidate: Any) -> bool:
        """Return True if candidate is an aware datetime within [start, end].

        Any instant inside the bounds counts, whether or not it falls exactly
        on a tick.
        """
        if not isinstance(candidate, datetime) or candidate.utcoffset() is None:
            return False
        return self._start <= candidate <= self._end

    @override
    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, TickRange):
            return NotImplemented
        return (
            self._start == other._start
            and self._end == other._end
            and self._granularity is other._granularity
        )

    @override
    def __hash__(self) -> int:
        return hash((self._start, self._end, self._granularity))

    @override
    def __repr__(self) -> str:
        return (
            f"TickRange(start={self._start.isoformat()}, "
            f"end={self._end.isoformat()}, "
            f"granularity={self._granularity.name})"
        )

    @override
    def __setattr__(self, name: str, value: Any) -> None:
        raise UnsupportedOperation(
            f"TickRange is immutable; cannot set {name!r}.\n"
            f"Hint: Build a new TickRange with the bounds you need"
        )

    @override
    def __delattr__(self, name: str) -> None:
        raise UnsupportedOperation(
            f"TickRange is immutable; cannot delete {name!r}."
        )

    @override
    def __reduce__(self) -> tuple[Any, ...]:
        return (TickRange, (self._start, self._end, self._granularity))


def tick_range(
    start: Any = None,
    end: Any = None,
    granularity: Granularity | str | None = None,
    *,
    clock: Callable[[], datetime] = utc_now,
) -> TickRange:
    """
    Return a tick range between two instants.

    Args:
        start: One endpoint (aware datetime, Unix seconds, ISO-8601 string, or None)
        end: The other endpoint (same forms as start)
        granularity: Tick size, a Granularity or unit name. Defaults to hours.
        clock: Wall-clock source, only consulted when an endpoint is absent

    Returns:
        TickRange yielding every tick from the earlier to the later endpoint

    Example:
        >>> from tickrange import tick_range
        >>>
        >>> # Every hour of an afternoon
        >>> hours = tick_range("2025-01-06T12:00Z", "2025-01-06T17:00Z")
        >>> len(hours)
        6
        >>>
        >>> # Last minute and now
        >>> recent = tick_range(granularity="minutes")
    """
    return TickRange(start, end, granularity, clock=clock)
