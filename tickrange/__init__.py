from .core import ReadOnlyCollection, UnsupportedOperation
from .ticks import TickRange, tick_range
from .timestamps import coerce_timestamp, utc_now
from .units import DEFAULT_GRANULARITY, Granularity

__all__ = [
    "TickRange",
    "tick_range",
    "Granularity",
    "DEFAULT_GRANULARITY",
    "ReadOnlyCollection",
    "UnsupportedOperation",
    "coerce_timestamp",
    "utc_now",
]
