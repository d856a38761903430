"""Tests for endpoint coercion."""

from datetime import datetime, timedelta, timezone, tzinfo

import pytest

from tickrange import coerce_timestamp, utc_now
from tickrange.util import EPOCH


def test_none_passes_through():
    """Test that an absent endpoint is left for defaulting."""
    assert coerce_timestamp(None, "start") is None


def test_aware_datetime_converted_to_utc():
    """Test that aware datetimes in other zones become UTC."""
    eastern = timezone(timedelta(hours=-5))
    value = datetime(2016, 2, 13, 22, 17, 27, tzinfo=eastern)

    result = coerce_timestamp(value, "start")

    assert result == datetime(2016, 2, 14, 3, 17, 27, tzinfo=timezone.utc)
    assert result.tzinfo is timezone.utc


def test_naive_datetime_rejected():
    """Test that naive datetimes are refused."""
    with pytest.raises(TypeError, match="timezone-aware datetime"):
        coerce_timestamp(datetime(2016, 2, 14, 3), "start")


class NoOffset(tzinfo):
    def utcoffset(self, dt):
        return None

    def dst(self, dt):
        return None


def test_zone_without_offset_rejected():
    """Test that a tzinfo reporting no offset counts as naive."""
    with pytest.raises(TypeError, match="timezone-aware datetime"):
        coerce_timestamp(datetime(2016, 2, 14, 3, tzinfo=NoOffset()), "end")


def test_unix_seconds_accepted():
    """Test int and float Unix timestamps."""
    assert coerce_timestamp(0, "start") == EPOCH
    assert coerce_timestamp(1.5, "end") == EPOCH + timedelta(seconds=1.5)
    assert coerce_timestamp(1455419847, "end") == datetime(
        2016, 2, 14, 3, 17, 27, tzinfo=timezone.utc
    )


def test_iso_strings_accepted():
    """Test ISO-8601 strings with and without offsets."""
    expected = datetime(2016, 2, 14, 3, 17, 27, tzinfo=timezone.utc)

    assert coerce_timestamp("2016-02-14T03:17:27Z", "start") == expected
    assert coerce_timestamp("2016-02-14T04:17:27+01:00", "start") == expected

    # No offset is read as UTC
    naive_string = coerce_timestamp("2016-02-14T03:17:27", "end")
    assert naive_string == expected
    assert naive_string.tzinfo is timezone.utc


def test_malformed_string_rejected():
    """Test that strings that are not timestamps are refused."""
    with pytest.raises(ValueError, match="not an ISO-8601 timestamp"):
        coerce_timestamp("smelly fish", "end")


@pytest.mark.parametrize("value", [True, [2016, 2, 14], object()])
def test_unsupported_types_rejected(value):
    """Test that other types are refused with examples."""
    with pytest.raises(TypeError, match="must be datetime, int, float, str, or None"):
        coerce_timestamp(value, "start")


def test_utc_now_is_aware():
    """Test that the wall clock reports UTC."""
    now = utc_now()
    assert now.tzinfo is timezone.utc
