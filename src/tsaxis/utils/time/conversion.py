#!/usr/bin/env python
"""Timestamp parsing and conversion utilities.

Raw chart values arrive as ISO-8601 strings, epoch milliseconds or datetime
objects. These helpers normalise all of them to timezone-aware
``pendulum.DateTime`` values and back to epoch milliseconds.
"""

import calendar
import math
from datetime import date, datetime
from typing import Any

import pendulum
from pendulum.parsing.exceptions import ParserError

from tsaxis.utils.config import MICROSECONDS_IN_MILLISECOND, MILLISECONDS_IN_SECOND
from tsaxis.utils.exceptions import TimestampParseError

__all__ = [
    "from_milliseconds",
    "parse_timestamp",
    "to_datetime",
    "to_milliseconds",
]


def from_milliseconds(milliseconds: int, tz: str = "UTC") -> pendulum.DateTime:
    """Convert epoch milliseconds to a DateTime in the given timezone.

    Example:
        >>> from_milliseconds(1_577_836_800_123).isoformat()
        '2020-01-01T00:00:00.123000+00:00'
    """
    seconds, millis = divmod(int(milliseconds), MILLISECONDS_IN_SECOND)
    dt = pendulum.from_timestamp(seconds, tz="UTC").set(microsecond=millis * MICROSECONDS_IN_MILLISECOND)
    return dt if tz == "UTC" else dt.in_timezone(tz)


def to_milliseconds(dt: datetime) -> int:
    """Convert an aware (or naive-as-UTC) datetime to epoch milliseconds.

    Uses integer calendar arithmetic so pre-1970 values floor correctly.
    """
    return calendar.timegm(dt.utctimetuple()) * MILLISECONDS_IN_SECOND + dt.microsecond // MICROSECONDS_IN_MILLISECOND


def parse_timestamp(value: Any) -> pendulum.DateTime:
    """Parse a raw chart value into a timezone-aware DateTime.

    Accepted inputs:
        - ``pendulum.DateTime`` (returned unchanged)
        - ``datetime`` (naive values are taken as UTC)
        - ``date`` (midnight UTC)
        - ``int``/``float`` epoch milliseconds
        - strict ISO-8601 strings; an explicit offset in the string is kept

    Args:
        value: Raw timestamp value

    Returns:
        pendulum.DateTime

    Raises:
        TimestampParseError: If the value is missing, not ISO-8601, or of an
            unsupported type
    """
    if isinstance(value, pendulum.DateTime):
        return value

    if isinstance(value, datetime):
        return pendulum.instance(value, tz="UTC")

    if isinstance(value, date):
        return pendulum.datetime(value.year, value.month, value.day, tz="UTC")

    if isinstance(value, bool) or value is None:
        raise TimestampParseError(value, "not a timestamp")

    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise TimestampParseError(value, "non-finite number")
        return from_milliseconds(int(value))

    if isinstance(value, str):
        token = value.strip()
        if not token:
            raise TimestampParseError(value, "empty string")
        try:
            parsed = pendulum.parse(token, strict=True)
        except (ParserError, ValueError) as e:
            raise TimestampParseError(value, str(e)) from e
        if not isinstance(parsed, pendulum.DateTime):
            raise TimestampParseError(value, f"parsed as {type(parsed).__name__}, not a date-time")
        return parsed

    raise TimestampParseError(value, f"unsupported type {type(value).__name__}")


def to_datetime(value: Any) -> pendulum.DateTime:
    """Coerce a domain endpoint (epoch ms, datetime, date or ISO string) to a DateTime."""
    return parse_timestamp(value)
