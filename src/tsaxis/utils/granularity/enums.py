#!/usr/bin/env python
"""Core granularity enum definitions.

- TimeUnit: calendar units a tick can step by (ms .. year)
- DatetimeUnit: logical bucketing units a query column can declare
- CalendarField: the timestamp sub-field a granularity signature reads
"""

from datetime import datetime
from enum import Enum

__all__ = [
    "CalendarField",
    "DatetimeUnit",
    "TimeUnit",
]


class TimeUnit(str, Enum):
    """Calendar units used for tick spacing and truncation."""

    MILLISECOND = "ms"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def plural(self) -> str:
        """Keyword name accepted by ``pendulum.DateTime.add``."""
        if self is TimeUnit.MILLISECOND:
            return "milliseconds"
        return f"{self.value}s"

    @classmethod
    def from_string(cls, unit_str: str) -> "TimeUnit":
        """Convert a unit name (``"hour"``, ``"hours"``, ``"ms"``) to TimeUnit.

        Raises:
            ValueError: If the string doesn't match any known unit
        """
        normalized = unit_str.strip().lower()
        for unit in cls:
            if normalized in (unit.value, unit.plural):
                return unit
        raise ValueError(f"Unknown time unit string: {unit_str}")

    def __str__(self) -> str:
        return self.value


class DatetimeUnit(str, Enum):
    """Bucketing units a date column can declare in its metadata."""

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    @classmethod
    def try_from(cls, value: "str | DatetimeUnit | None") -> "DatetimeUnit | None":
        """Return the matching unit, or None for absent or unrecognised values."""
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


class CalendarField(Enum):
    """Timestamp sub-fields read by granularity signatures."""

    NONE = "none"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY_OF_MONTH = "day_of_month"
    MONTH_INDEX = "month_index"  # 0-based: January is 0
    YEAR = "year"

    def extract(self, dt: datetime) -> int:
        """Read this field from a datetime."""
        if self is CalendarField.NONE:
            return 0
        if self is CalendarField.MILLISECOND:
            return dt.microsecond // 1000
        if self is CalendarField.SECOND:
            return dt.second
        if self is CalendarField.MINUTE:
            return dt.minute
        if self is CalendarField.HOUR:
            return dt.hour
        if self is CalendarField.DAY_OF_MONTH:
            return dt.day
        if self is CalendarField.MONTH_INDEX:
            return dt.month - 1
        if self is CalendarField.YEAR:
            return dt.year
        raise ValueError(f"Unknown calendar field: {self}")
