#!/usr/bin/env python
"""Timezone-aware calendar arithmetic on pendulum DateTimes.

Units are ``TimeUnit`` members. Hours and coarser units step on the wall
clock of the DateTime's own timezone, so hourly and daily steps land on round
local times across DST changes. Finer units step in absolute time.
"""

import pendulum
from pendulum.tz.exceptions import InvalidTimezone

from tsaxis.utils.config import MICROSECONDS_IN_MILLISECOND
from tsaxis.utils.exceptions import InvalidTimezoneError
from tsaxis.utils.granularity.enums import TimeUnit

__all__ = [
    "add_units",
    "align_to_count",
    "start_of",
    "to_zone",
    "unit_field_value",
]


def to_zone(dt: pendulum.DateTime, timezone_name: str) -> pendulum.DateTime:
    """Express ``dt`` in the named timezone.

    Raises:
        InvalidTimezoneError: If the timezone name is unknown
    """
    try:
        return dt.in_timezone(timezone_name)
    except (InvalidTimezone, ValueError, KeyError) as e:
        raise InvalidTimezoneError(timezone_name) from e


def start_of(dt: pendulum.DateTime, unit: TimeUnit) -> pendulum.DateTime:
    """Truncate ``dt`` to the start of ``unit`` (weeks start on Monday)."""
    if unit is TimeUnit.MILLISECOND:
        millis = dt.microsecond // MICROSECONDS_IN_MILLISECOND
        return dt.set(microsecond=millis * MICROSECONDS_IN_MILLISECOND)
    return dt.start_of(unit.value)


def add_units(dt: pendulum.DateTime, count: int, unit: TimeUnit) -> pendulum.DateTime:
    """Add ``count`` units to ``dt`` with calendar-aware arithmetic."""
    if unit is TimeUnit.MILLISECOND:
        return dt.add(microseconds=count * MICROSECONDS_IN_MILLISECOND)
    if unit is TimeUnit.HOUR:
        # non-existent local times move forward, repeated ones take the later offset
        local = dt.naive().add(hours=count)
        return pendulum.datetime(
            local.year, local.month, local.day, local.hour, local.minute, local.second, local.microsecond, tz=dt.timezone
        )
    return dt.add(**{unit.plural: count})


def unit_field_value(dt: pendulum.DateTime, unit: TimeUnit) -> int:
    """Return the value of ``dt`` in ``unit``'s own numbering.

    Day-of-month, week-of-year and month are 0-based so that a count of 3
    months aligns to January, April, July and October.
    """
    if unit is TimeUnit.MILLISECOND:
        return dt.microsecond // MICROSECONDS_IN_MILLISECOND
    if unit is TimeUnit.SECOND:
        return dt.second
    if unit is TimeUnit.MINUTE:
        return dt.minute
    if unit is TimeUnit.HOUR:
        return dt.hour
    if unit is TimeUnit.DAY:
        return dt.day - 1
    if unit is TimeUnit.WEEK:
        return dt.week_of_year - 1
    if unit is TimeUnit.MONTH:
        return dt.month - 1
    if unit is TimeUnit.YEAR:
        return dt.year
    raise ValueError(f"Unknown time unit: {unit}")


def align_to_count(dt: pendulum.DateTime, unit: TimeUnit, count: int) -> pendulum.DateTime:
    """Move a floored ``dt`` down to the nearest multiple of ``count`` units.

    For example with 50 years, 1981-01-01 becomes 1950-01-01.
    """
    offset = unit_field_value(dt, unit) % count
    if not offset:
        return dt
    if unit is TimeUnit.MILLISECOND:
        return dt.set(microsecond=dt.microsecond - offset * MICROSECONDS_IN_MILLISECOND)
    if unit is TimeUnit.WEEK:
        return dt.subtract(weeks=offset)
    return dt.set(**{unit.value: getattr(dt, unit.value) - offset})
