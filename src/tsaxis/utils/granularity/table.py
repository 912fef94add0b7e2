#!/usr/bin/env python
"""The ordered granularity table and the unit index into it.

Entries run from finest to coarsest and are never reordered: callers index
into ``GRANULARITY_TABLE`` and rely on position. Within one unit, each count
is a multiple of the previous one (can't have both 2 days and 7 days).

Each entry's signature is the part of a timestamp that stays constant when
data is bucketed at that granularity or coarser. For "5 seconds" that is
``second mod 5``.
"""

from datetime import datetime
from types import MappingProxyType
from typing import Final

import attrs

from tsaxis.utils.granularity.enums import CalendarField, DatetimeUnit, TimeUnit

__all__ = [
    "DAY_INDEX",
    "GRANULARITY_TABLE",
    "GranularityEntry",
    "UNIT_INDEX",
    "find_entry_index",
]


@attrs.frozen
class GranularityEntry:
    """One candidate bucket/tick granularity, e.g. every 15 minutes."""

    unit: TimeUnit = attrs.field(validator=attrs.validators.instance_of(TimeUnit))
    count: int = attrs.field(validator=[attrs.validators.instance_of(int), attrs.validators.ge(1)])
    field: CalendarField = attrs.field(validator=attrs.validators.instance_of(CalendarField))
    modulus: int = attrs.field(default=0, validator=attrs.validators.ge(0))

    def signature(self, dt: datetime) -> int:
        """Classification signature of ``dt`` at this granularity."""
        value = self.field.extract(dt)
        return value % self.modulus if self.modulus else value

    @property
    def label(self) -> str:
        """Human readable spacing, e.g. ``"15 minutes"``."""
        noun = self.unit.value if self.count == 1 else self.unit.plural
        return f"{self.count} {noun}"

    def __str__(self) -> str:
        return self.label


GRANULARITY_TABLE: Final[tuple[GranularityEntry, ...]] = (
    GranularityEntry(TimeUnit.MILLISECOND, 1, CalendarField.NONE),  # (0) no real granularity
    GranularityEntry(TimeUnit.SECOND, 1, CalendarField.MILLISECOND),  # (1)
    GranularityEntry(TimeUnit.SECOND, 5, CalendarField.SECOND, 5),  # (2)
    GranularityEntry(TimeUnit.SECOND, 15, CalendarField.SECOND, 15),  # (3)
    GranularityEntry(TimeUnit.SECOND, 30, CalendarField.SECOND, 30),  # (4)
    GranularityEntry(TimeUnit.MINUTE, 1, CalendarField.SECOND),  # (5)
    GranularityEntry(TimeUnit.MINUTE, 5, CalendarField.MINUTE, 5),  # (6)
    GranularityEntry(TimeUnit.MINUTE, 15, CalendarField.MINUTE, 15),  # (7)
    GranularityEntry(TimeUnit.MINUTE, 30, CalendarField.MINUTE, 30),  # (8)
    GranularityEntry(TimeUnit.HOUR, 1, CalendarField.MINUTE),  # (9)
    GranularityEntry(TimeUnit.HOUR, 3, CalendarField.HOUR, 3),  # (10)
    GranularityEntry(TimeUnit.HOUR, 6, CalendarField.HOUR, 6),  # (11)
    GranularityEntry(TimeUnit.HOUR, 12, CalendarField.HOUR, 12),  # (12)
    GranularityEntry(TimeUnit.DAY, 1, CalendarField.HOUR),  # (13)
    GranularityEntry(TimeUnit.WEEK, 1, CalendarField.DAY_OF_MONTH, 7),  # (14) 7 days
    GranularityEntry(TimeUnit.MONTH, 1, CalendarField.DAY_OF_MONTH),  # (15)
    GranularityEntry(TimeUnit.MONTH, 3, CalendarField.MONTH_INDEX, 3),  # (16) quarter
    GranularityEntry(TimeUnit.YEAR, 1, CalendarField.MONTH_INDEX),  # (17)
    GranularityEntry(TimeUnit.YEAR, 5, CalendarField.YEAR, 5),  # (18)
    GranularityEntry(TimeUnit.YEAR, 10, CalendarField.YEAR, 10),  # (19)
    GranularityEntry(TimeUnit.YEAR, 50, CalendarField.YEAR, 50),  # (20)
    GranularityEntry(TimeUnit.YEAR, 100, CalendarField.YEAR, 100),  # (21)
)


def find_entry_index(unit: TimeUnit, count: int) -> int | None:
    """Position of the ``(unit, count)`` entry, or None if the table has none."""
    for index, entry in enumerate(GRANULARITY_TABLE):
        if entry.unit is unit and entry.count == count:
            return index
    return None


def _index_of(unit: TimeUnit, count: int = 1) -> int:
    index = find_entry_index(unit, count)
    if index is None:
        raise LookupError(f"No granularity entry for {count} {unit}")
    return index


# Position of "exactly one" of each declarable unit
UNIT_INDEX: Final = MappingProxyType(
    {
        DatetimeUnit.MINUTE: _index_of(TimeUnit.MINUTE),
        DatetimeUnit.HOUR: _index_of(TimeUnit.HOUR),
        DatetimeUnit.DAY: _index_of(TimeUnit.DAY),
        DatetimeUnit.WEEK: _index_of(TimeUnit.WEEK),
        DatetimeUnit.MONTH: _index_of(TimeUnit.MONTH),
        DatetimeUnit.QUARTER: _index_of(TimeUnit.MONTH, 3),
        DatetimeUnit.YEAR: _index_of(TimeUnit.YEAR),
    }
)

DAY_INDEX: Final = UNIT_INDEX[DatetimeUnit.DAY]
