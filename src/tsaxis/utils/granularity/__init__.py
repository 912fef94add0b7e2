#!/usr/bin/env python
"""Granularity table package: enums plus the ordered table and unit index."""

from tsaxis.utils.granularity.enums import CalendarField, DatetimeUnit, TimeUnit
from tsaxis.utils.granularity.table import (
    DAY_INDEX,
    GRANULARITY_TABLE,
    UNIT_INDEX,
    GranularityEntry,
    find_entry_index,
)

__all__ = [
    "DAY_INDEX",
    "GRANULARITY_TABLE",
    "UNIT_INDEX",
    "CalendarField",
    "DatetimeUnit",
    "GranularityEntry",
    "TimeUnit",
    "find_entry_index",
]
