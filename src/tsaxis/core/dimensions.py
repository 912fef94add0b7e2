#!/usr/bin/env python
"""Decide whether a result column is a time series dimension.

Also picks the finest of several declared units when series with different
bucketing are drawn on one axis.
"""

from collections.abc import Iterable, Sequence
from typing import Any

import attrs
import pandas as pd

from tsaxis.utils.config import TIMESERIES_UNITS
from tsaxis.utils.exceptions import TimestampParseError
from tsaxis.utils.granularity import UNIT_INDEX, DatetimeUnit
from tsaxis.utils.time.conversion import parse_timestamp

__all__ = [
    "ColumnMetadata",
    "TEMPORAL_TYPES",
    "column_metadata_from_series",
    "dimension_is_timeseries",
    "finest_unit",
    "frame_dimension_is_timeseries",
    "is_date_column",
    "is_iso_timestamp",
    "is_timeseries_dimension",
]

TEMPORAL_TYPES = frozenset(
    {
        "type/Temporal",
        "type/DateTime",
        "type/DateTimeWithTZ",
        "type/DateTimeWithLocalTZ",
        "type/DateTimeWithZoneOffset",
        "type/Date",
        "type/Time",
        "type/Instant",
    }
)


@attrs.frozen
class ColumnMetadata:
    """The parts of a result column's metadata needed to classify it."""

    name: str
    base_type: str | None = None
    special_type: str | None = None
    unit: str | None = None


def is_date_column(column: ColumnMetadata) -> bool:
    """True when the column's base or special type is temporal."""
    return any(t in TEMPORAL_TYPES for t in (column.base_type, column.special_type) if t)


def is_iso_timestamp(value: Any) -> bool:
    """True when ``value`` is a string that parses as strict ISO-8601."""
    if not isinstance(value, str):
        return False
    try:
        parse_timestamp(value)
    except TimestampParseError:
        return False
    return True


def is_timeseries_dimension(column: ColumnMetadata, first_value: Any) -> bool:
    """True if the column should be drawn on a continuous time axis.

    Either the column is a date column bucketed by no unit or by one of the
    time series units (not e.g. ``hour-of-day``), or its first value is an
    ISO-8601 timestamp.
    """
    if is_date_column(column) and (not column.unit or column.unit in TIMESERIES_UNITS):
        return True
    return is_iso_timestamp(first_value)


def dimension_is_timeseries(cols: Sequence[ColumnMetadata], rows: Sequence[Sequence[Any]], index: int = 0) -> bool:
    """Result-set form of is_timeseries_dimension for column ``index``."""
    first_value = rows[0][index] if rows else None
    return is_timeseries_dimension(cols[index], first_value)


def column_metadata_from_series(series: pd.Series, unit: str | None = None) -> ColumnMetadata:
    """Describe a pandas column; datetime64 columns are temporal."""
    base_type = None
    if isinstance(series.dtype, pd.DatetimeTZDtype):
        base_type = "type/DateTimeWithTZ"
    elif pd.api.types.is_datetime64_any_dtype(series.dtype):
        base_type = "type/DateTime"
    return ColumnMetadata(name=str(series.name), base_type=base_type, unit=unit)


def frame_dimension_is_timeseries(frame: pd.DataFrame, column: str, unit: str | None = None) -> bool:
    """DataFrame form of is_timeseries_dimension."""
    series = frame[column]
    first_value = series.iloc[0] if len(series) else None
    return is_timeseries_dimension(column_metadata_from_series(series, unit), first_value)


def finest_unit(units: Iterable["str | DatetimeUnit | None"]) -> DatetimeUnit | None:
    """Return the finest declared unit, ignoring absent and unknown entries.

    Example:
        >>> finest_unit(["month", None, "day"])
        <DatetimeUnit.DAY: 'day'>
    """
    finest = None
    for unit in units:
        candidate = DatetimeUnit.try_from(unit)
        if candidate is None:
            continue
        if finest is None or UNIT_INDEX[candidate] < UNIT_INDEX[finest]:
            finest = candidate
    return finest
