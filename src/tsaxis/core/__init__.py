#!/usr/bin/env python
"""Time axis algorithms: granularity inference, tick selection and generation, timezone resolution."""

from tsaxis.core.chart_warnings import ChartWarning, multiple_timezone_warning, unexpected_timezone_warning
from tsaxis.core.dimensions import (
    ColumnMetadata,
    dimension_is_timeseries,
    finest_unit,
    frame_dimension_is_timeseries,
    is_date_column,
    is_timeseries_dimension,
)
from tsaxis.core.inference import infer_granularity, infer_granularity_index
from tsaxis.core.scale import LinearScale, TimeseriesScale
from tsaxis.core.tick_interval import (
    compute_ticks_interval,
    expected_tick_count,
    max_ticks_for_chart_width,
    select_tick_interval,
    tick_distance_milliseconds,
    time_range_milliseconds,
)
from tsaxis.core.ticks import generate_ticks
from tsaxis.core.timezone_resolver import SeriesTimezoneInfo, resolve_timezone

__all__ = [
    "ChartWarning",
    "ColumnMetadata",
    "LinearScale",
    "SeriesTimezoneInfo",
    "TimeseriesScale",
    "compute_ticks_interval",
    "dimension_is_timeseries",
    "expected_tick_count",
    "finest_unit",
    "frame_dimension_is_timeseries",
    "generate_ticks",
    "infer_granularity",
    "infer_granularity_index",
    "is_date_column",
    "is_timeseries_dimension",
    "max_ticks_for_chart_width",
    "multiple_timezone_warning",
    "resolve_timezone",
    "select_tick_interval",
    "tick_distance_milliseconds",
    "time_range_milliseconds",
    "unexpected_timezone_warning",
]
