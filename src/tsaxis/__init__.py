"""tsaxis - time axis granularity and tick computation.

Infers the bucketing granularity of timestamp data, picks a tick spacing that
fits a chart's width, generates round ticks in the viewer's timezone, and
resolves one timezone across series that may disagree.

Quick Start:
    >>> from tsaxis import infer_granularity, compute_ticks_interval, generate_ticks
    >>>
    >>> samples = ["2020-01-01T00:00:00Z", "2020-01-02T00:00:00Z", "2020-01-03T00:00:00Z"]
    >>> data_interval = infer_granularity(samples)
    >>> domain = ("2020-01-01T00:00:00Z", "2020-01-31T00:00:00Z")
    >>> tick_interval = compute_ticks_interval(domain, data_interval, chart_width=800)
    >>> ticks = generate_ticks(domain, tick_interval, "America/Chicago")
"""

__version__ = "0.1.0"

from typing import Any

_EXPORTS = {
    "infer_granularity": "tsaxis.core.inference",
    "infer_granularity_index": "tsaxis.core.inference",
    "select_tick_interval": "tsaxis.core.tick_interval",
    "compute_ticks_interval": "tsaxis.core.tick_interval",
    "max_ticks_for_chart_width": "tsaxis.core.tick_interval",
    "generate_ticks": "tsaxis.core.ticks",
    "LinearScale": "tsaxis.core.scale",
    "TimeseriesScale": "tsaxis.core.scale",
    "resolve_timezone": "tsaxis.core.timezone_resolver",
    "SeriesTimezoneInfo": "tsaxis.core.timezone_resolver",
    "ChartWarning": "tsaxis.core.chart_warnings",
    "ColumnMetadata": "tsaxis.core.dimensions",
    "is_timeseries_dimension": "tsaxis.core.dimensions",
    "dimension_is_timeseries": "tsaxis.core.dimensions",
    "finest_unit": "tsaxis.core.dimensions",
    "GRANULARITY_TABLE": "tsaxis.utils.granularity",
    "UNIT_INDEX": "tsaxis.utils.granularity",
    "GranularityEntry": "tsaxis.utils.granularity",
    "TimeUnit": "tsaxis.utils.granularity",
    "DatetimeUnit": "tsaxis.utils.granularity",
    "AxisConfig": "tsaxis.utils.config",
}


# Lazy imports keep `import tsaxis` cheap and avoid configuring logging on discovery
def __getattr__(name: str) -> Any:
    """Lazy import for main package exports."""
    if name in _EXPORTS:
        import importlib

        return getattr(importlib.import_module(_EXPORTS[name]), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [*_EXPORTS, "__version__"]
