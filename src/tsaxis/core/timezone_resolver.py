#!/usr/bin/env python
"""Resolve the single timezone a multi-series chart is drawn in."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

import attrs

from tsaxis.core.chart_warnings import ChartWarning, multiple_timezone_warning, unexpected_timezone_warning
from tsaxis.utils.config import DEFAULT_TIMEZONE
from tsaxis.utils.loguru_setup import logger

__all__ = [
    "SeriesTimezoneInfo",
    "resolve_timezone",
]


@attrs.frozen
class SeriesTimezoneInfo:
    """Timezones reported by one series' query result."""

    results_timezone: str | None = None
    requested_timezone: str | None = None

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> "SeriesTimezoneInfo":
        """Build from a result ``data`` mapping (``results_timezone``/``requested_timezone`` keys)."""
        return cls(
            results_timezone=data.get("results_timezone"),
            requested_timezone=data.get("requested_timezone"),
        )


def _as_info(series: "SeriesTimezoneInfo | Mapping[str, Any]") -> SeriesTimezoneInfo:
    if isinstance(series, SeriesTimezoneInfo):
        return series
    return SeriesTimezoneInfo.from_data(series)


def resolve_timezone(
    series: Iterable["SeriesTimezoneInfo | Mapping[str, Any]"],
    warn: Callable[[ChartWarning], None],
    *,
    default_timezone: str = DEFAULT_TIMEZONE,
) -> str:
    """Return the effective timezone for a chart's series.

    Dashboard cards combining several queries may disagree on timezone; the
    first series wins and disagreement is reported through ``warn``.

    Args:
        series: One entry per data series, in display order (non-empty)
        warn: Called with each ChartWarning raised
        default_timezone: Used when the first series reports no timezone

    Returns:
        str: Timezone identifier
    """
    infos = [_as_info(s) for s in series]
    if not infos:
        logger.debug(f"No series to resolve a timezone from, using {default_timezone}")
        return default_timezone

    timezones = list(dict.fromkeys(info.results_timezone for info in infos))
    if len(timezones) > 1:
        logger.debug(f"Series report multiple timezones: {timezones}")
        warn(multiple_timezone_warning(timezones))

    first = infos[0]
    if first.requested_timezone and first.requested_timezone != first.results_timezone:
        warn(unexpected_timezone_warning(first.results_timezone, first.requested_timezone))

    # results_timezone should always be set, fall back just in case
    return first.results_timezone or default_timezone
