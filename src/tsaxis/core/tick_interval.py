#!/usr/bin/env python
"""Choose the tick spacing for a time axis.

Starting from the granularity the data is displayed at, walk the table
towards coarser entries until the expected number of ticks over the domain
fits the budget derived from the chart width.
"""

import math
from typing import Any

import pendulum

from tsaxis.utils.config import MIN_PIXELS_PER_TICK
from tsaxis.utils.granularity import GRANULARITY_TABLE, GranularityEntry, find_entry_index
from tsaxis.utils.loguru_setup import logger
from tsaxis.utils.time.arithmetic import add_units
from tsaxis.utils.time.conversion import to_datetime, to_milliseconds

__all__ = [
    "compute_ticks_interval",
    "expected_tick_count",
    "max_ticks_for_chart_width",
    "select_tick_interval",
    "tick_distance_milliseconds",
    "time_range_milliseconds",
]

_EPOCH = pendulum.datetime(1970, 1, 1, tz="UTC")


def tick_distance_milliseconds(entry: GranularityEntry) -> int:
    """Milliseconds between two ticks of ``entry``.

    Measured by adding the interval to the Unix epoch, so months and years
    take their calendar length (1 month = 31 days, 5 years spans 1972).
    """
    return to_milliseconds(add_units(_EPOCH, entry.count, entry.unit))


def expected_tick_count(entry: GranularityEntry, time_range_ms: float) -> int:
    """Number of ticks ``entry`` would place over ``time_range_ms``."""
    return math.ceil(time_range_ms / tick_distance_milliseconds(entry))


def select_tick_interval(x_interval: GranularityEntry, time_range_ms: float, max_tick_count: int) -> GranularityEntry:
    """Return the finest entry, no finer than ``x_interval``, that fits the budget.

    Args:
        x_interval: Granularity the data is displayed at
        time_range_ms: Width of the domain in milliseconds
        max_tick_count: Largest acceptable number of ticks

    Returns:
        GranularityEntry: The spacing to use; the coarsest entry if none fits
    """
    initial_index = find_entry_index(x_interval.unit, x_interval.count)
    if initial_index is None:
        logger.debug(f"No table entry matches {x_interval}, scanning from the finest entry")
        initial_index = 0

    for entry in GRANULARITY_TABLE[initial_index:]:
        if expected_tick_count(entry, time_range_ms) <= max_tick_count:
            logger.debug(f"Selected tick interval {entry} for {time_range_ms}ms with at most {max_tick_count} ticks")
            return entry

    logger.debug(f"No tick interval fits {max_tick_count} ticks over {time_range_ms}ms, using the coarsest")
    return GRANULARITY_TABLE[-1]


def max_ticks_for_chart_width(chart_width: float, min_pixels_per_tick: int = MIN_PIXELS_PER_TICK) -> int:
    """Maximum number of ticks for a chart ``chart_width`` pixels wide.

    Rounds down so labels never over-pack; never negative.
    """
    return max(0, math.floor(chart_width / min_pixels_per_tick))


def time_range_milliseconds(domain: tuple[Any, Any]) -> int:
    """Width of a ``(start, end)`` domain in milliseconds."""
    start, end = domain
    return to_milliseconds(to_datetime(end)) - to_milliseconds(to_datetime(start))


def compute_ticks_interval(
    domain: tuple[Any, Any],
    x_interval: GranularityEntry,
    chart_width: float,
    min_pixels_per_tick: int = MIN_PIXELS_PER_TICK,
) -> GranularityEntry:
    """Return the tick spacing for a chart with the given domain, granularity and width."""
    return select_tick_interval(
        x_interval,
        time_range_milliseconds(domain),
        max_ticks_for_chart_width(chart_width, min_pixels_per_tick),
    )
