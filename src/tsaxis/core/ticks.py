#!/usr/bin/env python
"""Generate round tick timestamps for a time axis.

Ticks are aligned in the viewer's timezone, not in UTC: a daily tick in
America/Chicago lands on Chicago midnight. Stepping uses calendar
arithmetic so months and years keep their natural boundaries.
"""

from typing import Any

import pendulum

from tsaxis.utils.granularity import GranularityEntry, TimeUnit
from tsaxis.utils.loguru_setup import logger
from tsaxis.utils.time.arithmetic import add_units, align_to_count, start_of, to_zone
from tsaxis.utils.time.conversion import to_datetime

__all__ = [
    "first_tick_candidate",
    "generate_ticks",
]


def first_tick_candidate(start: pendulum.DateTime, unit: TimeUnit, count: int, timezone: str) -> pendulum.DateTime:
    """Round boundary at or before ``start``.

    ``start`` is floored to ``unit`` in ``timezone`` and then moved down to a
    multiple of ``count`` (1981 with 50 years becomes 1950).
    """
    floored = start_of(to_zone(start, timezone), unit)
    return align_to_count(floored, unit, count)


def generate_ticks(domain: tuple[Any, Any], interval: GranularityEntry, timezone: str) -> list[pendulum.DateTime]:
    """Return ascending round ticks within ``domain``, both ends inclusive.

    Args:
        domain: ``(start, end)`` as epoch ms, datetimes or ISO strings
        interval: Tick spacing (unit and count)
        timezone: IANA timezone the ticks are aligned in

    Returns:
        list[pendulum.DateTime]: Ticks expressed in ``timezone``

    Raises:
        InvalidTimezoneError: If ``timezone`` is unknown
    """
    start, end = sorted((to_datetime(domain[0]), to_datetime(domain[1])))
    unit, count = interval.unit, interval.count

    ticks = []
    tick = first_tick_candidate(start, unit, count, timezone)
    while not tick > end:
        if not tick < start:
            ticks.append(tick)
        tick = add_units(tick, count, unit)

    logger.debug(f"Generated {len(ticks)} ticks every {interval} in {timezone} from {start} to {end}")
    return ticks
