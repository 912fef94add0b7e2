#!/usr/bin/env python
"""Infer the bucketing granularity of a series of timestamps.

Data is "exactly G" when every sample agrees on all fields finer than G and
at least one sample disagrees at G's own resolution. The scan keeps the
first signature seen at each table position and lowers an upper bound to the
first position where a later sample disagrees; the result is one position
coarser than that.
"""

from collections.abc import Callable, Iterable
from typing import Any

import pendulum

from tsaxis.utils.exceptions import TimestampParseError
from tsaxis.utils.granularity import DAY_INDEX, GRANULARITY_TABLE, UNIT_INDEX, DatetimeUnit, GranularityEntry
from tsaxis.utils.loguru_setup import logger
from tsaxis.utils.time.conversion import parse_timestamp

__all__ = [
    "infer_granularity",
    "infer_granularity_index",
]

TimestampParser = Callable[[Any], pendulum.DateTime]


def infer_granularity_index(
    samples: Iterable[Any],
    unit: "str | DatetimeUnit | None" = None,
    *,
    parse: TimestampParser = parse_timestamp,
) -> int:
    """Return the GRANULARITY_TABLE position describing ``samples``.

    Args:
        samples: Raw x-axis values in display order
        unit: Declared column unit; a known unit short-circuits inference
        parse: Raw value parser; must raise TimestampParseError on bad input

    Returns:
        int: Index into GRANULARITY_TABLE
    """
    declared = DatetimeUnit.try_from(unit)
    if declared is not None:
        return UNIT_INDEX[declared]
    if unit is not None:
        logger.debug(f"Ignoring unrecognised declared unit {unit!r}, inferring from samples")

    values = list(samples)
    if len(values) <= 1:
        # a single point carries no granularity signal
        return DAY_INDEX

    references: list[int | None] = [None] * len(GRANULARITY_TABLE)
    upper_bound = len(GRANULARITY_TABLE)

    for raw in values:
        if upper_bound == 0:
            break
        try:
            timestamp = parse(raw)
        except TimestampParseError as e:
            logger.warning(f"Unparsable sample {raw!r} treated as varying at every granularity: {e.message}")
            upper_bound = 0
            break
        for i in range(upper_bound):
            signature = GRANULARITY_TABLE[i].signature(timestamp)
            if references[i] is None:
                references[i] = signature
            elif references[i] != signature:
                upper_bound = i
                break

    index = max(upper_bound - 1, 0)
    logger.debug(f"Inferred granularity {GRANULARITY_TABLE[index]} (position {index}) from {len(values)} samples")
    return index


def infer_granularity(
    samples: Iterable[Any],
    unit: "str | DatetimeUnit | None" = None,
    *,
    parse: TimestampParser = parse_timestamp,
) -> GranularityEntry:
    """Return the GRANULARITY_TABLE entry describing ``samples``.

    Example:
        >>> infer_granularity(["2020-01-01T00:00:00Z", "2020-01-02T00:00:00Z"]).label
        '1 day'
    """
    return GRANULARITY_TABLE[infer_granularity_index(samples, unit, parse=parse)]
