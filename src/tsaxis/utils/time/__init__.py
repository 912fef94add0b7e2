#!/usr/bin/env python
"""Time utilities package.

- conversion: raw value parsing and epoch-millisecond conversion
- arithmetic: timezone-aware truncation, stepping and alignment
"""

from tsaxis.utils.time.arithmetic import (
    add_units,
    align_to_count,
    start_of,
    to_zone,
    unit_field_value,
)
from tsaxis.utils.time.conversion import (
    from_milliseconds,
    parse_timestamp,
    to_datetime,
    to_milliseconds,
)

__all__ = [
    "add_units",
    "align_to_count",
    "from_milliseconds",
    "parse_timestamp",
    "start_of",
    "to_datetime",
    "to_milliseconds",
    "to_zone",
    "unit_field_value",
]
