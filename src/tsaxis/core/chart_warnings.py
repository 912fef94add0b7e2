#!/usr/bin/env python
"""Chart warnings raised while preparing a time axis.

Warnings are advisory values handed to a caller-supplied callback; they never
interrupt axis computation.
"""

from collections.abc import Iterable

import attrs

__all__ = [
    "ChartWarning",
    "MULTIPLE_TIMEZONES",
    "UNEXPECTED_TIMEZONE",
    "multiple_timezone_warning",
    "unexpected_timezone_warning",
]

MULTIPLE_TIMEZONES = "multiple-timezones"
UNEXPECTED_TIMEZONE = "unexpected-timezone"


@attrs.frozen
class ChartWarning:
    """A keyed, human readable chart warning."""

    key: str
    text: str

    def __str__(self) -> str:
        return self.text


def multiple_timezone_warning(timezones: Iterable[str | None]) -> ChartWarning:
    """Warning for series whose results were expressed in different timezones."""
    names = ", ".join(str(tz) for tz in timezones)
    return ChartWarning(MULTIPLE_TIMEZONES, f"This chart contains queries run in multiple timezones: {names}")


def unexpected_timezone_warning(results_timezone: str | None, requested_timezone: str) -> ChartWarning:
    """Warning for a query that ran in a timezone other than the one requested."""
    return ChartWarning(
        UNEXPECTED_TIMEZONE,
        f"The query for this chart was run in {results_timezone} rather than {requested_timezone} "
        "due to database or driver constraints.",
    )
