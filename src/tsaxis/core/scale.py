#!/usr/bin/env python
"""Numeric scales used to position timestamps on a chart axis.

``LinearScale`` is a two-point linear mapping from a numeric domain to a
numeric range. ``TimeseriesScale`` owns one, feeds it epoch milliseconds,
and adds the timezone-aware tick generation for its unit and count.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date, datetime
from typing import Any

import pendulum

from tsaxis.core.ticks import generate_ticks
from tsaxis.utils.exceptions import ScaleDomainError
from tsaxis.utils.granularity import GRANULARITY_TABLE, GranularityEntry, TimeUnit, find_entry_index
from tsaxis.utils.granularity.enums import CalendarField
from tsaxis.utils.time.arithmetic import to_zone
from tsaxis.utils.time.conversion import from_milliseconds, parse_timestamp, to_milliseconds

__all__ = [
    "Interpolator",
    "LinearScale",
    "TimeseriesScale",
    "interpolate_number",
    "interpolate_round",
]

Interpolator = Callable[[float, float], Callable[[float], float]]


def interpolate_number(a: float, b: float) -> Callable[[float], float]:
    """Linear interpolation between ``a`` and ``b``."""
    return lambda t: a + (b - a) * t


def interpolate_round(a: float, b: float) -> Callable[[float], float]:
    """Linear interpolation between ``a`` and ``b`` rounded to whole numbers."""
    return lambda t: round(a + (b - a) * t)


def _pair(values: Sequence[float], what: str) -> tuple[float, float]:
    if len(values) != 2:
        raise ScaleDomainError(f"Scale {what} must have exactly two values, got {len(values)}", details={what: list(values)})
    return float(values[0]), float(values[1])


def _normalize(x: float, a: float, b: float, clamp: bool) -> float:
    span = b - a
    # a zero-width domain maps everything to the start of the range
    t = (x - a) / span if span else 0.0
    if clamp:
        t = max(0.0, min(1.0, t))
    return t


class LinearScale:
    """Linear mapping from a two-value domain to a two-value range."""

    def __init__(
        self,
        domain: Sequence[float] = (0.0, 1.0),
        range_: Sequence[float] = (0.0, 1.0),
        *,
        interpolate: Interpolator = interpolate_number,
        clamp: bool = False,
    ) -> None:
        self._domain = _pair(domain, "domain")
        self._range = _pair(range_, "range")
        self._interpolate = interpolate
        self._clamp = clamp

    def __call__(self, x: float) -> float:
        return self.map(x)

    def map(self, x: float) -> float:
        """Position of domain value ``x`` in the range."""
        t = _normalize(float(x), *self._domain, self._clamp)
        return self._interpolate(*self._range)(t)

    def invert(self, y: float) -> float:
        """Domain value at range position ``y``."""
        t = _normalize(float(y), *self._range, self._clamp)
        return interpolate_number(*self._domain)(t)

    def domain(self) -> list[float]:
        return list(self._domain)

    def set_domain(self, values: Sequence[float]) -> LinearScale:
        self._domain = _pair(values, "domain")
        return self

    def range(self) -> list[float]:
        return list(self._range)

    def set_range(self, values: Sequence[float]) -> LinearScale:
        self._range = _pair(values, "range")
        return self

    def set_range_round(self, values: Sequence[float]) -> LinearScale:
        """Set the range and round mapped positions to whole numbers."""
        self._range = _pair(values, "range")
        self._interpolate = interpolate_round
        return self

    def set_interpolate(self, interpolate: Interpolator) -> LinearScale:
        self._interpolate = interpolate
        return self

    def set_clamp(self, clamp: bool) -> LinearScale:
        self._clamp = bool(clamp)
        return self

    @property
    def is_clamped(self) -> bool:
        return self._clamp

    def copy(self) -> LinearScale:
        """Independent scale with the same configuration."""
        return LinearScale(self._domain, self._range, interpolate=self._interpolate, clamp=self._clamp)

    def __repr__(self) -> str:
        return f"LinearScale(domain={list(self._domain)}, range={list(self._range)}, clamp={self._clamp})"


def _milliseconds(value: Any) -> float:
    if isinstance(value, (datetime, date, str)):
        return float(to_milliseconds(parse_timestamp(value)))
    return float(value)


class TimeseriesScale:
    """Time axis scale aligned to a timezone, unit and count.

    Example:
        >>> scale = TimeseriesScale("America/Chicago", TimeUnit.DAY, 1)
        >>> scale = scale.set_domain(["2020-03-07T00:00:00Z", "2020-03-10T00:00:00Z"]).set_range([0, 300])
        >>> [t.day for t in scale.ticks()]
        [7, 8, 9]
    """

    def __init__(self, timezone: str, unit: TimeUnit, count: int = 1, linear: LinearScale | None = None) -> None:
        self.timezone = timezone
        self.unit = unit
        self.count = count
        self._linear = linear if linear is not None else LinearScale()

    @classmethod
    def for_interval(cls, interval: GranularityEntry, timezone: str) -> TimeseriesScale:
        """Scale ticking at ``interval`` (typically from select_tick_interval)."""
        return cls(timezone, interval.unit, interval.count)

    @property
    def interval(self) -> GranularityEntry:
        """Tick spacing as a granularity entry."""
        index = find_entry_index(self.unit, self.count)
        if index is not None:
            return GRANULARITY_TABLE[index]
        return GranularityEntry(self.unit, self.count, CalendarField.NONE)

    def __call__(self, value: Any) -> float:
        return self.map(value)

    def map(self, value: Any) -> float:
        """Position of a timestamp, datetime, date or epoch-ms value."""
        return self._linear.map(_milliseconds(value))

    def get_domain(self) -> list[pendulum.DateTime]:
        """Domain endpoints as DateTimes in the scale timezone."""
        return [to_zone(from_milliseconds(round(ms)), self.timezone) for ms in self._linear.domain()]

    def set_domain(self, values: Sequence[Any]) -> TimeseriesScale:
        self._linear.set_domain([_milliseconds(v) for v in values])
        return self

    def ticks(self) -> list[pendulum.DateTime]:
        """Round ticks across the current domain."""
        start, end = self.get_domain()
        return generate_ticks((start, end), self.interval, self.timezone)

    def copy(self) -> TimeseriesScale:
        """Independent scale with the same timezone, unit, count and mapping."""
        return TimeseriesScale(self.timezone, self.unit, self.count, self._linear.copy())

    def range(self) -> list[float]:
        return self._linear.range()

    def set_range(self, values: Sequence[float]) -> TimeseriesScale:
        self._linear.set_range(values)
        return self

    def set_range_round(self, values: Sequence[float]) -> TimeseriesScale:
        self._linear.set_range_round(values)
        return self

    def set_interpolate(self, interpolate: Interpolator) -> TimeseriesScale:
        self._linear.set_interpolate(interpolate)
        return self

    def set_clamp(self, clamp: bool) -> TimeseriesScale:
        self._linear.set_clamp(clamp)
        return self

    def invert(self, y: float) -> float:
        """Epoch milliseconds at range position ``y``."""
        return self._linear.invert(y)

    def invert_datetime(self, y: float) -> pendulum.DateTime:
        """DateTime, in the scale timezone, at range position ``y``."""
        return to_zone(from_milliseconds(round(self.invert(y))), self.timezone)

    def __repr__(self) -> str:
        return f"TimeseriesScale(timezone={self.timezone!r}, unit={self.unit.value!r}, count={self.count}, linear={self._linear!r})"
