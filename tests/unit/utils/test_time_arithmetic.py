#!/usr/bin/env python3
"""Unit tests for timezone-aware calendar arithmetic."""

import pendulum
import pytest

from tsaxis.utils.exceptions import InvalidTimezoneError
from tsaxis.utils.granularity import TimeUnit
from tsaxis.utils.time import add_units, align_to_count, start_of, to_zone, unit_field_value


class TestStartOf:
    """Truncation to unit boundaries."""

    def test_start_of_hour(self, sample_moment):
        """Sub-hour fields are zeroed."""
        assert start_of(sample_moment, TimeUnit.HOUR) == pendulum.datetime(2021, 5, 17, 13, tz="UTC")

    def test_start_of_millisecond(self, sample_moment):
        """Sub-millisecond precision is dropped."""
        assert start_of(sample_moment, TimeUnit.MILLISECOND).microsecond == 456000

    def test_start_of_week_is_monday(self, sample_moment):
        """Weeks start on Monday."""
        assert start_of(sample_moment, TimeUnit.WEEK).isoweekday() == 1

    def test_start_of_day_is_local_midnight(self):
        """Truncation happens on the zone's wall clock."""
        dt = pendulum.datetime(2020, 3, 8, 15, tz="America/Chicago")
        floored = start_of(dt, TimeUnit.DAY)
        assert (floored.day, floored.hour) == (8, 0)
        assert floored.timezone_name == "America/Chicago"


class TestAddUnits:
    """Calendar-aware addition."""

    def test_add_month_clamps_day(self):
        """Adding a month to Jan 31 lands on the last day of February."""
        assert add_units(pendulum.datetime(2020, 1, 31, tz="UTC"), 1, TimeUnit.MONTH) == pendulum.datetime(
            2020, 2, 29, tz="UTC"
        )

    def test_add_milliseconds(self):
        """Milliseconds step in microseconds internally."""
        dt = pendulum.datetime(2020, 1, 1, tz="UTC")
        assert add_units(dt, 5, TimeUnit.MILLISECOND).microsecond == 5000

    def test_add_hours_on_wall_clock(self):
        """Hour steps across a DST change land on the next round local hour."""
        dt = pendulum.datetime(2020, 3, 8, tz="America/Chicago")
        nxt = add_units(dt, 6, TimeUnit.HOUR)
        assert (nxt.day, nxt.hour) == (8, 6)
        assert nxt.utcoffset().total_seconds() == -5 * 3600
        assert nxt.timezone_name == "America/Chicago"

    def test_add_hours_in_utc_is_absolute(self):
        """Without DST an hour step is exactly an hour."""
        dt = pendulum.datetime(2020, 1, 1, 22, tz="UTC")
        assert add_units(dt, 3, TimeUnit.HOUR) == pendulum.datetime(2020, 1, 2, 1, tz="UTC")

    def test_add_day_across_dst(self):
        """A day step keeps local midnight across a DST change."""
        dt = pendulum.datetime(2020, 3, 8, tz="America/Chicago")
        nxt = add_units(dt, 1, TimeUnit.DAY)
        assert (nxt.day, nxt.hour) == (9, 0)


class TestAlignment:
    """Aligning to multiples of a count."""

    def test_fifty_years(self):
        """1981 aligns down to 1950."""
        dt = pendulum.datetime(1981, 1, 1, tz="UTC")
        assert align_to_count(dt, TimeUnit.YEAR, 50) == pendulum.datetime(1950, 1, 1, tz="UTC")

    @pytest.mark.parametrize(
        ("month", "expected"),
        [(1, 1), (2, 1), (3, 1), (4, 4), (6, 4), (8, 7), (11, 10), (12, 10)],
    )
    def test_quarters(self, month, expected):
        """Three month alignment lands on Jan, Apr, Jul or Oct."""
        dt = pendulum.datetime(2020, month, 1, tz="UTC")
        assert align_to_count(dt, TimeUnit.MONTH, 3).month == expected

    def test_hours(self):
        """Hour counts align to multiples of the count."""
        dt = pendulum.datetime(2020, 1, 1, 14, tz="UTC")
        assert align_to_count(dt, TimeUnit.HOUR, 3).hour == 12
        assert align_to_count(dt, TimeUnit.HOUR, 12).hour == 12
        assert align_to_count(dt, TimeUnit.HOUR, 1) == dt

    def test_field_values_are_zero_based_for_calendar_units(self, sample_moment):
        """Day and month numbering start at zero."""
        assert unit_field_value(sample_moment, TimeUnit.DAY) == 16
        assert unit_field_value(sample_moment, TimeUnit.MONTH) == 4
        assert unit_field_value(sample_moment, TimeUnit.YEAR) == 2021
        assert unit_field_value(sample_moment, TimeUnit.MILLISECOND) == 456


class TestToZone:
    """Timezone conversion."""

    def test_converts_instant(self):
        """The instant is unchanged while fields move."""
        dt = pendulum.datetime(2020, 1, 1, tz="UTC")
        local = to_zone(dt, "America/Chicago")
        assert local == dt
        assert local.hour == 18

    def test_unknown_timezone(self):
        """Unknown names raise InvalidTimezoneError."""
        with pytest.raises(InvalidTimezoneError) as exc_info:
            to_zone(pendulum.datetime(2020, 1, 1, tz="UTC"), "Not/AZone")
        assert exc_info.value.details["timezone"] == "Not/AZone"
