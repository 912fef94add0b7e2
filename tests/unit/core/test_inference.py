#!/usr/bin/env python3
"""Unit tests for granularity inference."""

import pendulum
import pytest

from tsaxis.core.inference import infer_granularity, infer_granularity_index
from tsaxis.utils.granularity import DAY_INDEX, GRANULARITY_TABLE, UNIT_INDEX, DatetimeUnit, TimeUnit


def _label(samples, unit=None):
    return infer_granularity(samples, unit).label


class TestDeclaredUnit:
    """A recognised declared unit short-circuits inference."""

    @pytest.mark.parametrize("unit", list(DatetimeUnit))
    def test_declared_unit_wins(self, unit):
        """The unit's own position is returned regardless of samples."""
        samples = ["2020-01-01T10:00:00Z", "2020-01-01T10:15:00Z"]
        assert infer_granularity_index(samples, unit.value) == UNIT_INDEX[unit]

    def test_declared_quarter(self):
        """Quarter maps to three months."""
        entry = infer_granularity(["2020-01-01", "2020-01-02"], "quarter")
        assert (entry.unit, entry.count) == (TimeUnit.MONTH, 3)

    def test_unknown_unit_is_ignored(self):
        """Units such as hour-of-day fall through to sample inference."""
        assert _label(["2020-01-01T10:00:00Z", "2020-01-01T10:15:00Z"], "minute-of-hour") == "15 minutes"


class TestSampleInference:
    """Inference from the samples themselves."""

    @pytest.mark.parametrize("samples", [[], ["2020-01-01T10:07:13Z"], ["garbage"], [None]])
    def test_zero_or_one_sample_is_day(self, samples):
        """A lone sample, even an unparsable one, carries no signal."""
        assert infer_granularity_index(samples) == DAY_INDEX

    @pytest.mark.parametrize(
        ("samples", "expected"),
        [
            (["2020-01-01T00:00:00.000Z", "2020-01-01T00:00:00.250Z"], "1 ms"),
            (["2020-01-01T00:00:00Z", "2020-01-01T00:00:01Z"], "1 second"),
            (["2020-01-01T00:00:00Z", "2020-01-01T00:00:05Z", "2020-01-01T00:00:10Z"], "5 seconds"),
            (["2020-01-01T10:00:00Z", "2020-01-01T10:01:00Z"], "1 minute"),
            (["2020-01-01T10:00:00Z", "2020-01-01T10:15:00Z"], "15 minutes"),
            (["2020-01-01T10:00:00Z", "2020-01-01T11:00:00Z", "2020-01-01T12:00:00Z"], "1 hour"),
            (["2020-01-01", "2020-01-02", "2020-01-03"], "1 day"),
            (["2020-01-06", "2020-01-13", "2020-01-20"], "1 week"),
            (["2020-01-01", "2020-02-01", "2020-03-01"], "1 month"),
            (["2020-01-01", "2020-04-01", "2020-07-01"], "3 months"),
            (["2018-01-01", "2019-01-01", "2020-01-01"], "1 year"),
        ],
    )
    def test_regular_series(self, samples, expected):
        """Evenly bucketed data is recognised at its bucket size."""
        assert _label(samples) == expected

    def test_fifteen_minute_data_is_at_most_hourly(self):
        """10:00 and 10:15 give a sub-hour granularity."""
        index = infer_granularity_index(["2020-01-01T10:00:00Z", "2020-01-01T10:15:00Z"])
        assert index <= UNIT_INDEX[DatetimeUnit.HOUR]

    def test_identical_samples_are_coarsest(self):
        """Samples that never vary fall back to the coarsest entry."""
        samples = ["2020-01-01T00:00:00Z"] * 3
        assert infer_granularity_index(samples) == len(GRANULARITY_TABLE) - 1

    def test_offsets_are_read_in_sample_timezone(self):
        """Local midnights written with an offset are daily data."""
        samples = ["2020-01-01T00:00:00-06:00", "2020-01-02T00:00:00-06:00", "2020-01-03T00:00:00-06:00"]
        assert _label(samples) == "1 day"

    def test_accepts_iterators(self):
        """Any iterable of samples is accepted."""
        assert _label(iter(["2020-01-01", "2020-01-02"])) == "1 day"

    def test_custom_parser(self):
        """A caller-supplied parser replaces ISO parsing."""
        samples = [0, 86_400, 172_800]
        index = infer_granularity_index(samples, parse=lambda s: pendulum.from_timestamp(s, tz="UTC"))
        assert index == DAY_INDEX


class TestUnparsableSamples:
    """Variation at the finest position clamps to the finest entry."""

    @pytest.mark.parametrize(
        "samples",
        [
            ["2020-01-01T00:00:00Z", "garbage", "2020-01-03T00:00:00Z"],
            ["garbage", "2020-01-02T00:00:00Z"],
            ["2020-01-01T00:00:00Z", None],
        ],
    )
    def test_unparsable_sample_gives_finest_entry(self, samples):
        """Position zero is returned instead of a negative index."""
        assert infer_granularity_index(samples) == 0

    def test_unparsable_sample_is_logged(self, log_records):
        """A warning names the offending value."""
        infer_granularity_index(["2020-01-01T00:00:00Z", "garbage"])
        warnings = [r for r in log_records if r["level"].name == "WARNING"]
        assert warnings
        assert "garbage" in warnings[0]["message"]
