#!/usr/bin/env python
"""Root conftest.py providing shared fixtures for the tsaxis test suite."""

import pendulum
import pytest

from tsaxis.utils.loguru_setup import logger


@pytest.fixture
def log_records():
    """Capture loguru records emitted during a test, regardless of the configured level."""
    records = []
    sink_id = logger.add_sink(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove_sink(sink_id)


@pytest.fixture
def warnings_seen():
    """A list plus a callback appending to it, for the timezone resolver."""
    seen = []
    return seen, seen.append


@pytest.fixture
def sample_moment():
    """A timestamp with every calendar field set to a distinct value."""
    return pendulum.datetime(2021, 5, 17, 13, 47, 23, 456789, tz="UTC")
