#!/usr/bin/env python3
"""Unit tests for AxisConfig and the loguru wrapper."""

import attrs
import pytest

from tsaxis.utils.config import DEFAULT_TIMEZONE, MIN_PIXELS_PER_TICK, AxisConfig
from tsaxis.utils.exceptions import ConfigurationError
from tsaxis.utils.loguru_setup import logger


class TestAxisConfig:
    """Configuration defaults, validation and environment loading."""

    def test_defaults(self):
        """Defaults mirror the module constants."""
        config = AxisConfig()
        assert config.min_pixels_per_tick == MIN_PIXELS_PER_TICK == 160
        assert config.default_timezone == DEFAULT_TIMEZONE == "Etc/UTC"
        assert config.log_level == "WARNING"

    def test_log_level_normalized(self):
        """Log levels are upper-cased."""
        assert AxisConfig.create(log_level="debug").log_level == "DEBUG"

    def test_invalid_values(self):
        """Bad levels and non-positive pixel budgets are rejected."""
        with pytest.raises(ValueError):
            AxisConfig(log_level="LOUD")
        with pytest.raises(ValueError):
            AxisConfig(min_pixels_per_tick=0)
        with pytest.raises(TypeError):
            AxisConfig(min_pixels_per_tick="wide")

    def test_frozen(self):
        """Config objects are immutable."""
        config = AxisConfig()
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            config.min_pixels_per_tick = 100

    def test_from_env(self, monkeypatch):
        """Environment variables are read, and overrides win."""
        monkeypatch.setenv("TSAXIS_MIN_PIXELS_PER_TICK", "120")
        monkeypatch.setenv("TSAXIS_DEFAULT_TIMEZONE", "America/Chicago")
        monkeypatch.setenv("TSAXIS_LOG_LEVEL", "info")

        config = AxisConfig.from_env()
        assert config.min_pixels_per_tick == 120
        assert config.default_timezone == "America/Chicago"
        assert config.log_level == "INFO"

        overridden = AxisConfig.from_env(default_timezone="UTC", log_level=None)
        assert overridden.default_timezone == "UTC"
        assert overridden.log_level == "INFO"

    def test_from_env_malformed_pixels(self, monkeypatch):
        """A non-numeric pixel allowance is reported as a configuration error."""
        monkeypatch.setenv("TSAXIS_MIN_PIXELS_PER_TICK", "wide")
        with pytest.raises(ConfigurationError, match="TSAXIS_MIN_PIXELS_PER_TICK") as exc_info:
            AxisConfig.from_env()
        assert exc_info.value.details == {"min_pixels_per_tick": "wide"}
        assert AxisConfig.from_env(min_pixels_per_tick=90).min_pixels_per_tick == 90

    def test_from_env_invalid_values(self, monkeypatch):
        """Validation failures surface as configuration errors."""
        monkeypatch.setenv("TSAXIS_MIN_PIXELS_PER_TICK", "-5")
        with pytest.raises(ConfigurationError):
            AxisConfig.from_env()
        monkeypatch.delenv("TSAXIS_MIN_PIXELS_PER_TICK")
        monkeypatch.setenv("TSAXIS_LOG_LEVEL", "loud")
        with pytest.raises(ValueError):
            AxisConfig.from_env()


class TestLogger:
    """Level handling on the loguru wrapper."""

    def test_configure_level(self):
        """Level changes are reflected in queries and can be chained."""
        previous = logger.getEffectiveLevel()
        try:
            assert logger.configure_level("warning") is logger
            assert logger.getEffectiveLevel() == "WARNING"
            assert logger.isEnabledFor("ERROR")
            assert not logger.isEnabledFor("debug")
        finally:
            logger.configure_level(previous)

    def test_extra_sinks_survive_reconfiguration(self, log_records):
        """Sinks added with add_sink keep receiving records after a level change."""
        previous = logger.getEffectiveLevel()
        try:
            logger.configure_level("CRITICAL")
            logger.debug("still captured")
        finally:
            logger.configure_level(previous)
        assert any(record["message"] == "still captured" for record in log_records)
