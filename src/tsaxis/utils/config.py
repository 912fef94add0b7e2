#!/usr/bin/env python
"""Centralized configuration for tsaxis.

Constants shared by the tick-selection and timezone code, plus an attrs-based
configuration object that can be created explicitly or from the environment.
"""

import os
from typing import Any, Final

import attrs

from tsaxis.utils.exceptions import ConfigurationError

# Timezone used when a result set does not report the timezone it was run in
DEFAULT_TIMEZONE: Final = "Etc/UTC"

# Horizontal room reserved for one tick label; not measured from the label text
MIN_PIXELS_PER_TICK: Final = 160

# Column units that still describe a point on a continuous time axis
TIMESERIES_UNITS: Final[frozenset[str]] = frozenset({"minute", "hour", "day", "week", "month", "quarter", "year"})

MILLISECONDS_IN_SECOND: Final = 1000
MICROSECONDS_IN_MILLISECOND: Final = 1000

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _positive(_, attribute, value) -> None:
    if value <= 0:
        raise ValueError(f"{attribute.name} must be positive, got {value}")


@attrs.define(slots=True, frozen=True)
class AxisConfig:
    """Configuration for time-axis rendering.

    Examples:
        >>> config = AxisConfig()
        >>> config.min_pixels_per_tick
        160
        >>> config = AxisConfig.create(default_timezone="America/Chicago")
        >>> config = AxisConfig.from_env(log_level="debug")
    """

    min_pixels_per_tick: int = attrs.field(default=MIN_PIXELS_PER_TICK, validator=[attrs.validators.instance_of(int), _positive])
    default_timezone: str = attrs.field(default=DEFAULT_TIMEZONE, validator=attrs.validators.instance_of(str))
    log_level: str = attrs.field(
        default="WARNING",
        converter=str.upper,
        validator=[attrs.validators.instance_of(str), attrs.validators.in_(LOG_LEVELS)],
    )

    @classmethod
    def create(cls, **kwargs: Any) -> "AxisConfig":
        """Create an AxisConfig with optional overrides."""
        return cls(**kwargs)

    @classmethod
    def from_env(cls, **overrides: Any) -> "AxisConfig":
        """Create configuration from environment variables.

        Environment variables:
        - TSAXIS_MIN_PIXELS_PER_TICK: Pixels reserved per tick (default: 160)
        - TSAXIS_DEFAULT_TIMEZONE: Fallback timezone (default: Etc/UTC)
        - TSAXIS_LOG_LEVEL: Log level (default: WARNING)

        Args:
            **overrides: Override any environment variable values

        Returns:
            AxisConfig instance configured from environment

        Raises:
            ConfigurationError: If a value is malformed or fails validation
        """
        config_dict = {
            "min_pixels_per_tick": os.getenv("TSAXIS_MIN_PIXELS_PER_TICK", str(MIN_PIXELS_PER_TICK)),
            "default_timezone": os.getenv("TSAXIS_DEFAULT_TIMEZONE", DEFAULT_TIMEZONE),
            "log_level": os.getenv("TSAXIS_LOG_LEVEL", "WARNING"),
        }

        config_dict.update({k: v for k, v in overrides.items() if v is not None})

        # overrides replace env values before they are checked
        if isinstance(config_dict["min_pixels_per_tick"], str):
            raw_pixels = config_dict["min_pixels_per_tick"]
            try:
                config_dict["min_pixels_per_tick"] = int(raw_pixels)
            except ValueError as e:
                raise ConfigurationError(
                    f"TSAXIS_MIN_PIXELS_PER_TICK must be an integer, got {raw_pixels!r}",
                    details={"min_pixels_per_tick": raw_pixels},
                ) from e

        try:
            return cls(**config_dict)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid configuration: {e}", details=config_dict) from e
