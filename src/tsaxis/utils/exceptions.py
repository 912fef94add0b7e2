#!/usr/bin/env python3
"""Custom exceptions for tsaxis.

All exceptions carry a `.details` dict (default `{}`) with machine-parseable
context such as the offending raw value or timezone name.
"""

from __future__ import annotations

from typing import Any

from tsaxis.utils.loguru_setup import logger


class TimeseriesAxisError(Exception):
    """Base exception for all tsaxis errors.

    Attributes:
        message: Human-readable error message.
        details: Machine-parseable error context (dict, default ``{}``).
    """

    def __init__(self, message="Time axis error occurred", *, details: dict[str, Any] | None = None) -> None:
        """Initialize TimeseriesAxisError with an error message.

        Args:
            message: Error description.
            details: Machine-parseable context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)
        logger.debug(f"{type(self).__name__}: {message}")


class TimestampParseError(TimeseriesAxisError, ValueError):
    """Exception raised when a raw value is not a strict ISO-8601 timestamp."""

    def __init__(self, value: Any, reason: str | None = None) -> None:
        """Initialize TimestampParseError for a raw value.

        Args:
            value: The raw value that failed to parse.
            reason: Optional underlying parser message.
        """
        message = f"Unable to parse timestamp: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, details={"value": value, "reason": reason})


class InvalidTimezoneError(TimeseriesAxisError, ValueError):
    """Exception raised when a timezone name is not known to the tz database."""

    def __init__(self, timezone_name: Any) -> None:
        """Initialize InvalidTimezoneError.

        Args:
            timezone_name: The unrecognised timezone identifier.
        """
        super().__init__(f"Unknown timezone: {timezone_name!r}", details={"timezone": timezone_name})


class ScaleDomainError(TimeseriesAxisError, ValueError):
    """Exception raised when a scale is given a domain or range it cannot map."""

    def __init__(self, message="Scale domain and range must have exactly two values", *, details: dict[str, Any] | None = None) -> None:
        """Initialize ScaleDomainError.

        Args:
            message: Error description.
            details: Machine-parseable context (the rejected values).
        """
        super().__init__(message, details=details)


class ConfigurationError(TimeseriesAxisError, ValueError):
    """Exception raised when configuration values cannot be used."""

    def __init__(self, message="Invalid configuration", *, details: dict[str, Any] | None = None) -> None:
        """Initialize ConfigurationError.

        Args:
            message: Error description.
            details: Machine-parseable context (the offending setting).
        """
        super().__init__(message, details=details)
