#!/usr/bin/env python3
"""Loguru-based logging for tsaxis.

A thin wrapper that owns loguru's sinks so the level and output of the
package's log records can be controlled from one place.

Basic usage:
    from tsaxis.utils.loguru_setup import logger

    logger.configure_level("DEBUG")
    logger.debug("Selected tick interval 15 minute")

Environment variables (read once, at import):
    TSAXIS_LOG_LEVEL: Global log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    TSAXIS_LOG_FILE: Optional log file path for file output
    TSAXIS_DISABLE_COLORS: Set to "true" to disable colored output
"""

import os
import sys
from pathlib import Path

from loguru import logger as _loguru_logger

_loguru_logger.remove()

DEFAULT_LOG_LEVEL = os.getenv("TSAXIS_LOG_LEVEL", "ERROR").upper()
LOG_FILE = os.getenv("TSAXIS_LOG_FILE")
DISABLE_COLORS = os.getenv("TSAXIS_DISABLE_COLORS", "false").lower() == "true"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

SIMPLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"

LEVEL_HIERARCHY = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class TSAxisLogger:
    """Wrapper around loguru with environment-driven configuration."""

    def __init__(self) -> None:
        """Initialize the logger from the TSAXIS_* environment variables."""
        self._current_level = DEFAULT_LOG_LEVEL
        self._log_file = LOG_FILE
        self._disable_colors = DISABLE_COLORS
        self._sink_ids: list[int] = []
        _loguru_logger.remove()
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Reinstall the sinks this wrapper owns; sinks added via add_sink are kept."""
        for sink_id in self._sink_ids:
            _loguru_logger.remove(sink_id)
        self._sink_ids = []

        format_template = SIMPLE_FORMAT if self._disable_colors else LOG_FORMAT

        stderr_id = _loguru_logger.add(
            sys.stderr,
            level=self._current_level,
            format=format_template,
            colorize=not self._disable_colors,
            backtrace=True,
            diagnose=True,
        )
        self._sink_ids.append(stderr_id)

        if self._log_file:
            log_path = Path(self._log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_id = _loguru_logger.add(
                str(log_path),
                level=self._current_level,
                format=format_template,
                rotation="10 MB",
                retention="1 week",
                compression="zip",
                backtrace=True,
                diagnose=True,
            )
            self._sink_ids.append(file_id)

    def configure_level(self, level: str) -> "TSAxisLogger":
        """Configure the log level.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

        Returns:
            Self for method chaining
        """
        self._current_level = level.upper()
        self._setup_logger()
        return self

    def debug(self, message: str, *args, **kwargs):
        """Log a debug message."""
        _loguru_logger.opt(depth=1).debug(message, *args, **kwargs)
        return self

    def warning(self, message: str, *args, **kwargs):
        """Log a warning message."""
        _loguru_logger.opt(depth=1).warning(message, *args, **kwargs)
        return self

    def getEffectiveLevel(self) -> str:
        """Get the effective log level."""
        return self._current_level

    def isEnabledFor(self, level: str) -> bool:
        """Check if logging is enabled for the given level."""
        return LEVEL_HIERARCHY.index(level.upper()) >= LEVEL_HIERARCHY.index(self._current_level)

    def add_sink(self, sink, **kwargs) -> int:
        """Attach an extra loguru sink (used by tests to capture records)."""
        return _loguru_logger.add(sink, **kwargs)

    def remove_sink(self, sink_id: int) -> None:
        """Detach a sink previously returned by add_sink."""
        _loguru_logger.remove(sink_id)


logger = TSAxisLogger()
