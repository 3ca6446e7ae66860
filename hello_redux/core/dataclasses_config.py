#!/usr/bin/env python3
"""Configuration-related dataclasses."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hello_redux.core.constants import ConfigDefaults, LogLevel, TimingDefaults
from hello_redux.core.exceptions import ConfigurationError, ErrorCodes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration settings with hardcoded defaults."""

    # Middleware timing
    increment_delay_ms: int = TimingDefaults.INCREMENT_DELAY_MS

    # Counter window
    add_amount: int = ConfigDefaults.ADD_AMOUNT
    window_title: str = ConfigDefaults.WINDOW_TITLE
    window_width: int = ConfigDefaults.WINDOW_WIDTH
    window_height: int = ConfigDefaults.WINDOW_HEIGHT

    # Logging
    log_level: str = ConfigDefaults.LOG_LEVEL

    def validate(self) -> AppConfig:
        """
        Check that every setting is usable.

        Returns:
            The same config, so calls can be chained.

        Raises:
            ConfigurationError: If a setting is out of range or unknown.

        """
        if self.increment_delay_ms < 0:
            msg = f"increment_delay_ms must be >= 0, got {self.increment_delay_ms}"
            raise ConfigurationError(msg, ErrorCodes.OUT_OF_RANGE, {"increment_delay_ms": self.increment_delay_ms})

        if self.window_width <= 0 or self.window_height <= 0:
            msg = f"Window size must be positive, got {self.window_width}x{self.window_height}"
            raise ConfigurationError(msg, ErrorCodes.OUT_OF_RANGE)

        if self.log_level.upper() not in LogLevel.__members__:
            msg = f"Unknown log level: {self.log_level}"
            raise ConfigurationError(msg, ErrorCodes.CONFIG_INVALID, {"log_level": self.log_level})

        logger.debug("AppConfig validated: %s", self)
        return self

    @property
    def numeric_log_level(self) -> int:
        """Logging level as the integer the logging module expects."""
        return logging.getLevelName(self.log_level.upper())
