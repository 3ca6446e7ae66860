#!/usr/bin/env python3
"""
Custom Exception Classes for Hello Redux.
Provides structured error handling with specific exception types.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class HelloReduxError(Exception):
    """Base exception for all Hello Redux errors."""

    def __init__(self, message: str, error_code: str | None = None, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ConfigurationError(HelloReduxError):
    """Raised when configuration is invalid."""


class ErrorCodes(StrEnum):
    """Standardized error codes."""

    CONFIG_INVALID = "CONFIG_INVALID"
    OUT_OF_RANGE = "OUT_OF_RANGE"
