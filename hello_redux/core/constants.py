"""
Constants for Hello Redux.

Centralized string enums and default values used by the store,
the middlewares and the counter window.
"""

from enum import StrEnum

# ============================================================================
# TIMING
# ============================================================================


class TimingDefaults:
    """Delay defaults in milliseconds."""

    INCREMENT_DELAY_MS = 1000


# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================


class ConfigDefaults:
    """Configuration default values."""

    WINDOW_TITLE = "Hello Redux"
    WINDOW_WIDTH = 360
    WINDOW_HEIGHT = 240
    ADD_AMOUNT = 5
    LOG_LEVEL = "WARNING"


class LogLevel(StrEnum):
    """Accepted logging level names."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# ============================================================================
# UI TEXT
# ============================================================================


class ButtonText(StrEnum):
    """Button labels for the counter window."""

    INCREMENT = "+"
    DECREMENT = "-"
    INCREMENT_ASYNC = "+ (delayed)"
    ADD = "Add {amount}"
    ADD_TASK = "Add Task"
    REMOVE_TASK = "Remove Task"


class LabelText(StrEnum):
    """Label templates for the counter window."""

    COUNTER = "Counter: {counter}"
    TASK_COUNT = "Tasks: {count}"
    NEW_TASK_PLACEHOLDER = "New task title"
