#!/usr/bin/env python3
"""
Application bootstrap utilities.

Provides shared, UI-agnostic setup for logging and runtime configuration.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from hello_redux.core.constants import LOG_FORMAT


def setup_logging(level: int = logging.WARNING) -> Path | None:
    """
    Set up logging with proper path handling for app bundles.

    Args:
        level: Root logging level.

    Returns:
        Path to log file, or None if using default stderr.

    """
    log_file: Path | None = None

    if getattr(sys, "frozen", False):
        bundle_dir = Path(sys.executable).parent
        if sys.platform.startswith("darwin"):
            log_dir = Path.home() / "Library" / "Logs" / "HelloRedux"
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file = log_dir / "hello_redux.log"
        else:
            log_file = bundle_dir / "hello_redux.log"

        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            handlers=[logging.FileHandler(log_file), logging.StreamHandler()],
        )
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)

    # basicConfig is a no-op when the module entry point already configured logging
    logging.getLogger().setLevel(level)

    return log_file
