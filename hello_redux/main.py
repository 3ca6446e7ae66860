#!/usr/bin/env python3
"""
Hello Redux - Package Main Entry Point.

This module provides the entry point for the installed package:
    python -m hello_redux
    hello-redux (console script)
"""

from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication

from hello_redux.app_bootstrap import setup_logging
from hello_redux.core.dataclasses_config import AppConfig
from hello_redux.ui.main_window import CounterWindow
from hello_redux.ui.store import create_app_store


def main(config: AppConfig | None = None) -> int:
    """
    Main application entry point.

    The store is created here, once, and handed to the window. Nothing
    else in the application constructs or looks up a store.

    Returns:
        Exit code (0 for success, non-zero for errors).

    """
    config = (config or AppConfig()).validate()

    log_file = setup_logging(config.numeric_log_level)
    logger = logging.getLogger(__name__)
    logger.info("Starting Hello Redux")
    if log_file:
        logger.info("Log file location: %s", log_file)

    app = QApplication(sys.argv)

    store = create_app_store(config)
    window = CounterWindow(store, config)
    window.show()

    exit_code = app.exec()
    store.close()
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
