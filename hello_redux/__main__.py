#!/usr/bin/env python
"""
Module entry point for Hello Redux.

This allows the application to be run as:
    python -m hello_redux
or via the installed console script:
    hello-redux
"""

from __future__ import annotations

import logging
import sys

from hello_redux.core.constants import LOG_FORMAT

logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the module."""
    try:
        from hello_redux.main import main as app_main

        logger.info("Starting Hello Redux via module entry point")
        return app_main()
    except ImportError as e:
        logger.exception(f"Failed to import application: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        return 130
    except Exception:
        logger.exception("Unexpected error during application startup")
        return 1


if __name__ == "__main__":
    sys.exit(main())
