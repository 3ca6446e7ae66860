#!/usr/bin/env python3
"""
Hello Redux.

A minimal unidirectional state container with a PyQt6 counter window on top.
"""

__version__ = "0.1.0"
__author__ = "Hello Redux Team"
__description__ = "Redux-style store with reducers, middleware and a PyQt6 counter demo"
