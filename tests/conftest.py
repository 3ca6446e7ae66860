#!/usr/bin/env python3
"""
Shared test fixtures for Hello Redux.
Provides common test setup and utilities.
"""

from __future__ import annotations

import os

# Must be set before any QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from hello_redux.core.dataclasses_config import AppConfig
from hello_redux.ui.store import AppState, Store, create_app_store
from tests.fixtures import FakeScheduler


# pytest-qt configuration
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "gui: mark test as a GUI test")
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


@pytest.fixture
def fake_scheduler() -> FakeScheduler:
    """Deterministic scheduler driven by advance()."""
    return FakeScheduler()


@pytest.fixture
def app_config() -> AppConfig:
    """Default configuration with the standard one second delay."""
    return AppConfig()


@pytest.fixture
def app_store(app_config: AppConfig, fake_scheduler: FakeScheduler) -> Store[AppState]:
    """Application store wired to the fake scheduler."""
    return create_app_store(app_config, scheduler=fake_scheduler)
