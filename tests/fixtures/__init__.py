"""Test fixtures for Hello Redux."""

from tests.fixtures.scheduling_fixtures import FakeScheduledTask, FakeScheduler

__all__ = [
    "FakeScheduledTask",
    "FakeScheduler",
]
