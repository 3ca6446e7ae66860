"""
Tests for Store Connectors.

Tests the connector pattern, each connector, and StoreConnectorManager.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from hello_redux.ui.connectors import (
    ControlsConnector,
    CounterLabelConnector,
    StoreConnectorManager,
    TaskListConnector,
    connect_all_components,
)
from hello_redux.ui.store import Actions, AppState, CounterState, Store, app_reducer, create_store

# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def store() -> Store[AppState]:
    """Create a fresh store for testing."""
    return create_store(app_reducer, AppState(counter_state=CounterState(counter=2)))


@pytest.fixture
def mock_window() -> MagicMock:
    """Create a mock window with the attributes connectors use."""
    window = MagicMock()
    window.counter_label = MagicMock()
    window.task_count_label = MagicMock()
    window.task_list = MagicMock()
    window.remove_task_btn = MagicMock()
    return window


def connected_slot(signal: MagicMock):
    """Return the slot a connector passed to signal.connect()."""
    signal.connect.assert_called_once()
    return signal.connect.call_args[0][0]


# ============================================================================
# Test Connector Pattern
# ============================================================================


class TestConnectorPattern:
    """Tests for the common connector pattern."""

    def test_connector_subscribes_to_store(self, store: Store[AppState], mock_window: MagicMock) -> None:
        """Connectors subscribe to store on init."""
        initial_subscribers = len(store._subscribers)

        connector = CounterLabelConnector(store, mock_window)

        assert len(store._subscribers) == initial_subscribers + 1
        connector.disconnect()

    def test_connector_disconnect_unsubscribes(self, store: Store[AppState], mock_window: MagicMock) -> None:
        """Connectors unsubscribe on disconnect."""
        connector = TaskListConnector(store, mock_window)
        subscribers_after_connect = len(store._subscribers)

        connector.disconnect()

        assert len(store._subscribers) == subscribers_after_connect - 1


# ============================================================================
# Test CounterLabelConnector
# ============================================================================


class TestCounterLabelConnector:
    """Tests for CounterLabelConnector."""

    def test_renders_initial_counter(self, store: Store[AppState], mock_window: MagicMock) -> None:
        CounterLabelConnector(store, mock_window)

        mock_window.show_counter.assert_called_once_with(2)

    def test_renders_on_counter_change(self, store: Store[AppState], mock_window: MagicMock) -> None:
        CounterLabelConnector(store, mock_window)
        mock_window.show_counter.reset_mock()

        store.dispatch(Actions.add(value=5))

        mock_window.show_counter.assert_called_once_with(7)

    def test_skips_unrelated_changes(self, store: Store[AppState], mock_window: MagicMock) -> None:
        CounterLabelConnector(store, mock_window)
        mock_window.show_counter.reset_mock()

        store.dispatch(Actions.task_added("a"))
        store.dispatch(Actions.increment_async())

        mock_window.show_counter.assert_not_called()

    def test_renders_only_changed_values(self, store: Store[AppState], mock_window: MagicMock) -> None:
        CounterLabelConnector(store, mock_window)
        mock_window.show_counter.reset_mock()

        store.dispatch(Actions.add(value=0))
        store.dispatch(Actions.increment())
        store.dispatch(Actions.add(value=0))

        assert [c.args for c in mock_window.show_counter.call_args_list] == [(3,)]

    def test_disconnect_stops_rendering(self, store: Store[AppState], mock_window: MagicMock) -> None:
        connector = CounterLabelConnector(store, mock_window)
        mock_window.show_counter.reset_mock()

        connector.disconnect()
        store.dispatch(Actions.increment())

        mock_window.show_counter.assert_not_called()


# ============================================================================
# Test TaskListConnector
# ============================================================================


class TestTaskListConnector:
    """Tests for TaskListConnector."""

    def test_renders_initial_tasks(self, store: Store[AppState], mock_window: MagicMock) -> None:
        TaskListConnector(store, mock_window)

        mock_window.show_tasks.assert_called_once_with(())

    def test_renders_on_task_change(self, store: Store[AppState], mock_window: MagicMock) -> None:
        TaskListConnector(store, mock_window)
        mock_window.show_tasks.reset_mock()

        store.dispatch(Actions.task_added("a"))
        store.dispatch(Actions.task_added("b"))

        assert mock_window.show_tasks.call_args_list[-1][0][0] == ("a", "b")
        assert mock_window.show_tasks.call_count == 2

    def test_skips_counter_changes(self, store: Store[AppState], mock_window: MagicMock) -> None:
        TaskListConnector(store, mock_window)
        mock_window.show_tasks.reset_mock()

        store.dispatch(Actions.increment())

        mock_window.show_tasks.assert_not_called()


# ============================================================================
# Test ControlsConnector
# ============================================================================


class TestControlsConnector:
    """Tests for ControlsConnector signal forwarding."""

    def test_increment_signal_dispatches(self, store: Store[AppState], mock_window: MagicMock) -> None:
        ControlsConnector(store, mock_window)

        connected_slot(mock_window.incrementRequested)()

        assert store.state.counter_state.counter == 3

    def test_decrement_signal_dispatches(self, store: Store[AppState], mock_window: MagicMock) -> None:
        ControlsConnector(store, mock_window)

        connected_slot(mock_window.decrementRequested)()

        assert store.state.counter_state.counter == 1

    def test_add_signal_dispatches_value(self, store: Store[AppState], mock_window: MagicMock) -> None:
        ControlsConnector(store, mock_window)

        connected_slot(mock_window.addRequested)(5)

        assert store.state.counter_state.counter == 7

    def test_increment_async_signal_dispatches_request(self, mock_window: MagicMock) -> None:
        seen = []
        store = create_store(app_reducer, AppState(), [lambda state, action, dispatch: seen.append(action)])
        ControlsConnector(store, mock_window)

        connected_slot(mock_window.incrementAsyncRequested)()

        assert seen == [Actions.increment_async()]
        assert store.state.counter_state.counter == 0

    def test_task_add_strips_title(self, store: Store[AppState], mock_window: MagicMock) -> None:
        ControlsConnector(store, mock_window)

        connected_slot(mock_window.taskAddRequested)("  write tests  ")

        assert store.state.task_state.tasks[0].title == "write tests"

    def test_blank_task_title_is_ignored(self, store: Store[AppState], mock_window: MagicMock) -> None:
        ControlsConnector(store, mock_window)
        callback = MagicMock()
        store.subscribe(callback)

        connected_slot(mock_window.taskAddRequested)("   ")

        callback.assert_not_called()
        assert store.state.task_state.tasks == ()

    def test_task_remove_dispatches_index(self, store: Store[AppState], mock_window: MagicMock) -> None:
        ControlsConnector(store, mock_window)
        store.dispatch(Actions.task_added("a"))
        store.dispatch(Actions.task_added("b"))

        connected_slot(mock_window.taskRemoveRequested)(0)

        assert [task.title for task in store.state.task_state.tasks] == ["b"]

    def test_disconnect_disconnects_signals(self, store: Store[AppState], mock_window: MagicMock) -> None:
        connector = ControlsConnector(store, mock_window)

        connector.disconnect()

        mock_window.incrementRequested.disconnect.assert_called_once()
        mock_window.taskRemoveRequested.disconnect.assert_called_once()

    def test_disconnect_tolerates_already_disconnected(self, store: Store[AppState], mock_window: MagicMock) -> None:
        connector = ControlsConnector(store, mock_window)
        mock_window.incrementRequested.disconnect.side_effect = TypeError("not connected")

        connector.disconnect()  # Should not raise

        mock_window.decrementRequested.disconnect.assert_called_once()


# ============================================================================
# Test StoreConnectorManager
# ============================================================================


class TestStoreConnectorManager:
    """Tests for StoreConnectorManager."""

    def test_connect_all_components_returns_manager(self, store: Store[AppState], mock_window: MagicMock) -> None:
        manager = connect_all_components(store, mock_window)

        assert isinstance(manager, StoreConnectorManager)
        assert len(manager.connectors) == 3

    def test_disconnect_all_unsubscribes(self, store: Store[AppState], mock_window: MagicMock) -> None:
        before = len(store._subscribers)
        manager = connect_all_components(store, mock_window)

        manager.disconnect_all()

        assert len(store._subscribers) == before
        assert manager.connectors == []
