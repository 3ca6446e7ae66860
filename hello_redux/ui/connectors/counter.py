"""
Counter and task list connectors.

Renders the counter and task slices into the window and forwards the
window's input signals to the store as actions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hello_redux.ui.store import Actions, Selectors, connect_component

if TYPE_CHECKING:
    from hello_redux.ui.protocols import CounterWindowProtocol
    from hello_redux.ui.store import AppState, Store

logger = logging.getLogger(__name__)


class CounterLabelConnector:
    """Connects the counter label to the counter slice."""

    def __init__(self, store: Store[AppState], window: CounterWindowProtocol) -> None:
        self.store = store
        self.window = window
        # Renders the current value now, then only when the counter changes
        self._unsubscribe = connect_component(
            store,
            window,
            state_to_props=lambda state: {"counter": Selectors.counter(state)},
            handlers={"counter": self._render_counter},
        )

    def _render_counter(self, value: int) -> None:
        logger.debug("COUNTER CONNECTOR: %d", value)
        self.window.show_counter(value)

    def disconnect(self) -> None:
        """Cleanup subscription."""
        self._unsubscribe()


class TaskListConnector:
    """Connects the task list widget and its count label to the task slice."""

    def __init__(self, store: Store[AppState], window: CounterWindowProtocol) -> None:
        self.store = store
        self.window = window
        self._unsubscribe = store.subscribe(self._on_state_change)

        self.window.show_tasks(Selectors.task_titles(store.state))

    def _on_state_change(self, old_state: AppState, new_state: AppState) -> None:
        # Slices are replaced only when they change, so identity is enough
        if old_state.task_state is not new_state.task_state:
            logger.debug("TASK CONNECTOR: %d task(s)", Selectors.task_count(new_state))
            self.window.show_tasks(Selectors.task_titles(new_state))

    def disconnect(self) -> None:
        """Cleanup subscription."""
        self._unsubscribe()


class ControlsConnector:
    """
    Connects window control signals to store dispatch.

    Widget (emit signal) -> Connector (dispatch action) -> Store -> Connectors (update widgets)

    Signals handled:
    - incrementRequested -> Actions.increment
    - decrementRequested -> Actions.decrement
    - incrementAsyncRequested -> Actions.increment_async
    - addRequested(int) -> Actions.add
    - taskAddRequested(str) -> Actions.task_added
    - taskRemoveRequested(int) -> Actions.task_removed
    """

    def __init__(self, store: Store[AppState], window: CounterWindowProtocol) -> None:
        self.store = store
        self.window = window

        window.incrementRequested.connect(self._on_increment)
        window.decrementRequested.connect(self._on_decrement)
        window.incrementAsyncRequested.connect(self._on_increment_async)
        window.addRequested.connect(self._on_add)
        window.taskAddRequested.connect(self._on_task_add)
        window.taskRemoveRequested.connect(self._on_task_remove)
        logger.info("CONTROLS CONNECTOR: Connected to window control signals")

    def _on_increment(self) -> None:
        self.store.dispatch(Actions.increment())

    def _on_decrement(self) -> None:
        self.store.dispatch(Actions.decrement())

    def _on_increment_async(self) -> None:
        self.store.dispatch(Actions.increment_async())

    def _on_add(self, value: int) -> None:
        self.store.dispatch(Actions.add(value))

    def _on_task_add(self, title: str) -> None:
        title = title.strip()
        if not title:
            logger.debug("CONTROLS CONNECTOR: Ignoring empty task title")
            return
        self.store.dispatch(Actions.task_added(title))

    def _on_task_remove(self, index: int) -> None:
        self.store.dispatch(Actions.task_removed(index))

    def disconnect(self) -> None:
        """Disconnect window signals."""
        for signal, slot in (
            (self.window.incrementRequested, self._on_increment),
            (self.window.decrementRequested, self._on_decrement),
            (self.window.incrementAsyncRequested, self._on_increment_async),
            (self.window.addRequested, self._on_add),
            (self.window.taskAddRequested, self._on_task_add),
            (self.window.taskRemoveRequested, self._on_task_remove),
        ):
            try:
                signal.disconnect(slot)
            except (TypeError, RuntimeError):
                # Already disconnected or the widget is gone
                logger.debug("CONTROLS CONNECTOR: Signal already disconnected")
