"""
Connector manager.

Contains StoreConnectorManager and the connect_all_components function.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .counter import ControlsConnector, CounterLabelConnector, TaskListConnector

if TYPE_CHECKING:
    from hello_redux.ui.protocols import CounterWindowProtocol
    from hello_redux.ui.store import AppState, Store

logger = logging.getLogger(__name__)


class StoreConnectorManager:
    """Manages all store connectors."""

    def __init__(self, store: Store[AppState], window: CounterWindowProtocol) -> None:
        self.store = store
        self.window = window
        self.connectors: list = []

        self._connect_all()

    def _connect_all(self) -> None:
        """Create all connectors."""
        self.connectors = [
            ControlsConnector(self.store, self.window),
            CounterLabelConnector(self.store, self.window),
            TaskListConnector(self.store, self.window),
        ]
        logger.info("Connected %d components to store", len(self.connectors))

    def disconnect_all(self) -> None:
        """Disconnect all connectors (cleanup)."""
        for connector in self.connectors:
            connector.disconnect()
        self.connectors.clear()
        logger.info("Disconnected all components from store")


def connect_all_components(store: Store[AppState], window: CounterWindowProtocol) -> StoreConnectorManager:
    """
    Connect all UI components to the store.

    Args:
        store: The application store
        window: Window exposing the widgets and signals the connectors bind to

    Returns:
        StoreConnectorManager for cleanup

    """
    return StoreConnectorManager(store, window)
