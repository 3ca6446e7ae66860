"""
Store Connectors - Connect UI components to the Redux-style store.

Each connector is responsible for:
1. Subscribing to relevant state changes (or forwarding widget signals as actions)
2. Updating the component when state changes
3. Handling cleanup (unsubscribe) when component is destroyed

Usage:
    store = create_app_store(config)
    manager = connect_all_components(store, window)
"""

from .counter import ControlsConnector, CounterLabelConnector, TaskListConnector
from .manager import StoreConnectorManager, connect_all_components

__all__ = [
    "ControlsConnector",
    "CounterLabelConnector",
    "StoreConnectorManager",
    "TaskListConnector",
    "connect_all_components",
]
