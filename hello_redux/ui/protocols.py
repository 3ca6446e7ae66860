#!/usr/bin/env python3
"""
Protocol classes for UI component interfaces.
Lets connectors depend on what a window exposes rather than on a concrete widget.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QLabel, QListWidget, QPushButton


@runtime_checkable
class CounterWindowProtocol(Protocol):
    """
    Interface the store connectors need from the counter window.

    Signals are bound pyqtSignal instances, typed Any because PyQt6 does not
    expose a usable generic type for them.
    """

    # Signals emitted on user input
    incrementRequested: Any
    decrementRequested: Any
    incrementAsyncRequested: Any
    addRequested: Any
    taskAddRequested: Any
    taskRemoveRequested: Any

    # Widgets
    counter_label: QLabel
    task_count_label: QLabel
    task_list: QListWidget
    remove_task_btn: QPushButton

    def show_counter(self, value: int) -> None: ...

    def show_tasks(self, titles: tuple[str, ...]) -> None: ...
