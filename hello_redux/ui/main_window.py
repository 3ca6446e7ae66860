#!/usr/bin/env python3
"""
Counter window for Hello Redux.

A thin view over the store: widgets emit signals, connectors turn them into
actions, and the window only renders what the connectors hand it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from hello_redux.core.constants import ButtonText, LabelText
from hello_redux.core.dataclasses_config import AppConfig
from hello_redux.ui.connectors import connect_all_components
from hello_redux.utils.thread_safety import ensure_main_thread

if TYPE_CHECKING:
    from hello_redux.ui.store import AppState, Store

logger = logging.getLogger(__name__)


class CounterWindow(QWidget):
    """Main window showing the counter and the task list."""

    incrementRequested = pyqtSignal()
    decrementRequested = pyqtSignal()
    incrementAsyncRequested = pyqtSignal()
    addRequested = pyqtSignal(int)
    taskAddRequested = pyqtSignal(str)
    taskRemoveRequested = pyqtSignal(int)

    def __init__(self, store: Store[AppState], config: AppConfig | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.config = config or AppConfig()

        self.setWindowTitle(self.config.window_title)
        self.resize(self.config.window_width, self.config.window_height)

        self._build_ui()
        self._wire_widgets()

        # Connectors render the initial state immediately
        self.connector_manager = connect_all_components(store, self)
        logger.info("CounterWindow initialized")

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)

        self.counter_label = QLabel()
        layout.addWidget(self.counter_label)

        buttons = QHBoxLayout()
        self.increment_btn = QPushButton(ButtonText.INCREMENT)
        self.decrement_btn = QPushButton(ButtonText.DECREMENT)
        self.increment_async_btn = QPushButton(ButtonText.INCREMENT_ASYNC)
        self.add_btn = QPushButton(ButtonText.ADD.format(amount=self.config.add_amount))
        for btn in (self.increment_btn, self.decrement_btn, self.increment_async_btn, self.add_btn):
            buttons.addWidget(btn)
        layout.addLayout(buttons)

        task_input = QHBoxLayout()
        self.task_input = QLineEdit()
        self.task_input.setPlaceholderText(LabelText.NEW_TASK_PLACEHOLDER)
        self.add_task_btn = QPushButton(ButtonText.ADD_TASK)
        self.remove_task_btn = QPushButton(ButtonText.REMOVE_TASK)
        task_input.addWidget(self.task_input)
        task_input.addWidget(self.add_task_btn)
        task_input.addWidget(self.remove_task_btn)
        layout.addLayout(task_input)

        self.task_count_label = QLabel()
        self.task_list = QListWidget()
        layout.addWidget(self.task_count_label)
        layout.addWidget(self.task_list)

    def _wire_widgets(self) -> None:
        self.increment_btn.clicked.connect(lambda: self.incrementRequested.emit())
        self.decrement_btn.clicked.connect(lambda: self.decrementRequested.emit())
        self.increment_async_btn.clicked.connect(lambda: self.incrementAsyncRequested.emit())
        self.add_btn.clicked.connect(lambda: self.addRequested.emit(self.config.add_amount))
        self.add_task_btn.clicked.connect(self._on_add_task_clicked)
        self.task_input.returnPressed.connect(self._on_add_task_clicked)
        self.remove_task_btn.clicked.connect(self._on_remove_task_clicked)
        self.task_list.currentRowChanged.connect(self._update_remove_enabled)

    def _on_add_task_clicked(self) -> None:
        self.taskAddRequested.emit(self.task_input.text())
        self.task_input.clear()

    def _on_remove_task_clicked(self) -> None:
        row = self.task_list.currentRow()
        if row >= 0:
            self.taskRemoveRequested.emit(row)

    def _update_remove_enabled(self, row: int | None = None) -> None:
        self.remove_task_btn.setEnabled(self.task_list.currentRow() >= 0)

    @ensure_main_thread
    def show_counter(self, value: int) -> None:
        """Render the counter value."""
        self.counter_label.setText(LabelText.COUNTER.format(counter=value))

    @ensure_main_thread
    def show_tasks(self, titles: tuple[str, ...]) -> None:
        """Render the task list, keeping the selection when possible."""
        row = self.task_list.currentRow()
        self.task_list.blockSignals(True)
        self.task_list.clear()
        self.task_list.addItems(list(titles))
        if titles:
            self.task_list.setCurrentRow(min(max(row, 0), len(titles) - 1))
        self.task_list.blockSignals(False)

        self.task_count_label.setText(LabelText.TASK_COUNT.format(count=len(titles)))
        self._update_remove_enabled()

    def closeEvent(self, event: QCloseEvent) -> None:
        """Disconnect connectors before the widgets go away."""
        self.connector_manager.disconnect_all()
        super().closeEvent(event)
