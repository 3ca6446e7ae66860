"""
Thread safety utilities for PyQt6 applications.

This module provides utilities for ensuring UI operations run on the main thread.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

from PyQt6.QtCore import QObject, Qt, QThread, pyqtSignal, pyqtSlot

if TYPE_CHECKING:
    from collections.abc import Callable

    from PyQt6.QtWidgets import QWidget

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

# Invokers waiting for their queued call; dropped once the call has run
_in_flight: set[_Invoker] = set()


class _Invoker(QObject):
    """One-shot carrier that runs a callable on the thread it was moved to."""

    invoke = pyqtSignal(object)

    def __init__(self, target: QThread) -> None:
        super().__init__()
        self.moveToThread(target)
        self.invoke.connect(self._run, Qt.ConnectionType.QueuedConnection)

    @pyqtSlot(object)
    def _run(self, call: Callable[[], Any]) -> None:
        try:
            call()
        finally:
            _in_flight.discard(self)
            self.deleteLater()


def run_on_thread_of(widget: QWidget, call: Callable[[], Any]) -> None:
    """
    Queue a zero-argument call onto the event loop of the widget's thread.

    Works from any thread, including plain ``threading.Thread`` workers that
    have no Qt event loop of their own.
    """
    invoker = _Invoker(widget.thread())
    _in_flight.add(invoker)
    invoker.invoke.emit(call)


def ensure_main_thread(func: Callable[P, T]) -> Callable[P, T]:
    """
    Decorator to ensure a QWidget method runs on the main thread.

    If called from a worker thread, the call is queued onto the widget's
    thread through a queued signal connection and runs on its next event
    loop iteration.

    Usage:
        class CounterWindow(QWidget):
            @ensure_main_thread
            def show_counter(self, value: int) -> None:
                self.counter_label.setText(str(value))

    Note: The decorated method must be a bound method of a QWidget subclass.
    The return value is lost when deferring to the main thread.
    """

    @functools.wraps(func)
    def wrapper(self: QWidget, *args: P.args, **kwargs: P.kwargs) -> T | None:
        if not is_main_thread(self):
            logger.debug(
                "%s.%s called from non-main thread, deferring to main thread",
                self.__class__.__name__,
                func.__name__,
            )
            run_on_thread_of(self, lambda: func(self, *args, **kwargs))
            return None
        return func(self, *args, **kwargs)

    return wrapper


def is_main_thread(widget: QWidget) -> bool:
    """
    Check if the current thread is the main thread for a widget.

    Args:
        widget: The QWidget to check against.

    Returns:
        True if running on the widget's thread (main thread), False otherwise.

    """
    return QThread.currentThread() == widget.thread()
