"""
Timer scheduling for deferred dispatches.

Middlewares that defer work go through a Scheduler instead of sleeping, so
the current dispatch cycle returns immediately and the deferred callback
re-enters the store later on the Qt main thread.

Usage:
    scheduler = QtTimerScheduler()
    task = scheduler.schedule(1000, lambda: store.dispatch(Actions.increment()))
    task.cancel()  # optional, nothing in the default flow cancels
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from PyQt6.QtCore import QObject, QTimer

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


@runtime_checkable
class ScheduledTask(Protocol):
    """Handle for a pending delayed callback."""

    @property
    def is_active(self) -> bool: ...

    def cancel(self) -> None: ...


@runtime_checkable
class Scheduler(Protocol):
    """Timer facility that runs a callback once after a delay."""

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask: ...


class QtScheduledTask:
    """A single-shot QTimer wrapped as a cancellable task."""

    def __init__(self, timer: QTimer, on_cancel: Callable[[QtScheduledTask], None] | None = None) -> None:
        self._timer = timer
        self._on_cancel = on_cancel
        self._fired = False
        self._cancelled = False

    @property
    def is_active(self) -> bool:
        """True until the callback has run or the task was cancelled."""
        return not (self._fired or self._cancelled)

    @property
    def fired(self) -> bool:
        return self._fired

    def cancel(self) -> None:
        """Stop the timer. No-op if it already fired."""
        if not self.is_active:
            return
        self._cancelled = True
        self._timer.stop()
        if self._on_cancel is not None:
            self._on_cancel(self)
        logger.debug("Scheduled task cancelled")

    def _mark_fired(self) -> None:
        self._fired = True


class QtTimerScheduler:
    """
    Scheduler backed by single-shot QTimers on the calling thread's event loop.

    Pending timers are kept referenced here until they fire or are cancelled,
    otherwise Python would collect them before the timeout.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent
        self._pending: set[QtScheduledTask] = set()

    @property
    def pending_count(self) -> int:
        """Number of tasks that have neither fired nor been cancelled."""
        return sum(1 for task in self._pending if task.is_active)

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> QtScheduledTask:
        """
        Run callback once after delay_ms milliseconds.

        Args:
            delay_ms: Delay before the callback fires (0 = next event loop iteration)
            callback: Zero-argument function to run

        Returns:
            Cancellable handle for the pending callback

        """
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        task = QtScheduledTask(timer, on_cancel=self._pending.discard)

        def fire() -> None:
            self._pending.discard(task)
            if not task.is_active:
                return
            task._mark_fired()
            callback()

        timer.timeout.connect(fire)
        self._pending.add(task)
        timer.start(max(delay_ms, 0))
        logger.debug("Scheduled callback in %dms (%d pending)", delay_ms, len(self._pending))
        return task

    def cancel_all(self) -> None:
        """Cancel every pending task."""
        for task in list(self._pending):
            task.cancel()
        self._pending.clear()
