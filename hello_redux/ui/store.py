"""
Redux-style State Management for Hello Redux.

This module implements a unidirectional data flow pattern:
    Action -> Dispatch -> Middleware -> Reducer -> New State -> Notify Subscribers

Usage:
    # Create store once at application start
    store = create_store(
        app_reducer,
        AppState(),
        [logging_middleware, increment_async_middleware(delay_ms=1000)],
    )

    # Components subscribe to state changes
    unsubscribe = store.subscribe(my_callback)

    # Dispatch actions to change state
    store.dispatch(Actions.increment())
    store.dispatch(Actions.add(value=5))
    store.dispatch(Actions.increment_async())  # counter changes after the delay

    # Components react to state changes in their callbacks
    def my_callback(old_state: AppState, new_state: AppState):
        if old_state.counter_state != new_state.counter_state:
            self.render_counter(new_state.counter_state.counter)

Dispatch cycles never overlap. A dispatch requested while a cycle is running
(from a middleware or a subscriber) is queued and runs as its own full cycle
as soon as the current one has committed and notified.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, fields, is_dataclass, replace
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from hello_redux.core.constants import TimingDefaults

if TYPE_CHECKING:
    from hello_redux.core.dataclasses_config import AppConfig
    from hello_redux.utils.scheduling import Scheduler

logger = logging.getLogger(__name__)

S = TypeVar("S")


# =============================================================================
# State
# =============================================================================


@dataclass(frozen=True)
class Task:
    """A single entry in the task list."""

    title: str


@dataclass(frozen=True)
class CounterState:
    """Counter feature slice."""

    counter: int = 0


@dataclass(frozen=True)
class TaskState:
    """Task list feature slice."""

    tasks: tuple[Task, ...] = ()


@dataclass(frozen=True)
class AppState:
    """
    Immutable application state - single source of truth.

    State can only be changed by dispatching actions to the store.
    Each field is an independent feature slice owned by exactly one reducer.
    """

    counter_state: CounterState = field(default_factory=CounterState)
    task_state: TaskState = field(default_factory=TaskState)


# =============================================================================
# Actions
# =============================================================================


class ActionType(StrEnum):
    """All possible action types."""

    # Counter
    INCREMENT = auto()
    DECREMENT = auto()
    INCREMENT_ASYNC = auto()  # Handled by middleware only, never by a reducer
    ADD = auto()

    # Tasks
    TASK_ADDED = auto()
    TASK_REMOVED = auto()


@dataclass(frozen=True)
class Action:
    """
    Represents an action that can change state.

    Actions are immutable and describe what happened, not how to update state.
    """

    type: ActionType
    payload: dict[str, Any] | None = None


class Actions:
    """
    Action creators - factory methods for creating actions.

    Usage:
        store.dispatch(Actions.add(value=3))
    """

    @staticmethod
    def increment() -> Action:
        return Action(type=ActionType.INCREMENT)

    @staticmethod
    def decrement() -> Action:
        return Action(type=ActionType.DECREMENT)

    @staticmethod
    def increment_async() -> Action:
        """Request an increment that a middleware performs after a delay."""
        return Action(type=ActionType.INCREMENT_ASYNC)

    @staticmethod
    def add(value: int) -> Action:
        """Create action for adding an arbitrary amount to the counter."""
        return Action(type=ActionType.ADD, payload={"value": value})

    @staticmethod
    def task_added(title: str) -> Action:
        """Create action for appending a task to the list."""
        return Action(type=ActionType.TASK_ADDED, payload={"title": title})

    @staticmethod
    def task_removed(index: int) -> Action:
        """Create action for removing the task at a position."""
        return Action(type=ActionType.TASK_REMOVED, payload={"index": index})


# =============================================================================
# Reducers
# =============================================================================

Reducer = Callable[[S, Action], S]


def counter_reducer(state: CounterState, action: Action) -> CounterState:
    """Pure reducer for the counter slice."""
    match action.type:
        case ActionType.INCREMENT:
            return replace(state, counter=state.counter + 1)

        case ActionType.DECREMENT:
            return replace(state, counter=state.counter - 1)

        case ActionType.ADD:
            payload = action.payload or {}
            return replace(state, counter=state.counter + payload.get("value", 0))

        case _:
            return state


def task_reducer(state: TaskState, action: Action) -> TaskState:
    """Pure reducer for the task list slice."""
    match action.type:
        case ActionType.TASK_ADDED:
            payload = action.payload or {}
            title = payload.get("title", "")
            return replace(state, tasks=(*state.tasks, Task(title=title)))

        case ActionType.TASK_REMOVED:
            payload = action.payload or {}
            index = payload.get("index", -1)
            if not 0 <= index < len(state.tasks):
                return state
            return replace(state, tasks=state.tasks[:index] + state.tasks[index + 1 :])

        case _:
            return state


def combine_reducers(**slice_reducers: Reducer[Any]) -> Reducer[Any]:
    """
    Build a root reducer from one reducer per state field.

    Every slice reducer runs on every action and only ever sees its own
    field, so the order they run in cannot affect the result. When no slice
    changes, the original state object is returned.

    Args:
        **slice_reducers: Mapping of dataclass field name to the reducer owning it

    Returns:
        Reducer over the whole dataclass state

    """

    def root_reducer(state: Any, action: Action) -> Any:
        changes: dict[str, Any] = {}
        for name, reducer in slice_reducers.items():
            old_slice = getattr(state, name)
            new_slice = reducer(old_slice, action)
            if new_slice is not old_slice:
                changes[name] = new_slice

        if not changes:
            return state
        return replace(state, **changes)

    return root_reducer


app_reducer: Reducer[AppState] = combine_reducers(
    counter_state=counter_reducer,
    task_state=task_reducer,
)


# =============================================================================
# Selectors
# =============================================================================


class Selectors:
    """
    Selector functions for reading derived state.

    Components read state through these instead of reaching into slices.
    """

    @staticmethod
    def counter(state: AppState) -> int:
        return state.counter_state.counter

    @staticmethod
    def tasks(state: AppState) -> tuple[Task, ...]:
        return state.task_state.tasks

    @staticmethod
    def task_count(state: AppState) -> int:
        return len(state.task_state.tasks)

    @staticmethod
    def task_titles(state: AppState) -> tuple[str, ...]:
        """Titles in list order, for rendering."""
        return tuple(task.title for task in state.task_state.tasks)


# =============================================================================
# Store
# =============================================================================

Dispatcher = Callable[[Action], None]
Middleware = Callable[[S, Action, Dispatcher], None]
StateChangeCallback = Callable[[S, S], None]
UnsubscribeFunction = Callable[[], None]


class Store(Generic[S]):
    """
    Central store that holds state and manages subscriptions.

    The store:
    - Holds the single source of truth for state
    - Runs every action through the middleware chain, then the reducer
    - Notifies subscribers after each completed dispatch cycle
    """

    def __init__(
        self,
        reducer: Reducer[S],
        initial_state: S,
        middlewares: Iterable[Middleware[S]] = (),
    ) -> None:
        """
        Initialize the store.

        Args:
            reducer: Root reducer computing the next state
            initial_state: State before any action is dispatched
            middlewares: Interceptors run in order before the reducer on every action

        """
        self._reducer = reducer
        self._state = initial_state
        self._middlewares: tuple[Middleware[S], ...] = tuple(middlewares)
        self._subscribers: list[StateChangeCallback[S]] = []
        self._pending: deque[Action] = deque()
        self._is_dispatching = False
        self._is_closed = False

        logger.info("Store initialized with %d middleware(s), state: %s", len(self._middlewares), self._state)

    @property
    def state(self) -> S:
        """Get current state (read-only)."""
        return self._state

    @property
    def is_dispatching(self) -> bool:
        """Check if a dispatch is currently in progress."""
        return self._is_dispatching

    @property
    def is_closed(self) -> bool:
        return self._is_closed

    def dispatch(self, action: Action) -> None:
        """
        Dispatch an action to change state.

        Re-entrant calls are queued and processed in order before the
        outermost call returns. Calls on a closed store are ignored.
        """
        if self._is_closed:
            logger.debug("DISPATCH IGNORED (store closed): %s", action.type)
            return

        self._pending.append(action)
        if self._is_dispatching:
            logger.debug("DISPATCH QUEUED: %s | %d pending", action.type, len(self._pending))
            return

        try:
            self._is_dispatching = True
            while self._pending and not self._is_closed:
                self._run_cycle(self._pending.popleft())
        finally:
            self._is_dispatching = False
            if self._pending:
                logger.warning("Dropping %d queued action(s): %s", len(self._pending), [a.type for a in self._pending])
                self._pending.clear()

    def _run_cycle(self, action: Action) -> None:
        """One dispatch cycle: middlewares, reducer, commit, notify."""
        logger.debug("ACTION DISPATCHED: %s | Payload: %s", action.type, action.payload)
        old_state = self._state

        for middleware in self._middlewares:
            middleware(old_state, action, self.dispatch)

        new_state = self._reducer(old_state, action)
        self._state = new_state

        if new_state is not old_state and old_state != new_state:
            logger.info("STATE CHANGED: %s | Diff: %s", action.type, self._get_state_diff(old_state, new_state))
        else:
            logger.debug("STATE UNCHANGED: %s", action.type)

        self._notify_subscribers(old_state, new_state)

    def subscribe(self, callback: StateChangeCallback[S]) -> UnsubscribeFunction:
        """Subscribe to state changes."""
        self._subscribers.append(callback)
        cb_name = getattr(callback, "__qualname__", str(callback))
        logger.info("SUBSCRIBER ADDED: %s | Total subscribers: %d", cb_name, len(self._subscribers))

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)
                logger.info("SUBSCRIBER REMOVED: %s", cb_name)

        return unsubscribe

    def close(self) -> None:
        """
        Tear the store down.

        Subscribers are dropped and every later dispatch, including delayed
        ones already scheduled by middleware, becomes a no-op.
        """
        if self._is_closed:
            return
        self._is_closed = True
        self._subscribers.clear()
        logger.info("Store closed")

    def _notify_subscribers(self, old_state: S, new_state: S) -> None:
        """Notify all subscribers of a completed cycle."""
        for callback in self._subscribers[:]:  # Copy list to allow unsubscribe during iteration
            try:
                callback(old_state, new_state)
            except Exception as e:
                logger.exception("Error in subscriber callback: %s", e)

    @staticmethod
    def _get_state_diff(old_state: Any, new_state: Any) -> dict[str, tuple[Any, Any]]:
        """Get dictionary of changed fields for logging."""
        if not (is_dataclass(old_state) and is_dataclass(new_state)):
            return {"state": (old_state, new_state)}

        diff = {}
        for state_field in fields(old_state):
            old_val = getattr(old_state, state_field.name)
            new_val = getattr(new_state, state_field.name)
            if old_val != new_val:
                diff[state_field.name] = (old_val, new_val)
        return diff


def create_store(
    reducer: Reducer[S],
    initial_state: S,
    middlewares: Iterable[Middleware[S]] = (),
) -> Store[S]:
    """Create a store with a fixed reducer, initial state and middleware list."""
    return Store(reducer, initial_state, middlewares)


def create_app_store(
    config: AppConfig | None = None,
    scheduler: Scheduler | None = None,
    initial_state: AppState | None = None,
) -> Store[AppState]:
    """
    Create the application store with the standard middleware chain.

    Args:
        config: Application config, defaults to AppConfig()
        scheduler: Timer facility for the delayed increment, defaults to QtTimerScheduler
        initial_state: Optional initial state, defaults to AppState()

    """
    from hello_redux.core.dataclasses_config import AppConfig

    config = (config or AppConfig()).validate()
    return create_store(
        app_reducer,
        initial_state or AppState(),
        [
            logging_middleware,
            increment_async_middleware(delay_ms=config.increment_delay_ms, scheduler=scheduler),
        ],
    )


# =============================================================================
# Middleware
# =============================================================================


def logging_middleware(state: Any, action: Action, dispatch: Dispatcher) -> None:
    """Middleware that logs all actions."""
    logger.info("Action dispatched: %s, payload: %s", action.type, action.payload)


def create_delayed_dispatch_middleware(
    trigger: ActionType,
    follow_up: Callable[[], Action],
    delay_ms: int,
    scheduler: Scheduler | None = None,
) -> Middleware[Any]:
    """
    Create middleware that answers one action type with a later dispatch.

    The middleware returns immediately; the follow-up action is dispatched
    from the scheduler once the delay elapses, as a fresh dispatch cycle.

    Args:
        trigger: Action type to react to (all others are ignored)
        follow_up: Action creator for the deferred action
        delay_ms: Delay before the follow-up is dispatched
        scheduler: Timer facility, defaults to QtTimerScheduler

    Returns:
        Middleware function

    """
    if scheduler is None:
        from hello_redux.utils.scheduling import QtTimerScheduler

        scheduler = QtTimerScheduler()

    def middleware(state: Any, action: Action, dispatch: Dispatcher) -> None:
        if action.type != trigger:
            return

        next_action = follow_up()
        logger.debug("Scheduling %s in %dms (trigger: %s)", next_action.type, delay_ms, trigger)
        scheduler.schedule(delay_ms, lambda: dispatch(next_action))

    return middleware


def increment_async_middleware(
    delay_ms: int = TimingDefaults.INCREMENT_DELAY_MS,
    scheduler: Scheduler | None = None,
) -> Middleware[Any]:
    """Create middleware that turns INCREMENT_ASYNC into a delayed INCREMENT."""
    return create_delayed_dispatch_middleware(
        trigger=ActionType.INCREMENT_ASYNC,
        follow_up=Actions.increment,
        delay_ms=delay_ms,
        scheduler=scheduler,
    )


# =============================================================================
# Helper for connecting to UI components
# =============================================================================


def connect_component(
    store: Store[S],
    component: Any,
    state_to_props: Callable[[S], dict[str, Any]],
    handlers: dict[str, Callable[[Any], None]],
) -> UnsubscribeFunction:
    """
    Connect a component to the store (similar to Redux connect()).

    Handlers run once with the current state, then again only for props
    whose value changed.

    Args:
        store: The store
        component: The component to connect
        state_to_props: Function that extracts relevant state for this component
        handlers: Dict mapping prop names to handler functions

    Returns:
        Unsubscribe function

    Example:
        connect_component(
            store,
            counter_label,
            state_to_props=lambda s: {"counter": Selectors.counter(s)},
            handlers={"counter": lambda value: counter_label.setText(str(value))},
        )

    """
    last_props: dict[str, Any] = {}

    def on_state_change(old_state: S, new_state: S) -> None:
        nonlocal last_props
        new_props = state_to_props(new_state)

        for prop_name, value in new_props.items():
            if prop_name not in last_props or last_props[prop_name] != value:
                if prop_name in handlers:
                    handlers[prop_name](value)

        last_props = new_props

    # Initial render with current state
    initial_props = state_to_props(store.state)
    for prop_name, value in initial_props.items():
        if prop_name in handlers:
            handlers[prop_name](value)
    last_props = initial_props

    logger.debug("Connected component %s to store", type(component).__name__)
    return store.subscribe(on_state_change)
