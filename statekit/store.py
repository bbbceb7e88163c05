"""
Reference store.

Holds the current state, runs the root reducer on every dispatched action
and notifies subscribers. Middleware is added with an enhancer:

    store = create_store(reducer, enhancer=apply_middleware(logger_mw))
"""

from typing import Any, Callable, List, Optional

from .core import action_types
from .core.actions import Action, get_action_type
from .core.errors import InvalidActionError, ReducerExecutionError

Listener = Callable[[], None]


class Store:
    """
    Synchronous state container.

    Usage:
        store = Store(reducer)
        store.dispatch({"type": "counter/incremented"})
        store.get_state()
    """

    def __init__(self, reducer: Callable[[Any, Any], Any], preloaded_state: Any = None) -> None:
        self._reducer = reducer
        self._state = preloaded_state
        self._listeners: List[Listener] = []
        self._is_dispatching = False

    def get_state(self) -> Any:
        if self._is_dispatching:
            raise ReducerExecutionError(
                "You may not call store.get_state() while the reducer is executing. "
                "The reducer has already received the state as an argument."
            )
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a change listener.

        Listeners run after every dispatch, in subscription order, against a
        snapshot of the listener list taken before they run.

        Returns:
            Function removing the listener (safe to call more than once)
        """
        if not callable(listener):
            raise TypeError(f"Expected the listener to be callable, got {type(listener).__name__}")
        if self._is_dispatching:
            raise ReducerExecutionError(
                "You may not call store.subscribe() while the reducer is executing."
            )

        self._listeners = self._listeners + [listener]
        subscribed = True

        def unsubscribe() -> None:
            nonlocal subscribed
            if not subscribed:
                return
            if self._is_dispatching:
                raise ReducerExecutionError(
                    "You may not unsubscribe from a store listener while the reducer is executing."
                )
            subscribed = False
            listeners = list(self._listeners)
            listeners.remove(listener)
            self._listeners = listeners

        return unsubscribe

    def dispatch(self, action: Any) -> Any:
        """
        Run the reducer on action and notify listeners.

        Returns:
            The dispatched action

        Raises:
            InvalidActionError: If action is None or has no type
            ReducerExecutionError: If called from inside a reducer
        """
        if get_action_type(action) is None:
            raise InvalidActionError(
                'Actions may not have an undefined "type" property. '
                f"Got action: {action!r}"
            )
        if self._is_dispatching:
            raise ReducerExecutionError("Reducers may not dispatch actions.")

        try:
            self._is_dispatching = True
            self._state = self._reducer(self._state, action)
        finally:
            self._is_dispatching = False

        for listener in self._listeners:
            listener()

        return action

    def replace_reducer(self, next_reducer: Callable[[Any, Any], Any]) -> None:
        if not callable(next_reducer):
            raise TypeError(
                f"Expected the next reducer to be callable, got {type(next_reducer).__name__}"
            )
        self._reducer = next_reducer
        self.dispatch(Action(type=action_types.REPLACE))


def create_store(
    reducer: Callable[[Any, Any], Any],
    preloaded_state: Any = None,
    enhancer: Optional[Callable[[Callable[..., Any]], Callable[..., Any]]] = None,
) -> Any:
    """
    Create a store and initialize its state with the private INIT action.

    Args:
        reducer: Root reducer (state, action) -> state
        preloaded_state: Initial state (None = let reducers provide it)
        enhancer: Store enhancer, e.g. apply_middleware(...)

    Returns:
        Store, or the store produced by the enhancer
    """
    if enhancer is not None:
        if not callable(enhancer):
            raise TypeError(f"Expected the enhancer to be callable, got {type(enhancer).__name__}")
        return enhancer(create_store)(reducer, preloaded_state)

    if not callable(reducer):
        raise TypeError(f"Expected the reducer to be callable, got {type(reducer).__name__}")

    store = Store(reducer, preloaded_state)
    store.dispatch(Action(type=action_types.INIT))
    return store
