"""
Reducer combination.

combine_reducers() turns a mapping of slice reducers into one root reducer
over a dict keyed the same way. The root reducer returns the input state
object itself when no slice changed, so consumers can detect changes with
an identity check.
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Set

from ..logging_config import get_logger
from . import action_types
from .actions import Action, get_action_type
from .config import DispatchConfig
from .errors import InvalidActionError, ReducerShapeError, UndefinedStateError

# Slice reducer signature: (previous_slice_state, action) -> next_slice_state
Reducer = Callable[[Any, Any], Any]

logger = get_logger(__name__)


def _unexpected_state_shape_message(
    input_state: Any,
    reducers: Dict[str, Reducer],
    action: Any,
    unexpected_key_cache: Set[str],
) -> Optional[str]:
    reducer_keys = list(reducers)
    if get_action_type(action) == action_types.INIT:
        argument_name = "preloaded state passed to create_store"
    else:
        argument_name = "previous state received by the reducer"

    if not reducer_keys:
        return (
            "Store does not have a valid reducer. Make sure the argument passed "
            "to combine_reducers is a mapping whose values are reducers."
        )

    if not isinstance(input_state, Mapping):
        return (
            f'The {argument_name} has unexpected type of "{type(input_state).__name__}". '
            f'Expected argument to be a mapping with the following keys: "{_join(reducer_keys)}"'
        )

    unexpected_keys = [
        key for key in input_state if key not in reducers and key not in unexpected_key_cache
    ]
    unexpected_key_cache.update(unexpected_keys)

    if get_action_type(action) == action_types.REPLACE:
        return None

    if unexpected_keys:
        noun = "keys" if len(unexpected_keys) > 1 else "key"
        return (
            f'Unexpected {noun} "{_join(unexpected_keys)}" found in {argument_name}. '
            f'Expected to find one of the known reducer keys instead: "{_join(reducer_keys)}". '
            "Unexpected keys will be ignored."
        )
    return None


def _join(keys: List[Any]) -> str:
    return '", "'.join(str(k) for k in keys)


def _assert_reducer_shape(reducers: Dict[str, Reducer]) -> None:
    """
    Probe every reducer with None state and two private action types.

    Raises:
        ReducerShapeError: If a reducer returns None for either probe
    """
    for key, reducer in reducers.items():
        initial_state = reducer(None, Action(type=action_types.INIT))
        if initial_state is None:
            raise ReducerShapeError(
                f'The slice reducer for key "{key}" returned None during initialization. '
                "If the state passed to the reducer is None, you must explicitly return "
                "the initial state. The initial state may not be None."
            )

        if reducer(None, Action(type=action_types.probe_unknown_action())) is None:
            raise ReducerShapeError(
                f'The slice reducer for key "{key}" returned None when probed with a random type. '
                f"Don't try to handle '{action_types.INIT}' or other actions in the "
                '"@@statekit/*" namespace. They are considered private. Instead, you must '
                "return the current state for any unknown actions, unless it is None, in "
                "which case you must return the initial state, regardless of the action "
                "type. The initial state may not be None."
            )


def combine_reducers(
    reducers: Mapping,
    config: Optional[DispatchConfig] = None,
) -> Callable[..., Any]:
    """
    Combine slice reducers into a single root reducer.

    Entries whose value is not callable are skipped. Reducer shape is
    validated once here; a failure is stored and raised on every call of
    the returned reducer, never from this function.

    Args:
        reducers: Mapping of slice key -> reducer. Reducers must never return
            None: they return their initial state when given None, and the
            current state for any action they do not handle.
        config: Pipeline configuration (development mode by default)

    Returns:
        Root reducer (state, action) -> state with the same keys
    """
    config = config or DispatchConfig()

    final_reducers: Dict[str, Reducer] = {}
    for key, reducer in reducers.items():
        if config.dev_mode and reducer is None:
            logger.warning(f'No reducer provided for key "{key}"')
        if callable(reducer):
            final_reducers[key] = reducer

    final_keys = list(final_reducers)

    # Keys already warned about, so each is reported once per combinator
    unexpected_key_cache: Set[str] = set()

    shape_error: Optional[Exception] = None
    try:
        _assert_reducer_shape(final_reducers)
    except Exception as e:
        shape_error = e

    def combination(state: Any = None, action: Any = None) -> Any:
        if shape_error is not None:
            raise shape_error

        if action is None:
            raise InvalidActionError("Root reducer was called without an action")

        if state is None:
            state = {}

        if config.dev_mode:
            message = _unexpected_state_shape_message(
                state, final_reducers, action, unexpected_key_cache
            )
            if message:
                logger.warning(message)

        is_mapping = isinstance(state, Mapping)
        has_changed = False
        next_state: Dict[str, Any] = {}
        for key in final_keys:
            previous_for_key = state.get(key) if is_mapping else None
            next_for_key = final_reducers[key](previous_for_key, action)
            if next_for_key is None:
                action_type = get_action_type(action)
                described = f'"{action_type}"' if action_type is not None else "(unknown type)"
                raise UndefinedStateError(
                    f"When called with an action of type {described}, the slice reducer "
                    f'for key "{key}" returned None. To ignore an action, you must '
                    "explicitly return the previous state."
                )
            next_state[key] = next_for_key
            has_changed = has_changed or next_for_key is not previous_for_key

        state_key_count = len(state) if is_mapping else 0
        has_changed = has_changed or len(final_keys) != state_key_count
        return next_state if has_changed else state

    return combination
