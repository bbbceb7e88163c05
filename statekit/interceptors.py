"""
Bundled synchronous middleware.
"""

import logging
from typing import Any, Callable, Optional

from .core.actions import get_action_type
from .core.canonical import canonical_json_str
from .core.middleware import Dispatch, MiddlewareAPI
from .logging_config import get_logger


def _describe_state(state: Any) -> str:
    # Canonical JSON where possible; states JSON cannot encode are shown as repr
    try:
        return canonical_json_str(state)
    except TypeError:
        return repr(state)


def create_logger_middleware(
    logger: Optional[logging.LoggerAdapter] = None,
    level: int = logging.INFO,
) -> Callable[[MiddlewareAPI], Callable[[Dispatch], Dispatch]]:
    """
    Middleware logging each action and the state after it was handled.

    Args:
        logger: Logger to write to (default: statekit.interceptors)
        level: Log level for both records

    Returns:
        Middleware factory for apply_middleware()
    """
    log = logger or get_logger(__name__)

    def middleware(api: MiddlewareAPI) -> Callable[[Dispatch], Dispatch]:
        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def dispatch(action: Any) -> Any:
                log.log(level, f"action {get_action_type(action)}")
                result = next_dispatch(action)
                log.log(level, f"next state {_describe_state(api.get_state())}")
                return result

            return dispatch

        return wrap

    return middleware
