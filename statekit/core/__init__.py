"""
Core dispatch pipeline primitives.

- compose: Right-to-left function composition
- combine_reducers: Slice reducers -> root reducer
- apply_middleware: Middleware chain around dispatch
- action_types: Private INIT / REPLACE / probe markers
- canonical: Deterministic serialization of state
"""

from .actions import Action, get_action_type
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str
from .combine import combine_reducers
from .compose import compose
from .config import DispatchConfig
from .errors import (
    ActionLogError,
    InvalidActionError,
    MiddlewareConstructionError,
    ReducerExecutionError,
    ReducerShapeError,
    StateKitError,
    UndefinedStateError,
)
from .middleware import EnhancedStore, MiddlewareAPI, apply_middleware

__all__ = [
    "Action",
    "get_action_type",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "combine_reducers",
    "compose",
    "DispatchConfig",
    "EnhancedStore",
    "MiddlewareAPI",
    "apply_middleware",
    "ActionLogError",
    "InvalidActionError",
    "MiddlewareConstructionError",
    "ReducerExecutionError",
    "ReducerShapeError",
    "StateKitError",
    "UndefinedStateError",
]
