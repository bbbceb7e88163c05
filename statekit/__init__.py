"""
statekit

Synchronous dispatch pipeline for a predictable state container:
reducer combination, function composition and middleware chains.
"""

__version__ = "0.1.0"

from .core import (
    Action,
    DispatchConfig,
    MiddlewareAPI,
    apply_middleware,
    combine_reducers,
    compose,
)
from .store import Store, create_store

__all__ = [
    "Action",
    "DispatchConfig",
    "MiddlewareAPI",
    "Store",
    "apply_middleware",
    "combine_reducers",
    "compose",
    "create_store",
]
