"""
Exception types for the dispatch pipeline.
"""


class StateKitError(Exception):
    """Base class for all statekit errors."""
    pass


class ReducerShapeError(StateKitError):
    """Raised when a slice reducer breaks the initial-state or unknown-action contract."""
    pass


class UndefinedStateError(StateKitError):
    """Raised when a slice reducer returns None for a dispatched action."""
    pass


class MiddlewareConstructionError(StateKitError):
    """Raised when middleware dispatches before the chain is assembled."""
    pass


class InvalidActionError(StateKitError):
    """Raised when an action is missing or has no type."""
    pass


class ReducerExecutionError(StateKitError):
    """Raised when the store is used from inside a running reducer."""
    pass


class ActionLogError(StateKitError):
    """Raised when an action log line cannot be parsed."""
    pass
