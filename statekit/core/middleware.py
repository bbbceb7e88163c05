"""
Middleware chain assembly.

apply_middleware() returns a store enhancer that wraps the store's dispatch
with a chain of middleware. Middleware signature:

    middleware(api) -> (next_dispatch) -> (action) -> result

The first middleware given is the outermost: it sees every action first and
the base store's result last.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from ..logging_config import get_logger
from .compose import compose
from .config import DispatchConfig
from .errors import MiddlewareConstructionError

Dispatch = Callable[..., Any]
Middleware = Callable[["MiddlewareAPI"], Callable[[Dispatch], Dispatch]]
StoreCreator = Callable[..., Any]

logger = get_logger(__name__)


@dataclass(frozen=True)
class MiddlewareAPI:
    """
    Capabilities handed to every middleware factory.

    Fields:
        get_state: Base store state accessor
        dispatch: Forwards to the fully assembled dispatch chain at call time
    """
    get_state: Callable[[], Any]
    dispatch: Dispatch


class _DispatchSlot:
    """Mutable cell holding the store's current dispatch function."""

    def __init__(self, target: Dispatch) -> None:
        self.target = target

    def __call__(self, action: Any, *args: Any, **kwargs: Any) -> Any:
        return self.target(action, *args, **kwargs)


def _dispatch_while_constructing(action: Any, *args: Any, **kwargs: Any) -> Any:
    raise MiddlewareConstructionError(
        "Dispatching while constructing your middleware is not allowed. "
        "Other middleware would not be applied to this dispatch."
    )


class EnhancedStore:
    """
    Store proxy with dispatch replaced by the middleware chain.

    All other attributes resolve on the wrapped store.
    """

    def __init__(self, store: Any, dispatch: Dispatch) -> None:
        self._store = store
        self.dispatch = dispatch

    def __getattr__(self, name: str) -> Any:
        # Only reached for missing attributes; _store is unset during copy/unpickle
        if name == "_store":
            raise AttributeError(name)
        return getattr(self._store, name)


def apply_middleware(
    *middlewares: Middleware,
    config: Optional[DispatchConfig] = None,
) -> Callable[[StoreCreator], StoreCreator]:
    """
    Create a store enhancer applying middleware to dispatch.

    The chain is fixed once the store is built.

    Args:
        *middlewares: Middleware factories, outermost first
        config: Pipeline configuration (development mode by default)

    Returns:
        Enhancer: create_store -> create_store
    """
    config = config or DispatchConfig()

    def enhancer(create_store: StoreCreator) -> StoreCreator:
        def create_enhanced_store(reducer: Callable[..., Any], preloaded_state: Any = None) -> Any:
            store = create_store(reducer, preloaded_state)

            slot = _DispatchSlot(_dispatch_while_constructing)
            api = MiddlewareAPI(
                get_state=store.get_state,
                dispatch=slot,
            )

            chain: List[Callable[[Dispatch], Dispatch]] = [
                middleware(api) for middleware in middlewares
            ]
            slot.target = compose(*chain)(store.dispatch)

            if config.dev_mode:
                logger.debug(f"Applied middleware chain of {len(chain)} middleware")

            return EnhancedStore(store, slot.target)

        return create_enhanced_store

    return enhancer
