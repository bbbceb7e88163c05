"""
Right-to-left function composition.
"""

from functools import reduce
from typing import Any, Callable


def _identity(arg: Any) -> Any:
    return arg


def compose(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """
    Compose single-argument functions from right to left.

    The rightmost function may take any arguments; it provides the signature
    of the composite. compose(f, g, h) is identical to
    lambda *args, **kwargs: f(g(h(*args, **kwargs))).

    Args:
        *funcs: Functions to compose

    Returns:
        The identity for no functions, the function itself for one,
        otherwise the composite
    """
    if not funcs:
        return _identity

    if len(funcs) == 1:
        return funcs[0]

    def _wrap(outer: Callable[..., Any], inner: Callable[..., Any]) -> Callable[..., Any]:
        return lambda *args, **kwargs: outer(inner(*args, **kwargs))

    return reduce(_wrap, funcs)
