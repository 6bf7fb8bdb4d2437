"""
Wrappers for functions
"""

from functools import wraps
from typing import Callable

from toolz import curry as _curry

__all__ = ["curry"]


def curry(func: Callable) -> Callable:
    """
    Partially parameterise a function, keeping its name and docstring.

    `toolz.curry` exposes the reduced signature of a partially applied
    function, so `just_with_default(0)` introspects as a unary callable
    and can be handed straight to `lift_maybe`.
    """

    @wraps(func)
    def curried(*args, **kwargs) -> Callable:
        return _curry(func)(*args, **kwargs)  # type: ignore

    return curried
