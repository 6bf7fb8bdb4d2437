"""
Functor and monad combinators over `Maybe`

All functions given to a combinator are checked when the combinator is
built (arity and declared types), never when the resulting function runs.
"""

import functools
from functools import reduce
from typing import Any, Callable, overload

from .maybe import Just, Maybe, Nothing, from_optional, is_just, unsafe_get_just
from .utils.logging import logger_wraps
from .utils.signature import (
    argument_type,
    ensure_unary,
    is_convertible,
    maybe_value_type,
    result_type,
    returns_maybe,
    unary_signature,
)


def _name(func: Callable) -> str:
    return getattr(func, "__name__", repr(func))


@logger_wraps()
def lift_maybe[A, B](func: Callable[[A], B]) -> Callable[[Maybe[A]], Maybe[B]]:
    """
    Lift a function on plain values into one on Maybe values

    A function converting e.g. an int into a string becomes one converting
    a `Maybe[int]` into a `Maybe[str]`. A `Nothing` stays a `Nothing`.

    Parameters
    ----------
    func : Callable[[A], B]
        Unary function, anything else is rejected immediately.

    Raises
    ------
    TypeError
        If `func` is not a unary callable.

    Examples
    --------
    >>> lift_maybe(str)(just(5))
    Just('5')
    >>> lift_maybe(str)(nothing())
    Nothing
    """
    ensure_unary(func, "lift_maybe")

    @functools.wraps(func, updated=())
    def lifted(maybe: Maybe[A]) -> Maybe[B]:
        if is_just(maybe):
            return Just(func(unsafe_get_just(maybe)))
        return Nothing()

    lifted.__signature__ = unary_signature(  # type: ignore[attr-defined]
        Maybe[argument_type(func)], Maybe[result_type(func)]
    )
    return lifted


def _bind(first: Callable, second: Callable) -> Callable:
    """
    Compose two Maybe-returning functions, `second` only runs on a `Just`
    """
    ensure_unary(first, "and_then_maybe")
    ensure_unary(second, "and_then_maybe")

    first_out, second_out = result_type(first), result_type(second)
    for func, out in ((first, first_out), (second, second_out)):
        if not returns_maybe(out):
            raise TypeError(
                f"and_then_maybe expects functions returning Maybe, "
                f"{_name(func)} returns {out!r}"
            )
    if not is_convertible(maybe_value_type(first_out), argument_type(second)):
        raise TypeError(
            f"Function parameter types do not match: {_name(first)} produces "
            f"{first_out!r}, {_name(second)} expects {argument_type(second)!r}"
        )

    def bound(value):
        intermediate = first(value)
        if is_just(intermediate):
            return second(unsafe_get_just(intermediate))
        return Nothing()

    bound.__name__ = bound.__qualname__ = f"{_name(first)} >> {_name(second)}"
    bound.__signature__ = unary_signature(  # type: ignore[attr-defined]
        argument_type(first), second_out
    )
    return bound


@overload
def and_then_maybe[A, B, C](
    f: Callable[[A], Maybe[B]], g: Callable[[B], Maybe[C]], /
) -> Callable[[A], Maybe[C]]: ...


@overload
def and_then_maybe[A, B, C, D](
    f: Callable[[A], Maybe[B]],
    g: Callable[[B], Maybe[C]],
    h: Callable[[C], Maybe[D]],
    /,
) -> Callable[[A], Maybe[D]]: ...


@overload
def and_then_maybe[A, B, C, D, E](
    f: Callable[[A], Maybe[B]],
    g: Callable[[B], Maybe[C]],
    h: Callable[[C], Maybe[D]],
    i: Callable[[D], Maybe[E]],
    /,
) -> Callable[[A], Maybe[E]]: ...


@logger_wraps()
def and_then_maybe(*funcs: Callable[[Any], Maybe]) -> Callable[[Any], Maybe]:
    """
    Monadic bind: compose functions taking a value and returning Maybe

    If a function returns a `Just`, the value is extracted and passed to the
    next function. As soon as one returns `Nothing`, the result is `Nothing`
    and none of the remaining functions are called.

    More than two functions compose left to right, i.e.
    `and_then_maybe(f, g, h) == and_then_maybe(and_then_maybe(f, g), h)`.

    Raises
    ------
    TypeError
        If fewer than two functions are given, if any of them is not unary or
        is declared to return something other than a Maybe, or if the declared
        value type produced by one function does not fit the declared argument
        of the next.

    Examples
    --------
    >>> half = lambda x: just(x // 2) if x % 2 == 0 else nothing()
    >>> and_then_maybe(half, half)(8)
    Just(2)
    >>> and_then_maybe(half, half)(6)
    Nothing
    """
    if len(funcs) < 2:
        raise TypeError(
            f"and_then_maybe expects at least two functions, got {len(funcs)}"
        )
    first, second, *rest = funcs
    return reduce(_bind, rest, _bind(first, second))


def to_maybe[**P, T](func: Callable[P, T | None]) -> Callable[P, Maybe[T]]:
    """
    Turn a function signalling absence with `None` into one returning Maybe

    Exceptions raised by `func` are not caught.

    Examples
    --------
    >>> lookup = to_maybe({"a": 1}.get)
    >>> lookup("a"), lookup("b")
    (Just(1), Nothing)
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Maybe[T]:
        return from_optional(func(*args, **kwargs))

    return wrapper
