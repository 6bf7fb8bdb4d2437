"""
Optional values: a `Maybe` is either `Just(value)` or `Nothing`
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable

from .utils.wrappers import curry


class NothingError(LookupError):
    """
    Raised by `throw_on_nothing` when the supplied error is not an exception

    The supplied value is kept as `payload` (and as the first argument).
    """

    def __init__(self, payload: Any):
        super().__init__(payload)
        self.payload = payload


class Maybe[T](ABC):
    """
    A value of type T that may be absent

    Cannot be instantiated directly, construct with `just` / `nothing`
    (or `Just` / `Nothing`).
    """

    @abstractmethod
    def is_just(self) -> bool: ...

    def is_nothing(self) -> bool:
        return not self.is_just()

    @abstractmethod
    def map[R](self, func: Callable[[T], R]) -> "Maybe[R]":
        """
        Apply `func` to the contained value, a `Nothing` stays a `Nothing`
        """

    @abstractmethod
    def and_then[R](self, func: Callable[[T], "Maybe[R]"]) -> "Maybe[R]":
        """
        Apply Maybe-returning `func` to the contained value without nesting
        """


@dataclass(frozen=True, repr=False)
class Just[T](Maybe[T]):
    value: T

    def is_just(self) -> bool:
        return True

    def map[R](self, func: Callable[[T], R]) -> Maybe[R]:
        return Just(func(self.value))

    def and_then[R](self, func: Callable[[T], Maybe[R]]) -> Maybe[R]:
        return func(self.value)

    def __repr__(self) -> str:
        return f"Just({self.value!r})"


@dataclass(frozen=True, repr=False)
class Nothing[T](Maybe[T]):

    def is_just(self) -> bool:
        return False

    def map[R](self, func: Callable[[T], R]) -> Maybe[R]:
        return Nothing()

    def and_then[R](self, func: Callable[[T], Maybe[R]]) -> Maybe[R]:
        return Nothing()

    def __repr__(self) -> str:
        return "Nothing"


def just[T](value: T) -> Maybe[T]:
    """
    Wrap `value` in a `Just`

    The container is immutable and holds `value` itself, so
    `unsafe_get_just(just(v)) is v`. Use `copy.deepcopy` on the result for
    an independent value.
    """
    return Just(value)


def nothing[T]() -> Maybe[T]:
    """
    An empty `Maybe`; annotate the target (`m: Maybe[int] = nothing()`) to fix T
    """
    return Nothing()


def from_optional[T](value: T | None) -> Maybe[T]:
    """
    `Nothing` for `None`, `Just(value)` otherwise
    """
    return Nothing() if value is None else Just(value)


def is_just(maybe: Maybe) -> bool:
    return maybe.is_just()


def is_nothing(maybe: Maybe) -> bool:
    return maybe.is_nothing()


def unsafe_get_just[T](maybe: Maybe[T]) -> T:
    """
    Value held by a `Just`

    Calling this on `Nothing` is a programming error: an `AssertionError`
    is raised while assertions are enabled, check with `is_just` first or
    use `just_with_default`.
    """
    assert is_just(maybe), "unsafe_get_just called on Nothing"
    return maybe.value  # type: ignore[attr-defined]


@curry
def just_with_default[T](default: T, maybe: Maybe[T]) -> T:
    """
    Value held by `maybe`, or `default` if it is `Nothing`

    Examples
    --------
    >>> just_with_default(0, just(5))
    5
    >>> just_with_default(0)(nothing())
    0
    """
    if is_just(maybe):
        return unsafe_get_just(maybe)
    return default


@curry
def throw_on_nothing[T](error: Any, maybe: Maybe[T]) -> T:
    """
    Value held by `maybe`, raise `error` if it is `Nothing`

    `error` may be an exception instance or class, which is raised as-is.
    Any other value is raised as the payload of a `NothingError`.
    """
    if is_nothing(maybe):
        if isinstance(error, BaseException) or (
            isinstance(error, type) and issubclass(error, BaseException)
        ):
            raise error
        raise NothingError(error)
    return unsafe_get_just(maybe)


def flatten_maybe[T](maybe: Maybe[Maybe[T]]) -> Maybe[T]:
    """
    Collapse a nested Maybe (also known as join)

    `Nothing` and `Just(Nothing)` give `Nothing`, `Just(Just(v))` gives `Just(v)`.
    """
    if is_nothing(maybe):
        return Nothing()
    return unsafe_get_just(maybe)
