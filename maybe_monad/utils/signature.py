"""
Introspection of unary callables

Deduces the arity, argument type and result type of a callable from its
signature and annotations, and decides whether one declared type can be
passed where another is expected. Anything that cannot be deduced (missing
annotations, builtins without a signature, unresolvable forward references)
is treated as `Any` and is compatible with everything.
"""

import inspect
import types
import typing
from typing import Any, Callable, Never, TypeVar, Union, get_args, get_origin

from loguru import logger

__all__ = [
    "signature_of",
    "required_arity",
    "is_unary",
    "ensure_unary",
    "argument_type",
    "result_type",
    "unary_signature",
    "returns_maybe",
    "maybe_value_type",
    "is_convertible",
]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)

# PEP 484 numeric tower: an int is acceptable where a float or complex is expected
_NUMERIC_PROMOTIONS = {
    int: (float, complex),
    float: (complex,),
}


def signature_of(func: Callable) -> inspect.Signature | None:
    """
    Signature of `func` with string annotations evaluated where possible

    Annotations that fail to evaluate are left as strings (treated as `Any`).
    Returns `None` for callables that do not expose a signature, e.g. most
    builtin types.
    """
    try:
        plain = inspect.signature(func)
    except (ValueError, TypeError):
        return None
    try:
        return inspect.signature(func, eval_str=True)
    except Exception as error:
        # evaluating a string annotation can raise anything
        logger.debug(f"Unevaluable annotations on {func!r} ({error!r}), ignoring them")
        return plain


def required_arity(func: Callable) -> int | None:
    """
    Number of parameters that must be supplied when calling `func`
    """
    sig = signature_of(func)
    if sig is None:
        return None
    return sum(
        1
        for param in sig.parameters.values()
        if param.default is inspect.Parameter.empty
        and param.kind
        in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.KEYWORD_ONLY,
        )
    )


def is_unary(func: Callable) -> bool:
    """
    True if `func` can be called with exactly one positional argument
    """
    sig = signature_of(func)
    if sig is None:
        return True
    try:
        sig.bind(None)
    except TypeError:
        return False
    return True


def ensure_unary(func: Callable, combinator: str) -> None:
    """
    Reject `func` as an argument of `combinator` unless it is a unary callable

    Raises
    ------
    TypeError
        If `func` is not callable or cannot take exactly one positional argument.
    """
    if not callable(func):
        raise TypeError(f"{combinator} expects a callable, got {func!r}")
    if not is_unary(func):
        logger.debug(f"{combinator} rejected {func!r} (arity {required_arity(func)})")
        raise TypeError(
            f"{combinator} expects a unary function, "
            f"{func!r} takes {required_arity(func)} required arguments"
        )


def _declared(annotation: Any) -> Any:
    if annotation is inspect.Parameter.empty or isinstance(annotation, str):
        return Any
    return annotation


def argument_type(func: Callable) -> Any:
    """
    Declared type of the first positional parameter of `func`, `Any` if unknown
    """
    sig = signature_of(func)
    if sig is None:
        return Any
    for param in sig.parameters.values():
        if param.kind in _POSITIONAL:
            return _declared(param.annotation)
    return Any


def result_type(func: Callable) -> Any:
    """
    Declared return type of `func`, `Any` if unknown
    """
    sig = signature_of(func)
    if sig is None:
        return Any
    return _declared(sig.return_annotation)


def unary_signature(argument: Any, result: Any) -> inspect.Signature:
    """
    Signature of a function taking one positional-only argument
    """
    return inspect.Signature(
        [
            inspect.Parameter(
                "value", inspect.Parameter.POSITIONAL_ONLY, annotation=argument
            )
        ],
        return_annotation=result,
    )


def _is_unknown(tp: Any) -> bool:
    return tp is Any or isinstance(
        tp, (TypeVar, typing.ParamSpec, typing.TypeVarTuple)
    )


def _is_union(tp: Any) -> bool:
    return get_origin(tp) in (Union, types.UnionType)


def _strip(tp: Any) -> Any:
    """
    Remove `Annotated` metadata and normalise `None` to `NoneType`
    """
    if get_origin(tp) is typing.Annotated:
        return _strip(get_args(tp)[0])
    if tp is None:
        return type(None)
    return tp


def _runtime_class(tp: Any) -> type | None:
    origin = get_origin(tp) or tp
    return origin if isinstance(origin, type) else None


def _maybe_family(tp: Any) -> bool:
    from ..maybe import Maybe

    cls = _runtime_class(tp)
    return cls is not None and issubclass(cls, Maybe)


def returns_maybe(tp: Any) -> bool:
    """
    True if values of the declared type `tp` are (or may be) Maybe instances
    """
    tp = _strip(tp)
    if _is_unknown(tp):
        return True
    if _is_union(tp):
        return all(returns_maybe(member) for member in get_args(tp))
    return _maybe_family(tp)


def maybe_value_type(tp: Any) -> Any:
    """
    Type of the value held by the declared Maybe type `tp`

    `Maybe[int]` and `Just[int]` give `int`, `Nothing` gives `Never`, and a
    union such as `Just[int] | Nothing` gives the union of its members.
    """
    from ..maybe import Nothing

    tp = _strip(tp)
    if _is_unknown(tp):
        return Any
    if _is_union(tp):
        members = [maybe_value_type(member) for member in get_args(tp)]
        inhabited = [member for member in members if member is not Never]
        if not inhabited:
            return Never
        return Union[tuple(inhabited)] if len(inhabited) > 1 else inhabited[0]
    if _runtime_class(tp) is Nothing:
        return Never
    args = get_args(tp)
    return args[0] if args else Any


def is_convertible(source: Any, target: Any) -> bool:
    """
    True if a value of declared type `source` is acceptable where `target` is expected

    Only runtime classes are compared (generic parameters are ignored).
    Unknown types, type variables and types `issubclass` cannot reason
    about are considered compatible.
    """
    source, target = _strip(source), _strip(target)
    if _is_unknown(source) or _is_unknown(target) or source is Never:
        return True
    if target is object:
        return True
    if _is_union(target):
        return any(is_convertible(source, member) for member in get_args(target))
    if _is_union(source):
        return all(is_convertible(member, target) for member in get_args(source))

    source_cls, target_cls = _runtime_class(source), _runtime_class(target)
    if source_cls is None or target_cls is None:
        return True
    try:
        if issubclass(source_cls, target_cls):
            return True
    except TypeError:
        # e.g. protocols that are not runtime checkable
        return True
    return any(
        issubclass(source_cls, number) and target_cls in promotions
        for number, promotions in _NUMERIC_PROMOTIONS.items()
    )
