import inspect
from typing import Any

import pytest
import toolz as tz

from .context import Just, Maybe, Nothing, combinators, maybe

lift_maybe = combinators.lift_maybe
and_then_maybe = combinators.and_then_maybe
to_maybe = combinators.to_maybe
just = maybe.just
nothing = maybe.nothing


def half(x: int) -> Maybe[int]:
    return just(x // 2) if x % 2 == 0 else nothing()


def positive(x: int) -> Maybe[int]:
    return just(x) if x > 0 else nothing()


def below_hundred(x: int) -> Maybe[int]:
    return just(x) if x < 100 else nothing()


def as_text(x: int) -> Maybe[str]:
    return just(str(x))


def text_length(s: str) -> Maybe[int]:
    return just(len(s))


class CallCounter:
    """
    Wraps a unary function and counts how often it is called
    """

    def __init__(self, func):
        self.func = func
        self.calls = 0

    def __call__(self, x):
        self.calls += 1
        return self.func(x)


class TestLiftMaybe:

    # A lifted function is applied to the value of a Just
    def test_applies_to_just(self):
        assert lift_maybe(lambda x: x + 1)(just(1)) == just(2)

    # Nothing stays Nothing and the function is not called
    def test_nothing_stays_nothing(self):
        counter = CallCounter(lambda x: x + 1)
        assert lift_maybe(counter)(nothing()) == nothing()
        assert counter.calls == 0

    # The result type may differ from the argument type
    def test_changes_type(self):
        assert lift_maybe(str)(just(5)) == just("5")

    # Identity law
    def test_identity_law(self):
        lifted_identity = lift_maybe(tz.identity)
        for m in (just(5), just("a"), nothing()):
            assert lifted_identity(m) == m

    # Composition law
    def test_composition_law(self):
        f = lambda x: x * 3
        g = lambda x: x - 7
        for x in range(-5, 6):
            composed = lift_maybe(tz.compose(g, f))(just(x))
            assert lift_maybe(g)(lift_maybe(f)(just(x))) == composed
        assert lift_maybe(g)(lift_maybe(f)(nothing())) == nothing()

    # Functions with more than one required argument are rejected when lifting
    def test_rejects_binary_function(self):
        with pytest.raises(TypeError, match="unary"):
            lift_maybe(lambda x, y: x + y)

    # Functions without arguments are rejected when lifting
    def test_rejects_nullary_function(self):
        with pytest.raises(TypeError, match="unary"):
            lift_maybe(lambda: 1)

    # Arity is checked even when annotations fail to evaluate
    def test_rejects_binary_with_unevaluable_annotation(self):
        def add(a, b) -> "int | 'x'":
            return a + b

        with pytest.raises(TypeError, match="unary"):
            lift_maybe(add)
        with pytest.raises(TypeError, match="unary"):
            and_then_maybe(half, add)

    # Required keyword-only arguments make a function non unary
    def test_rejects_required_keyword_only(self):
        def scale(x, *, factor):
            return x * factor

        with pytest.raises(TypeError):
            lift_maybe(scale)

    # Non callables are rejected
    def test_rejects_non_callable(self):
        with pytest.raises(TypeError, match="callable"):
            lift_maybe(42)  # type: ignore

    # Optional extra parameters do not count against arity
    def test_accepts_optional_parameters(self):
        def add(x, y=10):
            return x + y

        assert lift_maybe(add)(just(1)) == just(11)

    # Partially applied curried functions are unary
    def test_accepts_curried(self):
        get_or_zero = lift_maybe(maybe.just_with_default(0))
        assert get_or_zero(just(just(4))) == just(4)
        assert get_or_zero(just(nothing())) == just(0)

    # Lifted function advertises its Maybe signature
    def test_signature(self):
        def length(s: str) -> int:
            return len(s)

        sig = inspect.signature(lift_maybe(length))
        assert list(sig.parameters.values())[0].annotation == Maybe[str]
        assert sig.return_annotation == Maybe[int]

    # Lifting keeps the name of the function
    def test_keeps_name(self):
        def length(s: str) -> int:
            return len(s)

        assert lift_maybe(length).__name__ == "length"

    # Results are Just even when the function returns None
    def test_none_result_is_just(self):
        assert lift_maybe(lambda x: None)(just(1)) == Just(None)


class TestAndThenMaybe:

    # Values flow through both functions
    def test_chains_two(self):
        assert and_then_maybe(half, half)(8) == just(2)

    # Nothing from the first function short-circuits the second
    def test_short_circuit(self):
        counter = CallCounter(half)
        assert and_then_maybe(half, counter)(7) == nothing()
        assert counter.calls == 0

    # Nothing from the second function is returned
    def test_second_nothing(self):
        assert and_then_maybe(half, half)(6) == nothing()

    # Value types may change between stages
    def test_changes_type(self):
        assert and_then_maybe(as_text, text_length)(12345) == just(5)

    # Three functions compose like nested pairs
    def test_three_equals_nested(self):
        chained = and_then_maybe(half, positive, below_hundred)
        nested = and_then_maybe(and_then_maybe(half, positive), below_hundred)
        # odd, non positive, too large and passing inputs
        for x in (-4, -3, 0, 3, 8, 150, 198, 200, 300):
            assert chained(x) == nested(x)
        assert chained(8) == just(4)
        assert chained(-4) == nothing()
        assert chained(300) == nothing()

    # Four functions compose like nested pairs
    def test_four_equals_nested(self):
        chained = and_then_maybe(half, half, positive, as_text)
        nested = and_then_maybe(
            and_then_maybe(and_then_maybe(half, half), positive), as_text
        )
        for x in (-8, 0, 6, 12, 40):
            assert chained(x) == nested(x)
        assert chained(40) == just("10")

    # Longer chains keep nesting left to right
    def test_five_equals_nested(self):
        chained = and_then_maybe(half, half, half, positive, as_text)
        nested = and_then_maybe(
            and_then_maybe(half, half, half, positive), as_text
        )
        for x in (-16, 0, 12, 24, 80):
            assert chained(x) == nested(x)
        assert chained(80) == just("10")
        assert chained(12) == nothing()

    # Any stage returning Nothing stops all later stages
    def test_later_stages_not_called(self):
        second = CallCounter(positive)
        third = CallCounter(below_hundred)
        fourth = CallCounter(as_text)
        chained = and_then_maybe(half, second, third, fourth)

        assert chained(3) == nothing()
        assert (second.calls, third.calls, fourth.calls) == (0, 0, 0)

        assert chained(-2) == nothing()
        assert (second.calls, third.calls, fourth.calls) == (1, 0, 0)

        assert chained(400) == nothing()
        assert (second.calls, third.calls, fourth.calls) == (2, 1, 0)

        assert chained(4) == just("2")
        assert (second.calls, third.calls, fourth.calls) == (3, 2, 1)

    # Unannotated lambdas are accepted
    def test_lambdas(self):
        chained = and_then_maybe(lambda x: just(x + 1), lambda x: just(x * 2))
        assert chained(1) == just(4)

    # Fewer than two functions is an error
    def test_requires_two_functions(self):
        with pytest.raises(TypeError):
            and_then_maybe(half)
        with pytest.raises(TypeError):
            and_then_maybe()

    # Non unary functions are rejected when composing
    def test_rejects_wrong_arity(self):
        with pytest.raises(TypeError, match="unary"):
            and_then_maybe(half, lambda x, y: just(x))
        with pytest.raises(TypeError, match="unary"):
            and_then_maybe(lambda: just(1), half)

    # Wrong arity in a later stage is rejected before any call
    def test_rejects_wrong_arity_later_stage(self):
        counter = CallCounter(half)
        with pytest.raises(TypeError):
            and_then_maybe(counter, half, lambda x, y: just(x))
        assert counter.calls == 0

    # Declared value type must fit the next argument
    def test_rejects_mismatched_types(self):
        with pytest.raises(TypeError, match="do not match"):
            and_then_maybe(as_text, half)

    # Mismatch deep in a chain is found
    def test_rejects_mismatch_in_chain(self):
        with pytest.raises(TypeError, match="do not match"):
            and_then_maybe(half, as_text, positive)

    # Functions declared to return a plain value are rejected
    def test_rejects_non_maybe_result(self):
        def double(x: int) -> int:
            return x * 2

        with pytest.raises(TypeError, match="returning Maybe"):
            and_then_maybe(half, double)

    # int values may be passed on to functions taking float
    def test_numeric_promotion(self):
        def reciprocal(x: float) -> Maybe[float]:
            return nothing() if x == 0 else just(1 / x)

        assert and_then_maybe(half, reciprocal)(8) == just(0.25)

    # Subclasses are accepted where the base class is declared
    def test_subclass_accepted(self):
        def as_flag(x: int) -> Maybe[bool]:
            return just(x > 0)

        def increment(x: int) -> Maybe[int]:
            return just(x + 1)

        assert and_then_maybe(as_flag, increment)(5) == just(2)

    # Union annotations are compatible when a member fits
    def test_union_argument(self):
        def describe(x: int | str) -> Maybe[str]:
            return just(f"<{x}>")

        assert and_then_maybe(as_text, describe)(1) == just("<1>")

    # Any on either side is always compatible
    def test_any_compatible(self):
        def anything(x: Any) -> Maybe[Any]:
            return just(x)

        assert and_then_maybe(as_text, anything, text_length)(100) == just(3)

    # Results annotated as Just or Nothing unions are accepted
    def test_variant_annotations(self):
        def checked(x: int) -> Just[int] | Nothing[int]:
            return Just(x) if x else Nothing()

        assert and_then_maybe(checked, half)(4) == just(2)
        assert and_then_maybe(checked, half)(0) == nothing()
        with pytest.raises(TypeError):
            and_then_maybe(checked, text_length)

    # Composed function advertises its signature
    def test_signature(self):
        sig = inspect.signature(and_then_maybe(half, as_text))
        assert list(sig.parameters.values())[0].annotation is int
        assert sig.return_annotation == Maybe[str]

    # Lifted functions compose with and_then_maybe
    def test_with_lifted(self):
        def wrap(x: int) -> Maybe[Maybe[int]]:
            return just(just(x))

        lifted = lift_maybe(lambda x: just(x + 1))
        assert and_then_maybe(wrap, lifted)(1) == just(just(2))


class TestToMaybe:

    # None results become Nothing, others Just
    def test_wraps_lookup(self):
        lookup = to_maybe({"a": 1, "b": None}.get)
        assert lookup("a") == just(1)
        assert lookup("b") == nothing()
        assert lookup("c") == nothing()

    # Usable as a decorator, keeps the function's name
    def test_decorator(self):
        @to_maybe
        def parse_int(text: str) -> int | None:
            return int(text) if text.isdigit() else None

        assert parse_int("12") == just(12)
        assert parse_int("x") == nothing()
        assert parse_int.__name__ == "parse_int"

    # Exceptions are propagated, not turned into Nothing
    def test_exceptions_propagate(self):
        @to_maybe
        def fail(x):
            raise ValueError(x)

        with pytest.raises(ValueError):
            fail(1)

    # Works as a stage in and_then_maybe
    def test_in_chain(self):
        lookup = to_maybe({"a": "hello"}.get)
        chained = and_then_maybe(lookup, text_length)
        assert chained("a") == just(5)
        assert chained("z") == nothing()
