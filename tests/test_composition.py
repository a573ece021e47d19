"""Tests for identity, compose, compose_back and pipe."""

from elevated import (  # noqa: A004
    Nothing,
    Some,
    bind,
    compose,
    compose_back,
    curry,
    identity,
    map,
    pipe,
)
from hypothesis import given
from hypothesis import strategies as st

add = curry(lambda a, b: a + b)
minus = curry(lambda a, b: b - a)
divide_by = curry(lambda a, b: b // a)


def double(n: int) -> int:
    return n * 2


def half(n: int) -> int:
    return n // 2


def squares(xs):
    return [x * x for x in xs]


class TestPipe:
    """Tests for pipe."""

    def test_pipeline(self):
        """5 |> add 5 |> minus 1 |> divideBy 3."""
        assert pipe(5, add(5), minus(1), divide_by(3)) == 3

    def test_no_functions(self):
        """pipe(value) returns value unchanged."""
        assert pipe(42) == 42

    def test_collection_pipeline(self):
        """Square, keep the evens, and sum."""
        result = pipe(
            range(1, 11),
            squares,
            lambda xs: [x for x in xs if x % 2 == 0],
            sum,
        )
        assert result == 220

    def test_option_pipeline(self):
        """Combinators slot into a pipeline via partial application."""
        parse = curry(bind)(lambda s: Some(int(s)) if s.isdigit() else Nothing)
        to_double = curry(map)(double)
        assert pipe(Some('21'), parse, to_double) == Some(42)
        assert pipe(Some('x'), parse, to_double) is Nothing


class TestCompose:
    """Tests for compose and compose_back."""

    def test_forward_order(self):
        """compose(f, g)(x) == g(f(x))."""
        assert compose(add(1), double)(3) == 8

    def test_backward_order(self):
        """compose_back(f, g)(x) == f(g(x))."""
        assert compose_back(add(1), double)(3) == 7

    def test_empty_is_identity(self):
        assert compose() is identity
        assert compose_back() is identity

    def test_first_function_takes_many_arguments(self):
        assert compose(lambda a, b: a * b, str)(6, 7) == '42'

    @given(st.integers())
    def test_double_then_half_is_identity(self, n: int):
        """double >> half does nothing."""
        assert compose(double, half)(n) == n

    @given(st.integers().map(double))
    def test_half_then_double_on_evens(self, n: int):
        """double << half does nothing for even numbers."""
        assert compose_back(double, half)(n) == n


class TestIdentity:
    def test_identity(self):
        value = object()
        assert identity(value) is value
