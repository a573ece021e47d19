"""Benchmarks for the Option combinators.

Run with: pytest benchmarks/bench_combinators.py --benchmark-only -v
"""

import operator

from elevated import Nothing, Some, apply, bind, curry, lift2, map, of  # noqa: A004

add = curry(operator.add)


# =============================================================================
# Combinator benchmarks
# =============================================================================


class TestCombinators:
    """Benchmark the module-level combinators."""

    def test_of(self, benchmark):
        benchmark(of, 42)

    def test_map_some(self, benchmark):
        benchmark(map, lambda x: x + 1, Some(1))

    def test_map_nothing(self, benchmark):
        benchmark(map, lambda x: x + 1, Nothing)

    def test_bind_some(self, benchmark):
        benchmark(bind, lambda x: Some(x * 2), Some(5))

    def test_apply_curried_chain(self, benchmark):
        def chain():
            return apply(apply(of(add), Some(1)), Some(1))

        assert benchmark(chain) == Some(2)

    def test_lift2(self, benchmark):
        assert benchmark(lift2, operator.add, Some(1), Some(1)) == Some(2)


# =============================================================================
# Method vs function
# =============================================================================


class TestMethods:
    """Benchmark the variant methods for comparison."""

    def test_some_map_method(self, benchmark):
        some = Some(1)
        benchmark(some.map, lambda x: x + 1)

    def test_some_and_then_method(self, benchmark):
        some = Some(5)
        benchmark(some.and_then, lambda x: Some(x * 2))
