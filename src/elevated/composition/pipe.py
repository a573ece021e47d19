"""pipe() function for threading a value through a chain of functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

__all__ = ['pipe']

T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
T3 = TypeVar('T3')
T4 = TypeVar('T4')
T5 = TypeVar('T5')


# Overloads for type inference (up to 5 functions)
@overload
def pipe(value: T, /) -> T: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], /) -> T1: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], /) -> T2: ...
@overload
def pipe(
    value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /
) -> T3: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> T4: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    /,
) -> T5: ...
@overload
def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any: ...


def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any:
    """Pass a value through functions in order, like F#'s `|>`.

    Each function receives the previous result. Curried functions make
    this read like the F# pipeline: the partially applied argument is on
    the left and the piped value fills the last slot.

    Args:
        value: The initial value.
        *fns: Functions to apply in sequence.

    Returns:
        The result of the last function, or value if fns is empty.

    Example:
        ```python
        add = curry(lambda a, b: a + b)
        minus = curry(lambda a, b: b - a)
        divide_by = curry(lambda a, b: b // a)

        pipe(5, add(5), minus(1), divide_by(3))
        # 3
        ```

    Options compose the same way through the combinators:

        ```python
        pipe(Some(2), partial(map, str))
        # Some(value='2')
        ```
    """
    current = value
    for fn in fns:
        current = fn(current)
    return current
