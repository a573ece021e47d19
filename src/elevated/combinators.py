"""map, of, apply, bind and lift2 over Option values.

These functions move ordinary functions and values into the "elevated"
world of Option and let them be combined there without manual None checks.
All of them are total: absence is returned as Nothing, never raised.
Exceptions raised by the functions you pass in propagate unchanged.

    ```python
    from elevated import Some, Nothing, apply, bind, curry, lift2, map, of

    map(lambda x: x + 1, Some(1))                     # Some(value=2)
    map(lambda x: x + 1, Nothing)                     # NothingType()
    bind(lambda i: Nothing if i == 0 else Some(i), Some(0))  # NothingType()
    lift2(operator.add, Some(1), Some(1))             # Some(value=2)
    apply(apply(of(curry(operator.add)), Some(1)), Some(1))  # Some(value=2)
    ```

`map` intentionally shadows the builtin inside this module's namespace;
import it by name or use `elevated.combinators.map`.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from elevated.currying import curry
from elevated.errors import NotAnOptionError
from elevated.option import Nothing, NothingType, Some

__all__ = [
    'apply',
    'bind',
    'flat_map',
    'lift',
    'lift2',
    'map',
    'of',
    'pure',
]


def map[T, U](  # noqa: A001
    f: Callable[[T], U], opt: Some[T] | NothingType
) -> Some[U] | NothingType:
    """Lift f into Option and apply it.

    Args:
        f: Function from T to U.
        opt: The Option to transform.

    Returns:
        Some(f(x)) for Some(x); Nothing for Nothing, without calling f.

    Raises:
        NotAnOptionError: If opt is not an Option.
    """
    match opt:
        case Some(value):
            return Some(f(value))
        case NothingType():
            return Nothing
        case _:
            raise NotAnOptionError('map', opt)


def of[T](value: T) -> Some[T]:
    """Wrap a bare value in Some. Also available as `pure`."""
    return Some(value)


def apply[T, U](
    f_opt: Some[Callable[[T], U]] | NothingType,
    x_opt: Some[T] | NothingType,
) -> Some[U] | NothingType:
    """Apply a function inside an Option to a value inside an Option.

    Multi-argument functions are applied one argument at a time, so wrap
    them with curry() first:

        ```python
        add = curry(lambda x, y: x + y)
        apply(apply(of(add), Some(1)), Some(1))
        # Some(value=2)
        ```

    Args:
        f_opt: Option possibly holding a function.
        x_opt: Option possibly holding its argument.

    Returns:
        Some(f(x)) when both are present, otherwise Nothing.

    Raises:
        NotAnOptionError: If either argument is not an Option.
    """
    match f_opt, x_opt:
        case Some(f), Some(x):
            return Some(f(x))
        case (Some() | NothingType()), (Some() | NothingType()):
            return Nothing
        case (Some() | NothingType()), _:
            raise NotAnOptionError('apply', x_opt)
        case _:
            raise NotAnOptionError('apply', f_opt)


def bind[T, U](
    f: Callable[[T], Some[U] | NothingType],
    opt: Some[T] | NothingType,
) -> Some[U] | NothingType:
    """Sequence a world-crossing function over an Option.

    Unlike map, the Option returned by f is passed through as is rather
    than wrapped again. Chains of bind stop at the first Nothing. Also
    available as `flat_map`.

    Raises:
        NotAnOptionError: If opt is not an Option.
    """
    match opt:
        case Some(value):
            return f(value)
        case NothingType():
            return Nothing
        case _:
            raise NotAnOptionError('bind', opt)


def lift2[T, U, V](
    f: Callable[[T, U], V],
    x_opt: Some[T] | NothingType,
    y_opt: Some[U] | NothingType,
) -> Some[V] | NothingType:
    """Apply a two-argument function across two Options.

    Equivalent to `apply(map(curry(f), x_opt), y_opt)`.
    """
    return apply(map(curry(f, 2), x_opt), y_opt)


def lift(f: Callable[..., Any], *opts: Some[Any] | NothingType) -> Some[Any] | NothingType:
    """Apply an n-argument function across n Options.

    Returns Nothing if any Option is Nothing; `of(f())` when no Options
    are given.
    """
    if not opts:
        return of(f())
    first, *rest = opts
    return functools.reduce(apply, rest, map(curry(f, len(opts)), first))


pure = of
flat_map = bind
