"""Function composition in both directions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

__all__ = ['compose', 'compose_back', 'identity']


def identity[T](value: T) -> T:
    """Return value unchanged."""
    return value


def compose(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """Compose functions left to right, like F#'s `>>`.

    `compose(f, g)(x) == g(f(x))`. The first function may take any
    arguments; every later one receives the previous result. With no
    functions, returns identity.

    Example:
        ```python
        double = lambda n: n * 2
        half = lambda n: n // 2
        compose(double, half)(21)
        # 21
        ```
    """
    if not fns:
        return identity
    first, *rest = fns

    def composed(*args: Any, **kwargs: Any) -> Any:
        result = first(*args, **kwargs)
        for fn in rest:
            result = fn(result)
        return result

    return composed


def compose_back(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """Compose functions right to left, like F#'s `<<`.

    `compose_back(f, g)(x) == f(g(x))`.
    """
    return compose(*reversed(fns))
