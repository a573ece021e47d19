"""@optional decorator for replacing None returns with Option."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

import wrapt

from elevated.option import NothingType, Some, from_nullable

__all__ = ['optional']

P = ParamSpec('P')
T = TypeVar('T')


def optional[**P, T](func: Callable[P, T | None]) -> Callable[P, Some[T] | NothingType]:
    """Decorator that turns a None-returning function into an Option-returning one.

    Args:
        func: The function to wrap.

    Returns:
        A wrapped function returning Nothing where func returned None and
        Some(result) otherwise.

    Example:
        ```python
        @optional
        def find(users: dict[str, str], name: str) -> str | None:
            return users.get(name)
        find({'ada': 'admin'}, 'ada')
        # Some(value='admin')
        find({}, 'ada')
        # NothingType()
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T | None],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Some[T] | NothingType:
        return from_nullable(wrapped(*args, **kwargs))

    return wrapper(func)  # type: ignore[return-value]
