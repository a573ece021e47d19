"""curry(): partial application one call at a time.

Python functions take all their arguments at once. `apply` chains need the
opposite: a function that accepts one argument and returns a function
waiting for the rest. curry() bridges the two.

Example:
    ```python
    add = curry(lambda a, b: a + b)
    add_five = add(5)
    add_five(5)
    # 10
    add(1, 2)
    # 3
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

import wrapt

from elevated.errors import ArityError

__all__ = ['Curried', 'curry']

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class Curried(wrapt.ObjectProxy):
    """A function proxy that collects positional arguments across calls.

    The proxy forwards attribute access (`__name__`, `__doc__`, ...) to the
    wrapped function. Each call that leaves the argument list short returns
    a new Curried; the wrapped function runs once all `arity` slots are
    filled.

    Slots fill left to right from positional arguments. A keyword argument
    naming a slot that no positional argument has reached also fills it,
    so `curry(lambda a, b: a + b)(1, b=2)` returns 3.

    Attributes:
        _self_arity: Number of slots to fill.
        _self_names: Parameter name of each slot, or None where the
            parameter is positional-only or the arity was given explicitly.
        _self_args: Positional arguments collected so far.
        _self_kwargs: Keyword arguments collected so far.
    """

    def __init__(
        self,
        wrapped: Callable[..., Any],
        arity: int,
        args: tuple[Any, ...] = (),
        kwargs: dict[str, Any] | None = None,
        names: tuple[str | None, ...] = (),
    ) -> None:
        super().__init__(wrapped)
        self._self_arity = arity
        self._self_names = names
        self._self_args = args
        self._self_kwargs = kwargs or {}

    def _missing(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> int:
        by_keyword = sum(
            1 for name in self._self_names[len(args) :] if name is not None and name in kwargs
        )
        return self._self_arity - len(args) - by_keyword

    @property
    def arity(self) -> int:
        """Slots still missing before the call happens."""
        return max(self._missing(self._self_args, self._self_kwargs), 0)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        collected = (*self._self_args, *args)
        merged = {**self._self_kwargs, **kwargs}
        if self._missing(collected, merged) <= 0:
            return self.__wrapped__(*collected, **merged)
        return Curried(self.__wrapped__, self._self_arity, collected, merged, self._self_names)

    def __repr__(self) -> str:
        name = getattr(self.__wrapped__, '__name__', repr(self.__wrapped__))
        return f'<curried {name} ({self._self_arity - self.arity}/{self._self_arity})>'


def _positional_slots(func: Callable[..., Any]) -> tuple[str | None, ...]:
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError) as e:
        raise ArityError(func, 'signature is not available, pass arity') from e
    return tuple(
        None if param.kind is inspect.Parameter.POSITIONAL_ONLY else param.name
        for param in sig.parameters.values()
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty
    )


def curry(func: Callable[..., Any], arity: int | None = None) -> Curried:
    """Curry a function so it can be applied one argument at a time.

    Required parameters can also be supplied by keyword, but only for
    slots to the right of every positional argument given so far:
    `curry(f)(b=2)(1)` works for `f(a, b)`, `curry(f)(a=1)(2)` does not.
    With an explicit arity only positional arguments are counted.

    Args:
        func: The function to curry.
        arity: Number of positional arguments to collect before calling
            func. Defaults to the number of required positional parameters
            in func's signature.

    Returns:
        A Curried proxy around func.

    Raises:
        ArityError: If arity is negative, or omitted and func's signature
            cannot be inspected.
    """
    if arity is None:
        names = _positional_slots(func)
        return Curried(func, len(names), names=names)
    if arity < 0:
        raise ArityError(func, f'arity must be non-negative, got {arity}')
    return Curried(func, arity)
