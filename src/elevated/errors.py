"""Exception types for misuse of the library.

Absence and failure are modelled as data (`Nothing`, `Err`). These
exceptions only signal caller bugs: unwrapping an empty container, handing a
combinator something that is not an Option, or currying a function whose
arity cannot be known.
"""

from __future__ import annotations

__all__ = [
    'ArityError',
    'ElevatedError',
    'NotAnOptionError',
    'UnwrapError',
]


class ElevatedError(Exception):
    """Base class for all elevated exceptions."""


class UnwrapError(ElevatedError, RuntimeError):
    """Raised when unwrapping Nothing or an Err."""

    def __init__(self, message: str = 'Called unwrap on Nothing') -> None:
        super().__init__(message)


class NotAnOptionError(ElevatedError, TypeError):
    """Raised when a combinator receives a value that is not an Option."""

    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value_type = type(value)
        super().__init__(
            f"{name}() expected Some or Nothing, got '{self.value_type.__name__}'"
        )


class ArityError(ElevatedError, TypeError):
    """Raised when curry() cannot work out how many arguments to collect."""

    def __init__(self, func: object, reason: str) -> None:
        self.func = func
        name = getattr(func, '__name__', repr(func))
        super().__init__(f'Cannot curry {name}: {reason}')
