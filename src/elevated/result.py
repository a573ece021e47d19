"""Result type: Ok[T] | Err[E] for computations that can fail.

Errors are values. A function returns `Err(reason)` instead of raising, and
callers decide what to do by matching on the variant:

    ```python
    match parse(text):
        case Ok(value):
            use(value)
        case Err(error):
            report(error)
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, TypeIs

import msgspec

from elevated.errors import UnwrapError
from elevated.option import Nothing, NothingType, Some

__all__ = ['Err', 'Ok', 'Result']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Successful variant of Result, holding the computed value."""

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True; narrows the type to Ok[T]."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False, the computation succeeded."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply f to the success value."""
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Ok[T]:
        """Return self; there is no error to transform."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Chain a fallible step; its Result is returned as is."""
        return f(self.value)

    def unwrap(self) -> T:
        """Return the success value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the success value; default is not used."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise UnwrapError, since this is Ok.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(f'Called unwrap_err on Ok({self.value!r})')

    def ok(self) -> Some[T]:
        """Discard the error channel, returning Some(value)."""
        return Some(self.value)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Failed variant of Result, holding the error."""

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False, the computation failed."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True; narrows the type to Err[E]."""
        return True

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self without calling the function."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply f to the error value."""
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self; chains stop at the first Err."""
        return self

    def unwrap(self) -> NoReturn:
        """Raise UnwrapError describing the error.

        When the error is an exception it becomes the cause of the
        UnwrapError, so the original traceback is kept.

        Raises:
            UnwrapError: Always.
        """
        msg = f'Called unwrap on Err({self.error!r})'
        if isinstance(self.error, BaseException):
            raise UnwrapError(msg) from self.error
        raise UnwrapError(msg)

    def unwrap_or[T](self, default: T) -> T:
        """Return default in place of the missing success value."""
        return default

    def unwrap_err(self) -> E:
        """Return the error value."""
        return self.error

    def ok(self) -> NothingType:
        """Discard the error, returning Nothing."""
        return Nothing


type Result[T, E] = Ok[T] | Err[E]
