"""Option type: Some[T] | Nothing for values that may be absent."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from elevated.errors import UnwrapError

if TYPE_CHECKING:
    from elevated.result import Err, Ok

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'from_nullable']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Present variant of Option, owning a value of type T.

    Examples:
        >>> Some(1).map(lambda x: x + 1)
        Some(value=2)
        >>> match Some(42):
        ...     case Some(value):
        ...         print(value)
        42
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True; narrows the type to Some[T]."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False, a value is present."""
        return False

    def unwrap(self) -> T:
        """Return the owned value. Never raises on Some."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the owned value; default is not used."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the owned value without calling f."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the owned value; the message only matters for Nothing."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Transform the owned value.

        Args:
            f: Plain function from T to U.

        Returns:
            Some(f(value)).
        """
        return Some(f(self.value))

    def and_then[U](
        self, f: Callable[[T], Some[U] | NothingType]
    ) -> Some[U] | NothingType:
        """Apply a world-crossing function and return its Option unwrapped.

        Also known as bind or flat_map.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self; the recovery function is only called on Nothing."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Keep the value only if predicate(value) is true."""
        if predicate(self.value):
            return self
        return Nothing

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from elevated.result import Ok

        return Ok(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of Option.

    Carries no data. Use the `Nothing` singleton rather than instantiating
    this class; all instances compare equal regardless.

    Examples:
        >>> Nothing.map(lambda x: x + 1)
        NothingType()
        >>> Nothing.unwrap_or(0)
        0
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False, there is no value."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True; narrows the type to NothingType."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise UnwrapError, since there is no value.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError()

    def unwrap_or[T](self, default: T) -> T:
        """Return default in place of the missing value."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Call f and return its result in place of the missing value."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise UnwrapError with a custom message.

        Raises:
            UnwrapError: Always, carrying msg.
        """
        raise UnwrapError(msg)

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return self without calling the function."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return self; chains stop at the first Nothing."""
        return self

    def or_else[T](
        self, f: Callable[[], Some[T] | NothingType]
    ) -> Some[T] | NothingType:
        """Recover by calling f, which supplies a replacement Option."""
        return f()

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return self; there is nothing to test."""
        return self

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err)."""
        from elevated.result import Err

        return Err(err)


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def from_nullable[T](value: T | None) -> Some[T] | NothingType:
    """Convert Python's None-means-absent convention into an Option.

    Examples:
        >>> from_nullable(None)
        NothingType()
        >>> from_nullable(0)
        Some(value=0)
    """
    if value is None:
        return Nothing
    return Some(value)
