"""Decorators: @optional."""

from elevated.decorators.optional import optional

__all__ = ['optional']
