"""Composition utilities: identity, compose(), compose_back() and pipe()."""

from elevated.composition.chain import compose, compose_back, identity
from elevated.composition.pipe import pipe

__all__ = [
    'compose',
    'compose_back',
    'identity',
    'pipe',
]
