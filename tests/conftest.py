"""Pytest configuration and shared fixtures for elevated tests."""

import pytest


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from elevated import Some

    return Some(1)


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from elevated import Nothing

    return Nothing


@pytest.fixture
def add():
    """Curried two-argument addition, as in `let add a b = a + b`."""
    from elevated import curry

    return curry(lambda a, b: a + b)
