"""Smoke tests to verify package structure and imports work."""


def test_import_types():
    """Core types can be imported."""
    from elevated import Err, Nothing, NothingType, Ok, Option, Result, Some

    assert Some is not None
    assert Nothing is not None
    assert NothingType is not None
    assert Option is not None
    assert Ok is not None
    assert Err is not None
    assert Result is not None


def test_import_combinators():
    """The combinator surface can be imported flat."""
    from elevated import apply, bind, lift2, map, of  # noqa: A004

    assert all(callable(f) for f in (map, of, apply, bind, lift2))


def test_submodule_imports():
    """Submodule imports work."""
    from elevated.combinators import apply, bind, lift2, map, of  # noqa: A004, F401
    from elevated.composition import compose, compose_back, identity, pipe  # noqa: F401
    from elevated.currying import Curried, curry  # noqa: F401
    from elevated.decorators import optional  # noqa: F401
    from elevated.errors import ArityError, NotAnOptionError, UnwrapError  # noqa: F401
    from elevated.option import Nothing, Some, from_nullable  # noqa: F401
    from elevated.result import Err, Ok  # noqa: F401

    assert True


def test_builtin_map_untouched():
    """Importing elevated does not replace the builtin map."""
    import builtins

    import elevated  # noqa: F401

    assert list(builtins.map(str, [1, 2])) == ['1', '2']
