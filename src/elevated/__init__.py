"""elevated: Option combinators for Python 3.13+.

Lift ordinary functions into the world of values that may be absent, and
combine them there without None checks.

Flat imports (preferred):
    from elevated import Option, Some, Nothing, map, of, apply, bind, lift2
    from elevated import curry, compose, pipe, optional

Submodule imports (for organization):
    from elevated.option import Some, Nothing, Option
    from elevated.result import Ok, Err, Result
    from elevated.combinators import map, of, apply, bind, lift2
    from elevated.composition import compose, compose_back, pipe
"""

# Combinators
from elevated.combinators import (
    apply,
    bind,
    flat_map,
    lift,
    lift2,
    map,  # noqa: A004
    of,
    pure,
)

# Configuration
from elevated._config import ElevatedConfig, get_config, init

# Composition
from elevated.composition import compose, compose_back, identity, pipe

# Currying
from elevated.currying import Curried, curry

# Decorators
from elevated.decorators import optional

# Errors
from elevated.errors import ArityError, ElevatedError, NotAnOptionError, UnwrapError

# Types
from elevated.option import Nothing, NothingType, Option, Some, from_nullable
from elevated.result import Err, Ok, Result

__all__ = [
    'ArityError',
    'Curried',
    'ElevatedConfig',
    'ElevatedError',
    'Err',
    'NotAnOptionError',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'UnwrapError',
    'apply',
    'bind',
    'compose',
    'compose_back',
    'curry',
    'flat_map',
    'from_nullable',
    'get_config',
    'identity',
    'init',
    'lift',
    'lift2',
    'map',
    'of',
    'optional',
    'pipe',
    'pure',
]
