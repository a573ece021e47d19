"""Entry point for `python -m elevated`. Configures logging and exits."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from elevated._config import init
from elevated._logging import get_logger

__all__ = ['main']


def main(argv: Sequence[str] | None = None) -> int:
    """Initialize from the environment and return exit status 0.

    Nothing is written unless ELEVATED_LOG_LEVEL is set.
    """
    config = init()
    if config.log_level is not None:
        args = list(argv if argv is not None else sys.argv[1:])
        get_logger(__name__).debug('started', argv=args, log_level=config.log_level)
    return 0


if __name__ == '__main__':
    sys.exit(main())
