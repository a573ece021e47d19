"""Configuration: ElevatedConfig and initialization from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from elevated._logging import configure_logging, get_logger

__all__ = [
    'ElevatedConfig',
    'get_config',
    'init',
]

LOG_LEVEL_ENV = 'ELEVATED_LOG_LEVEL'
LOG_FORMAT_ENV = 'ELEVATED_LOG_FORMAT'


@dataclass(frozen=True)
class ElevatedConfig:
    """Process-wide settings.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON log lines if True, console output otherwise.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: ElevatedConfig | None = None


def _detect_log_level() -> str | None:
    level = os.environ.get(LOG_LEVEL_ENV, '').strip()
    return level.upper() or None


def _detect_json_logs() -> bool:
    """Read ELEVATED_LOG_FORMAT ("json" or "console"), defaulting to JSON."""
    fmt = os.environ.get(LOG_FORMAT_ENV, '').strip().lower()
    if fmt in ('', 'json'):
        return True
    if fmt == 'console':
        return False
    logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, fmt)
    return True


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> ElevatedConfig:
    """Initialize elevated's configuration.

    Args:
        log_level: Logging level. Read from ELEVATED_LOG_LEVEL if None;
            if still unset, logging is left unconfigured.
        json_logs: JSON or console output. Read from ELEVATED_LOG_FORMAT
            if None.

    Returns:
        The ElevatedConfig that was set.

    Example:
        ```python
        from elevated import init

        init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = ElevatedConfig(
        log_level=log_level if log_level is not None else _detect_log_level(),
        json_logs=json_logs if json_logs is not None else _detect_json_logs(),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)
        get_logger(__name__).debug(
            'configured', log_level=_config.log_level, json_logs=_config.json_logs
        )

    return _config


def get_config() -> ElevatedConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'elevated not initialized. Call elevated.init() first.'
        raise RuntimeError(msg)
    return _config
