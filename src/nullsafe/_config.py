"""Library configuration: NullsafeConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from nullsafe._logging import configure_logging

__all__ = [
    'NullsafeConfig',
    'get_config',
    'init',
]


@dataclass(frozen=True)
class NullsafeConfig:
    """Configuration for nullsafe.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render logs as JSON (True) or colored console text (False).
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: NullsafeConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from NULLSAFE_LOG_LEVEL; empty or unset means silent."""
    level = os.environ.get('NULLSAFE_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read the log format from NULLSAFE_LOG_FORMAT ("json" or "console")."""
    fmt = os.environ.get('NULLSAFE_LOG_FORMAT', '').lower()
    if fmt == 'console':
        return False
    if fmt and fmt != 'json':
        logging.warning("Unknown NULLSAFE_LOG_FORMAT value '%s', defaulting to json", fmt)
    return True


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> NullsafeConfig:
    """Initialize nullsafe with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            NULLSAFE_LOG_LEVEL if None; silent if that is unset too.
        json_output: JSON or console rendering. Read from NULLSAFE_LOG_FORMAT
            if None.

    Returns:
        The NullsafeConfig that was set.

    Example:
        ```python
        import nullsafe

        nullsafe.init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = NullsafeConfig(
        log_level=log_level if log_level is not None else _detect_log_level(),
        json_output=json_output if json_output is not None else _detect_json_output(),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> NullsafeConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'nullsafe not initialized. Call nullsafe.init() first.'
        raise RuntimeError(msg)
    return _config
