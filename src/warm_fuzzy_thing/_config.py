"""Library configuration: Config and initialization.

Configuration only governs diagnostics. Container operations never consult it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from warm_fuzzy_thing._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class Config:
    """Configuration for warm-fuzzy-thing.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Render JSON log lines when True, coloured console output otherwise.
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: Config | None = None


def _normalize_level(level: str) -> str:
    normalized = level.upper()
    if normalized not in _LEVELS:
        msg = f"Unknown log level '{level}', expected one of {', '.join(_LEVELS)}"
        raise ValueError(msg)
    return normalized


def init(log_level: str | None = None, *, json_output: bool = True) -> Config:
    """Initialize warm-fuzzy-thing with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: Emit JSON logs when True.

    Returns:
        The Config that was set.

    Raises:
        ValueError: If log_level is not a standard logging level name.

    Example:
        ```python
        from warm_fuzzy_thing import init

        init(log_level='debug', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    level = _normalize_level(log_level) if log_level is not None else None
    _config = Config(log_level=level, json_output=json_output)

    if level is not None:
        configure_logging(level, json_output=json_output)
        logging.getLogger('warm_fuzzy_thing').debug('warm_fuzzy_thing initialized at level %s', level)

    return _config


def get_config() -> Config:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'warm_fuzzy_thing not initialized. Call init() first.'
        raise RuntimeError(msg)
    return _config
