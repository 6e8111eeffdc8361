"""Library configuration: MonadsConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from svan_monads._logging import configure_logging

__all__ = [
    'MonadsConfig',
    'get_config',
    'init',
    'reset_config',
]

_LOG_LEVEL_ENV = 'SVAN_MONADS_LOG_LEVEL'
_JSON_LOGS_ENV = 'SVAN_MONADS_JSON_LOGS'
_LOG_FAULTS_ENV = 'SVAN_MONADS_LOG_FAULTS'

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class MonadsConfig:
    """Configuration for svan-monads.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Render logs as JSON (True) or colored console output (False).
        log_captured_faults: Emit a debug event whenever Try captures a fault.
    """

    log_level: str | None = None
    json_logs: bool = True
    log_captured_faults: bool = True


# Global configuration (set by init(), or lazily by get_config())
_config: MonadsConfig | None = None


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return default
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    logging.warning("Unknown %s value '%s', defaulting to %s", name, raw, default)
    return default


def _env_log_level() -> str | None:
    """Read the log level from the environment; empty means silent."""
    raw = os.environ.get(_LOG_LEVEL_ENV, '').strip()
    return raw.upper() or None


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    log_captured_faults: bool | None = None,
) -> MonadsConfig:
    """Initialize svan-monads with the given configuration.

    Arguments left as None fall back to the SVAN_MONADS_* environment
    variables, then to the MonadsConfig defaults.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: Render logs as JSON.
        log_captured_faults: Log a debug event for every captured fault.

    Returns:
        The MonadsConfig that was set.

    Example:
        ```python
        import svan_monads

        svan_monads.init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _env_log_level()
    resolved_json = json_logs if json_logs is not None else _env_flag(_JSON_LOGS_ENV, default=True)
    resolved_faults = (
        log_captured_faults if log_captured_faults is not None else _env_flag(_LOG_FAULTS_ENV, default=True)
    )

    _config = MonadsConfig(
        log_level=resolved_level,
        json_logs=resolved_json,
        log_captured_faults=resolved_faults,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> MonadsConfig:
    """Get the active configuration.

    The containers are usable without any setup, so the first call without a
    prior init() builds the config from the environment. Logging handlers are
    only installed when SVAN_MONADS_LOG_LEVEL is set.
    """
    if _config is None:
        return init()
    return _config


def reset_config() -> None:
    """Forget the active configuration; the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603

    _config = None
