"""Library configuration: MightFailConfig, init and get_config."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from functools import partial
from typing import Any

from might_fail._logging import configure_logging

__all__ = [
    'MightFailConfig',
    'get_config',
    'init',
]

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
_TRUTHY = ('1', 'true', 'yes', 'on')
_FALSY = ('0', 'false', 'no', 'off')

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MightFailConfig:
    """Configuration for might-fail.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Render logs as JSON (True) or for the console (False).
        log_failures: Emit a debug event each time an invoker captures an exception.
    """

    log_level: str | None = None
    json_output: bool = True
    log_failures: bool = True


# Global configuration (set by init())
_config: MightFailConfig | None = None


def _parse_level(value: str) -> str:
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f'Unknown log level {value!r}, expected one of {", ".join(_LOG_LEVELS)}')
    return level


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f'{name} must be a boolean flag, got {value!r}')


def _from_env(*, strict: bool) -> MightFailConfig:
    """Build a config from MIGHT_FAIL_* environment variables.

    With ``strict`` a malformed value raises ValueError. Otherwise it is
    logged and the field keeps its default.
    """
    config = MightFailConfig()

    for name, field_name, parse in (
        ('MIGHT_FAIL_LOG_LEVEL', 'log_level', _parse_level),
        ('MIGHT_FAIL_LOG_JSON', 'json_output', partial(_parse_bool, 'MIGHT_FAIL_LOG_JSON')),
        ('MIGHT_FAIL_LOG_FAILURES', 'log_failures', partial(_parse_bool, 'MIGHT_FAIL_LOG_FAILURES')),
    ):
        raw = os.environ.get(name)
        if not raw:
            continue
        try:
            value = parse(raw)
        except ValueError:
            if strict:
                raise
            logger.warning("Invalid %s value '%s', using the default", name, raw)
            continue
        config = replace(config, **{field_name: value})

    return config


def init(**overrides: Any) -> MightFailConfig:
    """Initialise might-fail.

    Keyword arguments take priority over the environment
    (``MIGHT_FAIL_LOG_LEVEL``, ``MIGHT_FAIL_LOG_JSON``,
    ``MIGHT_FAIL_LOG_FAILURES``). If a log level ends up set, logging is
    configured through :func:`might_fail.configure_logging`.

    Args:
        **overrides: Any ``MightFailConfig`` field.

    Returns:
        The config now in effect.

    Raises:
        TypeError: If an override names an unknown field.
        ValueError: If a log level or boolean flag cannot be parsed.
    """
    global _config

    config = _from_env(strict=True)
    if overrides.get('log_level') is not None:
        overrides['log_level'] = _parse_level(overrides['log_level'])
    config = replace(config, **overrides)

    if config.log_level is not None:
        configure_logging(config.log_level, json_output=config.json_output)

    _config = config
    return config


def get_config() -> MightFailConfig:
    """Return the config set by :func:`init`, or one read from the environment.

    The environment is read once and cached. Malformed values are logged
    and replaced by defaults; only :func:`init` rejects them.
    """
    global _config

    if _config is None:
        _config = _from_env(strict=False)
    return _config


def _reset() -> None:
    """Forget the stored config so the next access rereads the environment. Used by tests."""
    global _config
    _config = None
