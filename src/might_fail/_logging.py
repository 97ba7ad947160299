"""Structured logging for might-fail.

Library loggers are structlog wrappers around stdlib loggers named
``might_fail.*``. Until the application raises the level (or calls
:func:`configure_logging`) they are filtered out by the stdlib logger and
cost almost nothing.

``configure_logging`` gives the ``might_fail`` logger its own stderr handler
with structlog's ProcessorFormatter, so structlog events and plain stdlib
records from the package render the same way. It never touches the root
logger or the global structlog configuration.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _hook_processor,
    ]


def _get_structlog_processors() -> list[Any]:
    """Get the full processor chain for structlog loggers."""
    return [
        structlog.stdlib.filter_by_level,
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    """Get the appropriate renderer based on output format."""
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


_HANDLER_NAME = 'might_fail'
_PACKAGE_LOGGER = 'might_fail'


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Send might-fail logs to stderr through structlog's ProcessorFormatter.

    Only the ``might_fail`` stdlib logger is touched: it gets one handler of
    its own (replacing any installed by an earlier call), the given level,
    and stops propagating so records are not printed twice. The root logger
    and the application's structlog configuration are left alone.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.
    """
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    _remove_handler(package_logger)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = False


def _remove_handler(package_logger: logging.Logger) -> None:
    for existing in package_logger.handlers[:]:
        if existing.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(existing)
            existing.close()


def _reset_logging() -> None:
    """Undo :func:`configure_logging`. Used by tests."""
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    _remove_handler(package_logger)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger backed by the stdlib logger ``name``.

    The wrapper does not depend on ``structlog.configure`` having run, so
    module-level loggers created at import time pick up whatever stdlib
    level and handlers the application sets later.

    Args:
        name: Stdlib logger name. Defaults to ``"might_fail"``.

    Returns:
        A structlog BoundLogger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or 'might_fail'),
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook to be called with a copy of each log entry.

    Args:
        hook: Callable that receives the log entry dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook.

    Args:
        hook: The hook to remove.
    """
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _hook_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001, S110
            pass  # a broken hook must not break logging
    return event_dict
