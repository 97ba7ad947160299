"""Pytest configuration and shared fixtures for might-fail tests."""

import logging

import pytest

from might_fail import clear_log_hooks
from might_fail._logging import _reset_logging
from might_fail.config import _reset
from tests.errors import MessageError, SimpleError


@pytest.fixture
def isolated_logging(monkeypatch):
    """Start from a clean environment and restore logging, hooks and config afterwards."""
    for name in ('MIGHT_FAIL_LOG_LEVEL', 'MIGHT_FAIL_LOG_JSON', 'MIGHT_FAIL_LOG_FAILURES'):
        monkeypatch.delenv(name, raising=False)
    _reset()

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
    _reset_logging()
    clear_log_hooks()
    _reset()


@pytest.fixture
def simple_error():
    """A fresh SimpleError instance."""
    return SimpleError()


@pytest.fixture
def message_error():
    """A fresh MessageError instance."""
    return MessageError('Failed operation')
