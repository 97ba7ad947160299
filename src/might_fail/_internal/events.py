"""Debug events shared by the sync and async invokers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from might_fail.config import get_config

__all__ = ['failure_captured', 'batch_settled']


def failure_captured(logger: Any, error: BaseException, *, invoker: str) -> None:
    if get_config().log_failures:
        logger.debug('failure_captured', invoker=invoker, error_type=type(error).__qualname__)


def batch_settled(logger: Any, outcomes: Sequence[Any], *, invoker: str) -> None:
    failed = sum(1 for outcome in outcomes if not outcome.success)
    logger.debug('batch_settled', invoker=invoker, total=len(outcomes), failed=failed)
