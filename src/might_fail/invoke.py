"""Synchronous invokers.

Each invoker calls a function exactly once on the caller's thread and turns
"returned a value" or "raised an exception" into an outcome struct. Any
``Exception`` is captured and carried unchanged in ``error``; signals that
derive only from ``BaseException`` (``KeyboardInterrupt``, ``SystemExit``)
are left to propagate.

Example:
    ```python
    from might_fail import might_fail

    error, port, success = might_fail(int, os.environ.get('PORT', ''))
    if not success:
        port = 8080
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from might_fail._internal.events import batch_settled, failure_captured
from might_fail._logging import get_logger
from might_fail.outcome import (
    Maybe,
    MaybeOptional,
    MaybeWithSuccess,
    from_failure,
    from_optional_failure,
    from_optional_success,
    from_success,
)

__all__ = [
    'might_fail',
    'might_fail_all',
    'might_fail_optional',
    'might_fail_pair',
]

logger = get_logger(__name__)


def might_fail[**P, T](func: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> MaybeWithSuccess[T]:
    """Call ``func`` and return ``(error, value, success)``.

    On success ``error`` is the shared ``NotAnError`` sentinel, not None.
    Check ``success`` before looking at ``error``.

    Args:
        func: The function to call.
        *args: Positional arguments forwarded to ``func``.
        **kwargs: Keyword arguments forwarded to ``func``.

    Returns:
        ``from_success(value)`` if ``func`` returned, ``from_failure(exc)`` if it raised.

    Examples:
        >>> error, value, success = might_fail(lambda: 'ok')
        >>> value, success
        ('ok', True)
        >>> error, value, success = might_fail(int, 'not a number')
        >>> type(error).__name__, value, success
        ('ValueError', None, False)
    """
    try:
        value = func(*args, **kwargs)
    except Exception as e:
        failure_captured(logger, e, invoker='might_fail')
        return from_failure(e)
    return from_success(value)


def might_fail_pair[**P, T](func: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Maybe[T]:
    """Call ``func`` and return ``(error, value)``.

    The pair keeps the sentinel in ``error`` on success, so test ``value``
    to tell success from failure. A function that can legitimately return
    None should go through :func:`might_fail_optional` instead.

    Examples:
        >>> error, value = might_fail_pair(lambda: 42)
        >>> value
        42
    """
    return might_fail(func, *args, **kwargs).pair()


def might_fail_optional[**P, T](
    func: Callable[P, T | None], *args: P.args, **kwargs: P.kwargs
) -> MaybeOptional[T]:
    """Call a function whose normal result may be None.

    Returning None is a success: ``(None, None, True)``. Only a raised
    exception is a failure: ``(exc, None, False)``. ``error`` is None rather
    than the sentinel whenever the call returned.

    Examples:
        >>> might_fail_optional({}.get, 'missing')
        MaybeOptional(error=None, value=None, success=True)
    """
    try:
        value = func(*args, **kwargs)
    except Exception as e:
        failure_captured(logger, e, invoker='might_fail_optional')
        return from_optional_failure(e)
    return from_optional_success(value)


def might_fail_all[T](funcs: Iterable[Callable[[], T]]) -> list[MaybeWithSuccess[T]]:
    """Call each function in order and report every outcome.

    A failure never stops the batch: every function runs, one after the
    other, and contributes exactly one outcome at its own index.

    Args:
        funcs: Zero-argument functions to call.

    Returns:
        One ``MaybeWithSuccess`` per function, in input order.

    Examples:
        >>> outcomes = might_fail_all([lambda: 1, lambda: 1 / 0, lambda: 3])
        >>> [outcome.success for outcome in outcomes]
        [True, False, True]
    """
    outcomes: list[MaybeWithSuccess[T]] = []
    for func in funcs:
        outcomes.append(might_fail(func))
    batch_settled(logger, outcomes, invoker='might_fail_all')
    return outcomes
