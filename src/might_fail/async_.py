"""Asynchronous invokers.

Same contracts as :mod:`might_fail.invoke`, but the wrapped callable is
awaited on the caller's task. Nothing is spawned or scheduled here: the
only suspension point is the ``await`` of the wrapped callable itself.

Cancellation is not captured. ``asyncio.CancelledError`` and anyio/trio
cancellation derive from ``BaseException`` and propagate to the enclosing
cancel scope as usual.

Example:
    ```python
    async def main() -> None:
        error, user, success = await might_fail_async(fetch_user, 42)
        if not success:
            return
        outcomes = await might_fail_all_async([lambda: ping(a), lambda: ping(b)])
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable

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
    'might_fail_all_async',
    'might_fail_async',
    'might_fail_optional_async',
    'might_fail_pair_async',
]

logger = get_logger(__name__)


async def might_fail_async[**P, T](
    func: Callable[P, Awaitable[T]], *args: P.args, **kwargs: P.kwargs
) -> MaybeWithSuccess[T]:
    """Await ``func(*args, **kwargs)`` and return ``(error, value, success)``.

    On success ``error`` is the shared ``NotAnError`` sentinel.

    Args:
        func: Async function (or any callable returning an awaitable).
        *args: Positional arguments forwarded to ``func``.
        **kwargs: Keyword arguments forwarded to ``func``.

    Returns:
        ``from_success(value)`` if the awaitable completed, ``from_failure(exc)`` if it raised.
    """
    try:
        value = await func(*args, **kwargs)
    except Exception as e:
        failure_captured(logger, e, invoker='might_fail_async')
        return from_failure(e)
    return from_success(value)


async def might_fail_pair_async[**P, T](
    func: Callable[P, Awaitable[T]], *args: P.args, **kwargs: P.kwargs
) -> Maybe[T]:
    """Async counterpart of :func:`might_fail.might_fail_pair`."""
    outcome = await might_fail_async(func, *args, **kwargs)
    return outcome.pair()


async def might_fail_optional_async[**P, T](
    func: Callable[P, Awaitable[T | None]], *args: P.args, **kwargs: P.kwargs
) -> MaybeOptional[T]:
    """Await a function whose normal result may be None.

    A None result is a success with ``error`` None; only a raised exception
    is a failure.
    """
    try:
        value = await func(*args, **kwargs)
    except Exception as e:
        failure_captured(logger, e, invoker='might_fail_optional_async')
        return from_optional_failure(e)
    return from_optional_success(value)


async def might_fail_all_async[T](
    funcs: Iterable[Callable[[], Awaitable[T]]],
) -> list[MaybeWithSuccess[T]]:
    """Await each function in order and report every outcome.

    Functions run one at a time: each is awaited to completion before the
    next one starts. A failure never stops the batch.

    Args:
        funcs: Zero-argument async functions.

    Returns:
        One ``MaybeWithSuccess`` per function, in input order.
    """
    outcomes: list[MaybeWithSuccess[T]] = []
    for func in funcs:
        outcomes.append(await might_fail_async(func))
    batch_settled(logger, outcomes, invoker='might_fail_all_async')
    return outcomes
