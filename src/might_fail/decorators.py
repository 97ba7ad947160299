"""@fallible and @fallible_async: decorator forms of the invokers."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, Literal, overload

import wrapt

from might_fail.async_ import might_fail_async, might_fail_optional_async
from might_fail.invoke import might_fail, might_fail_optional
from might_fail.outcome import MaybeOptional, MaybeWithSuccess

__all__ = ['fallible', 'fallible_async']


@overload
def fallible[**P, T](func: Callable[P, T]) -> Callable[P, MaybeWithSuccess[T]]: ...


@overload
def fallible[**P, T](
    *, optional: Literal[False] = False
) -> Callable[[Callable[P, T]], Callable[P, MaybeWithSuccess[T]]]: ...


@overload
def fallible[**P, T](
    *, optional: Literal[True]
) -> Callable[[Callable[P, T | None]], Callable[P, MaybeOptional[T]]]: ...


def fallible(
    func: Callable[..., Any] | None = None,
    *,
    optional: bool = False,
) -> Any:
    """Decorator that makes a function return an outcome instead of raising.

    Can be used with or without arguments:
        @fallible
        def parse(raw: str) -> Config: ...

        @fallible(optional=True)
        def find(key: str) -> User | None: ...

    Args:
        func: The function to wrap (when used without parentheses).
        optional: Return ``MaybeOptional`` (for functions whose normal result
            may be None) instead of ``MaybeWithSuccess``.

    Returns:
        A wrapped function with the same signature returning the outcome.

    Raises:
        TypeError: If the decorated function is a coroutine function.

    Example:
        ```python
        @fallible
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # MaybeWithSuccess(error=NotAnError(), value=5.0, success=True)
        divide(10, 0)
        # MaybeWithSuccess(error=ZeroDivisionError('division by zero'), value=None, success=False)
        ```
    """
    invoke = might_fail_optional if optional else might_fail

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> MaybeWithSuccess[Any] | MaybeOptional[Any]:
        return invoke(wrapped, *args, **kwargs)

    def decorate(f: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(f):
            name = getattr(f, '__qualname__', repr(f))
            raise TypeError(f'{name} is a coroutine function, use @fallible_async instead of @fallible')
        return wrapper(f)

    if func is not None:
        return decorate(func)
    return decorate


@overload
def fallible_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[MaybeWithSuccess[T]]]: ...


@overload
def fallible_async[**P, T](
    *, optional: Literal[False] = False
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[MaybeWithSuccess[T]]]]: ...


@overload
def fallible_async[**P, T](
    *, optional: Literal[True]
) -> Callable[[Callable[P, Awaitable[T | None]]], Callable[P, Awaitable[MaybeOptional[T]]]]: ...


def fallible_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    *,
    optional: bool = False,
) -> Any:
    """Async decorator that makes a coroutine function return an outcome.

    Can be used with or without arguments:
        @fallible_async
        async def fetch(url: str) -> bytes: ...

        @fallible_async(optional=True)
        async def lookup(key: str) -> bytes | None: ...

    Args:
        func: The async function to wrap (when used without parentheses).
        optional: Return ``MaybeOptional`` instead of ``MaybeWithSuccess``.

    Returns:
        A wrapped async function returning the outcome.
    """
    invoke = might_fail_optional_async if optional else might_fail_async

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> MaybeWithSuccess[Any] | MaybeOptional[Any]:
        return await invoke(wrapped, *args, **kwargs)

    if func is not None:
        return wrapper(func)
    return wrapper
