"""Outcome shapes returned by the invokers.

Three immutable structs describe how a fallible call ended:

- ``MaybeWithSuccess[T]``: ``(error, value, success)``. ``error`` is always an
  exception: the raised one, or the shared ``NotAnError`` sentinel on success.
- ``Maybe[T]``: the same without the flag, ``(error, value)``.
- ``MaybeOptional[T]``: ``(error, value, success)`` for callables whose normal
  result may be ``None``. ``error`` is ``None`` on success, so a successful
  ``None`` is never mistaken for a failure.

All three unpack like tuples:

    ```python
    error, value, success = might_fail(load_config)
    if not success:
        log.warning('no config', error=error)
    ```
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import msgspec

from might_fail.sentinel import not_an_error

__all__ = [
    'Maybe',
    'MaybeOptional',
    'MaybeWithSuccess',
    'from_failure',
    'from_optional_failure',
    'from_optional_success',
    'from_success',
]


class MaybeWithSuccess[T](msgspec.Struct, frozen=True):
    """Outcome of a call whose return type is not optional.

    Attributes:
        error: The raised exception, or the ``NotAnError`` sentinel on success.
        value: The returned value, or None if the call raised.
        success: True if the call returned normally.

    Examples:
        >>> outcome = from_success(42)
        >>> outcome.success, outcome.value
        (True, 42)
        >>> error, value, success = from_failure(KeyError('id'))
        >>> value is None, success
        (True, False)
    """

    error: BaseException
    value: T | None
    success: bool

    def __iter__(self) -> Iterator[Any]:
        return iter(msgspec.structs.astuple(self))

    def pair(self) -> Maybe[T]:
        """Drop the success flag.

        On success the pair's ``error`` is still the sentinel; check
        ``value`` to tell the cases apart.
        """
        return Maybe(self.error, self.value)


class Maybe[T](msgspec.Struct, frozen=True):
    """Two-field view of ``MaybeWithSuccess``: ``(error, value)``."""

    error: BaseException
    value: T | None

    def __iter__(self) -> Iterator[Any]:
        return iter(msgspec.structs.astuple(self))


class MaybeOptional[T](msgspec.Struct, frozen=True):
    """Outcome of a call whose own return type is ``T | None``.

    ``success`` only records whether the call raised. A call that returns
    None successfully yields ``MaybeOptional(None, None, True)``.

    Attributes:
        error: The raised exception, or None if the call returned.
        value: The returned value (possibly None), or None if the call raised.
        success: True if the call returned normally.
    """

    error: BaseException | None
    value: T | None
    success: bool

    def __iter__(self) -> Iterator[Any]:
        return iter(msgspec.structs.astuple(self))


def from_success[T](value: T) -> MaybeWithSuccess[T]:
    """Build the outcome of a call that returned ``value``."""
    return MaybeWithSuccess(not_an_error(), value, True)


def from_failure[T](error: BaseException) -> MaybeWithSuccess[T]:
    """Build the outcome of a call that raised ``error``."""
    return MaybeWithSuccess(error, None, False)


def from_optional_success[T](value: T | None) -> MaybeOptional[T]:
    """Build the optional-shape outcome of a call that returned ``value``."""
    return MaybeOptional(None, value, True)


def from_optional_failure[T](error: BaseException) -> MaybeOptional[T]:
    """Build the optional-shape outcome of a call that raised ``error``."""
    return MaybeOptional(error, None, False)
