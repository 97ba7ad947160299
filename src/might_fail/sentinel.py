"""The shared "not an error" placeholder used by successful outcomes.

Successful ``MaybeWithSuccess`` and ``Maybe`` outcomes still carry an
exception in their ``error`` slot: this one. It exists so that the slot is
never ``None`` for the non-optional shapes, which means inspecting ``error``
alone does not tell success from failure. Always check ``success`` (or
``value``) first. The message of the sentinel says the same thing to anyone
who prints it by mistake.

Example:
    ```python
    from might_fail import is_not_an_error, might_fail

    error, value, success = might_fail(int, '42')
    assert success
    assert is_not_an_error(error)
    ```
"""

from __future__ import annotations

from typing import Any, Final

from might_fail._internal.sync import Lazy

__all__ = ['NotAnError', 'is_not_an_error', 'not_an_error']

NOT_AN_ERROR_MESSAGE: Final = """\
This is not an error, always check success (or the value) before looking at the error!
error, value, success = might_fail(some_func)
if not success:
    # handle the error, for example
    match error:
        case ValueError():
            ...
    return
# use the value
"""

# Exception chaining fields. The sentinel keeps them empty.
_CHAINING = ('__cause__', '__context__', '__traceback__')

_token = object()


class NotAnError(Exception):
    """Placeholder occupying the ``error`` slot of a successful outcome.

    There is exactly one instance per process, obtained through
    :func:`not_an_error`. Compare with ``is`` (or :func:`is_not_an_error`);
    constructing another instance raises ``TypeError``.

    The sentinel must never be raised. If it is, the traceback and chained
    exceptions it picked up are dropped the next time it is handed out.
    """

    def __init__(self, token: object = None) -> None:
        if token is not _token:
            raise TypeError('NotAnError is a singleton, use might_fail.not_an_error() to get it')
        super().__init__(NOT_AN_ERROR_MESSAGE)

    @property
    def description(self) -> str:
        """The fixed warning carried by the sentinel."""
        return NOT_AN_ERROR_MESSAGE

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _CHAINING:
            super().__setattr__(name, None)
        elif name == '__suppress_context__':
            super().__setattr__(name, value)
        else:
            raise AttributeError(f'NotAnError is immutable, cannot set {name!r}')

    def _scrub(self) -> None:
        for name in _CHAINING:
            if getattr(self, name) is not None:
                super().__setattr__(name, None)

    def __repr__(self) -> str:
        return 'NotAnError()'

    def __copy__(self) -> NotAnError:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> NotAnError:
        return self

    def __reduce__(self) -> tuple[Any, tuple[()]]:
        return (not_an_error, ())


_shared: Lazy[NotAnError] = Lazy(lambda: NotAnError(_token))


def not_an_error() -> NotAnError:
    """Return the process-wide sentinel, creating it on first use."""
    sentinel = _shared.get()
    sentinel._scrub()
    return sentinel


def is_not_an_error(error: object) -> bool:
    """Return True if ``error`` is the shared sentinel.

    This is an identity check; it is the only supported way to recognise
    the sentinel.
    """
    return error is _shared.get()
