"""One-time initialisation that is safe from threads and event loops.

aiologic locks work the same whether the caller is a plain thread or a
coroutine running on asyncio/trio, so a single ``Lazy`` can back a value
that is first touched from either side.
"""

from __future__ import annotations

from collections.abc import Callable

import aiologic

__all__ = ['Lazy']


class Lazy[T]:
    """A value computed by ``init`` on first access and cached afterwards.

    ``init`` runs at most once. Concurrent first accesses block on the lock
    and then observe the value produced by whichever caller won.

    Examples:
        >>> calls = []
        >>> lazy = Lazy(lambda: calls.append(1) or 'ready')
        >>> lazy.get()
        'ready'
        >>> lazy.get()
        'ready'
        >>> calls
        [1]
    """

    __slots__ = ('_init', '_is_set', '_lock', '_value')

    def __init__(self, init: Callable[[], T]) -> None:
        self._init = init
        self._lock = aiologic.Lock()
        self._value: T | None = None
        self._is_set = False

    def get(self) -> T:
        """Return the cached value, running ``init`` if this is the first access."""
        if self._is_set:
            return self._value  # type: ignore[return-value]

        with self._lock:
            if not self._is_set:
                self._value = self._init()
                self._is_set = True
            return self._value  # type: ignore[return-value]

    def is_initialized(self) -> bool:
        """Check whether ``init`` has already run."""
        return self._is_set
