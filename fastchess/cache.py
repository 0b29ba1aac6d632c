"""A thread-safe pool of reusable objects keyed by an identifier."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, Hashable, List, TypeVar

from fastchess.scope_guard import ScopeEntry

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


class CachedEntry(ScopeEntry, Generic[T, K]):
    """A pooled object together with the identifier it was created for.

    An entry is in use from the moment the pool hands it out until it is
    released, usually by a ScopeGuard.
    """

    def __init__(self, identifier: K, value: T) -> None:
        super().__init__(False)
        self.id = identifier
        self.value = value

    def __repr__(self) -> str:
        state = "available" if self.available else "in use"
        return f"CachedEntry(id={self.id!r}, {state})"


class CachePool(Generic[T, K]):
    """Hands out free entries with a matching identifier, creating new ones as needed."""

    def __init__(self) -> None:
        self._entries: List[CachedEntry[T, K]] = []
        self._lock = threading.Lock()

    def get_entry(
        self, identifier: K, factory: Callable[..., T], *args: Any, **kwargs: Any
    ) -> CachedEntry[T, K]:
        """Return a free entry for identifier, or build one with factory(*args, **kwargs).

        The returned entry is marked as in use.
        """
        with self._lock:
            for entry in self._entries:
                if entry.available and entry.id == identifier:
                    entry.available = False
                    return entry

            entry = CachedEntry(identifier, factory(*args, **kwargs))
            self._entries.append(entry)
            return entry

    def delete_from_cache(self, entry: CachedEntry[T, K]) -> None:
        """Remove an entry that is currently in use from the pool."""
        with self._lock:
            if entry.available:
                raise ValueError("cannot delete an entry that is not in use")
            try:
                self._entries.remove(entry)
            except ValueError:
                raise ValueError("entry does not belong to this pool") from None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)