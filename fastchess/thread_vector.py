"""A list guarded by a lock for use across threads."""

from __future__ import annotations

import threading
from types import TracebackType
from typing import Callable, Generic, Iterable, Iterator, List, Optional, Type, TypeVar

T = TypeVar("T")


class ThreadVector(Generic[T]):
    """List whose mutations are serialised; lock it to iterate consistently."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._lock = threading.RLock()
        self._items: List[T] = list(items)

    def push(self, element: T) -> None:
        """Append an element."""
        with self._lock:
            self._items.append(element)

    def remove(self, element: T) -> None:
        """Remove every element equal to the given one."""
        with self._lock:
            self._items = [item for item in self._items if item != element]

    def remove_if(self, predicate: Callable[[T], bool]) -> List[T]:
        """Remove the elements matching predicate and return them."""
        with self._lock:
            removed = [item for item in self._items if predicate(item)]
            self._items = [item for item in self._items if not predicate(item)]
            return removed

    def lock(self) -> None:
        self._lock.acquire()

    def unlock(self) -> None:
        self._lock.release()

    def __enter__(self) -> "ThreadVector[T]":
        self.lock()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.unlock()

    def __iter__(self) -> Iterator[T]:
        with self._lock:
            return iter(list(self._items))

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)