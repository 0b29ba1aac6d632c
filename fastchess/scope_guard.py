"""Entries that are marked in use and released again when a guard exits."""

from __future__ import annotations

from types import TracebackType
from typing import Generic, Optional, Type, TypeVar


class ScopeEntry:
    """Base for objects handed out under a ScopeGuard."""

    def __init__(self, available: bool) -> None:
        self.available = available

    def release(self) -> None:
        """Make the entry available again."""
        self.available = True


E = TypeVar("E", bound=ScopeEntry)


class ScopeGuard(Generic[E]):
    """Context manager that releases its entry when the block ends."""

    def __init__(self, entry: Optional[E]) -> None:
        if entry is not None and not isinstance(entry, ScopeEntry):
            raise TypeError("ScopeGuard requires a ScopeEntry")
        self.entry = entry

    def release(self) -> None:
        """Release the guarded entry now; later releases do nothing."""
        if self.entry is None:
            return
        self.entry.release()
        self.entry = None

    def __enter__(self) -> "ScopeGuard[E]":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.release()