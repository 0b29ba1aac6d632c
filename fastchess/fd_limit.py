"""File descriptor limits and the concurrency they allow."""

from __future__ import annotations

import sys

_BASE_DESCRIPTORS = 26
_DESCRIPTORS_PER_GAME = 12


def max_system_file_descriptor_count() -> int:
    """Return the soft limit on open file descriptors, or -1 if unavailable."""
    try:
        import resource
    except ImportError:
        return -1

    try:
        soft, _hard = resource.getrlimit(resource.RLIMIT_NOFILE)
    except (OSError, ValueError) as error:
        print(f"getrlimit: {error}", file=sys.stderr)
        return -1
    return soft


def min_file_descriptor_required(concurrency: int) -> int:
    """Descriptors needed to run the given number of games at once."""
    return _BASE_DESCRIPTORS + (concurrency - 1) * _DESCRIPTORS_PER_GAME


def max_concurrency(available_fds: int) -> int:
    """Largest concurrency that fits into the given number of descriptors."""
    spare = available_fds - _BASE_DESCRIPTORS
    quotient = abs(spare) // _DESCRIPTORS_PER_GAME
    if spare < 0:
        quotient = -quotient
    return quotient + 1