"""Process-wide random generator and fresh 64-bit random values."""

from __future__ import annotations

import random

from fastchess.logger import logger

_UINT64_BITS = 64

generator = random.Random()


def random_uint64() -> int:
    """Return an unpredictable integer in [0, 2**64 - 1]."""
    return random.SystemRandom().getrandbits(_UINT64_BITS)


def seed(value: int) -> None:
    """Seed the shared generator, logging the seed."""
    logger.info("Setting seed to: {}", value)
    generator.seed(value)