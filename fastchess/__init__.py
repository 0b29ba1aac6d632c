"""Supporting utilities for chess engine tournaments: checksums, logging, timing, pools and caches."""

__version__ = "0.1.0"