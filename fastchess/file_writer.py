"""Append-only file writer that can keep a running CRC-32 of the file."""

from __future__ import annotations

import os
import threading
from types import TracebackType
from typing import Optional, Type, Union

from fastchess import crc32 as crc
from fastchess.logger import logger


class FileWriter:
    """Appends data to a file under a lock, optionally tracking its CRC-32."""

    def __init__(self, filename: Union[str, "os.PathLike[str]"], crc: bool = False) -> None:
        self.filename = os.fspath(filename)
        self.calculate_crc = crc
        self._lock = threading.Lock()
        self._crc = crc_initial_state(self.filename) if crc else 0
        self._file = open(self.filename, "ab")

    def write(self, data: Union[str, bytes]) -> None:
        """Append data and flush; update and report the CRC if enabled."""
        raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        with self._lock:
            self._file.write(raw)
            self._file.flush()
            if self.calculate_crc:
                self._crc = crc.incremental_crc32(self._crc, raw)
                logger.print("File {} has CRC32: {:#x}", self.filename, self.crc32)

    @property
    def crc32(self) -> Optional[int]:
        """Checksum of the whole file so far, or None when not tracked."""
        if not self.calculate_crc:
            return None
        return crc.finalize_crc32(self._crc)

    def close(self) -> None:
        """Close the underlying file."""
        with self._lock:
            self._file.close()

    def __enter__(self) -> "FileWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


def crc_initial_state(filename: str) -> int:
    """Running CRC register for a file's existing content."""
    try:
        empty = os.path.getsize(filename) == 0
    except OSError:
        empty = True
    if empty:
        return crc.initial_crc32()
    existing = crc.calculate_crc32(filename)
    if existing is None:
        return crc.initial_crc32()
    return ~existing & 0xFFFFFFFF