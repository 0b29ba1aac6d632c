"""CRC-32 (IEEE 802.3, reflected) checksums for strings and files."""

from __future__ import annotations

import os
from typing import Optional, Tuple, Union

_POLYNOMIAL = 0xEDB88320
_MASK = 0xFFFFFFFF
_CHUNK_SIZE = 4096

Data = Union[str, bytes, bytearray, memoryview]


def generate_crc_table() -> Tuple[int, ...]:
    """Build the 256-entry lookup table for the reflected CRC-32 polynomial."""
    table = []
    for value in range(256):
        crc = value
        for _ in range(8):
            crc = (crc >> 1) ^ (_POLYNOMIAL * (crc & 1))
        table.append(crc)
    return tuple(table)


CRC_TABLE = generate_crc_table()


def _update(crc: int, data: bytes) -> int:
    for byte in data:
        crc = (crc >> 8) ^ CRC_TABLE[(crc & 0xFF) ^ byte]
    return crc


def _as_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def calculate_crc32(filename: Union[str, "os.PathLike[str]"]) -> Optional[int]:
    """Return the CRC-32 of a file's contents, or None if it cannot be opened."""
    try:
        handle = open(filename, "rb")
    except OSError:
        return None

    crc = initial_crc32()
    with handle:
        while chunk := handle.read(_CHUNK_SIZE):
            crc = _update(crc, chunk)
    return finalize_crc32(crc)


def initial_crc32() -> int:
    """Return the starting register value for an incremental computation."""
    return _MASK


def incremental_crc32(crc: int, data: Data) -> int:
    """Feed more data into a running (non-finalized) CRC-32 register."""
    return _update(crc & _MASK, _as_bytes(data))


def finalize_crc32(crc: int) -> int:
    """Turn a running register value into the final checksum."""
    return ~crc & _MASK