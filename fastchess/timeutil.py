"""Wall-clock formatting helpers."""

from __future__ import annotations

import threading
import time as _time
from datetime import timedelta
from typing import Union

_lock = threading.Lock()


def datetime(fmt: str) -> str:
    """Format the current local time with a strftime pattern."""
    with _lock:
        return _time.strftime(fmt, _time.localtime())


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def _format_utc_offset(minutes: int) -> str:
    hours = _trunc_div(minutes, 60)
    rest = abs(minutes - hours * 60)
    sign = "+" if hours >= 0 else "-"
    return f"{sign}{abs(hours):02d}{rest:02d}"


def datetime_iso() -> str:
    """Current local time as 'YYYY-MM-DDTHH:MM:SS +HHMM'."""
    with _lock:
        local = _time.localtime()
    stamp = _time.strftime("%Y-%m-%dT%H:%M:%S", local)
    offset_minutes = _trunc_div(local.tm_gmtoff or 0, 60)
    return f"{stamp} {_format_utc_offset(offset_minutes)}"


def duration(seconds: Union[int, float, timedelta]) -> str:
    """Format a span of whole seconds as HH:MM:SS."""
    if isinstance(seconds, timedelta):
        seconds = seconds.total_seconds()
    total = int(seconds)
    hours = _trunc_div(total, 3600)
    total -= hours * 3600
    minutes = _trunc_div(total, 60)
    total -= minutes * 60
    return f"{hours:02d}:{minutes:02d}:{total:02d}"


def datetime_precise() -> str:
    """Current local time as HH:MM:SS.micro with six fractional digits."""
    now_ns = _time.time_ns()
    whole_seconds = now_ns // 1_000_000_000
    micros = (now_ns // 1_000) % 1_000_000
    with _lock:
        clock = _time.strftime("%H:%M:%S", _time.localtime(whole_seconds))
    return f"{clock}.{micros:06d}"