"""Thread-safe log file writer with levels and engine traffic logging."""

from __future__ import annotations

import datetime as _dt
import gzip
import sys
import threading
from enum import IntEnum
from typing import IO, Any, Optional

from fastchess.timeutil import datetime_precise

_THREAD_WIDTH = 3 if sys.platform == "win32" else 20


class Level(IntEnum):
    """Log levels in increasing order of importance."""

    ALL = 0
    TRACE = 1
    WARN = 2
    INFO = 3
    ERR = 4
    FATAL = 5


_LABELS = {
    Level.TRACE: "TRACE",
    Level.WARN: "WARN",
    Level.INFO: "INFO",
    Level.ERR: "ERR",
    Level.FATAL: "FATAL",
}


class Logger:
    """Writes formatted log lines to a (possibly gzip-compressed) file."""

    def __init__(self) -> None:
        self.level = Level.WARN
        self.compress = False
        self.engine_coms = False
        self.should_log = False
        self._file: Optional[IO[str]] = None
        self._lock = threading.Lock()

    def set_level(self, level: Level) -> None:
        """Set the lowest level that is written to the file."""
        self.level = Level(level)

    def set_compress(self, compress: bool) -> None:
        """Choose whether the next opened file is gzip-compressed."""
        self.compress = compress

    def set_engine_coms(self, engine_coms: bool) -> None:
        """Choose whether engine traffic is written to the file."""
        self.engine_coms = engine_coms

    def open_file(self, file: str) -> None:
        """Open the log file; compressed files get a timestamped .gz name."""
        if not file:
            return
        self.close()
        try:
            if self.compress:
                stamp = _dt.datetime.now().strftime("%Y-%m-%dT.%H.%M.%S")
                handle: IO[str] = gzip.open(f"{file}{stamp}.gz", "wt", encoding="utf-8")
            else:
                handle = open(file, "a", encoding="utf-8")
        except OSError:
            sys.stderr.write("Failed to open log file.\n")
            sys.stderr.flush()
            self.should_log = False
            return
        with self._lock:
            self._file = handle
        self.should_log = True

    def close(self) -> None:
        """Close the log file and stop logging."""
        with self._lock:
            handle, self._file = self._file, None
            self.should_log = False
        if handle is not None:
            handle.close()

    def trace(self, message: str, *args: Any, thread: bool = False) -> None:
        self._log(Level.TRACE, thread, message.format(*args) + "\n")

    def warn(self, message: str, *args: Any, thread: bool = False) -> None:
        self._log(Level.WARN, thread, message.format(*args) + "\n")

    def info(self, message: str, *args: Any, thread: bool = False) -> None:
        self._log(Level.INFO, thread, message.format(*args) + "\n")

    def err(self, message: str, *args: Any, thread: bool = False) -> None:
        self._log(Level.ERR, thread, message.format(*args) + "\n")

    def fatal(self, message: str, *args: Any, thread: bool = False) -> None:
        self._log(Level.FATAL, thread, message.format(*args) + "\n")

    def print(
        self,
        message: str,
        *args: Any,
        level: Level = Level.INFO,
        thread: bool = False,
    ) -> None:
        """Print a message to stdout and also log it at the given level."""
        text = message.format(*args) + "\n"
        sys.stdout.write(text)
        sys.stdout.flush()
        if not self.should_log:
            return
        self._log(Level(level), thread, text + "\n")

    def write_to_engine(self, msg: str, time: str, name: str) -> None:
        """Log a line sent to an engine."""
        if not self.should_log or not self.engine_coms:
            return
        timestamp = time or datetime_precise()
        ident = threading.get_ident()
        line = (
            f"[{'Engine':<6}] [{timestamp:>15}] <{ident!s:>{_THREAD_WIDTH}}> "
            f"{name} <--- {msg}\n"
        )
        self._emit(line)

    def read_from_engine(
        self,
        msg: str,
        time: str,
        name: str,
        err: bool = False,
        thread_id: Optional[int] = None,
    ) -> None:
        """Log a line received from an engine."""
        if not self.should_log or not self.engine_coms:
            return
        ident = threading.get_ident() if thread_id is None else thread_id
        prefix = "<stderr> " if err else ""
        line = (
            f"[{'Engine':<6}] [{time:>15}] <{ident!s:>{_THREAD_WIDTH}}> "
            f"{prefix}{name} ---> {msg}\n"
        )
        self._emit(line)

    def _log(self, level: Level, thread: bool, message: str) -> None:
        if level < self.level or not self.should_log:
            return
        label = _LABELS.get(level, "")
        thread_id = str(threading.get_ident()) if thread else ""
        line = (
            f"[{label:<6}] [{datetime_precise():>15}] "
            f"<{thread_id:>{_THREAD_WIDTH}}> fastchess --- {message}"
        )
        self._emit(line)

    def _emit(self, line: str) -> None:
        with self._lock:
            if self._file is None:
                return
            self._file.write(line)
            self._file.flush()


logger = Logger()