"""Process-wide stop flags and the registry of spawned engine processes.

On Ctrl+C the stop flags are raised; writing a null byte into every
engine's input pipe wakes up any blocking reads so threads can notice the
flag, and stop_processes makes sure no engine process is left behind.
"""

from __future__ import annotations

import os
import signal
import sys
import threading
from dataclasses import dataclass, field
from types import FrameType
from typing import Optional

from fastchess.logger import logger
from fastchess.thread_vector import ThreadVector

_KILL_SIGNAL = getattr(signal, "SIGKILL", signal.SIGTERM)


@dataclass(frozen=True)
class ProcessInformation:
    """A spawned engine: its process id and the descriptor it reads from us."""

    identifier: int
    fd_write: int


@dataclass
class StopFlags:
    """Flags that tell every thread to wind down."""

    stop: threading.Event = field(default_factory=threading.Event)
    abnormal_termination: threading.Event = field(default_factory=threading.Event)


flags = StopFlags()

process_list: ThreadVector[ProcessInformation] = ThreadVector()


def write_to_open_pipes() -> None:
    """Write a null byte to every engine pipe so blocked reads return."""
    with process_list:
        for process in process_list:
            try:
                os.write(process.fd_write, b"\0")
            except OSError as error:
                logger.warn(
                    "Could not write to process with pid/handle {}: {}",
                    process.identifier,
                    error,
                )


def stop_processes() -> None:
    """Forcefully stop every registered engine process."""
    with process_list:
        for process in process_list:
            for signum in (signal.SIGINT, _KILL_SIGNAL):
                try:
                    os.kill(process.identifier, signum)
                except OSError:
                    pass


def console_handler_action() -> None:
    """Raise the stop flags after an interrupt."""
    flags.stop.set()
    flags.abnormal_termination.set()


def _handle_sigint(signum: int, frame: Optional[FrameType]) -> None:
    console_handler_action()


def set_ctrl_c_handler() -> None:
    """Install a SIGINT handler that raises the stop flags."""
    try:
        signal.signal(signal.SIGINT, _handle_sigint)
    except (ValueError, OSError) as error:
        sys.stderr.write(f"Error setting up signal handler: {error}\n")
        sys.stderr.flush()