"""A fixed-size pool of worker threads consuming a FIFO task queue."""

from __future__ import annotations

import threading
from collections import deque
from concurrent.futures import Future
from types import TracebackType
from typing import Any, Callable, Deque, List, Optional, Tuple, Type

_Task = Tuple["Future[Any]", Callable[[], Any]]


class ThreadPool:
    """Runs enqueued callables on a set of worker threads."""

    def __init__(self, num_threads: int) -> None:
        self._tasks: Deque[_Task] = deque()
        self._condition = threading.Condition()
        self._stop = False
        self._workers: List[threading.Thread] = []
        self._spawn(num_threads)

    def enqueue(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> "Future[Any]":
        """Queue func(*args, **kwargs); the returned future holds its outcome."""
        future: "Future[Any]" = Future()
        with self._condition:
            if self._stop:
                raise RuntimeError("Error; enqueue on stopped ThreadPool")
            self._tasks.append((future, lambda: func(*args, **kwargs)))
            self._condition.notify()
        return future

    def resize(self, num_threads: int) -> None:
        """Restart the pool with a new number of workers, dropping queued tasks."""
        if num_threads == 0:
            raise ValueError("Error; ThreadPool.resize() - num_threads cannot be 0")
        if num_threads == len(self._workers):
            return

        self.kill()
        with self._condition:
            self._stop = False
        self._spawn(num_threads)

    def kill(self) -> None:
        """Stop the pool: cancel queued tasks and wait for running ones to end."""
        with self._condition:
            if self._stop:
                return
            self._stop = True
            pending = list(self._tasks)
            self._tasks.clear()
            self._condition.notify_all()

        for future, _ in pending:
            future.cancel()

        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()
        self._workers = []

    def queue_size(self) -> int:
        """Number of tasks waiting to be picked up."""
        with self._condition:
            return len(self._tasks)

    def stopped(self) -> bool:
        """True once the pool has been killed and not restarted."""
        return self._stop

    def num_threads(self) -> int:
        """Number of worker threads."""
        return len(self._workers)

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.kill()

    def _spawn(self, num_threads: int) -> None:
        for _ in range(num_threads):
            worker = threading.Thread(target=self._work, daemon=True)
            worker.start()
            self._workers.append(worker)

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._stop or bool(self._tasks))
                if self._stop and not self._tasks:
                    return
                future, call = self._tasks.popleft()

            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = call()
            except BaseException as error:  # stored for whoever reads the future
                future.set_exception(error)
            else:
                future.set_result(result)