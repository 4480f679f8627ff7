"""A fixed-size pool of worker threads consuming a FIFO queue of jobs."""

from __future__ import annotations

import logging
import os
import threading
import time
from collections import deque
from typing import Any, Callable

logger = logging.getLogger(__name__)

_DEFAULT_THREAD_COUNT = 2
_UINT32_MAX = 2**32 - 1


class ThreadPool:
    """Worker threads that run ``func(arg)`` jobs in the order they were added."""

    def __init__(self, num: int = 0) -> None:
        if num < 0:
            raise ValueError(f"thread count must not be negative, got {num}")
        if num == 0:
            num = _DEFAULT_THREAD_COUNT
        self._lock = threading.Lock()
        self._work_cond = threading.Condition(self._lock)
        self._working_cond = threading.Condition(self._lock)
        self._queue: deque[tuple[Callable[[Any], Any], Any]] = deque()
        self._working_count = 0
        self._thread_count = num
        self._should_stop = False
        self._destroyed = False
        for _ in range(num):
            threading.Thread(target=self._worker, daemon=True).start()

    def _worker(self) -> None:
        while True:
            with self._lock:
                while not self._queue and not self._should_stop:
                    self._work_cond.wait()
                if self._should_stop:
                    break
                func, arg = self._queue.popleft()
                self._working_count += 1
            try:
                func(arg)
            except Exception:
                logger.exception("Thread pool job %r failed", func)
            with self._lock:
                self._working_count -= 1
                if not self._should_stop and self._working_count == 0 and not self._queue:
                    self._working_cond.notify_all()
        with self._lock:
            self._thread_count -= 1
            self._working_cond.notify_all()

    def add_work(self, func: Callable[[Any], Any], arg: Any = None) -> bool:
        """Queue ``func(arg)`` for a worker thread."""
        if not callable(func):
            raise TypeError(f"work function must be callable, got {func!r}")
        with self._lock:
            if self._should_stop:
                raise RuntimeError("cannot add work to a destroyed thread pool")
            self._queue.append((func, arg))
            self._work_cond.notify_all()
        return True

    def wait(self) -> None:
        """Block until every queued job has finished, or all workers have exited after destroy."""
        with self._lock:
            while True:
                busy = not self._should_stop and (self._working_count or self._queue)
                draining = self._should_stop and self._thread_count != 0
                if busy or draining:
                    self._working_cond.wait()
                else:
                    break

    def destroy(self) -> None:
        """Drop pending jobs, stop the workers and wait for them to exit."""
        with self._lock:
            if self._destroyed:
                return
            self._destroyed = True
            self._queue.clear()
            self._should_stop = True
            self._work_cond.notify_all()
        self.wait()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.wait()
        self.destroy()


def processor_count() -> int:
    """Number of processors currently online."""
    return os.cpu_count() or 1


def ms_to_timespec(ms: int) -> tuple[int, int]:
    """Absolute ``(seconds, nanoseconds)`` deadline ``ms`` milliseconds from now."""
    if ms < 0 or ms > _UINT32_MAX:
        raise ValueError(f"milliseconds must fit an unsigned 32-bit value, got {ms}")
    seconds = ms // 1000 + int(time.time())
    nanoseconds = (ms % 1000) * 1_000_000
    return seconds, nanoseconds