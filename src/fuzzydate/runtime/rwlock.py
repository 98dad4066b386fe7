"""Readers-writer lock guarding FuzzyConfig alias tables.

Conversions only read the registered token and pattern aliases, while
registration replaces them. The lock lets any number of conversions snapshot
the aliases concurrently and gives registration exclusive access:

- Multiple concurrent readers (to_datetime, to_date, to_seconds)
- Exclusive writer (add_tokens, add_patterns, add_locale)
- Writer preference, so a steady stream of conversions cannot starve
  registration
- Reentrant reads within one thread
- Optional acquisition timeout (raises TimeoutError)

Read-to-write upgrades, write-to-read downgrades and nested write
acquisition all raise RuntimeError: every FuzzyConfig path takes exactly one
lock level, so nesting indicates a programming error.

Python 3.13+.
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     pass  # shared with other readers
        >>> with lock.write(timeout=1.0):
        ...     pass  # exclusive
    """

    __slots__ = (
        "_active_readers",
        "_active_writer",
        "_condition",
        "_reader_threads",
        "_waiting_writers",
    )

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._active_readers: int = 0
        # Thread ident of the writer, if any
        self._active_writer: int | None = None
        self._waiting_writers: int = 0
        # Thread ident -> reentrant read depth
        self._reader_threads: dict[int, int] = {}

    @contextmanager
    def read(self, timeout: float | None = None) -> Generator[None]:
        """Hold the lock in shared mode.

        Args:
            timeout: Seconds to wait; None waits indefinitely, 0.0 does not
                block.

        Raises:
            RuntimeError: If the thread holds the write lock.
            TimeoutError: If the lock is not acquired in time.
            ValueError: If timeout is negative.
        """
        self._acquire_read(timeout)
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self, timeout: float | None = None) -> Generator[None]:
        """Hold the lock in exclusive mode.

        Args:
            timeout: Seconds to wait; None waits indefinitely, 0.0 does not
                block.

        Raises:
            RuntimeError: If the thread already holds the read or write lock.
            TimeoutError: If the lock is not acquired in time.
            ValueError: If timeout is negative.
        """
        self._acquire_write(timeout)
        try:
            yield
        finally:
            self._release_write()

    @staticmethod
    def _deadline(timeout: float | None) -> float | None:
        if timeout is None:
            return None
        if timeout < 0:
            msg = f"Timeout must be non-negative, got {timeout}"
            raise ValueError(msg)
        return time.monotonic() + timeout

    def _wait(self, deadline: float | None, what: str) -> None:
        """Wait on the condition once, honouring the deadline."""
        if deadline is None:
            self._condition.wait()
            return
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            msg = f"Timed out waiting for {what} lock"
            raise TimeoutError(msg)
        self._condition.wait(timeout=remaining)

    def _acquire_read(self, timeout: float | None) -> None:
        deadline = self._deadline(timeout)
        thread_id = threading.get_ident()

        with self._condition:
            if thread_id in self._reader_threads:
                self._reader_threads[thread_id] += 1
                return

            if self._active_writer == thread_id:
                msg = (
                    "Cannot acquire read lock while holding write lock. "
                    "Release the write lock before acquiring a read lock."
                )
                raise RuntimeError(msg)

            while self._active_writer is not None or self._waiting_writers > 0:
                self._wait(deadline, "read")

            self._active_readers += 1
            self._reader_threads[thread_id] = 1

    def _release_read(self) -> None:
        thread_id = threading.get_ident()

        with self._condition:
            depth = self._reader_threads.get(thread_id)
            if depth is None:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)

            if depth > 1:
                self._reader_threads[thread_id] = depth - 1
                return

            del self._reader_threads[thread_id]
            self._active_readers -= 1
            if self._active_readers == 0:
                self._condition.notify_all()

    def _acquire_write(self, timeout: float | None) -> None:
        deadline = self._deadline(timeout)
        thread_id = threading.get_ident()

        with self._condition:
            if thread_id in self._reader_threads:
                msg = (
                    "Cannot upgrade read lock to write lock. "
                    "Release read lock before acquiring write lock."
                )
                raise RuntimeError(msg)

            if self._active_writer == thread_id:
                msg = (
                    "Cannot acquire write lock: already holding write lock. "
                    "Release the write lock before acquiring it again."
                )
                raise RuntimeError(msg)

            self._waiting_writers += 1
            try:
                while self._active_readers > 0 or self._active_writer is not None:
                    self._wait(deadline, "write")
                self._active_writer = thread_id
            finally:
                # Readers blocked on writer preference must re-check after a
                # writer stops waiting, including on timeout.
                self._waiting_writers -= 1
                self._condition.notify_all()

    def _release_write(self) -> None:
        thread_id = threading.get_ident()

        with self._condition:
            if self._active_writer != thread_id:
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)

            self._active_writer = None
            self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Number of distinct threads currently holding the read lock."""
        with self._condition:
            return self._active_readers

    @property
    def writer_active(self) -> bool:
        """True while some thread holds the write lock."""
        with self._condition:
            return self._active_writer is not None

    @property
    def writers_waiting(self) -> int:
        """Number of threads blocked waiting for the write lock."""
        with self._condition:
            return self._waiting_writers
