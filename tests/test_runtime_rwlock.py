"""Tests for the readers-writer lock guarding FuzzyConfig alias tables.

Tests verify:
- Shared readers, exclusive writer
- Writer preference over newly arriving readers
- Reentrant reads; rejected upgrade, downgrade and nested write
- Acquisition timeouts
- Inspection properties
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from fuzzydate.runtime.rwlock import RWLock


class TestSharedAndExclusive:
    """Readers share the lock, writers hold it alone."""

    def test_concurrent_readers(self) -> None:
        """Several threads hold the read lock at the same time."""
        lock = RWLock()
        entered = threading.Barrier(4, timeout=2.0)
        observed_all = threading.Barrier(4, timeout=2.0)
        observed: list[int] = []

        def reader() -> None:
            with lock.read():
                entered.wait()
                observed.append(lock.reader_count)
                observed_all.wait()

        with ThreadPoolExecutor(max_workers=4) as executor:
            for future in [executor.submit(reader) for _ in range(4)]:
                future.result()

        assert observed == [4, 4, 4, 4]
        assert lock.reader_count == 0

    def test_writer_excludes_readers(self) -> None:
        lock = RWLock()
        writer_holding = threading.Event()
        release_writer = threading.Event()
        reader_entered = threading.Event()

        def writer() -> None:
            with lock.write():
                writer_holding.set()
                release_writer.wait(timeout=2.0)

        def reader() -> None:
            with lock.read():
                reader_entered.set()

        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        writer_holding.wait(timeout=2.0)

        reader_thread = threading.Thread(target=reader)
        reader_thread.start()

        assert not reader_entered.wait(timeout=0.05)

        release_writer.set()
        writer_thread.join()
        reader_thread.join()
        assert reader_entered.is_set()

    def test_readers_exclude_writer(self) -> None:
        lock = RWLock()

        with lock.read():
            result: list[BaseException] = []

            def writer() -> None:
                try:
                    with lock.write(timeout=0.05):
                        pass
                except TimeoutError as e:
                    result.append(e)

            thread = threading.Thread(target=writer)
            thread.start()
            thread.join()

        assert len(result) == 1


class TestWriterPreference:
    def test_waiting_writer_blocks_new_readers(self) -> None:
        """A reader arriving after a waiting writer enters only after the writer."""
        lock = RWLock()
        order: list[str] = []
        first_reader_holding = threading.Event()
        release_first_reader = threading.Event()

        def first_reader() -> None:
            with lock.read():
                first_reader_holding.set()
                release_first_reader.wait(timeout=2.0)

        def writer() -> None:
            with lock.write():
                order.append("writer")

        def late_reader() -> None:
            with lock.read():
                order.append("reader")

        threads = [threading.Thread(target=first_reader)]
        threads[0].start()
        first_reader_holding.wait(timeout=2.0)

        threads.append(threading.Thread(target=writer))
        threads[1].start()
        deadline = time.monotonic() + 2.0
        while lock.writers_waiting == 0 and time.monotonic() < deadline:
            time.sleep(0.001)

        threads.append(threading.Thread(target=late_reader))
        threads[2].start()
        time.sleep(0.02)

        release_first_reader.set()
        for thread in threads:
            thread.join()

        assert order == ["writer", "reader"]

    def test_timed_out_writer_releases_waiting_readers(self) -> None:
        """Readers blocked behind a writer proceed once that writer gives up."""
        lock = RWLock()
        reader_holding = threading.Event()
        release_reader = threading.Event()
        outcomes: list[str] = []

        def holder() -> None:
            with lock.read():
                reader_holding.set()
                release_reader.wait(timeout=2.0)

        def impatient_writer() -> None:
            try:
                with lock.write(timeout=0.05):
                    outcomes.append("writer")
            except TimeoutError:
                outcomes.append("writer timed out")

        holder_thread = threading.Thread(target=holder)
        holder_thread.start()
        reader_holding.wait(timeout=2.0)

        writer_thread = threading.Thread(target=impatient_writer)
        writer_thread.start()
        writer_thread.join()

        with lock.read(timeout=1.0):
            outcomes.append("reader")

        release_reader.set()
        holder_thread.join()

        assert outcomes == ["writer timed out", "reader"]
        assert lock.writers_waiting == 0


class TestReentrancy:
    def test_nested_reads(self) -> None:
        lock = RWLock()

        with lock.read(), lock.read():
            assert lock.reader_count == 1

        assert lock.reader_count == 0

    def test_read_to_write_upgrade_rejected(self) -> None:
        lock = RWLock()

        with lock.read(), pytest.raises(
            RuntimeError, match="Cannot upgrade read lock to write lock"
        ), lock.write():
            pass

    def test_nested_write_rejected(self) -> None:
        lock = RWLock()

        with lock.write(), pytest.raises(
            RuntimeError, match="already holding write lock"
        ), lock.write():
            pass

    def test_write_to_read_downgrade_rejected(self) -> None:
        lock = RWLock()

        with lock.write(), pytest.raises(
            RuntimeError, match="Cannot acquire read lock while holding write lock"
        ), lock.read():
            pass

    def test_lock_usable_after_rejection(self) -> None:
        lock = RWLock()

        with lock.read(), pytest.raises(RuntimeError), lock.write():
            pass

        with lock.write():
            assert lock.writer_active


class TestErrors:
    def test_release_read_without_acquire(self) -> None:
        lock = RWLock()
        with pytest.raises(RuntimeError, match="does not hold read lock"):
            lock._release_read()

    def test_release_write_from_other_thread(self) -> None:
        lock = RWLock()

        thread = threading.Thread(target=lock._acquire_write, args=(None,))
        thread.start()
        thread.join()

        with pytest.raises(RuntimeError, match="does not hold write lock"):
            lock._release_write()

    def test_negative_timeout(self) -> None:
        lock = RWLock()

        with pytest.raises(ValueError, match="non-negative"), lock.read(timeout=-1.0):
            pass

    def test_zero_timeout_when_free(self) -> None:
        lock = RWLock()

        with lock.write(timeout=0.0):
            assert lock.writer_active

    def test_context_released_on_exception(self) -> None:
        lock = RWLock()

        with pytest.raises(KeyError), lock.write():
            raise KeyError("boom")

        assert not lock.writer_active
        with lock.read(timeout=0.0):
            assert lock.reader_count == 1


class TestInspection:
    def test_idle_lock(self) -> None:
        lock = RWLock()

        assert lock.reader_count == 0
        assert not lock.writer_active
        assert lock.writers_waiting == 0

    def test_writer_active_only_inside_write(self) -> None:
        lock = RWLock()

        with lock.read():
            assert not lock.writer_active
        with lock.write():
            assert lock.writer_active
        assert not lock.writer_active
