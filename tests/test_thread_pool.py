import os
import threading
import time

import pytest

from seika.thread_pool import ThreadPool, ms_to_timespec, processor_count


def test_all_work_runs_before_wait_returns():
    results = []
    lock = threading.Lock()

    def job(value):
        with lock:
            results.append(value)

    pool = ThreadPool(4)
    try:
        for value in range(50):
            assert pool.add_work(job, value) is True
        pool.wait()
        assert sorted(results) == list(range(50))
    finally:
        pool.destroy()


def test_single_thread_preserves_order():
    results = []
    with ThreadPool(1) as pool:
        for value in range(20):
            pool.add_work(results.append, value)
        pool.wait()
        assert results == list(range(20))


def test_zero_threads_defaults_to_more_than_one():
    barrier = threading.Barrier(2, timeout=5)
    done = []

    def job(value):
        barrier.wait()
        done.append(value)

    with ThreadPool(0) as pool:
        assert pool.add_work(job, "first") is True
        assert pool.add_work(job, "second") is True
        pool.wait()
    assert sorted(done) == ["first", "second"]
    assert not barrier.broken


def test_context_manager_waits_for_work():
    results = []
    with ThreadPool(2) as pool:
        for value in range(10):
            pool.add_work(results.append, value)
    assert sorted(results) == list(range(10))


def test_failing_job_does_not_stop_pool():
    results = []

    def bad(_):
        raise RuntimeError("boom")

    with ThreadPool(1) as pool:
        pool.add_work(bad, None)
        pool.add_work(results.append, "ok")
        pool.wait()
    assert results == ["ok"]


def test_add_work_rejects_non_callable():
    with ThreadPool(1) as pool:
        with pytest.raises(TypeError):
            pool.add_work(None, 1)


def test_add_work_after_destroy_raises():
    pool = ThreadPool(1)
    pool.destroy()
    with pytest.raises(RuntimeError):
        pool.add_work(print, 1)


def test_destroy_discards_pending_work():
    started = threading.Event()
    release = threading.Event()
    ran = []

    def blocking(_):
        started.set()
        release.wait(5)

    pool = ThreadPool(1)
    pool.add_work(blocking, None)
    assert started.wait(5)
    pool.add_work(ran.append, "pending")
    timer = threading.Timer(0.2, release.set)
    timer.start()
    pool.destroy()
    timer.join()
    assert ran == []


def test_negative_thread_count_raises():
    with pytest.raises(ValueError):
        ThreadPool(-1)


def test_processor_count_matches_os():
    result = processor_count()
    assert result >= 1
    assert result == (os.cpu_count() or 1)


def test_ms_to_timespec():
    before = int(time.time())
    seconds, nanoseconds = ms_to_timespec(2500)
    after = int(time.time())
    assert before + 2 <= seconds <= after + 2
    assert nanoseconds == 500_000_000


def test_ms_to_timespec_zero_is_now():
    before = int(time.time())
    seconds, nanoseconds = ms_to_timespec(0)
    assert before <= seconds <= int(time.time())
    assert nanoseconds == 0


def test_ms_to_timespec_rejects_negative():
    with pytest.raises(ValueError):
        ms_to_timespec(-1)