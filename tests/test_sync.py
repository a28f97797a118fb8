import threading

import pytest

from gadgetry.sync import MutexIf, using, wait_on, wait_on_sequential


def test_using_holds_lock_during_call():
    lock = threading.Lock()
    seen = []
    result = using(lock, lambda: seen.append(lock.locked()) or "done")
    assert result == "done"
    assert seen == [True]
    assert not lock.locked()


def test_using_releases_on_error():
    lock = threading.Lock()

    def fail():
        raise RuntimeError("bad")

    with pytest.raises(RuntimeError):
        using(lock, fail)
    assert not lock.locked()


def test_mutexif_lock_if_false_does_nothing():
    m = MutexIf()
    assert m.lock_if(False) is False
    assert not m.locked()
    m.unlock_if(False)
    assert not m.locked()


def test_mutexif_lock_if_true_round_trip():
    m = MutexIf()
    assert m.lock_if(True) is True
    assert m.locked()
    m.unlock_if(True)
    assert not m.locked()


def test_mutexif_lock_returns_true():
    m = MutexIf()
    assert m.lock() is True
    assert m.locked()
    m.unlock()
    assert not m.locked()


def test_wait_on_runs_all_concurrently():
    barrier = threading.Barrier(3, timeout=5)
    results = []
    lock = threading.Lock()

    def worker(n):
        def run():
            barrier.wait()
            with lock:
                results.append(n)

        return run

    outcome = wait_on(worker(1), worker(2), worker(3))
    assert outcome is None and sorted(results) == [1, 2, 3]


def test_wait_on_single():
    results = []
    wait_on(lambda: results.append("only"))
    assert results == ["only"]


def test_wait_on_propagates_errors():
    results = []

    def fail():
        raise ValueError("fail")

    with pytest.raises(ValueError):
        wait_on(fail, lambda: results.append(1))
    assert results == [1]


def test_wait_on_sequential_keeps_order():
    results = []
    wait_on_sequential(*(lambda n=n: results.append(n) for n in range(5)))
    assert results == [0, 1, 2, 3, 4]