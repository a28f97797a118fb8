"""Locking and concurrent-execution helpers."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable


def using(lock, do: Callable[[], Any]) -> Any:
    """Call ``do`` while holding ``lock`` and return its result."""
    with lock:
        return do()


class MutexIf:
    """A mutex for conditional locking: ``m.unlock_if(m.lock_if(cond))``."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def lock(self) -> bool:
        """Acquire the mutex and return ``True``."""
        self._lock.acquire()
        return True

    def unlock(self) -> None:
        """Release the mutex."""
        self._lock.release()

    def locked(self) -> bool:
        """Return whether the mutex is currently held."""
        return self._lock.locked()

    def lock_if(self, lock: bool) -> bool:
        """Acquire the mutex if ``lock`` is true, then return ``lock``."""
        if lock:
            self._lock.acquire()
        return lock

    def unlock_if(self, unlock: bool) -> None:
        """Release the mutex if ``unlock`` is true."""
        if unlock:
            self._lock.release()

    def __enter__(self) -> "MutexIf":
        self.lock()
        return self

    def __exit__(self, *exc) -> None:
        self.unlock()


def wait_on(*funcs: Callable[[], Any]) -> None:
    """Run all ``funcs`` concurrently and wait until every one has finished.

    The first exception raised by any of them is re-raised afterwards.
    """
    if not funcs:
        return
    if len(funcs) == 1:
        funcs[0]()
        return
    with ThreadPoolExecutor(max_workers=len(funcs)) as pool:
        futures = [pool.submit(fn) for fn in funcs]
    for future in futures:
        future.result()


def wait_on_sequential(*funcs: Callable[[], Any]) -> None:
    """Run all ``funcs`` one after another, in order."""
    for fn in funcs:
        fn()