# toolbox/runtime/concurrency.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import threading
from contextlib import contextmanager


class _LockFactory:
    """
    Internal factory for producing threading.Lock instances, or reentrant
    locks when a holder may need to acquire the same lock again.
    """

    def create_lock(self, reentrant: bool = False):
        """
        Return a new lock instance.

        :param reentrant: Produce a threading.RLock instead of a plain lock.
        """
        return threading.RLock() if reentrant else threading.Lock()


def get_lock(reentrant: bool = False):
    """
    Return a fresh lock for guarding toolbox state.
    """
    return _LockFactory().create_lock(reentrant)


@contextmanager
def with_lock(lock):
    """
    Hold `lock` for the duration of the block, releasing it even when the
    block raises.
    """
    lock.acquire()
    try:
        yield
    finally:
        lock.release()


class AtomicBoolean:
    """
    A boolean flag whose transitions are serialized by a lock. Reads and
    writes are visible to every thread once they return.
    """

    __slots__ = ("_value", "_lock")

    def __init__(self, initial: bool = False) -> None:
        self._value = bool(initial)
        self._lock = get_lock()

    def get(self) -> bool:
        """Return the current value."""
        with with_lock(self._lock):
            return self._value

    def set(self, value: bool) -> None:
        """Unconditionally store a new value."""
        with with_lock(self._lock):
            self._value = bool(value)

    def compare_and_set(self, expect: bool, update: bool) -> bool:
        """
        Store `update` only if the current value equals `expect`.

        :return: True if the value was changed, False if another thread won.
        """
        with with_lock(self._lock):
            if self._value != expect:
                return False
            self._value = bool(update)
            return True

    def get_and_set(self, value: bool) -> bool:
        """Store a new value and return the previous one."""
        with with_lock(self._lock):
            previous = self._value
            self._value = bool(value)
            return previous

    def __bool__(self) -> bool:
        return self.get()

    def __repr__(self) -> str:
        return f"AtomicBoolean({self.get()})"
