# toolbox/runtime/timers.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import heapq
import itertools
import time
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from toolbox.runtime.concurrency import get_lock, with_lock
from toolbox.runtime.units import TimeUnit

EXPIRED = -1


def _wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass(frozen=True, order=True)
class Timer:
    """
    A scheduled entry. Ordering uses the absolute expiry first and the
    insertion sequence second, never the context.
    """

    expiry_at_ms: int
    sequence: int
    delay_ms: int = field(compare=False)
    context: Any = field(compare=False, default=None)

    def is_expired(self, now_ms: int) -> bool:
        return self.expiry_at_ms <= now_ms


class TimerQueue:
    """
    A thread-safe min-heap of timers keyed on absolute expiry time. Callers
    add timers with a relative delay and periodically drain the contexts of
    those that have expired.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        """
        :param clock: Source of the current wall-clock time in milliseconds.
            Defaults to the system clock.
        """
        self._clock = clock or _wall_clock_ms
        self._heap: List[Timer] = []
        self._counter = itertools.count()
        self._lock = get_lock()

    def add(self, delay: int, unit: TimeUnit, context: Any = None) -> Timer:
        """
        Schedule `context` to expire `delay` units from now.

        :param delay: Non-negative delay.
        :param unit: Unit of the delay.
        :param context: Opaque payload handed back by drain_expired().
        :raises ValueError: If the delay is negative or the unit is missing.
        """
        if delay < 0:
            raise ValueError("Cannot add an expired time to the queue")
        if unit is None:
            raise ValueError("TimeUnit cannot be None")
        if not isinstance(unit, TimeUnit):
            raise ValueError("unit must be a TimeUnit")

        delay_ms = TimeUnit.MILLISECONDS.convert(delay, unit)
        with with_lock(self._lock):
            timer = Timer(
                expiry_at_ms=self._clock() + delay_ms,
                sequence=next(self._counter),
                delay_ms=delay_ms,
                context=context,
            )
            heapq.heappush(self._heap, timer)
        return timer

    def first_delay(self) -> int:
        """
        Milliseconds until the head timer expires.

        :return: 0 when the queue is empty, EXPIRED (-1) when the head has
            already expired, otherwise a positive number of milliseconds.
        """
        with with_lock(self._lock):
            if not self._heap:
                return 0
            remaining = self._heap[0].expiry_at_ms - self._clock()
        return remaining if remaining > 0 else EXPIRED

    def drain_expired(self) -> List[Any]:
        """
        Remove every expired timer and return their non-None contexts in
        expiry order.
        """
        expired = []
        with with_lock(self._lock):
            now = self._clock()
            while self._heap and self._heap[0].is_expired(now):
                timer = heapq.heappop(self._heap)
                if timer.context is not None:
                    expired.append(timer.context)
        return expired

    def clear(self) -> None:
        with with_lock(self._lock):
            self._heap.clear()

    def __len__(self) -> int:
        with with_lock(self._lock):
            return len(self._heap)

    def is_empty(self) -> bool:
        return len(self) == 0
