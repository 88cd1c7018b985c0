# toolbox/runtime/stopwatch.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import time
from typing import Callable, Optional

from toolbox.errors import IllegalStateError
from toolbox.runtime.units import TimeUnit

_INVALID_TIME = -1


class StopWatch:
    """
    Measures elapsed time against a monotonic nanosecond clock.

    Start times passed to start() must be readings of the same clock, expressed
    in the given unit. The watch can also be used as a context manager, which
    starts it on entry and stops it on exit.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock or time.monotonic_ns
        self._start_time = _INVALID_TIME
        self._stop_time = _INVALID_TIME
        self._running = False

    def reset(self) -> "StopWatch":
        self._start_time = _INVALID_TIME
        self._stop_time = _INVALID_TIME
        self._running = False
        return self

    def start(self, start_time: Optional[int] = None, unit: TimeUnit = TimeUnit.NANOSECONDS) -> "StopWatch":
        """
        Start counting, from now or from an earlier clock reading.

        :raises IllegalStateError: If the watch is already running.
        :raises ValueError: If `start_time` lies in the future.
        """
        now = self._clock()
        if self._running:
            raise IllegalStateError("StopWatch already running")
        if start_time is None:
            start_nanos = now
        else:
            start_nanos = TimeUnit.NANOSECONDS.convert(start_time, unit)
            if start_nanos > now:
                raise ValueError("StopWatch cannot count on a future time")
        self._start_time = start_nanos
        self._stop_time = _INVALID_TIME
        self._running = True
        return self

    def stop(self) -> "StopWatch":
        now = self._clock()
        if not self._running:
            raise IllegalStateError("StopWatch is not running")
        self._stop_time = now
        self._running = False
        return self

    @property
    def start_time(self) -> int:
        """Start reading in nanoseconds, or -1 when never started."""
        return self._start_time

    @property
    def is_running(self) -> bool:
        return self._running

    def elapsed_time(self, unit: TimeUnit = TimeUnit.NANOSECONDS) -> int:
        """
        Time counted so far, truncated to `unit`.

        :raises IllegalStateError: If the watch was never started.
        """
        now = self._clock()
        if self._running:
            nanos = now - self._start_time
        elif self._start_time != _INVALID_TIME and self._stop_time != _INVALID_TIME:
            nanos = self._stop_time - self._start_time
        else:
            raise IllegalStateError("StopWatch is not running")
        return unit.convert(nanos, TimeUnit.NANOSECONDS)

    def elapsed_millis_time(self) -> int:
        return self.elapsed_time(TimeUnit.MILLISECONDS)

    def __enter__(self) -> "StopWatch":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._running:
            self.stop()

    def __str__(self) -> str:
        return str(self.elapsed_millis_time())
