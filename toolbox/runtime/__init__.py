"""
Runtime package for timing, thread-local context and concurrency primitives.

Architecture:
- Atomic flags and lock helpers shared by the lifecycle framework
- Time units used by grace times and timer delays
- Timer queue ordered by absolute expiry
- Per-thread scratchpads
- Stop watch over a monotonic clock
"""

from .concurrency import AtomicBoolean, get_lock, with_lock
from .context import ThreadInfo
from .stopwatch import StopWatch
from .timers import EXPIRED, Timer, TimerQueue
from .units import TimeUnit

__all__ = [
    "AtomicBoolean",
    "get_lock",
    "with_lock",
    "ThreadInfo",
    "StopWatch",
    "EXPIRED",
    "Timer",
    "TimerQueue",
    "TimeUnit",
]
