# toolbox/runtime/units.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from enum import Enum


class TimeUnit(Enum):
    """
    Time granularities used by grace times, timer delays and stop watches.
    Each member's value is its length in nanoseconds.
    """

    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000
    MINUTES = 60_000_000_000
    HOURS = 3_600_000_000_000
    DAYS = 86_400_000_000_000

    def convert(self, duration: int, source: "TimeUnit") -> int:
        """
        Convert `duration` expressed in `source` units into this unit.
        Conversions to a coarser unit truncate toward zero.

        :param duration: Amount of time in the source unit.
        :param source: Unit the duration is expressed in.
        """
        if not isinstance(source, TimeUnit):
            raise ValueError("Source unit must be a TimeUnit")
        nanos = int(duration) * source.value
        if nanos < 0:
            return -((-nanos) // self.value)
        return nanos // self.value

    def to_nanos(self, duration: int) -> int:
        return TimeUnit.NANOSECONDS.convert(duration, self)

    def to_millis(self, duration: int) -> int:
        return TimeUnit.MILLISECONDS.convert(duration, self)

    def to_seconds(self, duration: int) -> float:
        """Exact number of seconds, as a float, for use with time APIs."""
        return int(duration) * self.value / TimeUnit.SECONDS.value
