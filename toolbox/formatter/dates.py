# toolbox/formatter/dates.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
RFC2822 and ISO8601 string formatting.

Naive datetimes are taken to be UTC. Parsers return None instead of raising
when the input does not match the expected layout.
"""

import re
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from typing import Optional

_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_ISO8601 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(Z|[+-]\d{2}:\d{2})"
)


def _aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _offset(value: datetime) -> str:
    total = int(value.utcoffset().total_seconds()) // 60
    sign = "+" if total >= 0 else "-"
    hours, minutes = divmod(abs(total), 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def to_rfc2822(value: datetime) -> str:
    """
    Format as `Day, DD Mon YYYY HH:MM:SS +ZZZZ` with English names,
    independent of the process locale.
    """
    value = _aware(value)
    return (
        f"{_DAYS[value.weekday()]}, {value.day:02d} {_MONTHS[value.month - 1]} {value.year:04d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d} {_offset(value)}"
    )


def from_rfc2822(source: str) -> Optional[datetime]:
    if not source:
        return None
    try:
        parsed = parsedate_to_datetime(source)
    except (TypeError, ValueError, IndexError):
        return None
    return _aware(parsed)


def to_iso8601(value: datetime) -> str:
    """
    Format in UTC as `YYYY-MM-DDTHH:MM:SS+00:00`.
    """
    value = _aware(value).astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S") + "+00:00"


def from_iso8601(source: str) -> Optional[datetime]:
    """
    Parse `YYYY-MM-DDTHH:MM:SS` followed by `Z` or a `±HH:MM` offset.
    """
    if not source:
        return None
    match = _ISO8601.fullmatch(source)
    if match is None:
        return None
    year, month, day, hour, minute, second, zone = match.groups()
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        if hours > 23 or minutes > 59:
            return None
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
    try:
        return datetime(int(year), int(month), int(day), int(hour), int(minute), int(second), tzinfo=tz)
    except ValueError:
        return None
