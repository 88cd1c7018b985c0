# toolbox/validation.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Predicate helpers for validating raw string input.

Every function returns a bool and never raises for None input.
"""

import re
import time
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Type

from toolbox.formatter.boolean import FALSE_TOKENS, TRUE_TOKENS
from toolbox.formatter.dates import from_iso8601

INT_MIN, INT_MAX = -(1 << 31), (1 << 31) - 1
LONG_MIN, LONG_MAX = -(1 << 63), (1 << 63) - 1

_DECIMAL = re.compile(r"[+-]?[0-9]+")
_WORD = re.compile(r"\w*")


def parse_decimal(value: Optional[str], low: int = LONG_MIN, high: int = LONG_MAX) -> Optional[int]:
    """
    Parse a plain decimal string within [low, high], or return None.
    """
    if not isinstance(value, str) or not _DECIMAL.fullmatch(value):
        return None
    number = int(value)
    if number < low or number > high:
        return None
    return number


def is_boolean(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.lower() in TRUE_TOKENS | FALSE_TOKENS


def is_valid_iso8601_date(source: Optional[str]) -> bool:
    return from_iso8601(source) is not None


def is_valid_timestamp(value: Any) -> bool:
    """
    True for datetimes, non-negative ints and non-negative decimal strings
    (milliseconds since the epoch).
    """
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, datetime):
        return True
    if isinstance(value, int):
        return value >= 0
    if isinstance(value, str):
        number = parse_decimal(value)
        return number is not None and number >= 0
    return False


def is_future(value: Optional[str]) -> bool:
    """True if `value` is a millisecond timestamp later than now."""
    if not is_valid_timestamp(value) or not isinstance(value, str):
        return False
    return int(value) > time.time_ns() // 1_000_000


def is_enum_member(enum_type: Type[Enum], name: Optional[str]) -> bool:
    if name is None or not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
        return False
    lowered = name.lower()
    return any(member.name.lower() == lowered for member in enum_type)


def is_integer(value: Optional[str]) -> bool:
    return parse_decimal(value, INT_MIN, INT_MAX) is not None


def is_long(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return LONG_MIN <= value <= LONG_MAX
    return parse_decimal(value) is not None


def is_valid_string(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def is_alphanumeric(value: Optional[str]) -> bool:
    return is_valid_string(value) and _WORD.fullmatch(value) is not None
