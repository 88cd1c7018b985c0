# toolbox/formatter/number.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Optional

_INT_MASK = 0xFFFFFFFF
_LONG_MASK = 0xFFFFFFFFFFFFFFFF


def as_long(value: Any) -> Optional[int]:
    """
    Coerce ints and decimal strings to int. Anything else yields None.

    :raises ValueError: If a string is not a decimal integer.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value, 10)
    return None


def int_to_byte_array(value: int) -> bytes:
    """Big-endian 4 bytes; values outside 32 bits are truncated."""
    return (value & _INT_MASK).to_bytes(4, "big")


def byte_array_to_int(data: bytes) -> int:
    """Signed 32-bit value from the first 4 bytes, big-endian."""
    return int.from_bytes(bytes(data[:4]), "big", signed=True)


def long_to_byte_array(value: int) -> bytes:
    """Little-endian 8 bytes; values outside 64 bits are truncated."""
    return (value & _LONG_MASK).to_bytes(8, "little")


def byte_array_to_long(data: bytes) -> int:
    """Signed 64-bit value from the first 8 bytes, little-endian."""
    return int.from_bytes(bytes(data[:8]), "little", signed=True)
