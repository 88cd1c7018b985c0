# toolbox/hash/crc64.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
CRC64 over the ISO 3309 polynomial, reflected form 0xD800000000000000.

checksum() starts from zero and applies no final xor, so the checksum of an
empty input is 0. Results are unsigned 64-bit integers; to_signed() gives the
two's complement reading used by callers that want a signed long.
"""

from typing import List

POLY64REV = 0xD800000000000000
MASK64 = 0xFFFFFFFFFFFFFFFF


def _build_table() -> List[int]:
    table = []
    for i in range(0x100):
        v = i
        for _ in range(8):
            if v & 1:
                v = (v >> 1) ^ POLY64REV
            else:
                v >>= 1
        table.append(v)
    return table


LOOKUP_TABLE = tuple(_build_table())


def _update(crc: int, data: bytes) -> int:
    table = LOOKUP_TABLE
    for b in data:
        crc = (crc >> 8) ^ table[(crc ^ b) & 0xFF]
    return crc


def checksum(data: bytes, initial: int = 0) -> int:
    """
    Compute the CRC64 of `data`.

    :param data: Bytes-like input.
    :param initial: Starting register value.
    :return: Unsigned 64-bit checksum.
    """
    if data is None:
        raise ValueError("Cannot checksum None")
    return _update(initial & MASK64, bytes(data))


def to_signed(value: int) -> int:
    value &= MASK64
    return value - (1 << 64) if value & (1 << 63) else value


class CRC64:
    """
    Incremental checksum in the style of hashlib objects.
    """

    def __init__(self, data: bytes = b"") -> None:
        self._crc = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> "CRC64":
        self._crc = _update(self._crc, bytes(data))
        return self

    @property
    def value(self) -> int:
        return self._crc

    @property
    def signed_value(self) -> int:
        return to_signed(self._crc)

    def digest(self) -> bytes:
        return self._crc.to_bytes(8, "big")

    def hexdigest(self) -> str:
        return f"{self._crc:016x}"

    def copy(self) -> "CRC64":
        other = CRC64()
        other._crc = self._crc
        return other
