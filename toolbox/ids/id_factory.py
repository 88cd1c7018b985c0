# toolbox/ids/id_factory.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import re
import secrets
import uuid as _uuid
from typing import Optional

from toolbox.hash.crc64 import checksum, to_signed

_NO_HYPHENS = re.compile(r"[0-9a-fA-F]{32}")
_WITH_HYPHENS = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")


def is_valid_uuid(value: Optional[str], with_hyphens: bool = True) -> bool:
    if not isinstance(value, str):
        return False
    pattern = _WITH_HYPHENS if with_hyphens else _NO_HYPHENS
    return pattern.fullmatch(value) is not None


def random_uuid(with_hyphens: bool = True) -> str:
    """A random (version 4) uuid string."""
    value = _uuid.uuid4()
    return str(value) if with_hyphens else value.hex


def random_id(divisor: Optional[int] = None) -> int:
    """
    A non-negative numeric id.

    Without a divisor the id is the absolute signed CRC64 of the decimal text
    of a random uuid's least then most significant 64-bit halves. With a
    divisor it is the absolute signed CRC64 of 16 random bytes modulo divisor.
    """
    if divisor is None:
        value = _uuid.uuid4().int
        most = to_signed(value >> 64)
        least = to_signed(value)
        return abs(to_signed(checksum(f"{least}{most}".encode("ascii"))))
    if divisor <= 0:
        raise ValueError("divisor must be positive")
    return abs(to_signed(checksum(secrets.token_bytes(16)))) % divisor
