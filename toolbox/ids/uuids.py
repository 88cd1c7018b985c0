# toolbox/ids/uuids.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Sharded UUID generation.

A shard space of size N partitions identifiers by the integer value of their
first four hex digits modulo N. generate() draws random candidates until one
lands in the requested shard; every miss is parked in a process-wide cache
keyed by the space size and the shard it did land in, so a later request
for that shard of the same space is served without drawing.
"""

from __future__ import annotations

import logging
import re
import secrets
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from toolbox.formatter import hex as hexfmt
from toolbox.runtime.concurrency import get_lock, with_lock

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 1
MAX_SIZE = 32767
UUID_BYTES = 16

_MSB = 0x8000000000000000
_VALIDATION_PATTERN = re.compile(r"[0-9a-fA-F]{32}")

_cache: Dict[Tuple[int, int], str] = {}
_cache_lock = get_lock()


@dataclass(frozen=True)
class Uuid:
    """
    An immutable 16-byte identifier. Equality and hashing use the bytes.
    """

    id: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.id, (bytes, bytearray)):
            raise ValueError("Uuid value must be bytes")
        if len(self.id) != UUID_BYTES:
            raise ValueError(f"Uuid value must be {UUID_BYTES} bytes long")
        object.__setattr__(self, "id", bytes(self.id))

    @classmethod
    def from_hex(cls, value: str) -> "Uuid":
        return cls(hexfmt.decode(value.replace("-", "")))

    @property
    def value(self) -> bytes:
        return self.id

    def hex(self) -> str:
        return hexfmt.encode(self.id)

    def __str__(self) -> str:
        return self.hex()


def _validate(size: int, target: int) -> None:
    if size <= 0 or size > MAX_SIZE:
        raise ValueError(f"size cannot be less than one or greater than {MAX_SIZE}")
    if target < 0:
        raise ValueError("target cannot be less than zero")
    if target >= size:
        raise ValueError("target cannot be greater than or equal to size")


def _candidate() -> str:
    # The forced top bit keeps each half at exactly 16 hex digits.
    return f"{_MSB | secrets.randbits(64):016x}{_MSB | secrets.randbits(64):016x}"


def shard(size: int, uuid: str) -> int:
    """
    Shard of a hex uuid string: its first four hex digits modulo `size`.
    """
    if size <= 0 or size > MAX_SIZE:
        raise ValueError(f"size cannot be less than one or greater than {MAX_SIZE}")
    return int(uuid[:4], 16) % size


def generate(size: int, target: int) -> Optional[Uuid]:
    """
    Produce a Uuid in shard `target` of a space of `size` shards.

    :raises ValueError: If size is outside [1, MAX_SIZE] or target outside [0, size).
    :return: The Uuid, or None if MAX_SIZE draws all missed.
    """
    _validate(size, target)

    with with_lock(_cache_lock):
        cached = _cache.pop((size, target), None)
    if cached is not None:
        logger.debug("Serving shard %d of %d from the miss cache", target, size)
        return Uuid(hexfmt.decode(cached))

    for _ in range(MAX_SIZE):
        candidate = _candidate()
        landed = int(candidate[:4], 16) % size
        if landed == target:
            return Uuid(hexfmt.decode(candidate))
        with with_lock(_cache_lock):
            _cache[(size, landed)] = candidate

    logger.warning("No uuid found for shard %d of %d after %d draws", target, size, MAX_SIZE)
    return None


def clear_cache() -> None:
    with with_lock(_cache_lock):
        _cache.clear()


def is_valid(uuid: Optional[str]) -> bool:
    """True only for 32 hex digits without hyphens."""
    return isinstance(uuid, str) and _VALIDATION_PATTERN.fullmatch(uuid) is not None


class UuidFactory:
    """
    A generator bound to one shard space size.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0 or size > MAX_SIZE:
            raise ValueError(f"size cannot be less than one or greater than {MAX_SIZE}")
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    def generate(self, target: int) -> Optional[Uuid]:
        return generate(self._size, target)

    def target(self, uuid: str) -> int:
        return shard(self._size, uuid)
