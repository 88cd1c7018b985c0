# toolbox/security/random_data.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Random shuffling and sampling backed by the operating system's
cryptographic random source.
"""

import secrets
from typing import List, TypeVar, Union, overload

T = TypeVar("T")

ASCII_TABLE_SIZE = 256
BYTE_ASCII_TABLE = bytes(range(ASCII_TABLE_SIZE))

_rng = secrets.SystemRandom()


@overload
def shuffle(value: str) -> str: ...


@overload
def shuffle(value: bytes) -> bytes: ...


@overload
def shuffle(value: bytearray) -> bytearray: ...


@overload
def shuffle(value: List[T]) -> List[T]: ...


def shuffle(value):
    """
    Shuffle a sequence. Immutable inputs (str, bytes) yield a new shuffled
    copy; mutable inputs (bytearray, list) are shuffled in place and returned.
    """
    if isinstance(value, str):
        chars = list(value)
        _rng.shuffle(chars)
        return "".join(chars)
    if isinstance(value, bytes):
        buf = bytearray(value)
        _rng.shuffle(buf)
        return bytes(buf)
    if isinstance(value, (bytearray, list)):
        _rng.shuffle(value)
        return value
    raise ValueError(f"Cannot shuffle value of type {type(value).__name__}")


def generate(length: int, samples: Union[bytes, str] = BYTE_ASCII_TABLE) -> Union[bytes, str]:
    """
    Draw `length` items uniformly from `samples`.

    :return: bytes for byte samples, str for string samples.
    """
    if length < 0:
        raise ValueError("length cannot be negative")
    if not samples:
        raise ValueError("samples cannot be empty")
    if isinstance(samples, str):
        return "".join(secrets.choice(samples) for _ in range(length))
    pool = bytes(samples)
    return bytes(secrets.choice(pool) for _ in range(length))
