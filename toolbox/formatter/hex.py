# toolbox/formatter/hex.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import binascii


def encode(data: bytes) -> str:
    """
    Lowercase hex, two characters per byte, no separator.
    """
    return binascii.hexlify(bytes(data)).decode("ascii")


def decode(data: str) -> bytes:
    """
    Decode a hex string in either case.

    :raises ValueError: On odd length or non-hex characters.
    """
    if data is None:
        raise ValueError("Cannot decode None")
    try:
        return binascii.unhexlify(data)
    except (ValueError, TypeError) as e:
        raise ValueError(f"Invalid hex string: {data!r}") from e
