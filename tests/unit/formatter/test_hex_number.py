# tests/unit/formatter/test_hex_number.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest
from hypothesis import given
from hypothesis import strategies as st

from toolbox.formatter import hex as hexfmt
from toolbox.formatter import number

# -----------------------------------------------------------------------------
# HEX
# -----------------------------------------------------------------------------
FOUR_BYTES = bytes([0x00, 0x0F, 0xA5, 0xFF])


def test_encode_is_lowercase():
    assert hexfmt.encode(FOUR_BYTES) == "000fa5ff"
    assert hexfmt.encode(b"") == ""


@pytest.mark.parametrize("text", ["000fa5ff", "000FA5FF", "000Fa5fF"])
def test_decode_accepts_either_case(text):
    assert hexfmt.decode(text) == FOUR_BYTES


@given(st.binary(max_size=64))
def test_decode_inverts_encode(data):
    assert hexfmt.decode(hexfmt.encode(data)) == data


@pytest.mark.parametrize("text", ["abc", "zz", "0g", "é0", None])
def test_decode_rejects_malformed_input(text):
    with pytest.raises(ValueError):
        hexfmt.decode(text)


# -----------------------------------------------------------------------------
# NUMBER
# -----------------------------------------------------------------------------
@pytest.mark.parametrize(
    "value, expected",
    [(None, None), (True, None), (42, 42), ("-17", -17), ("+5", 5), (1.5, None), ([1], None)],
)
def test_as_long(value, expected):
    assert number.as_long(value) == expected


def test_as_long_rejects_non_decimal_string():
    with pytest.raises(ValueError):
        number.as_long("12ab")


def test_int_bytes_are_big_endian():
    assert number.int_to_byte_array(0x01020304) == b"\x01\x02\x03\x04"
    assert number.int_to_byte_array(-1) == b"\xff\xff\xff\xff"
    assert number.byte_array_to_int(b"\xff\xff\xff\xfe") == -2
    assert number.byte_array_to_int(b"\x00\x00\x01\x00\x99") == 256


def test_long_bytes_are_little_endian():
    assert number.long_to_byte_array(1) == b"\x01" + bytes(7)
    assert number.long_to_byte_array(-1) == b"\xff" * 8
    assert number.byte_array_to_long(b"\x00" * 7 + b"\x80") == -(1 << 63)


@given(st.integers(min_value=-(1 << 31), max_value=(1 << 31) - 1))
def test_int_round_trip(value):
    assert number.byte_array_to_int(number.int_to_byte_array(value)) == value


@given(st.integers(min_value=-(1 << 63), max_value=(1 << 63) - 1))
def test_long_round_trip(value):
    assert number.byte_array_to_long(number.long_to_byte_array(value)) == value
