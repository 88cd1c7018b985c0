# tests/unit/ids/test_id_factory.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import uuid

import pytest

from toolbox.hash.crc64 import checksum, to_signed
from toolbox.ids import id_factory
from toolbox.ids.id_factory import is_valid_uuid, random_id, random_uuid


def test_random_uuid_with_hyphens():
    value = random_uuid()
    assert is_valid_uuid(value)
    assert uuid.UUID(value).version == 4


def test_random_uuid_without_hyphens():
    value = random_uuid(with_hyphens=False)
    assert len(value) == 32
    assert is_valid_uuid(value, with_hyphens=False)
    assert not is_valid_uuid(value)


@pytest.mark.parametrize(
    "value, with_hyphens, expected",
    [
        ("123e4567-e89b-12d3-a456-426614174000", True, True),
        ("123E4567-E89B-12D3-A456-426614174000", True, True),
        ("123e4567e89b12d3a456426614174000", True, False),
        ("123e4567e89b12d3a456426614174000", False, True),
        ("123e4567-e89b-12d3-a456-42661417400", True, False),
        ("123e4567-e89b-12d3-a456-42661417400z", True, False),
        ("", True, False),
        (None, True, False),
    ],
)
def test_is_valid_uuid(value, with_hyphens, expected):
    assert is_valid_uuid(value, with_hyphens) is expected


def test_random_id_is_non_negative():
    ids = {random_id() for _ in range(100)}
    assert all(i >= 0 for i in ids)
    assert len(ids) > 90


def test_random_id_follows_uuid_halves(monkeypatch):
    fixed = uuid.UUID("ffffffff-ffff-ffff-0000-000000000001")
    monkeypatch.setattr(id_factory._uuid, "uuid4", lambda: fixed)
    expected = abs(to_signed(checksum(b"1-1")))
    assert random_id() == expected


@pytest.mark.parametrize("divisor", [1, 7, 1000])
def test_random_id_with_divisor(divisor):
    for _ in range(50):
        assert 0 <= random_id(divisor) < divisor


@pytest.mark.parametrize("divisor", [0, -5])
def test_random_id_rejects_bad_divisor(divisor):
    with pytest.raises(ValueError):
        random_id(divisor)
