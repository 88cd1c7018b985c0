# toolbox/collection/pair.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Generic, Optional, TypeVar

F = TypeVar("F")
S = TypeVar("S")


class Pair(Generic[F, S]):
    """
    Two mutable, optional slots compared pointwise.
    """

    __slots__ = ("first", "second")

    def __init__(self, first: Optional[F] = None, second: Optional[S] = None) -> None:
        self.first = first
        self.second = second

    def __eq__(self, other: Any) -> bool:
        if other is self:
            return True
        if not isinstance(other, Pair):
            return NotImplemented
        return self.first == other.first and self.second == other.second

    def __hash__(self) -> int:
        first = 0 if self.first is None else hash(self.first) * 31
        second = 0 if self.second is None else hash(self.second)
        return hash(first + second)

    def __iter__(self):
        yield self.first
        yield self.second

    def __repr__(self) -> str:
        return f"Pair({self.first!r}, {self.second!r})"

    def __str__(self) -> str:
        return f"first={self.first}; second={self.second}"
