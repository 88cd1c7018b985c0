# toolbox/serialization/serializer.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from abc import ABC, abstractmethod
from typing import Any, Optional, Type, TypeVar

T = TypeVar("T")


class Serializer(ABC):
    """
    Converts object graphs to and from a byte wire form.
    """

    @abstractmethod
    def deflate(self, obj: Any) -> bytes:
        """
        Encode `obj` to bytes.

        :raises SerializationError: If the graph cannot be encoded.
        """

    @abstractmethod
    def inflate(self, type_: Type[T], data: bytes) -> Optional[T]:
        """
        Decode `data` into an instance of `type_`.
        """

    @abstractmethod
    def clone(self, obj: T) -> T:
        """
        Produce a structural deep copy of `obj`.
        """
