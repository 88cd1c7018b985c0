"""
Serialization package: a byte-oriented serializer facade with a JSON
implementation.
"""

from .errors import SerializationError
from .json_serializer import JSONSerializer
from .serializer import Serializer

__all__ = ["JSONSerializer", "SerializationError", "Serializer"]
