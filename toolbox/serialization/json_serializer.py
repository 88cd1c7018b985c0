# toolbox/serialization/json_serializer.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import copy
import dataclasses
import json
import logging
import typing
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from toolbox.hints import unwrap_optional
from toolbox.serialization.errors import SerializationError
from toolbox.serialization.serializer import Serializer

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SCALARS = (str, int, float, bool)


def _to_plain(value: Any, seen: set) -> Any:
    if value is None or isinstance(value, _SCALARS):
        return value
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return list(value)

    marker = id(value)
    if marker in seen:
        raise SerializationError(f"Circular reference to {type(value).__name__} object")
    seen.add(marker)
    try:
        if isinstance(value, dict):
            return {str(k): _to_plain(v, seen) for k, v in value.items()}
        if isinstance(value, (list, tuple, set, frozenset)):
            return [_to_plain(v, seen) for v in value]
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return {f.name: _to_plain(getattr(value, f.name), seen) for f in dataclasses.fields(value)}
        if hasattr(value, "__dict__"):
            return {k: _to_plain(v, seen) for k, v in vars(value).items()}
    finally:
        seen.discard(marker)
    raise SerializationError(f"Cannot serialize object of type {type(value).__name__}")


def _from_plain(type_: Any, raw: Any) -> Any:
    type_ = unwrap_optional(type_)
    if raw is None or type_ is Any or type_ is None:
        return raw

    origin = typing.get_origin(type_)
    if origin in (list, set, frozenset, tuple):
        args = typing.get_args(type_)
        item = args[0] if args else Any
        return origin(_from_plain(item, v) for v in raw)
    if origin is dict:
        args = typing.get_args(type_)
        item = args[1] if len(args) == 2 else Any
        return {k: _from_plain(item, v) for k, v in raw.items()}
    if not isinstance(type_, type):
        return raw

    if issubclass(type_, Enum):
        return type_[raw]
    if issubclass(type_, datetime):
        return datetime.fromisoformat(raw)
    if issubclass(type_, date):
        return date.fromisoformat(raw)
    if issubclass(type_, (bytes, bytearray)):
        return type_(raw)
    if issubclass(type_, float) and isinstance(raw, int) and not isinstance(raw, bool):
        return float(raw)
    if type_ in (dict, list, str, int, bool, float, tuple, set, frozenset):
        if type_ in (tuple, set, frozenset) and isinstance(raw, list):
            return type_(raw)
        if not isinstance(raw, type_):
            raise TypeError(f"expected {type_.__name__}, got {type(raw).__name__}")
        return raw
    if not isinstance(raw, dict):
        raise TypeError(f"expected an object for {type_.__name__}, got {type(raw).__name__}")

    hints = typing.get_type_hints(type_)
    if dataclasses.is_dataclass(type_):
        kwargs = {}
        for f in dataclasses.fields(type_):
            if f.name in raw:
                kwargs[f.name] = _from_plain(hints.get(f.name, Any), raw[f.name])
        return type_(**kwargs)

    # Plain classes are built without calling __init__, fields set directly.
    instance = type_.__new__(type_)
    for key, value in raw.items():
        setattr(instance, key, _from_plain(hints.get(key, Any), value))
    return instance


class JSONSerializer(Serializer):
    """
    Serializer using UTF-8 encoded JSON as the wire form.

    Dataclasses and plain objects deflate to JSON objects of their fields,
    enums to their member name, dates to ISO strings and bytes to arrays of
    integers. inflate() rebuilds the requested type from the field type hints.
    """

    def __init__(self, indent: Optional[int] = None, sort_keys: bool = False) -> None:
        self._indent = indent
        self._sort_keys = sort_keys

    def deflate(self, obj: Any) -> bytes:
        try:
            plain = _to_plain(obj, set())
            return json.dumps(plain, indent=self._indent, sort_keys=self._sort_keys).encode("utf-8")
        except SerializationError:
            raise
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot deflate {type(obj).__name__}: {e}") from e

    def inflate(self, type_: Type[T], data: bytes) -> Optional[T]:
        """
        Decode `data` into `type_`.

        :return: The instance, or None if `data` is not well-formed JSON.
        :raises ValueError: If `data` is None.
        :raises SerializationError: If the document does not fit `type_`.
        """
        if data is None:
            raise ValueError("Cannot inflate None")
        try:
            raw = json.loads(bytes(data).decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Ignoring malformed JSON input: %s", e)
            return None
        try:
            return _from_plain(type_, raw)
        except (TypeError, ValueError, KeyError, AttributeError) as e:
            name = getattr(type_, "__name__", str(type_))
            raise SerializationError(f"Cannot inflate {name}: {e}") from e

    def clone(self, obj: T) -> T:
        try:
            return copy.deepcopy(obj)
        except (TypeError, copy.Error, RecursionError) as e:
            raise SerializationError(f"Cannot clone {type(obj).__name__}: {e}") from e

    def to_plain(self, obj: Any) -> Any:
        """JSON-friendly structure of `obj` without encoding it."""
        return _to_plain(obj, set())
