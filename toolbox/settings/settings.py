# toolbox/settings/settings.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
import os
import re
import typing
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Type, TypeVar, Union

from toolbox.errors import IllegalStateError
from toolbox.formatter.boolean import parse_boolean
from toolbox.hints import unwrap_optional
from toolbox.runtime.concurrency import get_lock, with_lock
from toolbox.settings.descriptors import Long, PropertyDescriptor, describe
from toolbox.settings.properties import load_properties
from toolbox.validation import INT_MAX, INT_MIN, LONG_MAX, LONG_MIN, parse_decimal

logger = logging.getLogger(__name__)

DEFAULT_DELIMITERS = " ,;:\n"

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

SettingsSource = Union[str, os.PathLike, Mapping[str, str], "Settings"]


def _is_enum_type(value: Any) -> bool:
    return isinstance(value, type) and issubclass(value, Enum)


def _match_enum(enum_type: Type[E], raw: str) -> Optional[E]:
    lowered = raw.lower()
    for member in enum_type:
        if member.name.lower() == lowered:
            return member
    return None


def tokenize(raw: str, delimiters: str = DEFAULT_DELIMITERS) -> List[str]:
    """
    Split `raw` on any of the delimiter characters, dropping empty tokens.
    """
    if not delimiters:
        return [raw] if raw else []
    pattern = "[" + re.escape(delimiters) + "]"
    return [token for token in re.split(pattern, raw) if token]


class Settings:
    """
    A mutable, thread-safe string to string property bag.

    Sources are merged into the bag: new keys are added and existing keys are
    overwritten. Typed getters return the default, None unless given, when the
    key is absent or its raw value cannot be converted.

    Example:
        settings = Settings().load("service.properties")
        port = settings.get_integer("port", 8080)
        settings.inject(config)
    """

    def __init__(self, source: Optional[SettingsSource] = None) -> None:
        self._properties: Dict[str, str] = {}
        self._lock = get_lock()
        if source is not None:
            self.load(source)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(self, source: SettingsSource) -> "Settings":
        """
        Merge a properties file path, a mapping or another Settings into this bag.

        Args:
            source: Path (str, PathLike or `file:` URI), mapping or Settings

        Returns:
            This Settings instance

        Raises:
            ValueError: If the source is None, of an unsupported type, or holds
                non-string keys or values
            BackingStoreError: If a properties file cannot be read
            InvalidSettingsError: If a properties file is malformed
        """
        if source is None:
            raise ValueError("Invalid properties")
        if isinstance(source, Settings):
            entries, origin = source.as_dict(), "settings"
        elif isinstance(source, Mapping):
            entries, origin = source, "mapping"
        elif isinstance(source, (str, os.PathLike)):
            entries, origin = load_properties(source), os.fspath(source)
        else:
            raise ValueError(f"Unsupported settings source: {type(source).__name__}")

        self._merge(entries)
        logger.debug("Loaded %d properties from %s", len(entries), origin)
        return self

    def _merge(self, entries: Mapping[str, str]) -> None:
        for key, value in entries.items():
            self._check_entry(key, value)
        with with_lock(self._lock):
            self._properties.update(entries)

    @staticmethod
    def _check_entry(key: Any, value: Any) -> None:
        if not isinstance(key, str) or not key:
            raise ValueError(f"Invalid property key: {key!r}")
        if not isinstance(value, str):
            raise ValueError(f"Invalid value for property [{key}]: {value!r}")

    def put(self, key: str, value: str) -> "Settings":
        self._check_entry(key, value)
        with with_lock(self._lock):
            self._properties[key] = value
        return self

    def remove(self, key: str) -> Optional[str]:
        with with_lock(self._lock):
            return self._properties.pop(key, None)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    def keys(self) -> List[str]:
        with with_lock(self._lock):
            return list(self._properties)

    def as_dict(self) -> Dict[str, str]:
        with with_lock(self._lock):
            return dict(self._properties)

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"Settings({len(self)} properties)"

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------
    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._properties.get(key, default)

    def _get_number(self, key: str, default: Optional[int], low: int, high: int) -> Optional[int]:
        raw = self._properties.get(key)
        if raw is None:
            return default
        number = parse_decimal(raw, low, high)
        return default if number is None else number

    def get_integer(self, key: str, default: Optional[int] = None) -> Optional[int]:
        """Signed 32-bit integer value of `key`."""
        return self._get_number(key, default, INT_MIN, INT_MAX)

    def get_long(self, key: str, default: Optional[int] = None) -> Optional[int]:
        """Signed 64-bit integer value of `key`."""
        return self._get_number(key, default, LONG_MIN, LONG_MAX)

    def get_boolean(self, key: str, default: Optional[bool] = None) -> Optional[bool]:
        """
        True for `true`, `yes`, `on`; False for `false`, `no`, `off`; any case.

        Unrecognized values are not read as False: like an absent key they
        yield `default`, which is None unless given. Pass `default=False` for
        the lenient reading of to_boolean().
        """
        raw = self._properties.get(key)
        if raw is None:
            return default
        value = parse_boolean(raw)
        return default if value is None else value

    def get_enum(self, enum_type: Type[E], key: str, default: Optional[E] = None) -> Optional[E]:
        """
        Enum member whose name matches the raw value, ignoring case.

        Raises:
            ValueError: If enum_type is not an Enum subclass
        """
        if enum_type is None:
            raise ValueError("Invalid type class")
        if not _is_enum_type(enum_type):
            raise ValueError("Type class is not enum")
        raw = self._properties.get(key)
        if raw is None:
            return default
        member = _match_enum(enum_type, raw)
        return default if member is None else member

    def get_list(
        self, key: str, default: Optional[str] = None, delimiters: str = DEFAULT_DELIMITERS
    ) -> Optional[List[str]]:
        raw = self.get_string(key, default)
        if raw is None:
            return None
        return tokenize(raw, delimiters)

    # ------------------------------------------------------------------
    # Injection
    # ------------------------------------------------------------------
    def inject(self, target: T, descriptors: Optional[Iterable[PropertyDescriptor]] = None) -> T:
        """
        Populate `target` from this bag.

        Each descriptor's key is looked up, the raw value is converted to the
        slot type (str, int, Long, bool, an Enum subclass or list) and the
        result is assigned to the slot.

        Args:
            target: Object to populate
            descriptors: Explicit descriptors; scanned from the target's
                `Property` attributes when omitted

        Returns:
            The target

        Raises:
            ValueError: If the target is None, a default cannot be converted,
                a raw value cannot be converted and no default is declared,
                the slot type is unsupported or the slot cannot be assigned
            IllegalStateError: If a non-nullable slot resolves to None
        """
        if target is None:
            raise ValueError("Invalid injectee object")
        if descriptors is None:
            descriptors = describe(target)

        count = 0
        for descriptor in descriptors:
            value = self._resolve(target, descriptor)
            if value is None and not descriptor.nullable:
                raise IllegalStateError(f"Missing value for not null [{descriptor.slot}] field")
            try:
                setattr(target, descriptor.slot, value)
            except (AttributeError, TypeError) as e:
                raise ValueError(
                    f"Cannot assign {type(target).__name__} field [{descriptor.slot}]"
                ) from e
            count += 1

        logger.debug("Injected %d properties into %s", count, type(target).__name__)
        return target

    def _resolve(self, target: Any, descriptor: PropertyDescriptor) -> Any:
        key = descriptor.key
        default = descriptor.default if descriptor.default else None
        slot_type = unwrap_optional(descriptor.slot_type)
        origin = typing.get_origin(slot_type)

        try:
            if slot_type is str:
                return self.get_string(key, default)
            if slot_type is Long:
                return self._convert(key, default, lambda s: self._to_number(s, LONG_MIN, LONG_MAX))
            if slot_type is int:
                return self._convert(key, default, lambda s: self._to_number(s, INT_MIN, INT_MAX))
            if slot_type is bool:
                return self._convert(key, default, self._to_boolean)
            if _is_enum_type(slot_type):
                return self._convert(key, default, lambda s: self._to_enum(slot_type, s))
            if slot_type is list or origin is list:
                return self.get_list(key, default, descriptor.delimiters or DEFAULT_DELIMITERS)
        except ValueError as e:
            raise ValueError(f"Cannot assign {type(target).__name__} field [{descriptor.slot}]: {e}") from e

        type_name = getattr(slot_type, "__name__", repr(slot_type))
        raise ValueError(f"Cannot assign {type(target).__name__} to a {type_name} field")

    def _convert(self, key: str, default: Optional[str], convert: Callable[[str], Any]) -> Any:
        """
        Convert the raw value of `key` strictly. A declared default must itself
        convert; it replaces an absent or unconvertible raw value. Without a
        default an unconvertible raw value raises.
        """
        raw = self._properties.get(key)
        if default is None:
            return None if raw is None else convert(raw)
        fallback = convert(default)
        if raw is None:
            return fallback
        try:
            return convert(raw)
        except ValueError:
            return fallback

    @staticmethod
    def _to_number(raw: str, low: int, high: int) -> int:
        number = parse_decimal(raw, low, high)
        if number is None:
            raise ValueError(f"Could not convert string [{raw}] into a valid number")
        return number

    @staticmethod
    def _to_boolean(raw: str) -> bool:
        value = parse_boolean(raw)
        if value is None:
            raise ValueError(f"Could not convert string [{raw}] into a valid boolean")
        return value

    @staticmethod
    def _to_enum(enum_type: Type[E], raw: str) -> E:
        member = _match_enum(enum_type, raw)
        if member is None:
            raise ValueError(f"Could not convert string [{raw}] into a valid enum of type [{enum_type.__name__}]")
        return member
