# toolbox/settings/descriptors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Declarative description of injectable properties.

A class declares its injectable slots with `Property` attributes; the slot
type comes from the class annotation or from the explicit `type` argument:

    class ServerConfig:
        port: int = Property()
        name: str = Property(nullable=False)
        enabled: bool = Property(default="false")
        hosts: list = Property(delimiters=",")

describe() walks the class hierarchy, base classes first, and returns one
PropertyDescriptor per slot. Subclasses may redeclare a slot to change it.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass
from typing import Any, Dict, List, NewType, Optional, Tuple

Long = NewType("Long", int)

_descriptor_cache: Dict[type, Tuple["PropertyDescriptor", ...]] = {}


@dataclass(frozen=True)
class PropertyDescriptor:
    """
    Metadata for one injectable slot.

    Attributes:
        slot: Attribute name on the target object
        slot_type: Declared type of the slot
        name: Settings key, or None to use the slot name
        default: Default value as a string, or None
        nullable: Whether the slot may end up None
        delimiters: Separator characters for list slots, or None for the default set
    """

    slot: str
    slot_type: Any
    name: Optional[str] = None
    default: Optional[str] = None
    nullable: bool = True
    delimiters: Optional[str] = None

    @property
    def key(self) -> str:
        if self.name is not None and self.name.strip():
            return self.name
        return self.slot


class Property:
    """
    Class attribute marking an injectable slot. Instances read back the
    injected value, or None before injection.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        default: Optional[str] = None,
        nullable: bool = True,
        delimiters: Optional[str] = None,
        type: Any = None,
    ) -> None:
        self.name = name
        self.default = default
        self.nullable = nullable
        self.delimiters = delimiters
        self.type = type
        self.slot: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.slot = name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return instance.__dict__.get(self.slot)

    def __set__(self, instance: Any, value: Any) -> None:
        instance.__dict__[self.slot] = value

    def describe(self, hints: Dict[str, Any]) -> PropertyDescriptor:
        slot_type = self.type if self.type is not None else hints.get(self.slot, str)
        return PropertyDescriptor(
            slot=self.slot,
            slot_type=slot_type,
            name=self.name,
            default=self.default,
            nullable=self.nullable,
            delimiters=self.delimiters,
        )


def _scan(cls: type) -> Tuple[PropertyDescriptor, ...]:
    try:
        hints = typing.get_type_hints(cls)
    except (NameError, TypeError):
        hints = {}
    found: Dict[str, PropertyDescriptor] = {}
    for klass in reversed(cls.__mro__):
        for attr, value in vars(klass).items():
            if isinstance(value, Property):
                found[attr] = value.describe(hints)
    return tuple(found.values())


def describe(target: Any) -> List[PropertyDescriptor]:
    """
    Enumerate the property descriptors of a class or of an instance's class.
    """
    cls = target if isinstance(target, type) else type(target)
    descriptors = _descriptor_cache.get(cls)
    if descriptors is None:
        # Scans are deterministic, so a concurrent double scan is harmless.
        descriptors = _descriptor_cache.setdefault(cls, _scan(cls))
    return list(descriptors)
