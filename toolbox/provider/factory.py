# toolbox/provider/factory.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import typing
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, Type, TypeVar

from toolbox.errors import IllegalStateError
from toolbox.provider.lifecycle import Lifecycle
from toolbox.provider.provider import Provider
from toolbox.runtime.units import TimeUnit

P = TypeVar("P", bound=Provider)
F = TypeVar("F", bound="ProviderFactory")


def _bound_provider_type(cls: type) -> Optional[type]:
    """
    Find the concrete provider type bound through `AbstractProviderFactory[X]`
    anywhere in the class hierarchy.
    """
    for klass in cls.__mro__:
        for base in getattr(klass, "__orig_bases__", ()):
            origin = typing.get_origin(base)
            if isinstance(origin, type) and issubclass(origin, ProviderFactory):
                for arg in typing.get_args(base):
                    if isinstance(arg, type) and issubclass(arg, Provider):
                        return arg
    return None


class ProviderFactory(ABC, Generic[P]):
    """
    Creates and destroys providers of one concrete type. The factory has its
    own activation and shutdown lifecycle.
    """

    @abstractmethod
    def get_type(self) -> Type[P]:
        """The provider type this factory produces."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Process-wide identifier of this factory."""

    @abstractmethod
    def load_default_settings(self: F) -> F:
        """Configure the factory from its built-in settings."""

    @abstractmethod
    def load_settings(self: F, path: str) -> F:
        """Configure the factory from a properties file."""

    @abstractmethod
    def activate(self: F) -> F:
        """Activate the factory and return it."""

    @abstractmethod
    def shutdown(self: F, grace_time: int, unit: TimeUnit) -> F:
        """Shut the factory down within the grace time and return it."""

    @property
    @abstractmethod
    def is_active(self) -> bool:
        """True from a successful activation until shutdown completes."""

    @property
    @abstractmethod
    def is_shutdown_in_progress(self) -> bool:
        """True while a shutdown hook is running."""

    @abstractmethod
    def create(self, value: Any = None) -> P:
        """Create a provider, optionally parameterized by `value`."""

    @abstractmethod
    def destroy(self, provider: P, grace_time: Optional[int] = None, unit: Optional[TimeUnit] = None) -> None:
        """Tear a provider down, optionally within a grace time."""


class AbstractProviderFactory(Lifecycle, ProviderFactory[P]):
    """
    Skeleton factory. The produced type is taken from the type argument,
    e.g. `class CacheFactory(AbstractProviderFactory[CacheProvider])`, or
    from a `provider_type` class attribute.

    Every optional operation raises NotImplementedError until overridden.
    """

    _kind = "factory"
    provider_type: Optional[Type[P]] = None

    def __init__(self) -> None:
        super().__init__()
        self._type = self.provider_type or _bound_provider_type(type(self))

    def get_type(self) -> Type[P]:
        """
        Raises:
            IllegalStateError: If no provider type is bound
        """
        if self._type is None:
            raise IllegalStateError(f"No provider type bound to {self.id}")
        return self._type

    def load_default_settings(self: F) -> F:
        raise NotImplementedError("Factory feature not supported by this implementation")

    def load_settings(self: F, path: str) -> F:
        raise NotImplementedError("Factory feature not supported by this implementation")

    def create(self, value: Any = None) -> P:
        """
        Raises:
            NotImplementedError: Unless overridden
            IllegalStateError: If the factory is not active
            OperationTimeoutError: If creation exceeds its budget
            NotEnoughResourceError: If no more providers can be created
            ProviderError: For any other failure
        """
        raise NotImplementedError("Factory feature not supported by this implementation")

    def destroy(self, provider: P, grace_time: Optional[int] = None, unit: Optional[TimeUnit] = None) -> None:
        """
        Raises:
            NotImplementedError: Unless overridden
            IllegalStateError: If the factory is not active
            ValueError: If the provider is not one of this factory's or the grace time is invalid
            ProviderError: For any other failure
        """
        raise NotImplementedError("Factory feature not supported by this implementation")
