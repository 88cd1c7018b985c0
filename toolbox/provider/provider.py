# toolbox/provider/provider.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TypeVar

from toolbox.provider.lifecycle import Lifecycle
from toolbox.provider.resource import Resource
from toolbox.runtime.units import TimeUnit

P = TypeVar("P", bound="Provider")


class Provider(ABC):
    """
    A long-lived service object with an explicit activation and shutdown
    lifecycle that hands out resources once active.
    """

    @property
    @abstractmethod
    def id(self) -> str:
        """Process-wide identifier of this provider."""

    @abstractmethod
    def activate(self: P) -> P:
        """Activate the provider and return it."""

    @abstractmethod
    def shutdown(self: P, grace_time: int, unit: TimeUnit) -> P:
        """Shut the provider down within the grace time and return it."""

    @property
    @abstractmethod
    def is_active(self) -> bool:
        """True from a successful activation until shutdown completes."""

    @property
    @abstractmethod
    def is_shutdown_in_progress(self) -> bool:
        """True while a shutdown hook is running."""

    @abstractmethod
    def open_resource(self, value: Any = None) -> Resource:
        """Open a resource, optionally parameterized by `value`."""


class AbstractProvider(Lifecycle, Provider):
    """
    Skeleton provider. Implementations supply on_activate() and on_shutdown()
    and, if they serve resources, override open_resource().

    Resources still open when on_shutdown() returns are a contract violation
    of the implementation; on_shutdown() must close them first.
    """

    _kind = "provider"

    def open_resource(self, value: Any = None) -> Resource:
        """
        Raises:
            NotImplementedError: Unless overridden
            IllegalStateError: If the provider is not active
            ValueError: If value is unacceptable
            OperationTimeoutError: If opening exceeds its budget
            NotEnoughResourceError: If the pool is exhausted
            ProviderError: For any other failure
        """
        raise NotImplementedError("Provider feature not supported by this implementation")
