# tests/unit/provider/provider_mocks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, List, Optional

from toolbox.provider import (
    AbstractProvider,
    AbstractProviderFactory,
    AbstractResource,
    NotEnoughResourceError,
)
from toolbox.runtime.units import TimeUnit
from toolbox.settings import Property, Settings


class MockResource(AbstractResource):
    def __init__(self, owner: Optional["MockProvider"] = None, value: Any = None, fail_open=None, fail_close=None):
        super().__init__()
        self.owner = owner
        self.value = value
        self.fail_open = fail_open
        self.fail_close = fail_close
        self.open_calls = 0
        self.close_calls = 0

    def on_open(self) -> None:
        self.open_calls += 1
        if self.fail_open is not None:
            raise self.fail_open

    def on_close(self) -> None:
        self.close_calls += 1
        if self.fail_close is not None:
            raise self.fail_close
        if self.owner is not None:
            self.owner.release(self)


class MockProvider(AbstractProvider):
    """Pool-backed provider whose hooks can be told to fail."""

    def __init__(self, capacity: int = 4, fail_activate=None, fail_shutdown=None, name: Optional[str] = None):
        super().__init__()
        self.capacity = capacity
        self.fail_activate = fail_activate
        self.fail_shutdown = fail_shutdown
        self.activate_calls = 0
        self.shutdown_calls: List[tuple] = []
        self.resources: List[MockResource] = []
        if name is not None:
            self._id = name

    def on_activate(self) -> None:
        self.activate_calls += 1
        if self.fail_activate is not None:
            raise self.fail_activate

    def on_shutdown(self, grace_time: int, unit: TimeUnit) -> None:
        self.shutdown_calls.append((grace_time, unit))
        if self.fail_shutdown is not None:
            raise self.fail_shutdown
        for resource in list(self.resources):
            resource.close()

    def open_resource(self, value: Any = None) -> MockResource:
        self._check_shutdown_in_progress()
        self._check_active()
        if len(self.resources) >= self.capacity:
            raise NotEnoughResourceError("Resource pool exhausted")
        resource = MockResource(owner=self, value=value)
        resource.open()
        self.resources.append(resource)
        return resource

    def release(self, resource: MockResource) -> None:
        if resource in self.resources:
            self.resources.remove(resource)


class BareProvider(AbstractProvider):
    def on_activate(self) -> None:
        pass

    def on_shutdown(self, grace_time: int, unit: TimeUnit) -> None:
        pass


class MockProviderFactory(AbstractProviderFactory[MockProvider]):
    capacity: int = Property(name="pool.capacity", default="4")
    label: str = Property(name="factory.label")

    def __init__(self):
        super().__init__()
        self.created: List[MockProvider] = []

    def on_activate(self) -> None:
        pass

    def on_shutdown(self, grace_time: int, unit: TimeUnit) -> None:
        for provider in list(self.created):
            self.destroy(provider, grace_time, unit)

    def load_default_settings(self) -> "MockProviderFactory":
        return self.load_settings_from(Settings({"pool.capacity": "4"}))

    def load_settings(self, path: str) -> "MockProviderFactory":
        return self.load_settings_from(Settings().load(path))

    def load_settings_from(self, settings: Settings) -> "MockProviderFactory":
        self._check_inactive()
        settings.inject(self)
        return self

    def create(self, value: Any = None) -> MockProvider:
        self._check_shutdown_in_progress()
        self._check_active()
        provider = self.get_type()(capacity=self.capacity or 4, name=value)
        self.created.append(provider)
        return provider

    def destroy(self, provider: MockProvider, grace_time: Optional[int] = None, unit: Optional[TimeUnit] = None) -> None:
        self._check_active()
        if provider not in self.created:
            raise ValueError("Provider was not created by this factory")
        if provider.is_active:
            provider.shutdown(grace_time or 0, unit or TimeUnit.SECONDS)
        self.created.remove(provider)


class TypedByAttributeFactory(AbstractProviderFactory):
    provider_type = BareProvider

    def on_activate(self) -> None:
        pass

    def on_shutdown(self, grace_time: int, unit: TimeUnit) -> None:
        pass


class UntypedFactory(AbstractProviderFactory):
    def on_activate(self) -> None:
        pass

    def on_shutdown(self, grace_time: int, unit: TimeUnit) -> None:
        pass
