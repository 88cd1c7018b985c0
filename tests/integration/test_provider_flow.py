# tests/integration/test_provider_flow.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import threading

import pytest

from tests.unit.provider.provider_mocks import MockProviderFactory
from toolbox.errors import IllegalStateError
from toolbox.provider import NotEnoughResourceError
from toolbox.runtime import TimerQueue, TimeUnit


def test_configure_create_serve_and_tear_down(properties_file):
    path = properties_file("# pool sizing\npool.capacity = 2\nfactory.label = edge\n")
    factory = MockProviderFactory().load_settings(str(path)).activate()

    provider = factory.create("edge-1").activate()
    with provider.open_resource("first") as first:
        assert first.is_open
        second = provider.open_resource("second")
        with pytest.raises(NotEnoughResourceError):
            provider.open_resource("third")
    assert not first.is_open
    assert provider.resources == [second]

    factory.shutdown(1, TimeUnit.SECONDS)
    assert not provider.is_active
    assert not second.is_open
    assert factory.created == []
    with pytest.raises(IllegalStateError):
        factory.create()


def test_timer_driven_resource_expiry(properties_file, fake_clock):
    factory = MockProviderFactory().load_settings(str(properties_file("pool.capacity=3\n"))).activate()
    provider = factory.create().activate()
    timers = TimerQueue(clock=fake_clock)

    for delay in (30, 10, 20):
        timers.add(delay, TimeUnit.MILLISECONDS, provider.open_resource(delay))

    fake_clock.advance(20)
    for resource in timers.drain_expired():
        resource.close()
    assert [r.value for r in provider.resources] == [30]
    assert timers.first_delay() == 10

    factory.shutdown(0, TimeUnit.MILLISECONDS)
    assert provider.resources == []


@pytest.mark.stress
def test_concurrent_resource_requests_respect_capacity():
    factory = MockProviderFactory().load_default_settings().activate()
    provider = factory.create().activate()
    barrier = threading.Barrier(8)
    outcomes = []
    lock = threading.Lock()

    def request():
        barrier.wait()
        try:
            provider.open_resource()
            result = "opened"
        except NotEnoughResourceError:
            result = "refused"
        with lock:
            outcomes.append(result)

    threads = [threading.Thread(target=request) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(outcomes) == 8
    factory.shutdown(1, TimeUnit.SECONDS)
    assert provider.resources == []
