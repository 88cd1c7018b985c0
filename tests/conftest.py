# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import threading

import pytest

from toolbox.runtime.units import TimeUnit


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "stress: mark test as a stress test")
    config.addinivalue_line("markers", "property: mark test as a property-based test")


class FakeClock:
    """A manually advanced clock returning integer ticks."""

    def __init__(self, start: int = 1_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ticks: int) -> None:
        self.now += ticks


@pytest.fixture
def fake_clock():
    """A clock for components that read milliseconds or nanoseconds."""
    return FakeClock()


@pytest.fixture
def seconds():
    return TimeUnit.SECONDS


@pytest.fixture
def properties_file(tmp_path):
    """Returns a helper writing text to a .properties file."""

    def _write(text: str, name: str = "test.properties"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def cleanup_threads():
    yield
    # Cleanup any remaining threads after each test
    for thread in threading.enumerate():
        if thread != threading.current_thread() and thread.is_alive() and not thread.daemon:
            thread.join(timeout=1.0)
