# tests/unit/runtime/test_runtime_primitives.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import threading

import pytest
from hypothesis import given
from hypothesis import strategies as st

from toolbox.errors import IllegalStateError
from toolbox.runtime import AtomicBoolean, StopWatch, ThreadInfo, TimeUnit, get_lock, with_lock

# -----------------------------------------------------------------------------
# ATOMIC BOOLEAN AND LOCKS
# -----------------------------------------------------------------------------
def test_atomic_boolean_operations():
    flag = AtomicBoolean()
    assert flag.get() is False
    assert flag.compare_and_set(False, True)
    assert not flag.compare_and_set(False, True)
    assert flag.get_and_set(False) is True
    flag.set(1)
    assert bool(flag) is True
    assert repr(flag) == "AtomicBoolean(True)"


@pytest.mark.stress
def test_compare_and_set_has_single_winner():
    flag = AtomicBoolean(False)
    barrier = threading.Barrier(16)
    wins = []

    def contender():
        barrier.wait()
        if flag.compare_and_set(False, True):
            wins.append(threading.get_ident())

    threads = [threading.Thread(target=contender) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(wins) == 1


def test_with_lock_releases_on_error():
    lock = get_lock()
    with pytest.raises(KeyError):
        with with_lock(lock):
            raise KeyError("x")
    assert lock.acquire(blocking=False)
    lock.release()


def test_reentrant_lock():
    lock = get_lock(reentrant=True)
    with with_lock(lock):
        with with_lock(lock):
            pass


# -----------------------------------------------------------------------------
# TIME UNIT
# -----------------------------------------------------------------------------
@pytest.mark.parametrize(
    "target, duration, source, expected",
    [
        (TimeUnit.MILLISECONDS, 2, TimeUnit.SECONDS, 2000),
        (TimeUnit.SECONDS, 1999, TimeUnit.MILLISECONDS, 1),
        (TimeUnit.SECONDS, -1999, TimeUnit.MILLISECONDS, -1),
        (TimeUnit.HOURS, 1, TimeUnit.DAYS, 24),
        (TimeUnit.MINUTES, 90, TimeUnit.SECONDS, 1),
    ],
)
def test_convert(target, duration, source, expected):
    assert target.convert(duration, source) == expected


def test_convert_rejects_non_unit():
    with pytest.raises(ValueError):
        TimeUnit.SECONDS.convert(1, "ms")


def test_helpers():
    assert TimeUnit.SECONDS.to_nanos(1) == 1_000_000_000
    assert TimeUnit.MINUTES.to_millis(1) == 60_000
    assert TimeUnit.MILLISECONDS.to_seconds(1500) == pytest.approx(1.5)


@given(st.integers(min_value=0, max_value=10**9))
def test_widening_then_narrowing_is_identity(value):
    assert TimeUnit.SECONDS.convert(TimeUnit.NANOSECONDS.convert(value, TimeUnit.SECONDS), TimeUnit.NANOSECONDS) == value


# -----------------------------------------------------------------------------
# THREAD INFO
# -----------------------------------------------------------------------------
@pytest.fixture
def unbound():
    ThreadInfo.unbind()
    yield
    ThreadInfo.unbind()


def test_current_is_stable_per_thread(unbound):
    assert not ThreadInfo.is_bound()
    info = ThreadInfo.current()
    assert ThreadInfo.is_bound()
    assert ThreadInfo.current() is info
    assert info.put("k", 1).get("k") == 1
    assert "k" in info
    assert info.get("missing", "d") == "d"
    assert info.remove("k") == 1
    assert info.remove("k") is None
    assert len(info.put("a", 1).clear()) == 0


def test_threads_see_separate_maps(unbound):
    ThreadInfo.current().put("owner", "main")
    seen = {}

    def worker(name):
        info = ThreadInfo.current()
        seen[name] = info.get("owner")
        info.put("owner", name)

    threads = [threading.Thread(target=worker, args=(f"t{i}",)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert seen == {f"t{i}": None for i in range(4)}
    assert ThreadInfo.current().get("owner") == "main"


def test_reset_and_unbind(unbound):
    first = ThreadInfo.current().put("k", 1)
    fresh = ThreadInfo.reset()
    assert fresh is not first
    assert fresh.get("k") is None
    ThreadInfo.unbind()
    assert not ThreadInfo.is_bound()
    ThreadInfo.unbind()
    assert ThreadInfo.current() is not fresh


# -----------------------------------------------------------------------------
# STOP WATCH
# -----------------------------------------------------------------------------
def test_stopwatch_measures_clock(fake_clock):
    watch = StopWatch(clock=fake_clock)
    watch.start()
    fake_clock.advance(2_500_000)
    assert watch.is_running
    assert watch.elapsed_time() == 2_500_000
    assert watch.elapsed_millis_time() == 2
    watch.stop()
    fake_clock.advance(10_000_000)
    assert watch.elapsed_millis_time() == 2
    assert str(watch) == "2"


def test_stopwatch_state_errors(fake_clock):
    watch = StopWatch(clock=fake_clock)
    with pytest.raises(IllegalStateError):
        watch.elapsed_time()
    with pytest.raises(IllegalStateError, match="not running"):
        watch.stop()
    watch.start()
    with pytest.raises(IllegalStateError, match="already running"):
        watch.start()


def test_stopwatch_start_from_past_reading(fake_clock):
    fake_clock.advance(100_000_000)
    watch = StopWatch(clock=fake_clock)
    past_ms = fake_clock() // 1_000_000 - 5
    watch.start(past_ms, TimeUnit.MILLISECONDS)
    assert watch.start_time == past_ms * 1_000_000
    assert watch.elapsed_millis_time() == 5


def test_stopwatch_rejects_future_start(fake_clock):
    watch = StopWatch(clock=fake_clock)
    with pytest.raises(ValueError, match="future"):
        watch.start(fake_clock() + 1)
    assert not watch.is_running


def test_stopwatch_reset_and_restart(fake_clock):
    watch = StopWatch(clock=fake_clock).start()
    fake_clock.advance(1_000)
    watch.stop().reset()
    assert watch.start_time == -1
    assert not watch.is_running
    watch.start()
    fake_clock.advance(7)
    assert watch.elapsed_time() == 7


def test_stopwatch_context_manager(fake_clock):
    with StopWatch(clock=fake_clock) as watch:
        fake_clock.advance(3_000_000)
    assert not watch.is_running
    assert watch.elapsed_time(TimeUnit.MILLISECONDS) == 3


def test_stopwatch_default_clock():
    watch = StopWatch().start()
    assert watch.elapsed_time() >= 0
