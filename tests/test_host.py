"""Tests for app.host."""

from __future__ import annotations

import pytest

from app.host import COMMANDS, CounterHost, UnknownCommandError
from core.counter import EventWindowCounter


class FakeClock:
    def __init__(self, t: float = 100.0) -> None:
        self.t = t

    def __call__(self) -> float:
        return self.t


def test_tick_advances_by_clock_delta_in_ms():
    clock = FakeClock()
    host = CounterHost(EventWindowCounter.create(1000, True), clock=clock)
    clock.t += 0.25
    host.tick()
    assert host.counter.passed_millis == pytest.approx(250.0)
    clock.t += 0.5
    host.tick()
    assert host.counter.passed_millis == pytest.approx(750.0)
    assert host.ticks == 2


def test_tick_expires_event():
    clock = FakeClock()
    host = CounterHost(EventWindowCounter.create(1000, True), clock=clock)
    host.apply("increment")
    clock.t += 0.6
    host.tick()
    assert host.counter.count == 1
    clock.t += 0.6
    host.tick()
    assert host.counter.count == 0


def test_skip_when_paused_consumes_clock():
    clock = FakeClock()
    host = CounterHost(EventWindowCounter.create(1000, False), clock=clock, skip_when_paused=True)
    clock.t += 10
    host.tick()
    assert host.ticks == 0
    host.apply("start")
    clock.t += 0.1
    host.tick()
    # paused interval is not replayed after resume
    assert host.counter.passed_millis == pytest.approx(100.0)


def test_paused_tick_without_skip_is_noop():
    clock = FakeClock()
    host = CounterHost(EventWindowCounter.create(1000, False), clock=clock)
    before = host.counter
    clock.t += 10
    assert host.tick() is before
    assert host.ticks == 1


def test_apply_commands():
    host = CounterHost(EventWindowCounter.create(1000, False), clock=FakeClock())
    host.apply("increment")
    host.apply("increment")
    assert host.counter.count == 2
    host.apply("toggle")
    assert host.counter.is_moving is True
    host.apply("stop")
    assert host.counter.is_moving is False
    host.advance(0)
    host.apply("reset")
    assert host.counter.count == 0
    assert host.counter.is_moving is True
    host.advance(40)
    host.apply("reset-all")
    assert host.counter.passed_millis == 0


def test_apply_unknown_command():
    host = CounterHost(EventWindowCounter.create(1000, True), clock=FakeClock())
    with pytest.raises(UnknownCommandError):
        host.apply("explode")
    assert set(COMMANDS) == {"increment", "start", "stop", "toggle", "reset", "reset-all"}


def test_snapshot_includes_ticks():
    host = CounterHost(EventWindowCounter.create(1000, True), clock=FakeClock())
    host.advance(5)
    snap = host.snapshot()
    assert snap["ticks"] == 1
    assert snap["passed_ms"] == 5
    assert snap["count"] == 0
