"""
CounterHost: owns the current counter value and feeds it time and events.

The counter itself is a pure value; the host is the one place that reads a
clock, turns readings into advance() deltas, and swaps in each new value.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from core.counter import EventWindowCounter

log = logging.getLogger("app.host")

COMMANDS: dict[str, Callable[[EventWindowCounter], EventWindowCounter]] = {
    "increment": EventWindowCounter.increment,
    "start": EventWindowCounter.start,
    "stop": EventWindowCounter.stop,
    "toggle": EventWindowCounter.toggle,
    "reset": EventWindowCounter.reset_counter,
    "reset-all": EventWindowCounter.reset_whole,
}


class UnknownCommandError(KeyError):
    pass


class CounterHost:
    """
    - tick(): advance by the clock delta since the previous tick
    - advance(delta_ms): advance by an explicit delta
    - apply(name): run one of COMMANDS
    """

    def __init__(
        self,
        counter: EventWindowCounter,
        clock: Callable[[], float] = time.monotonic,
        skip_when_paused: bool = False,
    ) -> None:
        self._counter = counter
        self._clock = clock
        self._last = clock()
        self.skip_when_paused = skip_when_paused
        self.ticks = 0

    @property
    def counter(self) -> EventWindowCounter:
        return self._counter

    def tick(self) -> EventWindowCounter:
        now = self._clock()
        delta_ms = (now - self._last) * 1000.0
        self._last = now
        if self.skip_when_paused and not self._counter.is_moving:
            return self._counter
        return self.advance(delta_ms)

    def advance(self, delta_ms: float) -> EventWindowCounter:
        before = self._counter.count
        self._counter = self._counter.advance(delta_ms)
        self.ticks += 1
        if self._counter.count < before:
            log.debug("event expired, live=%d passed=%.1fms", self._counter.count, self._counter.passed_millis)
        return self._counter

    def apply(self, command: str) -> EventWindowCounter:
        op = COMMANDS.get(command)
        if op is None:
            raise UnknownCommandError(command)
        self._counter = op(self._counter)
        log.info("[CMD] %s -> count=%d moving=%s", command, self._counter.count, self._counter.is_moving)
        return self._counter

    def snapshot(self) -> dict[str, Any]:
        data = self._counter.snapshot()
        data["ticks"] = self.ticks
        return data
