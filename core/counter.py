"""
EventWindowCounter: number of events seen in a trailing time window.

The counter never reads a clock. The host feeds it elapsed time through
advance() and events through increment(); every operation returns a new
counter and leaves the old one untouched.

    c = EventWindowCounter.create(duration_ms=1000, moving=True)
    c = c.increment()          # deadline 1000
    c = c.advance(500)         # passed=500, count=1
    c = c.advance(600)         # passed=1100 > 1000, count=0
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from core.fifo import FifoQueue

if TYPE_CHECKING:
    from core.config import CounterCfg


@dataclass(frozen=True, repr=False)
class EventWindowCounter:
    _queue: FifoQueue[float] = field(default_factory=FifoQueue)
    _duration: float = 0.0
    _moving: bool = False
    _passed: float = 0.0  # ms of moving time since creation / full reset

    @classmethod
    def create(cls, duration_ms: float, moving: bool) -> EventWindowCounter:
        return cls(FifoQueue(), float(duration_ms), bool(moving), 0.0)

    @classmethod
    def from_config(cls, cfg: CounterCfg) -> EventWindowCounter:
        return cls.create(cfg.duration_ms, cfg.moving)

    # ---- transitions ----

    def increment(self) -> EventWindowCounter:
        """
        Record one event. Its deadline is relative to the current `passed`,
        so an event recorded while paused still lives for `duration` ms of
        moving time.
        """
        return replace(self, _queue=self._queue.enqueue(self._passed + self._duration))

    def advance(self, delta_ms: float) -> EventWindowCounter:
        """
        Let `delta_ms` of time pass. No-op while paused.

        At most one event expires per call: if several deadlines are overdue,
        the rest go on the following calls.
        """
        if not self._moving:
            return self
        new_passed = self._passed + delta_ms
        head = self._queue.peek()
        if head is not None and new_passed > head:
            _, rest = self._queue.dequeue()
            return replace(self, _queue=rest, _passed=new_passed)
        return replace(self, _passed=new_passed)

    def start(self) -> EventWindowCounter:
        return replace(self, _moving=True)

    def stop(self) -> EventWindowCounter:
        return replace(self, _moving=False)

    def toggle(self) -> EventWindowCounter:
        return replace(self, _moving=not self._moving)

    def reset_counter(self) -> EventWindowCounter:
        """Drop live events and resume; elapsed time is kept."""
        return replace(self, _queue=FifoQueue(), _moving=True)

    def reset_whole(self) -> EventWindowCounter:
        """Back to a fresh moving counter with the same duration."""
        return EventWindowCounter.create(self._duration, True)

    # ---- accessors ----

    @property
    def count(self) -> int:
        return len(self._queue)

    @property
    def is_moving(self) -> bool:
        return self._moving

    @property
    def passed_millis(self) -> float:
        return self._passed

    @property
    def duration_millis(self) -> float:
        return self._duration

    @property
    def expiries(self) -> tuple[float, ...]:
        """Live deadlines, oldest first."""
        return tuple(self._queue)

    @property
    def next_expiry_in(self) -> float | None:
        """Moving ms until the oldest live event expires; None if none are live."""
        head = self._queue.peek()
        if head is None:
            return None
        return head - self._passed

    def snapshot(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "moving": self._moving,
            "passed_ms": self._passed,
            "duration_ms": self._duration,
            "next_expiry_in_ms": self.next_expiry_in,
        }

    def __repr__(self) -> str:
        return (
            f"EventWindowCounter(count={self.count}, moving={self._moving}, "
            f"passed={self._passed}, duration={self._duration})"
        )


# Free-function form, for hosts that keep the counter as plain state.


def create(duration_ms: float, moving: bool) -> EventWindowCounter:
    return EventWindowCounter.create(duration_ms, moving)


def increment(counter: EventWindowCounter) -> EventWindowCounter:
    return counter.increment()


def advance(counter: EventWindowCounter, delta_ms: float) -> EventWindowCounter:
    return counter.advance(delta_ms)


def start(counter: EventWindowCounter) -> EventWindowCounter:
    return counter.start()


def stop(counter: EventWindowCounter) -> EventWindowCounter:
    return counter.stop()


def toggle(counter: EventWindowCounter) -> EventWindowCounter:
    return counter.toggle()


def reset_counter(counter: EventWindowCounter) -> EventWindowCounter:
    return counter.reset_counter()


def reset_whole(counter: EventWindowCounter) -> EventWindowCounter:
    return counter.reset_whole()


def count(counter: EventWindowCounter) -> int:
    return counter.count


def is_moving(counter: EventWindowCounter) -> bool:
    return counter.is_moving


def passed_millis(counter: EventWindowCounter) -> float:
    return counter.passed_millis
