"""
Persistent FIFO queue.

Two singly linked lists: `_front` holds items head first, `_back` holds newly
enqueued items newest first. When the front runs out, the back is reversed
into it, so enqueue/peek/dequeue are O(1) amortized. No instance is ever
modified; every operation returns a new queue sharing structure with the old.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")

# (item, rest) or None
Cell = Optional[Tuple[object, "Cell"]]


def _reverse(cell: Cell) -> Cell:
    out: Cell = None
    while cell is not None:
        item, cell = cell
        out = (item, out)
    return out


def _walk(cell: Cell) -> Iterator:
    while cell is not None:
        item, cell = cell
        yield item


@dataclass(frozen=True, eq=False, repr=False)
class FifoQueue(Generic[T]):
    # invariant: _front is None only when the queue is empty
    _front: Cell = None
    _back: Cell = None
    _size: int = 0

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> FifoQueue[T]:
        q: FifoQueue[T] = cls()
        for item in items:
            q = q.enqueue(item)
        return q

    def enqueue(self, item: T) -> FifoQueue[T]:
        """Return a queue with `item` appended at the tail."""
        if self._front is None:
            return FifoQueue((item, None), None, 1)
        return FifoQueue(self._front, (item, self._back), self._size + 1)

    def peek(self) -> T | None:
        """Head item, or None for an empty queue."""
        if self._front is None:
            return None
        return self._front[0]  # type: ignore[return-value]

    def dequeue(self) -> tuple[T | None, FifoQueue[T]]:
        """
        Remove the head. Returns (head, rest).
        On an empty queue returns (None, self).
        """
        if self._front is None:
            return None, self
        item, rest = self._front
        back = self._back
        if rest is None:
            rest, back = _reverse(back), None
        return item, FifoQueue(rest, back, self._size - 1)  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        yield from _walk(self._front)
        yield from reversed(list(_walk(self._back)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FifoQueue):
            return NotImplemented
        return self._size == other._size and tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"FifoQueue({list(self)!r})"
