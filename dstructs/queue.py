"""A first-in, first-out queue built on a deque."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dstructs.deque import Deque

__all__ = ["Queue"]


class Queue:
    """A FIFO collection; iterating it removes values from the front until it is empty."""

    __slots__ = ("_deque",)

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self._deque = Deque()
        if values is not None:
            self._deque.push_all(values)

    def allocate(self, capacity: int) -> None:
        """Make sure the queue can hold at least `capacity` values."""
        self._deque.allocate(capacity)

    def capacity(self) -> int:
        """Return the current buffer length."""
        return self._deque.capacity()

    def push(self, *args: Any) -> None:
        """Add one or more values to the back, in the order given."""
        self._deque.push(*args)

    def push_all(self, values: Iterable[Any] | None) -> None:
        """Add every value of an iterable to the back, in order."""
        self._deque.push_all(values)

    def pop(self) -> Any:
        """Remove and return the value at the front."""
        return self._deque.shift()

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        return self._deque.first()

    def clear(self) -> None:
        """Remove every value."""
        self._deque.clear()

    def copy(self) -> Queue:
        """Return a shallow copy."""
        clone = Queue.__new__(Queue)
        clone._deque = self._deque.copy()
        return clone

    def to_list(self) -> list[Any]:
        """Return the values from front to back."""
        return self._deque.to_list()

    def __len__(self) -> int:
        return len(self._deque)

    def __iter__(self) -> Iterator[Any]:
        while len(self._deque):
            yield self._deque.shift()

    def __repr__(self) -> str:
        return f"Queue({self.to_list()!r})"