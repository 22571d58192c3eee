"""A priority queue: highest priority first, insertion order among equal priorities."""

from __future__ import annotations

import functools
import heapq
from collections.abc import Iterator
from typing import Any

from dstructs.common import EmptyCollectionError, compare, next_power_of_2

__all__ = ["PriorityQueue"]

_MIN_CAPACITY = 8


class _Node:
    __slots__ = ("value", "priority", "stamp")

    def __init__(self, value: Any, priority: Any, stamp: int) -> None:
        self.value = value
        self.priority = priority
        self.stamp = stamp

    def __lt__(self, other: _Node) -> bool:
        # heapq keeps the smallest item first, so "less" means "comes out earlier".
        return _node_compare(self, other) > 0


def _node_compare(a: _Node, b: _Node) -> int:
    result = compare(a.priority, b.priority)
    if result == 0:
        return 1 if a.stamp < b.stamp else -1
    return result


class PriorityQueue:
    """A heap of values ordered by priority; iterating it pops values until it is empty."""

    __slots__ = ("_heap", "_capacity", "_next")

    def __init__(self) -> None:
        self._heap: list[_Node] = []
        self._capacity = _MIN_CAPACITY
        self._next = 0

    def allocate(self, capacity: int) -> None:
        """Make sure the queue can hold at least `capacity` values."""
        wanted = next_power_of_2(capacity, _MIN_CAPACITY)
        if wanted > self._capacity:
            self._capacity = wanted

    def capacity(self) -> int:
        """Return the current buffer length."""
        return self._capacity

    def push(self, value: Any, priority: Any) -> None:
        """Add a value with the given priority."""
        if len(self._heap) == self._capacity:
            self._capacity *= 2
        self._next += 1
        heapq.heappush(self._heap, _Node(value, priority, self._next))

    def pop(self) -> Any:
        """Remove and return the value with the highest priority."""
        if not self._heap:
            raise EmptyCollectionError()
        node = heapq.heappop(self._heap)
        if len(self._heap) <= self._capacity // 4 and self._capacity // 2 >= _MIN_CAPACITY:
            self._capacity //= 2
        return node.value

    def peek(self) -> Any:
        """Return the value with the highest priority without removing it."""
        if not self._heap:
            raise EmptyCollectionError()
        return self._heap[0].value

    def clear(self) -> None:
        """Remove every value and reset the buffer to its minimum length."""
        self._heap.clear()
        self._capacity = _MIN_CAPACITY

    def copy(self) -> PriorityQueue:
        """Return a shallow copy that keeps the same insertion order."""
        clone = PriorityQueue.__new__(PriorityQueue)
        clone._heap = [_Node(n.value, n.priority, n.stamp) for n in self._heap]
        clone._capacity = self._capacity
        clone._next = self._next
        return clone

    def to_list(self) -> list[Any]:
        """Return the values in the order they would be popped."""
        ordered = sorted(self._heap, key=functools.cmp_to_key(lambda a, b: _node_compare(b, a)))
        return [node.value for node in ordered]

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Any]:
        while self._heap:
            yield self.pop()

    def __repr__(self) -> str:
        return f"PriorityQueue({self.to_list()!r})"