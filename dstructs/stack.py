"""A last-in, first-out stack built on a vector."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dstructs.vector import Vector

__all__ = ["Stack"]


class Stack:
    """A LIFO collection; iterating it pops values until it is empty."""

    __slots__ = ("_vector",)

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self._vector = Vector()
        if values is not None:
            self._vector.push_all(values)

    def allocate(self, capacity: int) -> None:
        """Make sure the stack can hold at least `capacity` values."""
        self._vector.allocate(capacity)

    def capacity(self) -> int:
        """Return the current buffer length."""
        return self._vector.capacity()

    def push(self, *args: Any) -> None:
        """Push one or more values; the last one given ends up on top."""
        self._vector.push(*args)

    def push_all(self, values: Iterable[Any] | None) -> None:
        """Push every value of an iterable in order."""
        self._vector.push_all(values)

    def pop(self) -> Any:
        """Remove and return the top value."""
        return self._vector.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        return self._vector.last()

    def clear(self) -> None:
        """Remove every value."""
        self._vector.clear()

    def copy(self) -> Stack:
        """Return a shallow copy."""
        clone = Stack.__new__(Stack)
        clone._vector = self._vector.copy()
        return clone

    def to_list(self) -> list[Any]:
        """Return the values from top to bottom."""
        return self._vector.reversed().to_list()

    def __len__(self) -> int:
        return len(self._vector)

    def __iter__(self) -> Iterator[Any]:
        while self._vector:
            yield self._vector.pop()

    def __repr__(self) -> str:
        return f"Stack({self.to_list()!r})"