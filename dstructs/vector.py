"""A growable sequence of values with explicit capacity management."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Sized
from typing import Any

from dstructs.common import (
    EmptyCollectionError,
    check_index,
    is_identical,
    is_set,
    join,
    normalize_slice,
    numeric_sum,
    sort_values,
)

__all__ = ["Vector"]

_MIN_CAPACITY = 8


def _iterable_values(values: Any) -> Iterable[Any]:
    """Return the values to add from an iterable, or raise if it is not one."""
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise TypeError("Value must be an array or traversable object")
    if isinstance(values, Mapping):
        return values.values()
    return values


class Vector:
    """A sequence backed by a contiguous buffer that grows and shrinks automatically."""

    __slots__ = ("_values", "_capacity")

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self._values: list[Any] = []
        self._capacity = _MIN_CAPACITY
        if values is not None:
            self.push_all(values)

    @classmethod
    def _from_list(cls, values: list[Any], capacity: int) -> Vector:
        vector = cls.__new__(cls)
        vector._values = values
        vector._capacity = max(capacity, _MIN_CAPACITY)
        return vector

    def _ensure_capacity(self, needed: int) -> None:
        if needed > self._capacity:
            self._capacity = max(needed, self._capacity + (self._capacity >> 1))

    def _grow_if_full(self) -> None:
        if len(self._values) == self._capacity:
            self._capacity += self._capacity >> 1

    def _auto_truncate(self) -> None:
        if len(self._values) <= self._capacity // 4 and self._capacity // 2 >= _MIN_CAPACITY:
            self._capacity //= 2

    def allocate(self, capacity: int) -> None:
        """Make sure the buffer can hold at least `capacity` values."""
        if capacity > self._capacity:
            self._capacity = capacity

    def capacity(self) -> int:
        """Return the current buffer length."""
        return self._capacity

    def clear(self) -> None:
        """Remove every value and shrink the buffer back to its minimum."""
        if self._values:
            self._values.clear()
            if self._capacity > _MIN_CAPACITY:
                self._capacity = _MIN_CAPACITY

    def copy(self) -> Vector:
        """Return a shallow copy with the same capacity."""
        if not self._values:
            return Vector()
        return self._from_list(list(self._values), self._capacity)

    def push(self, *args: Any) -> None:
        """Append one or more values to the end."""
        if len(args) == 1:
            self._grow_if_full()
            self._values.append(args[0])
        elif args:
            self._ensure_capacity(len(self._values) + len(args))
            self._values.extend(args)

    def push_all(self, values: Iterable[Any] | None) -> None:
        """Append every value of an iterable; mappings contribute their values."""
        if values is None:
            return
        items = _iterable_values(values)
        if isinstance(items, Sized):
            self._ensure_capacity(len(self._values) + len(items))
        for value in items:
            self.push(value)

    def pop(self) -> Any:
        """Remove and return the last value."""
        if not self._values:
            raise EmptyCollectionError()
        value = self._values.pop()
        self._auto_truncate()
        return value

    def shift(self) -> Any:
        """Remove and return the first value."""
        if not self._values:
            raise EmptyCollectionError()
        value = self._values.pop(0)
        self._auto_truncate()
        return value

    def unshift(self, *args: Any) -> None:
        """Prepend values, keeping their given order."""
        self.insert(0, *args)

    def insert(self, index: int, *args: Any) -> None:
        """Insert values at a position between 0 and the current size inclusive."""
        check_index(index, len(self._values) + 1)
        if args:
            self._ensure_capacity(len(self._values) + len(args))
            self._values[index:index] = args

    def remove(self, index: int) -> Any:
        """Remove and return the value at a position."""
        check_index(index, len(self._values))
        value = self._values.pop(index)
        self._auto_truncate()
        return value

    def get(self, index: int) -> Any:
        """Return the value at a position."""
        return self._values[check_index(index, len(self._values))]

    def set(self, index: int, value: Any) -> None:
        """Replace the value at a position."""
        self._values[check_index(index, len(self._values))] = value

    def find(self, value: Any) -> int | None:
        """Return the position of the first identical value, or None."""
        return next(
            (position for position, item in enumerate(self._values) if is_identical(value, item)),
            None,
        )

    def contains(self, *args: Any) -> bool:
        """Return whether every given value is present."""
        return all(self.find(value) is not None for value in args)

    def join(self, glue: str | None = None) -> str:
        """Join the values into one string with an optional glue."""
        return join(self._values, glue)

    def first(self) -> Any:
        """Return the first value."""
        if not self._values:
            raise EmptyCollectionError()
        return self._values[0]

    def last(self) -> Any:
        """Return the last value."""
        if not self._values:
            raise EmptyCollectionError()
        return self._values[-1]

    def reverse(self) -> None:
        """Reverse the values in place."""
        self._values.reverse()

    def reversed(self) -> Vector:
        """Return a reversed copy."""
        return self._from_list(self._values[::-1], self._capacity)

    def rotate(self, rotations: int) -> None:
        """Rotate left by `rotations`; negative values rotate right."""
        size = len(self._values)
        if size < 2:
            return
        if rotations < 0:
            rotations = size - (abs(rotations) % size)
        elif rotations > size:
            rotations %= size
        if rotations in (0, size):
            return
        self._values = self._values[rotations:] + self._values[:rotations]

    def sort(self, comparator: Callable[[Any, Any], Any] | None = None) -> None:
        """Sort in place, by a three-way comparator if one is given."""
        self._values = sort_values(self._values, comparator)

    def apply(self, callback: Callable[[Any], Any]) -> None:
        """Replace each value with the callback's result for it."""
        self._values = [callback(value) for value in self._values]

    def map(self, callback: Callable[[Any], Any]) -> Vector:
        """Return a new vector of the callback's results."""
        return self._from_list([callback(value) for value in self._values], self._capacity)

    def filter(self, callback: Callable[[Any], Any] | None = None) -> Vector:
        """Return the values for which the callback (or the value itself) is truthy."""
        if not self._values:
            return Vector()
        if callback is None:
            kept = [value for value in self._values if is_set(value, True)]
        else:
            kept = [value for value in self._values if is_set(callback(value), True)]
        return self._from_list(kept, len(self._values))

    def reduce(self, callback: Callable[[Any, Any], Any], initial: Any = None) -> Any:
        """Fold the values into one, starting from `initial`."""
        carry = initial
        for value in self._values:
            carry = callback(carry, value)
        return carry

    def slice(self, index: int, length: int | None = None) -> Vector:
        """Return a sub-vector; negative index and length count from the end."""
        offset, count = normalize_slice(index, length, len(self._values))
        if count == 0:
            return Vector()
        return self._from_list(self._values[offset:offset + count], max(count, _MIN_CAPACITY))

    def merge(self, values: Iterable[Any]) -> Vector:
        """Return a copy with the given values appended."""
        _iterable_values(values)
        merged = self.copy()
        merged.push_all(values)
        return merged

    def sum(self) -> int | float:
        """Return the numeric sum of the values."""
        return numeric_sum(self._values)

    def isset(self, index: int, check_empty: bool = False) -> bool:
        """Return whether a position holds a set (or, with check_empty, non-empty) value."""
        if index < 0 or index >= len(self._values):
            return False
        return is_set(self._values[index], check_empty)

    def to_list(self) -> list[Any]:
        """Return the values as a new list."""
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)

    def __repr__(self) -> str:
        return f"Vector({self._values!r})"