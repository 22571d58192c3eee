"""A double-ended queue backed by a power-of-two capacity ring."""

from __future__ import annotations

from collections import deque as _ring
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from dstructs.common import (
    EmptyCollectionError,
    check_index,
    is_identical,
    is_set,
    join,
    next_power_of_2,
    normalize_slice,
    numeric_sum,
    sort_values,
)

__all__ = ["Deque"]

_MIN_CAPACITY = 8


def _capacity_for_size(size: int) -> int:
    return next_power_of_2(size, _MIN_CAPACITY)


def _iterable_values(values: Any) -> Iterable[Any]:
    """Return the values to add from an iterable, or raise if it is not one."""
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise TypeError("Value must be an array or traversable object")
    if isinstance(values, Mapping):
        return values.values()
    return values


class Deque:
    """A sequence with cheap access at both ends; capacity is always a power of two."""

    __slots__ = ("_values", "_capacity")

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self._values: _ring[Any] = _ring()
        self._capacity = _MIN_CAPACITY
        if values is not None:
            self.push_all(values)

    @classmethod
    def _from_values(cls, values: Iterable[Any], capacity: int) -> Deque:
        result = cls.__new__(cls)
        result._values = _ring(values)
        result._capacity = capacity
        return result

    def _auto_truncate(self) -> None:
        if len(self._values) <= self._capacity // 4 and self._capacity // 2 >= _MIN_CAPACITY:
            self._capacity //= 2

    def _push_one(self, value: Any) -> None:
        if len(self._values) == self._capacity:
            self._capacity <<= 1
        self._values.append(value)

    def allocate(self, capacity: int) -> None:
        """Make sure the deque can hold at least `capacity` values."""
        wanted = _capacity_for_size(capacity)
        if wanted > self._capacity:
            self._capacity = wanted

    def capacity(self) -> int:
        """Return the current buffer length."""
        return self._capacity

    def clear(self) -> None:
        """Remove every value and reset the buffer to its minimum length."""
        self._values.clear()
        self._capacity = _MIN_CAPACITY

    def copy(self) -> Deque:
        """Return a shallow copy with the same capacity."""
        return self._from_values(self._values, self._capacity)

    def push(self, *args: Any) -> None:
        """Append one or more values to the back."""
        if len(args) == 1:
            self._push_one(args[0])
            return
        self.allocate(len(self._values) + len(args))
        self._values.extend(args)

    def push_all(self, values: Iterable[Any] | None) -> None:
        """Append every value of an iterable; mappings contribute their values."""
        if values is None:
            return
        for value in _iterable_values(values):
            self._push_one(value)

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
        value = self._values.popleft()
        self._auto_truncate()
        return value

    def unshift(self, *args: Any) -> None:
        """Prepend values, keeping their given order."""
        self.allocate(len(self._values) + len(args))
        self._values.extendleft(reversed(args))

    def insert(self, index: int, *args: Any) -> None:
        """Insert values at a position between 0 and the current size inclusive."""
        size = len(self._values)
        if index == size:
            self.push(*args) if len(args) != 1 else self._push_one(args[0])
            return
        if index == 0:
            self.unshift(*args)
            return
        check_index(index, size)
        if not args:
            return
        self.allocate(size + len(args))
        for offset, value in enumerate(args):
            self._values.insert(index + offset, value)

    def remove(self, index: int) -> Any:
        """Remove and return the value at a position."""
        check_index(index, len(self._values))
        value = self._values[index]
        del self._values[index]
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

    def reversed(self) -> Deque:
        """Return a reversed copy with the same capacity."""
        return self._from_values(reversed(self._values), self._capacity)

    def rotate(self, rotations: int) -> None:
        """Rotate left by `rotations` (front values move to the back); negative rotates right."""
        size = len(self._values)
        if size < 2:
            return
        if rotations < 0:
            self._values.rotate(abs(rotations) % size)
        elif rotations > 0:
            self._values.rotate(-(rotations % size))

    def sort(self, comparator: Callable[[Any, Any], Any] | None = None) -> None:
        """Sort in place, by a three-way comparator if one is given."""
        self._values = _ring(sort_values(self._values, comparator))

    def apply(self, callback: Callable[[Any], Any]) -> None:
        """Replace each value with the callback's result for it."""
        self._values = _ring(callback(value) for value in self._values)

    def map(self, callback: Callable[[Any], Any]) -> Deque:
        """Return a new deque of the callback's results."""
        return self._from_values([callback(value) for value in self._values], self._capacity)

    def filter(self, callback: Callable[[Any], Any] | None = None) -> Deque:
        """Return the values for which the callback (or the value itself) is truthy."""
        if not self._values:
            return Deque()
        if callback is None:
            kept = [value for value in self._values if is_set(value, True)]
        else:
            kept = [value for value in self._values if is_set(callback(value), True)]
        return self._from_values(kept, _capacity_for_size(len(kept)))

    def reduce(self, callback: Callable[[Any, Any], Any], initial: Any = None) -> Any:
        """Fold the values into one, starting from `initial`."""
        carry = initial
        for value in self._values:
            carry = callback(carry, value)
        return carry

    def slice(self, index: int, length: int | None = None) -> Deque:
        """Return a sub-deque; negative index and length count from the end."""
        offset, count = normalize_slice(index, length, len(self._values))
        if count == 0:
            return Deque()
        values = list(self._values)[offset:offset + count]
        return self._from_values(values, _capacity_for_size(count))

    def merge(self, values: Iterable[Any]) -> Deque:
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
        """Return the values as a new list, front to back."""
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._values))

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)

    def __repr__(self) -> str:
        return f"Deque({list(self._values)!r})"