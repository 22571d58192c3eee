"""Shared helpers: errors, slicing rules, value conversion, comparison and joining."""

from __future__ import annotations

import functools
import math
import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any

__all__ = [
    "EmptyCollectionError",
    "IndexOutOfRangeError",
    "KeyNotFoundError",
    "next_power_of_2",
    "normalize_slice",
    "to_text",
    "join",
    "to_number",
    "numeric_sum",
    "compare",
    "sort_values",
    "is_set",
    "uses_keys",
    "check_index",
    "is_identical",
]


class EmptyCollectionError(IndexError):
    """Raised when an operation needs at least one value but the collection is empty."""

    def __init__(self, message: str = "Unexpected empty state") -> None:
        super().__init__(message)


class IndexOutOfRangeError(IndexError):
    """Raised when a positional index falls outside a collection."""

    def __init__(self, index: int, size: int) -> None:
        if size == 0:
            message = f"Index out of range: {index}"
        else:
            message = f"Index out of range: {index}, expected 0 <= x <= {size - 1}"
        super().__init__(message)
        self.index = index
        self.size = size


class KeyNotFoundError(KeyError):
    """Raised when a key is looked up that a table does not hold."""

    def __init__(self, message: str = "Key not found") -> None:
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?)")
_WHOLE_NUMERIC = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*")


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple, dict)):
        return "array"
    return "object"


def _is_truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


def next_power_of_2(n: int, minimum: int) -> int:
    """Return the smallest power of two that is >= n, but never less than minimum."""
    if n < minimum:
        return minimum
    if n <= 0:
        return 0
    return 1 << (n - 1).bit_length()


def normalize_slice(offset: int, length: int | None, size: int) -> tuple[int, int]:
    """Resolve negative and overlong slice arguments into a concrete (offset, length).

    A length of None means "up to the end".
    """
    if length is None:
        length = size
    if size == 0 or offset >= size:
        return 0, 0
    if offset < 0:
        offset = max(0, size + offset)
    if length < 0:
        length = max(0, (size + length) - offset)
    if offset + length > size:
        length = max(0, size - offset)
    return offset, length


def _float_text(value: float) -> str:
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    if value.is_integer() and abs(value) < 1e15:
        text = str(int(value))
        if text == "0" and math.copysign(1.0, value) < 0:
            return "-0"
        return text
    return repr(value)


def to_text(value: Any) -> str:
    """Convert a value to its string form, with booleans as "1"/"" and None as ""."""
    if isinstance(value, str):
        return value
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_text(value)
    if isinstance(value, (list, tuple, dict)):
        return "Array"
    return str(value)


def join(values: Iterable[Any], glue: str | None = None) -> str:
    """Join values into one string, with an optional glue between them."""
    return (glue or "").join(to_text(value) for value in values)


def to_number(value: Any) -> int | float:
    """Convert a scalar to an int or float, reading the numeric prefix of strings."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if value is None:
        return 0
    if isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if not match:
            return 0
        text = match.group(1)
        if match.group(2) is not None or match.group(3) is not None:
            return float(text)
        return int(text)
    if isinstance(value, (list, tuple, dict)):
        raise TypeError("Unsupported operand types: array + int")
    raise TypeError(f"Unsupported operand type: {_type_name(value)}")


def numeric_sum(values: Iterable[Any]) -> int | float:
    """Add up values after converting each one to a number; an empty input sums to 0."""
    total: int | float = 0
    for value in values:
        total = total + to_number(value)
    return total


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _comparable(a: Any, b: Any) -> tuple[Any, Any]:
    if a is None and isinstance(b, str):
        return "", b
    if b is None and isinstance(a, str):
        return a, ""
    if a is None or b is None or isinstance(a, bool) or isinstance(b, bool):
        return _is_truthy(a), _is_truthy(b)
    if _is_number(a) and isinstance(b, str):
        if _WHOLE_NUMERIC.fullmatch(b):
            return a, to_number(b)
        return to_text(a), b
    if isinstance(a, str) and _is_number(b):
        if _WHOLE_NUMERIC.fullmatch(a):
            return to_number(a), b
        return a, to_text(b)
    if isinstance(a, str) and isinstance(b, str):
        if _WHOLE_NUMERIC.fullmatch(a) and _WHOLE_NUMERIC.fullmatch(b):
            return to_number(a), to_number(b)
    return a, b


def compare(a: Any, b: Any) -> int:
    """Three-way comparison returning -1, 0 or 1 with loose scalar rules."""
    x, y = _comparable(a, b)
    try:
        if x == y:
            return 0
        return -1 if x < y else 1
    except TypeError:
        tx, ty = to_text(x), to_text(y)
        if tx == ty:
            return 0
        return -1 if tx < ty else 1


def sort_values(
    values: Iterable[Any],
    comparator: Callable[[Any, Any], Any] | None = None,
) -> list[Any]:
    """Return the values sorted by the comparator, or by compare() when none is given."""
    if comparator is None:
        key = functools.cmp_to_key(compare)
    else:
        key = functools.cmp_to_key(lambda x, y: int(comparator(x, y)))
    return sorted(values, key=key)


def is_set(value: Any, check_empty: bool = False) -> bool:
    """Return whether a value counts as set (not None) or, with check_empty, as non-empty."""
    if not check_empty:
        return value is not None
    return _is_truthy(value)


def uses_keys(mapping: Mapping[Any, Any] | Iterable[Any]) -> bool:
    """Return whether a mapping's keys differ from the sequence 0, 1, 2, ..."""
    if not isinstance(mapping, Mapping):
        return False
    for expected, key in enumerate(mapping):
        if isinstance(key, bool) or not isinstance(key, int) or key != expected:
            return True
    return False


def check_index(index: Any, size: int) -> int:
    """Validate a positional index against a size and return it."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Index must be of type integer, {_type_name(index)} given")
    if index < 0 or index >= size:
        raise IndexOutOfRangeError(index, size)
    return index


_SCALARS = (type(None), bool, int, float, str, bytes)


def is_identical(a: Any, b: Any) -> bool:
    """Strict identity check: same type and value for scalars and arrays, same object otherwise."""
    if type(a) is not type(b):
        return False
    if isinstance(a, _SCALARS):
        return a == b
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(is_identical(x, y) for x, y in zip(a, b))
    if isinstance(a, dict):
        if list(a.keys()) != list(b.keys()):
            return False
        return all(is_identical(a[k], b[k]) for k in a)
    return a is b