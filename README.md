# dstructs

Sequence and queue structures with a shared, consistent interface.
The package needs nothing outside the standard library.

| Module                      | Class           | What it is                                                      |
|-----------------------------|-----------------|-----------------------------------------------------------------|
| `dstructs.vector`           | `Vector`        | A growable sequence with indexed access                         |
| `dstructs.deque`            | `Deque`         | A double-ended sequence whose capacity is always a power of two |
| `dstructs.stack`            | `Stack`         | Last in, first out, built on `Vector`                           |
| `dstructs.queue`            | `Queue`         | First in, first out, built on `Deque`                           |
| `dstructs.priority_queue`   | `PriorityQueue` | Highest priority first; equal priorities leave in insertion order |
| `dstructs.common`           | —               | Errors and the helpers the structures share                     |

## Vector and Deque

Both offer the same operations: `push`, `push_all`, `pop`, `shift`, `unshift`,
`insert`, `remove`, `get`, `set`, `find`, `contains`, `join`, `first`, `last`,
`reverse`, `reversed`, `rotate`, `sort`, `apply`, `map`, `filter`, `reduce`,
`slice`, `merge`, `sum`, `isset`, `to_list`, `copy`, `clear`, `allocate` and
`capacity`. They also support `len()`, iteration and `obj[i]` read and write.

```python
from dstructs.vector import Vector
from dstructs.deque import Deque

v = Vector([3, 1, 2])
v.push(4, 5)
v.sort()
print(v.to_list())              # [1, 2, 3, 4, 5]
print(v.join(", "))             # 1, 2, 3, 4, 5
print(v.slice(1, 2).to_list())  # [2, 3]
print(v.slice(-2).to_list())    # [4, 5]
print(v.find(3))                # 2
print(v.find("3"))              # None  (find uses strict identity of type and value)

d = Deque([1, 2, 3, 4])
d.rotate(1)
print(d.to_list())              # [2, 3, 4, 1]
d.unshift("a", "b")
print(d.first(), d.last())      # a 1
```

Some details:

- `insert(index, *values)` accepts any index from 0 to the current size inclusive.
- `rotate(n)` moves the first `n` values to the back; a negative `n` rotates the other way.
- `sort(comparator=None)` takes an optional three-way comparator. Without one,
  values are ordered by `dstructs.common.compare`, which compares numbers and
  numeric strings as numbers.
- `filter(callback=None)` keeps values whose callback result is truthy, or the
  values themselves when no callback is given. `""` and `"0"` count as false.
- `reduce(callback, initial=None)` calls `callback(carry, value)` for each value.
- `sum()` converts each value to a number first: `Vector(["1", 2.5]).sum()` is `3.5`.
- `join(glue=None)` writes `True` as `"1"` and `False` and `None` as `""`.
- `push_all` and `merge` take any iterable except a string; a mapping contributes
  its values.
- `capacity()` reports the buffer length. It grows and shrinks automatically:
  the buffer halves when the size drops to a quarter of the capacity. It is
  never smaller than 8.

## Stack and Queue

```python
from dstructs.stack import Stack
from dstructs.queue import Queue

s = Stack([1, 2, 3])
print(s.peek())         # 3
print(s.to_list())      # [3, 2, 1]  (top to bottom)
print(list(s))          # [3, 2, 1]
print(len(s))           # 0  (iterating pops every value)

q = Queue([1, 2])
q.push(3)
print(q.pop())          # 1
print(q.to_list())      # [2, 3]
```

Iterating a `Stack`, `Queue` or `PriorityQueue` consumes it. Use `to_list()` or
`copy()` to look at the values without removing them.

## PriorityQueue

```python
from dstructs.priority_queue import PriorityQueue

pq = PriorityQueue()
pq.push("low", 1)
pq.push("high", 10)
pq.push("also high", 10)
print(pq.to_list())     # ['high', 'also high', 'low']
print(pq.pop())         # high
print(pq.peek())        # also high
```

Priorities are compared with `dstructs.common.compare`.

## Errors

These are defined in `dstructs.common`:

- `EmptyCollectionError` (an `IndexError`) is raised by `pop`, `shift`, `peek`,
  `first` and `last` on an empty structure.
- `IndexOutOfRangeError` (an `IndexError`) is raised for a position outside the
  valid range, for example `Index out of range: 5, expected 0 <= x <= 2`.
- A non-integer index raises `TypeError`, as does passing a value to `push_all`
  or `merge` that is not an iterable.

`dstructs.common` also defines `KeyNotFoundError`. No structure in this package
raises it.

## What this package does not include

There is no associative structure here. The package has no map or set type and
no hash table that takes arbitrary values, such as lists or objects, as keys.
For those, use Python's `dict` and `set`.

## Tests

The test suite uses pytest and is installed with the `test` extra.