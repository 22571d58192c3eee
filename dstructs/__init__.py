"""Sequence and queue structures: vector, deque, stack, queue and priority queue."""

__version__ = "1.4.0"