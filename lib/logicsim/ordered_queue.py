"""
Rank-ordered queue support.

An OrderedQueue holds (rank, item) pairs and releases them lowest rank first.
Items pushed with equal ranks come out in the order they were pushed : a new
entry always goes *behind* every existing entry of the same rank.

The ordering is kept in a heap, where each entry carries a sequence number as a
tie-breaker.  So items themselves are never compared, and need not be orderable.
"""

import heapq
import itertools
from typing import Generic, TypeVar

__all__ = ["EmptyQueueError", "OrderedQueue"]

T = TypeVar("T")


class EmptyQueueError(IndexError):
    """Raised by a peek or pop on an empty OrderedQueue."""


class OrderedQueue(Generic[T]):
    def __init__(self):
        self._contents: list[tuple[int, int, T]] = []
        self._sequence = itertools.count()

    def __len__(self):
        return len(self._contents)

    def __repr__(self):
        return f"OrderedQueue(<{len(self)} entries>)"

    def push(self, rank: int, item: T) -> None:
        """Insert an item, after all existing items of rank <= the given one."""
        # N.B. bool is an int subclass, but is not a sensible rank.
        if isinstance(rank, bool) or not isinstance(rank, int):
            raise TypeError(f"Argument 'rank', {rank!r} has unsupported type.")
        heapq.heappush(self._contents, (rank, next(self._sequence), item))

    def peek(self) -> tuple[int, T]:
        """Return the lowest-rank (rank, item) pair, without removing it."""
        if not self._contents:
            raise EmptyQueueError("PEEK on empty queue.")
        rank, _, item = self._contents[0]
        return rank, item

    def pop(self) -> tuple[int, T]:
        """Remove and return the lowest-rank (rank, item) pair."""
        if not self._contents:
            raise EmptyQueueError("POP on empty queue.")
        rank, _, item = heapq.heappop(self._contents)
        return rank, item

    def is_empty(self) -> bool:
        return not self._contents
