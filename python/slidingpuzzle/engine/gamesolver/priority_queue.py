"""Comparator-driven binary min-heap."""

from __future__ import annotations

import heapq
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class _Entry(Generic[T]):
    __slots__ = ("item", "_higher")

    def __init__(self, item: T, higher: Callable[[T, T], bool]) -> None:
        self.item = item
        self._higher = higher

    def __lt__(self, other: _Entry[T]) -> bool:
        return self._higher(self.item, other.item)


class PriorityQueue(Generic[T]):
    """Heap ordered by ``higher_priority(a, b)``: true when *a* pops first.

    Equal-priority items come out in no particular order.
    """

    def __init__(self, higher_priority: Callable[[T, T], bool]) -> None:
        self._higher = higher_priority
        self._heap: list[_Entry[T]] = []

    def push(self, item: T) -> None:
        heapq.heappush(self._heap, _Entry(item, self._higher))

    def pop(self) -> T:
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        return heapq.heappop(self._heap).item

    def peek(self) -> T:
        if not self._heap:
            raise IndexError("peek at an empty priority queue")
        return self._heap[0].item

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
