"""
Binary-heap minimum priority queue.

The heap is a complete binary tree stored in a list, 1-indexed with slot 0
unused so that parent(i) = i // 2 and children(i) = 2i, 2i + 1. Emptiness is
reported through a None return value rather than an exception.
"""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from ..diagnostics.core import assert_heap_ordered
from ..diagnostics.debug_mode import is_debug_enabled

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class MinPQ(Generic[T]):
    """
    Minimum priority queue over totally ordered items.

    Items are compared with ``<`` only. Among equal keys no order is
    guaranteed beyond heap validity. Tuples such as ``(priority, payload)``
    are the usual way to attach a payload to a key.

    Complexity:
        - add: O(log n) amortized (backing list doubles when full)
        - peek: O(1)
        - poll: O(log n)
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        """
        Initialize an empty queue.

        Args:
            capacity: Initial number of items the backing list can hold.

        Raises:
            ValueError: If capacity is smaller than 1.
        """
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}.")
        self._heap: List[Optional[T]] = [None] * (capacity + 1)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"MinPQ(size={self._size}, capacity={self.capacity()})"

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def capacity(self) -> int:
        """Number of items the queue holds before the next resize."""
        return len(self._heap) - 1

    def add(self, item: T) -> None:
        """
        Insert an item and restore heap order by swimming it up.

        Args:
            item: Item to insert; must be comparable with queued items.
        """
        if self._size == len(self._heap) - 1:
            self._resize(2 * len(self._heap))
        self._size += 1
        self._heap[self._size] = item
        self._swim(self._size)
        self._check()

    def peek(self) -> Optional[T]:
        """
        Return the smallest item without removing it.

        Returns:
            The smallest item, or None if the queue is empty.
        """
        if self._size == 0:
            return None
        return self._heap[1]

    def poll(self) -> Optional[T]:
        """
        Remove and return the smallest item.

        The last item replaces the root and sinks down; the vacated slot is
        cleared so no reference to a removed item is kept.

        Returns:
            The smallest item, or None if the queue is empty.
        """
        if self._size == 0:
            return None
        result = self._heap[1]
        self._heap[1] = self._heap[self._size]
        self._heap[self._size] = None
        self._size -= 1
        self._sink(1)
        self._check()
        return result

    def is_heap_ordered(self) -> bool:
        """Return True if every non-root item is >= its parent."""
        heap = self._heap
        for i in range(2, self._size + 1):
            if heap[i] < heap[i // 2]:
                return False
        return True

    def _swim(self, index: int) -> None:
        heap = self._heap
        while index > 1 and heap[index] < heap[index // 2]:
            parent = index // 2
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sink(self, index: int) -> None:
        heap = self._heap
        while 2 * index <= self._size:
            child = 2 * index
            # Left child wins exact ties
            if child + 1 <= self._size and heap[child + 1] < heap[child]:
                child += 1
            if not heap[child] < heap[index]:
                break
            heap[index], heap[child] = heap[child], heap[index]
            index = child

    def _resize(self, new_length: int) -> None:
        self._heap.extend([None] * (new_length - len(self._heap)))

    def _check(self) -> None:
        if is_debug_enabled():
            assert_heap_ordered(self)
