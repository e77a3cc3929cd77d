"""
Growable priority queue built on top of ``IndexedHeap``.

The heap itself never resizes. This wrapper owns a list buffer and a heap
view over it; when the view is full it allocates a larger buffer, copies the
live elements and builds a new view.
"""

import operator
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from loguru import logger

from .heap import IndexedHeap

T = TypeVar("T")


class GrowableQueue(Generic[T]):
    """
    Priority queue with dynamically sized storage.

    Parameters
    ----------
    *values : T
        Initial elements.
    order : callable, default=operator.gt
        ``order(a, b) -> bool`` over element values, not positions; True
        when ``a`` must come out before ``b``. The default gives a max-queue.
    """

    def __init__(self, *values: T, order: Callable[[T, T], bool] = operator.gt):
        self._order = order
        self._slots: List[Optional[T]] = list(values)
        self._heap = self._view(len(self._slots))

    def _view(self, length: int) -> IndexedHeap:
        slots = self._slots
        order = self._order
        return IndexedHeap(
            slots, length,
            lambda i, j: order(slots[i], slots[j]),
        )

    def push(self, value: T) -> None:
        """Insert ``value``, growing the buffer when the heap is full."""
        length = self._heap.length
        if self._heap.is_full():
            capacity = 2 * length + 1
            logger.debug(f"Growing queue buffer {self._heap.capacity} -> {capacity}")
            slots: List[Optional[T]] = [None] * capacity
            slots[:length] = self._slots[:length]
            slots[length] = value
            self._slots = slots
            self._heap = self._view(length + 1)
            return
        self._slots[length] = value
        self._heap.push()

    def pop(self) -> T:
        """Remove and return the top element."""
        if not self._heap.pop():
            raise IndexError("pop from empty queue")
        position = self._heap.length
        value = self._slots[position]
        self._slots[position] = None
        return value

    def peek(self) -> Optional[T]:
        """Return the top element without removing it."""
        if self._heap.is_empty():
            return None
        return self._slots[0]

    def update(self, index: int, value: T) -> bool:
        """Replace the element at heap position ``index`` and re-settle it."""
        if 0 <= index < self._heap.length:
            self._slots[index] = value
            self._heap.fix(index)
            return True
        return False

    def drain(self) -> Iterator[T]:
        """Pop elements in priority order until the queue is empty."""
        while self._heap:
            yield self.pop()

    @property
    def buffer(self) -> List[T]:
        """Live elements in heap order."""
        return self._slots[:self._heap.length]

    @property
    def capacity(self) -> int:
        return self._heap.capacity

    def __len__(self) -> int:
        return self._heap.length

    def __bool__(self) -> bool:
        return self._heap.length > 0

    def __repr__(self) -> str:
        return f"GrowableQueue({self.buffer!r})"
