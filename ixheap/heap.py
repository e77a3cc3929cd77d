"""
Indexed binary heap over caller-owned storage.

The heap never touches elements directly. It orders positions of an
existing fixed-size sequence through a ``less(i, j)`` predicate and moves
them through a ``swap(i, j)`` operation, so the same storage can hold the
heap region ``[0, length)`` and free or already-popped slots
``[length, capacity)`` at the same time.
"""

import numpy as np
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

T = TypeVar("T")

Less = Callable[[int, int], bool]
Swap = Callable[[int, int], None]


def make_swapper(storage: Any) -> Swap:
    """
    Build a ``swap(i, j)`` callable for ``storage``.

    numpy arrays are swapped along axis 0 with fancy indexing, so rows of a
    2-D array move as a whole. Any other mutable sequence uses item
    assignment.
    """
    if isinstance(storage, np.ndarray):
        def swap(i: int, j: int) -> None:
            storage[[i, j]] = storage[[j, i]]
    else:
        def swap(i: int, j: int) -> None:
            storage[i], storage[j] = storage[j], storage[i]
    return swap


class IndexedHeap(Generic[T]):
    """
    Binary heap over positions ``[0, length)`` of ``storage``.

    Position 0 always holds a maximal element with respect to ``less``:
    ``less(i, j)`` is True when the element at ``i`` has strictly higher
    priority than the element at ``j``.

    Parameters
    ----------
    storage : sequence
        Fixed-size indexable storage owned by the caller. Its length is the
        heap capacity and is never changed.
    length : int
        Number of leading positions that initially belong to the heap.
        Clamped to ``[0, len(storage)]``.
    less : callable
        ``less(i, j) -> bool`` ordering predicate over positions.
    swap : callable, optional
        ``swap(i, j)`` exchanging two positions of ``storage``. Defaults to
        ``make_swapper(storage)``.
    """

    __slots__ = ("_storage", "_length", "_capacity", "_less", "_swap")

    def __init__(
        self,
        storage: Sequence[T],
        length: int,
        less: Less,
        swap: Optional[Swap] = None,
    ):
        capacity = len(storage)
        if length > capacity:
            length = capacity
        elif length < 0:
            length = 0

        self._storage = storage
        self._length = length
        self._capacity = capacity
        self._less = less
        self._swap = swap if swap is not None else make_swapper(storage)

        for index in range(self._length // 2 - 1, -1, -1):
            self._down(index)

    def _down(self, begin: int) -> bool:
        """Sift the element at ``begin`` toward the leaves. Returns True if it moved."""
        less = self._less
        n = self._length
        index = begin
        while True:
            left = 2 * index + 1
            if left >= n:
                break
            child = left
            right = left + 1
            if right < n and less(right, left):
                child = right
            if not less(child, index):
                break
            self._swap(child, index)
            index = child
        return index > begin

    def _up(self, index: int) -> None:
        """Sift the element at ``index`` toward the root."""
        less = self._less
        while index > 0:
            parent = (index - 1) // 2
            if not less(index, parent):
                break
            self._swap(parent, index)
            index = parent

    @property
    def storage(self) -> Sequence[T]:
        return self._storage

    @property
    def length(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self._length == 0

    def is_full(self) -> bool:
        return self._length == self._capacity

    def push(self) -> bool:
        """
        Add the element staged at position ``length`` to the heap.

        The caller writes the new element into the storage first. Returns
        False, with no effect, if the heap is already full.
        """
        if self.is_full():
            return False
        self._length += 1
        self._up(self._length - 1)
        return True

    def pop(self) -> bool:
        """
        Move the top element to position ``length - 1`` and shrink the heap.

        After a successful pop the former top sits at the new ``length``.
        Returns False, with no effect, if the heap is empty.
        """
        if self.is_empty():
            return False
        self._length -= 1
        self._swap(0, self._length)
        self._down(0)
        return True

    def fix(self, index: int) -> None:
        """Restore the heap after the element at ``index`` was changed in place."""
        if not self._down(index):
            self._up(index)

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def __repr__(self) -> str:
        return f"IndexedHeap(length={self._length}, capacity={self._capacity})"
