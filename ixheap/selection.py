"""
Top-k selection with a bounded ``IndexedHeap``.

The weakest of the current top-k sits at the root, so every candidate is
compared against position 0 only and an accepted candidate costs one
``fix(0)``.
"""

import operator
import numpy as np
from typing import Any, Callable, MutableSequence, Optional, Tuple

from loguru import logger

from .heap import IndexedHeap, make_swapper


def kth_largest(
    storage: MutableSequence[Any],
    k: int,
    order: Optional[Callable[[Any, Any], bool]] = None,
) -> Any:
    """
    Return the k-th largest element of ``storage``, reordering it in place.

    Positions ``[0, k)`` become a heap holding the k largest elements with
    the k-th largest at position 0. Rejected elements stay in
    ``[k, len(storage))``; nothing is copied or discarded.

    Parameters
    ----------
    storage : mutable sequence
        Values to select from.
    k : int
        Rank to select, ``1 <= k <= len(storage)``.
    order : callable, optional
        ``order(a, b)`` over element values, True when ``a`` ranks below
        ``b``. Defaults to ``a < b``. Unlike the heap ``less`` it receives
        values, not positions.
    """
    n = len(storage)
    if k < 1 or k > n:
        raise ValueError(f"k must be in [1, {n}], got {k}")
    weaker = order if order is not None else operator.lt

    swap = make_swapper(storage)
    heap = IndexedHeap(
        storage, k, lambda i, j: weaker(storage[i], storage[j]), swap
    )
    for position in range(k, n):
        if weaker(storage[0], storage[position]):
            swap(0, position)
            heap.fix(0)
    return storage[0]


class TopKSelector:
    """
    Streaming selector keeping the k best ``(score, index)`` pairs.

    Scores and indices live in two parallel numpy arrays of length k which
    are swapped together, so the heap orders pairs without boxing them.

    Parameters
    ----------
    k : int
        Number of pairs to keep.
    largest : bool, default=True
        Keep the largest scores if True, the smallest otherwise.
    """

    def __init__(self, k: int, largest: bool = True):
        if k < 1:
            raise ValueError(f"k must be positive, got {k}")
        self.k = k
        self.largest = largest
        self.scores = np.zeros(k, dtype=np.float64)
        self.ids = np.full(k, -1, dtype=np.int64)
        self._heap = IndexedHeap(self.scores, 0, self._weaker, self._swap)
        logger.debug(f"TopKSelector(k={k}, largest={largest})")

    def _weaker(self, i: int, j: int) -> bool:
        if self.largest:
            return self.scores[i] < self.scores[j]
        return self.scores[i] > self.scores[j]

    def _swap(self, i: int, j: int) -> None:
        scores, ids = self.scores, self.ids
        scores[i], scores[j] = scores[j], scores[i]
        ids[i], ids[j] = ids[j], ids[i]

    def _beats(self, score: float, other: float) -> bool:
        return score > other if self.largest else score < other

    def push(self, score: float, index: int) -> bool:
        """
        Offer a candidate.

        Returns True if it was kept, False if it was rejected. NaN scores
        are unordered and always rejected.
        """
        if np.isnan(score):
            return False
        heap = self._heap
        if not heap.is_full():
            position = heap.length
            self.scores[position] = score
            self.ids[position] = index
            heap.push()
            return True
        if self._beats(score, self.scores[0]):
            self.scores[0] = score
            self.ids[0] = index
            heap.fix(0)
            return True
        return False

    def peek(self) -> Tuple[float, int]:
        """Return the weakest kept pair, or ``(nan, -1)`` when empty."""
        if self._heap.is_empty():
            return (float('nan'), -1)
        return (float(self.scores[0]), int(self.ids[0]))

    def get_sorted(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return ``(ids, scores)`` of the kept pairs, best first."""
        n = self._heap.length
        scores = self.scores[:n].copy()
        ids = self.ids[:n].copy()

        def swap(i: int, j: int) -> None:
            scores[i], scores[j] = scores[j], scores[i]
            ids[i], ids[j] = ids[j], ids[i]

        if self.largest:
            weaker = lambda i, j: scores[i] < scores[j]
        else:
            weaker = lambda i, j: scores[i] > scores[j]

        # The copy is already a heap; popping it leaves the weakest at the
        # end and the best at position 0.
        heap = IndexedHeap(scores, n, weaker, swap)
        while heap.pop():
            pass
        return ids, scores

    def __len__(self) -> int:
        return self._heap.length
