"""
K-way merge of batches that are already sorted by descending score.
"""

from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence

from loguru import logger

from .heap import IndexedHeap


def _identity(item: Any) -> Any:
    return item


def ensure_sorted_batch(
    items: Iterable[Any],
    key: Optional[Callable[[Any], float]] = None,
) -> List[Any]:
    """Return ``items`` as a list sorted by descending ``key``."""
    return sorted(items, key=key or _identity, reverse=True)


class BatchCursor:
    """
    Read position inside one sorted batch.

    An exhausted cursor reports a score of ``-inf``. The merge heap ranks it
    below every live cursor regardless of score, so live ``-inf`` items are
    still read.
    """

    __slots__ = ("items", "key", "position")

    def __init__(
        self,
        items: Sequence[Any],
        key: Optional[Callable[[Any], float]] = None,
    ):
        self.items = items
        self.key = key or _identity
        self.position = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.items)

    def current(self) -> Optional[Any]:
        if self.exhausted:
            return None
        return self.items[self.position]

    @property
    def score(self) -> float:
        if self.exhausted:
            return float('-inf')
        return self.key(self.items[self.position])

    def advance(self) -> None:
        self.position += 1

    def __repr__(self) -> str:
        return f"BatchCursor(position={self.position}, size={len(self.items)})"


def _outranks(a: BatchCursor, b: BatchCursor) -> bool:
    """True when cursor ``a`` must be read before cursor ``b``."""
    if a.exhausted or b.exhausted:
        return b.exhausted and not a.exhausted
    return a.score > b.score


def merge_batches(
    batches: Iterable[Sequence[Any]],
    key: Optional[Callable[[Any], float]] = None,
) -> Iterator[Any]:
    """
    Merge batches sorted by descending ``key`` into one descending stream.

    Parameters
    ----------
    batches : iterable of sequences
        Each batch must already be sorted by non-increasing ``key``.
    key : callable, optional
        Score function; defaults to the item itself.

    Yields
    ------
    item
        Every item of every batch exactly once, in non-increasing key order.
    """
    cursors = [BatchCursor(batch, key) for batch in batches]
    if not cursors:
        return
    logger.debug(f"Merging {len(cursors)} batches")

    heap = IndexedHeap(
        cursors, len(cursors),
        lambda i, j: _outranks(cursors[i], cursors[j]),
    )
    emitted = 0
    while True:
        head = cursors[0]
        if head.exhausted:
            break
        yield head.current()
        emitted += 1
        head.advance()
        heap.fix(0)
    logger.debug(f"Merge finished after {emitted} items")
