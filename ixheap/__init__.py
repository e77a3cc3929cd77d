"""
ixheap: in-place indexed binary heap over caller-owned storage.

The heap orders positions of an existing sequence through caller-supplied
``less(i, j)`` and ``swap(i, j)`` callbacks and never copies elements.
"""

from loguru import logger

from .heap import IndexedHeap, make_swapper
from .queue import GrowableQueue
from .selection import TopKSelector, kth_largest
from .merge import BatchCursor, merge_batches, ensure_sorted_batch
from .sorting import heapsort, heapsort_by

logger.disable("ixheap")

__version__ = '0.1.0'

__all__ = [
    'IndexedHeap',
    'make_swapper',
    'GrowableQueue',
    'TopKSelector',
    'kth_largest',
    'BatchCursor',
    'merge_batches',
    'ensure_sorted_batch',
    'heapsort',
    'heapsort_by',
]
