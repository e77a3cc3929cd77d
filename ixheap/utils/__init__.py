"""
Utility modules for ixheap.
"""

from .data_loader import WorkloadLoader
from .log import configure_logging
from .metrics import (
    heap_violations,
    is_heap,
    is_sorted_ascending,
    count_inversions,
    summarize
)
from .profiling import Profiler, instrument

__all__ = [
    'WorkloadLoader',
    'configure_logging',
    'heap_violations',
    'is_heap',
    'is_sorted_ascending',
    'count_inversions',
    'summarize',
    'Profiler',
    'instrument',
]
