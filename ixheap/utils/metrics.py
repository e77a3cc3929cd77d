"""
Ordering checks and summary statistics for heap experiments.
"""

import numpy as np
from typing import Callable, Dict, List, Sequence


def heap_violations(length: int, less: Callable[[int, int], bool]) -> List[int]:
    """
    Return every position in ``[1, length)`` that outranks its parent.

    An empty list means the heap invariant holds.
    """
    return [i for i in range(1, length) if less(i, (i - 1) // 2)]


def is_heap(length: int, less: Callable[[int, int], bool]) -> bool:
    """Check the heap invariant over positions ``[0, length)``."""
    for i in range(1, length):
        if less(i, (i - 1) // 2):
            return False
    return True


def is_sorted_ascending(
    values: Sequence,
    less: Callable[[int, int], bool],
) -> bool:
    """
    Check that no position outranks the one after it.

    ``less(i, j)`` is the heap predicate, so a sequence produced by popping
    a full heap satisfies this check.
    """
    for i in range(len(values) - 1):
        if less(i, i + 1):
            return False
    return True


def count_inversions(values: Sequence) -> int:
    """
    Count pairs ``i < j`` with ``values[i] > values[j]``.

    O(n^2); meant for small test inputs.
    """
    arr = np.asarray(values)
    n = len(arr)
    total = 0
    for i in range(n - 1):
        total += int(np.sum(arr[i + 1:] < arr[i]))
    return total


def summarize(values: Sequence[float]) -> Dict[str, float]:
    """Return summary statistics for a list of numeric values."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        return {"mean": 0.0, "p50": 0.0, "p95": 0.0, "min": 0.0, "max": 0.0}
    return {
        "mean": float(np.mean(arr)),
        "p50": float(np.percentile(arr, 50)),
        "p95": float(np.percentile(arr, 95)),
        "min": float(np.min(arr)),
        "max": float(np.max(arr)),
    }
