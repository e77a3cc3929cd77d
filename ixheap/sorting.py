"""
In-place heapsort driven by ``IndexedHeap``.

The storage is split into a heap region and a staging region. The staged
elements are pushed one by one, then every pop parks the current top at the
end of the shrinking heap, so the array ends up sorted without any extra
buffer.
"""

from typing import Any, Callable, MutableSequence, Optional

from .heap import IndexedHeap, Less, Swap, make_swapper


def heapsort(
    storage: MutableSequence[Any],
    less: Optional[Less] = None,
    swap: Optional[Swap] = None,
    staged: Optional[int] = None,
    top: Optional[int] = None,
) -> MutableSequence[Any]:
    """
    Sort ``storage`` in place.

    Parameters
    ----------
    storage : mutable sequence or np.ndarray
        Elements to sort.
    less : callable, optional
        ``less(i, j)`` over positions. Defaults to
        ``storage[i] > storage[j]``, which sorts ascending.
    swap : callable, optional
        ``swap(i, j)`` over positions. Defaults to a swapper for ``storage``.
    staged : int, optional
        Size of the initial heap region. The remaining positions are pushed
        one at a time. Defaults to ``len(storage) // 2``.
    top : int, optional
        Stop after this many pops. The ``top`` highest-priority elements are
        then sorted in the last ``top`` positions and the rest of the array
        is left in heap order.

    Returns
    -------
    storage
        The same object, reordered.
    """
    n = len(storage)
    if staged is None:
        staged = n // 2
    elif staged < 0 or staged > n:
        raise ValueError(f"staged must be in [0, {n}], got {staged}")
    if top is None:
        top = n
    elif top < 0:
        raise ValueError(f"top must be non-negative, got {top}")

    if less is None:
        less = lambda i, j: storage[i] > storage[j]

    heap = IndexedHeap(storage, staged, less, swap)
    while heap.push():
        pass
    for _ in range(top):
        if not heap.pop():
            break
    return storage


def heapsort_by(
    storage: MutableSequence[Any],
    key: Callable[[Any], Any],
    reverse: bool = False,
) -> MutableSequence[Any]:
    """Sort ``storage`` in place by ``key``, descending if ``reverse``."""
    keys = [key(item) for item in storage]
    base_swap = make_swapper(storage)

    # Keys travel with their elements.
    def swap(i: int, j: int) -> None:
        keys[i], keys[j] = keys[j], keys[i]
        base_swap(i, j)

    if reverse:
        less = lambda i, j: keys[i] < keys[j]
    else:
        less = lambda i, j: keys[i] > keys[j]
    return heapsort(storage, less, swap)
