"""
Tests for the growable queue wrapper.
"""

import operator
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from ixheap.queue import GrowableQueue


class TestGrowableQueue:
    """Test suite for GrowableQueue."""

    @pytest.fixture
    def queue(self):
        """Queue seeded with [5, 9, 12]."""
        return GrowableQueue(5, 9, 12)

    def test_initial_heap_order(self, queue):
        assert queue.buffer == [12, 9, 5]
        assert len(queue) == 3
        assert queue.capacity == 3

    def test_growth_arrangement(self, queue):
        """Pushing past capacity rebuilds over a doubled buffer."""
        for value in [0, 3, 7, 4]:
            queue.push(value)

        assert queue.buffer == [12, 9, 7, 0, 3, 5, 4]
        assert queue.capacity == 7

    def test_drain_descending(self, queue):
        for value in [0, 3, 7, 4]:
            queue.push(value)

        assert list(queue.drain()) == [12, 9, 7, 5, 4, 3, 0]
        assert len(queue) == 0
        assert not queue

    def test_pop_empty_raises(self):
        queue = GrowableQueue()
        with pytest.raises(IndexError):
            queue.pop()

    def test_push_into_empty_queue(self):
        """An empty queue grows from zero capacity."""
        queue = GrowableQueue()
        queue.push(3)
        queue.push(1)
        queue.push(2)

        assert queue.capacity == 3
        assert queue.peek() == 3
        assert list(queue.drain()) == [3, 2, 1]

    def test_peek(self, queue):
        assert queue.peek() == 12
        assert len(queue) == 3
        assert GrowableQueue().peek() is None

    def test_update(self, queue):
        """Updating a position re-settles the heap."""
        assert queue.update(2, 20)
        assert queue.peek() == 20
        assert not queue.update(3, 1)
        assert not queue.update(-1, 1)
        assert list(queue.drain()) == [20, 12, 9]

    def test_min_queue(self):
        queue = GrowableQueue(4, 2, 8, order=operator.lt)
        queue.push(1)

        assert list(queue.drain()) == [1, 2, 4, 8]

    def test_push_without_growth(self, queue):
        """Popped slots are reused before the buffer grows."""
        queue.pop()
        queue.push(1)

        assert queue.capacity == 3
        assert sorted(queue.buffer) == [1, 5, 9]


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
