"""
Tests for k-way merge of sorted batches.
"""

from collections import namedtuple

import numpy as np
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from ixheap.merge import BatchCursor, ensure_sorted_batch, merge_batches
from ixheap.utils.data_loader import WorkloadLoader

Document = namedtuple("Document", ["id", "score"])

PARTITIONS = [
    {101: 9.2, 102: 6.6, 103: 5.7, 104: 4.3},
    {201: 9.1, 202: 6.5, 203: 5.6, 204: 4.2},
    {301: 9.3, 302: 6.7, 303: 5.8, 304: 4.4},
]


def by_score(doc):
    return doc.score


class TestBatchCursor:
    """Test cursor bookkeeping."""

    def test_walks_batch(self):
        cursor = BatchCursor([3.0, 2.0])
        assert cursor.current() == 3.0
        assert cursor.score == 3.0
        cursor.advance()
        assert cursor.current() == 2.0
        cursor.advance()
        assert cursor.exhausted
        assert cursor.current() is None

    def test_exhausted_score_is_negative_infinity(self):
        cursor = BatchCursor([])
        assert cursor.exhausted
        assert cursor.score == float('-inf')

    def test_key(self):
        cursor = BatchCursor([Document(1, 0.5)], key=by_score)
        assert cursor.score == 0.5


class TestMergeBatches:
    """Test the merged stream."""

    @pytest.fixture
    def batches(self):
        return [
            ensure_sorted_batch(
                [Document(doc_id, score) for doc_id, score in partition.items()],
                key=by_score,
            )
            for partition in PARTITIONS
        ]

    def test_documents_in_descending_order(self, batches):
        merged = list(merge_batches(batches, key=by_score))
        scores = [doc.score for doc in merged]

        assert len(merged) == 12
        assert len({doc.id for doc in merged}) == 12
        assert scores == sorted(scores, reverse=True)
        assert merged[0].id == 301
        assert merged[-1].id == 204

    def test_uneven_and_empty_batches(self):
        batches = [[9, 4, 1], [], [8], [7, 6, 5, 3, 2]]
        assert list(merge_batches(batches)) == [9, 8, 7, 6, 5, 4, 3, 2, 1]

    def test_no_batches(self):
        assert list(merge_batches([])) == []

    def test_all_empty(self):
        assert list(merge_batches([[], []])) == []

    def test_yields_none_items(self):
        """Items are yielded as-is, including None."""
        batches = [[(2, None)], [(1, 'x')]]
        merged = list(merge_batches(batches, key=lambda item: item[0]))
        assert merged == [(2, None), (1, 'x')]

    def test_generated_batches(self):
        loader = WorkloadLoader(random_state=5)
        batches = loader.load('sorted_batches', n_batches=6, batch_size=20)
        merged = list(merge_batches(batches))

        expected = np.sort(np.concatenate(batches))[::-1]
        np.testing.assert_array_equal(merged, expected)

    def test_negative_infinity_items_after_empty_batch(self):
        """Live -inf items still outrank an exhausted batch."""
        neg_inf = float('-inf')
        assert list(merge_batches([[], [neg_inf]])) == [neg_inf]
        assert list(merge_batches([[], [1.0, neg_inf], [], [neg_inf]])) == [
            1.0, neg_inf, neg_inf
        ]

    def test_ensure_sorted_batch(self):
        assert ensure_sorted_batch([1, 3, 2]) == [3, 2, 1]


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
