"""
Synthetic workload generation for heap benchmarks and tests.

Provides a unified interface for:
- Random integers
- Random float scores
- Sorted score batches (k-way merge input)
- Nearly sorted arrays
"""

import numpy as np
from typing import List


class WorkloadLoader:
    """
    Unified generator for benchmark workloads.

    Parameters
    ----------
    random_state : int, default=42
        Random seed for reproducibility.
    """

    def __init__(self, random_state: int = 42):
        self.random_state = random_state
        self.rng = np.random.default_rng(random_state)

    def load(self, workload_name: str, **kwargs):
        """
        Generate a workload by name.

        Parameters
        ----------
        workload_name : str
            One of 'random_ints', 'random_scores', 'sorted_batches',
            'nearly_sorted'.
        **kwargs : dict
            Workload-specific parameters.
        """
        loaders = {
            'random_ints': self.random_ints,
            'random_scores': self.random_scores,
            'sorted_batches': self.sorted_batches,
            'nearly_sorted': self.nearly_sorted,
        }

        if workload_name not in loaders:
            raise ValueError(f"Unknown workload: {workload_name}. "
                             f"Available: {list(loaders.keys())}")

        return loaders[workload_name](**kwargs)

    def random_ints(self, n: int = 1000, high: int = 1_000_000) -> np.ndarray:
        """Uniform integers in ``[0, high)``."""
        return self.rng.integers(0, high, size=n, dtype=np.int64)

    def random_scores(self, n: int = 1000) -> np.ndarray:
        """Standard normal float64 scores."""
        return self.rng.standard_normal(n)

    def sorted_batches(
        self,
        n_batches: int = 3,
        batch_size: int = 4,
    ) -> List[np.ndarray]:
        """Score batches, each sorted in descending order."""
        batches = []
        for _ in range(n_batches):
            scores = self.rng.uniform(0.0, 10.0, size=batch_size)
            batches.append(np.sort(scores)[::-1].copy())
        return batches

    def nearly_sorted(self, n: int = 1000, swaps: int = 10) -> np.ndarray:
        """Ascending integers with ``swaps`` random transpositions."""
        values = np.arange(n, dtype=np.int64)
        if n < 2:
            return values
        for _ in range(swaps):
            i, j = self.rng.integers(0, n, size=2)
            values[[i, j]] = values[[j, i]]
        return values
