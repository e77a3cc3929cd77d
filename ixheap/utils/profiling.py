"""
Call counting and timing for heap callbacks.
"""

import os
import time
from collections import Counter, defaultdict
from typing import Callable, Dict, Optional, Tuple

TRUTHY = {"1", "true", "yes", "y", "t"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "0").strip().lower() in TRUTHY


class _Span:
    """Context manager charging elapsed time to one profiler key."""

    __slots__ = ("_profiler", "_key", "_start")

    def __init__(self, profiler: Optional["Profiler"], key: str) -> None:
        self._profiler = profiler
        self._key = key
        self._start = 0.0

    def __enter__(self) -> "_Span":
        if self._profiler is not None:
            self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._profiler is not None:
            self._profiler.record(self._key, time.perf_counter() - self._start)
        return False


_DISABLED_SPAN = _Span(None, "")


class Profiler:
    """
    Per-key call counts and accumulated wall time.

    A disabled profiler ignores every call. ``from_env`` enables it when
    IXHEAP_PROFILE is truthy.
    """

    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled
        self._counts: Counter = Counter()
        self._seconds: Dict[str, float] = defaultdict(float)

    @classmethod
    def from_env(cls) -> "Profiler":
        return cls(_env_flag("IXHEAP_PROFILE"))

    def time(self, key: str) -> _Span:
        return _Span(self, key) if self.enabled else _DISABLED_SPAN

    def count(self, key: str, value: int = 1) -> None:
        if self.enabled:
            self._counts[key] += value

    def record(self, key: str, elapsed: float) -> None:
        """Add one timed call of ``elapsed`` seconds under ``key``."""
        if self.enabled:
            self._counts[key] += 1
            self._seconds[key] += elapsed

    def get_count(self, key: str) -> int:
        return self._counts[key]

    def reset(self) -> None:
        self._counts.clear()
        self._seconds.clear()

    def summary(self) -> Dict[str, Dict[str, float]]:
        keys = sorted(set(self._counts) | set(self._seconds))
        return {
            key: {"count": self._counts[key], "total_s": self._seconds.get(key, 0.0)}
            for key in keys
        }

    def format_summary(self) -> str:
        lines = ["ixheap profile summary:"]
        lines.extend(
            f"{key}: count={stats['count']} total_s={stats['total_s']:.6f}"
            for key, stats in self.summary().items()
        )
        return "\n".join(lines)


def instrument(
    less: Callable[[int, int], bool],
    swap: Callable[[int, int], None],
    profiler: Profiler,
) -> Tuple[Callable[[int, int], bool], Callable[[int, int], None]]:
    """
    Wrap heap callbacks so every call is counted under ``less`` and ``swap``.

    Returns the callbacks unchanged when the profiler is disabled.
    """
    if not profiler.enabled:
        return less, swap

    def counted_less(i: int, j: int) -> bool:
        profiler.count("less")
        return less(i, j)

    def counted_swap(i: int, j: int) -> None:
        profiler.count("swap")
        swap(i, j)

    return counted_less, counted_swap
