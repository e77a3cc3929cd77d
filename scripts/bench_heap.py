#!/usr/bin/env python3
"""
Benchmark harness for ixheap.

Runs in-place heapsort, top-k selection and k-way merge on generated
workloads, checks each result against a ``sorted``/``heapq`` oracle, and
reports wall time plus instrumented ``less``/``swap`` call counts.
"""

import argparse
import heapq
import json
import time
from pathlib import Path
import sys

import numpy as np
import yaml
from tqdm import tqdm
from typing import Any, Dict

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from ixheap.heap import make_swapper
from ixheap.merge import merge_batches
from ixheap.selection import TopKSelector
from ixheap.sorting import heapsort
from ixheap.utils.data_loader import WorkloadLoader
from ixheap.utils.log import configure_logging
from ixheap.utils.metrics import summarize
from ixheap.utils.profiling import Profiler, instrument

DEFAULTS: Dict[str, Any] = {
    "n": 10000,
    "k": 10,
    "batches": 8,
    "repeats": 3,
    "seed": 42,
    "workload": "random_ints",
    "out": None,
    "log_level": None,
}


def load_config(path: str) -> Dict[str, Any]:
    """Read a YAML mapping of option overrides."""
    with open(path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise ValueError(f"Config {path} must contain a mapping")
    unknown = set(config) - set(DEFAULTS)
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    return config


def bench_heapsort(values: np.ndarray, profiler: Profiler) -> float:
    storage = values.copy()
    less, swap = instrument(
        lambda i, j: storage[i] > storage[j], make_swapper(storage), profiler
    )
    t0 = time.perf_counter()
    heapsort(storage, less, swap)
    elapsed = time.perf_counter() - t0
    if not np.array_equal(storage, np.sort(values)):
        raise RuntimeError("heapsort result does not match np.sort")
    return elapsed


def bench_topk(values: np.ndarray, k: int) -> float:
    selector = TopKSelector(k)
    t0 = time.perf_counter()
    for index, score in enumerate(values):
        selector.push(float(score), index)
    elapsed = time.perf_counter() - t0
    _, scores = selector.get_sorted()
    expected = heapq.nlargest(k, values.tolist())
    if not np.allclose(scores, expected):
        raise RuntimeError("top-k scores do not match heapq.nlargest")
    return elapsed


def bench_merge(loader: WorkloadLoader, n: int, n_batches: int) -> float:
    batch_size = max(1, n // n_batches)
    batches = loader.load("sorted_batches", n_batches=n_batches, batch_size=batch_size)
    t0 = time.perf_counter()
    merged = list(merge_batches(batches))
    elapsed = time.perf_counter() - t0
    expected = sorted(np.concatenate(batches).tolist(), reverse=True)
    if merged != expected:
        raise RuntimeError("merged stream is not the descending union of batches")
    return elapsed


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark ixheap primitives")
    parser.add_argument("--config", type=str, default=None, help="Optional YAML config")
    parser.add_argument("--n", type=int, default=None, help="Number of elements")
    parser.add_argument("--k", type=int, default=None, help="Top-k size")
    parser.add_argument("--batches", type=int, default=None, help="Number of merge batches")
    parser.add_argument("--repeats", type=int, default=None, help="Number of repeats")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--workload",
        type=str,
        default=None,
        choices=["random_ints", "random_scores", "nearly_sorted"],
        help="Workload for heapsort and top-k",
    )
    parser.add_argument("--out", type=str, default=None, help="Optional JSON output path")
    parser.add_argument("--log-level", type=str, default=None, help="Enable ixheap logging")

    args = parser.parse_args()

    options = dict(DEFAULTS)
    if args.config:
        options.update(load_config(args.config))
    for name in DEFAULTS:
        value = getattr(args, name)
        if value is not None:
            options[name] = value

    if options["n"] < 1 or options["k"] < 1 or options["batches"] < 1:
        raise ValueError("--n, --k, and --batches must be positive")
    if options["log_level"]:
        configure_logging(options["log_level"])

    k_eff = min(options["k"], options["n"])
    profiler = Profiler(enabled=True)

    sort_times = []
    topk_times = []
    merge_times = []
    less_counts = []
    swap_counts = []

    for repeat in tqdm(range(options["repeats"]), desc="repeats"):
        loader = WorkloadLoader(random_state=options["seed"] + repeat)
        values = loader.load(options["workload"], n=options["n"])

        profiler.reset()
        sort_times.append(bench_heapsort(values, profiler))
        less_counts.append(profiler.get_count("less"))
        swap_counts.append(profiler.get_count("swap"))

        topk_times.append(bench_topk(values, k_eff))
        merge_times.append(bench_merge(loader, options["n"], options["batches"]))

    result = {
        "config": options,
        "metrics": {
            "heapsort_seconds": summarize(sort_times),
            "topk_seconds": summarize(topk_times),
            "merge_seconds": summarize(merge_times),
            "heapsort_less_calls": summarize(less_counts),
            "heapsort_swap_calls": summarize(swap_counts),
        },
    }

    metrics = result["metrics"]
    print("ixheap benchmark")
    print(
        f"n={options['n']} k={k_eff} batches={options['batches']} "
        f"repeats={options['repeats']} workload={options['workload']}"
    )
    print("heapsort_s: mean={mean:.6f} p50={p50:.6f} p95={p95:.6f}".format(
        **metrics["heapsort_seconds"]))
    print("topk_s: mean={mean:.6f} p50={p50:.6f} p95={p95:.6f}".format(
        **metrics["topk_seconds"]))
    print("merge_s: mean={mean:.6f} p50={p50:.6f} p95={p95:.6f}".format(
        **metrics["merge_seconds"]))
    print(
        "heapsort calls: less={less:.0f} swap={swap:.0f} "
        "n*log2(n)={bound:.0f}".format(
            less=metrics["heapsort_less_calls"]["mean"],
            swap=metrics["heapsort_swap_calls"]["mean"],
            bound=options["n"] * np.log2(max(options["n"], 2)),
        )
    )

    if options["out"]:
        out_path = Path(options["out"])
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with out_path.open("w", encoding="utf-8") as f:
            json.dump(result, f, indent=2)
        print(f"Wrote results to {out_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
