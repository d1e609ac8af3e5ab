"""Sorting split over worker processes, with results combined by a merge tree."""

from __future__ import annotations

import contextlib
import os
import sys
import time
from concurrent.futures import Executor, ProcessPoolExecutor
from typing import Callable, Sequence

from sortbench.dataio import format_values, parse_size, read_values
from sortbench.sequential import merge, merge_sort

Sorter = Callable[[list[int]], list[int]]


def scatter(values: Sequence[int], workers: int) -> list[list[int]]:
    """Split ``values`` into ``workers`` equal chunks.

    Each chunk holds ``len(values) // workers`` items; any remainder at the
    end is dropped.
    """
    if workers < 1:
        raise ValueError("workers must be at least 1")
    chunk = len(values) // workers
    return [list(values[rank * chunk:(rank + 1) * chunk]) for rank in range(workers)]


def tree_merge(chunks: Sequence[Sequence[int]]) -> list[int]:
    """Combine sorted chunks pairwise in rounds of doubling stride.

    In each round the chunk at an even multiple of twice the stride absorbs
    the chunk one stride above it; the result collects in the first chunk.
    """
    if not chunks:
        raise ValueError("at least one chunk is required")
    merged = [list(chunk) for chunk in chunks]
    size = len(merged)
    step = 1
    while step < size:
        for rank in range(0, size, 2 * step):
            partner = rank + step
            if partner < size:
                merged[rank] = merge(merged[rank], merged[partner])
        step *= 2
    return merged[0]


def _pool(workers: int) -> contextlib.AbstractContextManager[Executor | None]:
    if workers > 1:
        return ProcessPoolExecutor(max_workers=workers)
    return contextlib.nullcontext()


def _sort_chunks(
    chunks: list[list[int]], sorter: Sorter, pool: Executor | None
) -> list[list[int]]:
    if pool is None:
        return [sorter(chunk) for chunk in chunks]
    return list(pool.map(sorter, chunks))


def _distributed_sort(values: Sequence[int], workers: int, sorter: Sorter) -> list[int]:
    chunks = scatter(values, workers)
    with _pool(workers) as pool:
        chunks = _sort_chunks(chunks, sorter, pool)
    return tree_merge(chunks)


def distributed_merge_sort(values: Sequence[int], workers: int) -> list[int]:
    """Sort equal chunks with merge sort in separate processes, then merge them."""
    return _distributed_sort(values, workers, merge_sort)


def distributed_quick_sort(values: Sequence[int], workers: int) -> list[int]:
    """Sort equal chunks with the library sort in separate processes, then merge them."""
    return _distributed_sort(values, workers, sorted)


def _run(argv: Sequence[str] | None, label: str, sorter: Sorter) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Usage: <program> <size> <input_file> [--test]")
        return 1
    n = parse_size(args[0])
    test_mode = len(args) >= 3 and args[2] == "--test"
    try:
        values = read_values(args[1], n)
    except (OSError, ValueError) as exc:
        print(f"Error reading input: {exc}", file=sys.stderr)
        return 1
    workers = os.cpu_count() or 1
    chunks = scatter(values, workers)
    with _pool(workers) as pool:
        chunks = _sort_chunks(chunks, sorter, pool)  # warm-up
        start = time.perf_counter()
        chunks = _sort_chunks(chunks, sorter, pool)
        ordered = tree_merge(chunks)
        elapsed = time.perf_counter() - start
    print(f"{label} Time (after warm-up): {elapsed:f} sec", file=sys.stderr)
    if test_mode:
        sys.stdout.write(format_values(ordered))
    return 0


def main_merge(argv: Sequence[str] | None = None) -> int:
    """Benchmark distributed merge sort on an input file."""
    return _run(argv, "Distributed Merge Sort", merge_sort)


def main_quick(argv: Sequence[str] | None = None) -> int:
    """Benchmark distributed quick sort on an input file."""
    return _run(argv, "Distributed Quick Sort", sorted)