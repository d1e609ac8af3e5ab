"""Single-threaded merge sort and randomised quick sort benchmarks."""

from __future__ import annotations

import random
import sys
import time
from typing import Callable, Sequence

from sortbench.dataio import format_values, parse_size, read_values


def merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Merge two sorted sequences; on ties the left element comes first."""
    result: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``values`` using top-down merge sort."""
    if len(values) <= 1:
        return list(values)
    mid = (len(values) + 1) // 2
    return merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def random_partition(values: list[int], low: int, high: int, rng: random.Random) -> int:
    """Partition ``values[low:high + 1]`` in place around a random pivot.

    Returns the pivot's final index; everything before it is <= the pivot and
    everything after it is greater.
    """
    pivot_idx = low + rng.randrange(high - low + 1)
    values[pivot_idx], values[high] = values[high], values[pivot_idx]
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] <= pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(values: Sequence[int], rng: random.Random | None = None) -> list[int]:
    """Return a sorted copy of ``values`` using randomised quick sort."""
    rng = rng if rng is not None else random.Random()
    result = list(values)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = random_partition(result, low, high, rng)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))
    return result


def _run_benchmark(
    argv: Sequence[str] | None,
    label: str,
    sorter: Callable[[list[int]], list[int]],
    clock: Callable[[], float] = time.process_time,
) -> int:
    """Shared command flow: ``<size> <input_file> [--test]``."""
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
    start = clock()
    ordered = sorter(values)
    elapsed = clock() - start
    print(f"{label} Time: {elapsed:f} sec", file=sys.stderr)
    if test_mode:
        sys.stdout.write(format_values(ordered))
    return 0


def main_merge(argv: Sequence[str] | None = None) -> int:
    """Benchmark sequential merge sort on an input file."""
    return _run_benchmark(argv, "Sequential Merge Sort", merge_sort)


def main_quick(argv: Sequence[str] | None = None) -> int:
    """Benchmark sequential quick sort on an input file."""
    rng = random.Random()
    return _run_benchmark(argv, "Sequential Quick Sort", lambda values: quick_sort(values, rng))