"""Fork-join merge sort and quick sort that split work across threads."""

from __future__ import annotations

import random
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Sequence, TypeVar

from sortbench.sequential import _run_benchmark, merge, merge_sort, random_partition

DEFAULT_DEPTH = 4

_A = TypeVar("_A")
_B = TypeVar("_B")


def _fork_join(first: Callable[[], _A], second: Callable[[], _B]) -> tuple[_A, _B]:
    """Run ``first`` on a new thread and ``second`` here; wait for both."""
    with ThreadPoolExecutor(max_workers=1) as pool:
        pending = pool.submit(first)
        second_result = second()
        return pending.result(), second_result


def parallel_merge_sort(values: Sequence[int], depth: int = DEFAULT_DEPTH) -> list[int]:
    """Return a sorted copy of ``values``.

    The two halves are sorted concurrently while ``depth`` is positive; below
    that the sort continues sequentially.
    """
    if len(values) <= 1:
        return list(values)
    if depth <= 0:
        return merge_sort(values)
    mid = (len(values) + 1) // 2
    left, right = _fork_join(
        lambda: parallel_merge_sort(values[:mid], depth - 1),
        lambda: parallel_merge_sort(values[mid:], depth - 1),
    )
    return merge(left, right)


def _sort_range(values: list[int], low: int, high: int, rng: random.Random) -> None:
    """Quick sort ``values[low:high + 1]`` in place without spawning work."""
    pending = [(low, high)]
    while pending:
        lo, hi = pending.pop()
        if lo < hi:
            pivot = random_partition(values, lo, hi, rng)
            pending.append((pivot + 1, hi))
            pending.append((lo, pivot - 1))


def _parallel_range(
    values: list[int], low: int, high: int, depth: int, rng: random.Random
) -> None:
    if low >= high:
        return
    pivot = random_partition(values, low, high, rng)
    if depth > 0:
        _fork_join(
            lambda: _parallel_range(values, low, pivot - 1, depth - 1, rng),
            lambda: _parallel_range(values, pivot + 1, high, depth - 1, rng),
        )
    else:
        _sort_range(values, low, pivot - 1, rng)
        _sort_range(values, pivot + 1, high, rng)


def parallel_quick_sort(
    values: Sequence[int],
    depth: int = DEFAULT_DEPTH,
    rng: random.Random | None = None,
) -> list[int]:
    """Return a sorted copy of ``values`` using randomised quick sort.

    The partitions on either side of each pivot are sorted concurrently while
    ``depth`` is positive.
    """
    rng = rng if rng is not None else random.Random()
    result = list(values)
    _parallel_range(result, 0, len(result) - 1, depth, rng)
    return result


def main_merge(argv: Sequence[str] | None = None) -> int:
    """Benchmark parallel merge sort on an input file."""
    return _run_benchmark(
        argv,
        "Parallel Merge Sort",
        lambda values: parallel_merge_sort(values, DEFAULT_DEPTH),
        clock=time.perf_counter,
    )


def main_quick(argv: Sequence[str] | None = None) -> int:
    """Benchmark parallel quick sort on an input file."""
    rng = random.Random()
    return _run_benchmark(
        argv,
        "Parallel Quick Sort",
        lambda values: parallel_quick_sort(values, DEFAULT_DEPTH, rng),
        clock=time.perf_counter,
    )