import random
from pathlib import Path

import pytest

from sortbench.dataio import format_values
from sortbench.sequential import (
    main_merge,
    main_quick,
    merge,
    merge_sort,
    quick_sort,
    random_partition,
)


def _random_list(seed, n, top=50):
    rng = random.Random(seed)
    return [rng.randint(-top, top) for _ in range(n)]


def test_merge_interleaves():
    assert merge([1, 3, 5], [2, 4, 6]) == [1, 2, 3, 4, 5, 6]


def test_merge_with_empty_side():
    assert merge([], [1, 2]) == [1, 2]
    assert merge([3], []) == [3]


@pytest.mark.parametrize("seed, n", [(0, 0), (1, 1), (2, 2), (3, 17), (4, 300)])
def test_merge_sort_matches_sorted(seed, n):
    data = _random_list(seed, n)
    assert merge_sort(data) == sorted(data)


def test_merge_sort_leaves_input_alone():
    data = [5, 2, 9, 1]
    merge_sort(data)
    assert data == [5, 2, 9, 1]


@pytest.mark.parametrize("seed, n", [(0, 0), (1, 1), (2, 2), (3, 17), (4, 300)])
def test_quick_sort_matches_sorted(seed, n):
    data = _random_list(seed, n)
    assert quick_sort(data, random.Random(seed)) == sorted(data)


def test_quick_sort_many_duplicates():
    data = [7] * 200 + [3] * 100
    assert quick_sort(data, random.Random(1)) == sorted(data)


def test_quick_sort_default_rng():
    data = _random_list(9, 100)
    assert quick_sort(data) == sorted(data)


def test_random_partition_invariant():
    data = _random_list(5, 40)
    original = sorted(data)
    pivot = random_partition(data, 0, len(data) - 1, random.Random(3))
    assert all(v <= data[pivot] for v in data[:pivot])
    assert all(v > data[pivot] for v in data[pivot + 1:])
    assert sorted(data) == original


def test_random_partition_respects_bounds():
    data = [9, 8, 3, 1, 2, 0, -1]
    pivot = random_partition(data, 2, 4, random.Random(0))
    assert data[:2] == [9, 8] and data[5:] == [0, -1]
    assert 2 <= pivot <= 4
    assert sorted(data[2:5]) == [1, 2, 3]


@pytest.mark.parametrize(
    "entry, label",
    [(main_merge, "Sequential Merge Sort Time:"), (main_quick, "Sequential Quick Sort Time:")],
)
def test_main_test_mode_prints_sorted(tmp_path: Path, capsys, entry, label):
    data = _random_list(11, 60, 10000)
    path = tmp_path / "input.txt"
    path.write_text(format_values(data))
    assert entry(["60", str(path), "--test"]) == 0
    captured = capsys.readouterr()
    assert [int(line) for line in captured.out.split()] == sorted(data)
    assert label in captured.err


@pytest.mark.parametrize("entry", [main_merge, main_quick])
def test_main_without_test_flag_prints_nothing(tmp_path: Path, capsys, entry):
    path = tmp_path / "input.txt"
    path.write_text("3\n1\n2\n")
    assert entry(["3", str(path)]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("entry", [main_merge, main_quick])
def test_main_usage(capsys, entry):
    assert entry(["10"]) == 1
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.parametrize("entry", [main_merge, main_quick])
def test_main_missing_input(tmp_path: Path, capsys, entry):
    assert entry(["5", str(tmp_path / "absent.txt")]) == 1
    assert "Error reading input" in capsys.readouterr().err