from pathlib import Path

import pytest

from sortbench.dataio import format_values, parse_size, read_values


@pytest.mark.parametrize(
    "text, expected",
    [("1000", 1000), ("  42abc", 42), ("-7", -7), ("+5", 5), ("abc", 0), ("", 0)],
)
def test_parse_size(text, expected):
    assert parse_size(text) == expected


def test_read_values_reads_first_n(tmp_path: Path):
    path = tmp_path / "in.txt"
    path.write_text("5\n3\n9\n1\n")
    assert read_values(path, 3) == [5, 3, 9]


def test_read_values_accepts_any_whitespace(tmp_path: Path):
    path = tmp_path / "in.txt"
    path.write_text("4 8\t15\n\n16  23 42")
    assert read_values(path, 6) == [4, 8, 15, 16, 23, 42]


def test_read_values_too_few(tmp_path: Path):
    path = tmp_path / "in.txt"
    path.write_text("1\n2\n")
    with pytest.raises(ValueError):
        read_values(path, 3)


def test_read_values_bad_token(tmp_path: Path):
    path = tmp_path / "in.txt"
    path.write_text("1\nx\n3\n")
    with pytest.raises(ValueError):
        read_values(path, 3)


def test_read_values_zero_count(tmp_path: Path):
    assert read_values(tmp_path / "absent.txt", 0) == []


def test_read_values_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_values(tmp_path / "absent.txt", 2)


def test_format_values():
    assert format_values([3, 1, 2]) == "3\n1\n2\n"
    assert format_values([]) == ""


def test_format_read_round_trip(tmp_path: Path):
    values = [10, -2, 7, 7, 0]
    path = tmp_path / "rt.txt"
    path.write_text(format_values(values))
    assert read_values(path, len(values)) == values