"""Reading and writing the whitespace-separated integer files used by the benchmarks."""

from __future__ import annotations

import re
from itertools import islice
from pathlib import Path
from typing import Iterable

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def parse_size(text: str) -> int:
    """Parse a leading decimal integer the lenient way ``atoi`` does; 0 if none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def read_values(path: str | Path, n: int) -> list[int]:
    """Read the first ``n`` integers from ``path``.

    Raises ``ValueError`` if the file holds fewer than ``n`` integers or a
    token that is not an integer.
    """
    if n <= 0:
        return []
    with open(path, encoding="ascii") as handle:
        tokens = (token for line in handle for token in line.split())
        values = list(islice(map(int, tokens), n))
    if len(values) < n:
        raise ValueError(f"expected {n} integers in {path}, found {len(values)}")
    return values


def format_values(values: Iterable[int]) -> str:
    """Render values one per line, each followed by a newline."""
    return "".join(f"{value}\n" for value in values)