"""Generate reproducible benchmark input files."""

from __future__ import annotations

import sys
from collections import deque
from pathlib import Path
from typing import Sequence

from sortbench.dataio import format_values, parse_size

DEFAULT_SEED = 42
MAX_VALUE = 10000

_MODULUS = 2147483647
_MASK32 = 0xFFFFFFFF
_DEGREE = 31
_SEPARATION = 3
_DISCARD = 310


def _trunc_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """Divide with truncation toward zero, as 32-bit C arithmetic does."""
    quotient = abs(dividend) // divisor
    if dividend < 0:
        quotient = -quotient
    return quotient, dividend - quotient * divisor


class CRandom:
    """The additive-feedback generator behind the C library's rand()/srand()."""

    def __init__(self, seed: int = 1) -> None:
        seed &= _MASK32
        if seed == 0:
            seed = 1
        state = [seed]
        word = seed if seed < 2**31 else seed - 2**32
        for _ in range(_DEGREE - 1):
            hi, lo = _trunc_divmod(word, 127773)
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += _MODULUS
            state.append(word & _MASK32)
        state.extend(state[:_SEPARATION])
        self._state: deque[int] = deque(state, maxlen=_DEGREE + _SEPARATION)
        for _ in range(_DISCARD):
            self._step()

    def _step(self) -> int:
        value = (self._state[-_DEGREE] + self._state[-_SEPARATION]) & _MASK32
        self._state.append(value)
        return value

    def rand(self) -> int:
        """Return the next value in the range 0 to 2**31 - 1."""
        return self._step() >> 1


def generate_values(n: int, seed: int = DEFAULT_SEED) -> list[int]:
    """Return ``n`` values between 1 and 10000 drawn from a seeded generator."""
    rng = CRandom(seed)
    return [rng.rand() % MAX_VALUE + 1 for _ in range(max(n, 0))]


def write_input(path: str | Path, n: int, seed: int = DEFAULT_SEED) -> None:
    """Write ``n`` generated values to ``path``, one per line."""
    with open(path, "w", encoding="ascii") as handle:
        handle.write(format_values(generate_values(n, seed)))


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``<array_size> <output_file>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Usage: generate_input <array_size> <output_file>")
        return 1
    n = parse_size(args[0])
    try:
        write_input(args[1], n)
    except OSError as exc:
        print(f"Error opening file: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())