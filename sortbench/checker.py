"""Run a sort benchmark in test mode and verify that its output is sorted."""

from __future__ import annotations

import os
import subprocess
import sys
from itertools import islice, pairwise
from pathlib import Path
from typing import Sequence

from sortbench.dataio import parse_size

DEFAULT_OUTPUT = "temp_output.txt"


def is_sorted(path: str | Path, n: int) -> bool:
    """Report whether the first ``n`` integers in ``path`` are non-decreasing.

    At least one integer must be present; a missing file, too few integers or
    a token that is not an integer all count as unsorted.
    """
    wanted = max(n, 1)
    try:
        with open(path, encoding="ascii", errors="replace") as handle:
            tokens = (token for line in handle for token in line.split())
            values = [int(token) for token in islice(tokens, wanted)]
    except OSError as exc:
        print(f"Failed to open result file: {exc.strerror or exc}", file=sys.stderr)
        return False
    except ValueError:
        return False
    if len(values) < wanted:
        return False
    return all(prev <= curr for prev, curr in pairwise(values))


def run_program(
    program: str,
    size: str | int,
    input_file: str | Path,
    output_path: str | Path = DEFAULT_OUTPUT,
) -> int:
    """Run ``./program size input_file --test`` with its output sent to ``output_path``.

    Returns the program's exit status. Raises ``OSError`` if it cannot be started.
    """
    command = [os.path.join(".", program), str(size), str(input_file), "--test"]
    with open(output_path, "w", encoding="ascii") as output:
        return subprocess.run(command, stdout=output, check=False).returncode


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``<program_name> <array_size> <input_file>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print("Usage: check <program_name> <array_size> <input_file>")
        return 1
    program, size, input_file = args[:3]
    try:
        status = run_program(program, size, input_file, DEFAULT_OUTPUT)
    except OSError:
        status = -1
    if status != 0:
        print(f"Error running {program}")
        return 1
    if is_sorted(DEFAULT_OUTPUT, parse_size(size)):
        print(f"[PASS] {program} sorted the array correctly.")
    else:
        print(f"[FAIL] {program} did NOT sort the array correctly.")
    return 0


if __name__ == "__main__":
    sys.exit(main())