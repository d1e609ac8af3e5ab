# sortbench

`sortbench` times merge sort and quick sort on a file of integers, in three
variants:

- **sequential** (`sortbench.sequential`): a top-down merge sort and a
  quick sort with a random pivot, timed in process CPU time;
- **parallel** (`sortbench.parallel`): the same algorithms with the top
  recursion levels (split depth 4) run on separate threads, timed in wall
  time;
- **distributed** (`sortbench.distributed`): the input is cut into one equal
  chunk per CPU, each chunk is sorted in its own worker process, and the
  sorted chunks are merged pairwise up a binary tree, timed in wall time
  after one warm-up pass.

Each sorting command prints its elapsed time to standard error. With
`--test` it also prints the sorted values to standard output, one per line.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Generating input

```
sortbench-generate <array_size> <output_file>
```

This writes `array_size` integers between 1 and 10000, one per line. They
are drawn from `sortbench.generate.CRandom`, an additive-feedback generator
that reproduces the sequence of the C library's `rand()` on glibc, seeded
with 42, so the same size always yields the same file. If the file cannot be
opened the command reports the error and exits with status 1.

## Sorting

Every sorting command takes the same arguments:

```
<command> <size> <input_file> [--test]
```

Only the first `size` integers of the input file are read. If the file is
missing, holds fewer than `size` integers or holds something that is not an
integer, the command prints `Error reading input: ...` to standard error and
exits with status 1.

| Command                         | Algorithm                                        |
|---------------------------------|--------------------------------------------------|
| `sortbench-sequential-merge`    | sequential merge sort                            |
| `sortbench-sequential-quick`    | sequential random-pivot quick sort               |
| `sortbench-parallel-merge`      | threaded merge sort                              |
| `sortbench-parallel-quick`      | threaded random-pivot quick sort                 |
| `sortbench-distributed-merge`   | scatter, merge sort per process, tree merge      |
| `sortbench-distributed-quick`   | scatter, built-in `sorted` per process, tree merge |

The distributed commands use `os.cpu_count()` workers and hand each one
`size // workers` values, so when `size` is not a multiple of the worker
count the values left over are not part of the result.

Example:

```
sortbench-generate 1000 input.txt
sortbench-sequential-merge 1000 input.txt
sortbench-parallel-quick 1000 input.txt --test > sorted.txt
```

## Checking a sorter

```
sortbench-check <program_name> <array_size> <input_file>
```

The checker runs `./<program_name> <array_size> <input_file> --test` — an
executable in the current directory — with its standard output written to
`temp_output.txt`. If the program cannot be started or exits with a non-zero
status, it prints `Error running <program_name>` and exits with status 1.
Otherwise it reports whether the first `array_size` values in the output are
in non-decreasing order:

```
[PASS] my_sorter sorted the array correctly.
[FAIL] my_sorter did NOT sort the array correctly.
```

A missing output file, too few values or a value that is not an integer
counts as a failure. The exit status is 0 in both the PASS and FAIL case.

## Library use

The algorithms are importable and return new sorted lists:

```python
from sortbench.sequential import merge_sort, quick_sort
from sortbench.parallel import parallel_merge_sort, parallel_quick_sort
from sortbench.distributed import distributed_merge_sort, scatter, tree_merge
from sortbench.generate import generate_values

values = generate_values(1000, 42)
assert merge_sort(values) == sorted(values)
assert parallel_merge_sort(values, 4) == sorted(values)
assert distributed_merge_sort(values, 4) == sorted(values)  # 1000 is a multiple of 4
```

`quick_sort` and `parallel_quick_sort` take an optional `random.Random` for
the pivot choice. `sortbench.dataio` provides `read_values`, `format_values`
and `parse_size` (a lenient, `atoi`-style integer parser) for the
one-integer-per-line file format; `sortbench.checker` provides `is_sorted`
and `run_program`.

## What it does not do

- The parallel variants use threads, so under CPython's global interpreter
  lock they show the structure of a fork-join sort but give no speed-up
  over the sequential ones.
- The distributed variants run worker processes on one machine only; there
  is no way to spread the work over several hosts.
- There is no command that runs every benchmark in turn; each is started on
  its own.