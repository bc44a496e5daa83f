# aocsolver

Solutions to Advent of Code puzzles, runnable from the command line or
importable as plain functions. The package covers:

- 2020, days 1 to 16
- 2024, days 1 and 10 to 14

## Installation

```
pip install .
```

## Puzzle inputs

Each puzzle reads its input from `y<year>/day<day>/input.txt` under an input
root directory. The root defaults to `src` in the current working directory,
so the input for 2020 day 7 is read from:

```
src/y2020/day7/input.txt
```

Puzzle inputs are not shipped with the package; supply your own.

## Command line

```
aocsolver YEAR DAY PART [--root DIR]
```

For example:

```
aocsolver 2024 1 2
aocsolver 2020 7 1 --root inputs
```

The answer is printed on standard output and the command exits with 0.
`--root DIR` (or `--root=DIR`) sets the input root directory.

For 2020 day 16 the part `2_generic` runs a backtracking search over rule
assignments instead of the greedy assignment used by part `2`.

With fewer than three arguments the usage text is printed and the exit code
is 2. An unknown year, day or part, an input that cannot be solved, or an
input file that cannot be read is reported on standard error with exit
code 1.

## Library use

Every day is a module, `aocsolver.y2020.day<N>` or `aocsolver.y2024.day<N>`,
with `part_1(text)` and `part_2(text)` functions that take the puzzle input
as a string and return the answer:

```python
from aocsolver.y2020 import day1

print(day1.part_1("1721\n979\n366\n299\n675\n1456\n"))  # 514579
```

The modules also expose their parsing and solving steps, for example
`aocsolver.y2020.day8.fix_program`, `aocsolver.y2020.day13.earliest_aligned_timestamp`
or `aocsolver.y2024.day12.Garden`. In `aocsolver.y2020.day9`, `part_1` and
`part_2` take an optional `preamble` length (25 by default).
`aocsolver.y2020.day16.part_2_generic(text)` is the backtracking variant of
that day's second part.

Input files can be located and read with `aocsolver.inputs.input_path` and
`aocsolver.inputs.read_input`, and a puzzle can be run by its coordinates
with `aocsolver.cli.solve(year, day, part, root)`, which raises `ValueError`
for an unknown year, day or part.

## What it does not do

Only the days listed above are available; the other 2024 days (2 to 9 and
15 to 25) have no solver, and asking for them is reported as an invalid
year, day or part. The package does not download puzzle inputs or submit
answers.

## Running the tests

```
pip install .[test]
pytest
```