"""Command line entry point: run the solver for a year, day and part."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from aocsolver.inputs import read_input
from aocsolver.y2020 import day1 as y2020_day1
from aocsolver.y2020 import day2 as y2020_day2
from aocsolver.y2020 import day3 as y2020_day3
from aocsolver.y2020 import day4 as y2020_day4
from aocsolver.y2020 import day5 as y2020_day5
from aocsolver.y2020 import day6 as y2020_day6
from aocsolver.y2020 import day7 as y2020_day7
from aocsolver.y2020 import day8 as y2020_day8
from aocsolver.y2020 import day9 as y2020_day9
from aocsolver.y2020 import day10 as y2020_day10
from aocsolver.y2020 import day11 as y2020_day11
from aocsolver.y2020 import day12 as y2020_day12
from aocsolver.y2020 import day13 as y2020_day13
from aocsolver.y2020 import day14 as y2020_day14
from aocsolver.y2020 import day15 as y2020_day15
from aocsolver.y2020 import day16 as y2020_day16
from aocsolver.y2024 import day1 as y2024_day1
from aocsolver.y2024 import day10 as y2024_day10
from aocsolver.y2024 import day11 as y2024_day11
from aocsolver.y2024 import day12 as y2024_day12
from aocsolver.y2024 import day13 as y2024_day13
from aocsolver.y2024 import day14 as y2024_day14

USAGE = "Usage: aocsolver [year] [day] [part] [--root DIR]\nExample: aocsolver 2024 1 2"
INVALID = "Invalid year, day, or part"

Solver = Callable[[str], object]

_DAYS = {
    ("2020", "1"): y2020_day1,
    ("2020", "2"): y2020_day2,
    ("2020", "3"): y2020_day3,
    ("2020", "4"): y2020_day4,
    ("2020", "5"): y2020_day5,
    ("2020", "6"): y2020_day6,
    ("2020", "7"): y2020_day7,
    ("2020", "8"): y2020_day8,
    ("2020", "9"): y2020_day9,
    ("2020", "10"): y2020_day10,
    ("2020", "11"): y2020_day11,
    ("2020", "12"): y2020_day12,
    ("2020", "13"): y2020_day13,
    ("2020", "14"): y2020_day14,
    ("2020", "15"): y2020_day15,
    ("2020", "16"): y2020_day16,
    ("2024", "1"): y2024_day1,
    ("2024", "10"): y2024_day10,
    ("2024", "11"): y2024_day11,
    ("2024", "12"): y2024_day12,
    ("2024", "13"): y2024_day13,
    ("2024", "14"): y2024_day14,
}

SOLVERS: dict[tuple[str, str, str], Solver] = {
    key: solver
    for (year, day), module in _DAYS.items()
    for key, solver in (
        ((year, day, "1"), module.part_1),
        ((year, day, "2"), module.part_2),
    )
}
SOLVERS[("2020", "16", "2_generic")] = y2020_day16.part_2_generic


def solve(
    year: int | str,
    day: int | str,
    part: int | str,
    root: str | Path | None = None,
) -> object:
    """Read the day's input under ``root`` and return the answer for ``part``."""
    solver = SOLVERS.get((str(year), str(day), str(part)))
    if solver is None:
        raise ValueError(INVALID)
    return solver(read_input(year, day, root))


def _parse_args(argv: Sequence[str]) -> tuple[list[str], str | None]:
    positional: list[str] = []
    root: str | None = None
    args = iter(argv)
    for arg in args:
        if arg == "--root":
            root = next(args, None)
            if root is None:
                raise ValueError("--root needs a directory")
        elif arg.startswith("--root="):
            root = arg.partition("=")[2]
        else:
            positional.append(arg)
    return positional, root


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solver named on the command line and print its answer."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        positional, root = _parse_args(argv)
    except ValueError as error:
        print(error, file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2
    if len(positional) < 3:
        print(USAGE, file=sys.stderr)
        return 2

    year, day, part = positional[:3]
    try:
        answer = solve(year, day, part, root)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    except OSError as error:
        print(f"cannot read input: {error}", file=sys.stderr)
        return 1
    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())