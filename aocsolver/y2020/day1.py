"""Report repair: find entries that sum to a target."""

from __future__ import annotations

from itertools import combinations
from math import prod

TARGET = 2020


def parse_entries(text: str) -> list[int]:
    """Parse one integer per non-blank line."""
    return [int(line.strip()) for line in text.splitlines() if line.strip()]


def find_pair(entries: list[int], target: int = TARGET) -> tuple[int, int]:
    """Return the first entry and its complement that sum to ``target``."""
    available = set(entries)
    for entry in entries:
        complement = target - entry
        if complement in available:
            return entry, complement
    raise ValueError(f"no two entries sum to {target}")


def find_triple(entries: list[int], target: int = TARGET) -> tuple[int, int, int]:
    """Return three entries that sum to ``target``."""
    pair_sums = {a + b: (a, b) for a, b in combinations(entries, 2)}
    for entry in entries:
        pair = pair_sums.get(target - entry)
        if pair is not None:
            return entry, pair[0], pair[1]
    raise ValueError(f"no three entries sum to {target}")


def part_1(text: str) -> int:
    return prod(find_pair(parse_entries(text)))


def part_2(text: str) -> int:
    return prod(find_triple(parse_entries(text)))