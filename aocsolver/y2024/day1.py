"""Historian hysteria: compare two location id lists."""

from __future__ import annotations

from collections import Counter


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Parse two whitespace separated columns of integers."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        parts = line.split()
        if not parts:
            continue
        if len(parts) < 2:
            raise ValueError(f"expected two columns: {line!r}")
        left.append(int(parts[0]))
        right.append(int(parts[1]))
    return left, right


def total_distance(left: list[int], right: list[int]) -> int:
    """Sum of distances between the lists paired up in sorted order."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: list[int], right: list[int]) -> int:
    """Sum of each left value times how often it appears on the right."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def part_1(text: str) -> int:
    return total_distance(*parse_lists(text))


def part_2(text: str) -> int:
    return similarity_score(*parse_lists(text))