"""Adapter array: chain joltage adapters."""

from __future__ import annotations

from itertools import pairwise


def parse_ratings(text: str) -> list[int]:
    """Parse one adapter rating per non-blank line."""
    return [int(line) for line in text.splitlines() if line.strip()]


def count_jolt_diff(ratings: list[int], diff: int) -> int:
    """Count steps of ``diff`` in sorted ratings, counting the outlet at 0."""
    count = 1 if ratings[0] == diff else 0
    return count + sum(1 for a, b in pairwise(ratings) if b - a == diff)


def count_arrangements(ratings: list[int]) -> int:
    """Count adapter chains from 0 to the last of the sorted ratings."""
    ways = {0: 1}
    for rating in ratings:
        ways[rating] = sum(ways.get(rating - step, 0) for step in (1, 2, 3))
    return ways[ratings[-1]]


def part_1(text: str) -> int:
    ratings = sorted(parse_ratings(text))
    # the device is always three above the highest adapter
    return count_jolt_diff(ratings, 1) * (count_jolt_diff(ratings, 3) + 1)


def part_2(text: str) -> int:
    ratings = sorted(parse_ratings(text))
    ratings.append(ratings[-1] + 3)
    return count_arrangements(ratings)