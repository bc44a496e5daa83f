"""Toboggan trajectory: count trees along slopes of a repeating map."""

from __future__ import annotations

from math import prod

SLOPES = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))


def parse_map(text: str) -> list[list[bool]]:
    """Parse the map; ``True`` marks a tree."""
    return [[c == "#" for c in line.strip()] for line in text.splitlines() if line.strip()]


def count_trees(grid: list[list[bool]], right: int, down: int) -> int:
    """Count trees hit going ``right`` and ``down`` from the top left corner."""
    width = len(grid[0])
    col = 0
    trees = 0
    for row in range(0, len(grid) - 1, down):
        col = (col + right) % width
        if grid[row + down][col]:
            trees += 1
    return trees


def part_1(text: str) -> int:
    return count_trees(parse_map(text), 3, 1)


def part_2(text: str) -> int:
    grid = parse_map(text)
    return prod(count_trees(grid, right, down) for right, down in SLOPES)