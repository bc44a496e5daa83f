"""Seating system: run a seat-occupation automaton until it settles."""

from __future__ import annotations

from collections.abc import Callable

FLOOR = "."
OCCUPIED = "#"
EMPTY = "L"

DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)

Layout = list[str]
Counter = Callable[[Layout, int, int], int]


def parse_layout(text: str) -> Layout:
    """Parse the seat layout, one row per non-blank line."""
    return [line for line in text.splitlines() if line]


def count_adjacent(layout: Layout, row: int, col: int) -> int:
    """Count occupied seats among the eight neighbours."""
    height = len(layout)
    width = len(layout[row])
    return sum(
        1
        for dr, dc in DIRECTIONS
        if 0 <= row + dr < height
        and 0 <= col + dc < width
        and layout[row + dr][col + dc] == OCCUPIED
    )


def count_visible(layout: Layout, row: int, col: int) -> int:
    """Count directions in which the first seat seen is occupied."""
    height = len(layout)
    width = len(layout[row])
    count = 0
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        while 0 <= r < height and 0 <= c < width:
            cell = layout[r][c]
            if cell == OCCUPIED:
                count += 1
                break
            if cell == EMPTY:
                break
            r += dr
            c += dc
    return count


def step(layout: Layout, counter: Counter, threshold: int) -> Layout:
    """Apply the seating rules once to every seat."""
    result = []
    for row, line in enumerate(layout):
        cells = []
        for col, cell in enumerate(line):
            if cell == FLOOR:
                cells.append(FLOOR)
                continue
            occupied = counter(layout, row, col)
            if cell == OCCUPIED:
                cells.append(EMPTY if occupied >= threshold else OCCUPIED)
            elif cell == EMPTY:
                cells.append(OCCUPIED if occupied == 0 else EMPTY)
            else:
                raise ValueError(f"unknown char in seat layout: {cell!r}")
        result.append("".join(cells))
    return result


def settle(layout: Layout, counter: Counter, threshold: int) -> Layout:
    """Apply the rules until the layout stops changing."""
    current = layout
    following = step(current, counter, threshold)
    while following != current:
        current = following
        following = step(current, counter, threshold)
    return following


def count_occupied(layout: Layout) -> int:
    return sum(line.count(OCCUPIED) for line in layout)


def part_1(text: str) -> int:
    return count_occupied(settle(parse_layout(text), count_adjacent, 4))


def part_2(text: str) -> int:
    return count_occupied(settle(parse_layout(text), count_visible, 5))