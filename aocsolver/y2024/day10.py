"""Hoof it: score and rate hiking trails on a topographic map."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_SUMMIT = 9

Position = tuple[int, int]


@dataclass(frozen=True)
class TopoMap:
    """A grid of heights from 0 to 9."""

    grid: tuple[tuple[int, ...], ...]

    def _next_positions(self, position: Position, elevation: int) -> Iterator[Position]:
        row, col = position
        height = len(self.grid)
        width = len(self.grid[0])
        for dr, dc in _STEPS:
            r, c = row + dr, col + dc
            if 0 <= r < height and 0 <= c < width and self.grid[r][c] == elevation:
                yield r, c

    def trailhead_score(self, row: int, col: int) -> int:
        """Number of distinct summits reachable from the trailhead."""
        positions: set[Position] = {(row, col)}
        elevation = 0
        while positions and elevation < _SUMMIT:
            elevation += 1
            positions = {
                nxt for pos in positions for nxt in self._next_positions(pos, elevation)
            }
        return len(positions)

    def trailhead_rating(self, row: int, col: int) -> int:
        """Number of distinct trails from the trailhead to any summit."""
        positions: list[Position] = [(row, col)]
        elevation = 0
        while positions and elevation < _SUMMIT:
            elevation += 1
            positions = [
                nxt for pos in positions for nxt in self._next_positions(pos, elevation)
            ]
        return len(positions)

    def _trailheads(self) -> Iterator[Position]:
        for r, line in enumerate(self.grid):
            for c, value in enumerate(line):
                if value == 0:
                    yield r, c

    def total_score(self) -> int:
        return sum(self.trailhead_score(r, c) for r, c in self._trailheads())

    def total_rating(self) -> int:
        return sum(self.trailhead_rating(r, c) for r, c in self._trailheads())


def parse_map(text: str) -> TopoMap:
    """Parse rows of digits."""
    rows = []
    for line in text.splitlines():
        if not line:
            continue
        if any(c not in "0123456789" for c in line):
            raise ValueError(f"map rows hold digits only: {line!r}")
        rows.append(tuple(int(c) for c in line))
    return TopoMap(tuple(rows))


def part_1(text: str) -> int:
    return parse_map(text).total_score()


def part_2(text: str) -> int:
    return parse_map(text).total_rating()