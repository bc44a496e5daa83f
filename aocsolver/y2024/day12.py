"""Garden groups: price fences around garden regions."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

_SIDES = ((-1, 0), (1, 0), (0, -1), (0, 1))
_DIAGONALS = ((-1, 1), (-1, -1), (1, 1), (1, -1))

Cell = tuple[int, int]


@dataclass(frozen=True)
class Garden:
    """A grid of plant labels."""

    grid: tuple[str, ...]

    def _label(self, row: int, col: int) -> str | None:
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return None

    def _regions(self) -> Iterator[tuple[str, set[Cell]]]:
        seen: set[Cell] = set()
        for r, line in enumerate(self.grid):
            for c, label in enumerate(line):
                if (r, c) in seen:
                    continue
                region = {(r, c)}
                stack = [(r, c)]
                while stack:
                    row, col = stack.pop()
                    for dr, dc in _SIDES:
                        nxt = (row + dr, col + dc)
                        if nxt not in region and self._label(*nxt) == label:
                            region.add(nxt)
                            stack.append(nxt)
                seen |= region
                yield label, region

    def _perimeter(self, label: str, region: set[Cell]) -> int:
        return sum(
            1
            for row, col in region
            for dr, dc in _SIDES
            if self._label(row + dr, col + dc) != label
        )

    def _corners(self, label: str, region: set[Cell]) -> int:
        corners = 0
        for row, col in region:
            for dr, dc in _DIAGONALS:
                vertical = self._label(row + dr, col) == label
                horizontal = self._label(row, col + dc) == label
                if vertical and horizontal and self._label(row + dr, col + dc) != label:
                    corners += 1
                if not vertical and not horizontal:
                    corners += 1
        return corners

    def fence_price(self) -> int:
        """Sum of area times perimeter over all regions."""
        return sum(
            len(region) * self._perimeter(label, region)
            for label, region in self._regions()
        )

    def bulk_fence_price(self) -> int:
        """Sum of area times number of sides over all regions."""
        return sum(
            len(region) * self._corners(label, region)
            for label, region in self._regions()
        )


def parse_garden(text: str) -> Garden:
    """Parse one row of plant labels per non-blank line."""
    return Garden(tuple(line for line in text.splitlines() if line))


def part_1(text: str) -> int:
    return parse_garden(text).fence_price()


def part_2(text: str) -> int:
    return parse_garden(text).bulk_fence_price()