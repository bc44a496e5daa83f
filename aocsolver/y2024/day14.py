"""Restroom redoubt: simulate patrolling robots on a wrapping floor."""

from __future__ import annotations

from dataclasses import dataclass, replace
from math import prod

WIDTH = 101
HEIGHT = 103
SECONDS = 100
TREE_SEARCH_LIMIT = 10_000
_TREE_RUN = 10


@dataclass
class Robot:
    """A robot position and its velocity per second."""

    row: int
    col: int
    row_velocity: int
    col_velocity: int


@dataclass
class BathroomSecurity:
    """Robots on a floor that wraps around at its edges."""

    robots: list[Robot]
    width: int = WIDTH
    height: int = HEIGHT

    def simulate(self, seconds: int) -> None:
        """Move every robot forward by ``seconds``."""
        for robot in self.robots:
            robot.col = (robot.col + seconds * robot.col_velocity) % self.width
            robot.row = (robot.row + seconds * robot.row_velocity) % self.height

    def render(self) -> str:
        """Draw robot counts per tile, with blanks for empty tiles."""
        counts = [[0] * self.width for _ in range(self.height)]
        for robot in self.robots:
            counts[robot.row][robot.col] += 1
        return "\n".join(
            "".join(str(n) if n else " " for n in row) for row in counts
        )

    def safety_factor(self) -> int:
        """Product of the robot counts of the four quadrants, middle lines excluded."""
        mid_col = (self.width - 1) // 2
        mid_row = (self.height - 1) // 2
        cols = (range(0, mid_col), range(mid_col + 1, self.width))
        rows = (range(0, mid_row), range(mid_row + 1, self.height))
        quadrants = [0, 0, 0, 0]
        for robot in self.robots:
            for i, (row_range, col_range) in enumerate(
                (rows[0], cols[0]) if k == 0 else
                (rows[0], cols[1]) if k == 1 else
                (rows[1], cols[0]) if k == 2 else
                (rows[1], cols[1])
                for k in range(4)
            ):
                if robot.row in row_range and robot.col in col_range:
                    quadrants[i] += 1
                    break
        return prod(quadrants)

    def has_tree(self) -> bool:
        """Whether some row holds more than ten robot tiles in a row."""
        return any(
            len(run) > _TREE_RUN
            for row in self.render().split("\n")
            for run in row.split(" ")
        )


def parse_robots(text: str) -> list[Robot]:
    """Parse lines such as ``p=0,4 v=3,-3``."""
    robots = []
    for line in text.splitlines():
        if not line.strip():
            continue
        position, sep, velocity = line.partition(" ")
        _, p_sep, position = position.partition("=")
        _, v_sep, velocity = velocity.partition("=")
        if not (sep and p_sep and v_sep):
            raise ValueError(f"malformed robot: {line!r}")
        col, row = position.split(",")
        col_velocity, row_velocity = velocity.split(",")
        robots.append(Robot(int(row), int(col), int(row_velocity), int(col_velocity)))
    return robots


def find_tree(text: str, limit: int = TREE_SEARCH_LIMIT) -> int | None:
    """First second before ``limit`` at which the robots draw a tree."""
    robots = parse_robots(text)
    for seconds in range(limit):
        security = BathroomSecurity([replace(robot) for robot in robots])
        security.simulate(seconds)
        if security.has_tree():
            return seconds
    return None


def part_1(text: str) -> int:
    security = BathroomSecurity(parse_robots(text))
    security.simulate(SECONDS)
    return security.safety_factor()


def part_2(text: str) -> int:
    seconds = find_tree(text)
    if seconds is None:
        raise ValueError("the robots never draw a tree")
    return seconds