"""Claw contraption: the cheapest button presses to reach each prize."""

from __future__ import annotations

import math
from dataclasses import dataclass

PRIZE_ADJUSTMENT = 10_000_000_000_000

Coordinate = tuple[int, int]


def _determinant(v1: Coordinate, v2: Coordinate) -> float:
    return float(v1[0]) * float(v2[1]) - float(v1[1]) * float(v2[0])


@dataclass(frozen=True)
class ClawMachine:
    """Button A and B movements and the prize location, as ``(x, y)``."""

    a: Coordinate
    b: Coordinate
    prize: Coordinate

    def tokens(self, adjustment: int = 0) -> float:
        """Token cost solved by Cramer's rule, with the prize moved by ``adjustment``.

        The cost is not a whole number when no whole press count wins the prize,
        and NaN when the buttons move in the same direction.
        """
        prize = (self.prize[0] + adjustment, self.prize[1] + adjustment)
        d = _determinant(self.a, self.b)
        if d == 0:
            return math.nan
        d_a = _determinant(prize, self.b)
        d_b = _determinant(self.a, prize)
        return (d_a / d) * 3.0 + d_b / d


def _value(part: str, delimiter: str) -> int:
    _, sep, value = part.partition(delimiter)
    if not sep:
        raise ValueError(f"expected {delimiter!r} in {part!r}")
    return int(value)


def _coordinate(line: str, delimiter: str) -> Coordinate:
    _, sep, rest = line.partition(": ")
    x, comma, y = rest.partition(", ")
    if not sep or not comma:
        raise ValueError(f"malformed line: {line!r}")
    return _value(x, delimiter), _value(y, delimiter)


def parse_machines(text: str) -> list[ClawMachine]:
    """Parse blocks of button A, button B and prize lines."""
    lines = [line for line in text.splitlines() if line]
    if len(lines) % 3:
        raise ValueError("every machine needs two buttons and a prize")
    return [
        ClawMachine(
            a=_coordinate(lines[i], "+"),
            b=_coordinate(lines[i + 1], "+"),
            prize=_coordinate(lines[i + 2], "="),
        )
        for i in range(0, len(lines), 3)
    ]


def total_tokens(machines: list[ClawMachine], adjustment: int = 0) -> int:
    """Sum of whole token costs over the machines whose prize can be won."""
    total = 0
    for machine in machines:
        cost = machine.tokens(adjustment)
        if math.isfinite(cost) and cost.is_integer():
            total += max(0, int(cost))
    return total


def part_1(text: str) -> int:
    return total_tokens(parse_machines(text), 0)


def part_2(text: str) -> int:
    return total_tokens(parse_machines(text), PRIZE_ADJUSTMENT)