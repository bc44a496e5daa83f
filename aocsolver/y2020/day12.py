"""Rain risk: steer a ferry by heading or by a waypoint."""

from __future__ import annotations

from dataclasses import dataclass

DIRECTIONS = ("n", "e", "s", "w")

# Offsets as (north, east) for each absolute move.
_MOVES = {"N": (1, 0), "S": (-1, 0), "E": (0, 1), "W": (0, -1)}


@dataclass(frozen=True)
class Instruction:
    """A navigation instruction: an action letter and its value."""

    action: str
    value: int


def parse_instructions(text: str) -> list[Instruction]:
    """Parse lines such as ``F10`` or ``R90``."""
    return [
        Instruction(line[0], int(line[1:]))
        for line in (raw.strip() for raw in text.splitlines())
        if line
    ]


def turn(direction: str, degrees: int) -> str:
    """Return the heading after turning ``degrees`` clockwise (negative: left)."""
    index = DIRECTIONS.index(direction)
    steps = degrees // 90 if degrees > 0 else (degrees + 360) // 90
    return DIRECTIONS[(index + steps) % 4]


def rotate_waypoint(waypoint: tuple[int, int], degrees: int) -> tuple[int, int]:
    """Rotate a ``(north, east)`` waypoint clockwise around the ship."""
    north, east = waypoint
    if degrees < 0:
        degrees += 360
    if degrees == 90:
        return -east, north
    if degrees == 180:
        return -north, -east
    return east, -north


def navigate(instructions: list[Instruction]) -> tuple[int, int]:
    """Move the ship by heading; return its final ``(north, east)`` position."""
    north = east = 0
    heading = "e"
    for instruction in instructions:
        action, value = instruction.action, instruction.value
        if action == "L":
            heading = turn(heading, -value)
        elif action == "R":
            heading = turn(heading, value)
        else:
            move = _MOVES.get(heading.upper() if action == "F" else action)
            if move is not None:
                north += move[0] * value
                east += move[1] * value
    return north, east


def navigate_waypoint(instructions: list[Instruction]) -> tuple[int, int]:
    """Move the ship toward a waypoint; return its final ``(north, east)`` position."""
    north = east = 0
    waypoint = (1, 10)
    for instruction in instructions:
        action, value = instruction.action, instruction.value
        if action == "L":
            waypoint = rotate_waypoint(waypoint, -value)
        elif action == "R":
            waypoint = rotate_waypoint(waypoint, value)
        elif action == "F":
            north += waypoint[0] * value
            east += waypoint[1] * value
        elif action in _MOVES:
            dn, de = _MOVES[action]
            waypoint = (waypoint[0] + dn * value, waypoint[1] + de * value)
    return north, east


def part_1(text: str) -> int:
    north, east = navigate(parse_instructions(text))
    return abs(north) + abs(east)


def part_2(text: str) -> int:
    north, east = navigate_waypoint(parse_instructions(text))
    return abs(north) + abs(east)