"""Binary boarding: decode seat identifiers from boarding passes."""

from __future__ import annotations

from itertools import pairwise


def seat_id(boarding_pass: str) -> int:
    """Decode a pass such as ``FBFBBFFRLR`` into ``row * 8 + column``."""
    row = sum(64 >> i for i, c in enumerate(boarding_pass[:7]) if c == "B")
    col = sum(4 >> i for i, c in enumerate(boarding_pass[7:10]) if c == "R")
    return row * 8 + col


def find_missing_seat(seat_ids: list[int]) -> int:
    """Return the id missing between two occupied neighbours."""
    for lower, upper in pairwise(sorted(seat_ids)):
        if upper - lower == 2:
            return upper - 1
    raise ValueError("no free seat between two occupied ones")


def _seat_ids(text: str) -> list[int]:
    return [seat_id(line) for line in text.splitlines() if line.strip()]


def part_1(text: str) -> int:
    return max(_seat_ids(text))


def part_2(text: str) -> int:
    return find_missing_seat(_seat_ids(text))