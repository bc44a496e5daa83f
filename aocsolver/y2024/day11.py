"""Plutonian pebbles: count stones that change with every blink."""

from __future__ import annotations

from functools import lru_cache


def parse_stones(text: str) -> list[int]:
    """Parse the whitespace separated stones of the last input line."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("Failed to read input line")
    return [int(value) for value in lines[-1].split()]


@lru_cache(maxsize=None)
def count_stones(stone: int, blinks: int) -> int:
    """Number of stones one stone becomes after ``blinks`` blinks."""
    if blinks == 0:
        return 1
    if stone == 0:
        return count_stones(1, blinks - 1)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return count_stones(int(digits[half:]), blinks - 1) + count_stones(
            int(digits[:half]), blinks - 1
        )
    return count_stones(stone * 2024, blinks - 1)


def blink_count(stones: list[int], blinks: int) -> int:
    """Total number of stones after ``blinks`` blinks."""
    return sum(count_stones(stone, blinks) for stone in stones)


def part_1(text: str) -> int:
    return blink_count(parse_stones(text), 25)


def part_2(text: str) -> int:
    return blink_count(parse_stones(text), 75)