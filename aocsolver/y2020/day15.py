"""Rambunctious recitation: play the elves' memory game."""

from __future__ import annotations


def parse_numbers(text: str) -> list[int]:
    """Parse the comma separated starting numbers of every line."""
    return [
        int(value)
        for line in text.splitlines()
        if line.strip()
        for value in line.strip().split(",")
    ]


def play(starting: list[int], turns: int) -> int:
    """Return the number spoken on turn ``turns``."""
    if not starting:
        return 0
    last_seen = {number: turn for turn, number in enumerate(starting[:-1], start=1)}
    last = starting[-1]
    for turn in range(len(starting), turns):
        previous = last_seen.get(last)
        last_seen[last] = turn
        last = 0 if previous is None else turn - previous
    return last


def part_1(text: str) -> int:
    return play(parse_numbers(text), 2020)


def part_2(text: str) -> int:
    return play(parse_numbers(text), 30_000_000)