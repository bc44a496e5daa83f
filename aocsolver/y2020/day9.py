"""Encoding error: find the number that breaks the XMAS cipher rule."""

from __future__ import annotations

from collections import Counter

PREAMBLE = 25


def parse_numbers(text: str) -> list[int]:
    """Parse one integer per non-blank line."""
    return [int(line) for line in text.splitlines() if line.strip()]


def _is_sum_of_two(counts: Counter[int], window: list[int], number: int) -> bool:
    for candidate in window:
        if number <= candidate:
            continue
        remaining = number - candidate
        available = counts.get(remaining, 0)
        needed = 2 if remaining == candidate else 1
        if available >= needed:
            return True
    return False


def find_first_invalid(numbers: list[int], preamble: int = PREAMBLE) -> int | None:
    """Return the first number that is not a sum of two earlier options.

    The addends are taken from the ``preamble`` numbers right before it; the
    complement may be any number seen so far, with preamble duplicates counted.
    """
    counts = Counter(numbers[:preamble])
    for index in range(preamble, len(numbers)):
        number = numbers[index]
        if not _is_sum_of_two(counts, numbers[index - preamble : index], number):
            return number
        counts.setdefault(number, 1)
    return None


def find_weakness(numbers: list[int], target: int) -> int:
    """Find a run of consecutive numbers summing to ``target``; add its extremes.

    Runs are tried from the shortest; for a run found after the first window
    the extremes are taken without its last element.
    """
    size = len(numbers)
    for run in range(2, size):
        total = sum(numbers[:run])
        if total == target:
            window = numbers[:run]
            return min(window) + max(window)
        for start in range(1, size - run):
            total += numbers[start + run - 1] - numbers[start - 1]
            if total == target:
                window = numbers[start : start + run - 1]
                return min(window) + max(window)
    raise ValueError(f"no run of numbers sums to {target}")


def part_1(text: str, preamble: int = PREAMBLE) -> int:
    invalid = find_first_invalid(parse_numbers(text), preamble)
    if invalid is None:
        raise ValueError("every number is a sum of two options")
    return invalid


def part_2(text: str, preamble: int = PREAMBLE) -> int:
    numbers = parse_numbers(text)
    invalid = find_first_invalid(numbers, preamble)
    if invalid is None:
        raise ValueError("every number is a sum of two options")
    return find_weakness(numbers, invalid)