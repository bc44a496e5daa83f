"""Password philosophy: check candidates against corporate policies."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PasswordPolicy:
    """A policy line: two numbers, a letter and the candidate it applies to."""

    first: int
    second: int
    letter: str
    candidate: str

    def is_valid_by_count(self) -> bool:
        """The letter occurs between ``first`` and ``second`` times."""
        return self.first <= self.candidate.count(self.letter) <= self.second

    def is_valid_by_position(self) -> bool:
        """Exactly one of the 1-based positions holds the letter."""
        if self.first < 1 or self.second < 1:
            raise ValueError("positions are 1-based")
        a = self.candidate[self.first - 1]
        b = self.candidate[self.second - 1]
        return (a == self.letter or b == self.letter) and a != b


def parse_policies(text: str) -> list[PasswordPolicy]:
    """Parse lines such as ``1-3 a: abcde``."""
    policies = []
    for line in text.splitlines():
        if not line.strip():
            continue
        bounds, letter_part, candidate = line.split()[:3]
        first, second = bounds.split("-")[:2]
        letter = letter_part.split(":")[0][0]
        policies.append(PasswordPolicy(int(first), int(second), letter, candidate))
    return policies


def part_1(text: str) -> int:
    return sum(policy.is_valid_by_count() for policy in parse_policies(text))


def part_2(text: str) -> int:
    return sum(policy.is_valid_by_position() for policy in parse_policies(text))