"""Custom customs: tally the yes answers of passenger groups."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field


@dataclass
class Group:
    """Yes-answer counts of one group and the number of people in it."""

    counts: Counter[str] = field(default_factory=Counter)
    size: int = 0

    def any_yes(self) -> int:
        """Questions anyone in the group answered yes to."""
        return len(self.counts)

    def all_yes(self) -> int:
        """Questions everyone in the group answered yes to."""
        return sum(1 for count in self.counts.values() if count == self.size)


def parse_groups(text: str) -> list[Group]:
    """Parse blank-line separated groups, one person per line."""
    groups = [Group()]
    for line in text.splitlines():
        if not line:
            groups.append(Group())
            continue
        groups[-1].counts.update(line)
        groups[-1].size += 1
    return groups


def part_1(text: str) -> int:
    return sum(group.any_yes() for group in parse_groups(text))


def part_2(text: str) -> int:
    return sum(group.all_yes() for group in parse_groups(text))