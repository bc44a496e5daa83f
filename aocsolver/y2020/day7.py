"""Handy haversacks: reason about bags nested inside bags."""

from __future__ import annotations

import re
from collections import defaultdict, deque

TARGET = "shiny gold"
_CONTENT = re.compile(r"(?P<n>[\d]+)\s(?P<color>[\w\s]+)\sbag")

Rules = dict[str, list[tuple[str, int]]]


def parse_rule(rule: str) -> tuple[str, list[tuple[str, int]]]:
    """Parse one rule into its container colour and ``(colour, count)`` contents."""
    container, sep, contents = rule.partition(" bags contain ")
    if not sep:
        raise ValueError(f"malformed rule: {rule!r}")
    return container, [
        (match["color"], int(match["n"])) for match in _CONTENT.finditer(contents)
    ]


def parse_rules(text: str) -> Rules:
    """Parse every rule line into a mapping from colour to contents."""
    return dict(parse_rule(line) for line in text.splitlines() if line.strip())


def count_containers(rules: Rules, color: str = TARGET) -> int:
    """Count the colours that eventually contain a bag of ``color``."""
    contained_in: defaultdict[str, list[str]] = defaultdict(list)
    for container, contents in rules.items():
        for inner, _ in contents:
            contained_in[inner].append(container)
    if color not in contained_in:
        raise KeyError(color)

    seen = set(contained_in[color])
    queue = deque(seen)
    while queue:
        for container in contained_in.get(queue.popleft(), ()):
            if container not in seen:
                seen.add(container)
                queue.append(container)
    return len(seen)


def count_contained(rules: Rules, color: str = TARGET) -> int:
    """Count the bags held, at any depth, inside one bag of ``color``."""
    total = 0
    frontier = list(rules[color])
    while frontier:
        next_frontier = []
        for inner, count in frontier:
            total += count
            next_frontier.extend((c, n * count) for c, n in rules.get(inner, ()))
        frontier = next_frontier
    return total


def part_1(text: str) -> int:
    return count_containers(parse_rules(text), TARGET)


def part_2(text: str) -> int:
    return count_contained(parse_rules(text), TARGET)