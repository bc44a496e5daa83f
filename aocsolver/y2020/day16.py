"""Ticket translation: validate tickets and work out the field order."""

from __future__ import annotations

from dataclasses import dataclass
from math import prod


@dataclass(frozen=True)
class Rule:
    """A ticket field rule with its inclusive value ranges."""

    name: str
    ranges: tuple[tuple[int, int], ...]

    def accepts(self, value: int) -> bool:
        return any(low <= value <= high for low, high in self.ranges)


@dataclass
class Notes:
    """The rules, your ticket and the nearby tickets."""

    rules: list[Rule]
    ticket: list[int]
    nearby: list[list[int]]


def _split_groups(text: str) -> list[list[str]]:
    groups: list[list[str]] = [[]]
    for line in text.splitlines():
        if line:
            groups[-1].append(line)
        else:
            groups.append([])
    return groups


def _parse_ticket(line: str) -> list[int]:
    return [int(value) for value in line.split(",")]


def _parse_rule(line: str) -> Rule:
    name, sep, raw_ranges = line.partition(": ")
    if not sep:
        raise ValueError(f"malformed rule: {line!r}")
    ranges = []
    for raw_range in raw_ranges.split(" or "):
        low, _, high = raw_range.partition("-")
        ranges.append((int(low), int(high)))
    return Rule(name, tuple(ranges))


def parse_notes(text: str) -> Notes:
    """Parse the three blank-line separated sections of the notes."""
    groups = _split_groups(text)
    if len(groups) < 3 or len(groups[1]) < 2:
        raise ValueError("notes need rules, your ticket and nearby tickets")
    return Notes(
        rules=[_parse_rule(line) for line in groups[0]],
        ticket=_parse_ticket(groups[1][1]),
        nearby=[_parse_ticket(line) for line in groups[2][1:]],
    )


def is_valid_value(rules: list[Rule], value: int) -> bool:
    """Whether any rule accepts the value."""
    return any(rule.accepts(value) for rule in rules)


def error_rate(notes: Notes) -> int:
    """Sum of nearby ticket values no rule accepts."""
    return sum(
        value
        for ticket in notes.nearby
        for value in ticket
        if not is_valid_value(notes.rules, value)
    )


def valid_tickets(notes: Notes) -> list[list[int]]:
    """Nearby tickets whose every value some rule accepts."""
    return [
        ticket
        for ticket in notes.nearby
        if all(is_valid_value(notes.rules, value) for value in ticket)
    ]


def _fits(rule: Rule, tickets: list[list[int]], field: int) -> bool:
    return all(rule.accepts(ticket[field]) for ticket in tickets)


def assign_fields(notes: Notes) -> dict[int, int]:
    """Map each rule index to a field index, most constrained rule first."""
    tickets = valid_tickets(notes)
    candidates: dict[int, list[int]] = {}
    for rule_index, rule in enumerate(notes.rules):
        fields = [f for f in range(len(notes.ticket)) if _fits(rule, tickets, f)]
        if fields:
            candidates[rule_index] = fields

    mapping: dict[int, int] = {}
    assigned: set[int] = set()
    for rule_index, fields in sorted(candidates.items(), key=lambda item: len(item[1])):
        field = next((f for f in fields if f not in assigned), None)
        if field is None:
            raise ValueError(f"no free field for rule {notes.rules[rule_index].name!r}")
        assigned.add(field)
        mapping[rule_index] = field
    return mapping


def search_assignment(notes: Notes) -> dict[int, int] | None:
    """Search every assignment of rules to fields; ``None`` if none covers all rules."""
    tickets = valid_tickets(notes)
    if not tickets:
        raise ValueError("no valid nearby tickets")
    rules = notes.rules
    field_count = len(tickets[0])

    def search(field: int, used: dict[int, int]) -> dict[int, int] | None:
        if field >= field_count:
            return used
        for rule_index, rule in enumerate(rules):
            if rule_index in used or not _fits(rule, tickets, field):
                continue
            found = search(field + 1, {**used, rule_index: field})
            if found is not None and len(found) == len(rules):
                return found
        return None

    return search(0, {})


def departure_product(notes: Notes, mapping: dict[int, int]) -> int:
    """Product of your ticket's values in fields whose rule starts with ``departure``."""
    return prod(
        notes.ticket[field]
        for rule_index, field in mapping.items()
        if notes.rules[rule_index].name.startswith("departure")
    )


def part_1(text: str) -> int:
    return error_rate(parse_notes(text))


def part_2(text: str) -> int:
    notes = parse_notes(text)
    return departure_product(notes, assign_fields(notes))


def part_2_generic(text: str) -> int:
    notes = parse_notes(text)
    mapping = search_assignment(notes)
    if mapping is None:
        raise ValueError("no assignment of rules to fields exists")
    return departure_product(notes, mapping)