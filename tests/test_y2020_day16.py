import pytest

from aocsolver.y2020.day16 import (
    Rule,
    assign_fields,
    departure_product,
    error_rate,
    is_valid_value,
    parse_notes,
    part_1,
    part_2,
    part_2_generic,
    search_assignment,
    valid_tickets,
)

EXAMPLE_1 = """class: 1-3 or 5-7
row: 6-11 or 33-44
seat: 13-40 or 45-50

your ticket:
7,1,14

nearby tickets:
7,3,47
40,4,50
55,2,20
38,6,12
"""

EXAMPLE_2 = """class: 0-1 or 4-19
row: 0-5 or 8-19
seat: 0-13 or 16-19

your ticket:
11,12,13

nearby tickets:
3,9,18
15,1,5
5,14,9
"""

DEPARTURE = EXAMPLE_2.replace("class:", "departure class:").replace(
    "seat:", "departure seat:"
)

IMPOSSIBLE = """a: 1-1 or 9-9
b: 1-1 or 9-9
c: 2-2 or 9-9

your ticket:
1,2

nearby tickets:
1,2
"""


def test_parse_notes():
    notes = parse_notes(EXAMPLE_1)
    assert notes.rules[0] == Rule("class", ((1, 3), (5, 7)))
    assert notes.ticket == [7, 1, 14]
    assert notes.nearby[0] == [7, 3, 47]
    assert len(notes.nearby) == 4


def test_parse_notes_missing_sections():
    with pytest.raises(ValueError):
        parse_notes("class: 1-3 or 5-7\n")


def test_rule_accepts_inclusive_bounds():
    rule = Rule("class", ((1, 3), (5, 7)))
    assert rule.accepts(1) and rule.accepts(3) and rule.accepts(5) and rule.accepts(7)
    assert not rule.accepts(4)
    assert not rule.accepts(8)


def test_is_valid_value():
    rules = parse_notes(EXAMPLE_1).rules
    assert is_valid_value(rules, 7)
    assert not is_valid_value(rules, 55)


def test_valid_tickets():
    assert valid_tickets(parse_notes(EXAMPLE_1)) == [[7, 3, 47]]


def test_error_rate_matches_part_1():
    assert error_rate(parse_notes(EXAMPLE_1)) == part_1(EXAMPLE_1)


def test_part_1_example():
    assert part_1(EXAMPLE_1) == 71


def test_assign_fields_example():
    assert assign_fields(parse_notes(EXAMPLE_2)) == {0: 1, 1: 0, 2: 2}


def test_search_agrees_with_assignment():
    notes = parse_notes(EXAMPLE_2)
    assert search_assignment(notes) == assign_fields(notes)


def test_departure_product_uses_departure_fields():
    notes = parse_notes(DEPARTURE)
    mapping = assign_fields(notes)
    assert departure_product(notes, mapping) == notes.ticket[1] * notes.ticket[2]
    assert part_2(DEPARTURE) == part_2_generic(DEPARTURE)


def test_departure_product_without_departure_rules_is_empty_product():
    assert part_2(EXAMPLE_2) == part_2_generic(EXAMPLE_2) == 1


def test_impossible_assignment_raises():
    with pytest.raises(ValueError):
        assign_fields(parse_notes(IMPOSSIBLE))
    with pytest.raises(ValueError):
        part_2_generic(IMPOSSIBLE)


def test_search_assignment_returns_none_when_impossible():
    assert search_assignment(parse_notes(IMPOSSIBLE)) is None