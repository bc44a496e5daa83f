from math import gcd

import pytest

from aocsolver.y2020.day13 import (
    earliest_aligned_timestamp,
    earliest_bus,
    egcd,
    mod_inverse,
    parse_notes,
    part_1,
    part_2,
)

EXAMPLE = "939\n7,13,x,x,59,x,31,19\n"


def test_parse_notes():
    arrival, buses = parse_notes(EXAMPLE)
    assert arrival == 939
    assert buses == [(7, 0), (13, 1), (59, 4), (31, 6), (19, 7)]


def test_parse_notes_too_short():
    with pytest.raises(ValueError):
        parse_notes("939\n")


def test_earliest_bus_is_minimal_wait():
    buses = [7, 13, 59, 31, 19]
    bus, wait = earliest_bus(939, buses)
    assert (939 + wait) % bus == 0
    assert all(wait <= -939 % other for other in buses)


def test_earliest_bus_no_wait_when_aligned():
    assert earliest_bus(14, [7, 5]) == (7, 0)


def test_earliest_bus_empty():
    with pytest.raises(ValueError):
        earliest_bus(10, [])


def test_egcd_bezout_identity():
    for a, b in [(240, 46), (17, 5), (35, 64)]:
        g, x, y = egcd(a, b)
        assert g == gcd(a, b)
        assert a * x + b * y == g


def test_mod_inverse():
    inverse = mod_inverse(3, 11)
    assert 0 <= inverse < 11
    assert (3 * inverse) % 11 == 1


def test_mod_inverse_not_coprime():
    with pytest.raises(ValueError):
        mod_inverse(2, 4)


def test_aligned_timestamp_satisfies_every_bus():
    buses = [(17, 0), (13, 2), (19, 3)]
    t = earliest_aligned_timestamp(buses)
    assert all((t + offset) % bus == 0 for bus, offset in buses)
    assert 0 <= t < 17 * 13 * 19


def test_part_1_example():
    assert part_1(EXAMPLE) == 295


def test_part_2_example():
    assert part_2(EXAMPLE) == 1068781