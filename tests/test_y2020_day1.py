import pytest

from aocsolver.y2020.day1 import find_pair, find_triple, parse_entries, part_1, part_2

EXAMPLE = "1721\n979\n366\n299\n675\n1456\n"
ENTRIES = [1721, 979, 366, 299, 675, 1456]


def test_parse_entries_skips_blank_lines():
    assert parse_entries("1721\n 979 \n\n") == [1721, 979]


def test_find_pair():
    pair = find_pair(ENTRIES, 2020)
    assert pair == (1721, 299)
    assert sum(pair) == 2020


def test_find_triple():
    triple = find_triple(ENTRIES, 2020)
    assert triple == (979, 366, 675)
    assert sum(triple) == 2020


def test_part_1_example():
    assert part_1(EXAMPLE) == 514579


def test_part_2_example():
    assert part_2(EXAMPLE) == 241861950


def test_no_pair_raises():
    with pytest.raises(ValueError):
        find_pair([1, 2, 3], 2020)


def test_no_triple_raises():
    with pytest.raises(ValueError):
        find_triple([1, 2, 3], 2020)