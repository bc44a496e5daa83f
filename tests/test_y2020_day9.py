import pytest

from aocsolver.y2020.day9 import (
    find_first_invalid,
    find_weakness,
    parse_numbers,
    part_1,
    part_2,
)

EXAMPLE = [35, 20, 15, 25, 47, 40, 62, 55, 65, 95, 102, 117, 150, 182, 127, 219, 299, 277, 309, 576]


def test_parse_numbers():
    assert parse_numbers("1\n20\n\n300\n") == [1, 20, 300]


def test_first_invalid_found():
    assert find_first_invalid([1, 2, 3, 5, 100], 2) == 100


def test_equal_halves_need_two_copies():
    assert find_first_invalid([1, 3, 6], 2) == 6
    assert find_first_invalid([3, 3, 6], 2) is None


def test_complement_may_be_any_earlier_number():
    # 6 = 5 + 1, where 1 already left the window
    assert find_first_invalid([1, 2, 3, 5, 6], 2) is None


def test_all_valid_returns_none():
    assert find_first_invalid([1, 2, 3, 4, 5], 2) is None


def test_find_weakness_first_window():
    assert find_weakness([1, 2, 3, 4, 5], 3) == 3


def test_find_weakness_example():
    assert find_weakness(EXAMPLE, 127) == 62


def test_find_weakness_raises_without_run():
    with pytest.raises(ValueError):
        find_weakness([1, 2, 3], 100)


def test_part_1_uses_preamble():
    assert part_1("1\n2\n3\n5\n100\n", preamble=2) == 100


def test_part_1_raises_when_all_valid():
    with pytest.raises(ValueError):
        part_1("1\n2\n3\n4\n5\n", preamble=2)


def test_part_2_combines_both_steps():
    text = "1\n2\n3\n5\n100\n"
    with pytest.raises(ValueError):
        part_2(text, preamble=2)