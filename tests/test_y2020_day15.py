from aocsolver.y2020.day15 import parse_numbers, part_1, play


def test_parse_numbers():
    assert parse_numbers("0,3,6\n") == [0, 3, 6]


def test_parse_numbers_several_lines():
    assert parse_numbers("1,2\n3\n") == [1, 2, 3]


def test_play_within_starting_numbers_returns_last():
    starting = [0, 3, 6]
    assert play(starting, len(starting)) == starting[-1]


def test_play_sequence():
    assert [play([0, 3, 6], turn) for turn in range(4, 11)] == [0, 3, 3, 1, 0, 4, 0]


def test_play_repeated_starting_number():
    assert play([1, 1], 3) == 2 - 1


def test_play_empty_start():
    assert play([], 5) == 0


def test_part_1_example():
    assert part_1("0,3,6\n") == 436


def test_part_1_matches_play():
    assert part_1("1,3,2\n") == play([1, 3, 2], 2020)