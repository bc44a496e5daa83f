from pathlib import Path

import pytest

from aocsolver.inputs import input_path, read_input


def test_default_path_layout():
    assert input_path(2020, 1) == Path("src/y2020/day1/input.txt")


def test_path_under_custom_root(tmp_path):
    assert input_path(2024, 14, tmp_path) == tmp_path / "y2024" / "day14" / "input.txt"


def test_read_input_returns_file_content(tmp_path):
    target = tmp_path / "y2020" / "day3" / "input.txt"
    target.parent.mkdir(parents=True)
    target.write_text("..#\n#..\n")
    assert read_input(2020, 3, root=tmp_path) == "..#\n#..\n"


def test_read_input_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_input(2020, 99, root=tmp_path)