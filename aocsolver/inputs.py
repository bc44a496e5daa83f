"""Locating and reading puzzle input files."""

from __future__ import annotations

from pathlib import Path

DEFAULT_ROOT = Path("src")


def input_path(year: int | str, day: int | str, root: str | Path | None = None) -> Path:
    """Return the path of the input file for a puzzle day."""
    base = Path(root) if root is not None else DEFAULT_ROOT
    return base / f"y{year}" / f"day{day}" / "input.txt"


def read_input(year: int | str, day: int | str, root: str | Path | None = None) -> str:
    """Read the whole input file for a puzzle day as text."""
    return input_path(year, day, root).read_text()