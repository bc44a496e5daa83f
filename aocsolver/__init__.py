"""Advent of Code puzzle solutions for 2020 and 2024 with a command-line runner."""

__version__ = "0.1.0"