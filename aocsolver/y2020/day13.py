"""Shuttle search: pick a bus and align departures with the CRT."""

from __future__ import annotations

from collections.abc import Iterable
from math import prod


def parse_notes(text: str) -> tuple[int, list[tuple[int, int]]]:
    """Return the arrival time and ``(bus_id, offset)`` for every listed bus."""
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("notes need an arrival time and a bus list")
    arrival = int(lines[0])
    buses = [
        (int(value), offset)
        for offset, value in enumerate(lines[1].split(","))
        if value != "x"
    ]
    return arrival, buses


def earliest_bus(arrival: int, buses: Iterable[int]) -> tuple[int, int]:
    """Return ``(bus_id, wait)`` for the first bus leaving at or after ``arrival``."""
    options = [(bus, -arrival % bus) for bus in buses]
    if not options:
        raise ValueError("Bus not found")
    return min(options, key=lambda option: option[1])


def egcd(a: int, b: int) -> tuple[int, int, int]:
    """Extended Euclid: return ``(g, x, y)`` with ``a*x + b*y == g``."""
    if b == 0:
        return a, 1, 0
    g, x, y = egcd(b, a % b)
    return g, y, x - (a // b) * y


def mod_inverse(a: int, m: int) -> int:
    """Return the inverse of ``a`` modulo ``m``."""
    g, x, _ = egcd(a, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def earliest_aligned_timestamp(buses: list[tuple[int, int]]) -> int:
    """Smallest ``t`` where each bus departs at ``t + offset``."""
    big_m = prod(bus for bus, _ in buses)
    total = 0
    for bus, offset in buses:
        m = big_m // bus
        a = (bus - offset % bus) % bus
        total += a * m * mod_inverse(m, bus)
    return total % big_m


def part_1(text: str) -> int:
    arrival, buses = parse_notes(text)
    bus, wait = earliest_bus(arrival, (bus for bus, _ in buses))
    return bus * wait


def part_2(text: str) -> int:
    _, buses = parse_notes(text)
    return earliest_aligned_timestamp(buses)