"""Passport processing: check fields of batch passport records."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

REQUIRED_FIELDS = ("byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid")
EYE_COLORS = frozenset({"amb", "blu", "brn", "gry", "grn", "hzl", "oth"})
HAIR_COLOR = re.compile(r"#[\da-f]{6}")
PASSPORT_ID = re.compile(r"\d{9}")


@dataclass
class Passport:
    """A passport record as a mapping of field names to raw values."""

    fields: dict[str, str] = field(default_factory=dict)

    def has_required_fields(self) -> bool:
        return all(key in self.fields for key in REQUIRED_FIELDS)

    def _year_between(self, key: str, low: int, high: int) -> bool:
        value = self.fields.get(key)
        return value is not None and low <= int(value) <= high

    def _height_valid(self) -> bool:
        height = self.fields.get("hgt")
        if height is None:
            return False
        unit = height[-1]
        number = int(height[:-2])
        if unit == "m":
            return 150 <= number <= 193
        return 59 <= number <= 76

    def _matches(self, key: str, pattern: re.Pattern[str]) -> bool:
        value = self.fields.get(key)
        return value is not None and pattern.fullmatch(value) is not None

    def is_valid(self) -> bool:
        """Check every field value against the strict rules."""
        return (
            self._year_between("byr", 1920, 2002)
            and self._year_between("iyr", 2010, 2020)
            and self._year_between("eyr", 2020, 2030)
            and self._height_valid()
            and self._matches("hcl", HAIR_COLOR)
            and self.fields.get("ecl") in EYE_COLORS
            and self._matches("pid", PASSPORT_ID)
        )


def parse_passports(text: str) -> list[Passport]:
    """Parse blank-line separated records of ``key:value`` pairs."""
    passports = [Passport()]
    for line in text.splitlines():
        if not line:
            passports.append(Passport())
            continue
        for pair in line.split(" "):
            key, value = pair.split(":", 1)
            passports[-1].fields[key] = value
    return passports


def part_1(text: str) -> int:
    return sum(passport.has_required_fields() for passport in parse_passports(text))


def part_2(text: str) -> int:
    return sum(passport.is_valid() for passport in parse_passports(text))