"""Docking data: run a bitmask memory program in both decoder versions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Mask:
    """A bitmask of ``0``, ``1`` and floating ``X`` bits, most significant first."""

    raw: str

    @property
    def and_mask(self) -> int:
        """Bits kept: ``1`` wherever the mask is ``X`` or ``1``."""
        return int(self.raw.replace("X", "1"), 2) if self.raw else 0

    @property
    def or_mask(self) -> int:
        """Bits forced on: ``1`` wherever the mask is ``1``."""
        return int(self.raw.replace("X", "0"), 2) if self.raw else 0

    def apply_value(self, value: int) -> int:
        """Overwrite the value's bits with the mask's ``0`` and ``1`` bits."""
        return (value & self.and_mask) | self.or_mask

    def addresses(self, address: int) -> list[int]:
        """Every address the mask decodes ``address`` to.

        Bits set in the mask are forced on, then each floating bit takes both values.
        """
        result = [address | self.or_mask]
        width = len(self.raw)
        for position, char in enumerate(self.raw):
            if char != "X":
                continue
            bit = 1 << (width - 1 - position)
            result = [variant for item in result for variant in (item | bit, item & ~bit)]
        return result


@dataclass(frozen=True)
class MemoryWrite:
    """A ``mem[address] = value`` instruction."""

    address: int
    value: int


Program = list["Mask | MemoryWrite"]


def parse_program(text: str) -> list[Mask | MemoryWrite]:
    """Parse ``mask = ...`` and ``mem[a] = v`` lines."""
    program: list[Mask | MemoryWrite] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        target, sep, operand = line.partition(" = ")
        if not sep:
            raise ValueError(f"malformed instruction: {line!r}")
        if target == "mask":
            program.append(Mask(operand))
        else:
            _, bracket, address = target.partition("[")
            if not bracket:
                raise ValueError(f"malformed instruction: {line!r}")
            program.append(MemoryWrite(int(address[:-1]), int(operand)))
    return program


def run_v1(program: list[Mask | MemoryWrite]) -> dict[int, int]:
    """Run with the mask applied to values; writes before any mask are ignored."""
    memory: dict[int, int] = {}
    mask: Mask | None = None
    for instruction in program:
        if isinstance(instruction, Mask):
            mask = instruction
        elif mask is not None:
            memory[instruction.address] = mask.apply_value(instruction.value)
    return memory


def run_v2(program: list[Mask | MemoryWrite]) -> dict[int, int]:
    """Run with the mask decoding addresses; writes before any mask are ignored."""
    memory: dict[int, int] = {}
    mask: Mask | None = None
    for instruction in program:
        if isinstance(instruction, Mask):
            mask = instruction
        elif mask is not None:
            for address in mask.addresses(instruction.address):
                memory[address] = instruction.value
    return memory


def part_1(text: str) -> int:
    return sum(run_v1(parse_program(text)).values())


def part_2(text: str) -> int:
    return sum(run_v2(parse_program(text)).values())