"""Handheld halting: run a boot program and repair its infinite loop."""

from __future__ import annotations

from dataclasses import dataclass, replace

_SWAP = {"nop": "jmp", "jmp": "nop"}


@dataclass(frozen=True)
class Instruction:
    """One boot code instruction: an operation and its signed argument."""

    operation: str
    argument: int


def parse_program(text: str) -> list[Instruction]:
    """Parse lines such as ``acc +3`` or ``jmp -4``."""
    program = []
    for line in text.splitlines():
        if not line.strip():
            continue
        operation, argument = line.split(" ")[:2]
        program.append(Instruction(operation, int(argument)))
    return program


def accumulator_before_loop(program: list[Instruction]) -> int:
    """Return the accumulator just before any instruction runs a second time.

    Jumps and steps past either end of the program wrap around.
    """
    size = len(program)
    accumulator = 0
    index = 0
    visited: set[int] = set()
    while index not in visited:
        visited.add(index)
        instruction = program[index]
        if instruction.operation == "nop":
            index = (index + 1) % size
        elif instruction.operation == "jmp":
            index = (index + instruction.argument) % size
        else:
            accumulator += instruction.argument
            index = (index + 1) % size
    return accumulator


def detect_loop(program: list[Instruction]) -> tuple[bool, int]:
    """Run the program and return ``(looped, accumulator)``.

    The program terminates when it steps just past its last instruction, or
    jumps beyond its end onto a position that wraps back to the first one.
    """
    size = len(program)
    accumulator = 0
    index = 0
    visited: set[int] = set()
    while index not in visited:
        visited.add(index)
        instruction = program[index]
        if instruction.operation == "acc":
            accumulator += instruction.argument

        if instruction.operation in ("nop", "acc"):
            index += 1
            if index == size:
                return False, accumulator
            index %= size
        else:
            target = index + instruction.argument
            index = target % size
            if target >= size and index == 0:
                return False, accumulator
    return True, accumulator


def fix_program(program: list[Instruction]) -> int:
    """Swap one ``nop``/``jmp`` so the program ends; return its accumulator."""
    for position, instruction in enumerate(program):
        swapped = _SWAP.get(instruction.operation)
        if swapped is None:
            continue
        patched = list(program)
        patched[position] = replace(instruction, operation=swapped)
        looped, accumulator = detect_loop(patched)
        if not looped:
            return accumulator
    raise ValueError("no single nop/jmp swap makes the program terminate")


def part_1(text: str) -> int:
    return accumulator_before_loop(parse_program(text))


def part_2(text: str) -> int:
    return fix_program(parse_program(text))