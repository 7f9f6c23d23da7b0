"""Chronospatial Computer: a small three-register machine."""

from __future__ import annotations

from collections.abc import Sequence


def _strip(text: str, prefix: str) -> str:
    if not text.startswith(prefix):
        raise ValueError(f"expected {prefix!r} at the start of {text!r}")
    return text[len(prefix) :]


def run_program(a: int, b: int, c: int, tape: Sequence[int]) -> list[int]:
    """Run the program with the given registers and return its output values."""
    output: list[int] = []
    pointer = 0
    while pointer + 1 < len(tape):
        opcode, operand = tape[pointer], tape[pointer + 1]
        if not 0 <= opcode <= 7:
            raise ValueError(f"invalid insn opcode: {opcode}")
        if not 0 <= operand <= 6:
            raise ValueError(f"got combo {operand}")
        combo = (operand, operand, operand, operand, a, b, c)[operand]
        match opcode:
            case 0:
                a >>= combo
            case 1:
                b ^= operand
            case 2:
                b = combo % 8
            case 3:
                if a != 0:
                    pointer = operand
                    continue
            case 4:
                b ^= c
            case 5:
                output.append(combo % 8)
            case 6:
                b = a >> combo
            case 7:
                c = a >> combo
        pointer += 2
    return output


def _parse(text: str) -> tuple[int, int, int, list[int]]:
    registers, sep, program = text.strip().partition("\n\n")
    if not sep:
        raise ValueError("input has no blank line between registers and program")
    lines = registers.strip().split("\n")
    if len(lines) != 3:
        raise ValueError(f"expected three registers, got {len(lines)}")
    a, b, c = (
        int(_strip(line.strip(), f"Register {name}: "))
        for line, name in zip(lines, "ABC")
    )
    tape = [int(value) for value in _strip(program.strip(), "Program: ").split(",")]
    return a, b, c, tape


def part1(text: str) -> str:
    """Comma-separated output of the program."""
    a, b, c, tape = _parse(text)
    return ",".join(str(value) for value in run_program(a, b, c, tape))