"""Mull It Over: summing multiplication instructions in corrupted memory."""

from __future__ import annotations

import re

_MUL = re.compile(r"mul\((\d+),(\d+)\)")
_INSTRUCTION = re.compile(r"mul\((\d+),(\d+)\)|do\(\)|don't\(\)")


def part1(text: str) -> int:
    """Sum of all products of well-formed mul instructions."""
    return sum(int(lhs) * int(rhs) for lhs, rhs in _MUL.findall(text))


def part2(text: str) -> int:
    """Sum of products, honouring do() and don't() toggles."""
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        token = match.group(0)
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total