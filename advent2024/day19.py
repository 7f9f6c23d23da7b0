"""Linen Layout: arranging towel patterns into designs."""

from __future__ import annotations

from collections.abc import Sequence


def count_arrangements(design: str, patterns: Sequence[str]) -> int:
    """Number of ways to build the design from the patterns."""
    if not design:
        raise ValueError("a design cannot be empty")
    ways = [0] * (len(design) + 1)
    ways[len(design)] = 1
    for offset in reversed(range(len(design))):
        ways[offset] = sum(
            ways[offset + len(pattern)]
            for pattern in patterns
            if pattern and design.startswith(pattern, offset)
        )
    return ways[0]


def _parse(text: str) -> tuple[list[str], list[str]]:
    patterns, sep, designs = text.strip().partition("\n\n")
    if not sep:
        raise ValueError("input has no blank line between patterns and designs")
    return patterns.split(", "), designs.splitlines()


def part1(text: str) -> int:
    """Number of designs that can be built at all."""
    patterns, designs = _parse(text)
    return sum(count_arrangements(design, patterns) > 0 for design in designs)


def part2(text: str) -> int:
    """Total number of ways to build every design."""
    patterns, designs = _parse(text)
    return sum(count_arrangements(design, patterns) for design in designs)