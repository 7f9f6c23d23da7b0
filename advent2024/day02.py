"""Red-Nosed Reports: checking whether level sequences are safe."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def _direction(left: int, right: int) -> int:
    return (left < right) - (left > right)


def _parse(line: str) -> list[int]:
    return [int(token) for token in line.split()]


def is_safe(levels: Sequence[int]) -> bool:
    """True if levels strictly move one way with steps of 1 to 3."""
    if len(levels) < 2:
        raise ValueError("a report needs at least two levels")
    start = _direction(levels[0], levels[1])
    if start == 0:
        return False
    return all(
        _direction(prev, nxt) == start and 1 <= abs(prev - nxt) <= 3
        for prev, nxt in pairwise(levels)
    )


def is_safe_with_dampener(levels: Sequence[int]) -> bool:
    """True if removing some single level makes the report safe."""
    levels = list(levels)
    return any(
        is_safe(levels[:index] + levels[index + 1 :]) for index in range(len(levels))
    )


def part1(text: str) -> int:
    """Number of safe reports."""
    return sum(is_safe(_parse(line)) for line in text.splitlines())


def part2(text: str) -> int:
    """Number of reports that are safe with one level removed."""
    return sum(is_safe_with_dampener(_parse(line)) for line in text.splitlines())