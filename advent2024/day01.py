"""Historian Hysteria: comparing two lists of location identifiers."""

from __future__ import annotations

from collections import Counter

_SEPARATOR = "   "


def _columns(text: str) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        first, sep, second = line.partition(_SEPARATOR)
        if not sep:
            raise ValueError(f"line has no column separator: {line!r}")
        left.append(int(first))
        right.append(int(second))
    return left, right


def part1(text: str) -> int:
    """Sum of distances between the sorted left and right columns."""
    left, right = _columns(text)
    return sum(abs(lhs - rhs) for lhs, rhs in zip(sorted(left), sorted(right)))


def part2(text: str) -> int:
    """Similarity score: each left value times its count in the right column."""
    left, right = _columns(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)