"""Resonant Collinearity: counting antinodes of same-frequency antennas."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from itertools import permutations

Position = tuple[int, int]


@dataclass(frozen=True)
class _City:
    rows: int
    cols: int
    antennas: dict[str, list[Position]]

    @classmethod
    def parse(cls, text: str) -> _City:
        antennas: dict[str, list[Position]] = defaultdict(list)
        max_row = max_col = 0
        for row, line in enumerate(text.strip().splitlines()):
            for col, char in enumerate(line):
                max_row = max(max_row, row)
                max_col = max(max_col, col)
                if char.isascii() and char.isalnum():
                    antennas[char].append((row, col))
        return cls(max_row + 1, max_col + 1, dict(antennas))

    def contains(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def pairs(self):
        for positions in self.antennas.values():
            yield from permutations(positions, 2)


def part1(text: str) -> int:
    """Unique in-bounds antinodes at twice the distance from one antenna."""
    city = _City.parse(text)
    antinodes = set()
    for (arow, acol), (brow, bcol) in city.pairs():
        for node in ((2 * arow - brow, 2 * acol - bcol), (2 * brow - arow, 2 * bcol - acol)):
            if city.contains(node):
                antinodes.add(node)
    return len(antinodes)


def part2(text: str) -> int:
    """Unique in-bounds positions in line with any two same-frequency antennas."""
    city = _City.parse(text)
    antinodes: set[Position] = set()
    for base, target in city.pairs():
        antinodes.update((base, target))
        drow, dcol = target[0] - base[0], target[1] - base[1]
        row, col = target[0] + drow, target[1] + dcol
        while city.contains((row, col)):
            antinodes.add((row, col))
            row, col = row + drow, col + dcol
    return len(antinodes)