"""Ceres Search: finding XMAS in a letter grid."""

from __future__ import annotations

from itertools import product

_DIRECTIONS = [
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
]


class _Grid:
    def __init__(self, text: str) -> None:
        self.lines = text.split("\n")

    def at(self, row: int, col: int) -> str | None:
        if row < 0 or col < 0 or row >= len(self.lines):
            return None
        line = self.lines[row]
        return line[col] if col < len(line) else None

    def word(self, points) -> str | None:
        letters = [self.at(row, col) for row, col in points]
        if None in letters:
            return None
        return "".join(letters)

    def starts(self):
        return product(range(len(self.lines)), range(len(self.lines[0])))


def part1(text: str) -> int:
    """Occurrences of XMAS in any of the eight directions."""
    grid = _Grid(text)
    return sum(
        grid.word([(row + k * drow, col + k * dcol) for k in range(4)]) == "XMAS"
        for (row, col), (drow, dcol) in product(grid.starts(), _DIRECTIONS)
    )


def part2(text: str) -> int:
    """Occurrences of two MAS strings crossing in an X."""
    grid = _Grid(text)
    count = 0
    for row, col in grid.starts():
        diagonals = (
            grid.word([(row, col), (row + 1, col + 1), (row + 2, col + 2)]),
            grid.word([(row, col + 2), (row + 1, col + 1), (row + 2, col)]),
        )
        if all(diagonal in ("MAS", "SAM") for diagonal in diagonals):
            count += 1
    return count