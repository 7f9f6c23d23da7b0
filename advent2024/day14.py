"""Restroom Redoubt: robots wrapping around a tiled floor."""

from __future__ import annotations

import re
from math import prod

SECONDS = 100

_ROBOT = re.compile(r"p=(-?\d+),(-?\d+) v=(-?\d+),(-?\d+)")


def split_axis(n: int) -> tuple[int, int]:
    """Last index of the first half and first index of the second half.

    On odd lengths the middle line belongs to neither half.
    """
    if n < 2:
        raise ValueError(f"an axis of length {n} cannot be split")
    half = n // 2
    if n % 2 == 0:
        return half - 1, half
    return half - 1, half + 1


def _parse_robot(line: str) -> tuple[int, int, int, int]:
    match = _ROBOT.fullmatch(line.strip())
    if match is None:
        raise ValueError(f"malformed robot: {line!r}")
    col, row, dcol, drow = (int(value) for value in match.groups())
    return row, col, drow, dcol


def part1(text: str, rows: int, cols: int) -> int:
    """Safety factor: product of robot counts per quadrant after 100 seconds."""
    first_rows, second_rows = split_axis(rows)
    first_cols, second_cols = split_axis(cols)
    row_halves = (range(0, first_rows + 1), range(second_rows, rows))
    col_halves = (range(0, first_cols + 1), range(second_cols, cols))
    quadrants = [(r, c) for r in row_halves for c in col_halves]

    counts = [0] * len(quadrants)
    for line in text.strip().splitlines():
        row, col, drow, dcol = _parse_robot(line)
        row = (row + drow * SECONDS) % rows
        col = (col + dcol * SECONDS) % cols
        for index, (row_range, col_range) in enumerate(quadrants):
            if row in row_range and col in col_range:
                counts[index] += 1
    return prod(counts)