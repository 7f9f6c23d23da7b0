"""Hoof It: scoring hiking trails on a topographic map."""

from __future__ import annotations

from collections.abc import Iterator

Position = tuple[int, int]


def _parse(text: str) -> list[list[int]]:
    grid = [[int(char) for char in line] for line in text.strip().splitlines()]
    if not grid:
        raise ValueError("empty map")
    return grid


def _trailheads(grid: list[list[int]]) -> Iterator[Position]:
    for row, line in enumerate(grid):
        for col, height in enumerate(line):
            if height == 0:
                yield row, col


def _trail_ends(grid: list[list[int]], position: Position) -> Iterator[Position]:
    """End of every distinct trail from the position, once per trail."""
    row, col = position
    height = grid[row][col]
    if height == 9:
        yield position
        return
    for nrow, ncol in ((row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1)):
        if 0 <= nrow < len(grid) and 0 <= ncol < len(grid[nrow]):
            if grid[nrow][ncol] == height + 1:
                yield from _trail_ends(grid, (nrow, ncol))


def part1(text: str) -> int:
    """Sum over trailheads of the number of distinct reachable summits."""
    grid = _parse(text)
    return sum(len(set(_trail_ends(grid, start))) for start in _trailheads(grid))


def part2(text: str) -> int:
    """Sum over trailheads of the number of distinct trails."""
    grid = _parse(text)
    return sum(sum(1 for _ in _trail_ends(grid, start)) for start in _trailheads(grid))