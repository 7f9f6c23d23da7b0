"""Guard Gallivant: tracing a patrolling guard through a lab."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product

# Directions in clockwise order, so turning right is the next index.
_UP, _RIGHT, _DOWN, _LEFT = range(4)
_STEPS = {_UP: (-1, 0), _RIGHT: (0, 1), _DOWN: (1, 0), _LEFT: (0, -1)}


class GuardLoopError(Exception):
    """Raised when the guard walks in a loop instead of leaving the lab."""


@dataclass(frozen=True)
class _Lab:
    walls: frozenset[tuple[int, int]]
    rows: int
    cols: int
    start: tuple[int, int]

    @classmethod
    def parse(cls, text: str) -> _Lab:
        walls = set()
        start = None
        rows: list[str] = []
        for line in text.split("\n"):
            if not line:
                continue
            row = len(rows)
            for col, char in enumerate(line):
                if char == "#":
                    walls.add((row, col))
                elif char == "^":
                    start = (row, col)
                elif char != ".":
                    raise ValueError(f"wrong cell byte: {char}")
            rows.append(line)
        if not rows:
            raise ValueError("empty map")
        if start is None:
            raise ValueError("map has no guard")
        return cls(frozenset(walls), len(rows), len(rows[0]), start)

    def open(self, row: int, col: int, walls: frozenset[tuple[int, int]]) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols and (row, col) not in walls

    def at_exit(self, row: int, col: int, direction: int) -> bool:
        return (
            (direction == _LEFT and col == 0)
            or (direction == _UP and row == 0)
            or (direction == _RIGHT and col == self.cols - 1)
            or (direction == _DOWN and row == self.rows - 1)
        )

    def walk(
        self, extra_wall: tuple[int, int] | None = None
    ) -> tuple[set[tuple[int, int]], bool]:
        """Cells the guard stands on, and whether the walk ends in a loop."""
        walls = self.walls if extra_wall is None else self.walls | {extra_wall}
        row, col = self.start
        direction = _UP
        seen = {(row, col, direction)}
        visited = {(row, col)}
        while True:
            for turns in range(4):
                candidate = (direction + turns) % 4
                drow, dcol = _STEPS[candidate]
                if self.open(row + drow, col + dcol, walls):
                    row, col, direction = row + drow, col + dcol, candidate
                    break
            else:
                return visited, False
            visited.add((row, col))
            if self.at_exit(row, col, direction):
                return visited, False
            state = (row, col, direction)
            if state in seen:
                return visited, True
            seen.add(state)


def part1(text: str) -> int:
    """Number of distinct cells the guard visits before leaving."""
    visited, looped = _Lab.parse(text).walk()
    if looped:
        raise GuardLoopError("found a loop")
    return len(visited)


def part2(text: str) -> int:
    """Number of cells where one new obstruction traps the guard in a loop."""
    lab = _Lab.parse(text)
    path, base_looped = lab.walk()
    count = 0
    for cell in product(range(lab.rows), range(lab.cols)):
        if cell == lab.start:
            continue
        if cell in path:
            _, looped = lab.walk(cell)
        else:
            # An obstruction the guard never reaches leaves the walk unchanged.
            looped = base_looped
        count += looped
    return count