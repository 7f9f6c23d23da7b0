"""Reindeer Maze: the cheapest route from start to end with costly turns."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

Position = tuple[int, int]

# Directions in clockwise order, so a clockwise turn is the next index.
_UP, _RIGHT, _DOWN, _LEFT = range(4)
_STEPS = {_UP: (-1, 0), _RIGHT: (0, 1), _DOWN: (1, 0), _LEFT: (0, -1)}

STEP_COST = 1
TURN_COST = 1000

_CELLS = frozenset("#.SE")


@dataclass(frozen=True)
class _Maze:
    walls: frozenset[Position]
    rows: int
    cols: int
    start: Position
    end: Position

    @classmethod
    def parse(cls, text: str) -> _Maze:
        lines = text.strip().splitlines()
        if not lines:
            raise ValueError("empty maze")
        walls = set()
        start = end = None
        for row, line in enumerate(lines):
            for col, char in enumerate(line):
                if char not in _CELLS:
                    raise ValueError(f"wrong cell input: {char}")
                if char == "#":
                    walls.add((row, col))
                elif char == "S":
                    start = (row, col)
                elif char == "E":
                    end = (row, col)
        if start is None:
            raise ValueError("maze has no start")
        if end is None:
            raise ValueError("maze has no end")
        return cls(frozenset(walls), len(lines), len(lines[0]), start, end)

    def _step(self, position: Position, direction: int) -> Position | None:
        drow, dcol = _STEPS[direction]
        row, col = position[0] + drow, position[1] + dcol
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            return None
        if (row, col) in self.walls:
            return None
        return row, col

    def _moves(
        self, position: Position, direction: int
    ) -> Iterator[tuple[Position, int, int]]:
        ahead = self._step(position, direction)
        if ahead is not None:
            yield ahead, direction, STEP_COST
        for turned in ((direction + 1) % 4, (direction - 1) % 4):
            target = self._step(position, turned)
            if target is not None:
                yield target, turned, TURN_COST + STEP_COST

    def best_score(self) -> int:
        """Lowest score found for reaching the end, starting east-facing."""
        best = {self.start: 0}
        queue = deque([(self.start, _RIGHT, 0)])
        while queue:
            position, direction, score = queue.popleft()
            for target, facing, cost in self._moves(position, direction):
                candidate = score + cost
                known = best.get(target)
                if known is None or candidate < known:
                    best[target] = candidate
                    queue.append((target, facing, candidate))
        if self.end not in best:
            raise ValueError("the end cannot be reached")
        return best[self.end]


def part1(text: str) -> int:
    """Lowest score a reindeer could get walking from S to E."""
    return _Maze.parse(text).best_score()