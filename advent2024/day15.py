"""Warehouse Woes: a robot pushing boxes around a warehouse."""

from __future__ import annotations

from dataclasses import dataclass

Position = tuple[int, int]

_MOVES = {"^": (-1, 0), "v": (1, 0), "<": (0, -1), ">": (0, 1)}
_WIDE = {"#": "##", ".": "..", "O": "[]", "@": "@."}
_CELLS = frozenset("#.O@")


@dataclass
class _Warehouse:
    grid: list[list[str]]
    robot: Position

    @classmethod
    def parse(cls, text: str, wide: bool = False) -> _Warehouse:
        grid: list[list[str]] = []
        robot = None
        for row, line in enumerate(text.strip().splitlines()):
            cells: list[str] = []
            for char in line:
                if char not in _CELLS:
                    raise ValueError(f"wrong cell input: {char}")
                if char == "@":
                    robot = (row, len(cells))
                cells.extend(_WIDE[char] if wide else char)
            grid.append(cells)
        if robot is None:
            raise ValueError("warehouse has no robot")
        return cls(grid, robot)

    def _cell(self, row: int, col: int) -> str:
        if not (0 <= row < len(self.grid) and 0 <= col < len(self.grid[row])):
            raise ValueError("walked off the map without meeting a wall")
        return self.grid[row][col]

    def step(self, drow: int, dcol: int) -> None:
        """Move the robot, pushing every box in the way, unless a wall blocks."""
        to_move: list[Position] = []
        seen = {self.robot}
        frontier = [self.robot]
        while frontier:
            following: list[Position] = []
            for row, col in frontier:
                to_move.append((row, col))
                nrow, ncol = row + drow, col + dcol
                cell = self._cell(nrow, ncol)
                if cell == "#":
                    return
                if cell == ".":
                    continue
                if cell == "@":
                    raise ValueError("there's only one robot")
                targets = [(nrow, ncol)]
                if drow:
                    if cell == "[":
                        targets.append((nrow, ncol + 1))
                    elif cell == "]":
                        targets.append((nrow, ncol - 1))
                for target in targets:
                    if target not in seen:
                        seen.add(target)
                        following.append(target)
            frontier = following

        for row, col in reversed(to_move):
            self.grid[row + drow][col + dcol] = self.grid[row][col]
            self.grid[row][col] = "."
        self.robot = (self.robot[0] + drow, self.robot[1] + dcol)

    def score(self) -> int:
        """Sum of GPS coordinates of every box."""
        return sum(
            100 * row + col
            for row, cells in enumerate(self.grid)
            for col, cell in enumerate(cells)
            if cell in ("O", "[")
        )


def _moves(text: str):
    for char in text:
        if char == "\n":
            continue
        if char not in _MOVES:
            raise ValueError(f"wrong insn: {char}")
        yield _MOVES[char]


def _simulate(text: str, wide: bool) -> int:
    layout, sep, moves = text.partition("\n\n")
    if not sep:
        raise ValueError("input has no blank line between map and moves")
    warehouse = _Warehouse.parse(layout, wide)
    for drow, dcol in _moves(moves):
        warehouse.step(drow, dcol)
    return warehouse.score()


def part1(text: str) -> int:
    """Sum of box coordinates after all moves."""
    return _simulate(text, wide=False)


def part2(text: str) -> int:
    """Sum of box coordinates after all moves in the doubled-width warehouse."""
    return _simulate(text, wide=True)