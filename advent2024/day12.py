"""Garden Groups: pricing fences around garden plot regions."""

from __future__ import annotations

from collections import deque

Position = tuple[int, int]

_UP, _DOWN, _LEFT, _RIGHT = range(4)


def _neighbours(position: Position) -> tuple[Position, ...]:
    row, col = position
    return (row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1)


def _parse(text: str) -> list[str]:
    grid = text.strip().splitlines()
    if not grid:
        raise ValueError("empty map")
    return grid


def regions(text: str) -> list[frozenset[Position]]:
    """Connected areas of equal plant letters, scanned in row-major order."""
    grid = _parse(text)
    plants = {
        (row, col): plant
        for row, line in enumerate(grid)
        for col, plant in enumerate(line)
    }
    remaining = set(plants)
    found: list[frozenset[Position]] = []
    for start in plants:
        if start not in remaining:
            continue
        remaining.discard(start)
        plant = plants[start]
        region = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbour in _neighbours(current):
                if neighbour in remaining and plants[neighbour] == plant:
                    remaining.discard(neighbour)
                    region.add(neighbour)
                    queue.append(neighbour)
        found.append(frozenset(region))
    return found


def _perimeter(region: frozenset[Position]) -> int:
    return sum(
        neighbour not in region
        for position in region
        for neighbour in _neighbours(position)
    )


def _sides(region: frozenset[Position]) -> int:
    # A fence piece is (kind, line it lies on, offset along that line).
    pieces: set[tuple[int, int, int]] = set()
    for row, col in region:
        if (row - 1, col) not in region:
            pieces.add((_UP, row, col))
        if (row + 1, col) not in region:
            pieces.add((_DOWN, row + 1, col))
        if (row, col - 1) not in region:
            pieces.add((_LEFT, col, row))
        if (row, col + 1) not in region:
            pieces.add((_RIGHT, col + 1, row))
    # Each straight side is a maximal run; count the pieces that start one.
    return sum(
        (kind, line, offset - 1) not in pieces for kind, line, offset in pieces
    )


def part1(text: str) -> int:
    """Total price using area times perimeter."""
    return sum(len(region) * _perimeter(region) for region in regions(text))


def part2(text: str) -> int:
    """Total price using area times number of sides."""
    return sum(len(region) * _sides(region) for region in regions(text))