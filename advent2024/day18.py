"""RAM Run: escaping a memory grid as bytes fall into it."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

SIZE = 71
BYTES = 1024

Point = tuple[int, int]


def shortest_path(blocked: Iterable[Point], size: int) -> int | None:
    """Fewest steps from the top-left to the bottom-right corner, or None."""
    walls = set(blocked)
    start = (0, 0)
    end = (size - 1, size - 1)
    distance = {start: 0}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        steps = distance[(x, y)] + 1
        for candidate in ((x, y + 1), (x, y - 1), (x + 1, y), (x - 1, y)):
            cx, cy = candidate
            if not (0 <= cx < size and 0 <= cy < size):
                continue
            if candidate in walls or candidate in distance:
                continue
            distance[candidate] = steps
            queue.append(candidate)
    return distance.get(end)


def _parse(text: str, size: int) -> list[Point]:
    points: list[Point] = []
    for line in text.strip().splitlines():
        x, sep, y = line.partition(",")
        if not sep:
            raise ValueError(f"malformed byte position: {line!r}")
        point = (int(x), int(y))
        if not all(0 <= value < size for value in point):
            raise ValueError(f"byte position {line!r} lies outside the grid")
        points.append(point)
    return points


def part1(text: str, size: int = SIZE, count: int = BYTES) -> int:
    """Fewest steps to the exit after the first ``count`` bytes have fallen."""
    steps = shortest_path(_parse(text, size)[:count], size)
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return steps


def part2(text: str, size: int = SIZE) -> str:
    """Position, as ``x,y``, of the first byte that cuts off the exit."""
    points = _parse(text, size)
    if shortest_path(points, size) is not None:
        raise ValueError("no byte ever cuts off the exit")
    # Blocking only grows, so the first cutting byte can be found by bisection.
    low, high = 0, len(points)
    while low < high:
        middle = (low + high) // 2
        if shortest_path(points[: middle + 1], size) is None:
            high = middle
        else:
            low = middle + 1
    x, y = points[low]
    return f"{x},{y}"