"""Command line entry point: solve one puzzle part for an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from functools import partial
from pathlib import Path

from advent2024 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
)

_FLOOR_ROWS = 103
_FLOOR_COLS = 101

_SOLVERS: dict[tuple[int, int], Callable[[str], object]] = {
    (1, 1): day01.part1,
    (1, 2): day01.part2,
    (2, 1): day02.part1,
    (2, 2): day02.part2,
    (3, 1): day03.part1,
    (3, 2): day03.part2,
    (4, 1): day04.part1,
    (4, 2): day04.part2,
    (5, 1): day05.part1,
    (5, 2): day05.part2,
    (6, 1): day06.part1,
    (6, 2): day06.part2,
    (7, 1): day07.part1,
    (7, 2): day07.part2,
    (8, 1): day08.part1,
    (8, 2): day08.part2,
    (9, 1): day09.part1,
    (9, 2): day09.part2,
    (10, 1): day10.part1,
    (10, 2): day10.part2,
    (11, 1): day11.part1,
    (11, 2): day11.part2,
    (12, 1): day12.part1,
    (12, 2): day12.part2,
    (13, 1): day13.part1,
    (14, 1): partial(day14.part1, rows=_FLOOR_ROWS, cols=_FLOOR_COLS),
    (15, 1): day15.part1,
    (15, 2): day15.part2,
    (16, 1): day16.part1,
    (17, 1): day17.part1,
    (18, 1): partial(day18.part1, size=day18.SIZE, count=day18.BYTES),
    (18, 2): partial(day18.part2, size=day18.SIZE),
    (19, 1): day19.part1,
    (19, 2): day19.part2,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advent2024", description="Solve one part of a puzzle day."
    )
    parser.add_argument("day", type=int, help="puzzle day")
    parser.add_argument("part", type=int, help="puzzle part")
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="puzzle input file; '-' or nothing reads standard input",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Print the answer for the chosen day and part."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    solver = _SOLVERS.get((args.day, args.part))
    if solver is None:
        parser.error(f"no solution for day {args.day} part {args.part}")
    if args.input == "-":
        text = sys.stdin.read()
    else:
        text = Path(args.input).read_text()
    print(solver(text))
    return 0


if __name__ == "__main__":
    sys.exit(main())