import pytest

from advent2024.day06 import GuardLoopError, part1, part2

EXAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

LOOPING = """\
.#..
...#
#^..
..#.
"""


def test_part1_example():
    assert part1(EXAMPLE) == 41


def test_part2_example():
    assert part2(EXAMPLE) == 6


def test_part1_walks_to_edge():
    assert part1("...\n.^.\n...") == 2


def test_part1_trapped_guard_stays_put():
    assert part1("#\n^") == 1


def test_part1_raises_on_loop():
    with pytest.raises(GuardLoopError):
        part1(LOOPING)


def test_part2_single_column_has_no_loop():
    assert part2(".\n^") == 0


def test_invalid_cell_rejected():
    with pytest.raises(ValueError):
        part1("..x\n.^.")


def test_missing_guard_rejected():
    with pytest.raises(ValueError):
        part1("...\n...")