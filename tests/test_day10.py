import pytest

from advent2024.day10 import part1, part2

EXAMPLE = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""

SMALL = """\
0123
1234
8765
9876
"""


def test_part1_example():
    assert part1(EXAMPLE) == 36


def test_part2_example():
    assert part2(EXAMPLE) == 81


def test_part1_small():
    assert part1(SMALL) == 1


def test_rating_at_least_score():
    assert part2(SMALL) >= part1(SMALL)


def test_no_trailheads():
    assert part1("123\n456\n") == 0
    assert part2("123\n456\n") == 0


def test_non_digit_rejected():
    with pytest.raises(ValueError):
        part1("0.2\n123\n")