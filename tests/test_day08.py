from advent2024.day08 import part1, part2

EXAMPLE = """\
............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""

TWO_ANTENNAS = """\
..........
..........
..........
....a.....
..........
.....a....
..........
..........
..........
..........
"""

T_ANTENNAS = """\
T.........
...T......
.T........
..........
..........
..........
..........
..........
..........
..........
"""


def test_part1_example():
    assert part1(EXAMPLE) == 14


def test_part2_example():
    assert part2(EXAMPLE) == 34


def test_part1_two_antennas():
    assert part1(TWO_ANTENNAS) == 2


def test_part2_t_antennas():
    assert part2(T_ANTENNAS) == 9


def test_different_frequencies_do_not_interact():
    assert part1("a..\n...\n..A") == 0
    assert part2("a..\n...\n..A") == 0


def test_part2_counts_antennas_themselves():
    assert part2("a.a") == 2


def test_part1_antinodes_outside_grid_are_ignored():
    assert part1("a.a") == 0
    assert part1("a.a....") == 1