import pytest

from advent2024.day15 import part1, part2

SMALL = """\
########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<
"""

LARGE = """\
##########
#..O..O.O#
#......O.#
#.OO..O.O#
#..O@..O.#
#O#..O...#
#O..O..O.#
#.OO.O.OO#
#....O...#
##########

<vv>^<v^>v>^vv^v>v<>v^v<v<^vv<<<^><<><>>v<vvv<>^v^>^<<<><<v<<<v^vv^v>^
vvv<<^>^v^^><<>>><>^<<><^vv^^<>vvv<>><^^v>^>vv<>v<<<<v<^v>^<^^>>>^<v<v
><>vv>v^v^<>><>>>><^^>vv>v<^^^>>v^v^<^^>v^^>v^<^v>v<>>v^v^<v>v^^<^^vv<
<<v<^>>^^^^>>>v^<>vvv^><v<<<>^^^vv^<vvv>^>v<^^^^v<>^>vvvv><>>v^<<^^^^^
^><^><>>><>^^<<^^v>>><^<v>^<vv>>v>>>^v><>^v><<<<v>>v<v<v>vvv>^<><<>^><
^>><>^v<><^vvv<^^<><v<<<<<><^v<<<><<<^^<v<^^^><^>>^<v^><<<^>>^v<v^v<v^
>^>>^v>vv>^<<^v<>><<><<v<<v><>v<^vv<<<>^^v^>^^>>><<^v>>v^v><^^>>^<>vv^
<><^^>^^^<><vvvvv^v<v<<>^v<v>v<<^><<><<><<<^^<<<^<<>><<><^^^>^^<>^>v<>
^^>vv<^v^v<vv>^<><v<^v>^^^>>>^^vvv^>vvv<>>>^<^>>>>>^<<^v>^vvv<>^<><<v>
v^^>>><<^^<>>^v^<v^vv<>v^<<>^<^v^v><^<<<><<^<v><v<>vv>>v><v^<vv<>v^<<^
"""

WIDE_SMALL = """\
#######
#...#.#
#.....#
#..OO@#
#..O..#
#.....#
#######

<vv<<^^<<^^
"""


def test_part1_small_example():
    assert part1(SMALL) == 2028


def test_part1_large_example():
    assert part1(LARGE) == 10092


def test_part2_large_example():
    assert part2(LARGE) == 9021


def test_part2_small_example():
    assert part2(WIDE_SMALL) == 618


def test_part1_push_box_into_free_cell():
    assert part1("#####\n#@O.#\n#####\n\n>") == 103


def test_part1_box_blocked_by_wall():
    assert part1("####\n#@O#\n####\n\n>") == 102


def test_part2_robot_then_box_moves():
    text = "#####\n#@O.#\n#####\n\n"
    assert part2(text + ">") == 104
    assert part2(text + ">>") == 105


def test_wrong_instruction():
    with pytest.raises(ValueError):
        part1("####\n#@.#\n####\n\n>x")


def test_wrong_cell():
    with pytest.raises(ValueError):
        part1("####\n#@X#\n####\n\n>")


def test_missing_moves_section():
    with pytest.raises(ValueError):
        part1("####\n#@.#\n####")


def test_missing_robot():
    with pytest.raises(ValueError):
        part2("####\n#..#\n####\n\n>")