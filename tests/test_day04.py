from advent2024.day04 import part1, part2

EXAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""


def test_part1_example():
    assert part1(EXAMPLE) == 18


def test_part2_example():
    assert part2(EXAMPLE) == 9


def test_part1_forward_and_backward():
    assert part1("XMAS") == 1
    assert part1("SAMX") == 1
    assert part1("XMASAMX") == 2


def test_part1_vertical():
    assert part1("X\nM\nA\nS") == 1


def test_part2_single_cross():
    assert part2("M.S\n.A.\nM.S") == 1


def test_part2_no_cross():
    assert part2("M.M\n.A.\nM.S") == 0