import pytest

from advent2024.day07 import Equation, Operator, part1, part2

EXAMPLE = """\
190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_part1_example():
    assert part1(EXAMPLE) == 3749


def test_part2_example():
    assert part2(EXAMPLE) == 11387


def test_parse():
    equation = Equation.parse("3267: 81 40 27")
    assert equation.total == 3267
    assert equation.numbers == (81, 40, 27)


def test_parse_rejects_missing_separator():
    with pytest.raises(ValueError):
        Equation.parse("3267 81 40 27")


def test_evaluate_left_to_right():
    equation = Equation.parse("0: 2 3 4")
    assert equation.evaluate([Operator.PLUS, Operator.MULTIPLY]) == 20
    assert equation.evaluate([Operator.CONCAT, Operator.PLUS]) == 27


def test_evaluate_wrong_operator_count():
    with pytest.raises(ValueError):
        Equation.parse("5: 2 3").evaluate([])


def test_find_operators_prefers_multiply_first():
    equation = Equation.parse("3267: 81 40 27")
    found = equation.find_operators((Operator.MULTIPLY, Operator.PLUS))
    assert found == (Operator.MULTIPLY, Operator.PLUS)


def test_find_operators_needs_concat():
    equation = Equation.parse("156: 15 6")
    assert equation.find_operators((Operator.MULTIPLY, Operator.PLUS)) is None
    assert equation.find_operators(
        (Operator.MULTIPLY, Operator.PLUS, Operator.CONCAT)
    ) == (Operator.CONCAT,)


def test_single_number_has_no_solution():
    assert Equation.parse("7: 7").find_operators((Operator.PLUS,)) is None