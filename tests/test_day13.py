import pytest

from advent2024.day13 import Machine, part1

EXAMPLE = (
    "Button A: X+94, Y+34\n"
    "Button B: X+22, Y+67\n"
    "Prize: X=8400, Y=5400\n"
    "\n"
    "Button A: X+26, Y+66\n"
    "Button B: X+67, Y+21\n"
    "Prize: X=12748, Y=12176\n"
    "\n"
    "Button A: X+17, Y+86\n"
    "Button B: X+84, Y+37\n"
    "Prize: X=7870, Y=6450\n"
    "\n"
    "Button A: X+69, Y+23\n"
    "Button B: X+27, Y+71\n"
    "Prize: X=18641, Y=10279\n"
)

FIRST = "Button A: X+94, Y+34\nButton B: X+22, Y+67\nPrize: X=8400, Y=5400"


def test_parse():
    assert Machine.parse(FIRST) == Machine(94, 34, 22, 67, 8400, 5400)


def test_presses_of_first_machine():
    assert Machine.parse(FIRST).presses() == (80, 40)


def test_price_of_first_machine():
    assert Machine.parse(FIRST).price() == 280


def test_third_machine_needs_swap():
    machine = Machine(17, 86, 84, 37, 7870, 6450)
    assert machine.presses() == (38, 86)
    assert machine.price() == 200


def test_unwinnable_machine():
    machine = Machine(26, 66, 67, 21, 12748, 12176)
    assert machine.presses() is None
    assert machine.price() is None


def test_negative_solution_is_rejected():
    assert Machine(1, 1, 1, 2, 5, 3).presses() is None


def test_presses_reach_prize():
    machine = Machine.parse(FIRST)
    na, nb = machine.presses()
    assert na * machine.ax + nb * machine.bx == machine.px
    assert na * machine.ay + nb * machine.by == machine.py


def test_degenerate_buttons_raise():
    with pytest.raises(ZeroDivisionError):
        Machine(1, 1, 1, 1, 2, 3).presses()


def test_part1_example():
    assert part1(EXAMPLE) == 480


def test_parse_rejects_wrong_prefix():
    with pytest.raises(ValueError):
        Machine.parse("Button C: X+1, Y+2\nButton B: X+1, Y+2\nPrize: X=1, Y=2")


def test_parse_rejects_missing_line():
    with pytest.raises(ValueError):
        Machine.parse("Button A: X+1, Y+2\nButton B: X+1, Y+2")