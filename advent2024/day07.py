"""Bridge Repair: finding operators that make calibration equations true."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import product


class Operator(enum.Enum):
    """Binary operators, always evaluated left to right."""

    PLUS = "+"
    MULTIPLY = "*"
    CONCAT = "||"

    def apply(self, left: int, right: int) -> int:
        if self is Operator.PLUS:
            return left + right
        if self is Operator.MULTIPLY:
            return left * right
        return int(f"{left}{right}")


_BASIC = (Operator.MULTIPLY, Operator.PLUS)
_EXTENDED = (Operator.MULTIPLY, Operator.PLUS, Operator.CONCAT)


@dataclass(frozen=True)
class Equation:
    """A test value and the numbers that should combine into it."""

    total: int
    numbers: tuple[int, ...]

    @classmethod
    def parse(cls, line: str) -> Equation:
        total, sep, rest = line.partition(": ")
        if not sep:
            raise ValueError(f"malformed equation: {line!r}")
        return cls(int(total), tuple(int(token) for token in rest.split(" ")))

    def evaluate(self, operators: Sequence[Operator]) -> int:
        """Value of the numbers combined left to right with the operators."""
        if len(operators) != len(self.numbers) - 1:
            raise ValueError(
                f"expected {len(self.numbers) - 1} operators, got {len(operators)}"
            )
        result = self.numbers[0]
        for operator, number in zip(operators, self.numbers[1:]):
            result = operator.apply(result, number)
        return result

    def find_operators(
        self, choices: Sequence[Operator]
    ) -> tuple[Operator, ...] | None:
        """First operator sequence from the choices that yields the total."""
        if len(self.numbers) < 2:
            return None
        for operators in product(choices, repeat=len(self.numbers) - 1):
            if self.evaluate(operators) == self.total:
                return operators
        return None


def _calibration(text: str, choices: Sequence[Operator]) -> int:
    equations = [Equation.parse(line) for line in text.strip().split("\n")]
    return sum(
        equation.total
        for equation in equations
        if equation.find_operators(choices) is not None
    )


def part1(text: str) -> int:
    """Sum of totals reachable with addition and multiplication."""
    return _calibration(text, _BASIC)


def part2(text: str) -> int:
    """Sum of totals reachable with addition, multiplication and concatenation."""
    return _calibration(text, _EXTENDED)