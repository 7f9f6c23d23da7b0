"""Claw Contraption: button presses that reach a claw machine's prize."""

from __future__ import annotations

from dataclasses import dataclass
from math import lcm


def _strip(text: str, prefix: str) -> str:
    if not text.startswith(prefix):
        raise ValueError(f"expected {prefix!r} at the start of {text!r}")
    return text[len(prefix) :]


def _pair(text: str, prefix: str, x_mark: str, y_mark: str) -> tuple[int, int]:
    x_part, sep, y_part = _strip(text, prefix).partition(", ")
    if not sep:
        raise ValueError(f"malformed coordinates: {text!r}")
    return int(_strip(x_part, x_mark)), int(_strip(y_part, y_mark))


@dataclass(frozen=True)
class Machine:
    """Button offsets and prize position of one claw machine."""

    ax: int
    ay: int
    bx: int
    by: int
    px: int
    py: int

    @classmethod
    def parse(cls, text: str) -> Machine:
        lines = text.strip().split("\n")
        if len(lines) != 3:
            raise ValueError(f"a machine needs three lines, got {len(lines)}")
        ax, ay = _pair(lines[0], "Button A: ", "X+", "Y+")
        bx, by = _pair(lines[1], "Button B: ", "X+", "Y+")
        px, py = _pair(lines[2], "Prize: ", "X=", "Y=")
        return cls(ax, ay, bx, by, px, py)

    def presses(self) -> tuple[int, int] | None:
        """Presses of A and B that land exactly on the prize, if any."""
        common = lcm(self.ax, self.ay)
        mulx = common // self.ax
        muly = common // self.ay

        # Scale both equations so the A coefficient is the same, then eliminate it.
        bx, px = self.bx * mulx, self.px * mulx
        by, py = self.by * muly, self.py * muly

        if py < px and by < bx:
            px, py = py, px
            bx, by = by, bx

        lhs = py - px
        rhs = by - bx
        if lhs < 0 or rhs < 0:
            return None
        if lhs % rhs != 0:
            return None
        nb = lhs // rhs

        rest = px - nb * bx
        if rest < 0 or rest % common != 0:
            return None
        return rest // common, nb

    def price(self) -> int | None:
        """Tokens needed to win: three per A press, one per B press."""
        moves = self.presses()
        if moves is None:
            return None
        na, nb = moves
        return na * 3 + nb


def part1(text: str) -> int:
    """Fewest tokens to win every winnable prize."""
    machines = [Machine.parse(chunk) for chunk in text.strip().split("\n\n")]
    return sum(
        price for price in (machine.price() for machine in machines) if price is not None
    )