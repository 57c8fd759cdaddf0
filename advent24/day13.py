"""Claw machines: find the cheapest button presses that land the claw on the prize."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from fractions import Fraction
from pathlib import Path

Position = tuple[int, int]

PRIZE_OFFSET = 10_000_000_000_000
PRICE_A = 3
PRICE_B = 1

_MACHINE = re.compile(
    r"Button A: X\+(\d+), Y\+(\d+)\r?\n"
    r"Button B: X\+(\d+), Y\+(\d+)\r?\n"
    r"Prize: X=(\d+), Y=(\d+)"
)


@dataclass(frozen=True)
class Button:
    """A button that moves the claw by ``(dx, dy)`` and costs ``price`` tokens."""

    dx: int
    dy: int
    price: int

    @property
    def is_still(self) -> bool:
        return self.dx == 0 and self.dy == 0


@dataclass
class Claw:
    """One machine: its two buttons, the prize and where the claw is now."""

    button_a: Button
    button_b: Button
    prize: Position
    x: int = 0
    y: int = 0
    cost: int = 0
    a_presses: int = 0
    b_presses: int = 0

    @property
    def position(self) -> Position:
        return (self.x, self.y)

    def press(self, button: Button, steps: int = 1) -> None:
        """Press ``button`` ``steps`` times; a negative count takes presses back."""
        self.x += button.dx * steps
        self.y += button.dy * steps
        self.cost += button.price * steps

    def press_a(self, steps: int = 1) -> None:
        self.press(self.button_a, steps)
        self.a_presses += steps

    def press_b(self, steps: int = 1) -> None:
        self.press(self.button_b, steps)
        self.b_presses += steps

    def prize_reached(self) -> bool:
        return self.position == self.prize

    def past_prize(self) -> bool:
        """True once the claw is level with or beyond the prize on either axis."""
        return self.x >= self.prize[0] or self.y >= self.prize[1]

    def before_prize(self) -> bool:
        """True while the claw is level with or short of the prize on both axes."""
        return self.x <= self.prize[0] and self.y <= self.prize[1]


def parse_machines(text: str, offset: int = 0) -> list[Claw]:
    """Parse every machine description; ``offset`` is added to both prize coordinates."""
    claws = []
    for match in _MACHINE.finditer(text):
        ax, ay, bx, by, px, py = (int(group) for group in match.groups())
        claws.append(
            Claw(
                Button(ax, ay, PRICE_A),
                Button(bx, by, PRICE_B),
                (px + offset, py + offset),
            )
        )
    return claws


def load_machines(path: str | Path, offset: int = 0) -> list[Claw]:
    """Read machine descriptions from a file."""
    return parse_machines(Path(path).read_text(), offset)


def _total(claws: Iterable[Claw]) -> int:
    return sum(claw.cost for claw in claws if claw.prize_reached())


def _search(claw: Claw) -> None:
    while True:
        claw.press_b()
        if claw.past_prize():
            break
    if claw.prize_reached():
        return
    while True:
        while True:
            claw.press_b(-1)
            if claw.before_prize():
                break
        if claw.prize_reached():
            return
        while True:
            claw.press_a()
            if claw.past_prize():
                break
        if claw.prize_reached():
            return
        if claw.b_presses < 0:
            return


def solve_by_search(claws: Iterable[Claw]) -> int:
    """Walk each claw towards its prize press by press; return the tokens spent on wins."""
    claws = list(claws)
    for claw in claws:
        if claw.button_a.is_still or claw.button_b.is_still:
            raise ValueError("a button that does not move the claw cannot be searched")
        _search(claw)
    return _total(claws)


def solve_by_cramer(claws: Iterable[Claw]) -> int:
    """Solve each claw's two equations exactly; return the tokens spent on wins."""
    claws = list(claws)
    for claw in claws:
        a, b = claw.button_a, claw.button_b
        px, py = claw.prize
        determinant = a.dx * b.dy - a.dy * b.dx
        if determinant == 0:
            continue
        a_count = Fraction(b.dy * px - b.dx * py, determinant)
        b_count = Fraction(a.dx * py - a.dy * px, determinant)
        if a_count < 0 or b_count < 0:
            continue
        if a_count.denominator != 1 or b_count.denominator != 1:
            continue
        claw.press_a(int(a_count))
        claw.press_b(int(b_count))
    return _total(claws)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day13", description="Win prizes from claw machines.")
    parser.add_argument("--file", default="test.txt", help="input file")
    parser.add_argument("--input", default="", help="input")
    parser.add_argument(
        "--offset", type=int, default=PRIZE_OFFSET, help="added to every prize coordinate"
    )
    parser.add_argument(
        "--method", choices=("cramer", "search"), default="cramer", help="how to solve"
    )
    args = parser.parse_args(argv)

    try:
        claws = (
            parse_machines(args.input, args.offset)
            if args.input
            else load_machines(args.file, args.offset)
        )
        solve = solve_by_cramer if args.method == "cramer" else solve_by_search
        total = solve(claws)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    for claw in claws:
        if claw.prize_reached():
            print(
                f"Button A: {claw.a_presses}, Button B: {claw.b_presses}, "
                f"Prize Position: ({claw.prize[0]}, {claw.prize[1]})"
            )
    print(f"Total: {total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())