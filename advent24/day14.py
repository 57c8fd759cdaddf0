"""Bathroom guards moving on a wrapping floor, with quadrant counts and PNG renders."""

from __future__ import annotations

import argparse
import re
import shutil
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageDraw

_GUARD_LINE = re.compile(r"p=(-?\d+),(-?\d+) v=(-?\d+),(-?\d+)")
_CELL_SIZE = 10
_WHITE = (255, 255, 255, 255)
_BLACK = (0, 0, 0, 255)


def _trunc_mod(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


@dataclass
class Guard:
    """A guard with its position and the velocity it moves by on each update."""

    x: int
    y: int
    vx: int
    vy: int

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


class Floor:
    """A ``width`` by ``height`` floor whose edges wrap around."""

    def __init__(self, width: int, height: int, guards: Iterable[Guard] = ()) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("floor width and height must be positive")
        self.width = width
        self.height = height
        self.guards = list(guards)
        self.updates = 0

    def update(self) -> None:
        """Move every guard once, wrapping at the edges."""
        self.updates += 1
        for guard in self.guards:
            guard.x = _trunc_mod(guard.x + guard.vx + self.width, self.width)
            guard.y = _trunc_mod(guard.y + guard.vy + self.height, self.height)

    def guards_at(self, x: int, y: int) -> list[Guard]:
        return [guard for guard in self.guards if guard.x == x and guard.y == y]

    def guards_in_quadrant(self, from_x: int, from_y: int, to_x: int, to_y: int) -> int:
        """Count the guards inside the inclusive rectangle."""
        return sum(
            1
            for guard in self.guards
            if from_x <= guard.x <= to_x and from_y <= guard.y <= to_y
        )

    def _quadrants(self) -> list[tuple[int, int, int, int]]:
        mid_x = self.width // 2
        mid_y = self.height // 2
        left = (0, mid_x - 1)
        right = (mid_x + 1, self.width - 1)
        top = (0, mid_y - 1)
        bottom = (mid_y + 1, self.height - 1)
        return [
            (xs[0], ys[0], xs[1], ys[1])
            for ys, xs in ((top, left), (top, right), (bottom, left), (bottom, right))
        ]

    def safety_factor(self) -> int:
        """Multiply the guard counts of the four quadrants, leaving out the middle lines."""
        product = 1
        for quadrant in self._quadrants():
            product *= self.guards_in_quadrant(*quadrant)
        return product

    def render(self, folder: str | Path) -> Path:
        """Draw occupied cells black on white into ``render-<updates>.png`` in ``folder``."""
        image = Image.new(
            "RGBA", (self.width * _CELL_SIZE, self.height * _CELL_SIZE), _WHITE
        )
        draw = ImageDraw.Draw(image)
        occupied = {
            guard.position
            for guard in self.guards
            if 0 <= guard.x < self.width and 0 <= guard.y < self.height
        }
        for x, y in occupied:
            draw.rectangle(
                (
                    x * _CELL_SIZE,
                    y * _CELL_SIZE,
                    (x + 1) * _CELL_SIZE - 1,
                    (y + 1) * _CELL_SIZE - 1,
                ),
                fill=_BLACK,
            )
        path = Path(folder) / f"render-{self.updates}.png"
        image.save(path)
        return path


def parse_guards(text: str) -> list[Guard]:
    """Parse lines of the form ``p=x,y v=dx,dy``."""
    guards = []
    for number, line in enumerate(text.splitlines(), start=1):
        match = _GUARD_LINE.search(line)
        if match is None:
            raise ValueError(f"line {number} is not a guard: {line!r}")
        guards.append(Guard(*(int(group) for group in match.groups())))
    return guards


def load_guards(path: str | Path) -> list[Guard]:
    """Read guards from a file."""
    return parse_guards(Path(path).read_text())


def clear_folder(folder: str | Path) -> None:
    """Remove ``folder`` and everything in it, then create it empty."""
    shutil.rmtree(folder, ignore_errors=True)
    Path(folder).mkdir(parents=True, exist_ok=True)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day14", description="Move guards around a floor.")
    parser.add_argument("--file", default="input.txt", help="input file")
    parser.add_argument("--max-width", type=int, default=11, help="max width")
    parser.add_argument("--max-height", type=int, default=7, help="max height")
    parser.add_argument("--input", default="", help="input")
    parser.add_argument("--save-folder", default="cmd/images", help="save folder")
    parser.add_argument("--loops", type=int, default=10, help="loops")
    args = parser.parse_args(argv)

    try:
        guards = parse_guards(args.input) if args.input else load_guards(args.file)
        floor = Floor(args.max_width, args.max_height, guards)
        clear_folder(args.save_folder)
        floor.render(args.save_folder)
        for _ in range(args.loops):
            floor.update()
            floor.render(args.save_folder)
        floor.render(args.save_folder)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    print(floor.safety_factor())
    return 0


if __name__ == "__main__":
    sys.exit(main())