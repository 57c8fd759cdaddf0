"""Garden plots: find the regions of equal plants and price their fences."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

Position = tuple[int, int]


class Direction(IntEnum):
    """Which side of a region a fence lies on."""

    NONE = 0
    LEFT = 1
    RIGHT = 2
    UP = 3
    DOWN = 4


_OUTSIDE_OFFSETS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}

# For a fence cell outside the region, the region cells whose presence lets the
# fence continue, paired with the fence cell it continues to.
_CONTINUATIONS = {
    Direction.RIGHT: (((-1, 1), (0, 1)), ((-1, -1), (0, -1))),
    Direction.LEFT: (((1, 1), (0, 1)), ((1, -1), (0, -1))),
    Direction.UP: (((1, 1), (1, 0)), ((-1, 1), (-1, 0))),
    Direction.DOWN: (((1, -1), (1, 0)), ((-1, -1), (-1, 0))),
}


@dataclass
class Side:
    """One straight fence: the outside cells along it, all facing ``direction``."""

    direction: Direction
    neighbors: list[Position] = field(default_factory=list)

    def is_neighbor(self, position: Position) -> bool:
        """True if ``position`` lies on this side's line right next to one of its cells."""
        if not self.neighbors:
            return False
        x, y = position
        if self.direction in (Direction.LEFT, Direction.RIGHT):
            if x != self.neighbors[0][0]:
                return False
            return any(y + 1 == ny or y - 1 == ny for _, ny in self.neighbors)
        if self.direction in (Direction.UP, Direction.DOWN):
            if y != self.neighbors[0][1]:
                return False
            return any(x + 1 == nx or x - 1 == nx for nx, _ in self.neighbors)
        return False

    def add(self, position: Position) -> None:
        self.neighbors.append(position)


def _claim(sides: Iterable[Side], direction: Direction, position: Position) -> bool:
    for side in sides:
        if side.direction == direction and side.is_neighbor(position):
            side.add(position)
            return True
    return False


@dataclass
class SideSet:
    """The distinct straight sides of a region."""

    sides: list[Side] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.sides)

    def claim(self, direction: Direction, position: Position) -> bool:
        """Add ``position`` to a side it extends; return False if none does."""
        return _claim(self.sides, direction, position)

    def add(self, side: Side) -> None:
        self.sides.append(side)

    def correct(self) -> bool:
        """Rebuild the sides by merging cells that touch; return True if anything changed."""
        corrected: list[Side] = []
        for side in self.sides:
            for position in side.neighbors:
                if not _claim(corrected, side.direction, position):
                    corrected.append(Side(side.direction, [position]))
        if corrected == self.sides:
            return False
        self.sides = corrected
        return True


@dataclass
class Region:
    """Connected cells holding the same plant."""

    value: str
    cells: set[Position] = field(default_factory=set)

    @property
    def area(self) -> int:
        return len(self.cells)

    def perimeter(self) -> int:
        """Count the fence segments around the region."""
        return sum(
            1
            for x, y in self.cells
            for dx, dy in _OUTSIDE_OFFSETS.values()
            if (x + dx, y + dy) not in self.cells
        )

    def count_sides(self) -> int:
        """Count the straight sides of the region's fence."""
        sides = SideSet()
        checked: set[tuple[Position, Direction]] = set()

        def walk(start: Position, direction: Direction) -> None:
            stack = [start]
            while stack:
                position = stack.pop()
                if position in self.cells or (position, direction) in checked:
                    continue
                checked.add((position, direction))
                if not sides.claim(direction, position):
                    sides.add(Side(direction, [position]))
                x, y = position
                for (rx, ry), (nx, ny) in reversed(_CONTINUATIONS[direction]):
                    if (x + rx, y + ry) in self.cells:
                        stack.append((x + nx, y + ny))

        for x, y in self.cells:
            for direction, (dx, dy) in _OUTSIDE_OFFSETS.items():
                outside = (x + dx, y + dy)
                if outside not in self.cells:
                    walk(outside, direction)

        return len(sides)

    def cost(self) -> int:
        """Area times perimeter."""
        return self.area * self.perimeter()

    def discounted_cost(self) -> int:
        """Area times number of sides."""
        return self.area * self.count_sides()


def parse_garden(text: str) -> list[str]:
    """Split a garden map into rows of equal length."""
    lines = text.replace("\r", "").split("\n")
    while lines and not lines[-1]:
        lines.pop()
    for number, line in enumerate(lines):
        if not line:
            raise ValueError(f"row {number} is empty")
        if len(line) != len(lines[0]):
            raise ValueError(f"row {number} has {len(line)} plots, expected {len(lines[0])}")
    return lines


def load_garden(path: str | Path) -> list[str]:
    """Read a garden map from a file."""
    return parse_garden(Path(path).read_text())


def find_regions(garden: list[str]) -> list[Region]:
    """Group the plots into regions, in the order their first plot is met row by row."""
    height = len(garden)
    width = len(garden[0]) if garden else 0
    visited: set[Position] = set()
    regions: list[Region] = []
    for y, row in enumerate(garden):
        for x, plant in enumerate(row):
            if (x, y) in visited:
                continue
            region = Region(plant)
            visited.add((x, y))
            stack = [(x, y)]
            while stack:
                cx, cy = stack.pop()
                region.cells.add((cx, cy))
                for dx, dy in _OUTSIDE_OFFSETS.values():
                    nx, ny = cx + dx, cy + dy
                    if (
                        0 <= nx < width
                        and 0 <= ny < height
                        and (nx, ny) not in visited
                        and garden[ny][nx] == plant
                    ):
                        visited.add((nx, ny))
                        stack.append((nx, ny))
            regions.append(region)
    return regions


def total_cost(regions: Iterable[Region]) -> int:
    return sum(region.cost() for region in regions)


def total_discounted_cost(regions: Iterable[Region]) -> int:
    return sum(region.discounted_cost() for region in regions)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day12", description="Price garden fences.")
    parser.add_argument("--file", default="file.txt", help="input file")
    parser.add_argument("--input", default="", help="input")
    args = parser.parse_args(argv)

    try:
        garden = parse_garden(args.input) if args.input else load_garden(args.file)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    regions = find_regions(garden)
    print(f"Total cost: {total_cost(regions)}")
    print(f"Total discounted cost: {total_discounted_cost(regions)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())