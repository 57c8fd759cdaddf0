"""Warehouse robot pushing boxes around walls following a list of moves."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

Position = tuple[int, int]


class Direction(Enum):
    """A move of the robot, written as its arrow character."""

    UP = "^"
    RIGHT = ">"
    DOWN = "v"
    LEFT = "<"

    def __str__(self) -> str:
        return self.value

    @property
    def offset(self) -> Position:
        return _OFFSETS[self]


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


class Kind(Enum):
    """What occupies a cell, written as its map character."""

    WALL = "#"
    FOOD = "O"
    GUARD = "@"

    @property
    def symbol(self) -> str:
        return self.value


@dataclass(eq=False)
class Entity:
    """A wall, box or robot at a position in the warehouse."""

    x: int
    y: int
    kind: Kind

    @property
    def position(self) -> Position:
        return (self.x, self.y)

    @position.setter
    def position(self, position: Position) -> None:
        self.x, self.y = position

    @property
    def symbol(self) -> str:
        return self.kind.symbol

    @property
    def is_wall(self) -> bool:
        return self.kind is Kind.WALL

    @property
    def is_food(self) -> bool:
        return self.kind is Kind.FOOD


def next_position(position: Position, direction: Direction) -> Position:
    """Return the cell one step from ``position`` in ``direction``."""
    dx, dy = direction.offset
    return (position[0] + dx, position[1] + dy)


class Warehouse:
    """The map, the robot and the moves it still has to make."""

    def __init__(
        self,
        entities: list[Entity],
        directions: list[Direction],
        width: int,
        height: int,
    ) -> None:
        self.entities = entities
        self.directions = directions
        self.width = width
        self.height = height
        self.current_direction = 0
        guards = [entity for entity in entities if entity.kind is Kind.GUARD]
        self.guard: Entity | None = guards[-1] if guards else None

    @property
    def step_count(self) -> int:
        return len(self.directions)

    def update(self) -> None:
        """Make the next move, wrapping back to the first move after the last."""
        if self.guard is None:
            raise ValueError("the warehouse has no robot")
        if not self.directions:
            raise ValueError("the warehouse has no moves")
        direction = self.directions[self.current_direction]
        target = next_position(self.guard.position, direction)
        if self.attempt_move(self.guard.position, direction):
            self.guard.position = target
        self.current_direction = (self.current_direction + 1) % len(self.directions)

    def attempt_move(self, position: Position, direction: Direction) -> bool:
        """Push whatever lies ahead of ``position``; return True if the way is clear."""
        ahead = next_position(position, direction)
        entity = self.entity_at(*ahead)
        if entity is None:
            return True
        if entity.is_wall:
            return False
        if self.attempt_move(ahead, direction):
            entity.position = next_position(ahead, direction)
            return True
        return False

    def entity_at(self, x: int, y: int) -> Entity | None:
        return next((e for e in self.entities if e.x == x and e.y == y), None)

    def _is_guard_at(self, x: int, y: int) -> bool:
        return self.guard is not None and self.guard.position == (x, y)

    def render(self) -> str:
        """Draw the map as rows of text."""
        rows = []
        for y in range(self.height):
            cells = []
            for x in range(self.width):
                if self._is_guard_at(x, y):
                    cells.append(Kind.GUARD.symbol)
                else:
                    entity = self.entity_at(x, y)
                    cells.append(entity.symbol if entity is not None else ".")
            rows.append("".join(cells))
        return "\n".join(rows)

    def gps_sum(self) -> int:
        """Sum ``100 * y + x`` over every box."""
        return sum(100 * e.y + e.x for e in self.entities if e.is_food)


_MAP_KINDS = {kind.symbol: kind for kind in Kind}
_MOVES = {direction.value: direction for direction in Direction}


def parse_warehouse(text: str) -> Warehouse:
    """Parse a map, a blank line, then the moves."""
    entities: list[Entity] = []
    directions: list[Direction] = []
    width = height = 0
    loading_map = True
    x = y = 0
    last = ""
    for char in text:
        if loading_map:
            width = max(width, x)
            height = max(height, y)
        if char == "\n":
            if last == "\n":
                loading_map = False
            else:
                x = 0
                y += 1
                last = char
            continue
        if char == "\r":
            continue
        last = char
        if loading_map:
            kind = _MAP_KINDS.get(char)
            if kind is not None:
                entities.append(Entity(x, y, kind))
            x += 1
        else:
            direction = _MOVES.get(char)
            if direction is not None:
                directions.append(direction)
    return Warehouse(entities, directions, width, height)


def load_warehouse(path: str | Path) -> Warehouse:
    """Read a warehouse from a file."""
    return parse_warehouse(Path(path).read_text())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day15", description="Move the warehouse robot.")
    parser.add_argument("--file", default="test.txt", help="input file")
    parser.add_argument("--input", default="", help="input")
    parser.add_argument("--steps", type=int, default=15, help="number of steps")
    args = parser.parse_args(argv)

    try:
        warehouse = parse_warehouse(args.input) if args.input else load_warehouse(args.file)
        steps = args.steps if args.steps > 0 else warehouse.step_count
        for _ in range(steps):
            warehouse.update()
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    print(warehouse.gps_sum())
    return 0


if __name__ == "__main__":
    sys.exit(main())