"""Blinking stones generation by generation through an SQLite table."""

from __future__ import annotations

import argparse
import sqlite3
import sys
import time
from dataclasses import dataclass
from pathlib import Path

from advent24.day11 import blink_stone, parse_stones

_CREATE_TABLE = """CREATE TABLE IF NOT EXISTS day_11 (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    value INTEGER,
    generation INTEGER
)"""


@dataclass(frozen=True)
class GenerationValue:
    """One stored stone."""

    id: int
    generation: int
    value: int


class GenerationStore:
    """Stones of every generation kept in the ``day_11`` table."""

    def __init__(self, database: str | Path = ":memory:") -> None:
        self._connection = sqlite3.connect(str(database))

    def __enter__(self) -> GenerationStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def create_table(self) -> None:
        with self._connection:
            self._connection.execute(_CREATE_TABLE)

    def insert(self, generation: int, value: int) -> None:
        with self._connection:
            self._connection.execute(
                "INSERT INTO day_11 (value, generation) VALUES (?, ?)", (value, generation)
            )

    def clear(self) -> None:
        with self._connection:
            self._connection.execute("DELETE FROM day_11")

    def ids(self, generation: int) -> list[int]:
        rows = self._connection.execute(
            "SELECT id FROM day_11 WHERE generation = ? ORDER BY id", (generation,)
        )
        return [row[0] for row in rows]

    def value(self, generation: int, id: int) -> GenerationValue:
        row = self._connection.execute(
            "SELECT id, generation, value FROM day_11 WHERE generation = ? AND id = ?",
            (generation, id),
        ).fetchone()
        if row is None:
            raise LookupError(f"no stone {id} in generation {generation}")
        return GenerationValue(*row)

    def count(self, generation: int) -> int:
        (count,) = self._connection.execute(
            "SELECT COUNT(*) FROM day_11 WHERE generation = ?", (generation,)
        ).fetchone()
        return count

    def close(self) -> None:
        self._connection.close()


class StoredBlinker:
    """Blinks stones whose generations live in a :class:`GenerationStore`."""

    def __init__(self, store: GenerationStore) -> None:
        self.store = store
        self.values: list[int] = []

    def load(self, text: str) -> list[int]:
        """Replace the stored stones with generation 0 parsed from ``text``."""
        values = parse_stones(text)
        self.store.clear()
        for value in values:
            self.store.insert(0, value)
        self.values = values
        return values

    def blink(self, generation: int) -> None:
        """Write generation ``generation + 1`` from the stones of ``generation``."""
        for stone_id in self.store.ids(generation):
            stored = self.store.value(generation, stone_id)
            for stone in blink_stone(stored.value):
                self.store.insert(generation + 1, stone)

    def count(self, generation: int) -> int:
        return self.store.count(generation)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="day11-storage", description="Blink stones through an SQLite table."
    )
    parser.add_argument("--file", default="input.txt", help="input file")
    parser.add_argument("--input", default="", help="input")
    parser.add_argument(
        "--generations", type=int, default=5, help="number of generations to blink"
    )
    parser.add_argument("--database", default="example.db", help="SQLite database file")
    args = parser.parse_args(argv)

    with GenerationStore(args.database) as store:
        store.create_table()
        print("Table created successfully")

        blinker = StoredBlinker(store)
        try:
            text = args.input if args.input else Path(args.file).read_text()
            blinker.load(text)
        except (OSError, ValueError) as exc:
            print(exc, file=sys.stderr)
            return 1

        for generation in range(args.generations):
            started = time.perf_counter()
            print(f"Blinking generation {generation}")
            blinker.blink(generation)
            elapsed = time.perf_counter() - started
            print(f"Blinking generation {generation} took {elapsed:.6f}s")

        print(blinker.count(args.generations))
    return 0


if __name__ == "__main__":
    sys.exit(main())