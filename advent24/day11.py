"""Plutonian stones: every blink rewrites each stone according to three rules."""

from __future__ import annotations

import argparse
import re
import sys
import time
from collections import Counter
from collections.abc import Iterable, Mapping
from functools import lru_cache
from pathlib import Path

_INTEGER = re.compile(r"[+-]?\d+")


def blink_stone(value: int) -> list[int]:
    """Return the stones that a single stone turns into after one blink."""
    if value == 0:
        return [1]
    digits = str(value)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return [int(digits[:half]), int(digits[half:])]
    return [value * 2024]


def blink(values: Iterable[int]) -> list[int]:
    """Blink once over a row of stones, keeping their order."""
    return [stone for value in values for stone in blink_stone(value)]


def blink_counts(counts: Mapping[int, int]) -> Counter[int]:
    """Blink once over stones grouped as value -> number of stones."""
    result: Counter[int] = Counter()
    for value, amount in counts.items():
        for stone in blink_stone(value):
            result[stone] += amount
    return result


def count_stones(values: Iterable[int], generations: int) -> int:
    """Count the stones after ``generations`` blinks, grouping equal stones."""
    if generations < 0:
        raise ValueError("generations must not be negative")
    counts: Counter[int] = Counter(values)
    for _ in range(generations):
        counts = blink_counts(counts)
    return sum(counts.values())


def count_stones_recursive(values: Iterable[int], generations: int) -> int:
    """Count the stones after ``generations`` blinks by following each stone."""
    if generations < 1:
        raise ValueError("generations must be at least 1")

    @lru_cache(maxsize=None)
    def descendants(value: int, blinks_left: int) -> int:
        stones = blink_stone(value)
        if blinks_left == 1:
            return len(stones)
        return sum(descendants(stone, blinks_left - 1) for stone in stones)

    return sum(descendants(value, generations) for value in values)


def parse_stones(text: str) -> list[int]:
    """Parse space separated stone values, one or more lines of them."""
    stones = []
    for line in text.splitlines():
        for token in line.split(" "):
            if not _INTEGER.fullmatch(token):
                raise ValueError(f"invalid stone value: {token!r}")
            stones.append(int(token))
    return stones


def load_stones(path: str | Path) -> list[int]:
    """Read stone values from a file."""
    return parse_stones(Path(path).read_text())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day11", description="Count stones after blinking.")
    parser.add_argument("--file", default="input.txt", help="input file")
    parser.add_argument("--input", default="", help="input")
    parser.add_argument(
        "--generations", type=int, default=75, help="number of generations to blink"
    )
    args = parser.parse_args(argv)

    try:
        stones = parse_stones(args.input) if args.input else load_stones(args.file)
        started = time.perf_counter()
        total = count_stones(stones, args.generations)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - started

    print(total)
    print(f"Blinking generation {args.generations} took {elapsed:.6f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())