"""Historian location lists: pairwise distance and similarity score."""

from __future__ import annotations

import argparse
import re
import sys
from collections import Counter
from collections.abc import Sequence
from pathlib import Path

_INTEGER = re.compile(r"[+-]?\d+")
_SEPARATOR = "   "


def _parse_int(token: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"invalid number: {token!r}")
    return int(token)


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Parse lines of two numbers separated by three spaces into two lists."""
    left: list[int] = []
    right: list[int] = []
    for number, line in enumerate(text.splitlines(), start=1):
        parts = line.split(_SEPARATOR)
        if len(parts) < 2:
            raise ValueError(f"line {number} does not hold two numbers: {line!r}")
        left.append(_parse_int(parts[0]))
        right.append(_parse_int(parts[1]))
    return left, right


def load_lists(path: str | Path) -> tuple[list[int], list[int]]:
    """Read both location lists from a file."""
    return parse_lists(Path(path).read_text())


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum the distances between the two lists once both are sorted."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right), strict=True))


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum each left value times how often it appears in the right list."""
    occurrences = Counter(right)
    return sum(value * occurrences[value] for value in left)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="day01", description="Compare two lists of location ids."
    )
    parser.add_argument("--file", default="file.txt", help="input file")
    args = parser.parse_args(argv)

    try:
        left, right = load_lists(args.file)
        distance = total_distance(left, right)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    print(distance)
    print(similarity_score(left, right))
    return 0


if __name__ == "__main__":
    sys.exit(main())