"""Three-bit computer: registers A, B and C running a list of opcodes."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

_INTEGER = re.compile(r"[+-]?\d+")
_SEARCH_PROGRAM = "2,4,1,2,7,5,1,3,4,4,5,5,0,3,3,0"


class InvalidOperandError(ValueError):
    """Raised when a combo operand has no meaning."""


def _parse_int(token: str, what: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"failed to parse {what}: {token!r}")
    return int(token)


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _trunc_mod(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


@dataclass
class Computer:
    """Registers, program and output of the machine."""

    a: int = 0
    b: int = 0
    c: int = 0
    program: list[int] = field(default_factory=list)
    output: list[int] = field(default_factory=list)
    pointer: int = 0

    def _combo(self, operand: int) -> int:
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise InvalidOperandError(f"invalid combo operand: {operand}")

    def _divide(self, operand: int) -> int:
        combo = self._combo(operand)
        if combo < 0:
            raise ZeroDivisionError("division by a fractional power of two")
        return _trunc_div(self.a, 2**combo)

    def step(self) -> bool:
        """Execute one instruction; return False once the program has halted."""
        if self.pointer >= len(self.program) - 1:
            return False
        opcode = self.program[self.pointer]
        operand = self.program[self.pointer + 1]

        advance = True
        if opcode == 0:
            self.a = self._divide(operand)
        elif opcode == 1:
            self.b ^= operand
        elif opcode == 2:
            self.b = _trunc_mod(self._combo(operand), 8)
        elif opcode == 3:
            if self.a != 0:
                self.pointer = operand
                advance = False
        elif opcode == 4:
            self.b ^= self.c
        elif opcode == 5:
            self.output.append(_trunc_mod(self._combo(operand), 8))
        elif opcode == 6:
            self.b = self._divide(operand)
        elif opcode == 7:
            self.c = self._divide(operand)

        if advance:
            self.pointer += 2
        return True

    def run(self) -> list[int]:
        """Run until the program halts and return the output."""
        while self.step():
            pass
        return self.output

    def output_string(self) -> str:
        return ",".join(str(value) for value in self.output)


def parse_computer(text: str) -> Computer:
    """Build a computer from register lines and a ``Program:`` line."""
    computer = Computer()
    for line in text.splitlines():
        if line.startswith("Register A:"):
            computer.a = _parse_int(line.removeprefix("Register A:").strip(), "register A")
        elif line.startswith("Register B:"):
            computer.b = _parse_int(line.removeprefix("Register B:").strip(), "register B")
        elif line.startswith("Register C:"):
            computer.c = _parse_int(line.removeprefix("Register C:").strip(), "register C")
        elif line.startswith("Program:"):
            instructions = line.removeprefix("Program:").strip().split(",")
            computer.program.extend(
                _parse_int(token, "program instruction") for token in instructions
            )
    return computer


def load_computer(path: str | Path) -> Computer:
    """Read a computer description from a file."""
    return parse_computer(Path(path).read_text())


def search_candidates(
    program: Sequence[int], first_output: int, limit: int
) -> Iterator[tuple[int, str]]:
    """Yield values of register A below ``limit`` whose first output is ``first_output``."""
    for candidate in range(limit):
        computer = Computer(a=candidate, program=list(program))
        output = computer.run()
        if output and output[0] == first_output:
            yield candidate, computer.output_string()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day17", description="Run the three-bit computer.")
    parser.add_argument("--file", default="file.txt", help="input file")
    parser.add_argument("--input", default="", help="input")
    parser.add_argument(
        "--search", action="store_true", help="search register A values instead of running"
    )
    parser.add_argument("--program", default=_SEARCH_PROGRAM, help="program for --search")
    parser.add_argument("--first-output", type=int, default=7, help="wanted first output")
    parser.add_argument("--limit", type=int, default=1 << 10, help="values of A to try")
    args = parser.parse_args(argv)

    try:
        if args.search:
            program = [_parse_int(token, "program instruction") for token in args.program.split(",")]
            for candidate, result in search_candidates(program, args.first_output, args.limit):
                print(f"candidate: {candidate}, binary: {candidate:010b}, result: {result}")
            return 0

        computer = parse_computer(args.input) if args.input else load_computer(args.file)
        computer.run()
    except (OSError, ValueError, ZeroDivisionError) as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"A={computer.a} B={computer.b} C={computer.c} pointer={computer.pointer}")
    print(computer.output_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())