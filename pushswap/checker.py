"""Command that checks whether a list of instructions sorts its arguments."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from .parsing import INT_MAX, INT_MIN, parse_long
from .stack import Board, Operation, Stack

_INSTRUCTIONS = {str(op): op for op in Operation if op is not Operation.INIT}


def is_valid_number(text: str) -> bool:
    """True for an optional sign followed by at least one digit and nothing else."""
    body = text[1:] if text[:1] in ("-", "+") else text
    return bool(body) and all("0" <= char <= "9" for char in body)


def parse_stack(args: Iterable[str]) -> list[int]:
    """Read the arguments as distinct int values; raise ValueError otherwise."""
    values = []
    for arg in args:
        if not is_valid_number(arg):
            raise ValueError(f"not a number: {arg!r}")
        number = parse_long(arg)
        if not INT_MIN <= number <= INT_MAX:
            raise ValueError(f"out of range: {arg!r}")
        values.append(number)
    if len(set(values)) != len(values):
        raise ValueError("repeated values")
    return values


class Checker:
    """Two stacks on which instructions are carried out by name."""

    def __init__(self, values: Iterable[int]) -> None:
        self.board = Board(Stack(values))

    def execute(self, instruction: str) -> None:
        """Carry out one named instruction; raise ValueError for an unknown name."""
        try:
            op = _INSTRUCTIONS[instruction]
        except KeyError:
            raise ValueError(f"unknown instruction {instruction!r}") from None
        self.board.apply(op)

    def run(self, stream: Iterable[str]) -> None:
        """Execute newline-terminated instructions until the end or an unknown one.

        Empty lines are skipped and a final line without a newline is ignored.
        """
        for line in stream:
            if not line.endswith("\n"):
                break
            instruction = line[:-1]
            if not instruction:
                continue
            try:
                self.execute(instruction)
            except ValueError:
                break

    def is_ok(self) -> bool:
        """True if stack A is in ascending order and stack B is empty."""
        values = self.board.a.values()
        ordered = all(upper <= lower for upper, lower in zip(values, values[1:]))
        return ordered and len(self.board.b) == 0


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_stack(args)
    except ValueError:
        sys.stderr.write("Error\n")
        return 1
    checker = Checker(values)
    checker.run(sys.stdin)
    sys.stdout.write("OK\n" if checker.is_ok() else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())