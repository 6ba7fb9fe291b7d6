"""Command that prints a sequence of instructions sorting its arguments."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from .parsing import (
    ErrorCode,
    InputError,
    error_message,
    load_values,
    split_arguments,
    validate_tokens,
)
from .partition import run as run_partition
from .small_sort import sort_five_or_six, sort_up_to_four
from .stack import Board, Operation, OperationFailed, Stack

TOO_FEW_VALUES_STATUS = 8
"""Exit status when fewer than two numbers are given."""

FAILED_OPERATION_STATUS = 1
"""Exit status when an instruction could not be carried out."""


def _sort_board(board: Board) -> list[Operation]:
    """Sort stack A of the board, choosing the method by its size."""
    a = board.a
    a.assign_ranks()
    if a.is_sorted():
        return []
    size = len(a)
    if size <= 4:
        sort_up_to_four(board)
    elif size <= 6:
        sort_five_or_six(board)
    else:
        run_partition(board)
    return board.moves


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the instructions that sort the given values, top first.

    An already sorted list needs no instructions. Raises ValueError for
    repeated values or for a list too short to sort.
    """
    values = list(values)
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    return list(_sort_board(Board(Stack(values))))


def _write_moves(moves: Iterable[Operation]) -> None:
    sys.stdout.write("".join(f"{op}\n" for op in moves))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the instructions sorting the arguments; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write(error_message(ErrorCode.UNEXPECTED_ERROR))
        return int(ErrorCode.UNEXPECTED_ERROR)
    try:
        tokens = split_arguments(args)
    except InputError as exc:
        sys.stderr.write(exc.message)
        return exc.status
    if len(tokens) < 2:
        try:
            validate_tokens(tokens)
        except InputError:
            sys.stderr.write("Error\n")
        return TOO_FEW_VALUES_STATUS
    try:
        values = load_values(tokens)
    except InputError as exc:
        sys.stderr.write(exc.message)
        return exc.status
    board = Board(Stack(values))
    board.a.assign_ranks()
    if board.a.is_sorted():
        sys.stderr.write(error_message(ErrorCode.SORTED))
        return int(ErrorCode.SORTED)
    try:
        moves = _sort_board(board)
    except OperationFailed:
        _write_moves(board.moves)
        return FAILED_OPERATION_STATUS
    _write_moves(moves)
    return int(ErrorCode.SUCCESS)


if __name__ == "__main__":
    raise SystemExit(main())