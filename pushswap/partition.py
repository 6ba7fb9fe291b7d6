"""Sorting large stacks by repeated halving between the two stacks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .stack import Board, Operation, Stack

SORT_START_THRESHOLD = 16
"""Stack B is sorted directly once it holds fewer elements than this."""


class State(Enum):
    """Phases of the large-stack sort."""

    PARTITION_INITIAL_HALF_A = 0
    PARTITION_HALF_B = 1
    SORT_B = 2
    BACK_TO_B = 3
    PARTITION_HALF_A = 4
    WRAP_SORT_UNDER_SIX_ELEMENTS = 5
    END = 6


@dataclass
class Progress:
    """Current phase and the sizes of the chunks sent from B to A, newest last."""

    state: State = State.PARTITION_INITIAL_HALF_A
    sent_counts: list[int] = field(default_factory=list)


def next_state_for_b(b: Stack, progress: Progress, border: int) -> None:
    """Choose between halving B again and sorting it; an ended run stays ended."""
    if progress.state is State.END:
        return
    if len(b) >= border:
        progress.state = State.PARTITION_HALF_B
    else:
        progress.state = State.SORT_B


def after_sort_b(a: Stack, progress: Progress) -> None:
    """Choose the phase that follows emptying B."""
    if a.is_sorted():
        progress.state = State.END
    elif progress.sent_counts:
        progress.state = State.BACK_TO_B
    else:
        progress.state = State.PARTITION_HALF_A


def partition_initial_half_a(board: Board, progress: Progress) -> None:
    """Push the smaller half of A onto B."""
    a, b = board.a, board.b
    length = len(a)
    pivot_a = length // 2 + length % 2
    pivot_b = length // 4
    remaining = pivot_a
    a.assign_ranks()
    while remaining > 0:
        if a.index_at(0) < pivot_a:
            remaining -= board.perform(Operation.PB)
        elif b.index_at(0) < pivot_b:
            board.perform(Operation.RR)
        else:
            board.perform(Operation.RA)
    next_state_for_b(b, progress, SORT_START_THRESHOLD)


def partition_half_b(board: Board, progress: Progress) -> None:
    """Send the larger half of B to A and remember how many went."""
    b = board.b
    b.assign_ranks()
    remaining = len(b) // 2
    pivot = remaining - (1 if len(b) % 2 == 0 else 0)
    sent = 0
    while remaining > 0:
        if b.index_at(0) > pivot:
            sent += board.perform(Operation.PA)
            remaining -= 1
        else:
            board.perform(Operation.RB)
    progress.sent_counts.append(sent)
    next_state_for_b(b, progress, SORT_START_THRESHOLD)


def _push_continuously(board: Board, target: int, above: int) -> int:
    a_pushed = 0
    b = board.b
    while True:
        if b.index_at(0) == target + above:
            a_pushed += board.perform(Operation.PA)
            if above == 0:
                return a_pushed
            above -= 1
        elif not above and b.position_of(target) > len(b) // 2 + 1:
            board.perform(Operation.RRB)
        else:
            board.perform(Operation.RB)


def _transfer_sorted_to_bottom(board: Board, next_target: int, above: int) -> int:
    b = board.b
    for _ in range(above + 1):
        needed = b.consecutive_above(next_target)
        if b.index_at(0) == next_target + needed:
            board.perform(Operation.RR)
        else:
            board.perform(Operation.RA)
    return above + 1


def sort_b(board: Board, progress: Progress) -> None:
    """Move all of B onto the bottom of A in ascending order."""
    b = board.b
    b.assign_ranks()
    target = 0
    next_target = 0
    while len(b):
        above = b.consecutive_above(target)
        next_target += _push_continuously(board, target, above)
        target += _transfer_sorted_to_bottom(board, next_target, above)
    after_sort_b(board.a, progress)


def _settle_top_of_a(board: Board, sorted_len: int, count: int) -> None:
    a, b = board.a, board.b
    for _ in range(count):
        if a.index_at(0) == sorted_len:
            above = b.consecutive_above(sorted_len)
            if b.index_at(0) != sorted_len + above:
                board.perform(Operation.RR)
            else:
                board.perform(Operation.RA)
            sorted_len += 1
        else:
            board.perform(Operation.PB)


def back_to_b(board: Board, progress: Progress) -> None:
    """Return the most recent chunk sent to A, keeping elements that extend the sorted run."""
    a = board.a
    a.assign_ranks()
    count = progress.sent_counts.pop()
    _settle_top_of_a(board, a.longest_sorted_run(), count)
    next_state_for_b(board.b, progress, SORT_START_THRESHOLD)


def _push_b_and_rotate(board: Board, unsorted_len: int, sorted_len: int) -> int:
    a, b = board.a, board.b
    pivot = (len(a) + sorted_len) // 2
    remaining = unsorted_len
    while len(b) != unsorted_len // 2:
        if a.index_at(0) < pivot:
            board.perform(Operation.PB)
        else:
            above = b.consecutive_above(sorted_len)
            if above and b.index_at(0) != sorted_len + above:
                board.perform(Operation.RR)
            else:
                board.perform(Operation.RA)
        remaining -= 1
    return remaining


def partition_half_a(board: Board, progress: Progress) -> None:
    """Split the unsorted part of A, sending its smaller half to B."""
    a, b = board.a, board.b
    a.assign_ranks()
    sorted_len = a.longest_sorted_run()
    unsorted_len = len(a) - sorted_len
    if unsorted_len < SORT_START_THRESHOLD:
        _settle_top_of_a(board, a.longest_sorted_run(), unsorted_len)
        progress.state = State.SORT_B
        return
    pushed = _push_b_and_rotate(board, unsorted_len, sorted_len)
    while pushed < unsorted_len // 2 + unsorted_len % 2:
        pushed += 1
        following = b.consecutive_above(sorted_len)
        if not following and b.position_of(sorted_len) > len(b) // 2:
            board.perform(Operation.RRR)
        else:
            board.perform(Operation.RRA)
    next_state_for_b(b, progress, SORT_START_THRESHOLD)


_HANDLERS = {
    State.PARTITION_INITIAL_HALF_A: partition_initial_half_a,
    State.PARTITION_HALF_B: partition_half_b,
    State.SORT_B: sort_b,
    State.BACK_TO_B: back_to_b,
    State.PARTITION_HALF_A: partition_half_a,
}


def run(board: Board) -> list[Operation]:
    """Sort stack A of the board and return the moves recorded on it."""
    board.a.assign_ranks()
    progress = Progress()
    while progress.state is not State.END:
        handler = _HANDLERS.get(progress.state)
        if handler is None:
            raise ValueError(f"no handler for state {progress.state.name}")
        handler(board, progress)
    return board.moves