"""Sorting stacks of two to six elements: fixed moves and a bounded search."""

from __future__ import annotations

from .stack import Board, Operation, Stack

SEARCH_LIMIT = 15
"""Deepest level the shortest-sequence search explores, and its starting bound."""

_SEARCH_ORDER = [op for op in Operation if op is not Operation.INIT]

_SWAP_OR_ROTATE_A = frozenset(
    {Operation.SA, Operation.SS, Operation.RA, Operation.RRA}
)

_FORBIDDEN_AFTER = {
    Operation.SA: frozenset({Operation.SA, Operation.SS, Operation.RA, Operation.RR}),
    Operation.SB: frozenset({Operation.SB, Operation.SS, Operation.RB, Operation.RR}),
    Operation.SS: frozenset({Operation.SS, Operation.SA, Operation.SB}),
    Operation.PA: frozenset({Operation.PB}),
    Operation.PB: frozenset({Operation.PA}),
    Operation.RA: frozenset({Operation.RRA, Operation.RR}),
    Operation.RB: frozenset({Operation.RRB, Operation.RR}),
    Operation.RR: frozenset({Operation.RR, Operation.RA, Operation.RB}),
    Operation.RRA: frozenset({Operation.RA, Operation.RRR}),
    Operation.RRB: frozenset({Operation.RB, Operation.RRR}),
    Operation.RRR: frozenset({Operation.RRR, Operation.RRA, Operation.RRB}),
}


def _sort_three(board: Board) -> None:
    a = board.a
    if a.index_at(0) == 2:
        board.perform(Operation.RA)
    elif a.index_at(1) == 2:
        board.perform(Operation.RRA)
    if a.index_at(0) > a.index_at(1):
        board.perform(Operation.SA)


def _sort_four(board: Board) -> None:
    a = board.a
    step = Operation.RRA if a.position_of(0) > 2 else Operation.RA
    while a.index_at(0) != 0:
        board.perform(step)
    if a.is_sorted():
        return
    board.perform(Operation.PB)
    a.assign_ranks()
    _sort_three(board)
    board.perform(Operation.PA)


def sort_up_to_four(board: Board) -> list[Operation]:
    """Sort an unsorted stack A of two, three or four elements.

    Returns the moves recorded on the board. Raises ValueError for any
    other size, or for two elements already in order.
    """
    a = board.a
    a.assign_ranks()
    size = len(a)
    if size == 2 and a.index_at(0) == 1:
        board.perform(Operation.SA)
    elif size == 3:
        _sort_three(board)
    elif size == 4:
        _sort_four(board)
    else:
        raise ValueError(f"cannot sort a stack of {size} elements this way")
    return board.moves


def is_valid_move(a: Stack, previous: Operation, op: Operation) -> bool:
    """True if the search may try `op` after `previous` with stack A as it is."""
    if a.index_at(0) < a.index_at(1) and op in _SWAP_OR_ROTATE_A:
        return False
    return op not in _FORBIDDEN_AFTER.get(previous, frozenset())


def min_position(a: Stack) -> int:
    """One more than the number of leading elements of rank zero."""
    depth = 0
    while a.index_at(depth) == 0:
        depth += 1
    return depth + 1


class ShortestSearch:
    """Depth-first search for a short move sequence that sorts a small board.

    The board is returned to its starting arrangement when the search ends.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.limit = SEARCH_LIMIT
        self.best_length = SEARCH_LIMIT
        self.previous = Operation.INIT
        self.best: list[Operation] = []
        self._path: list[Operation] = []

    def run(self) -> list[Operation]:
        """Search and return the best sequence found (empty if none)."""
        self._search(0)
        return list(self.best)

    def _qualified(self, depth: int) -> bool:
        bound = len(self.board.b) + depth + min_position(self.board.a) + 1
        return bound < self.best_length

    def _search(self, depth: int) -> None:
        if depth > self.limit:
            return
        board = self.board
        if not len(board.b) and board.a.is_sorted() and self.best_length > depth:
            self.best_length = depth
            self.best = list(self._path)
            return
        for op in _SEARCH_ORDER:
            if (
                not self._qualified(depth)
                or not is_valid_move(board.a, self.previous, op)
                or not board.apply(op)
            ):
                continue
            # The last tried move is deliberately left in place after backtracking.
            self.previous = op
            self._path.append(op)
            self._search(depth + 1)
            board.apply(op.inverse())
            self._path.pop()


def sort_five_or_six(board: Board) -> list[Operation]:
    """Sort a small stack A by the shortest sequence the search finds.

    The found moves are performed on the board and returned.
    """
    board.a.assign_ranks()
    moves = ShortestSearch(board).run()
    for op in moves:
        board.perform(op)
    return moves