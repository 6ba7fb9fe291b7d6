import random

import pytest

from pushswap.partition import (
    SORT_START_THRESHOLD,
    Progress,
    State,
    after_sort_b,
    back_to_b,
    next_state_for_b,
    partition_half_a,
    partition_half_b,
    partition_initial_half_a,
    run,
    sort_b,
)
from pushswap.stack import Board, Stack


def _shuffled(values, seed):
    items = list(values)
    random.Random(seed).shuffle(items)
    return items


def test_next_state_for_large_b_halves_it():
    progress = Progress()
    next_state_for_b(Stack(range(SORT_START_THRESHOLD)), progress, SORT_START_THRESHOLD)
    assert progress.state is State.PARTITION_HALF_B


def test_next_state_for_small_b_sorts_it():
    progress = Progress()
    next_state_for_b(Stack(range(SORT_START_THRESHOLD - 1)), progress, SORT_START_THRESHOLD)
    assert progress.state is State.SORT_B


def test_ended_progress_stays_ended():
    progress = Progress(state=State.END)
    next_state_for_b(Stack(range(3)), progress, SORT_START_THRESHOLD)
    assert progress.state is State.END


def test_after_sort_b_choices():
    done = Progress()
    after_sort_b(Stack([1, 2, 3]), done)
    assert done.state is State.END

    pending = Progress(sent_counts=[4])
    after_sort_b(Stack([3, 1, 2]), pending)
    assert pending.state is State.BACK_TO_B

    fresh = Progress()
    after_sort_b(Stack([3, 1, 2]), fresh)
    assert fresh.state is State.PARTITION_HALF_A


@pytest.mark.parametrize("size", [20, 21, 40])
def test_initial_partition_sends_smaller_half(size):
    values = _shuffled(range(size), size)
    board = Board(Stack(values))
    progress = Progress()
    partition_initial_half_a(board, progress)
    half = size // 2 + size % 2
    assert sorted(board.b.values()) == list(range(half))
    assert sorted(board.a.values()) == list(range(half, size))
    expected = State.PARTITION_HALF_B if half >= SORT_START_THRESHOLD else State.SORT_B
    assert progress.state is expected


@pytest.mark.parametrize("size", [20, 17])
def test_partition_half_b_sends_larger_half(size):
    b_values = _shuffled(range(size), size + 1)
    board = Board(Stack([100, 101]), Stack(b_values))
    progress = Progress()
    partition_half_b(board, progress)
    moved = size // 2
    assert progress.sent_counts == [moved]
    assert sorted(board.b.values()) == list(range(size - moved))
    assert sorted(board.a.values()) == list(range(size - moved, size)) + [100, 101]
    assert progress.state is State.SORT_B


def test_sort_b_moves_b_to_bottom_of_a_in_order():
    a_values = [50, 40, 60]
    b_values = _shuffled(range(12), 3)
    board = Board(Stack(a_values), Stack(b_values))
    progress = Progress()
    sort_b(board, progress)
    assert len(board.b) == 0
    assert board.a.values() == a_values + sorted(b_values)
    assert progress.state is State.PARTITION_HALF_A


def test_back_to_b_consumes_latest_chunk():
    board = Board(Stack([5, 7, 6, 0, 1, 2, 3, 4]))
    progress = Progress(sent_counts=[9, 3])
    back_to_b(board, progress)
    assert progress.sent_counts == [9]
    assert board.a.values() == [0, 1, 2, 3, 4, 5, 6]
    assert board.b.values() == [7]
    assert progress.state is State.SORT_B


def test_back_to_b_without_chunks_raises():
    board = Board(Stack([2, 1, 0]))
    with pytest.raises(IndexError):
        back_to_b(board, Progress())


def test_partition_half_a_large_unsorted_part():
    values = _shuffled(range(20, 40), 7) + list(range(20))
    board = Board(Stack(values))
    progress = Progress()
    partition_half_a(board, progress)
    assert sorted(board.b.values()) == list(range(20, 30))
    assert sorted(board.a.values()) == list(range(20)) + list(range(30, 40))
    assert progress.state is State.SORT_B


@pytest.mark.parametrize(
    "size,seed", [(7, 1), (8, 2), (9, 3), (16, 4), (17, 5), (33, 6), (100, 7)]
)
def test_run_sorts_random_input(size, seed):
    values = random.Random(seed).sample(range(-1000, 1000), size)
    board = Board(Stack(values))
    moves = run(board)
    assert board.a.values() == sorted(values)
    assert len(board.b) == 0
    replay = Board(Stack(values))
    for op in moves:
        replay.apply(op)
    assert replay.a.values() == sorted(values)
    assert len(replay.b) == 0


def test_run_sorts_reversed_input():
    values = list(range(6, -1, -1))
    board = Board(Stack(values))
    run(board)
    assert board.a.values() == list(range(7))
    assert len(board.b) == 0