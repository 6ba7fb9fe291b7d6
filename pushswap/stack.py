"""Stacks of ranked integers and the operations that move elements between them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

SENTINEL_INDEX = -(2**31)
"""Index reported for a position past the bottom of a stack."""


class Operation(Enum):
    """The instructions of the game, with their fixed numeric codes."""

    SA = 0
    PB = 1
    RA = 2
    RRA = 3
    SB = 4
    PA = 5
    SS = 6
    RB = 7
    RR = 8
    RRB = 9
    RRR = 10
    INIT = 11

    def __str__(self) -> str:
        return self.name.lower()

    def inverse(self) -> Operation:
        """Return the operation that undoes this one."""
        try:
            return _INVERSES[self]
        except KeyError:
            raise ValueError(f"{self} has no inverse") from None


_INVERSES = {
    Operation.SA: Operation.SA,
    Operation.PB: Operation.PA,
    Operation.RA: Operation.RRA,
    Operation.RRA: Operation.RA,
    Operation.SB: Operation.SB,
    Operation.PA: Operation.PB,
    Operation.SS: Operation.SS,
    Operation.RB: Operation.RRB,
    Operation.RR: Operation.RRR,
    Operation.RRB: Operation.RB,
    Operation.RRR: Operation.RR,
}


@dataclass
class Element:
    """A value on a stack together with its rank among the stack's values."""

    value: int
    index: int = 0


class Stack:
    """A stack of elements; position 0 is the top."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[Element] = [Element(v) for v in values]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def values(self) -> list[int]:
        """Return the values from top to bottom."""
        return [e.value for e in self._items]

    def index_at(self, depth: int) -> int:
        """Return the rank at the given depth, or SENTINEL_INDEX past the bottom."""
        if 0 <= depth < len(self._items):
            return self._items[depth].index
        return SENTINEL_INDEX

    def push(self, element: Element) -> None:
        """Put an element on top."""
        self._items.insert(0, element)

    def pop(self) -> Element:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop(0)

    def swap(self) -> bool:
        """Exchange the two top elements; False if there are fewer than two."""
        if len(self._items) < 2:
            return False
        self._items[0], self._items[1] = self._items[1], self._items[0]
        return True

    def rotate(self) -> bool:
        """Move the top element to the bottom; False if there are fewer than two."""
        if len(self._items) < 2:
            return False
        self._items.append(self._items.pop(0))
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom element to the top; False if there are fewer than two."""
        if len(self._items) < 2:
            return False
        self._items.insert(0, self._items.pop())
        return True

    def assign_ranks(self) -> None:
        """Set each element's index to the number of smaller values in the stack."""
        values = self.values()
        for element in self._items:
            element.index = sum(1 for v in values if element.value > v)

    def is_sorted(self) -> bool:
        """True if there are at least two values and they strictly increase downwards."""
        if len(self._items) < 2:
            return False
        return all(
            upper.value < lower.value
            for upper, lower in zip(self._items, self._items[1:])
        )

    def longest_sorted_run(self) -> int:
        """Length of the longest run of consecutive ranks; 0 if no run reaches two."""
        longest = 0
        current = 1
        for upper, lower in zip(self._items, self._items[1:]):
            if upper.index + 1 == lower.index:
                current += 1
                longest = max(longest, current)
            else:
                current = 1
        return longest

    def position_of(self, index: int) -> int:
        """Return the 1-based position from the top of the element with this rank."""
        for position, element in enumerate(self._items, start=1):
            if element.index == index:
                return position
        raise ValueError(f"no element with index {index}")

    def consecutive_above(self, target: int) -> int:
        """Count the ranks target+1, target+2, ... found in the top run before a gap."""
        count = 0
        pos = 0
        while pos < len(self._items):
            idx = self._items[pos].index
            if idx == target + count + 1:
                count += 1
                pos = 0
                continue
            if idx != target + count:
                break
            pos += 1
        return count


class OperationFailed(RuntimeError):
    """Raised when an operation performed on a board moves nothing."""

    def __init__(self, op: Operation) -> None:
        super().__init__(f"operation {op} had no effect")
        self.op = op


class Board:
    """The two stacks of the game and the operations performed on them."""

    def __init__(self, a: Stack | None = None, b: Stack | None = None) -> None:
        self.a = a if a is not None else Stack()
        self.b = b if b is not None else Stack()
        self.moves: list[Operation] = []

    @staticmethod
    def _transfer(source: Stack, target: Stack) -> bool:
        if not len(source):
            return False
        target.push(source.pop())
        return True

    def apply(self, op: Operation) -> bool:
        """Carry out an operation without recording it; True if anything moved."""
        a, b = self.a, self.b
        if op is Operation.SA:
            return a.swap()
        if op is Operation.SB:
            return b.swap()
        if op is Operation.SS:
            return a.swap() | b.swap()
        if op is Operation.PA:
            return self._transfer(b, a)
        if op is Operation.PB:
            return self._transfer(a, b)
        if op is Operation.RA:
            return a.rotate()
        if op is Operation.RB:
            return b.rotate()
        if op is Operation.RR:
            return a.rotate() | b.rotate()
        if op is Operation.RRA:
            return a.reverse_rotate()
        if op is Operation.RRB:
            return b.reverse_rotate()
        if op is Operation.RRR:
            return a.reverse_rotate() | b.reverse_rotate()
        raise ValueError(f"{op} cannot be applied")

    def perform(self, op: Operation) -> int:
        """Record and carry out an operation; raise OperationFailed if nothing moved."""
        self.moves.append(op)
        if not self.apply(op):
            raise OperationFailed(op)
        return 1