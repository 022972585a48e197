"""The two stacks and the eleven operations that move elements between them."""

from __future__ import annotations

import sys
from collections import Counter, deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, TextIO


class Op(Enum):
    """A stack operation, valued by the name it is printed as."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


# Operations on both stacks at once are printed but never counted.
_UNCOUNTED = frozenset({Op.SS, Op.RR, Op.RRR})


@dataclass(eq=False)
class Element:
    """A value on a stack, with its rank once ranks have been assigned (0 before)."""

    value: int
    index: int = 0


class Stacks:
    """Stacks a and b; the top of each stack is the left end of its deque.

    Every operation that changes something writes its name and a newline to
    ``out`` and is counted. An operation that cannot apply does nothing.
    """

    def __init__(self, values: Iterable[int] = (), out: TextIO | None = None):
        self.a: deque[Element] = deque(Element(v) for v in values)
        self.b: deque[Element] = deque()
        self._out = out
        self._counts: Counter[Op] = Counter()

    def values_a(self) -> list[int]:
        """Values of stack a, top first."""
        return [e.value for e in self.a]

    def values_b(self) -> list[int]:
        """Values of stack b, top first."""
        return [e.value for e in self.b]

    def _emit(self, op: Op) -> None:
        if op not in _UNCOUNTED:
            self._counts[op] += 1
        out = self._out if self._out is not None else sys.stdout
        out.write(op.value + "\n")

    @staticmethod
    def _swap(stack: deque[Element]) -> None:
        stack[0], stack[1] = stack[1], stack[0]

    def swap_a(self) -> None:
        if len(self.a) < 2:
            return
        self._swap(self.a)
        self._emit(Op.SA)

    def swap_b(self) -> None:
        if len(self.b) < 2:
            return
        self._swap(self.b)
        self._emit(Op.SB)

    def swap_both(self) -> None:
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self._swap(self.a)
        self._swap(self.b)
        self._emit(Op.SS)

    def push_a(self) -> None:
        """Move the top of b onto a."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._emit(Op.PA)

    def push_b(self) -> None:
        """Move the top of a onto b."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._emit(Op.PB)

    def rotate_a(self) -> None:
        if len(self.a) <= 1:
            return
        self.a.rotate(-1)
        self._emit(Op.RA)

    def rotate_b(self) -> None:
        if len(self.b) <= 1:
            return
        self.b.rotate(-1)
        self._emit(Op.RB)

    def rotate_both(self) -> None:
        if len(self.a) <= 1 or len(self.b) <= 1:
            return
        self.a.rotate(-1)
        self.b.rotate(-1)
        self._emit(Op.RR)

    def reverse_rotate_a(self) -> None:
        if len(self.a) <= 1:
            return
        self.a.rotate(1)
        self._emit(Op.RRA)

    def reverse_rotate_b(self) -> None:
        if len(self.b) <= 1:
            return
        self.b.rotate(1)
        self._emit(Op.RRB)

    def reverse_rotate_both(self) -> None:
        if len(self.a) <= 1 or len(self.b) <= 1:
            return
        self.a.rotate(1)
        self.b.rotate(1)
        self._emit(Op.RRR)

    def apply(self, op: Op | str) -> None:
        """Perform an operation given as an Op or by its printed name."""
        op = Op(op)
        {
            Op.SA: self.swap_a,
            Op.SB: self.swap_b,
            Op.SS: self.swap_both,
            Op.PA: self.push_a,
            Op.PB: self.push_b,
            Op.RA: self.rotate_a,
            Op.RB: self.rotate_b,
            Op.RR: self.rotate_both,
            Op.RRA: self.reverse_rotate_a,
            Op.RRB: self.reverse_rotate_b,
            Op.RRR: self.reverse_rotate_both,
        }[op]()

    def count(self, op: Op | str) -> int:
        """How many times an operation has been counted."""
        return self._counts[Op(op)]

    def total_ops(self) -> int:
        """Sum of all counted operations."""
        return sum(self._counts.values())