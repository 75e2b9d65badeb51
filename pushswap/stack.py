"""Stacks of integer nodes and the machine that applies the eleven push_swap operations."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from operator import attrgetter
from typing import Iterable, Iterator


@dataclass(eq=False)
class Node:
    """One element of a stack, with the bookkeeping the sorting algorithm needs."""

    value: int
    index: int = 0
    push_cost: int = 0
    above_median: bool = False
    cheapest: bool = False
    target: Node | None = field(default=None, repr=False)


class Stack:
    """A stack of nodes whose top is the first element."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(value) for value in values)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def top(self) -> Node | None:
        """Return the top node, or None when the stack is empty."""
        return self._nodes[0] if self._nodes else None

    def values(self) -> list[int]:
        """Return the values from top to bottom."""
        return [node.value for node in self._nodes]

    def is_sorted(self) -> bool:
        """Return True when no value is greater than the one below it."""
        values = self.values()
        return all(upper <= lower for upper, lower in zip(values, values[1:]))

    def find_min(self) -> Node | None:
        """Return the first node holding the smallest value."""
        return min(self._nodes, key=attrgetter("value"), default=None)

    def find_max(self) -> Node | None:
        """Return the first node holding the largest value."""
        return max(self._nodes, key=attrgetter("value"), default=None)

    def last(self) -> Node | None:
        """Return the bottom node, or None when the stack is empty."""
        return self._nodes[-1] if self._nodes else None

    def update_indices(self) -> None:
        """Number the nodes from the top and mark those in the upper half."""
        median = len(self._nodes) // 2
        for position, node in enumerate(self._nodes):
            node.index = position
            node.above_median = position < median

    def cheapest(self) -> Node | None:
        """Return the first node flagged as cheapest, if any."""
        return next((node for node in self._nodes if node.cheapest), None)

    def swap(self) -> None:
        """Exchange the values of the two top nodes."""
        if len(self._nodes) < 2:
            return
        first, second = self._nodes[0], self._nodes[1]
        first.value, second.value = second.value, first.value
        self.update_indices()

    def rotate(self) -> None:
        """Move the top node to the bottom."""
        if len(self._nodes) < 2:
            return
        self._nodes.rotate(-1)
        self.update_indices()

    def reverse_rotate(self) -> None:
        """Move the bottom node to the top."""
        if len(self._nodes) < 2:
            return
        self._nodes.rotate(1)
        self.update_indices()

    def push_from(self, other: Stack) -> None:
        """Take the top node of ``other`` and put it on top of this stack."""
        if not other._nodes:
            return
        self._nodes.appendleft(other._nodes.popleft())
        other.update_indices()
        self.update_indices()


class Operation(str, Enum):
    """The instructions a push_swap solution is made of."""

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

    def __str__(self) -> str:
        return self.value


class Machine:
    """Two stacks and the log of operations applied to them."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"Machine(a={self.a.values()!r}, b={self.b.values()!r})"

    def sa(self) -> None:
        """Swap the two top values of stack a."""
        self.a.swap()
        self.operations.append(Operation.SA)

    def sb(self) -> None:
        """Swap the two top values of stack b."""
        self.b.swap()
        self.operations.append(Operation.SB)

    def ss(self) -> None:
        """Swap the top values of both stacks."""
        self.a.swap()
        self.b.swap()
        self.operations.append(Operation.SS)

    def ra(self) -> None:
        """Rotate stack a upwards."""
        self.operations.append(Operation.RA)
        self.a.rotate()

    def rb(self) -> None:
        """Rotate stack b upwards."""
        self.operations.append(Operation.RB)
        self.b.rotate()

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self.operations.append(Operation.RR)
        self.a.rotate()
        self.b.rotate()

    def rra(self) -> None:
        """Rotate stack a downwards."""
        self.operations.append(Operation.RRA)
        self.a.reverse_rotate()

    def rrb(self) -> None:
        """Rotate stack b downwards."""
        self.operations.append(Operation.RRB)
        self.b.reverse_rotate()

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self.operations.append(Operation.RRR)
        self.a.reverse_rotate()
        self.b.reverse_rotate()

    def pa(self) -> None:
        """Move the top of stack b onto stack a."""
        self.a.push_from(self.b)
        self.operations.append(Operation.PA)

    def pb(self) -> None:
        """Move the top of stack a onto stack b."""
        self.b.push_from(self.a)
        self.operations.append(Operation.PB)