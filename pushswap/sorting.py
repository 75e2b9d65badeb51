"""The sorting strategy: small cases by hand, larger ones by cheapest-move insertion."""

from __future__ import annotations

from operator import attrgetter
from typing import Iterable

from pushswap.parsing import InputError, has_duplicates
from pushswap.stack import Machine, Node, Operation, Stack


def set_target_for_a(stack_a: Stack, stack_b: Stack) -> None:
    """Give every node of a its target in b.

    The target is the node of b with the largest value below the node's own,
    or the maximum of b when there is none.
    """
    for node in stack_a:
        smaller = [candidate for candidate in stack_b if candidate.value < node.value]
        if smaller:
            node.target = max(smaller, key=attrgetter("value"))
        else:
            node.target = stack_b.find_max()


def set_target_for_b(stack_a: Stack, stack_b: Stack) -> None:
    """Give every node of b its target in a.

    The target is the node of a with the smallest value above the node's own,
    or the minimum of a when there is none.
    """
    for node in stack_b:
        larger = [candidate for candidate in stack_a if candidate.value > node.value]
        if larger:
            node.target = min(larger, key=attrgetter("value"))
        else:
            node.target = stack_a.find_min()


def _distance_to_top(node: Node, length: int) -> int:
    return node.index if node.above_median else length - node.index


def set_price(stack_a: Stack, stack_b: Stack) -> None:
    """Set each node's cost of bringing it and its target to the tops of a and b."""
    length_a = len(stack_a)
    length_b = len(stack_b)
    for node in stack_a:
        if node.target is None:
            raise ValueError("node has no target; set targets before pricing")
        node.push_cost = _distance_to_top(node, length_a) + _distance_to_top(
            node.target, length_b
        )


def set_cheapest_node(stack: Stack) -> None:
    """Flag the first node with the lowest push cost as the cheapest."""
    cheapest = min(stack, key=attrgetter("push_cost"), default=None)
    if cheapest is None:
        return
    for node in stack:
        node.cheapest = node is cheapest


def initialise_nodes_a(stack_a: Stack, stack_b: Stack) -> None:
    """Prepare indices, targets, prices and the cheapest flag before a push to b."""
    stack_a.update_indices()
    stack_b.update_indices()
    set_target_for_a(stack_a, stack_b)
    set_price(stack_a, stack_b)
    set_cheapest_node(stack_a)


def initialise_nodes_b(stack_a: Stack, stack_b: Stack) -> None:
    """Prepare indices and targets before a push back to a."""
    stack_a.update_indices()
    stack_b.update_indices()
    set_target_for_b(stack_a, stack_b)


def _finalise_alignment(machine: Machine, cheapest: Node) -> None:
    while machine.a and machine.a.top() is not cheapest:
        if cheapest.above_median:
            machine.ra()
        else:
            machine.rra()
    target = cheapest.target
    while machine.b and machine.b.top() is not target:
        if target is not None and target.above_median:
            machine.rb()
        else:
            machine.rrb()


def align_for_push_a_to_b(machine: Machine) -> None:
    """Bring the cheapest node of a and its target to the tops of both stacks."""
    cheapest = machine.a.cheapest()
    if cheapest is None:
        return
    target = cheapest.target
    while machine.a.top() is not cheapest and machine.b.top() is not target:
        if cheapest.above_median and target.above_median:
            machine.rr()
        elif not cheapest.above_median and not target.above_median:
            machine.rrr()
        else:
            break
    _finalise_alignment(machine, cheapest)


def align_for_push_b_to_a(machine: Machine) -> None:
    """Rotate a until the target of b's top node is on top of a."""
    top_b = machine.b.top()
    if not machine.a or top_b is None or top_b.target is None:
        return
    target = top_b.target
    while machine.a.top() is not target:
        if target.above_median:
            machine.ra()
        else:
            machine.rra()


def move_min_to_top(machine: Machine) -> bool:
    """Rotate the smallest value of a to the top; return whether a is then sorted."""
    smallest = machine.a.find_min()
    machine.a.update_indices()
    while machine.a.top() is not smallest:
        if smallest.above_median:
            machine.ra()
        else:
            machine.rra()
    return machine.a.is_sorted()


def sort_three(machine: Machine) -> None:
    """Sort a stack a of three values with at most two operations."""
    largest = machine.a.find_max()
    if largest is None or len(machine.a) < 2:
        return
    values = machine.a.values()
    if values[0] == largest.value:
        machine.ra()
    elif values[1] == largest.value:
        machine.rra()
    values = machine.a.values()
    if values[0] > values[1]:
        machine.sa()


def sort_four(machine: Machine) -> None:
    """Sort a stack a of four values."""
    if move_min_to_top(machine):
        return
    machine.pb()
    sort_three(machine)
    machine.pa()


def sort_five(machine: Machine) -> None:
    """Sort a stack a of five values."""
    if move_min_to_top(machine):
        return
    machine.pb()
    machine.a.update_indices()
    sort_four(machine)
    machine.pa()


def big_sort(machine: Machine) -> None:
    """Sort a stack a of more than five values.

    Two values seed b; the cheapest node is pushed to b until three remain,
    those three are sorted, then every node returns to its place in a and the
    minimum is rotated to the top.
    """
    length_a = len(machine.a)
    for _ in range(2):
        if length_a > 3 and not machine.a.is_sorted():
            machine.pb()
        length_a -= 1
    for _ in range(len(machine.a) - 3):
        initialise_nodes_a(machine.a, machine.b)
        align_for_push_a_to_b(machine)
        machine.pb()
    if len(machine.a) == 3 and not machine.a.is_sorted():
        sort_three(machine)
    while machine.b:
        initialise_nodes_b(machine.a, machine.b)
        align_for_push_b_to_a(machine)
        machine.pa()
    machine.a.update_indices()
    move_min_to_top(machine)


def sort_stack_a(machine: Machine) -> None:
    """Sort the unsorted stack a, choosing the strategy by its length."""
    length = len(machine.a)
    if length == 2:
        machine.sa()
    elif length == 3:
        sort_three(machine)
    elif length == 4:
        sort_four(machine)
    elif length == 5:
        sort_five(machine)
    elif length > 5:
        big_sort(machine)


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values`` in ascending order.

    Raises InputError when a value appears more than once.
    """
    values = list(values)
    if has_duplicates(values):
        raise InputError("values must be distinct")
    machine = Machine(values)
    if not machine.a.is_sorted():
        sort_stack_a(machine)
    return machine.operations