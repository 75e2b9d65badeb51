"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator


@dataclass(eq=False)
class ListNode:
    """One link of a LinkedList."""

    content: Any
    next: ListNode | None = field(default=None, repr=False)


class LinkedList:
    """A singly linked list whose iteration yields the contents in order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> ListNode:
        """Insert ``content`` at the start and return its node."""
        node = ListNode(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> ListNode:
        """Append ``content`` at the end and return its node."""
        node = ListNode(content)
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node
        return node

    def last(self) -> ListNode | None:
        """Return the final node, or None for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Remove every node, passing each content to ``delete`` when given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], None] | None = None,
    ) -> LinkedList:
        """Return a new list of ``func(content)`` for every content.

        If ``func`` fails, the contents produced so far are released through
        ``delete`` and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result