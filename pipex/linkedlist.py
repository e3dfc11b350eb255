"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list that keeps a head node and can grow at either end."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` before the current head and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` after the last node and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def last(self) -> Node | None:
        """Return the last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, passing each content to ``delete`` when given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def for_each(self, f: Callable[[Any], Any] | None) -> None:
        """Call ``f`` on every content in order; nothing happens if ``f`` is None."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> LinkedList:
        """Return a new list of ``f(content)`` for each content.

        If ``f`` raises, the contents already produced are passed to
        ``delete`` (when given) and the exception propagates.
        """
        if f is None:
            raise TypeError("a mapping function is required")
        result = LinkedList()
        for content in self:
            try:
                mapped = f(content)
            except BaseException:
                result.clear(delete)
                raise
            result.push_back(mapped)
        return result

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"