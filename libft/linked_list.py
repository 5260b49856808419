"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the link after it."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list that keeps both its first and its last node."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for content in contents:
            self.push_back(content)

    def push_front(self, content: Any) -> None:
        """Put ``content`` at the start of the list."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, content: Any) -> None:
        """Put ``content`` at the end of the list."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Node | None:
        """The last node, or None when the list is empty."""
        return self._tail

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, passing each content to ``delete`` in order first."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None
        self._tail = None
        self._size = 0

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> LinkedList:
        """A new list holding ``func`` applied to each content.

        ``func`` returning None counts as a failure: the contents produced so
        far are passed to ``delete`` and ``ValueError`` is raised. If ``func``
        raises, the same clean-up happens before the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                mapped = func(content)
                if mapped is None:
                    raise ValueError("mapping produced no content")
                result.push_back(mapped)
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


__all__ = ["LinkedList", "Node"]