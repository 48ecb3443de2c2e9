"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list with constant-time insertion at the front."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert content at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def clear(self, deleter: Deleter = None) -> None:
        """Remove every node, passing each content to deleter first."""
        while self.head is not None:
            self.pop_front(deleter)

    def pop_front(self, deleter: Deleter = None) -> Any:
        """Remove the first node and return its content.

        The content is passed to deleter, when one is given, before it is
        returned. Raises IndexError on an empty list.
        """
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if deleter is not None:
            deleter(node.content)
        return node.content

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call f on the content of every node, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], deleter: Deleter = None) -> "LinkedList":
        """Return a new list holding f applied to every content.

        If f raises part way, the contents already built are passed to
        deleter and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except Exception:
            result.clear(deleter)
            raise
        return result

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"