"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Callable[[Any], None]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


def delete_node(node: Node, delete: Deleter) -> None:
    """Release a node's content with delete and detach the node."""
    delete(node.content)
    node.content = None
    node.next = None


class LinkedList:
    """A singly linked list held by its first node."""

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
        """Put content at the front; return its new node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Put content at the back; return its new node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Deleter] = None) -> None:
        """Empty the list, passing each content to delete in order."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete_node(node, delete)
            else:
                node.next = None
            node = following
        self.head = None

    def iterate(self, f: Callable[[Any], Any]) -> None:
        """Call f on each content, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Optional[Deleter] = None) -> "LinkedList":
        """A new list of f(content) for each content.

        If f raises, the contents already made are passed to delete and the
        error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result