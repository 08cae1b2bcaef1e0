"""A singly linked list of nodes that each hold one value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: a value and the node after it."""

    content: Any
    next: Optional["Node"] = None


def delete_node(node: Optional[Node], delete: Optional[Callable[[Any], Any]]) -> None:
    """Release ``node``: pass its content to ``delete`` and unlink it.

    Nothing happens when either argument is None.
    """
    if node is None or delete is None:
        return
    delete(node.content)
    node.next = None


class LinkedList:
    """A singly linked list with a head node; iterating yields the contents."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def add_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the new head; None is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Link ``node`` after the last node; None is ignored."""
        if node is None:
            return
        end = self.last()
        if end is None:
            self.head = node
        else:
            end.next = node

    def last(self) -> Optional[Node]:
        """The last node, or None for an empty list."""
        end = None
        for end in self._nodes():
            pass
        return end

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing each content to ``delete`` when one is given."""
        for node in self._nodes():
            if delete is not None:
                delete(node.content)
            node.next = None
        self.head = None

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every content, front to back."""
        for node in self._nodes():
            f(node.content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """New list of ``f(content)`` for every content.

        If ``f`` raises, the contents built so far are passed to ``delete``
        and the error propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(f(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except Exception:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"