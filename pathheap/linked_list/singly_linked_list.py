"""
Singly linked list with a dummy head node.

Used as the per-vertex edge container of the adjacency-list graph.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class SinglyLinkedListNode(Generic[T]):
    """A node holding one value and a link to the next node."""

    __slots__ = ("data", "next_node")

    def __init__(self, data: T | None) -> None:
        self.data = data
        self.next_node: SinglyLinkedListNode[T] | None = None

    def __repr__(self) -> str:
        return f"SinglyLinkedListNode({self.data!r})"


class SinglyLinkedList(Generic[T]):
    """
    Sequential container optimised for appends and removals.

    A dummy head node sits in front of the first element so insertion and
    deletion never special-case an empty list. The tail is tracked so
    appending is O(1).
    """

    def __init__(self) -> None:
        self._dummy_head: SinglyLinkedListNode[T] = SinglyLinkedListNode(None)
        self._tail: SinglyLinkedListNode[T] = self._dummy_head
        self._size = 0

    def insert_at_head(self, data: T) -> None:
        """Insert an element before the current first element: O(1)."""
        node = SinglyLinkedListNode(data)
        node.next_node = self._dummy_head.next_node
        self._dummy_head.next_node = node
        if self._tail is self._dummy_head:
            self._tail = node
        self._size += 1

    def insert_at_tail(self, data: T) -> None:
        """Append an element after the current last element: O(1)."""
        node = SinglyLinkedListNode(data)
        self._tail.next_node = node
        self._tail = node
        self._size += 1

    def delete(
        self,
        data: T,
        equal: Callable[[T, T], bool] | None = None,
    ) -> SinglyLinkedListNode[T] | None:
        """
        Remove the first element matching `data`: O(n).

        Args:
            data: Value to remove
            equal: Optional equality predicate, defaults to ==

        Returns:
            The removed node, or None if nothing matched
        """
        node = self._dummy_head
        while node.next_node is not None:
            candidate = node.next_node
            matches = equal(candidate.data, data) if equal else candidate.data == data
            if matches:
                node.next_node = candidate.next_node
                if candidate is self._tail:
                    self._tail = node
                candidate.next_node = None
                self._size -= 1
                return candidate
            node = candidate
        return None

    def search(self, data: T) -> SinglyLinkedListNode[T] | None:
        """Return the first node holding `data`, or None: O(n)."""
        for node in self._nodes():
            if node.data == data:
                return node
        return None

    def is_empty(self) -> bool:
        return self._dummy_head.next_node is None

    def size(self) -> int:
        return self._size

    def to_list(self) -> list[T]:
        return list(self)

    def _nodes(self) -> Iterator[SinglyLinkedListNode[T]]:
        node = self._dummy_head.next_node
        while node is not None:
            yield node
            node = node.next_node

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.data

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({self.to_list()!r})"
