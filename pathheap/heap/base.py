"""
Shared array layout and sifting for the binary heaps.

Both heaps store a complete binary tree breadth-first in a list whose
slot 0 holds a None sentinel, so for slot i the parent is i // 2 and the
children are 2i and 2i + 1:

                         10
                    /         \\
                   8           6
                 /   \\        /
                5     4      3

is stored as [None, 10, 8, 6, 5, 4, 3].
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")

# Returns True if the first element has strictly higher priority than the second
PriorityComparator = Callable[[Any, Any], bool]


def max_heap_comparator(a: Any, b: Any) -> bool:
    """Larger values have higher priority."""
    return a > b


def min_heap_comparator(a: Any, b: Any) -> bool:
    """Smaller values have higher priority."""
    return a < b


class HeapBase(Generic[T]):
    """
    Binary heap over a 1-indexed list.

    Subclasses route every slot write through `_set()` so they can keep
    auxiliary bookkeeping in step with the tree.
    """

    def __init__(self, comparator: PriorityComparator) -> None:
        """
        Args:
            comparator: higher_priority(a, b), True if a should sit above b
        """
        self._tree: list[T | None] = [None]
        self._higher_priority = comparator

    # =========================================================================
    # Index Math
    # =========================================================================

    @staticmethod
    def _parent_index(index: int) -> int:
        return index // 2

    @staticmethod
    def _left_child_index(index: int) -> int:
        return index * 2

    @staticmethod
    def _right_child_index(index: int) -> int:
        return index * 2 + 1

    def _has_parent(self, index: int) -> bool:
        return self._parent_index(index) > 0

    def _has_left_child(self, index: int) -> bool:
        return self._left_child_index(index) < len(self._tree)

    def _has_right_child(self, index: int) -> bool:
        return self._right_child_index(index) < len(self._tree)

    # =========================================================================
    # Slot Mutation
    # =========================================================================

    def _set(self, index: int, item: T) -> None:
        self._tree[index] = item

    def _swap(self, i: int, j: int) -> None:
        first, second = self._tree[i], self._tree[j]
        self._set(i, second)
        self._set(j, first)

    def sift_up(self, index: int) -> int:
        """
        Move the node at `index` toward the root while it beats its parent.

        Returns:
            The slot the node ended up in
        """
        while self._has_parent(index):
            parent_index = self._parent_index(index)
            if not self._higher_priority(self._tree[index], self._tree[parent_index]):
                break
            self._swap(index, parent_index)
            index = parent_index
        return index

    def sift_down(self, index: int) -> int:
        """
        Move the node at `index` toward the leaves while a child beats it.

        The node is always compared against the higher-priority child.
        Checking the left child is enough to know whether any child
        exists, since a complete tree never has only a right child.

        Returns:
            The slot the node ended up in
        """
        while self._has_left_child(index):
            child_index = self._left_child_index(index)
            right_index = self._right_child_index(index)
            if self._has_right_child(index) and self._higher_priority(
                self._tree[right_index], self._tree[child_index]
            ):
                child_index = right_index
            if not self._higher_priority(self._tree[child_index], self._tree[index]):
                break
            self._swap(index, child_index)
            index = child_index
        return index

    def _restore(self, index: int) -> int:
        """Sift the node at `index` in whichever direction the heap needs."""
        if self._has_parent(index) and self._higher_priority(
            self._tree[index], self._tree[self._parent_index(index)]
        ):
            return self.sift_up(index)
        return self.sift_down(index)

    def _heapify(self) -> None:
        """Sift down every internal node, last one first: O(n)."""
        for index in range((len(self._tree) - 1) // 2, 0, -1):
            self.sift_down(index)

    def _delete_index(self, index: int) -> T:
        """
        Remove the node at `index`: O(log n).

        The last node fills the hole. It can belong above or below its new
        position, so order is restored in either direction.
        """
        removed = self._tree[index]
        last = self._tree.pop()
        if index < len(self._tree):
            self._set(index, last)
            self._restore(index)
        return removed

    # =========================================================================
    # Public API
    # =========================================================================

    def peek(self) -> T | None:
        """Return the highest priority element without removing it, or None: O(1)."""
        if self.is_empty():
            return None
        return self._tree[1]

    def pop(self) -> T | None:
        """Remove and return the highest priority element, or None: O(log n)."""
        if self.is_empty():
            return None
        return self._delete_index(1)

    def is_empty(self) -> bool:
        return len(self._tree) <= 1

    @property
    def tree(self) -> list[T | None]:
        """Copy of the backing list, sentinel included."""
        return list(self._tree)

    def is_valid(self) -> bool:
        """Whether no child has strictly higher priority than its parent."""
        for index in range(2, len(self._tree)):
            parent = self._tree[self._parent_index(index)]
            if self._higher_priority(self._tree[index], parent):
                return False
        return True

    def __len__(self) -> int:
        return len(self._tree) - 1

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)})"
