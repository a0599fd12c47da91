"""
Plain binary heap.

Useful whenever the max/min of a changing collection is needed: peek is
O(1) and insert/pop are O(log n). Removing an arbitrary element needs a
linear scan to find it, which is what IndexedBinaryHeap avoids.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from pathheap.heap.base import HeapBase, PriorityComparator, T


class BinaryHeap(HeapBase[T]):
    """
    Array-backed binary heap ordered by a priority comparator.

    Pass max_heap_comparator for a max heap, min_heap_comparator for a min
    heap, or any strict higher_priority(a, b) predicate. Ties are not
    FIFO-stable.
    """

    @classmethod
    def build_heap(cls, items: Iterable[T], comparator: PriorityComparator) -> BinaryHeap[T]:
        """Insert each item in turn: O(n log n)."""
        heap = cls(comparator)
        for item in items:
            heap.insert(item)
        return heap

    @classmethod
    def build_heap_in_place(cls, items: list[T], comparator: PriorityComparator) -> BinaryHeap[T]:
        """
        Adopt `items` as the backing list and heapify it: O(n).

        The list is modified: a sentinel is inserted at index 0 and the
        elements are reordered. Sift-down cost is proportional to a node's
        height, and most nodes sit near the leaves, which keeps the total
        linear.
        """
        items.insert(0, None)
        heap = cls(comparator)
        heap._tree = items
        heap._heapify()
        return heap

    def insert(self, item: T) -> None:
        """Append as the last leaf then sift up: O(log n)."""
        self._tree.append(item)
        self.sift_up(len(self._tree) - 1)

    push = insert

    def _find_index(self, item: T, equal: Callable[[T, T], bool] | None = None) -> int:
        for index in range(1, len(self._tree)):
            candidate = self._tree[index]
            if (equal(candidate, item) if equal else candidate == item):
                return index
        return -1

    def delete(self, item: T, equal: Callable[[T, T], bool] | None = None) -> bool:
        """
        Remove the first element equal to `item`: O(n).

        Args:
            item: Element to remove
            equal: Optional equality predicate for custom element types

        Returns:
            True if an element was removed, False if none matched
        """
        index = self._find_index(item, equal)
        if index == -1:
            return False
        self._delete_index(index)
        return True
