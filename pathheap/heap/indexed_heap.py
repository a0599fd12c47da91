"""
Binary heap with an identity index.

Every element has an identity key (a vertex label, an id...). The heap
keeps a key -> slot mapping in step with every swap, so an arbitrary
element can be found in O(1) and re-prioritised or removed in O(log n)
instead of the O(n) scan a plain heap needs.

Usage:
    heap = IndexedBinaryHeap(lambda a, b: a.distance < b.distance, key=lambda e: e.label)
    heap.push(entry)
    entry.distance = 3
    heap.decrease_key(entry.label)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Iterator

from pathheap.heap.base import HeapBase, PriorityComparator, T

logger = logging.getLogger(__name__)


class DuplicateKeyError(ValueError):
    """Raised when an element's identity key is already present in the heap."""

    def __init__(self, key: Hashable) -> None:
        super().__init__(f"Key {key!r} is already in the heap")
        self.key = key


def _identity(item):
    return item


class IndexedBinaryHeap(HeapBase[T]):
    """
    Binary heap supporting lookup, update and removal by identity key.

    Invariant: for every occupied slot i, positions[key(tree[i])] == i and
    positions holds no other keys. Two elements with the same key are never
    present at once; push() rejects the second one with DuplicateKeyError.
    """

    def __init__(
        self,
        comparator: PriorityComparator,
        key: Callable[[T], Hashable] | None = None,
    ) -> None:
        """
        Args:
            comparator: higher_priority(a, b), True if a should sit above b
            key: Projects an element onto its identity key (default: the element itself)
        """
        super().__init__(comparator)
        self._key = key or _identity
        self._positions: dict[Hashable, int] = {}

    @classmethod
    def build_heap(
        cls,
        items: Iterable[T],
        comparator: PriorityComparator,
        key: Callable[[T], Hashable] | None = None,
    ) -> IndexedBinaryHeap[T]:
        """Push each item in turn: O(n log n)."""
        heap = cls(comparator, key)
        for item in items:
            heap.push(item)
        return heap

    @classmethod
    def build_heap_in_place(
        cls,
        items: Iterable[T],
        comparator: PriorityComparator,
        key: Callable[[T], Hashable] | None = None,
    ) -> IndexedBinaryHeap[T]:
        """
        Load every item into storage, then sift down from the last internal node: O(n).

        Raises:
            DuplicateKeyError: If two items share an identity key
        """
        heap = cls(comparator, key)
        for item in items:
            item_key = heap._key(item)
            if item_key in heap._positions:
                raise DuplicateKeyError(item_key)
            heap._tree.append(item)
            heap._positions[item_key] = len(heap._tree) - 1
        heap._heapify()
        logger.debug(f"Built indexed heap of {len(heap)} elements")
        return heap

    def _set(self, index: int, item: T) -> None:
        self._tree[index] = item
        self._positions[self._key(item)] = index

    def _delete_index(self, index: int) -> T:
        removed = super()._delete_index(index)
        del self._positions[self._key(removed)]
        return removed

    # =========================================================================
    # Lookup
    # =========================================================================

    def find_index(self, key: Hashable) -> int:
        """Slot currently holding `key`, or -1 if absent: O(1)."""
        return self._positions.get(key, -1)

    def find(self, key: Hashable) -> T | None:
        """Element with identity `key`, or None if absent: O(1)."""
        index = self._positions.get(key)
        if index is None:
            return None
        return self._tree[index]

    def __contains__(self, key: Hashable) -> bool:
        return key in self._positions

    # =========================================================================
    # Mutation
    # =========================================================================

    def push(self, item: T) -> None:
        """
        Append as the last leaf then sift up: O(log n).

        Raises:
            DuplicateKeyError: If an element with the same key is present
        """
        item_key = self._key(item)
        if item_key in self._positions:
            logger.debug(f"Rejecting duplicate heap key {item_key!r}")
            raise DuplicateKeyError(item_key)
        self._tree.append(item)
        self._positions[item_key] = len(self._tree) - 1
        self.sift_up(len(self._tree) - 1)

    def delete(self, item: T) -> bool:
        """
        Remove the element sharing `item`'s identity key: O(log n).

        Returns:
            True if an element was removed, False if the key was absent
        """
        index = self.find_index(self._key(item))
        if index == -1:
            return False
        self._delete_index(index)
        return True

    def update(self, item: T) -> bool:
        """
        Store `item` in the slot of its key and restore heap order: O(log n).

        Handles both in-place mutation of the stored element and
        replacement by a new object with the same key, whether its priority
        went up or down.

        Returns:
            True if the key was present, False otherwise (nothing changes)
        """
        index = self.find_index(self._key(item))
        if index == -1:
            return False
        self._set(index, item)
        self._restore(index)
        return True

    def decrease_key(self, key: Hashable) -> bool:
        """
        Restore order after the element's priority was improved in place.

        An improved element still beats its children, so only sifting up
        is needed: O(log n).

        Returns:
            True if the key was present, False otherwise
        """
        index = self.find_index(key)
        if index == -1:
            return False
        self.sift_up(index)
        return True

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def positions(self) -> dict[Hashable, int]:
        """Copy of the key -> slot mapping."""
        return dict(self._positions)

    def is_valid(self) -> bool:
        """Whether the heap property and the position index both hold."""
        if len(self._positions) != len(self):
            return False
        for index in range(1, len(self._tree)):
            if self._positions.get(self._key(self._tree[index])) != index:
                return False
        return super().is_valid()

    def __iter__(self) -> Iterator[T]:
        """Elements in storage order (not priority order)."""
        return iter(self._tree[1:])
