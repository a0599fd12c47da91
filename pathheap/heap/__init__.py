"""
Heap module.

Provides array-backed binary heaps:
- BinaryHeap: plain heap, O(n) removal of arbitrary elements
- IndexedBinaryHeap: identity-indexed heap, O(log n) update/removal
"""

from pathheap.heap.base import (
    PriorityComparator,
    max_heap_comparator,
    min_heap_comparator,
)
from pathheap.heap.binary_heap import BinaryHeap
from pathheap.heap.indexed_heap import DuplicateKeyError, IndexedBinaryHeap

__all__ = [
    "BinaryHeap",
    "IndexedBinaryHeap",
    "DuplicateKeyError",
    "PriorityComparator",
    "max_heap_comparator",
    "min_heap_comparator",
]
