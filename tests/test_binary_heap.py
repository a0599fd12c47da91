"""
Unit tests for the plain BinaryHeap.

Layouts are written with the None sentinel at index 0.
"""

from pathheap.heap import BinaryHeap, max_heap_comparator, min_heap_comparator


class TestMaxHeap:
    """Test max heap construction, insertion and deletion."""

    def test_peek_empty_returns_none(self):
        """Peek on an empty heap should return None."""
        assert BinaryHeap(max_heap_comparator).peek() is None

    def test_pop_empty_returns_none(self):
        """Pop on an empty heap should return None and leave it empty."""
        heap = BinaryHeap(max_heap_comparator)
        assert heap.pop() is None
        assert heap.is_empty() is True

    def test_build_two_ways(self, heap_values):
        """Both builders should produce valid heaps with the same root."""
        heap1 = BinaryHeap.build_heap(heap_values, max_heap_comparator)
        assert heap1.is_valid()
        assert heap1.peek() == 98

        heap2 = BinaryHeap.build_heap_in_place(list(heap_values), max_heap_comparator)
        assert heap2.is_valid()
        assert heap2.peek() == 98

    def test_insert(self, heap_values):
        """Inserted values should land at the leaf, middle and root."""
        heap = BinaryHeap.build_heap(heap_values, max_heap_comparator)
        assert heap.tree == [None, 98, 69, 91, 37, 68, 66, 17, 15]

        heap.insert(10)
        assert heap.peek() == 98
        assert heap.tree == [None, 98, 69, 91, 37, 68, 66, 17, 15, 10]

        heap.insert(80)
        assert heap.peek() == 98
        assert heap.tree == [None, 98, 80, 91, 37, 69, 66, 17, 15, 10, 68]

        heap.insert(100)
        assert heap.peek() == 100
        assert heap.tree == [None, 100, 98, 91, 37, 80, 66, 17, 15, 10, 68, 69]

    def test_delete(self, heap_values):
        """Deleting absent, leaf, middle and root values should keep the heap valid."""
        heap = BinaryHeap.build_heap(heap_values, max_heap_comparator)

        assert heap.delete(1) is False
        assert heap.tree == [None, 98, 69, 91, 37, 68, 66, 17, 15]

        assert heap.delete(15) is True
        assert heap.tree == [None, 98, 69, 91, 37, 68, 66, 17]

        heap.delete(69)
        assert heap.tree == [None, 98, 68, 91, 37, 17, 66]

        heap.delete(91)
        assert heap.tree == [None, 98, 68, 66, 37, 17]

        heap.delete(98)
        assert heap.peek() == 68
        assert heap.tree == [None, 68, 37, 66, 17]

    def test_delete_can_sift_up(self):
        """A replacement larger than its new parent should move up."""
        heap = BinaryHeap.build_heap([100, 50, 90, 40, 45, 80, 85], max_heap_comparator)
        # 85 replaces 40, which sits under 50
        heap.delete(40)
        assert heap.is_valid()
        assert [heap.pop() for _ in range(len(heap))] == [100, 90, 85, 80, 50, 45]


class TestMinHeap:
    """Test min heap construction, insertion and deletion."""

    def test_build_two_ways(self, heap_values):
        """Both min heap builders should produce valid heaps with the same root."""
        heap1 = BinaryHeap.build_heap(heap_values, min_heap_comparator)
        assert heap1.is_valid()
        assert heap1.peek() == 15

        heap2 = BinaryHeap.build_heap_in_place(list(heap_values), min_heap_comparator)
        assert heap2.is_valid()
        assert heap2.peek() == 15

    def test_build_in_place_uses_given_list(self, heap_values):
        """The list passed in should become the backing storage."""
        values = list(heap_values)
        heap = BinaryHeap.build_heap_in_place(values, min_heap_comparator)
        assert values[0] is None
        assert len(heap) == len(heap_values)

    def test_insert(self, heap_values):
        """Inserted values should land at the leaf, middle and root."""
        heap = BinaryHeap.build_heap(heap_values, min_heap_comparator)
        assert heap.tree == [None, 15, 37, 17, 66, 91, 98, 68, 69]

        heap.insert(100)
        assert heap.tree == [None, 15, 37, 17, 66, 91, 98, 68, 69, 100]

        heap.insert(50)
        assert heap.tree == [None, 15, 37, 17, 66, 50, 98, 68, 69, 100, 91]

        heap.insert(10)
        assert heap.peek() == 10
        assert heap.tree == [None, 10, 15, 17, 66, 37, 98, 68, 69, 100, 91, 50]

    def test_delete(self, heap_values):
        """Deleting absent, leaf, middle and root values should keep the heap valid."""
        heap = BinaryHeap.build_heap(heap_values, min_heap_comparator)

        heap.delete(1)
        assert heap.tree == [None, 15, 37, 17, 66, 91, 98, 68, 69]

        heap.delete(69)
        assert heap.tree == [None, 15, 37, 17, 66, 91, 98, 68]

        heap.delete(37)
        assert heap.tree == [None, 15, 66, 17, 68, 91, 98]

        heap.delete(66)
        assert heap.tree == [None, 15, 68, 17, 98, 91]

        heap.delete(15)
        assert heap.peek() == 17
        assert heap.tree == [None, 17, 68, 91, 98]

    def test_pop_order(self, heap_values):
        """Popping everything should yield ascending order."""
        heap = BinaryHeap.build_heap(heap_values, min_heap_comparator)
        popped = [heap.pop() for _ in range(len(heap))]
        assert popped == sorted(heap_values)
        assert heap.is_empty()

    def test_delete_with_custom_equality(self):
        """Custom element types should be matched with the given predicate."""
        heap = BinaryHeap.build_heap(
            [(3, "c"), (1, "a"), (2, "b")],
            lambda a, b: a[0] < b[0],
        )
        assert heap.delete((None, "a"), equal=lambda x, y: x[1] == y[1]) is True
        assert heap.peek() == (2, "b")
