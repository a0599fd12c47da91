"""
Unit tests for SinglyLinkedList.
"""

from pathheap.linked_list import SinglyLinkedList


class TestInsertion:
    """Test insertion at both ends."""

    def test_new_list_is_empty(self):
        """A new list should be empty."""
        linked_list = SinglyLinkedList()
        assert linked_list.is_empty() is True
        assert linked_list.size() == 0
        assert linked_list.to_list() == []

    def test_insert_at_tail_keeps_order(self):
        """Appending should preserve insertion order."""
        linked_list = SinglyLinkedList()
        for value in [1, 2, 3]:
            linked_list.insert_at_tail(value)
        assert linked_list.to_list() == [1, 2, 3]
        assert len(linked_list) == 3

    def test_insert_at_head_prepends(self):
        """Inserting at the head should put the value first."""
        linked_list = SinglyLinkedList()
        linked_list.insert_at_tail(2)
        linked_list.insert_at_head(1)
        linked_list.insert_at_tail(3)
        assert linked_list.to_list() == [1, 2, 3]

    def test_insert_at_head_on_empty_then_tail(self):
        """Tail should be tracked after a head insert into an empty list."""
        linked_list = SinglyLinkedList()
        linked_list.insert_at_head("a")
        linked_list.insert_at_tail("b")
        assert linked_list.to_list() == ["a", "b"]


class TestDeletion:
    """Test removal of matching elements."""

    def test_delete_first_match_only(self):
        """Only the first matching element should be removed."""
        linked_list = SinglyLinkedList()
        for value in [1, 2, 1, 3]:
            linked_list.insert_at_tail(value)
        removed = linked_list.delete(1)
        assert removed is not None
        assert removed.data == 1
        assert linked_list.to_list() == [2, 1, 3]

    def test_delete_missing_returns_none(self):
        """Deleting an absent value should return None and change nothing."""
        linked_list = SinglyLinkedList()
        linked_list.insert_at_tail(1)
        assert linked_list.delete(42) is None
        assert linked_list.to_list() == [1]

    def test_delete_tail_then_append(self):
        """Appending after removing the tail should link from the new tail."""
        linked_list = SinglyLinkedList()
        for value in [1, 2, 3]:
            linked_list.insert_at_tail(value)
        linked_list.delete(3)
        linked_list.insert_at_tail(4)
        assert linked_list.to_list() == [1, 2, 4]
        assert linked_list.size() == 3

    def test_delete_only_element(self):
        """Removing the only element should leave an empty, reusable list."""
        linked_list = SinglyLinkedList()
        linked_list.insert_at_tail(1)
        linked_list.delete(1)
        assert linked_list.is_empty() is True
        linked_list.insert_at_tail(2)
        assert linked_list.to_list() == [2]

    def test_delete_with_custom_equality(self):
        """A custom predicate should be used to match elements."""
        linked_list = SinglyLinkedList()
        linked_list.insert_at_tail({"id": 1})
        linked_list.insert_at_tail({"id": 2})
        linked_list.delete({"id": 2, "extra": True}, equal=lambda a, b: a["id"] == b["id"])
        assert linked_list.to_list() == [{"id": 1}]


class TestSearch:
    """Test lookup and iteration."""

    def test_search_found(self):
        """Should return the node holding the value."""
        linked_list = SinglyLinkedList()
        linked_list.insert_at_tail("x")
        node = linked_list.search("x")
        assert node is not None
        assert node.data == "x"

    def test_search_not_found(self):
        """Should return None for an absent value."""
        assert SinglyLinkedList().search("x") is None

    def test_iteration_is_non_destructive(self):
        """Iterating twice should yield the same elements."""
        linked_list = SinglyLinkedList()
        for value in [1, 2]:
            linked_list.insert_at_tail(value)
        assert list(linked_list) == [1, 2]
        assert list(linked_list) == [1, 2]
