"""
Linked list module.

Provides the sequential container used for graph adjacency lists:
- SinglyLinkedList: dummy-head list with O(1) append
"""

from pathheap.linked_list.singly_linked_list import SinglyLinkedList, SinglyLinkedListNode

__all__ = ["SinglyLinkedList", "SinglyLinkedListNode"]
