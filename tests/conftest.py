"""
Shared pytest fixtures for the linked list tests.
"""

import pytest

from linked_lists.doubly_linked_list import DoublyLinkedList
from linked_lists.singly_linked_list import SinglyLinkedList


@pytest.fixture(params=[SinglyLinkedList, DoublyLinkedList], ids=["singly", "doubly"])
def list_cls(request):
    """Run a test against both list types."""
    return request.param


@pytest.fixture
def doubly_123():
    return DoublyLinkedList([1, 2, 3])


@pytest.fixture
def singly_123():
    return SinglyLinkedList([1, 2, 3])
