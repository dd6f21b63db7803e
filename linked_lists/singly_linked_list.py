import logging
from collections.abc import Iterable, Iterator

from linked_lists.cell import SharedCell
from linked_lists.errors import BorrowConflictError, EmptyListError, IndexOutOfRangeError

logger = logging.getLogger(__name__)


class ListNode:
    """Node for singly linked list: a value and an owning link to the next node."""

    def __init__(self, value, next: SharedCell | None = None):
        self.value = value
        self.next = next

    def __repr__(self):
        return f"Node({self.value!r})"


class SinglyLinkedList:
    """Singly linked list whose nodes live in shared, mutable cells."""

    def __init__(self, values: Iterable | None = None):
        self.head: SharedCell | None = None
        self.size = 0

        if values is not None:
            # Walk once and keep the last cell so building stays linear
            last = None
            for value in values:
                cell = SharedCell(ListNode(value))
                if last is None:
                    self.head = cell
                else:
                    with last.borrow_mut() as node:
                        node.next = cell
                last = cell
                self.size += 1

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator:
        current = self.head
        while current is not None:
            with current.borrow() as node:
                value = node.value
                current = node.next
            yield value

    def __repr__(self):
        return f"SinglyLinkedList({self.to_list()!r})"

    def is_empty(self) -> bool:
        return self.size == 0

    def push_front(self, value) -> None:
        """Add a value before the current head."""
        self.head = SharedCell(ListNode(value, next=self.head))
        self.size += 1

    def push_back(self, value) -> None:
        """Add a value after the last node. O(n), since no tail is tracked."""
        if self.head is None:
            self.push_front(value)
            return
        last = self._cell_at(self.size - 1)
        with last.borrow_mut() as node:
            node.next = SharedCell(ListNode(value))
        self.size += 1

    def pop_front(self):
        """Detach the head and return its value."""
        if self.head is None:
            raise EmptyListError("pop_front from empty list")
        with self.head.borrow_mut() as node:
            self.head, node.next = node.next, None
            value = node.value
        self.size -= 1
        return value

    def peek_front(self):
        """Return the head's value without removing it."""
        if self.head is None:
            raise EmptyListError("peek_front on empty list")
        with self.head.borrow() as node:
            return node.value

    def peek_back(self):
        """Return the last value without removing it. O(n), since no tail is tracked."""
        if self.head is None:
            raise EmptyListError("peek_back on empty list")
        with self._cell_at(self.size - 1).borrow() as node:
            return node.value

    def get(self, index: int):
        """Return the value `index` links away from the head."""
        if not 0 <= index < self.size:
            raise IndexOutOfRangeError(index, self.size)
        with self._cell_at(index).borrow() as node:
            return node.value

    def insert(self, index: int, value) -> None:
        """Insert a value so that it ends up at position `index`."""
        if not 0 <= index <= self.size:
            raise IndexOutOfRangeError(index, self.size)
        if index == 0:
            self.push_front(value)
            return
        with self._cell_at(index - 1).borrow_mut() as prev:
            prev.next = SharedCell(ListNode(value, next=prev.next))
        self.size += 1

    def delete(self, index: int):
        """Remove the node at `index` and return its value."""
        if not 0 <= index < self.size:
            raise IndexOutOfRangeError(index, self.size)
        if index == 0:
            return self.pop_front()
        with self._cell_at(index - 1).borrow_mut() as prev:
            removed = prev.next
            with removed.borrow_mut() as node:
                prev.next, node.next = node.next, None
                value = node.value
        self.size -= 1
        return value

    def clear(self) -> None:
        """Release every node, front to back. Fails without changes if any node is borrowed."""
        current = self.head
        while current is not None:
            if current.is_borrowed:
                raise BorrowConflictError(f"Cannot clear while {current!r} is borrowed")
            with current.borrow() as node:
                current = node.next

        logger.debug("Clearing %d nodes", self.size)
        current, self.head = self.head, None
        self.size = 0
        while current is not None:
            with current.borrow_mut() as node:
                current, node.next = node.next, None

    def to_list(self) -> list:
        """Convert linked list back to regular list for debugging/output."""
        return list(self)

    def _cell_at(self, index: int) -> SharedCell:
        current = self.head
        for _ in range(index):
            with current.borrow() as node:
                current = node.next
        return current
