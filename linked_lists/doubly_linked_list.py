import logging
import weakref
from collections.abc import Iterable, Iterator
from contextlib import ExitStack

from linked_lists.cell import SharedCell
from linked_lists.errors import BorrowConflictError, EmptyListError, IndexOutOfRangeError

logger = logging.getLogger(__name__)


class ListNode:
    """Node for doubly linked list. `next` owns the following cell, `prev` only points back."""

    def __init__(self, value):
        self.value = value
        self.prev: weakref.ref | None = None
        self.next: SharedCell | None = None

    def __repr__(self):
        return f"Node({self.value!r})"

    def previous(self) -> SharedCell | None:
        """Resolve the back-reference, or None at the head."""
        if self.prev is None:
            return None
        return self.prev()


class DoublyLinkedList:
    """Doubly linked list with O(1) operations at both ends."""

    def __init__(self, values: Iterable | None = None):
        self.head: SharedCell | None = None
        self.tail: SharedCell | None = None
        self.size = 0

        if values is not None:
            for value in values:
                self.push_back(value)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator:
        current = self.head
        while current is not None:
            with current.borrow() as node:
                value = node.value
                current = node.next
            yield value

    def __reversed__(self) -> Iterator:
        current = self.tail
        while current is not None:
            with current.borrow() as node:
                value = node.value
                current = node.previous()
            yield value

    def __repr__(self):
        return f"DoublyLinkedList({self.to_list()!r})"

    def is_empty(self) -> bool:
        return self.size == 0

    def push_back(self, value) -> None:
        """Add a value after the tail."""
        new_cell = SharedCell(ListNode(value))
        if self.tail is None:
            self.head = self.tail = new_cell
        else:
            with new_cell.borrow_mut() as new_node:
                new_node.prev = weakref.ref(self.tail)
            with self.tail.borrow_mut() as tail:
                tail.next = new_cell
            self.tail = new_cell
        self.size += 1

    def push_front(self, value) -> None:
        """Add a value before the head."""
        new_cell = SharedCell(ListNode(value))
        if self.head is None:
            self.head = self.tail = new_cell
        else:
            with new_cell.borrow_mut() as new_node:
                new_node.next = self.head
            with self.head.borrow_mut() as head:
                head.prev = weakref.ref(new_cell)
            self.head = new_cell
        self.size += 1

    def pop_front(self):
        """Detach the head and return its value."""
        if self.head is None:
            raise EmptyListError("pop_front from empty list")
        return self._unlink(self.head)

    def pop_back(self):
        """Detach the tail and return its value."""
        if self.tail is None:
            raise EmptyListError("pop_back from empty list")
        return self._unlink(self.tail)

    def peek_front(self):
        """Return the head's value without removing it."""
        if self.head is None:
            raise EmptyListError("peek_front on empty list")
        with self.head.borrow() as node:
            return node.value

    def peek_back(self):
        """Return the tail's value without removing it."""
        if self.tail is None:
            raise EmptyListError("peek_back on empty list")
        with self.tail.borrow() as node:
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
        elif index == self.size:
            self.push_back(value)
        else:
            self._link_after(self._cell_at(index - 1), value)

    def delete(self, index: int):
        """Remove the node at `index` and return its value."""
        if not 0 <= index < self.size:
            raise IndexOutOfRangeError(index, self.size)
        return self._unlink(self._cell_at(index))

    def clear(self) -> None:
        """Release every node, front to back. Fails without changes if any node is borrowed."""
        current = self.head
        while current is not None:
            if current.is_borrowed:
                raise BorrowConflictError(f"Cannot clear while {current!r} is borrowed")
            with current.borrow() as node:
                current = node.next

        logger.debug("Clearing %d nodes", self.size)
        current, self.head, self.tail = self.head, None, None
        self.size = 0
        while current is not None:
            with current.borrow_mut() as node:
                current, node.next, node.prev = node.next, None, None

    def to_list(self) -> list:
        """Convert linked list back to regular list for debugging/output."""
        return list(self)

    def _cell_at(self, index: int) -> SharedCell:
        # Walk from whichever end is closer
        if index < self.size // 2:
            current = self.head
            for _ in range(index):
                with current.borrow() as node:
                    current = node.next
        else:
            current = self.tail
            for _ in range(self.size - 1 - index):
                with current.borrow() as node:
                    current = node.previous()
        return current

    def _link_after(self, cell: SharedCell, value) -> None:
        """Insert a new node after the given non-tail cell."""
        new_cell = SharedCell(ListNode(value))
        # Take both borrows before touching any link
        with cell.borrow_mut() as node, node.next.borrow_mut() as next_node:
            following = node.next
            with new_cell.borrow_mut() as new_node:
                new_node.prev = weakref.ref(cell)
                new_node.next = following
            node.next = new_cell
            next_node.prev = weakref.ref(new_cell)
        self.size += 1

    def _unlink(self, cell: SharedCell):
        """Remove a cell from the list in O(1) time and return its value."""
        with ExitStack() as stack:
            node = stack.enter_context(cell.borrow_mut())
            prev_cell = node.previous()
            next_cell = node.next
            prev_node = stack.enter_context(prev_cell.borrow_mut()) if prev_cell is not None else None
            next_node = stack.enter_context(next_cell.borrow_mut()) if next_cell is not None else None

            # All borrows are held from here on
            node.prev = node.next = None
            value = node.value

            if prev_node is not None:
                prev_node.next = next_cell
            else:
                self.head = next_cell

            if next_node is not None:
                next_node.prev = weakref.ref(prev_cell) if prev_cell is not None else None
            else:
                self.tail = prev_cell

        self.size -= 1
        return value
