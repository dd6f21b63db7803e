"""
Errors raised by the linked list containers.

All of them signal a broken calling contract (popping an empty list, reading
past the end, touching a node that is already being mutated). None are
transient, so nothing here is ever retried.
"""


class LinkedListError(Exception):
    """Base class for every error raised by this package."""


class EmptyListError(LinkedListError):
    """Raised when an operation needs a head or tail and the list is empty."""


class IndexOutOfRangeError(LinkedListError, IndexError):
    """Raised when an index does not address a node in the list.

    Attributes:
        index: The index that was requested.
        size: Length of the list at the time of the call.
    """

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of range for list of length {size}")


class BorrowConflictError(LinkedListError):
    """Raised when a cell is borrowed in a way that clashes with a live borrow."""
