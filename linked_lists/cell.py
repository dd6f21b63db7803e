"""
Shared, mutable ownership handle for list nodes.

Any number of Python references may own a ``SharedCell``. Access to the value
goes through ``borrow()`` (shared) or ``borrow_mut()`` (exclusive), and the
cell refuses overlapping access instead of letting two writers race:

    with cell.borrow_mut() as node:
        node.next = other

Cells accept weak references, which is how a non-owning link to a node is
expressed.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from linked_lists.errors import BorrowConflictError

logger = logging.getLogger(__name__)


class SharedCell:
    """A value that can be shared by several owners and mutated through any of them."""

    def __init__(self, value):
        self._value = value
        self._readers = 0
        self._writing = False

    def __repr__(self):
        return f"SharedCell({self._value!r})"

    @property
    def is_borrowed(self) -> bool:
        return self._writing or self._readers > 0

    @property
    def is_borrowed_mut(self) -> bool:
        return self._writing

    @contextmanager
    def borrow(self) -> Iterator:
        """Yield the value for reading. Fails while a mutable borrow is active."""
        if self._writing:
            logger.debug("Shared borrow refused on %r: mutably borrowed", self)
            raise BorrowConflictError("Cell is already mutably borrowed")
        self._readers += 1
        try:
            yield self._value
        finally:
            self._readers -= 1

    @contextmanager
    def borrow_mut(self) -> Iterator:
        """Yield the value for mutation. Fails while any other borrow is active."""
        if self._writing:
            logger.debug("Mutable borrow refused on %r: mutably borrowed", self)
            raise BorrowConflictError("Cell is already mutably borrowed")
        if self._readers:
            logger.debug("Mutable borrow refused on %r: %d shared borrows", self, self._readers)
            raise BorrowConflictError(f"Cell is already borrowed by {self._readers} reader(s)")
        self._writing = True
        try:
            yield self._value
        finally:
            self._writing = False
