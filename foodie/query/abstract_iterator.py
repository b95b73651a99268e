from abc import abstractmethod
from typing import Optional

from .item_iterator import ItemIterator
from ..catalog.menu_item import MenuItem


class AbstractItemIterator(ItemIterator):
    """
    Helper base class for implementing ItemIterators.

    This class handles the common logic for has_next()/next() with a
    "read-ahead" pattern. Subclasses only need to implement read_next().

    How it works:
    1. has_next() calls read_next() if no item is buffered
    2. next() returns the buffered item and clears the buffer
    3. read_next() is where subclasses implement their specific logic

    Instances are also plain Python iterators, so ``for item in scan``
    and ``list(scan)`` work once the scan is open.
    """

    def __init__(self):
        self._next_item: Optional[MenuItem] = None
        self._is_open = False
        self._finished = False

    def has_next(self) -> bool:
        """
        Check if there are more items available.

        Uses read-ahead: if no item is buffered, try to read one.
        """
        if not self._is_open:
            raise RuntimeError("Iterator not open")

        if self._next_item is None and not self._finished:
            self._next_item = self.read_next()
            if self._next_item is None:
                self._finished = True
        return self._next_item is not None

    def next(self) -> MenuItem:
        """Return the next item and advance the iterator."""
        if not self.has_next():
            raise StopIteration("No more items")

        result = self._next_item
        self._next_item = None
        return result

    def open(self) -> None:
        """Mark iterator as open. Subclasses should override and call super()."""
        if self._finished:
            raise RuntimeError("Item scans cannot be restarted")
        self._is_open = True

    def close(self) -> None:
        """Mark iterator as closed and clear buffer. Subclasses should override and call super()."""
        self._is_open = False
        self._finished = True
        self._next_item = None

    def __iter__(self) -> 'AbstractItemIterator':
        return self

    def __next__(self) -> MenuItem:
        return self.next()

    @abstractmethod
    def read_next(self) -> Optional[MenuItem]:
        """
        Read the next item from the underlying list.

        This is the main method subclasses need to implement.
        Should return None when no more items are available.
        """
        pass
