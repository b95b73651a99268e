from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..catalog.menu_item import MenuItem


class ItemIterator(ABC):
    """
    ItemIterator is the interface every catalog scan implements.

    Key Design Principles:
    1. **Pull-based**: callers pull items one at a time
    2. **Iterator pattern**: has_next() + next() for item streaming
    3. **Lazy evaluation**: the linked list is walked on demand
    4. **Single pass**: a scan cannot be rewound or reopened once it ends
    """

    @abstractmethod
    def open(self) -> None:
        """
        Opens the iterator.
        This must be called before any other methods.

        Raises:
            RuntimeError: If the scan was already closed or exhausted
        """
        pass

    @abstractmethod
    def has_next(self) -> bool:
        """
        Returns true if the iterator has more items.

        This method should NOT advance the iterator position.

        Raises:
            RuntimeError: If the iterator has not been opened
        """
        pass

    @abstractmethod
    def next(self) -> 'MenuItem':
        """
        Returns the next item and advances the iterator.

        Raises:
            StopIteration: If there are no more items
            RuntimeError: If the iterator has not been opened
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """
        Closes the iterator.

        After calling close(), the scan cannot be opened again.
        """
        pass
