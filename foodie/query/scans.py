from typing import TYPE_CHECKING, Optional

from .abstract_iterator import AbstractItemIterator
from ..catalog.menu_item import MenuItem
from ..catalog.node import CatalogNode
from ..core.exceptions import InvalidInputError

if TYPE_CHECKING:
    from ..catalog.catalog import Catalog


class CatalogScan(AbstractItemIterator):
    """
    Sequential scan over the catalog's linked list.

    Items are returned in the list's current order: most recently added
    first, or ascending price after a sort. The scan walks live nodes and
    does not lock the catalog between steps, so mutating the catalog
    while a scan is in progress gives unspecified (but finite) results.
    """

    def __init__(self, catalog: 'Catalog'):
        super().__init__()
        self.catalog = catalog
        self._cursor: Optional[CatalogNode] = None

    def open(self) -> None:
        """Position the scan on the head of the list."""
        if not self._is_open:
            super().open()
            self._cursor = self.catalog.head_node

    def close(self) -> None:
        self._cursor = None
        super().close()

    def read_next(self) -> Optional[MenuItem]:
        if self._cursor is None:
            return None

        item = self._cursor.item
        self._cursor = self._cursor.next
        return item


class NameMatchScan(CatalogScan):
    """
    Linear search by name.

    An item matches when its name contains ``substring`` as a contiguous,
    case-sensitive run of characters. The empty string matches every item.
    """

    def __init__(self, catalog: 'Catalog', substring: str):
        if not isinstance(substring, str):
            raise InvalidInputError(
                f"Search term must be text, got {type(substring).__name__}", substring)
        super().__init__(catalog)
        self.substring = substring

    def read_next(self) -> Optional[MenuItem]:
        item = super().read_next()
        while item is not None and self.substring not in item.name:
            item = super().read_next()
        return item
