import logging
import threading
from decimal import Decimal
from typing import Any, Optional

from ..core.exceptions import EmptyCatalogError, ItemNotFoundError
from ..primitives import IdAllocator
from ..query import CatalogScan, NameMatchScan
from .hash_index import DEFAULT_BUCKET_COUNT, HashIndex
from .menu_item import MenuItem
from .merge_sort import merge_sort
from .node import CatalogNode
from .validation import parse_name, parse_price

logger = logging.getLogger(__name__)


class Catalog:
    """
    The food menu: a singly linked list of items plus a hash index by id.

    Structure:
    ```
    head -> [Soda] -> [Fries] -> [Burger] -> None      (linked list, owns items)

    buckets[id % 47] -> (id, item) -> (id, item)       (hash index, references)
    ```

    - New items go to the front of the list.
    - Lookups by id go through the hash index, O(1) on average.
    - Deletion has to walk the list (no back references), O(n).
    - Sorting by price relinks the list in place; the index is keyed by
      id, not position, so it stays valid without any work.

    The list and the index change together under one lock. After every
    public operation, each item in the list is reachable through the
    index under its id, and the index holds nothing else.
    """

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT,
                 auto_resize: bool = False, max_load_factor: float = 0.75):
        """
        Create an empty catalog.

        Args:
            bucket_count: Number of hash index buckets
            auto_resize: Let the hash index grow with the catalog
            max_load_factor: Load factor that triggers index growth
        """
        self._head: Optional[CatalogNode] = None
        self._size = 0
        self._index = HashIndex(bucket_count, auto_resize, max_load_factor)
        self._ids = IdAllocator(start=1)

        # Guards the list and the index as one unit
        self._lock = threading.RLock()

    @property
    def head_node(self) -> Optional[CatalogNode]:
        """First node of the linked list (used by scans)."""
        return self._head

    @property
    def index(self) -> HashIndex:
        return self._index

    @property
    def next_id(self) -> int:
        """The id the next added item will receive."""
        return self._ids.peek()

    def add_item(self, name: Any, price: Any) -> int:
        """
        Add a new item to the front of the menu.

        Args:
            name: Item name, must not be blank
            price: Non-negative number or numeric string

        Returns:
            The id assigned to the new item

        Raises:
            InvalidInputError: If the name or price is invalid. No id is
                consumed in that case.
        """
        clean_name = parse_name(name)
        clean_price = parse_price(price)

        with self._lock:
            item = MenuItem(self._ids.allocate(), clean_name, clean_price)
            self._head = CatalogNode(item, self._head)
            self._index.insert(item.item_id, item)
            self._size += 1

        logger.debug("Added item %d %r at %s", item.item_id, item.name, item.price)
        return item.item_id

    def find_by_id(self, item_id: int) -> Optional[MenuItem]:
        """Return the item with this id, or None if there is none."""
        with self._lock:
            return self._index.find(item_id)

    def get_item(self, item_id: int) -> MenuItem:
        """Return the item with this id, raising if there is none."""
        item = self.find_by_id(item_id)
        if item is None:
            raise ItemNotFoundError(f"Food item with ID {item_id} not found", item_id)
        return item

    def edit_item(self, item_id: int, new_name: Any, new_price: Any) -> MenuItem:
        """
        Replace an item's name and price in place.

        The id and the item's position in the list do not change.

        Returns:
            The edited item

        Raises:
            ItemNotFoundError: If no item has this id
            InvalidInputError: If the new name or price is invalid. The
                item is left untouched.
        """
        with self._lock:
            item = self.get_item(item_id)
            clean_name = parse_name(new_name)
            clean_price = parse_price(new_price)
            item.name = clean_name
            item.price = clean_price

        logger.debug("Edited item %d: %r at %s", item_id, clean_name, clean_price)
        return item

    def delete_item(self, item_id: int) -> MenuItem:
        """
        Remove an item from the list and the index.

        The removed item is flagged ``removed`` so orders still holding a
        reference to it can tell it is gone.

        Returns:
            The removed item

        Raises:
            EmptyCatalogError: If the menu is empty
            ItemNotFoundError: If no item has this id
        """
        with self._lock:
            if self._head is None:
                raise EmptyCatalogError("Menu is empty. Cannot delete.", item_id)

            prev: Optional[CatalogNode] = None
            current = self._head
            while current is not None and current.item.item_id != item_id:
                prev = current
                current = current.next

            if current is None:
                raise ItemNotFoundError(f"Food item with ID {item_id} not found", item_id)

            if prev is None:
                self._head = current.next
            else:
                prev.next = current.next

            self._index.remove(item_id)
            self._size -= 1
            current.item.removed = True

        logger.debug("Deleted item %d %r", item_id, current.item.name)
        return current.item

    def search_by_name(self, substring: str) -> NameMatchScan:
        """
        Find items whose name contains ``substring`` (case-sensitive).

        Returns:
            An open, single-pass scan yielding matches in list order
        """
        scan = NameMatchScan(self, substring)
        scan.open()
        return scan

    def sort_by_price(self) -> bool:
        """
        Sort the menu by ascending price with a stable merge sort.

        Returns:
            False if there were fewer than two items to sort, else True
        """
        with self._lock:
            if self._head is None or self._head.next is None:
                return False
            self._head = merge_sort(self._head)

        logger.debug("Sorted %d items by price", self._size)
        return True

    def list_all(self) -> list[MenuItem]:
        """Return every item in current list order."""
        with self._lock:
            items = []
            node = self._head
            while node is not None:
                items.append(node.item)
                node = node.next
            return items

    def is_empty(self) -> bool:
        return self._head is None

    def total_value(self) -> Decimal:
        """Sum of all item prices."""
        return sum((item.price for item in self.list_all()), Decimal("0.00"))

    def check_consistency(self) -> bool:
        """
        Verify that the list and the index agree.

        Returns:
            True if every listed item resolves to itself through the index
            and the index holds exactly those ids
        """
        with self._lock:
            items = self.list_all()
            if len(items) != self._size or len(self._index) != self._size:
                return False
            for item in items:
                if self._index.find(item.item_id) is not item:
                    return False
            return set(self._index.keys()) == {item.item_id for item in items}

    def __iter__(self) -> CatalogScan:
        scan = CatalogScan(self)
        scan.open()
        return scan

    def __len__(self) -> int:
        return self._size

    def __contains__(self, item_id: object) -> bool:
        with self._lock:
            return item_id in self._index

    def __str__(self) -> str:
        return f"Catalog({self._size} items)"

    def __repr__(self) -> str:
        return self.__str__()
