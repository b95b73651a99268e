from typing import Optional

from .menu_item import MenuItem


class CatalogNode:
    """A link in the catalog's singly linked list. Owns its ``MenuItem``."""

    __slots__ = ("item", "next")

    def __init__(self, item: MenuItem, next_node: Optional["CatalogNode"] = None):
        self.item = item
        self.next = next_node

    def __repr__(self) -> str:
        return f"CatalogNode({self.item})"
