from .menu_item import MenuItem
from .node import CatalogNode
from .hash_index import HashIndex
from .validation import parse_price, parse_name, parse_item_id, parse_count
from .catalog import Catalog

__all__ = [
    "MenuItem",
    "CatalogNode",
    "HashIndex",
    "Catalog",
    "parse_price",
    "parse_name",
    "parse_item_id",
    "parse_count",
]
