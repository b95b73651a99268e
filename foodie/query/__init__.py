from .item_iterator import ItemIterator
from .abstract_iterator import AbstractItemIterator
from .scans import CatalogScan, NameMatchScan

__all__ = ["ItemIterator", "AbstractItemIterator", "CatalogScan", "NameMatchScan"]
