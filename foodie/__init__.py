"""
Foodie Express: in-memory menu catalog and delivery order queue.
"""
import logging

from .catalog import Catalog, HashIndex, MenuItem
from .orders import Order, OrderQueue

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "Catalog",
    "HashIndex",
    "MenuItem",
    "Order",
    "OrderQueue",
]
