"""Custom exceptions for the food delivery system."""
from typing import Any, Optional


class FoodieException(Exception):
    """Base exception for catalog and order queue errors."""

    kind = "Error"


class ItemNotFoundError(FoodieException):
    """Raised when an item id is absent from the catalog."""

    kind = "NotFound"

    def __init__(self, message: str, item_id: Optional[int] = None):
        super().__init__(message)
        self.item_id = item_id


class EmptyCatalogError(ItemNotFoundError):
    """Raised when an operation needs an item but the menu has none."""

    kind = "EmptyCatalog"


class InvalidInputError(FoodieException):
    """Raised when a name, price, id or menu choice fails validation."""

    kind = "InvalidInput"

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class EmptyQueueError(FoodieException):
    """Raised when dispatching from an empty order queue."""

    kind = "EmptyQueue"


class DanglingReferenceError(FoodieException):
    """
    Raised when an order points at an item that was deleted from the menu.

    The stale order (if any) is kept on the exception so the caller can
    still report what was ordered.
    """

    kind = "DanglingReference"

    def __init__(self, message: str, item_id: Optional[int] = None, order=None):
        super().__init__(message)
        self.item_id = item_id
        self.order = order
