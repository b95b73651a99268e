from .exceptions import (
    FoodieException,
    ItemNotFoundError,
    EmptyCatalogError,
    InvalidInputError,
    EmptyQueueError,
    DanglingReferenceError,
)

__all__ = [
    "FoodieException",
    "ItemNotFoundError",
    "EmptyCatalogError",
    "InvalidInputError",
    "EmptyQueueError",
    "DanglingReferenceError",
]
