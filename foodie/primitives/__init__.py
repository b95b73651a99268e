"""
Primitive types used throughout the system.

This module has no dependencies on other parts of the package,
avoiding circular imports.
"""

from .id_allocator import IdAllocator

__all__ = ["IdAllocator"]
