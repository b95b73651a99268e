import threading


class IdAllocator:
    """
    Hands out unique, strictly increasing integer identifiers.

    Each catalog (and each order queue) owns its own allocator, so ids
    start at ``start`` per instance. An id is never handed out twice,
    even after the thing it named has been deleted.
    """

    def __init__(self, start: int = 1):
        if start < 0:
            raise ValueError(f"Start id must be non-negative, got {start}")
        self._next = start
        self._lock = threading.Lock()

    def allocate(self) -> int:
        """Return the next id and advance the counter."""
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        """Return the id the next allocate() call will produce."""
        return self._next

    def __str__(self) -> str:
        return f"IdAllocator(next={self._next})"

    def __repr__(self) -> str:
        return self.__str__()
