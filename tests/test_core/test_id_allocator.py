"""
Tests for id_allocator.py module.
"""
import threading

import pytest

from foodie.primitives import IdAllocator


class TestIdAllocator:
    """Test cases for IdAllocator."""

    def test_starts_at_one(self):
        ids = IdAllocator()
        assert ids.peek() == 1
        assert [ids.allocate() for _ in range(3)] == [1, 2, 3]
        assert ids.peek() == 4

    def test_custom_start(self):
        ids = IdAllocator(start=100)
        assert ids.allocate() == 100

    def test_negative_start_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            IdAllocator(start=-1)

    def test_peek_does_not_consume(self):
        ids = IdAllocator()
        ids.peek()
        ids.peek()
        assert ids.allocate() == 1

    def test_concurrent_allocation_is_unique(self):
        ids = IdAllocator()
        results = []
        lock = threading.Lock()

        def worker():
            local = [ids.allocate() for _ in range(250)]
            with lock:
                results.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(results) == list(range(1, 2001))

    def test_str(self):
        assert str(IdAllocator(5)) == "IdAllocator(next=5)"
