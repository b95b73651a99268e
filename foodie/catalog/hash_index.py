import logging
from typing import Iterator, Optional

from .menu_item import MenuItem

logger = logging.getLogger(__name__)

DEFAULT_BUCKET_COUNT = 47


class HashNode:
    """One link in a bucket's collision chain."""

    __slots__ = ("key", "value", "next")

    def __init__(self, key: int, value: MenuItem, next_node: Optional["HashNode"] = None):
        self.key = key
        self.value = value
        self.next = next_node


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    divisor = 3
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


def next_prime(n: int) -> int:
    """Return the smallest prime greater than or equal to ``n``."""
    candidate = max(2, n)
    while not _is_prime(candidate):
        candidate += 1
    return candidate


class HashIndex:
    """
    Hash index from item id to the catalog's ``MenuItem`` entry.

    This class provides:
    - O(1) average case lookup time
    - Separate chaining: colliding keys are prepended to the bucket chain
    - A fixed bucket count (a prime, to spread sequential ids)
    - Optional load-factor-triggered growth to the next prime

    The index does not check for duplicate keys on insert. The catalog
    hands out unique ids and is responsible for never inserting one twice.
    """

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT,
                 auto_resize: bool = False, max_load_factor: float = 0.75):
        """
        Create an empty index.

        Args:
            bucket_count: Number of buckets, must be positive
            auto_resize: Grow the bucket array once max_load_factor is exceeded
            max_load_factor: Entries per bucket that triggers a resize

        Raises:
            ValueError: If bucket_count or max_load_factor is not positive
        """
        if isinstance(bucket_count, bool) or not isinstance(bucket_count, int) or bucket_count < 1:
            raise ValueError(
                f"Bucket count must be a positive integer, got {bucket_count!r}")
        if max_load_factor <= 0:
            raise ValueError(
                f"Max load factor must be positive, got {max_load_factor!r}")

        self._buckets: list[Optional[HashNode]] = [None] * bucket_count
        self._size = 0
        self.auto_resize = auto_resize
        self.max_load_factor = max_load_factor

        # Statistics
        self.num_resizes = 0

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    @property
    def load_factor(self) -> float:
        return self._size / len(self._buckets)

    def _bucket_of(self, key: int) -> int:
        return key % len(self._buckets)

    def insert(self, key: int, value: MenuItem) -> None:
        """Prepend a (key, value) node to the key's bucket chain."""
        index = self._bucket_of(key)
        self._buckets[index] = HashNode(key, value, self._buckets[index])
        self._size += 1

        if self.auto_resize and self.load_factor > self.max_load_factor:
            self._resize(next_prime(2 * len(self._buckets)))

    def find(self, key: int) -> Optional[MenuItem]:
        """Return the value stored for ``key``, or None if absent."""
        node = self._buckets[self._bucket_of(key)]
        while node is not None:
            if node.key == key:
                return node.value
            node = node.next
        return None

    def remove(self, key: int) -> bool:
        """
        Unlink the first node matching ``key``.

        Returns:
            True if a node was removed, False if the key was absent
        """
        index = self._bucket_of(key)
        node = self._buckets[index]
        prev: Optional[HashNode] = None

        while node is not None and node.key != key:
            prev = node
            node = node.next

        if node is None:
            return False

        if prev is None:
            self._buckets[index] = node.next
        else:
            prev.next = node.next
        self._size -= 1
        return True

    def keys(self) -> Iterator[int]:
        """Iterate over every key, bucket by bucket."""
        for head in self._buckets:
            node = head
            while node is not None:
                yield node.key
                node = node.next

    def chain_lengths(self) -> list[int]:
        """Return the chain length of each bucket (diagnostics)."""
        lengths = []
        for head in self._buckets:
            length = 0
            node = head
            while node is not None:
                length += 1
                node = node.next
            lengths.append(length)
        return lengths

    def _resize(self, new_bucket_count: int) -> None:
        """Rehash every node into a new bucket array."""
        old_buckets = self._buckets
        self._buckets = [None] * new_bucket_count

        for head in old_buckets:
            node = head
            while node is not None:
                following = node.next
                index = self._bucket_of(node.key)
                node.next = self._buckets[index]
                self._buckets[index] = node
                node = following

        self.num_resizes += 1
        logger.debug("Resized hash index from %d to %d buckets",
                     len(old_buckets), new_bucket_count)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return self.find(key) is not None

    def __str__(self) -> str:
        return f"HashIndex({self._size} entries, {len(self._buckets)} buckets)"

    def __repr__(self) -> str:
        return self.__str__()
