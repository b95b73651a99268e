import logging
import threading
from typing import Iterator, Optional

from ..catalog.menu_item import MenuItem
from ..core.exceptions import DanglingReferenceError, EmptyQueueError, ItemNotFoundError
from ..primitives import IdAllocator
from .order import Order

logger = logging.getLogger(__name__)


class OrderNode:
    """A link in the queue. Holds an order, not a copy of the item."""

    __slots__ = ("order", "next")

    def __init__(self, order: Order):
        self.order = order
        self.next: Optional["OrderNode"] = None


class OrderQueue:
    """
    ⏳ First-in, first-out queue of pending delivery orders ⏳

    Queue Layout:
    ------------------------------------------------------------
    front -> [order 1] -> [order 2] -> [order 3] <- rear
             dispatched                 newest
             first
    ------------------------------------------------------------

    🎯 Both ends are tracked, so enqueue and dispatch are O(1).
    🔗 Orders reference catalog items, they do not own them.
    🪦 An item deleted from the menu after being ordered is detected
       through its ``removed`` flag: such an order cannot be placed, and
       dispatching it drops it from the queue and raises
       DanglingReferenceError.
    🔒 The queue has its own lock, independent of the catalog's.
    """

    def __init__(self):
        self._front: Optional[OrderNode] = None
        self._rear: Optional[OrderNode] = None
        self._size = 0
        self._order_ids = IdAllocator(start=1)
        self._lock = threading.Lock()

        # Statistics
        self.orders_placed = 0
        self.orders_dispatched = 0
        self.orders_dropped = 0

    def enqueue(self, item: Optional[MenuItem]) -> Order:
        """
        Place an order for ``item`` at the rear of the queue.

        Args:
            item: The catalog item, typically from ``Catalog.find_by_id``

        Returns:
            The new order

        Raises:
            ItemNotFoundError: If item is None (the id did not exist)
            DanglingReferenceError: If the item was deleted from the menu
        """
        if item is None:
            raise ItemNotFoundError("Food ID does not exist. Cannot place order.")
        if item.removed:
            raise DanglingReferenceError(
                f"Food item with ID {item.item_id} is no longer on the menu. "
                f"Cannot place order.", item.item_id)

        with self._lock:
            order = Order.for_item(self._order_ids.allocate(), item)
            node = OrderNode(order)
            if self._rear is None:
                self._front = self._rear = node
            else:
                self._rear.next = node
                self._rear = node
            self._size += 1
            self.orders_placed += 1

        logger.debug("Queued order %d for item %d %r",
                     order.order_id, item.item_id, item.name)
        return order

    def dispatch(self) -> Order:
        """
        Remove and return the oldest order.

        Raises:
            EmptyQueueError: If no orders are pending
            DanglingReferenceError: If the order's item was deleted from the
                menu. The order has still been removed from the queue and is
                attached to the exception.
        """
        with self._lock:
            if self._front is None:
                raise EmptyQueueError("No orders in the queue to dispatch.")

            node = self._front
            self._front = node.next
            if self._front is None:
                self._rear = None
            self._size -= 1
            order = node.order

            if order.is_dangling:
                self.orders_dropped += 1
            else:
                self.orders_dispatched += 1

        if order.is_dangling:
            logger.warning("Dropped order %d: item %d %r was removed from the menu",
                           order.order_id, order.item_id, order.item_name)
            raise DanglingReferenceError(
                f"Order {order.order_id} for \"{order.item_name}\" was dropped: "
                f"the item is no longer on the menu.", order.item_id, order)

        logger.debug("Dispatched order %d for item %d", order.order_id, order.item_id)
        return order

    def dequeue(self) -> MenuItem:
        """Dispatch the oldest order and return its item reference."""
        return self.dispatch().item

    def peek(self) -> Optional[Order]:
        """Return the oldest order without removing it."""
        with self._lock:
            return self._front.order if self._front is not None else None

    def pending(self) -> list[Order]:
        """Return every pending order, oldest first."""
        with self._lock:
            orders = []
            node = self._front
            while node is not None:
                orders.append(node.order)
                node = node.next
            return orders

    def list_all(self) -> list[MenuItem]:
        """Return the item of every pending order, oldest first."""
        return [order.item for order in self.pending()]

    def is_empty(self) -> bool:
        return self._front is None

    def get_statistics(self) -> dict:
        return {
            "pending": self._size,
            "orders_placed": self.orders_placed,
            "orders_dispatched": self.orders_dispatched,
            "orders_dropped": self.orders_dropped,
        }

    def __iter__(self) -> Iterator[Order]:
        return iter(self.pending())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return f"OrderQueue({self._size} pending)"

    def __repr__(self) -> str:
        return self.__str__()
