"""
Tests for the order queue.
"""
import logging
from decimal import Decimal

import pytest

from foodie.catalog import Catalog
from foodie.core.exceptions import DanglingReferenceError, EmptyQueueError, ItemNotFoundError
from foodie.orders import Order, OrderQueue


class TestOrderQueue:
    """Test cases for OrderQueue."""

    def setup_method(self):
        self.catalog = Catalog()
        self.burger = self.catalog.get_item(self.catalog.add_item("Burger", "5.50"))
        self.fries = self.catalog.get_item(self.catalog.add_item("Fries", "2.00"))
        self.soda = self.catalog.get_item(self.catalog.add_item("Soda", "1.50"))
        self.queue = OrderQueue()

    # =================== ENQUEUE ===================

    def test_new_queue_is_empty(self):
        assert self.queue.is_empty()
        assert len(self.queue) == 0
        assert self.queue.peek() is None
        assert self.queue.pending() == []

    def test_enqueue_returns_order_referencing_item(self):
        order = self.queue.enqueue(self.fries)

        assert isinstance(order, Order)
        assert order.order_id == 1
        assert order.item is self.fries
        assert order.item_id == 2
        assert order.item_name == "Fries"
        assert order.unit_price == Decimal("2.00")
        assert not order.is_dangling
        assert len(self.queue) == 1

    def test_enqueue_none_raises(self):
        with pytest.raises(ItemNotFoundError, match="Food ID does not exist. Cannot place order."):
            self.queue.enqueue(self.catalog.find_by_id(99))
        assert self.queue.is_empty()

    def test_enqueue_removed_item_raises(self):
        self.catalog.delete_item(self.soda.item_id)

        with pytest.raises(DanglingReferenceError) as exc_info:
            self.queue.enqueue(self.soda)
        assert exc_info.value.item_id == 3
        assert self.queue.is_empty()

    def test_same_item_can_be_ordered_twice(self):
        first = self.queue.enqueue(self.burger)
        second = self.queue.enqueue(self.burger)

        assert first.order_id != second.order_id
        assert self.queue.list_all() == [self.burger, self.burger]

    # =================== DISPATCH ===================

    def test_fifo_order(self):
        for item in (self.soda, self.burger, self.fries, self.soda):
            self.queue.enqueue(item)

        dispatched = [self.queue.dequeue() for _ in range(4)]
        assert dispatched == [self.soda, self.burger, self.fries, self.soda]
        assert self.queue.is_empty()

    def test_interleaved_fifo(self):
        self.queue.enqueue(self.burger)
        self.queue.enqueue(self.fries)
        assert self.queue.dequeue() is self.burger

        self.queue.enqueue(self.soda)
        assert self.queue.dequeue() is self.fries
        assert self.queue.dequeue() is self.soda

    def test_dispatch_returns_order(self):
        placed = self.queue.enqueue(self.burger)
        assert self.queue.dispatch() is placed

    def test_dispatch_empty_raises(self):
        with pytest.raises(EmptyQueueError, match="No orders in the queue to dispatch."):
            self.queue.dispatch()

    def test_empty_after_draining_then_reusable(self):
        self.queue.enqueue(self.burger)
        self.queue.dequeue()
        with pytest.raises(EmptyQueueError):
            self.queue.dequeue()

        self.queue.enqueue(self.fries)
        assert self.queue.peek().item is self.fries
        assert self.queue.dequeue() is self.fries

    def test_dispatch_dangling_order_drops_it(self, caplog):
        self.queue.enqueue(self.fries)
        self.queue.enqueue(self.burger)
        self.catalog.delete_item(self.fries.item_id)

        with caplog.at_level(logging.WARNING, logger="foodie.orders"):
            with pytest.raises(DanglingReferenceError) as exc_info:
                self.queue.dispatch()

        order = exc_info.value.order
        assert order.item_name == "Fries"
        assert order.is_dangling
        assert "was removed from the menu" in caplog.text
        assert len(self.queue) == 1
        assert self.queue.dequeue() is self.burger

    # =================== VIEW ===================

    def test_pending_oldest_first(self):
        self.queue.enqueue(self.soda)
        self.queue.enqueue(self.burger)

        assert [order.item_name for order in self.queue.pending()] == ["Soda", "Burger"]
        assert [order.item for order in self.queue] == [self.soda, self.burger]
        assert self.queue.peek().item is self.soda

    def test_edits_show_through_orders(self):
        order = self.queue.enqueue(self.burger)
        self.catalog.edit_item(self.burger.item_id, "Cheeseburger", "6.50")

        assert order.item.name == "Cheeseburger"
        assert order.item_name == "Burger"

    def test_statistics(self):
        self.queue.enqueue(self.burger)
        self.queue.enqueue(self.soda)
        self.queue.enqueue(self.fries)
        self.catalog.delete_item(self.soda.item_id)

        self.queue.dispatch()
        with pytest.raises(DanglingReferenceError):
            self.queue.dispatch()

        assert self.queue.get_statistics() == {
            "pending": 1,
            "orders_placed": 3,
            "orders_dispatched": 1,
            "orders_dropped": 1,
        }

    def test_str(self):
        self.queue.enqueue(self.burger)
        assert str(self.queue) == "OrderQueue(1 pending)"


class TestScenario:
    """The full add, sort, delete, order walk-through."""

    def test_walkthrough(self):
        catalog = Catalog()
        queue = OrderQueue()

        assert [catalog.add_item(n, p) for n, p in
                [("Burger", "5.50"), ("Fries", "2.00"), ("Soda", "1.50")]] == [1, 2, 3]
        assert [item.name for item in catalog.list_all()] == ["Soda", "Fries", "Burger"]

        catalog.sort_by_price()
        assert [item.name for item in catalog.list_all()] == ["Soda", "Fries", "Burger"]

        catalog.delete_item(2)
        assert catalog.find_by_id(2) is None

        queue.enqueue(catalog.find_by_id(1))
        dispatched = queue.dequeue()
        assert dispatched.item_id == 1
        assert dispatched.name == "Burger"
        assert queue.is_empty()
