"""
Tests for system.py and commands.py modules.
"""
from decimal import Decimal

import pytest

from foodie.commands import COMMAND_LABELS, Command, CommandResult
from foodie.core.config import Settings
from foodie.core.exceptions import InvalidInputError
from foodie.system import FoodDeliverySystem


class TestCommand:
    """Test cases for Command."""

    @pytest.mark.parametrize("choice, expected", [
        ("1", Command.ADD_ITEM),
        (" 7 ", Command.PLACE_ORDER),
        (10, Command.EXIT),
    ])
    def test_parse(self, choice, expected):
        assert Command.parse(choice) is expected

    @pytest.mark.parametrize("choice", ["0", "11", "abc", "", "2.5"])
    def test_parse_rejects_bad_choice(self, choice):
        with pytest.raises(InvalidInputError, match="Please select an option from 1 to 10"):
            Command.parse(choice)

    def test_parse_passes_commands_through(self):
        assert Command.parse(Command.EXIT) is Command.EXIT

    def test_every_command_has_a_label(self):
        assert set(COMMAND_LABELS) == set(Command)
        assert Command.SORT_BY_PRICE.label == "Sort Menu by Price (using Merge Sort)"

    def test_failure_result(self):
        result = CommandResult.failure(Command.ADD_ITEM, InvalidInputError("bad"))

        assert result.ok is False
        assert result.message == "bad"
        assert result.error == "InvalidInput"


class TestFoodDeliverySystem:
    """Test cases for FoodDeliverySystem.execute."""

    def setup_method(self):
        self.system = FoodDeliverySystem()

    def add(self, name: str, price: str) -> CommandResult:
        return self.system.execute(Command.ADD_ITEM, name=name, price=price)

    def add_sample_menu(self):
        self.add("Burger", "5.50")
        self.add("Fries", "2.00")
        self.add("Soda", "1.50")

    # =================== MENU COMMANDS ===================

    def test_add_item(self):
        result = self.add("Burger", "5.50")

        assert result.ok
        assert result.command is Command.ADD_ITEM
        assert result.item.item_id == 1
        assert result.message == 'Food item "Burger" added successfully with ID 1!'

    def test_add_invalid_price(self):
        result = self.add("Burger", "lots")

        assert not result.ok
        assert result.error == "InvalidInput"
        assert self.system.catalog.is_empty()

    def test_edit_item(self):
        self.add_sample_menu()
        result = self.system.execute(Command.EDIT_ITEM, item_id="2", name="Wedges", price="2.40")

        assert result.ok
        assert result.message == "Food item updated successfully!"
        assert result.item.name == "Wedges"
        assert result.item.price == Decimal("2.40")

    def test_edit_missing_item(self):
        result = self.system.execute(Command.EDIT_ITEM, item_id=5, name="x", price="1")

        assert not result.ok
        assert result.error == "NotFound"

    def test_delete_item(self):
        self.add_sample_menu()
        result = self.system.execute(Command.DELETE_ITEM, item_id=2)

        assert result.ok
        assert result.message == "Food item with ID 2 deleted successfully."
        assert self.system.catalog.find_by_id(2) is None

    def test_delete_from_empty_menu(self):
        result = self.system.execute(Command.DELETE_ITEM, item_id=1)

        assert not result.ok
        assert result.error == "EmptyCatalog"
        assert result.message == "Menu is empty. Cannot delete."

    def test_delete_reports_stale_orders(self):
        self.add_sample_menu()
        self.system.execute(Command.PLACE_ORDER, item_id=1)
        self.system.execute(Command.PLACE_ORDER, item_id=1)

        result = self.system.execute(Command.DELETE_ITEM, item_id=1)
        assert "2 pending order(s) now refer to a removed item." in result.message

    def test_show_menu(self):
        empty = self.system.execute(Command.SHOW_MENU)
        assert empty.ok
        assert empty.items == []
        assert empty.message == "The menu is currently empty."

        self.add_sample_menu()
        result = self.system.execute(Command.SHOW_MENU)
        assert [item.name for item in result.items] == ["Soda", "Fries", "Burger"]
        assert result.message == ""

    def test_sort_by_price(self):
        self.add("Steak", "20.00")
        self.add("Tea", "1.00")
        self.add("Rice", "3.00")

        result = self.system.execute(Command.SORT_BY_PRICE)
        assert result.message == "Menu has been sorted by price using Merge Sort."
        assert [item.name for item in result.items] == ["Tea", "Rice", "Steak"]

    def test_sort_too_few_items(self):
        self.add("Tea", "1.00")
        result = self.system.execute(Command.SORT_BY_PRICE)

        assert result.ok
        assert result.message == "Menu is already sorted or has too few items to sort."

    def test_search(self):
        self.add_sample_menu()

        found = self.system.execute(Command.SEARCH_BY_NAME, query="ies")
        assert [item.name for item in found.items] == ["Fries"]
        assert found.message == 'Found 1 item(s) matching "ies".'

        missing = self.system.execute(Command.SEARCH_BY_NAME, query="Pizza")
        assert missing.ok
        assert missing.items == []
        assert missing.message == "No food items found matching your search term."

    # =================== ORDER COMMANDS ===================

    def test_place_and_dispatch(self):
        self.add_sample_menu()

        placed = self.system.execute(Command.PLACE_ORDER, item_id="1")
        assert placed.ok
        assert placed.message == 'Order for "Burger" has been placed in the queue.'

        orders = self.system.execute(Command.SHOW_ORDERS)
        assert [order.item_name for order in orders.orders] == ["Burger"]

        dispatched = self.system.execute(Command.DISPATCH_ORDER)
        assert dispatched.ok
        assert dispatched.item.name == "Burger"
        assert dispatched.message == 'Dispatched order for "Burger".'
        assert self.system.order_queue.is_empty()

    def test_place_order_unknown_id(self):
        result = self.system.execute(Command.PLACE_ORDER, item_id=42)

        assert not result.ok
        assert result.error == "NotFound"
        assert result.message == "Food ID does not exist. Cannot place order."

    def test_show_empty_orders(self):
        result = self.system.execute(Command.SHOW_ORDERS)
        assert result.message == "The order queue is currently empty."

    def test_dispatch_empty_queue(self):
        result = self.system.execute(Command.DISPATCH_ORDER)

        assert not result.ok
        assert result.error == "EmptyQueue"

    def test_dispatch_dangling_order(self):
        self.add_sample_menu()
        self.system.execute(Command.PLACE_ORDER, item_id=3)
        self.system.execute(Command.DELETE_ITEM, item_id=3)

        result = self.system.execute(Command.DISPATCH_ORDER)

        assert not result.ok
        assert result.error == "DanglingReference"
        assert result.order.item_name == "Soda"
        assert self.system.order_queue.is_empty()

    # =================== DISPATCHING ===================

    def test_exit(self):
        result = self.system.execute(Command.EXIT)
        assert result.ok
        assert result.exit is True

    def test_accepts_plain_int_command(self):
        assert self.system.execute(4).command is Command.SHOW_MENU

    @pytest.mark.parametrize("command", [42, 0, "abc", None])
    def test_unknown_command_becomes_failure(self, command):
        result = self.system.execute(command)

        assert not result.ok
        assert result.command is None
        assert result.error == "InvalidInput"
        assert "Please select an option from 1 to 10" in result.message

    def test_bad_arguments_become_failure(self):
        result = self.system.execute(Command.ADD_ITEM, name="Tea")

        assert not result.ok
        assert result.error == "InvalidInput"
        assert "Bad arguments for ADD_ITEM" in result.message

    def test_unknown_item_id_text(self):
        result = self.system.execute(Command.DELETE_ITEM, item_id="two")
        assert result.error == "InvalidInput"

    def test_from_settings(self):
        system = FoodDeliverySystem.from_settings(
            Settings(_env_file=None, hash_bucket_count=11, auto_resize=True))

        assert system.catalog.index.bucket_count == 11
        assert system.catalog.index.auto_resize is True

    def test_system_info(self):
        self.add_sample_menu()
        self.system.execute(Command.PLACE_ORDER, item_id=1)

        info = self.system.get_system_info()
        assert info["catalog"]["items"] == 3
        assert info["catalog"]["next_id"] == 4
        assert info["catalog"]["consistent"] is True
        assert info["hash_index"]["buckets"] == 47
        assert info["order_queue"]["pending"] == 1
