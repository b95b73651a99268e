import inspect
import logging
from typing import Any, Callable, Optional

from .catalog import Catalog
from .catalog.validation import parse_item_id
from .commands import Command, CommandResult
from .core.config import Settings
from .core.exceptions import DanglingReferenceError, FoodieException, InvalidInputError
from .orders import OrderQueue

logger = logging.getLogger(__name__)


class FoodDeliverySystem:
    """
    Facade over the menu catalog and the order queue.

    Front ends talk to the core through :meth:`execute`, which takes a
    :class:`Command` plus keyword arguments and always returns a
    :class:`CommandResult`; domain errors are turned into failed results
    instead of propagating.

    Architecture:
    ```
    FoodDeliverySystem
    ├── Catalog (linked list + hash index)
    └── OrderQueue (FIFO of orders referencing catalog items)
    ```
    """

    def __init__(self, catalog: Optional[Catalog] = None,
                 order_queue: Optional[OrderQueue] = None):
        self.catalog = catalog if catalog is not None else Catalog()
        self.order_queue = order_queue if order_queue is not None else OrderQueue()

        self._handlers: dict[Command, Callable[..., CommandResult]] = {
            Command.ADD_ITEM: self._add_item,
            Command.EDIT_ITEM: self._edit_item,
            Command.DELETE_ITEM: self._delete_item,
            Command.SHOW_MENU: self._show_menu,
            Command.SORT_BY_PRICE: self._sort_by_price,
            Command.SEARCH_BY_NAME: self._search_by_name,
            Command.PLACE_ORDER: self._place_order,
            Command.SHOW_ORDERS: self._show_orders,
            Command.DISPATCH_ORDER: self._dispatch_order,
            Command.EXIT: self._exit,
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> 'FoodDeliverySystem':
        """Build a system whose hash index follows ``settings``."""
        catalog = Catalog(
            bucket_count=settings.hash_bucket_count,
            auto_resize=settings.auto_resize,
            max_load_factor=settings.max_load_factor,
        )
        return cls(catalog=catalog)

    def execute(self, command: Command, **arguments: Any) -> CommandResult:
        """
        Run one command.

        Args:
            command: What to do
            **arguments: Command arguments (``name``, ``price``, ``item_id``,
                ``query``), see the table in :class:`Command`

        Returns:
            The command's result; ``ok`` is False when it failed. An
            unknown command gives a failed result whose ``command`` is None
        """
        try:
            command = Command.parse(command)
        except InvalidInputError as e:
            logger.debug("Rejected command %r", command)
            return CommandResult.failure(None, e)

        handler = self._handlers[command]
        try:
            inspect.signature(handler).bind(**arguments)
        except TypeError as e:
            return CommandResult.failure(
                command, InvalidInputError(f"Bad arguments for {command.name}: {e}"))

        try:
            result = handler(**arguments)
        except DanglingReferenceError as e:
            result = CommandResult.failure(command, e)
            result.order = e.order
        except FoodieException as e:
            result = CommandResult.failure(command, e)

        logger.debug("%s -> ok=%s %s", command.name, result.ok, result.message)
        return result

    def _add_item(self, name: Any, price: Any) -> CommandResult:
        item_id = self.catalog.add_item(name, price)
        item = self.catalog.get_item(item_id)
        return CommandResult(
            Command.ADD_ITEM, True,
            f"Food item \"{item.name}\" added successfully with ID {item_id}!",
            item=item)

    def _edit_item(self, item_id: Any, name: Any, price: Any) -> CommandResult:
        item = self.catalog.edit_item(parse_item_id(item_id), name, price)
        return CommandResult(Command.EDIT_ITEM, True,
                             "Food item updated successfully!", item=item)

    def _delete_item(self, item_id: Any) -> CommandResult:
        item = self.catalog.delete_item(parse_item_id(item_id))
        message = f"Food item with ID {item.item_id} deleted successfully."

        stale = sum(1 for order in self.order_queue if order.item is item)
        if stale:
            message += f" {stale} pending order(s) now refer to a removed item."
        return CommandResult(Command.DELETE_ITEM, True, message, item=item)

    def _show_menu(self) -> CommandResult:
        items = self.catalog.list_all()
        message = "" if items else "The menu is currently empty."
        return CommandResult(Command.SHOW_MENU, True, message, items=items)

    def _sort_by_price(self) -> CommandResult:
        if self.catalog.sort_by_price():
            message = "Menu has been sorted by price using Merge Sort."
        else:
            message = "Menu is already sorted or has too few items to sort."
        return CommandResult(Command.SORT_BY_PRICE, True, message,
                             items=self.catalog.list_all())

    def _search_by_name(self, query: str) -> CommandResult:
        matches = list(self.catalog.search_by_name(query))
        if matches:
            message = f"Found {len(matches)} item(s) matching \"{query}\"."
        else:
            message = "No food items found matching your search term."
        return CommandResult(Command.SEARCH_BY_NAME, True, message, items=matches)

    def _place_order(self, item_id: Any) -> CommandResult:
        order = self.order_queue.enqueue(self.catalog.find_by_id(parse_item_id(item_id)))
        return CommandResult(
            Command.PLACE_ORDER, True,
            f"Order for \"{order.item_name}\" has been placed in the queue.",
            item=order.item, order=order)

    def _show_orders(self) -> CommandResult:
        orders = self.order_queue.pending()
        message = "" if orders else "The order queue is currently empty."
        return CommandResult(Command.SHOW_ORDERS, True, message, orders=orders)

    def _dispatch_order(self) -> CommandResult:
        order = self.order_queue.dispatch()
        return CommandResult(
            Command.DISPATCH_ORDER, True,
            f"Dispatched order for \"{order.item.name}\".",
            item=order.item, order=order)

    def _exit(self) -> CommandResult:
        return CommandResult(
            Command.EXIT, True,
            "Thank you for using Foodie Express Delivery System!",
            exit=True)

    def get_system_info(self) -> dict:
        """Summary of the catalog, its index and the queue, for diagnostics."""
        index = self.catalog.index
        return {
            "catalog": {
                "items": len(self.catalog),
                "next_id": self.catalog.next_id,
                "consistent": self.catalog.check_consistency(),
            },
            "hash_index": {
                "entries": len(index),
                "buckets": index.bucket_count,
                "load_factor": index.load_factor,
                "longest_chain": max(index.chain_lengths(), default=0),
                "resizes": index.num_resizes,
            },
            "order_queue": self.order_queue.get_statistics(),
        }

    def __str__(self) -> str:
        return f"FoodDeliverySystem({self.catalog}, {self.order_queue})"
