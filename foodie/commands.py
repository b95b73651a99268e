from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

from .catalog.menu_item import MenuItem
from .core.exceptions import InvalidInputError
from .orders.order import Order


class Command(IntEnum):
    """
    Commands understood by :meth:`FoodDeliverySystem.execute`.

    Values match the numbered choices of the console menu.
    """
    ADD_ITEM = 1
    EDIT_ITEM = 2
    DELETE_ITEM = 3
    SHOW_MENU = 4
    SORT_BY_PRICE = 5
    SEARCH_BY_NAME = 6
    PLACE_ORDER = 7
    SHOW_ORDERS = 8
    DISPATCH_ORDER = 9
    EXIT = 10

    @property
    def label(self) -> str:
        return COMMAND_LABELS[self]

    @classmethod
    def parse(cls, choice: Any) -> 'Command':
        """
        Turn a menu choice (``"7"``, ``7``) into a Command.

        Raises:
            InvalidInputError: If the choice is not a number from 1 to 10
        """
        if isinstance(choice, cls):
            return choice
        try:
            return cls(int(str(choice).strip()))
        except ValueError:
            raise InvalidInputError(
                f"Invalid choice {choice!r}. Please select an option from 1 to {len(cls)}.",
                choice)


COMMAND_LABELS = {
    Command.ADD_ITEM: "Add New Food Item",
    Command.EDIT_ITEM: "Edit Food Item by ID",
    Command.DELETE_ITEM: "Delete Food Item by ID",
    Command.SHOW_MENU: "Display Full Menu",
    Command.SORT_BY_PRICE: "Sort Menu by Price (using Merge Sort)",
    Command.SEARCH_BY_NAME: "Search Food by Name (using Linear Search)",
    Command.PLACE_ORDER: "Place New Order into Queue",
    Command.SHOW_ORDERS: "View All Pending Orders",
    Command.DISPATCH_ORDER: "Dispatch Next Order from Queue",
    Command.EXIT: "Exit",
}


@dataclass
class CommandResult:
    """Outcome of one command, ready to be rendered by a front end."""
    command: Optional[Command]
    ok: bool
    message: str = ""
    item: Optional[MenuItem] = None
    items: list[MenuItem] = field(default_factory=list)
    order: Optional[Order] = None
    orders: list[Order] = field(default_factory=list)
    error: Optional[str] = None
    exit: bool = False

    @classmethod
    def failure(cls, command: Optional[Command], error: Exception) -> 'CommandResult':
        return cls(
            command=command,
            ok=False,
            message=str(error),
            error=getattr(error, "kind", type(error).__name__),
        )
