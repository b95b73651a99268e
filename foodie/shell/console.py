"""
Interactive console front end.

Renders the numbered menu with Rich, reads and validates input, and
hands every action to :class:`FoodDeliverySystem` as a :class:`Command`.
Nothing in here touches the catalog or the queue directly except for
read-only lookups used to drive prompts.
"""
from decimal import Decimal
from typing import Callable, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

from ..catalog.menu_item import MenuItem
from ..catalog.validation import parse_count, parse_item_id, parse_name, parse_price
from ..commands import Command, CommandResult
from ..core.config import Settings
from ..core.exceptions import InvalidInputError, ItemNotFoundError
from ..orders.order import Order
from ..system import FoodDeliverySystem

BANNER_TITLE = "FOODIE EXPRESS DELIVERY SYSTEM"

MENU_SECTIONS = [
    ("Menu Administration", [
        Command.ADD_ITEM, Command.EDIT_ITEM, Command.DELETE_ITEM,
        Command.SHOW_MENU, Command.SORT_BY_PRICE, Command.SEARCH_BY_NAME,
    ]),
    ("Order System", [
        Command.PLACE_ORDER, Command.SHOW_ORDERS, Command.DISPATCH_ORDER,
    ]),
    ("", [Command.EXIT]),
]


class ConsoleShell:
    """Menu-driven console session over one :class:`FoodDeliverySystem`."""

    def __init__(self, system: FoodDeliverySystem, settings: Optional[Settings] = None,
                 console: Optional[Console] = None,
                 input_func: Optional[Callable[[str], str]] = None):
        """
        Args:
            system: The catalog and queue to operate on
            settings: Currency and screen options; defaults are used if omitted
            console: Rich console to render to
            input_func: Reads one line given a prompt; defaults to console.input
        """
        self.system = system
        self.settings = settings or Settings()
        self.console = console or Console()
        self._input = input_func or self.console.input

    @property
    def currency(self) -> str:
        return self.settings.currency

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def run(self, skip_setup: bool = False) -> int:
        """
        Run the session until the user exits or input ends.

        Returns:
            Process exit status (always 0)
        """
        try:
            self.show_banner()
            if not skip_setup:
                self.initial_setup()

            while True:
                if self.settings.clear_screen:
                    self.console.clear()
                self.show_main_menu()

                try:
                    command = Command.parse(self._input("Enter your choice: "))
                except InvalidInputError as e:
                    self.print_error(str(e))
                    self.pause()
                    continue

                result = self.handle(command)
                self.render(result)
                if result.exit:
                    self.console.print("Exiting system. Goodbye!")
                    return 0
                self.pause()

        except (KeyboardInterrupt, EOFError):
            self.console.print("\n[bold red]👋[/bold red] Input ended. Goodbye!")
            return 0

    def initial_setup(self) -> None:
        """Ask how many items to add up front and collect them."""
        self.console.print(Rule())
        count = self.ask(
            "How many food items would you like to add initially? ", parse_count,
            "Invalid input. Please enter a non-negative number.")

        if count == 0:
            return

        self.console.print(
            f"\nAdding {count} food items with auto-assigned IDs "
            f"({self.system.catalog.next_id}, {self.system.catalog.next_id + 1}, ...):")
        for i in range(count):
            self.console.print(f"\n[bold]--- Adding Food Item {i + 1} ---[/bold]")
            self.render(self.handle(Command.ADD_ITEM))

        self.print_success(f"Initial setup complete! {count} food items added.")
        self.pause()

    def handle(self, command: Command) -> CommandResult:
        """Collect the arguments a command needs and execute it."""
        execute = self.system.execute

        if command is Command.ADD_ITEM:
            self.print_info(
                f"Food ID {self.system.catalog.next_id} assigned automatically.")
            name = self.ask("Enter Food Name: ", parse_name, "Name must not be empty.")
            price = self.ask(f"Enter Price ({self.currency}): ", parse_price,
                             "Invalid input. Please enter a numeric price.")
            return execute(command, name=name, price=price)

        if command is Command.EDIT_ITEM:
            item_id = self.ask_item_id("Enter Food ID to edit: ")
            try:
                item = self.system.catalog.get_item(item_id)
            except ItemNotFoundError as e:
                return CommandResult.failure(command, e)
            name = self.ask(f"Current Name: {escape(item.name)}. Enter new name: ",
                            parse_name, "Name must not be empty.")
            price = self.ask(
                f"Current Price: {item.display_price(self.currency)}. Enter new price: ",
                parse_price, "Invalid input. Please enter a numeric price.")
            return execute(command, item_id=item_id, name=name, price=price)

        if command is Command.DELETE_ITEM:
            return execute(command, item_id=self.ask_item_id("Enter Food ID to delete: "))

        if command is Command.SEARCH_BY_NAME:
            return execute(command, query=self._input("Enter food name to search for: "))

        if command is Command.PLACE_ORDER:
            return execute(command, item_id=self.ask_item_id("Enter Food ID to place an order: "))

        return execute(command)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def ask(self, prompt: str, parse: Callable, error_message: str):
        """Prompt until ``parse`` accepts the answer; return the parsed value."""
        while True:
            raw = self._input(prompt)
            try:
                return parse(raw)
            except InvalidInputError:
                self.print_error(error_message)

    def ask_item_id(self, prompt: str) -> int:
        return self.ask(prompt, parse_item_id, "Invalid input. Please enter a numeric ID.")

    def pause(self) -> None:
        self._input("\nPress Enter to continue...")

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def show_banner(self) -> None:
        self.console.print(Panel(
            f"[bold blue]{BANNER_TITLE}[/bold blue]\n"
            f"[dim]Welcome to the Food Delivery Management System![/dim]",
            style="bright_blue",
            box=box.DOUBLE,
            padding=(1, 2),
        ))

    def show_main_menu(self) -> None:
        table = Table(box=box.SIMPLE, show_header=False,
                      title="[bold]FOOD DELIVERY MANAGEMENT SYSTEM[/bold]")
        table.add_column("No.", justify="right", style="bold cyan")
        table.add_column("Action")

        for section, commands in MENU_SECTIONS:
            if section:
                table.add_row("", f"[bold yellow]{section}[/bold yellow]")
            for command in commands:
                table.add_row(f"{command.value}.", command.label)
        self.console.print(table)

    def render(self, result: CommandResult) -> None:
        """Print a command result: tables for listings, then the message."""
        if result.command in (Command.SHOW_MENU, Command.SORT_BY_PRICE) and result.items:
            self.console.print(self.menu_table(
                result.items, "FULL FOOD MENU", total=self.system.catalog.total_value()))
        elif result.command is Command.SEARCH_BY_NAME and result.items:
            self.console.print(self.menu_table(result.items, "Search Results"))
        elif result.command is Command.SHOW_ORDERS and result.orders:
            self.console.print(self.orders_table(result.orders))

        if not result.message:
            return
        if result.ok:
            self.print_success(result.message)
        else:
            self.print_error(result.message)

    def menu_table(self, items: list[MenuItem], title: str,
                   total: Optional[Decimal] = None) -> Table:
        table = Table(title=title, box=box.ROUNDED)
        if total is not None:
            table.caption = f"Menu total: {self.currency} {total:.2f}"
        table.add_column("ID", justify="right", style="cyan")
        table.add_column("Name")
        table.add_column(f"Price ({self.currency})", justify="right", style="green")
        for item in items:
            table.add_row(str(item.item_id), escape(item.name), f"{item.price:.2f}")
        return table

    def orders_table(self, orders: list[Order]) -> Table:
        table = Table(title="Pending Delivery Queue", box=box.ROUNDED)
        table.add_column("#", justify="right")
        table.add_column("Order", justify="right", style="cyan")
        table.add_column("Food ID", justify="right")
        table.add_column("Name")
        for position, order in enumerate(orders, 1):
            name = escape(order.item.name)
            if order.is_dangling:
                name = f"[strike]{escape(order.item_name)}[/strike] [red](removed from menu)[/red]"
            table.add_row(str(position), str(order.order_id), str(order.item_id), name)
        return table

    def print_success(self, message: str) -> None:
        self.console.print(f"[bold green]✓[/bold green] {escape(message)}")

    def print_info(self, message: str) -> None:
        self.console.print(f"[bold cyan]ℹ[/bold cyan] {escape(message)}")

    def print_error(self, message: str) -> None:
        self.console.print(f"[bold red]✗[/bold red] {escape(message)}")
