#!/usr/bin/env python3
"""
Menu and order queue walk-through for Foodie Express.

Runs the classic scenario step by step without any prompts:
- Adding items (ids are assigned automatically, newest first)
- Sorting the menu by price with merge sort
- Deleting an item and checking the hash index
- Placing and dispatching orders, including one for a deleted item
- Exporting the remaining menu as JSON

Run with: python examples/menu_example.py
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from foodie import Catalog, OrderQueue
from foodie.core.exceptions import DanglingReferenceError, EmptyQueueError

console = Console()


def print_header(title: str, subtitle: str = ""):
    full_title = f"[bold blue]{title}[/bold blue]"
    if subtitle:
        full_title += f"\n[dim]{subtitle}[/dim]"
    console.print(Panel(full_title, style="bright_blue", box=box.DOUBLE, padding=(1, 2)))


def print_step(step_num: int, title: str):
    console.print(f"\n[bold yellow]Step {step_num}: {title}[/bold yellow]")


def print_success(message: str):
    console.print(f"[bold green]✓[/bold green] {message}")


def print_warning(message: str):
    console.print(f"[bold yellow]⚠[/bold yellow] {message}")


def show_menu(catalog: Catalog, title: str):
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name")
    table.add_column("Price (RM)", justify="right", style="green")
    for item in catalog:
        table.add_row(str(item.item_id), item.name, f"{item.price:.2f}")
    console.print(table)


def main():
    print_header("FOODIE EXPRESS", "Menu catalog and delivery queue walk-through")
    catalog = Catalog()
    queue = OrderQueue()

    print_step(1, "Add items")
    for name, price in [("Burger", "5.50"), ("Fries", "2.00"), ("Soda", "1.50")]:
        item_id = catalog.add_item(name, price)
        print_success(f"{name} added with ID {item_id}")
    show_menu(catalog, "Menu (newest first)")

    print_step(2, "Sort by price")
    catalog.sort_by_price()
    show_menu(catalog, "Menu (by price)")

    print_step(3, "Delete Fries")
    catalog.delete_item(2)
    print_success(f"find_by_id(2) -> {catalog.find_by_id(2)}")
    print_success(f"List and index consistent: {catalog.check_consistency()}")

    print_step(4, "Place and dispatch an order")
    queue.enqueue(catalog.find_by_id(1))
    print_success(f"Dispatched: {queue.dequeue()}")

    print_step(5, "Order an item, then delete it")
    queue.enqueue(catalog.find_by_id(3))
    catalog.delete_item(3)
    try:
        queue.dispatch()
    except DanglingReferenceError as e:
        print_warning(str(e))

    try:
        queue.dispatch()
    except EmptyQueueError as e:
        print_warning(str(e))

    print_step(6, "Export what is left")
    console.print_json(data=[item.to_dict() for item in catalog])
    console.print(queue.get_statistics())


if __name__ == "__main__":
    main()
