from dataclasses import dataclass
from decimal import Decimal


@dataclass(eq=False)
class MenuItem:
    """
    A food item on the menu.

    🍔 Entries are owned by the :class:`~foodie.catalog.catalog.Catalog`;
    the hash index and the order queue hold references to the same
    object, never copies. Equality is therefore identity.
    """

    """🔢 Catalog-assigned identifier, unique and never reused"""
    item_id: int

    """🏷️ Display name"""
    name: str

    """💰 Non-negative price with two decimal places"""
    price: Decimal

    """🪦 Set by the catalog once the item has been deleted"""
    removed: bool = False

    def display_price(self, currency: str = "RM") -> str:
        """
        💵 Format the price for display, e.g. ``"RM 5.50"``.

        Args:
            currency: Label printed before the amount

        Returns:
            str: Formatted price
        """
        return f"{currency} {self.price:.2f}"

    def to_dict(self) -> dict:
        """
        📦 Convert the item to a plain dictionary.

        Returns:
            dict: Dictionary with the price rendered as a string
        """
        return {
            "item_id": self.item_id,
            "name": self.name,
            "price": f"{self.price:.2f}",
            "removed": self.removed,
        }

    def __str__(self) -> str:
        return f"MenuItem(id={self.item_id}, name={self.name!r}, price={self.price:.2f})"
