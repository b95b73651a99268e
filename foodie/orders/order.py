import time
from dataclasses import dataclass, field
from decimal import Decimal

from ..catalog.menu_item import MenuItem


@dataclass(frozen=True)
class Order:
    """
    A pending delivery order.

    ``item`` is a reference to the live catalog entry, so edits to the
    menu show up in the queue. The ``item_*``/``unit_price`` fields are
    a snapshot taken when the order was placed, used to describe the
    order if the item is later deleted from the menu.
    """
    order_id: int
    item: MenuItem
    item_id: int
    item_name: str
    unit_price: Decimal
    placed_at: float = field(default_factory=time.time)

    @classmethod
    def for_item(cls, order_id: int, item: MenuItem) -> 'Order':
        """Create an order for ``item``, snapshotting its current fields."""
        return cls(
            order_id=order_id,
            item=item,
            item_id=item.item_id,
            item_name=item.name,
            unit_price=item.price,
        )

    @property
    def is_dangling(self) -> bool:
        """True once the referenced item has been deleted from the menu."""
        return self.item.removed

