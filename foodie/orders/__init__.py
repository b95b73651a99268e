from .order import Order
from .order_queue import OrderQueue, OrderNode

__all__ = ["Order", "OrderQueue", "OrderNode"]
