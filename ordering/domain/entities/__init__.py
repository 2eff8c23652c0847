"""Domain entities."""

from .base import HasIdentity, identity_equals, identity_hash
from .order import Order
from .order_builder import OrderBuilder, OrderDraft, build_order
from .order_item import OrderItem

__all__ = [
    "HasIdentity",
    "Order",
    "OrderBuilder",
    "OrderDraft",
    "OrderItem",
    "build_order",
    "identity_equals",
    "identity_hash",
]
