"""Domain value objects."""

from .identifiers import (
    BaseId,
    CustomerId,
    OrderId,
    OrderItemId,
    ProductId,
    RestaurantId,
    TrackingId,
)
from .money import Money
from .street_address import StreetAddress

__all__ = [
    "BaseId",
    "CustomerId",
    "Money",
    "OrderId",
    "OrderItemId",
    "ProductId",
    "RestaurantId",
    "StreetAddress",
    "TrackingId",
]
