"""Domain layer - pure domain models and interfaces."""

from .entities import Order, OrderBuilder, OrderItem
from .enums import OrderStatus
from .exceptions import DomainException, DomainValidationError, OrderPriceMismatchError
from .repositories import OrderRepository
from .value_objects import (
    CustomerId,
    Money,
    OrderId,
    OrderItemId,
    ProductId,
    RestaurantId,
    StreetAddress,
    TrackingId,
)

__all__ = [
    "CustomerId",
    "DomainException",
    "DomainValidationError",
    "Money",
    "Order",
    "OrderBuilder",
    "OrderId",
    "OrderItem",
    "OrderItemId",
    "OrderPriceMismatchError",
    "OrderRepository",
    "OrderStatus",
    "ProductId",
    "RestaurantId",
    "StreetAddress",
    "TrackingId",
]
