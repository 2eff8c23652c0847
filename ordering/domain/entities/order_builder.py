"""
Order construction.

OrderDraft is plain mutable configuration, build_order() is the single
constructor that copies it into an Order, and OrderBuilder is the fluent
facade over both. Nothing here validates; brand-new orders go through
initialize_order() + validate_order(), reconstructed ones do not.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ..enums import OrderStatus
from ..identity import IdGenerator, default_id_generator
from ..value_objects import (
    CustomerId,
    Money,
    OrderId,
    RestaurantId,
    StreetAddress,
    TrackingId,
)
from .order import Order
from .order_item import OrderItem


@dataclass
class OrderDraft:
    """Field values for an Order that has not been built yet."""

    customer_id: Optional[CustomerId] = None
    restaurant_id: Optional[RestaurantId] = None
    delivery_address: Optional[StreetAddress] = None
    price: Optional[Money] = None
    items: List[OrderItem] = field(default_factory=list)
    id: Optional[OrderId] = None
    tracking_id: Optional[TrackingId] = None
    order_status: Optional[OrderStatus] = None
    failure_messages: List[str] = field(default_factory=list)
    id_generator: IdGenerator = default_id_generator


def build_order(draft: OrderDraft) -> Order:
    """
    Copy a draft into a new Order.

    The item and failure-message lists are copied, so later edits to the
    draft do not leak into the order. Items themselves are shared: the
    order assigns their identities during initialization.
    """
    return Order(
        customer_id=draft.customer_id,
        restaurant_id=draft.restaurant_id,
        delivery_address=draft.delivery_address,
        price=draft.price,
        items=list(draft.items),
        id=draft.id,
        tracking_id=draft.tracking_id,
        order_status=draft.order_status,
        failure_messages=list(draft.failure_messages),
        id_generator=draft.id_generator,
    )


class OrderBuilder:
    """Fluent builder: every setter stores one field and returns self."""

    def __init__(self):
        self._draft = OrderDraft()

    def id(self, value: Optional[OrderId]) -> "OrderBuilder":
        self._draft.id = value
        return self

    def customer_id(self, value: Optional[CustomerId]) -> "OrderBuilder":
        self._draft.customer_id = value
        return self

    def restaurant_id(self, value: Optional[RestaurantId]) -> "OrderBuilder":
        self._draft.restaurant_id = value
        return self

    def delivery_address(self, value: Optional[StreetAddress]) -> "OrderBuilder":
        self._draft.delivery_address = value
        return self

    def price(self, value: Optional[Money]) -> "OrderBuilder":
        self._draft.price = value
        return self

    def items(self, value: List[OrderItem]) -> "OrderBuilder":
        self._draft.items = list(value)
        return self

    def tracking_id(self, value: Optional[TrackingId]) -> "OrderBuilder":
        self._draft.tracking_id = value
        return self

    def order_status(self, value: Optional[OrderStatus]) -> "OrderBuilder":
        self._draft.order_status = value
        return self

    def failure_messages(self, value: List[str]) -> "OrderBuilder":
        self._draft.failure_messages = list(value)
        return self

    def id_generator(self, value: IdGenerator) -> "OrderBuilder":
        self._draft.id_generator = value
        return self

    def build(self) -> Order:
        return build_order(self._draft)
