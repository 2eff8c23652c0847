"""Order line item entity."""
from typing import Optional

from ..value_objects import Money, OrderId, OrderItemId, ProductId
from .base import identity_equals, identity_hash


class OrderItem:
    """
    Line item owned by exactly one Order.

    Created fully priced by the caller; ``id`` and ``order_id`` stay
    unset until the owning order runs initialize_order(). All fields are
    read-only; identity changes only through initialize_order_item().
    """

    def __init__(
        self,
        *,
        product_id: ProductId,
        quantity: int,
        price: Money,
        subtotal: Money,
        id: Optional[OrderItemId] = None,
        order_id: Optional[OrderId] = None,
    ):
        self._product_id = product_id
        self._quantity = quantity
        self._price = price
        self._subtotal = subtotal
        self._id = id
        self._order_id = order_id

    @property
    def id(self) -> Optional[OrderItemId]:
        return self._id

    @property
    def order_id(self) -> Optional[OrderId]:
        return self._order_id

    @property
    def product_id(self) -> ProductId:
        return self._product_id

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def price(self) -> Money:
        return self._price

    @property
    def subtotal(self) -> Money:
        return self._subtotal

    def initialize_order_item(self, order_id: OrderId, order_item_id: OrderItemId) -> None:
        """Attach the item to its order. Called only by Order.initialize_order()."""
        self._order_id = order_id
        self._id = order_item_id

    def has_invalid_price(self) -> bool:
        """True exactly when subtotal != price * quantity."""
        return self._price.multiply(self._quantity) != self._subtotal

    def is_price_valid(self) -> bool:
        return not self.has_invalid_price()

    def __eq__(self, other: object) -> bool:
        return identity_equals(self, other)

    def __hash__(self) -> int:
        return identity_hash(self)

    def __repr__(self) -> str:
        return (
            f"OrderItem(id={self._id}, product_id={self._product_id}, "
            f"quantity={self._quantity}, price={self._price}, subtotal={self._subtotal})"
        )
