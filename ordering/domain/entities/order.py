"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- pydantic
- pydantic_settings
"""
import logging
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from ..enums import OrderStatus
from ..exceptions import DomainValidationError, OrderPriceMismatchError
from ..identity import IdGenerator, default_id_generator
from ..value_objects import (
    CustomerId,
    Money,
    OrderId,
    OrderItemId,
    RestaurantId,
    StreetAddress,
    TrackingId,
)
from .base import identity_equals, identity_hash
from .order_item import OrderItem

if TYPE_CHECKING:
    from .order_builder import OrderBuilder


logger = logging.getLogger(__name__)


class Order:
    """
    Order aggregate root.

    Owns its OrderItems and enforces the pricing invariants:
    - declared price is strictly positive
    - every item's subtotal equals price * quantity
    - sum of item subtotals equals the declared price exactly

    Lifecycle:
        order = Order.builder()...build()   # no validation
        order.initialize_order()            # ids, tracking id, PENDING
        order.validate_order()              # raises DomainValidationError

    Not thread-safe; callers must not run initialize/validate on the same
    instance concurrently.
    """

    def __init__(
        self,
        *,
        customer_id: Optional[CustomerId] = None,
        restaurant_id: Optional[RestaurantId] = None,
        delivery_address: Optional[StreetAddress] = None,
        price: Optional[Money] = None,
        items: Optional[Sequence[OrderItem]] = None,
        id: Optional[OrderId] = None,
        tracking_id: Optional[TrackingId] = None,
        order_status: Optional[OrderStatus] = None,
        failure_messages: Optional[Sequence[str]] = None,
        id_generator: IdGenerator = default_id_generator,
    ):
        self._customer_id = customer_id
        self._restaurant_id = restaurant_id
        self._delivery_address = delivery_address
        self._price = price
        self._items: List[OrderItem] = list(items or [])
        self._id = id
        self._tracking_id = tracking_id
        self._order_status = order_status
        self._failure_messages: List[str] = list(failure_messages or [])
        self._id_generator = id_generator
        # Identity or status supplied from outside (e.g. rebuilt from storage)
        self._reconstructed = (
            id is not None or tracking_id is not None or order_status is not None
        )
        # Number of initialize_order() passes run on this instance
        self._initialization_count = 0
        self._validated = False

    @classmethod
    def builder(cls) -> "OrderBuilder":
        """Start a fluent OrderBuilder."""
        from .order_builder import OrderBuilder

        return OrderBuilder()

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    @property
    def id(self) -> Optional[OrderId]:
        return self._id

    @property
    def customer_id(self) -> Optional[CustomerId]:
        return self._customer_id

    @property
    def restaurant_id(self) -> Optional[RestaurantId]:
        return self._restaurant_id

    @property
    def delivery_address(self) -> Optional[StreetAddress]:
        return self._delivery_address

    @property
    def price(self) -> Optional[Money]:
        return self._price

    @property
    def items(self) -> Tuple[OrderItem, ...]:
        return tuple(self._items)

    @property
    def tracking_id(self) -> Optional[TrackingId]:
        return self._tracking_id

    @property
    def order_status(self) -> Optional[OrderStatus]:
        return self._order_status

    @property
    def failure_messages(self) -> List[str]:
        return list(self._failure_messages)

    # =========================================================================
    # INITIALIZATION
    # =========================================================================

    def initialize_order(self) -> None:
        """
        Assign identity to the order and all of its items.

        Sets a fresh OrderId and TrackingId, moves status to PENDING and
        numbers items 1..N in list order. Never raises; running it twice
        is rejected later by validate_order().
        """
        self._id = OrderId(self._id_generator())
        self._tracking_id = TrackingId(self._id_generator())
        self._order_status = OrderStatus.PENDING
        self._initialization_count += 1
        self._initialize_order_items()

        logger.debug(
            f"Order initialized: {self._id} "
            f"(tracking_id: {self._tracking_id}, items: {len(self._items)})"
        )

    def _initialize_order_items(self) -> None:
        for position, item in enumerate(self._items, start=1):
            item.initialize_order_item(self._id, OrderItemId(position))

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def validate_order(self) -> None:
        """
        Enforce aggregate invariants. Fails fast on the first violation.

        One-shot: a second call after a successful validation is rejected.

        Raises:
            DomainValidationError: If the initialization state is wrong
                (identity or status supplied by the builder, initialized
                twice, or already validated),
                the declared price is not positive, or an item price is
                invalid
            OrderPriceMismatchError: If item subtotals do not sum to the
                declared price
        """
        self._validate_initial_order()
        self._validate_total_price()
        self._validate_items_price()
        self._validated = True

    def _validate_initial_order(self) -> None:
        # Acceptable: nothing set yet, or state set by exactly one
        # initialize_order() pass on an order built without identity,
        # and not validated before
        if (
            self._reconstructed
            or self._validated
            or self._initialization_count > 1
        ):
            raise DomainValidationError(
                "Order is not in correct state for initialization!"
            )

    def _validate_total_price(self) -> None:
        if self._price is None or not self._price.is_greater_than_zero():
            raise DomainValidationError("Total price must be greater than zero!")

    def _validate_items_price(self) -> None:
        items_total = Money.ZERO
        for item in self._items:
            self._validate_item_price(item)
            items_total = items_total.add(item.subtotal)

        if self._price != items_total:
            raise OrderPriceMismatchError(
                declared_total=self._price.amount,
                items_total=items_total.amount,
            )

    def _validate_item_price(self, item: OrderItem) -> None:
        if item.has_invalid_price():
            raise DomainValidationError(
                f"Order item price: {item.price} is not valid "
                f"for product {item.product_id}!"
            )

    # =========================================================================
    # IDENTITY
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        return identity_equals(self, other)

    def __hash__(self) -> int:
        return identity_hash(self)

    def __repr__(self) -> str:
        return (
            f"Order(id={self._id}, status={self._order_status}, "
            f"price={self._price}, items={len(self._items)})"
        )
