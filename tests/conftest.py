"""Shared fixtures for ordering tests."""
from decimal import Decimal
from typing import Callable, List, Optional
from uuid import UUID, uuid4

import pytest

from ordering.domain.entities.order import Order
from ordering.domain.entities.order_item import OrderItem
from ordering.domain.identity import SequentialIdGenerator
from ordering.domain.value_objects import (
    CustomerId,
    Money,
    ProductId,
    RestaurantId,
    StreetAddress,
)


def _make_item(price: str, quantity: int = 1, subtotal: Optional[str] = None) -> OrderItem:
    """Build an item; subtotal defaults to price * quantity."""
    unit_price = Money(amount=Decimal(price))
    return OrderItem(
        product_id=ProductId(uuid4()),
        quantity=quantity,
        price=unit_price,
        subtotal=Money(amount=Decimal(subtotal)) if subtotal is not None else unit_price * quantity,
    )


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def address() -> StreetAddress:
    return StreetAddress(
        id=UUID(int=999),
        street="12 Harbour Road",
        postal_code="1000AA",
        city="Amsterdam",
    )


@pytest.fixture
def order_factory(address, id_generator) -> Callable[..., Order]:
    """Build uninitialized orders with deterministic ids."""

    def _factory(price: Optional[str], items: List[OrderItem], **overrides) -> Order:
        builder = (
            Order.builder()
            .customer_id(CustomerId(UUID(int=100)))
            .restaurant_id(RestaurantId(UUID(int=200)))
            .delivery_address(address)
            .price(Money(amount=Decimal(price)) if price is not None else None)
            .items(items)
            .id_generator(id_generator)
        )
        for name, value in overrides.items():
            getattr(builder, name)(value)
        return builder.build()

    return _factory


@pytest.fixture
def make_item() -> Callable[..., OrderItem]:
    """Item factory: make_item("9.99", quantity=2, subtotal=None)."""
    return _make_item
