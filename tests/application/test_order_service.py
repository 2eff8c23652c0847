"""Tests for OrderApplicationService with the in-memory repository."""
import logging
from decimal import Decimal
from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from ordering.application.commands import (
    CreateOrderAddress,
    CreateOrderCommand,
    CreateOrderItemCommand,
)
from ordering.application.services import OrderApplicationService
from ordering.domain.enums import OrderStatus
from ordering.domain.exceptions import DomainValidationError, OrderPriceMismatchError
from ordering.domain.identity import SequentialIdGenerator
from ordering.domain.value_objects import Money, OrderId, OrderItemId
from ordering.infrastructure.persistence import InMemoryOrderRepository


def _command(price: str, *items: tuple) -> CreateOrderCommand:
    return CreateOrderCommand(
        customer_id=uuid4(),
        restaurant_id=uuid4(),
        address=CreateOrderAddress(street="Tahrir 5", postal_code="11511", city="Cairo"),
        price=Decimal(price),
        items=[
            CreateOrderItemCommand(
                product_id=uuid4(),
                quantity=quantity,
                price=Decimal(unit_price),
                subtotal=Decimal(subtotal),
            )
            for unit_price, quantity, subtotal in items
        ],
    )


@pytest.fixture
def repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def service(repository) -> OrderApplicationService:
    return OrderApplicationService(repository, id_generator=SequentialIdGenerator())


@pytest.mark.asyncio
async def test_create_order_initializes_validates_and_saves(service, repository):
    command = _command("29.97", ("9.99", 1, "9.99"), ("19.98", 1, "19.98"))

    order = await service.create_order(command)

    assert order.order_status == OrderStatus.PENDING
    assert order.price == Money(amount="29.97")
    assert [item.id for item in order.items] == [OrderItemId(1), OrderItemId(2)]
    assert await repository.exists(order.id)
    assert order.delivery_address.city == "Cairo"


@pytest.mark.asyncio
async def test_get_order_by_id_and_tracking_id(service):
    order = await service.create_order(_command("10.00", ("5.00", 2, "10.00")))

    assert await service.get_order(order.id.value) is order
    assert await service.get_order_by_tracking_id(order.tracking_id.value) is order


@pytest.mark.asyncio
async def test_unknown_order_returns_none(service):
    assert await service.get_order(uuid4()) is None
    assert await service.get_order_by_tracking_id(uuid4()) is None


@pytest.mark.asyncio
async def test_mismatch_is_raised_and_nothing_saved(service, repository):
    command = _command("100.00", ("40.00", 1, "40.00"), ("50.00", 1, "50.00"))

    with pytest.raises(OrderPriceMismatchError):
        await service.create_order(command)

    # SequentialIdGenerator: address got 1, order 2, tracking 3
    assert not await repository.exists(OrderId(UUID(int=2)))


@pytest.mark.asyncio
async def test_zero_total_rejected_by_domain(service):
    with pytest.raises(DomainValidationError, match="greater than zero"):
        await service.create_order(_command("0"))


@pytest.mark.asyncio
async def test_rejection_is_logged(service, caplog):
    command = _command("5.00", ("2.00", 2, "5.00"))

    with caplog.at_level(logging.WARNING):
        with pytest.raises(DomainValidationError):
            await service.create_order(command)

    assert any("Order rejected" in record.getMessage() for record in caplog.records)


def test_command_rejects_zero_quantity():
    with pytest.raises(ValidationError):
        CreateOrderItemCommand(
            product_id=uuid4(), quantity=0, price=Decimal("1"), subtotal=Decimal("0")
        )


@pytest.mark.asyncio
async def test_repository_refuses_order_without_identity(repository):
    from ordering.domain.entities.order import Order

    with pytest.raises(ValueError, match="without identity"):
        await repository.save(Order.builder().build())
