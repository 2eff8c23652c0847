"""
In-memory Order Repository Implementation.

Dictionary-backed storage for tests and demos.
"""
from typing import Dict, Optional

from ordering.domain.entities.order import Order
from ordering.domain.repositories.order_repository import OrderRepository
from ordering.domain.value_objects import OrderId, TrackingId
from ordering.infrastructure.logging import get_logger


logger = get_logger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Orders are keyed by OrderId; a second index maps TrackingId to OrderId.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[OrderId, Order] = {}
        self._tracking_index: Dict[TrackingId, OrderId] = {}
        logger.info("InMemoryOrderRepository initialized")

    async def save(self, order: Order) -> Order:
        """
        Save order to in-memory storage.

        Raises:
            ValueError: If the order has no identity yet
        """
        if order.id is None:
            raise ValueError("Cannot save an order without identity")

        self._storage[order.id] = order
        if order.tracking_id is not None:
            self._tracking_index[order.tracking_id] = order.id
        logger.info(f"Order saved: {order.id} (status: {order.order_status})")
        return order

    async def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        order = self._storage.get(order_id)
        if order is None:
            logger.info(f"Order not found: {order_id}")
        return order

    async def find_by_tracking_id(self, tracking_id: TrackingId) -> Optional[Order]:
        order_id = self._tracking_index.get(tracking_id)
        if order_id is None:
            logger.info(f"Order not found for tracking id: {tracking_id}")
            return None
        return self._storage.get(order_id)

    async def exists(self, order_id: OrderId) -> bool:
        return order_id in self._storage
