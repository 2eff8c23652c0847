"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.order import Order
from ..value_objects import OrderId, TrackingId


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def save(self, order: Order) -> Order:
        """Persist an initialized, validated order.

        Args:
            order: Order aggregate to persist

        Returns:
            The stored order
        """
        pass

    @abstractmethod
    async def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        """Retrieve order by identity.

        Args:
            order_id: OrderId identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_tracking_id(self, tracking_id: TrackingId) -> Optional[Order]:
        """Retrieve order by its customer-facing tracking id."""
        pass

    @abstractmethod
    async def exists(self, order_id: OrderId) -> bool:
        """Check if an order with this identity is stored."""
        pass
