"""Application service for Order operations."""

from typing import List, Optional
from uuid import UUID

from ordering.application.commands.create_order import (
    CreateOrderCommand,
    CreateOrderItemCommand,
)
from ordering.domain.entities.order import Order
from ordering.domain.entities.order_item import OrderItem
from ordering.domain.exceptions import DomainValidationError
from ordering.domain.identity import IdGenerator, create_id_generator
from ordering.domain.repositories.order_repository import OrderRepository
from ordering.domain.value_objects import (
    CustomerId,
    Money,
    OrderId,
    ProductId,
    RestaurantId,
    StreetAddress,
    TrackingId,
)
from ordering.infrastructure.logging import get_logger
from ordering.settings import get_ordering_settings


logger = get_logger(__name__)


class OrderApplicationService:
    """
    Application service for orchestrating order creation.

    Responsibilities:
    - Transform commands into domain entities
    - Run initialize_order() + validate_order()
    - Persist accepted orders via the repository
    """

    def __init__(
        self,
        repository: OrderRepository,
        id_generator: Optional[IdGenerator] = None,
    ) -> None:
        """Initialize order application service.

        Args:
            repository: Order repository port
            id_generator: Token source; defaults to ORDERING_ID_STRATEGY
        """
        self._repository = repository
        self._id_generator = id_generator or create_id_generator(
            get_ordering_settings().id_strategy
        )

    async def create_order(self, command: CreateOrderCommand) -> Order:
        """Create, validate and store a new order.

        Args:
            command: CreateOrderCommand

        Returns:
            The initialized, validated and saved Order

        Raises:
            DomainValidationError: If the order breaks an invariant
                (nothing is saved)
        """
        order = self._command_to_order(command)
        order.initialize_order()

        try:
            order.validate_order()
        except DomainValidationError as e:
            logger.warning(
                f"Order rejected for customer {command.customer_id}: {e.message}"
            )
            raise

        await self._repository.save(order)
        logger.info(f"Order created: {order.id} (tracking_id: {order.tracking_id})")
        return order

    async def get_order(self, order_id: UUID) -> Optional[Order]:
        """Get order by identity value."""
        return await self._repository.find_by_id(OrderId(order_id))

    async def get_order_by_tracking_id(self, tracking_id: UUID) -> Optional[Order]:
        """Get order by tracking id value."""
        return await self._repository.find_by_tracking_id(TrackingId(tracking_id))

    def _command_to_order(self, command: CreateOrderCommand) -> Order:
        """Transform CreateOrderCommand into an uninitialized Order."""
        address = StreetAddress(
            id=self._id_generator(),
            street=command.address.street,
            postal_code=command.address.postal_code,
            city=command.address.city,
        )
        return (
            Order.builder()
            .customer_id(CustomerId(command.customer_id))
            .restaurant_id(RestaurantId(command.restaurant_id))
            .delivery_address(address)
            .price(Money(amount=command.price))
            .items(self._items_to_domain(command.items))
            .id_generator(self._id_generator)
            .build()
        )

    @staticmethod
    def _items_to_domain(items: List[CreateOrderItemCommand]) -> List[OrderItem]:
        return [
            OrderItem(
                product_id=ProductId(item.product_id),
                quantity=item.quantity,
                price=Money(amount=item.price),
                subtotal=Money(amount=item.subtotal),
            )
            for item in items
        ]
