"""Typed identifier value objects."""
from dataclasses import dataclass
from typing import Generic, TypeVar
from uuid import UUID

T = TypeVar("T")


@dataclass(frozen=True)
class BaseId(Generic[T]):
    """
    Immutable wrapper around an opaque scalar identity.

    Equality and hash are structural over ``value``. Identifiers of
    different concrete kinds never compare equal, so an OrderId and a
    CustomerId wrapping the same UUID are distinct.
    """

    value: T

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OrderId(BaseId[UUID]):
    """Order aggregate identity."""


@dataclass(frozen=True)
class CustomerId(BaseId[UUID]):
    """Customer identity (owned by the customer context)."""


@dataclass(frozen=True)
class RestaurantId(BaseId[UUID]):
    """Restaurant identity (owned by the restaurant context)."""


@dataclass(frozen=True)
class ProductId(BaseId[UUID]):
    """Product identity referenced by an order item."""


@dataclass(frozen=True)
class TrackingId(BaseId[UUID]):
    """Customer-facing tracking token for an order."""


@dataclass(frozen=True)
class OrderItemId(BaseId[int]):
    """Position-based item identity, 1..N within its order."""
