"""
Create-order command.

Structural validation only (types, required fields, quantity > 0).
Pricing rules are enforced by the Order aggregate.
"""
from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import BaseModel, Field


class CreateOrderItemCommand(BaseModel):
    """Line item of a create-order command."""

    product_id: UUID = Field(..., description="Product identity")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    price: Decimal = Field(..., ge=0, description="Unit price")
    subtotal: Decimal = Field(..., ge=0, description="Unit price * quantity")

    model_config = {"frozen": True}


class CreateOrderAddress(BaseModel):
    """Delivery address of a create-order command."""

    street: str = Field(..., min_length=1, description="Street line")
    postal_code: str = Field(..., min_length=1, description="Postal code")
    city: str = Field(..., min_length=1, description="City")

    model_config = {"frozen": True}


class CreateOrderCommand(BaseModel):
    """Command for placing a new order."""

    customer_id: UUID = Field(..., description="Customer identity")
    restaurant_id: UUID = Field(..., description="Restaurant identity")
    address: CreateOrderAddress = Field(..., description="Delivery address")
    price: Decimal = Field(..., ge=0, description="Declared order total")
    items: List[CreateOrderItemCommand] = Field(default_factory=list, description="Order items")

    model_config = {"frozen": True}
