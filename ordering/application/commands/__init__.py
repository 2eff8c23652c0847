"""Application commands."""

from .create_order import CreateOrderAddress, CreateOrderCommand, CreateOrderItemCommand

__all__ = ["CreateOrderAddress", "CreateOrderCommand", "CreateOrderItemCommand"]
