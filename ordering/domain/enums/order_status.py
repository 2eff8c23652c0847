"""
Order Status Enum.

Only PENDING is assigned inside the aggregate; the remaining values are
transition targets owned by payment / approval orchestration.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order lifecycle status values."""

    PENDING = "PENDING"
    PAID = "PAID"
    APPROVED = "APPROVED"
    CANCELLING = "CANCELLING"
    CANCELLED = "CANCELLED"
