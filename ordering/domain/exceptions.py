"""
Domain exceptions.

CRITICAL: This file must contain ZERO imports from:
- pydantic
- pydantic_settings
"""
from decimal import Decimal
from typing import Optional


class DomainException(Exception):
    """Base exception for domain-specific errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class DomainValidationError(DomainException, ValueError):
    """
    Raised when an aggregate invariant does not hold.

    Subclasses ValueError so callers that only know about ValueError
    keep catching domain validation failures.
    """

    def __init__(self, message: str):
        super().__init__(message, code="DOMAIN_VALIDATION")


class OrderPriceMismatchError(DomainValidationError):
    """Declared order total differs from the sum of item subtotals."""

    def __init__(self, declared_total: Decimal, items_total: Decimal):
        super().__init__(
            f"Total price: {declared_total} is not equal to "
            f"order items total: {items_total}!"
        )
        self.declared_total = declared_total
        self.items_total = items_total
