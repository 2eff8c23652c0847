"""Money value object - pure Python immutable type."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import ClassVar


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary amount.

    CRITICAL: Always use Decimal, never float!
    Order totals are compared against summed subtotals with exact
    equality, so any binary rounding would reject valid orders.
    """

    amount: Decimal

    ZERO: ClassVar["Money"]

    def __post_init__(self):
        # Convert to Decimal if needed (floats go through str to keep
        # their shortest repr rather than the binary expansion)
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, "amount", Decimal(str(self.amount)))
            except InvalidOperation:
                raise ValueError(f"Invalid money amount: {self.amount!r}") from None

        if not self.amount.is_finite():
            raise ValueError(f"Money amount must be finite, got: {self.amount}")

    def __str__(self) -> str:
        return str(self.amount)

    def add(self, other: "Money") -> "Money":
        """Return the sum; neither operand is modified."""
        return Money(amount=self.amount + other.amount)

    def subtract(self, other: "Money") -> "Money":
        """
        Return the difference.

        Raises:
            ValueError: If the result would be negative
        """
        result = self.amount - other.amount
        if result < 0:
            raise ValueError(
                f"Money subtraction would result in a negative amount: "
                f"{self.amount} - {other.amount}"
            )
        return Money(amount=result)

    def multiply(self, factor: int) -> "Money":
        """Multiply by an integer quantity."""
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(
                f"Can only multiply Money by int, got {type(factor).__name__}"
            )
        return Money(amount=self.amount * factor)

    def is_greater_than_zero(self) -> bool:
        """Check if amount is strictly positive."""
        return self.amount > 0

    def is_greater_than(self, other: "Money") -> bool:
        return self.amount > other.amount

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        return self.subtract(other)

    def __mul__(self, factor: int) -> "Money":
        return self.multiply(factor)


Money.ZERO = Money(amount=Decimal("0"))
