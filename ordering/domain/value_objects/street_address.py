"""Street address value object."""
from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class StreetAddress:
    """Delivery address, equal by all of its fields."""

    id: UUID
    street: str
    postal_code: str
    city: str

    def __str__(self) -> str:
        return f"{self.street}, {self.postal_code} {self.city}"
