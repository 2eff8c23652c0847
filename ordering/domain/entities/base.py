"""
Identity-based equality shared by entities.

Entities compose these helpers in their own __eq__/__hash__ instead of
inheriting from a common base class.
"""
from typing import Any, Optional, Protocol


class HasIdentity(Protocol):
    """Anything that carries an identity slot."""

    @property
    def id(self) -> Optional[Any]:
        ...


def identity_equals(a: HasIdentity, b: Any) -> bool:
    """
    Entity equality.

    Two entities are equal iff they are the same concrete kind and carry
    equal, assigned identities. An entity without identity is only equal
    to itself.
    """
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if a.id is None or b.id is None:
        return False
    return a.id == b.id


def identity_hash(entity: HasIdentity) -> int:
    """Hash consistent with identity_equals."""
    return hash((type(entity).__name__, entity.id))
