"""
Identity generation capability.

The domain never calls uuid4() directly; it receives a callable that
returns a fresh opaque token so tests can substitute deterministic ids.
"""
import itertools
from typing import Callable
from uuid import UUID, uuid4


IdGenerator = Callable[[], UUID]


def default_id_generator() -> UUID:
    """Return a random 128-bit token."""
    return uuid4()


class SequentialIdGenerator:
    """
    Deterministic id source: UUID(int=start), UUID(int=start + 1), ...

    Only unique within one generator instance.
    """

    def __init__(self, start: int = 1):
        if start < 0:
            raise ValueError(f"start must be non-negative, got: {start}")
        self._counter = itertools.count(start)

    def __call__(self) -> UUID:
        return UUID(int=next(self._counter))


ID_STRATEGIES = ("uuid4", "sequential")


def create_id_generator(strategy: str = "uuid4") -> IdGenerator:
    """
    Build an id generator by strategy name.

    Args:
        strategy: "uuid4" or "sequential"

    Returns:
        Callable producing fresh UUID tokens

    Raises:
        ValueError: If strategy is unknown
    """
    if strategy == "uuid4":
        return default_id_generator
    if strategy == "sequential":
        return SequentialIdGenerator()
    raise ValueError(
        f"Unknown id strategy: {strategy} (expected one of {ID_STRATEGIES})"
    )
