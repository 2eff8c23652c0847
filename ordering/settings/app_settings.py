from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator

from ordering.domain.identity import ID_STRATEGIES
from ordering.settings.base import OrderingBaseSettings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class OrderingSettings(OrderingBaseSettings):
    """
    Ordering core settings.
    Loaded from environment / .env with exact variable name matching.
    """

    log_level: str = Field(default="INFO", alias="ORDERING_LOG_LEVEL")
    id_strategy: str = Field(default="uuid4", alias="ORDERING_ID_STRATEGY")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v} (expected one of {LOG_LEVELS})")
        return level

    @field_validator("id_strategy")
    @classmethod
    def validate_id_strategy(cls, v: str) -> str:
        if v not in ID_STRATEGIES:
            raise ValueError(f"Unknown id strategy: {v} (expected one of {ID_STRATEGIES})")
        return v


@lru_cache()
def get_ordering_settings() -> OrderingSettings:
    """Return cached settings for the whole package."""
    return OrderingSettings()
