"""
Test settings loading from the environment.

Verifies defaults, env alias mapping and value validation.
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from ordering.domain.identity import SequentialIdGenerator, create_id_generator
from ordering.settings import OrderingSettings, get_ordering_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("ORDERING_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ORDERING_ID_STRATEGY", raising=False)
    get_ordering_settings.cache_clear()
    yield
    get_ordering_settings.cache_clear()


def test_defaults():
    settings = OrderingSettings(_env_file=None)

    assert settings.log_level == "INFO"
    assert settings.id_strategy == "uuid4"


def test_env_aliases_are_mapped(monkeypatch):
    monkeypatch.setenv("ORDERING_LOG_LEVEL", "debug")
    monkeypatch.setenv("ORDERING_ID_STRATEGY", "sequential")

    settings = OrderingSettings(_env_file=None)

    assert settings.log_level == "DEBUG"
    assert settings.id_strategy == "sequential"
    assert isinstance(create_id_generator(settings.id_strategy), SequentialIdGenerator)


def test_every_field_has_env_alias():
    for field_name, field in OrderingSettings.model_fields.items():
        assert field.alias and field.alias.startswith("ORDERING_"), field_name


@pytest.mark.parametrize(
    "env_key,value",
    [("ORDERING_LOG_LEVEL", "LOUD"), ("ORDERING_ID_STRATEGY", "snowflake")],
)
def test_invalid_values_rejected(monkeypatch, env_key, value):
    monkeypatch.setenv(env_key, value)

    with pytest.raises(ValidationError):
        OrderingSettings(_env_file=None)


def test_get_ordering_settings_is_cached():
    assert get_ordering_settings() is get_ordering_settings()
