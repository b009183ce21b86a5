"""Shared fixtures for singleton-idioms tests."""

import os
from unittest.mock import patch

import pytest

from singleton_idioms.config.manager import ConfigurationManager
from singleton_idioms.infrastructure.patterns import SingletonRegistry
from singleton_idioms.singletons import get_variant_catalog

_ENV_PREFIXES = ("SINGLETON_IDIOMS_", "LOG_LEVEL", "LOG_DESTINATION")


def _reset_all_variants():
    catalog = get_variant_catalog()
    for name in catalog.get_registered_variants():
        variant = catalog.get_variant(name)
        variant.reset_instance()
        variant.set_construction_delay(0.0)


@pytest.fixture(autouse=True)
def clean_environment():
    """Remove configuration environment variables for the duration of a test."""
    cleaned = {k: v for k, v in os.environ.items() if not k.startswith(_ENV_PREFIXES)}
    with patch.dict(os.environ, cleaned, clear=True):
        yield


@pytest.fixture(autouse=True)
def reset_singletons(clean_environment):
    """Reset every variant, the configuration manager and the registry."""
    ConfigurationManager.reset_instance()
    _reset_all_variants()
    yield
    _reset_all_variants()
    ConfigurationManager.reset_instance()
    SingletonRegistry.get_instance().clear()


@pytest.fixture
def race_config():
    """Fast race settings for tests."""
    from singleton_idioms.config.schemas import RaceConfig

    return RaceConfig(
        workers=8,
        construction_delay=0.05,
        start_timeout=5.0,
        join_timeout=10.0,
        benchmark_calls=200,
    )
