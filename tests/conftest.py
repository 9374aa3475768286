"""Shared fixtures for drex tests."""

from unittest.mock import MagicMock

import pytest

from drex.config import reset_config
from drex.rng import reset_random_source


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test without DREX_* overrides or cached state."""
    for key in ("DREX_MAX_DICE", "DREX_MAX_SIDES", "DREX_SEED"):
        monkeypatch.delenv(key, raising=False)
    reset_config()
    reset_random_source()
    yield
    reset_config()
    reset_random_source()


@pytest.fixture
def low_source():
    """Random source that always returns the lowest possible value."""
    source = MagicMock()
    source.randint.side_effect = lambda a, b: a
    return source


@pytest.fixture
def high_source():
    """Random source that always returns the highest possible value."""
    source = MagicMock()
    source.randint.side_effect = lambda a, b: b
    return source
