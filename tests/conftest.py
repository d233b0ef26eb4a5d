"""Shared test fixtures."""

import pytest
import structlog

from flexval.config import get_settings
from flexval.engine import ValidationEngine


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Drop cached settings and any logging configuration between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def engine() -> ValidationEngine:
    return ValidationEngine()


@pytest.fixture
def signup_spec() -> dict:
    """A spec touching every rule kind."""
    return {
        "username": {"required": True, "pattern": ["^[a-z]+$", "^.{3,12}$"]},
        "age": {"min": 18, "max": 120},
        "country": {"pattern": ["^[A-Z]{2}$"]},
    }
