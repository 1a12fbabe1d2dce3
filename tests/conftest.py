"""
Shared pytest fixtures and configuration for template-method tests.

This module provides:
- Quiet logging configuration so stdout carries only step output
- Registry cleanup fixture for test isolation
- Expected output lines for the bundled variants
"""

from collections.abc import Generator

import pytest

from template_method.core.settings import get_settings
from template_method.framework.logging import clear_context, configure_logging
from template_method.framework.registry import clear_registry

BASE_1 = "AbstractClass says: I am doing the bulk of the work"
BASE_2 = "AbstractClass says: But I let subclasses override some operations"
BASE_3 = "AbstractClass says: But I am doing the bulk of the work anyway"


@pytest.fixture(autouse=True, scope="session")
def quiet_logging() -> None:
    """Configure logging once at WARNING so DEBUG/INFO events are dropped."""
    configure_logging(level="WARNING", format="console", force=True)


@pytest.fixture(autouse=True)
def clean_state() -> Generator[None, None, None]:
    """Reset the variant registry, log context and cached settings around each test."""
    clear_registry()
    clear_context()
    get_settings.cache_clear()
    yield
    clear_registry()
    clear_context()
    get_settings.cache_clear()


@pytest.fixture
def concrete1_lines() -> list[str]:
    return [
        BASE_1,
        "ConcreteClass1 says: Implemented Operation1",
        BASE_2,
        "ConcreteClass1 says: Implemented Operation2",
        BASE_3,
    ]


@pytest.fixture
def concrete2_lines() -> list[str]:
    return [
        BASE_1,
        "ConcreteClass2 says: Implemented Operation1",
        BASE_2,
        "ConcreteClass2 says: Overridden Hook1",
        "ConcreteClass2 says: Implemented Operation2",
        BASE_3,
    ]


@pytest.fixture
def base_lines() -> tuple[str, str, str]:
    """Output of the three fixed steps, identical for every variant."""
    return BASE_1, BASE_2, BASE_3
