"""Variant registry for registering and discovering skeleton variants.

Variants register under a name with the ``register_variant`` decorator.
Registration checks the extension contract at class-definition time, so a
variant missing a required step never becomes available to the runner.
"""

import inspect
from collections.abc import Callable
from typing import TYPE_CHECKING

from template_method.core.errors import (
    DuplicateVariantError,
    IncompleteVariantError,
    VariantNotFoundError,
)
from template_method.framework.logging import get_logger

if TYPE_CHECKING:
    from template_method.framework.skeleton import AbstractClass

logger = get_logger(__name__)

# Global variant registry
_registry: dict[str, type["AbstractClass"]] = {}
_loaded: bool = False


def register_variant(name: str | None = None) -> Callable[[type["AbstractClass"]], type["AbstractClass"]]:
    """Decorator to register a variant class (under its class name by default)."""

    def decorator(cls: type["AbstractClass"]) -> type["AbstractClass"]:
        key = name or cls.__name__
        if inspect.isabstract(cls):
            raise IncompleteVariantError(key, sorted(cls.__abstractmethods__))
        if key in _registry:
            raise DuplicateVariantError(key)
        _registry[key] = cls
        logger.debug("variant_registered", name=key, cls=cls.__name__)
        return cls

    return decorator


def _ensure_loaded() -> None:
    """Import the bundled variants so they register (lazy initialization)."""
    global _loaded
    if not _loaded:
        _load_variants()
        _loaded = True


def get_variant(name: str) -> type["AbstractClass"]:
    """Get a variant class by name."""
    _ensure_loaded()
    if name not in _registry:
        raise VariantNotFoundError(name, sorted(_registry))
    return _registry[name]


def list_variants() -> list[str]:
    """List all registered variant names."""
    _ensure_loaded()
    return sorted(_registry)


def clear_registry() -> None:
    """Clear registry (for testing)."""
    global _loaded
    _registry.clear()
    _loaded = False


def _load_variants() -> None:
    """
    Register the bundled variants.

    Called lazily by _ensure_loaded() so importing the package emits no
    registration events. Names already registered by user code are kept.
    """
    from template_method.framework import variants

    for cls in variants.BUNDLED_VARIANTS:
        if cls.__name__ in _registry:
            # A user registration under the same name takes precedence
            logger.debug("variant_bundled_skipped", name=cls.__name__)
            continue
        register_variant()(cls)
    logger.debug("variant_registry_loaded", registered=len(_registry))
