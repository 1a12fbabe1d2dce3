"""
Structured error types for the template-method package.

The skeleton itself has no runtime failure paths. These errors cover the
contract checks made when variants are defined and registered, and lookups
made by the runner and CLI.

Hierarchy:
    ::

        TemplateMethodError         (category, cause, to_dict)
        ├── ContractError           (CONTRACT)
        │   ├── IncompleteVariantError
        │   └── SkeletonOverrideError
        └── RegistryError           (REGISTRY)
            ├── VariantNotFoundError
            └── DuplicateVariantError

Usage:
    from template_method.core.errors import VariantNotFoundError

    try:
        cls = get_variant("ConcreteClass9")
    except VariantNotFoundError as e:
        log.error("variant_missing", **e.to_dict())
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories used for classification in logs."""

    CONTRACT = "CONTRACT"
    REGISTRY = "REGISTRY"
    INTERNAL = "INTERNAL"


class TemplateMethodError(Exception):
    """Base class for all package errors."""

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# CONTRACT ERRORS (raised when a variant class is defined or registered)
# =============================================================================


class ContractError(TemplateMethodError):
    """A variant class breaks the skeleton's extension contract."""

    default_category = ErrorCategory.CONTRACT


class IncompleteVariantError(ContractError):
    """Variant does not implement every required step."""

    def __init__(self, variant: str, missing: list[str], message: str | None = None):
        self.variant = variant
        self.missing = sorted(missing)
        super().__init__(message or f"Variant '{variant}' is missing required steps: {', '.join(self.missing)}")

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["variant"] = self.variant
        result["missing"] = self.missing
        return result


class SkeletonOverrideError(ContractError):
    """Variant redefines the template method or one of its fixed steps."""

    def __init__(self, variant: str, overridden: list[str], message: str | None = None):
        self.variant = variant
        self.overridden = sorted(overridden)
        super().__init__(message or f"Variant '{variant}' may not override fixed members: {', '.join(self.overridden)}")

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["variant"] = self.variant
        result["overridden"] = self.overridden
        return result


# =============================================================================
# REGISTRY ERRORS
# =============================================================================


class RegistryError(TemplateMethodError):
    """Variant registry lookup or registration failure."""

    default_category = ErrorCategory.REGISTRY


class VariantNotFoundError(RegistryError):
    """No variant is registered under the requested name."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = available or []
        message = f"Variant '{name}' not found"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)


class DuplicateVariantError(RegistryError, ValueError):
    """A variant is already registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variant '{name}' is already registered")
