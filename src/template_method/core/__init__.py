"""Core primitives: error hierarchy and settings."""

from template_method.core.errors import (
    ContractError,
    DuplicateVariantError,
    ErrorCategory,
    IncompleteVariantError,
    RegistryError,
    SkeletonOverrideError,
    TemplateMethodError,
    VariantNotFoundError,
)

__all__ = [
    "ErrorCategory",
    "TemplateMethodError",
    "ContractError",
    "IncompleteVariantError",
    "SkeletonOverrideError",
    "RegistryError",
    "VariantNotFoundError",
    "DuplicateVariantError",
]
