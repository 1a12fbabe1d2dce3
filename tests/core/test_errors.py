"""Tests for template_method.core.errors."""

import pytest

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


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls,parent",
        [
            (ContractError, TemplateMethodError),
            (IncompleteVariantError, ContractError),
            (SkeletonOverrideError, ContractError),
            (RegistryError, TemplateMethodError),
            (VariantNotFoundError, RegistryError),
            (DuplicateVariantError, RegistryError),
        ],
    )
    def test_subclass(self, cls, parent):
        assert issubclass(cls, parent)

    def test_categories(self):
        assert IncompleteVariantError("V", ["a"]).category == ErrorCategory.CONTRACT
        assert VariantNotFoundError("V").category == ErrorCategory.REGISTRY
        assert TemplateMethodError("x").category == ErrorCategory.INTERNAL


class TestTemplateMethodError:
    def test_to_dict(self):
        d = TemplateMethodError("boom").to_dict()
        assert d == {"error_type": "TemplateMethodError", "message": "boom", "category": "INTERNAL"}

    def test_cause_chained(self):
        cause = ValueError("root")
        err = TemplateMethodError("wrapped", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == "root"

    def test_repr(self):
        assert repr(TemplateMethodError("boom")) == "TemplateMethodError('boom', category=INTERNAL)"


class TestContractErrors:
    def test_incomplete_message_and_dict(self):
        err = IncompleteVariantError("Partial", ["required_operation2", "required_operations1"])
        assert "Partial" in err.message
        assert err.to_dict()["missing"] == ["required_operation2", "required_operations1"]

    def test_override_message_and_dict(self):
        err = SkeletonOverrideError("Rogue", ["run"])
        assert "may not override fixed members: run" in str(err)
        assert err.to_dict()["overridden"] == ["run"]


class TestRegistryErrors:
    def test_not_found_without_available(self):
        assert str(VariantNotFoundError("x")) == "Variant 'x' not found"

    def test_duplicate_message(self):
        assert str(DuplicateVariantError("x")) == "Variant 'x' is already registered"
