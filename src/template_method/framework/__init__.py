"""
Framework: the algorithm skeleton, its variants and the code that runs them.

This module provides:
- The skeleton definition and its abstract base class
- Bundled variants and the variant registry
- The generic invoker, runner and demo driver
- Structured logging with context (framework.logging)
"""

from template_method.framework.client import ClientRunner, RunResult, client_code, get_runner, run_demo
from template_method.framework.registry import clear_registry, get_variant, list_variants, register_variant
from template_method.framework.skeleton import SKELETON, AbstractClass, StepDefinition, StepKind
from template_method.framework.variants import ConcreteClass1, ConcreteClass2

__all__ = [
    # Skeleton
    "SKELETON",
    "StepDefinition",
    "StepKind",
    "AbstractClass",
    # Variants
    "ConcreteClass1",
    "ConcreteClass2",
    # Registry
    "register_variant",
    "get_variant",
    "list_variants",
    "clear_registry",
    # Invoker
    "client_code",
    "ClientRunner",
    "RunResult",
    "get_runner",
    "run_demo",
]
