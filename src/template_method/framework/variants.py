"""Bundled skeleton variants.

Concrete classes implement every required step and may override hooks.
Usually a variant overrides only part of what the base class offers.
The registry registers BUNDLED_VARIANTS under their class names on first lookup.
"""

from template_method.framework.skeleton import AbstractClass


class ConcreteClass1(AbstractClass):
    """Implements the required steps, keeps both default hooks."""

    def required_operations1(self) -> None:
        self.say("Implemented Operation1")

    def required_operation2(self) -> None:
        self.say("Implemented Operation2")


class ConcreteClass2(AbstractClass):
    """Implements the required steps and overrides hook1."""

    def required_operations1(self) -> None:
        self.say("Implemented Operation1")

    def required_operation2(self) -> None:
        self.say("Implemented Operation2")

    def hook1(self) -> None:
        self.say("Overridden Hook1")


BUNDLED_VARIANTS: tuple[type[AbstractClass], ...] = (ConcreteClass1, ConcreteClass2)
