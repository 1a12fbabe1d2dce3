"""Algorithm skeleton: the fixed step sequence and the abstract base that runs it.

``AbstractClass.run()`` is the template method. It walks ``SKELETON`` in
order and calls one method per step:

- ``base`` steps are implemented here and may not be redefined by variants
- ``required`` steps are abstract; a variant must implement them
- ``hook`` steps default to a no-op; a variant may override them
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from template_method.core.errors import SkeletonOverrideError
from template_method.framework.logging import get_logger, push_context

log = get_logger(__name__)


class StepKind(str, Enum):
    """How a skeleton step is supplied."""

    BASE = "base"
    REQUIRED = "required"
    HOOK = "hook"


@dataclass(frozen=True)
class StepDefinition:
    """One position in the skeleton."""

    position: int
    name: str
    kind: StepKind


SKELETON: tuple[StepDefinition, ...] = (
    StepDefinition(1, "base_operation1", StepKind.BASE),
    StepDefinition(2, "required_operations1", StepKind.REQUIRED),
    StepDefinition(3, "base_operation2", StepKind.BASE),
    StepDefinition(4, "hook1", StepKind.HOOK),
    StepDefinition(5, "required_operation2", StepKind.REQUIRED),
    StepDefinition(6, "base_operation3", StepKind.BASE),
    StepDefinition(7, "hook2", StepKind.HOOK),
)


def steps_of_kind(kind: StepKind) -> list[str]:
    """Names of the skeleton steps of one kind, in skeleton order."""
    return [step.name for step in SKELETON if step.kind is kind]


# Members a variant may not redefine
FIXED_MEMBERS: frozenset[str] = frozenset({"run", *steps_of_kind(StepKind.BASE)})


class AbstractClass(ABC):
    """
    Base class owning the algorithm skeleton.

    Subclasses must implement required_operations1() and required_operation2().
    They may override hook1() and hook2(). Everything else is fixed: defining
    run() or a base_operation in a subclass raises SkeletonOverrideError when
    the class statement executes.
    """

    # Prefix for variant output; defaults to the subclass name
    name: ClassVar[str] = "AbstractClass"

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        overridden = FIXED_MEMBERS & set(vars(cls))
        if overridden:
            raise SkeletonOverrideError(cls.__name__, list(overridden))
        if "name" not in vars(cls):
            cls.name = cls.__name__

    def run(self) -> None:
        """Execute the seven skeleton steps in order, exactly once each."""
        for step in SKELETON:
            token = push_context(step=step.name)
            try:
                log.debug(
                    "skeleton.step",
                    step=step.name,
                    position=step.position,
                    kind=step.kind.value,
                    variant=self.name,
                )
                getattr(self, step.name)()
            finally:
                token.restore()

    # -- Fixed steps ---------------------------------------------------------

    def base_operation1(self) -> None:
        print("AbstractClass says: I am doing the bulk of the work")

    def base_operation2(self) -> None:
        print("AbstractClass says: But I let subclasses override some operations")

    def base_operation3(self) -> None:
        print("AbstractClass says: But I am doing the bulk of the work anyway")

    # -- Required steps ------------------------------------------------------

    @abstractmethod
    def required_operations1(self) -> None:
        """First variant-supplied step."""
        ...

    @abstractmethod
    def required_operation2(self) -> None:
        """Second variant-supplied step."""
        ...

    # -- Hooks ---------------------------------------------------------------

    def hook1(self) -> None:  # noqa: B027
        """Optional extension point after base_operation2. No-op by default."""
        pass

    def hook2(self) -> None:  # noqa: B027
        """Optional extension point at the end of the skeleton. No-op by default."""
        pass

    def say(self, message: str) -> None:
        """Print one line of output attributed to this variant."""
        print(f"{self.name} says: {message}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
