"""Invoker and demo driver.

``client_code`` is the generic caller: it works with any ``AbstractClass``
without knowing which variant it holds. ``ClientRunner`` adds registry
lookup, timing and a result record on top of it.
"""

import uuid
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from template_method.framework.logging import get_logger, log_step, push_context
from template_method.framework.registry import get_variant
from template_method.framework.skeleton import AbstractClass

log = get_logger(__name__)

DEMO_BANNER = "Same client code can work with different subclasses:"


def client_code(abstract_class: AbstractClass) -> None:
    """Run the skeleton through the base class interface only."""
    abstract_class.run()


@dataclass
class RunResult:
    """Record of one invoker run."""

    variant: str
    started_at: datetime
    completed_at: datetime | None = None

    @property
    def duration_seconds(self) -> float | None:
        """Duration in seconds if completed."""
        if self.completed_at is None:
            return None
        return (self.completed_at - self.started_at).total_seconds()


class ClientRunner:
    """
    Synchronous variant runner.

    Looks variants up by name and runs them through client_code() in the
    current thread.
    """

    def run(self, variant_name: str) -> RunResult:
        """
        Run a registered variant by name.

        Raises:
            VariantNotFoundError: If no variant is registered under the name
        """
        variant_cls = get_variant(variant_name)
        started_at = datetime.now(UTC)

        token = push_context(run_id=uuid.uuid4().hex[:12], variant=variant_name)
        try:
            with log_step("client.run", level="debug", variant=variant_name):
                client_code(variant_cls())
        finally:
            token.restore()

        result = RunResult(
            variant=variant_name,
            started_at=started_at,
            completed_at=datetime.now(UTC),
        )
        log.info("runner.completed", variant=variant_name, duration_ms=round(result.duration_seconds * 1000, 2))
        return result

    def run_all(self, variant_names: Sequence[str]) -> list[RunResult]:
        """Run several variants in sequence."""
        return [self.run(name) for name in variant_names]


def run_demo(variant_names: Sequence[str] | None = None, runner: ClientRunner | None = None) -> list[RunResult]:
    """
    Show the same client code working with different variants.

    Prints the banner before each variant and a blank line between them.
    Defaults to the variants listed in settings.
    """
    if variant_names is None:
        from template_method.core.settings import get_settings

        variant_names = get_settings().demo_variants

    for name in variant_names:
        get_variant(name)

    runner = runner or get_runner()
    results = []
    for index, name in enumerate(variant_names):
        if index:
            print()
        print(DEMO_BANNER)
        results.append(runner.run(name))
    return results


# Default runner instance
_runner: ClientRunner | None = None


def get_runner() -> ClientRunner:
    """Get or create runner instance."""
    global _runner
    if _runner is None:
        _runner = ClientRunner()
    return _runner
