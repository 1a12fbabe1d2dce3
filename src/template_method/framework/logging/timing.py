"""
Timed log steps.

``log_step`` wraps a block: DEBUG ``<event>.start`` on entry, ``<event>.end``
with duration_ms at the requested level on exit, ``<event>.error`` with the
exception details before re-raising.
"""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from template_method.framework.logging.context import (
    _generate_span_id,
    get_context,
    get_logger,
    push_context,
)


@dataclass
class TimingResult:
    """Span and clock for one log_step block."""

    step: str
    parent_span_id: str | None = None
    span_id: str = field(default_factory=_generate_span_id)
    started_at: float = field(default_factory=time.perf_counter)
    ended_at: float | None = None
    metrics: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        end = self.ended_at if self.ended_at is not None else time.perf_counter()
        return (end - self.started_at) * 1000

    def fields(self) -> dict[str, Any]:
        """Span ids, duration and metrics as log fields."""
        result = {"duration_ms": round(self.duration_ms, 2), "span_id": self.span_id}
        if self.parent_span_id:
            result["parent_span_id"] = self.parent_span_id
        result.update(self.metrics)
        return result


@contextmanager
def log_step(event: str, log_start: bool = True, level: str = "info", **extra_metrics) -> Iterator[TimingResult]:
    """
    Log a block's start and end with timing and tracing.

    The span_id is pushed into the log context so nested events carry it
    as parent_span_id.

    Usage:
        with log_step("client.run", variant="ConcreteClass2"):
            client_code(variant)

        # DEBUG client.run.start span_id=a1b2c3d4 variant=ConcreteClass2
        # INFO  client.run.end   span_id=a1b2c3d4 duration_ms=0.12 variant=ConcreteClass2
    """
    log = get_logger("template_method.timing")

    parent_span = get_context().span_id
    timer = TimingResult(step=event, parent_span_id=parent_span, metrics=dict(extra_metrics))
    context_token = push_context(span_id=timer.span_id, parent_span_id=parent_span)

    try:
        if log_start:
            start_fields = {k: v for k, v in timer.fields().items() if k != "duration_ms"}
            log.debug(f"{event}.start", **start_fields)

        yield timer

    except Exception as e:
        timer.ended_at = time.perf_counter()
        log.error(
            f"{event}.error",
            status="error",
            error_type=type(e).__name__,
            error_message=str(e),
            exc_info=True,
            **timer.fields(),
        )
        raise

    finally:
        timer.ended_at = timer.ended_at or time.perf_counter()
        context_token.restore()

    getattr(log, level)(f"{event}.end", **timer.fields())
