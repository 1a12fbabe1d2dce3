"""
Structured, context-aware logging built on structlog.

Only entry points (the CLI callback, ``python -m template_method``) call
configure_logging(); library code just gets loggers.

Usage:
    from template_method.framework.logging import configure_logging, get_logger, log_step

    configure_logging(level="INFO")
    log = get_logger(__name__)

    with log_step("client.run", variant="ConcreteClass1"):
        client_code(ConcreteClass1())
"""

from template_method.framework.logging.config import configure_logging
from template_method.framework.logging.context import (
    LogContext,
    clear_context,
    get_context,
    get_logger,
    push_context,
)
from template_method.framework.logging.timing import TimingResult, log_step

__all__ = [
    # Configuration
    "configure_logging",
    # Context
    "get_logger",
    "push_context",
    "clear_context",
    "get_context",
    "LogContext",
    # Timing
    "log_step",
    "TimingResult",
]
