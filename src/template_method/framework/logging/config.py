"""
Logging configuration.

Provides a single entry point for configuring structured logging.
Logs are always written to stderr so that stdout carries only the
skeleton's step output.

Configuration is read from arguments, falling back to environment variables:
- TEMPLATE_METHOD_LOG_LEVEL: DEBUG | INFO | WARNING | ERROR (default: WARNING)
- TEMPLATE_METHOD_LOG_FORMAT: json | console (default: console)
"""

import logging
import os
import sys
from typing import Literal

import structlog
from structlog.types import Processor

from template_method.framework.logging.context import add_context_processor

_configured = False


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None,
    format: Literal["json", "console"] | None = None,
    force: bool = False,
) -> None:
    """
    Configure structured logging for the application.

    Should be called once at startup. Subsequent calls are no-ops unless
    force=True.

    Args:
        level: Log level (overrides TEMPLATE_METHOD_LOG_LEVEL)
        format: Output format (overrides TEMPLATE_METHOD_LOG_FORMAT)
        force: Reconfigure even if already configured
    """
    global _configured

    if _configured and not force:
        return

    log_level = (level or os.environ.get("TEMPLATE_METHOD_LOG_LEVEL", "WARNING")).upper()
    log_format = (format or os.environ.get("TEMPLATE_METHOD_LOG_FORMAT", "console")).lower()

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_context_processor,
        structlog.processors.format_exc_info,
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level),
        force=True,
    )
    logging.getLogger("template_method").setLevel(getattr(logging, log_level))

    _configured = True
