"""Settings for the template-method demo.

All values can be overridden via environment variables prefixed with
``TEMPLATE_METHOD_`` or through a ``.env`` file.

Order of precedence (highest → lowest):
    1. Environment variables (``TEMPLATE_METHOD_LOG_LEVEL``, etc.)
    2. ``.env`` file
    3. Defaults below
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TemplateMethodSettings(BaseSettings):
    """Runtime configuration for the CLI and demo driver."""

    model_config = SettingsConfigDict(
        env_prefix="TEMPLATE_METHOD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Structlog log level (logs go to stderr)",
    )
    log_format: Literal["console", "json"] = Field(default="console", description="Log renderer")

    # ── Demo ─────────────────────────────────────────────────────
    demo_variants: list[str] = Field(
        default=["ConcreteClass1", "ConcreteClass2"],
        description="Registered variant names run by the demo driver, in order",
    )


@lru_cache(maxsize=1)
def get_settings() -> TemplateMethodSettings:
    """Cached settings — loaded once per process."""
    return TemplateMethodSettings()
