"""Command-line interface (``template-method``)."""

from template_method.cli.app import app

__all__ = ["app"]
