"""
Root Typer application for the template-method CLI.
"""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.table import Table
from typer import Typer

from template_method.core.errors import VariantNotFoundError
from template_method.core.settings import get_settings
from template_method.framework.client import get_runner, run_demo
from template_method.framework.logging import configure_logging
from template_method.framework.registry import list_variants
from template_method.framework.skeleton import SKELETON

app = Typer(
    name="template-method",
    help="template-method — run algorithm-skeleton variants through the same client code.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version as pkg_version

        from template_method import __version__

        try:
            v = pkg_version("template-method")
        except PackageNotFoundError:
            v = __version__
        typer.echo(f"template-method {v}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Template Method demo — one skeleton, several variants."""
    settings = get_settings()
    configure_logging(level=settings.log_level, format=settings.log_format, force=True)


def _fail(error: VariantNotFoundError) -> None:
    err_console.print(f"[bold red]Error[/bold red] ({type(error).__name__}): {error.message}")
    raise typer.Exit(code=1)


@app.command("demo")
def demo(
    variants: list[str] | None = typer.Option(  # noqa: UP007
        None,
        "--variant",
        "-v",
        help="Variant to run (repeatable). Defaults to the configured demo variants.",
    ),
) -> None:
    """Run the same client code against each variant."""
    try:
        run_demo(variants or None)
    except VariantNotFoundError as e:
        _fail(e)


@app.command("run")
def run_variant(
    name: str = typer.Argument(..., help="Registered variant name"),
) -> None:
    """Run one variant through the client code."""
    try:
        get_runner().run(name)
    except VariantNotFoundError as e:
        _fail(e)


@app.command("list")
def list_cmd(
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """List registered variants."""
    names = list_variants()
    if json_out:
        console.print_json(json.dumps(names))
        return
    for name in names:
        typer.echo(name)


@app.command("steps")
def steps_cmd() -> None:
    """Show the skeleton's step sequence."""
    table = Table(title="Skeleton")
    table.add_column("#", justify="right")
    table.add_column("Step")
    table.add_column("Kind")
    for step in SKELETON:
        table.add_row(str(step.position), step.name, step.kind.value)
    console.print(table)
