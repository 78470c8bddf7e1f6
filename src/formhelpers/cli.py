"""
Command line interface for rendering templates with the form helpers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from jinja2 import TemplateError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import ConfigError, HelperConfig, get_settings, load_config
from .helpers import helper_names, resolve_namespace
from .render import load_context, render_template_file, render_to_file

console = Console()
app = typer.Typer(help="Render Jinja2 templates with HTML form helpers.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def _configure_logging(level_name: str) -> None:
    env_override = get_settings().log_level
    level_str = (env_override or level_name or "warning").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "WARNING"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _resolve_existing_file(value: Optional[Path]) -> Optional[Path]:
    """Ensure an optional path exists and is a file, returning the absolute path."""
    if value is None:
        return None
    resolved = value.expanduser().resolve()
    if not resolved.exists():
        raise typer.BadParameter(f"No file found at {resolved}")
    if not resolved.is_file():
        raise typer.BadParameter(f"Path must be a file, got directory: {resolved}")
    return resolved


def _load_config_or_exit(path: Optional[Path]) -> HelperConfig:
    if path is None:
        return HelperConfig()
    try:
        return load_config(path)
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show formhelpers version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]formhelpers[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print("Run [cyan]formhelpers render path/to/template.html[/] to render a template.")


@app.command()
def render(
    template: Path = typer.Argument(
        ...,
        help="Template file to render.",
        callback=_resolve_existing_file,
    ),
    context: Optional[Path] = typer.Option(
        None,
        "--context",
        help="JSON file whose top-level object becomes the template context.",
        callback=_resolve_existing_file,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a TOML helper configuration.",
        callback=_resolve_existing_file,
    ),
    namespace: Optional[str] = typer.Option(
        None,
        "--namespace",
        "-n",
        help="Helper namespace (helpers are registered as <namespace>-<helper>).",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the rendered template here instead of stdout.",
    ),
) -> None:
    """
    Render a template with the form helpers registered.
    """
    helper_config = _load_config_or_exit(config)
    try:
        variables = load_context(context)
    except ConfigError as exc:
        console.print(f"[bold red]Context error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    try:
        if output is not None:
            written = render_to_file(template, output, variables, helper_config, namespace=namespace)
            console.print(f"[bold green]Rendered[/] {template.name} -> {written}")
            return
        rendered = render_template_file(template, variables, helper_config, namespace=namespace)
    except TemplateError as exc:
        console.print(f"[bold red]Template error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    typer.echo(rendered)


@app.command()
def helpers(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a TOML helper configuration.",
        callback=_resolve_existing_file,
    ),
    namespace: Optional[str] = typer.Option(
        None,
        "--namespace",
        "-n",
        help="Helper namespace to list names for.",
    ),
) -> None:
    """
    List the template names the helpers are registered under.
    """
    helper_config = _load_config_or_exit(config)
    resolved = resolve_namespace(helper_config, namespace)
    table = Table(title="Registered Form Helpers")
    table.add_column("Name")
    table.add_column("Alias")
    table.add_column("Function")
    for name, alias, function in helper_names(helper_config, namespace=resolved):
        table.add_row(name, alias or "-", function.__name__)
    console.print(table)


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
