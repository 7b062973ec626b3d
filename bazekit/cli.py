"""CLI entry point for bazekit."""

from __future__ import annotations

import logging
import sys
from functools import wraps
from typing import Callable

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from bazekit.actions.add import add as add_components
from bazekit.actions.init import init as init_config
from bazekit.actions.listing import list_components
from bazekit.actions.set_registry import set_registry as set_registry_url
from bazekit.errors import BazekitError, RegistryError
from bazekit.prompts import TerminalPrompter
from bazekit.registry.client import get_registry_client

__version__ = "0.0.1"

console = Console()


def setup_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)


def report_errors(fn: Callable) -> Callable:
    """Print BazekitErrors as red lines and exit with their exit code."""

    @wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except BazekitError as e:
            message = str(e)
            if isinstance(e, RegistryError):
                message = f"Failed to load remote registry: {message}"
            console.print(f"[red]{escape(message)}[/red]")
            if e.hint:
                console.print(f"[red]{escape(e.hint)}[/red]")
            sys.exit(e.exit_code)

    return wrapper


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="bazekit")
def cli(debug: bool) -> None:
    """Bazekit UI component fetcher"""
    setup_logging(debug)


@cli.command()
@click.argument("components", nargs=-1, required=True)
@report_errors
def add(components: tuple[str, ...]) -> None:
    """Download one or more components into the config root."""
    result = add_components(
        list(components),
        client=get_registry_client(),
        prompter=TerminalPrompter(),
        console=console,
    )
    if not result.ok:
        sys.exit(1)


@cli.command("list")
@click.option("--verbose", "-v", is_flag=True, help="Show files for each component")
@report_errors
def list_cmd(verbose: bool) -> None:
    """List available components in the registry."""
    list_components(client=get_registry_client(), console=console, verbose=verbose)


@cli.command()
@click.option("--yes", "-y", is_flag=True, help="Use defaults without prompting")
@report_errors
def init(yes: bool) -> None:
    """Create a .bazekitrc config interactively."""
    init_config(prompter=TerminalPrompter(), console=console, use_defaults=yes)


@cli.command("set-registry")
@click.argument("url")
@click.option("--force", "-f", is_flag=True, help="Force update even if unchanged")
@report_errors
def set_registry(url: str, force: bool) -> None:
    """Update the registry URL in .bazekitrc."""
    set_registry_url(url, console=console, force=force)


if __name__ == "__main__":
    cli()
