"""CLI for inspecting symbols and noconflict configuration."""

import importlib
import sys
from typing import Any, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from noconflict.config import load_config
from noconflict.errors import ConfigurationError
from noconflict.exports import configure
from noconflict.log import configure_logging
from noconflict.manager import ConflictManager
from noconflict.resolution import ABSENT, GLOBAL_CONTEXT

console = Console()


def _load_context(module: Optional[str]) -> Any:
    if not module:
        return GLOBAL_CONTEXT
    try:
        return importlib.import_module(module)
    except ImportError as exc:
        raise click.BadParameter(f"cannot import {module!r}: {exc}", param_hint="--module")


@click.group()
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ...)")
def main(log_level: Optional[str]) -> None:
    """noconflict: claim global names and restore them later."""
    if log_level:
        configure_logging(log_level.upper())


@main.command()
@click.argument("symbol")
@click.option("--module", default=None, help="Module to resolve against (default: builtins)")
def resolve(symbol: str, module: Optional[str]) -> None:
    """Resolve a dotted SYMBOL and print the value it references."""
    context = _load_context(module)
    value = ConflictManager(private_cache=True).resolve(symbol, context)

    if value is ABSENT:
        console.print(f"[red]{escape(symbol)}[/red] is absent")
        sys.exit(1)

    console.print(f"[bold]{escape(symbol)}[/bold] = {escape(repr(value))}", highlight=False)


@main.command()
@click.option("--config", "config_path", default=None, help="Path to configuration file")
@click.option("--module", default=None, help="Module to resolve preload symbols against")
def check(config_path: Optional[str], module: Optional[str]) -> None:
    """Check which configured preload symbols currently resolve."""
    cfg = _load_or_fail(config_path)
    configure_logging(cfg.log_level.upper())
    context = _load_context(module)
    manager = configure(cfg, ConflictManager(private_cache=True), context)

    table = Table(title="Preload symbols")
    table.add_column("Symbol", style="cyan")
    table.add_column("Status")
    table.add_column("Type", style="magenta")

    for symbol in cfg.preload:
        if symbol in manager.bindings:
            value = manager.bindings.lookup(symbol)
            table.add_row(symbol, "[green]cached[/green]", type(value).__name__)
        else:
            table.add_row(symbol, "[yellow]absent[/yellow]", "-")

    console.print(table)
    console.print(f"Cached {len(manager.bindings)} of {len(cfg.preload)} symbols")


@main.command(name="config")
@click.option("--config", "config_path", default=None, help="Path to configuration file")
def show_config(config_path: Optional[str]) -> None:
    """Print the effective configuration."""
    cfg = _load_or_fail(config_path)

    table = Table(title="noconflict configuration")
    table.add_column("Option", style="cyan")
    table.add_column("Value")

    for key, value in cfg.options.model_dump().items():
        table.add_row(key, str(value))
    table.add_row("log_level", cfg.log_level)
    table.add_row("preload", ", ".join(cfg.preload) or "-")

    console.print(table)


def _load_or_fail(config_path: Optional[str]):
    try:
        return load_config(config_path)
    except (OSError, ConfigurationError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(2)


if __name__ == "__main__":
    main()
