from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from lintrc import __version__
from lintrc.config import DEFAULT_CONFIG_FILENAME, EXTENDS_MAP, load_config
from lintrc.engine.resolution import resolve_config
from lintrc.errors import ConfigError
from lintrc.logging_utils import configure_logging
from lintrc.rules.plugins import load_plugin_rules
from lintrc.rules.registry import build_catalog, catalog_index

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="lintrc - resolve the active rule set of an ESLint-style config.",
)
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def _main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose logs (printed to stderr)."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Reduce non-essential output."),
    ] = False,
) -> None:
    """lintrc CLI."""

    if verbose and quiet:
        raise typer.BadParameter("Choose at most one: --verbose or --quiet.")
    configure_logging(verbose=verbose, quiet=quiet)


def _fail(exc: ConfigError) -> typer.Exit:
    err_console.print(Text(str(exc), style="bold red"))
    return typer.Exit(code=2)


def _json_safe(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_json_safe(v) for v in value]
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    return value


@app.command()
def rules(
    config_path: Annotated[
        Path,
        typer.Argument(
            dir_okay=False,
            help="ESLint-style JSON config file.",
        ),
    ] = Path(DEFAULT_CONFIG_FILENAME),
    output_format: Annotated[
        str,
        typer.Option("--format", help="Output format: terminal, json.", show_default=True),
    ] = "terminal",
    show_all: Annotated[
        bool,
        typer.Option("--all", help="Also list catalog rules that are not active."),
    ] = False,
    plugins: Annotated[
        list[str] | None,
        typer.Option("--plugin", help="Extra rules to load, as `module` or `module:attr`. Repeatable."),
    ] = None,
) -> None:
    """
    Resolve a config file and list the active rules, sorted by name.
    """

    normalized = output_format.strip().lower()
    if normalized not in {"terminal", "json"}:
        raise typer.BadParameter("Unsupported format. Use: terminal, json.")

    try:
        catalog = build_catalog(load_plugin_rules(plugins or ()))
        config = load_config(config_path)
        active = resolve_config(config, catalog)
    except ConfigError as exc:
        raise _fail(exc) from exc

    logger.debug("catalog has %d rule(s), %d active", len(catalog), len(active))

    active_keys = {r.key for r in active}
    listed = list(active)
    if show_all:
        # Inactive rules are listed with their default options.
        configured = {r.key: r for r in active}
        index = catalog_index(catalog)
        listed = sorted((configured.get(key, rule) for key, rule in index.items()), key=lambda r: r.name)

    rows = [
        {
            "category": rule.category,
            "name": rule.name,
            "enabled": rule.key in active_keys,
            "config": _json_safe(rule.options()),
        }
        for rule in listed
    ]

    if normalized == "json":
        typer.echo(json.dumps(rows, indent=2, sort_keys=True))
        return

    table = Table(title=f"Active rules ({config_path})")
    table.add_column("Rule", style="bold")
    table.add_column("Category")
    table.add_column("Enabled", justify="center")
    table.add_column("Config")
    for row in rows:
        table.add_row(
            str(row["name"]),
            str(row["category"]),
            "yes" if row["enabled"] else "no",
            json.dumps(row["config"], sort_keys=True) if row["config"] else "-",
        )
    console.print(table)


@app.command()
def presets(
    output_format: Annotated[
        str,
        typer.Option("--format", help="Output format: terminal, json.", show_default=True),
    ] = "terminal",
) -> None:
    """
    List the `extends` presets understood by lintrc and the category each enables.
    """

    normalized = output_format.strip().lower()
    if normalized == "json":
        typer.echo(json.dumps(dict(EXTENDS_MAP), indent=2, sort_keys=True))
        return
    if normalized != "terminal":
        raise typer.BadParameter("Unsupported format. Use: terminal, json.")

    table = Table(title="Presets")
    table.add_column("Preset", style="bold")
    table.add_column("Category")
    for preset in sorted(EXTENDS_MAP):
        table.add_row(preset, EXTENDS_MAP[preset])
    console.print(table)
