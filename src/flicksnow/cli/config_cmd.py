"""flicksnow config — View and manage FlicksNow configuration.

Subcommands: show, set.
"""

from __future__ import annotations

from pathlib import Path

import typer
import yaml
from rich.table import Table

from flicksnow.cli.common import console, error_panel
from flicksnow.config import (
    CONFIG_FILENAME,
    FlicksNowConfig,
    FlicksNowConfigError,
    find_project_dir,
    resolve_config_path,
)

config_app = typer.Typer(
    name="config",
    help="View and manage FlicksNow configuration.",
    no_args_is_help=True,
)

_FLOAT_KEYS = ("sign_in_delay", "sign_up_delay", "auth_timeout", "splash_duration")
_KNOWN_KEYS = (*_FLOAT_KEYS, "catalog")


def _load_raw_config(project_dir: Path) -> dict:
    """Load the raw YAML config dict."""
    config_path = project_dir / CONFIG_FILENAME
    if not config_path.is_file():
        return {}
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        error_panel(f"Invalid YAML in {config_path}: {exc}")
        raise typer.Exit(code=2)
    return data if isinstance(data, dict) else {}


def _save_raw_config(project_dir: Path, data: dict) -> None:
    """Write the config dict to config.yaml."""
    config_path = project_dir / CONFIG_FILENAME
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)


@config_app.command(name="show")
def config_show(
    dir: Path | None = typer.Option(
        None,
        "--dir",
        "-d",
        help="Path to .flicksnow/ directory.",
    ),
) -> None:
    """Show the resolved FlicksNow configuration."""
    config_path = dir / CONFIG_FILENAME if dir else resolve_config_path()

    try:
        if config_path is not None and config_path.is_file():
            config = FlicksNowConfig.from_file(config_path)
            source = "config"
        else:
            config = FlicksNowConfig()
            source = "default"
    except FlicksNowConfigError as exc:
        error_panel(str(exc))
        raise typer.Exit(code=2)

    table = Table(title="FlicksNow Configuration", border_style="cyan")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_column("Source", style="dim")

    table.add_row("Config File", str(config_path) if config_path else "-", source)
    table.add_row("Sign-in Delay", f"{config.sign_in_delay}s", source)
    table.add_row("Sign-up Delay", f"{config.sign_up_delay}s", source)
    table.add_row("Auth Timeout", f"{config.auth_timeout}s" if config.auth_timeout is not None else "none", source)
    table.add_row("Splash Duration", f"{config.splash_duration}s", source)
    table.add_row("Catalog", str(config.catalog_path) if config.catalog_path else "built-in", source)

    console.print()
    console.print(table)
    console.print()


@config_app.command(name="set")
def config_set(
    key: str = typer.Argument(..., help="Configuration key to set."),
    value: str = typer.Argument(..., help="Value to set."),
    dir: Path | None = typer.Option(
        None,
        "--dir",
        "-d",
        help="Path to .flicksnow/ directory.",
    ),
) -> None:
    """Set a configuration value in .flicksnow/config.yaml.

    Examples:
      flicksnow config set sign_in_delay 0
      flicksnow config set auth_timeout 5
      flicksnow config set catalog my-movies.yaml
    """
    if key not in _KNOWN_KEYS:
        console.print(f"[red]Unknown key:[/red] {key} [dim](known: {', '.join(_KNOWN_KEYS)})[/dim]")
        raise typer.Exit(code=2)

    project_dir = dir or find_project_dir()
    data = _load_raw_config(project_dir)

    coerced_value: object = value
    if key in _FLOAT_KEYS:
        try:
            coerced_value = float(value)
        except ValueError:
            console.print(f"[red]Invalid number for '{key}':[/red] {value}")
            raise typer.Exit(code=2)
        if coerced_value < 0:
            console.print(f"[red]'{key}' must not be negative:[/red] {value}")
            raise typer.Exit(code=2)

    data[key] = coerced_value
    _save_raw_config(project_dir, data)

    console.print(f"[green]Set[/green] {key} = {coerced_value} [dim]in {project_dir / CONFIG_FILENAME}[/dim]")
