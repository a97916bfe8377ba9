"""Shared helpers for CLI commands: config/catalog loading with error panels."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from flicksnow.catalog import Catalog
from flicksnow.config import FlicksNowConfig, FlicksNowConfigError

console = Console()

CONFIG_OPTION_HELP = "Path to a config.yaml (defaults to .flicksnow/config.yaml or $FLICKSNOW_CONFIG)."


def error_panel(message: str, title: str = "Config Error") -> None:
    console.print(Panel(f"[red]{message}[/red]", title=f"[red]{title}[/red]", border_style="red"))


def load_config_or_exit(config_path: Path | None) -> FlicksNowConfig:
    try:
        return FlicksNowConfig.load(config_path)
    except FlicksNowConfigError as exc:
        error_panel(str(exc))
        raise typer.Exit(code=2)


def load_catalog_or_exit(config: FlicksNowConfig) -> Catalog:
    if config.catalog_path is None:
        return Catalog.default()
    try:
        return Catalog.from_file(config.catalog_path)
    except FlicksNowConfigError as exc:
        error_panel(str(exc))
        raise typer.Exit(code=2)
