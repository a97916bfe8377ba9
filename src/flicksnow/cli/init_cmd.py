"""flicksnow init — Initialize a .flicksnow/ project directory.

Writes a config.yaml template and a sample catalog.yaml so the demo can be
tuned (simulated delays, auth timeout) and fed custom fixtures.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.panel import Panel
from rich.tree import Tree

from flicksnow.cli.common import console
from flicksnow.config import CONFIG_FILENAME, PROJECT_DIRNAME

CATALOG_FILENAME = "catalog.yaml"

_SAMPLE_CONFIG = """\
# FlicksNow project configuration

# Simulated backend latency (seconds)
sign_in_delay: 1.0
sign_up_delay: 1.2

# Give up on an authentication call after this many seconds (omit for no limit)
# auth_timeout: 10

# Splash screen duration (seconds)
splash_duration: 2.5

# Fixtures shown on the booking screen (relative to this directory)
catalog: catalog.yaml
"""

_SAMPLE_CATALOG = """\
dates:
  - {label: Today, day: Mon 03}
  - {label: Tomorrow, day: Tue 04}
  - {label: Wed, day: Wed 05}

movies:
  - title: The Last Stand
    genre: "Action • Thriller"
    duration: 2h 15m
    rating: "⭐ 4.5"
    language: English
    certificate: U/A
    show_times: ["10:30", "13:15", "16:00", "20:30"]

  - title: Galaxy Quest
    genre: "Sci-Fi • Adventure"
    duration: 2h 20m
    rating: "⭐ 4.7"
    language: English
    certificate: U/A
    show_times: ["09:45", "13:00", "17:40", "21:10"]

bookings:
  - {movie: Galaxy Quest, day: Sat 01, time: "17:40"}

profile:
  name: FlicksNow User
  email: user@example.com
  city: Chennai
"""


def init(
    dir: Path = typer.Option(
        Path("."),
        "--dir",
        "-d",
        help="Parent directory for .flicksnow/ project. Defaults to current directory.",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing .flicksnow/ directory.",
    ),
) -> None:
    """Initialize a new FlicksNow project directory."""
    project_dir = dir.resolve() / PROJECT_DIRNAME

    if project_dir.exists() and not force:
        console.print(
            Panel(
                f"[yellow]Directory already exists:[/yellow] {project_dir}\n\n"
                "Use [bold]--force[/bold] to overwrite.",
                title="Already Initialized",
                border_style="yellow",
            )
        )
        raise typer.Exit(code=2)

    project_dir.mkdir(parents=True, exist_ok=True)
    (project_dir / CONFIG_FILENAME).write_text(_SAMPLE_CONFIG, encoding="utf-8")
    (project_dir / CATALOG_FILENAME).write_text(_SAMPLE_CATALOG, encoding="utf-8")

    tree = Tree(f"[bold green]{project_dir}[/bold green]", guide_style="dim")
    tree.add(f"[cyan]{CONFIG_FILENAME}[/cyan]")
    tree.add(f"[cyan]{CATALOG_FILENAME}[/cyan]")

    console.print()
    console.print(Panel(tree, title="[bold green]FlicksNow Initialized[/bold green]", border_style="green"))
    console.print()
    console.print("[dim]Next steps:[/dim]")
    console.print("  1. Edit [cyan].flicksnow/catalog.yaml[/cyan] with your own movies")
    console.print("  2. Run [bold]flicksnow signup[/bold], then [bold]flicksnow login[/bold]")
    console.print("  3. Run [bold]flicksnow movies[/bold]")
    console.print()
