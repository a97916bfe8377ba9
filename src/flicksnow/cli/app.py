"""FlicksNow CLI — Main Typer entry point.

Registers all subcommands and provides --version / --verbose global options.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

import typer

from flicksnow import __version__
from flicksnow.cli.common import CONFIG_OPTION_HELP, console, load_config_or_exit
from flicksnow.models import APP_NAME, TAGLINE

# ── ASCII Banner ──────────────────────────────────────────────────────────

BANNER = r"""
 _____ _ _      _        _   _
|  ___| (_) ___| | _____| \ | | _____      __
| |_  | | |/ __| |/ / __|  \| |/ _ \ \ /\ / /
|  _| | | | (__|   <\__ \ |\  | (_) \ V  V /
|_|   |_|_|\___|_|\_\___/_| \_|\___/ \_/\_/
"""


def _print_banner() -> None:
    console.print(BANNER, style="bold yellow")
    console.print(f"  {TAGLINE}", style="dim")


# ── Version callback ──────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        _print_banner()
        console.print(f"  v{__version__}\n", style="bold")
        raise typer.Exit()


# ── Main app ──────────────────────────────────────────────────────────────

app = typer.Typer(
    name="flicksnow",
    help=f"{APP_NAME} — {TAGLINE}",
    rich_markup_mode="rich",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show FlicksNow version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
) -> None:
    """FlicksNow -- movie ticket booking demo.

    Sign up, sign in, browse movies and book a show. All data is sample data.
    """
    if verbose:
        import logging

        logging.basicConfig(level=logging.DEBUG, format="%(name)s  %(message)s")


@app.command(name="splash", help="Show the splash screen.")
def splash(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_OPTION_HELP),
) -> None:
    cfg = load_config_or_exit(config)
    _print_banner()
    time.sleep(cfg.splash_duration)
    console.print("\n[dim]Next:[/dim] [bold]flicksnow login[/bold]\n")


# ── Register subcommands ──────────────────────────────────────────────────
# Each subcommand is a separate module to keep this file lean.

from flicksnow.cli.auth_cmd import login, signup  # noqa: E402
from flicksnow.cli.browse import book, bookings, movies, profile  # noqa: E402
from flicksnow.cli.config_cmd import config_app  # noqa: E402
from flicksnow.cli.init_cmd import init  # noqa: E402

app.command(name="init", help="Initialize a .flicksnow/ project directory.")(init)
app.command(name="login", help="Sign in with email and password.")(login)
app.command(name="signup", help="Create an account.")(signup)
app.command(name="movies", help="List movies and show times.")(movies)
app.command(name="book", help="Book a show.")(book)
app.command(name="bookings", help="Show booking history.")(bookings)
app.command(name="profile", help="Show the user profile.")(profile)
app.add_typer(config_app, name="config", help="View and manage FlicksNow configuration.")
