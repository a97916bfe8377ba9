"""flicksnow login / signup — Drive the credential forms from the terminal.

Fields not given as options are prompted for (passwords hidden). The
submission runs through the same controller a screen would use: inline
field errors on invalid input, a spinner while the simulated backend is
busy, and a transient notice on failure.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.panel import Panel
from rich.table import Table

from flicksnow.auth import SimulatedAuthenticator
from flicksnow.cli.common import CONFIG_OPTION_HELP, console, load_config_or_exit
from flicksnow.forms import LoginController, SignupController, SubmissionController, SubmissionStatus
from flicksnow.models import FIELD_LABELS

logger = logging.getLogger("flicksnow.cli.auth_cmd")


def _prompt(label: str, hidden: bool = False) -> str:
    return typer.prompt(label, default="", show_default=False, hide_input=hidden)


def _notify(message: str) -> None:
    console.print(Panel(f"[red]{message}[/red]", border_style="red"))


def _render_errors(controller: SubmissionController) -> None:
    table = Table(title="Please fix the following", border_style="red")
    table.add_column("Field", style="bold")
    table.add_column("Error", style="red")
    for name, error in controller.form.errors.items():
        if error is not None:
            table.add_row(FIELD_LABELS.get(name, name), error)
    console.print(table)


def _run(controller: SubmissionController, busy_label: str) -> None:
    """Submit the form and exit non-zero unless the attempt succeeded."""
    with console.status(busy_label, spinner="dots"):
        state = asyncio.run(controller.submit())

    if state.status is SubmissionStatus.SUCCEEDED:
        return
    if state.status is SubmissionStatus.IDLE:
        _render_errors(controller)
    raise typer.Exit(code=1)


def login(
    email: Optional[str] = typer.Option(None, "--email", "-e", help="Account email."),
    password: Optional[str] = typer.Option(None, "--password", "-p", help="Account password."),
    remember_me: bool = typer.Option(
        False, "--remember-me", help="Keep me signed in (not persisted by the demo backend)."
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_OPTION_HELP),
) -> None:
    """Sign in to FlicksNow."""
    cfg = load_config_or_exit(config)

    if email is None:
        email = _prompt("Email")
    if password is None:
        password = _prompt("Password", hidden=True)
    if remember_me:
        logger.debug("Remember me requested; the simulated backend keeps no session")

    controller = LoginController(
        SimulatedAuthenticator.from_config(cfg),
        on_success=lambda: console.print("\n[bold green]Welcome 🎬[/bold green]\n"),
        notify=_notify,
        timeout=cfg.auth_timeout,
    )
    controller.set_field("email", email)
    controller.set_field("password", password)
    _run(controller, "Signing in...")


def signup(
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Full name."),
    email: Optional[str] = typer.Option(None, "--email", "-e", help="Account email."),
    password: Optional[str] = typer.Option(None, "--password", "-p", help="Password (min 6 characters)."),
    confirm_password: Optional[str] = typer.Option(None, "--confirm-password", help="Repeat the password."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_OPTION_HELP),
) -> None:
    """Create a FlicksNow account."""
    cfg = load_config_or_exit(config)

    if name is None:
        name = _prompt("Full name")
    if email is None:
        email = _prompt("Email")
    if password is None:
        password = _prompt("Password", hidden=True)
    if confirm_password is None:
        confirm_password = _prompt("Confirm password", hidden=True)

    controller = SignupController(
        SimulatedAuthenticator.from_config(cfg),
        on_success=lambda: console.print(
            "\n[bold green]Account created.[/bold green] [dim]Sign in with: flicksnow login[/dim]\n"
        ),
        notify=_notify,
        timeout=cfg.auth_timeout,
    )
    controller.set_field("full_name", name)
    controller.set_field("email", email)
    controller.set_field("password", password)
    controller.set_field("confirm_password", confirm_password)
    _run(controller, "Creating account...")
