"""flicksnow movies / book / bookings / profile — The booking screen tabs.

All data comes from the injected catalog (built-in sample data unless the
config points at a catalog YAML). Booking only prints a confirmation notice.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from flicksnow.catalog import BrowseState, Catalog, Tab, book_message
from flicksnow.cli.common import CONFIG_OPTION_HELP, console, error_panel, load_catalog_or_exit, load_config_or_exit

EMPTY_BOOKINGS_TEXT = "Your upcoming and past tickets will appear here."


def _catalog(config: Path | None) -> Catalog:
    return load_catalog_or_exit(load_config_or_exit(config))


def _select_date(catalog: Catalog, index: int) -> BrowseState:
    try:
        return BrowseState().select_date(index, catalog)
    except ValueError as exc:
        error_panel(str(exc), title="Invalid Date")
        raise typer.Exit(code=2)


def _date_strip(catalog: Catalog, state: BrowseState) -> Text:
    strip = Text()
    for index, date in enumerate(catalog.dates):
        style = "bold black on yellow" if index == state.date_index else "dim"
        strip.append(f" {date.label} · {date.day} ", style=style)
        strip.append(" ")
    return strip


def _render_home(catalog: Catalog, state: BrowseState) -> None:
    console.print()
    console.print(_date_strip(catalog, state))
    console.print()

    table = Table(title=state.tab.title, border_style="cyan")
    table.add_column("Title", style="bold", no_wrap=True)
    table.add_column("Genre")
    table.add_column("Duration")
    table.add_column("Rating")
    table.add_column("Cert", style="dim")
    table.add_column("Show times")
    for movie in catalog.movies:
        table.add_row(
            movie.title,
            movie.genre,
            movie.duration,
            movie.rating,
            movie.certificate,
            "  ".join(movie.show_times) or "-",
        )
    console.print(table)
    console.print()


def _render_bookings(catalog: Catalog, state: BrowseState) -> None:
    if not catalog.bookings:
        console.print(Panel(EMPTY_BOOKINGS_TEXT, title=state.tab.title, border_style="yellow"))
        return

    table = Table(title=state.tab.title, border_style="yellow")
    table.add_column("Movie", style="bold")
    table.add_column("Day")
    table.add_column("Time")
    for record in catalog.bookings:
        table.add_row(record.movie_title, record.day, record.show_time)
    console.print(table)


def _render_profile(catalog: Catalog, state: BrowseState) -> None:
    user = catalog.profile
    body = f"Name: {user.name}\nEmail: {user.email}\nPreferred City: {user.city}"
    console.print(Panel(body, title=state.tab.title, border_style="yellow"))


_RENDERERS = {
    Tab.HOME: _render_home,
    Tab.BOOKINGS: _render_bookings,
    Tab.PROFILE: _render_profile,
}


def _show(catalog: Catalog, state: BrowseState) -> None:
    _RENDERERS[state.tab](catalog, state)


def movies(
    date: int = typer.Option(0, "--date", "-d", help="Index of the date to browse (0 = today)."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_OPTION_HELP),
) -> None:
    """List movies and show times for a date."""
    catalog = _catalog(config)
    _show(catalog, _select_date(catalog, date).select_tab(Tab.HOME))


def book(
    title: str = typer.Argument(..., help="Movie title (case-insensitive)."),
    time: Optional[str] = typer.Option(None, "--time", "-t", help="Show time (defaults to the first show)."),
    date: int = typer.Option(0, "--date", "-d", help="Index of the date to book for."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_OPTION_HELP),
) -> None:
    """Book a movie (prints a confirmation notice)."""
    catalog = _catalog(config)
    state = _select_date(catalog, date)

    movie = catalog.find_movie(title)
    if movie is None:
        error_panel(f"Unknown movie: {title}", title="Not Found")
        raise typer.Exit(code=2)

    try:
        message = book_message(movie, time)
    except ValueError as exc:
        error_panel(str(exc), title="Invalid Show Time")
        raise typer.Exit(code=2)

    selected = state.selected_date(catalog)
    console.print(Panel(message, subtitle=selected.day if selected else None, border_style="green"))


def bookings(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_OPTION_HELP),
) -> None:
    """Show booking history."""
    _show(_catalog(config), BrowseState().select_tab(Tab.BOOKINGS))


def profile(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_OPTION_HELP),
) -> None:
    """Show the sample user profile."""
    _show(_catalog(config), BrowseState().select_tab(Tab.PROFILE))
