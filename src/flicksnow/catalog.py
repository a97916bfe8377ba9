"""Read-only sample fixtures and the booking screen's browse state.

Movies, dates, booking history and the sample profile are plain frozen
dataclasses grouped in a ``Catalog``. The built-in catalog mirrors the demo
app's sample data; a YAML file with the same shape can replace it.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
from pathlib import Path
from typing import Any

import yaml

from flicksnow.config import FlicksNowConfigError

logger = logging.getLogger("flicksnow.catalog")

NO_SHOWTIME = "N/A"


@dataclasses.dataclass(frozen=True)
class Movie:
    title: str
    genre: str = ""
    duration: str = ""
    rating: str = ""
    language: str = ""
    show_times: tuple[str, ...] = ()
    certificate: str = ""


@dataclasses.dataclass(frozen=True)
class BookingDate:
    label: str  # e.g. "Today"
    day: str  # e.g. "Mon 03"


@dataclasses.dataclass(frozen=True)
class BookingRecord:
    movie_title: str
    day: str
    show_time: str


@dataclasses.dataclass(frozen=True)
class UserProfile:
    name: str
    email: str
    city: str


DEFAULT_DATES = (
    BookingDate("Today", "Mon 03"),
    BookingDate("Tomorrow", "Tue 04"),
    BookingDate("Wed", "Wed 05"),
    BookingDate("Thu", "Thu 06"),
    BookingDate("Fri", "Fri 07"),
)

DEFAULT_MOVIES = (
    Movie(
        title="The Last Stand",
        genre="Action • Thriller",
        duration="2h 15m",
        rating="⭐ 4.5",
        language="English",
        show_times=("10:30", "13:15", "16:00", "20:30"),
        certificate="U/A",
    ),
    Movie(
        title="Love in Paris",
        genre="Romance • Drama",
        duration="2h 02m",
        rating="⭐ 4.2",
        language="English",
        show_times=("11:00", "14:30", "18:15"),
        certificate="U",
    ),
    Movie(
        title="Galaxy Quest",
        genre="Sci-Fi • Adventure",
        duration="2h 20m",
        rating="⭐ 4.7",
        language="English",
        show_times=("09:45", "13:00", "17:40", "21:10"),
        certificate="U/A",
    ),
)

DEFAULT_PROFILE = UserProfile(name="FlicksNow User", email="user@example.com", city="Chennai")


@dataclasses.dataclass(frozen=True)
class Catalog:
    """Everything the booking screen displays."""

    movies: tuple[Movie, ...]
    dates: tuple[BookingDate, ...]
    bookings: tuple[BookingRecord, ...]
    profile: UserProfile

    @classmethod
    def default(cls) -> Catalog:
        return cls(movies=DEFAULT_MOVIES, dates=DEFAULT_DATES, bookings=(), profile=DEFAULT_PROFILE)

    @classmethod
    def from_file(cls, path: Path) -> Catalog:
        """Load a catalog from YAML. Sections that are absent keep their defaults."""
        if not path.exists():
            raise FlicksNowConfigError(f"Catalog file not found: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise FlicksNowConfigError(f"Invalid YAML in {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise FlicksNowConfigError(f"Catalog file must be a YAML mapping: {path}")
        logger.debug("Loaded catalog from %s", path)
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> Catalog:
        default = cls.default()

        movies = default.movies
        if "movies" in data:
            movies = tuple(_parse_movie(entry) for entry in _entries(data, "movies"))

        dates = default.dates
        if "dates" in data:
            dates = tuple(_parse_date(entry) for entry in _entries(data, "dates"))

        bookings = tuple(_parse_booking(entry) for entry in _entries(data, "bookings"))

        profile = default.profile
        if isinstance(data.get("profile"), dict):
            p = data["profile"]
            profile = UserProfile(
                name=str(p.get("name", profile.name)),
                email=str(p.get("email", profile.email)),
                city=str(p.get("city", profile.city)),
            )

        return cls(movies=movies, dates=dates, bookings=bookings, profile=profile)

    def find_movie(self, title: str) -> Movie | None:
        wanted = title.strip().casefold()
        for movie in self.movies:
            if movie.title.casefold() == wanted:
                return movie
        return None


def _entries(data: dict[str, Any], section: str) -> list[Any]:
    entries = data.get(section) or []
    if not isinstance(entries, list):
        raise FlicksNowConfigError(f"Catalog section '{section}' must be a list")
    return entries


def _parse_movie(entry: Any) -> Movie:
    if not isinstance(entry, dict) or not entry.get("title"):
        raise FlicksNowConfigError(f"Movie entry needs a title: {entry!r}")
    return Movie(
        title=str(entry["title"]),
        genre=str(entry.get("genre", "")),
        duration=str(entry.get("duration", "")),
        rating=str(entry.get("rating", "")),
        language=str(entry.get("language", "")),
        show_times=tuple(str(t) for t in entry.get("show_times") or []),
        certificate=str(entry.get("certificate", "")),
    )


def _parse_date(entry: Any) -> BookingDate:
    if not isinstance(entry, dict) or "label" not in entry or "day" not in entry:
        raise FlicksNowConfigError(f"Date entry needs a label and a day: {entry!r}")
    return BookingDate(label=str(entry["label"]), day=str(entry["day"]))


def _parse_booking(entry: Any) -> BookingRecord:
    if not isinstance(entry, dict) or not entry.get("movie"):
        raise FlicksNowConfigError(f"Booking entry needs a movie: {entry!r}")
    return BookingRecord(
        movie_title=str(entry["movie"]),
        day=str(entry.get("day", "")),
        show_time=str(entry.get("time", NO_SHOWTIME)),
    )


# ---------------------------------------------------------------------------
# Booking screen state
# ---------------------------------------------------------------------------


class Tab(enum.IntEnum):
    HOME = 0
    BOOKINGS = 1
    PROFILE = 2

    @property
    def title(self) -> str:
        return TAB_TITLES[self]


TAB_TITLES = {Tab.HOME: "Now Showing", Tab.BOOKINGS: "My Bookings", Tab.PROFILE: "Profile"}


@dataclasses.dataclass(frozen=True)
class BrowseState:
    """Selected bottom-bar tab and selected date on the home tab."""

    tab: Tab = Tab.HOME
    date_index: int = 0

    def select_tab(self, tab: int) -> BrowseState:
        try:
            selected = Tab(tab)
        except ValueError:
            raise ValueError(f"No such tab: {tab}") from None
        return dataclasses.replace(self, tab=selected)

    def select_date(self, index: int, catalog: Catalog) -> BrowseState:
        """Select a date by index. A catalog without dates only accepts index 0."""
        if not catalog.dates:
            if index != 0:
                raise ValueError(f"Date index {index} out of range (no dates available)")
            return dataclasses.replace(self, date_index=0)
        if not 0 <= index < len(catalog.dates):
            raise ValueError(f"Date index {index} out of range (0-{len(catalog.dates) - 1})")
        return dataclasses.replace(self, date_index=index)

    def selected_date(self, catalog: Catalog) -> BookingDate | None:
        return catalog.dates[self.date_index] if catalog.dates else None


def book_message(movie: Movie, time: str | None = None) -> str:
    """Return the confirmation toast for booking *movie* at *time*.

    Without a time the first show time is used.
    """
    if time is None:
        time = movie.show_times[0] if movie.show_times else NO_SHOWTIME
    elif time not in movie.show_times:
        raise ValueError(f"{movie.title} has no show at {time}")
    return f"Booked {movie.title} at {time}"
