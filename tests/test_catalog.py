"""Unit tests for flicksnow.catalog — fixtures, browse state and booking notice."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from flicksnow.catalog import (
    BookingRecord,
    BrowseState,
    Catalog,
    Movie,
    Tab,
    book_message,
)
from flicksnow.config import FlicksNowConfigError


# ---------------------------------------------------------------------------
# 1. Built-in catalog
# ---------------------------------------------------------------------------

class TestDefaultCatalog:

    def test_has_sample_movies(self):
        titles = [m.title for m in Catalog.default().movies]
        assert titles == ["The Last Stand", "Love in Paris", "Galaxy Quest"]

    def test_has_five_dates_starting_today(self):
        dates = Catalog.default().dates
        assert len(dates) == 5
        assert dates[0].label == "Today"

    def test_booking_history_is_empty(self):
        assert Catalog.default().bookings == ()

    def test_sample_profile(self):
        profile = Catalog.default().profile
        assert profile.name == "FlicksNow User"
        assert profile.email == "user@example.com"
        assert profile.city == "Chennai"

    def test_find_movie_is_case_insensitive(self):
        movie = Catalog.default().find_movie("  galaxy QUEST ")
        assert movie is not None
        assert movie.title == "Galaxy Quest"

    def test_find_movie_unknown_returns_none(self):
        assert Catalog.default().find_movie("Nope") is None


# ---------------------------------------------------------------------------
# 2. Catalog.from_file()
# ---------------------------------------------------------------------------

class TestCatalogFromFile:

    def test_loads_all_sections(self, tmp_path: Path, sample_catalog_yaml: str):
        path = tmp_path / "catalog.yaml"
        path.write_text(sample_catalog_yaml, encoding="utf-8")

        catalog = Catalog.from_file(path)

        assert [m.title for m in catalog.movies] == ["Night Train"]
        assert catalog.movies[0].show_times == ("19:00", "22:15")
        assert [d.day for d in catalog.dates] == ["Sat 01", "Sun 02"]
        assert catalog.bookings == (BookingRecord("Night Train", "Sat 01", "19:00"),)
        assert catalog.profile.city == "Lyon"

    def test_missing_sections_keep_defaults(self, tmp_path: Path):
        path = tmp_path / "catalog.yaml"
        path.write_text("profile:\n  city: Pune\n", encoding="utf-8")

        catalog = Catalog.from_file(path)

        assert catalog.movies == Catalog.default().movies
        assert catalog.profile.city == "Pune"
        assert catalog.profile.name == "FlicksNow User"

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FlicksNowConfigError, match="Catalog file not found"):
            Catalog.from_file(tmp_path / "missing.yaml")

    def test_movie_without_title_raises(self, tmp_path: Path):
        path = tmp_path / "catalog.yaml"
        path.write_text("movies:\n  - genre: Drama\n", encoding="utf-8")
        with pytest.raises(FlicksNowConfigError, match="needs a title"):
            Catalog.from_file(path)

    def test_non_mapping_raises(self, tmp_path: Path):
        path = tmp_path / "catalog.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(FlicksNowConfigError, match="YAML mapping"):
            Catalog.from_file(path)

    @pytest.mark.parametrize("entry", ["Today", {"label": "Today"}, {"day": "Mon 03"}])
    def test_malformed_date_raises(self, entry):
        with pytest.raises(FlicksNowConfigError, match="needs a label and a day"):
            Catalog._from_dict({"dates": [entry]})

    @pytest.mark.parametrize("entry", ["Night Train", {"day": "Mon"}, {"movie": ""}])
    def test_malformed_booking_raises(self, entry):
        with pytest.raises(FlicksNowConfigError, match="needs a movie"):
            Catalog._from_dict({"bookings": [entry]})

    def test_section_must_be_a_list(self):
        with pytest.raises(FlicksNowConfigError, match="must be a list"):
            Catalog._from_dict({"dates": 5})

    def test_booking_defaults_missing_time(self):
        catalog = Catalog._from_dict({"bookings": [{"movie": "Galaxy Quest", "day": "Mon 03"}]})
        assert catalog.bookings[0].show_time == "N/A"


# ---------------------------------------------------------------------------
# 3. BrowseState
# ---------------------------------------------------------------------------

class TestBrowseState:

    def test_defaults_to_home_and_today(self):
        state = BrowseState()
        assert state.tab is Tab.HOME
        assert state.date_index == 0

    def test_select_tab(self):
        assert BrowseState().select_tab(2).tab is Tab.PROFILE

    def test_select_invalid_tab_raises(self):
        with pytest.raises(ValueError, match="No such tab"):
            BrowseState().select_tab(3)

    def test_select_date_returns_new_state(self):
        state = BrowseState()
        moved = state.select_date(4, Catalog.default())
        assert moved.date_index == 4
        assert state.date_index == 0

    @pytest.mark.parametrize("index", [-1, 5])
    def test_select_date_out_of_range(self, index):
        with pytest.raises(ValueError, match="out of range"):
            BrowseState().select_date(index, Catalog.default())

    def test_empty_date_list_accepts_only_first_index(self):
        catalog = dataclasses.replace(Catalog.default(), dates=())
        state = BrowseState().select_date(0, catalog)
        assert state.selected_date(catalog) is None
        with pytest.raises(ValueError, match="no dates available"):
            BrowseState().select_date(1, catalog)

    def test_selected_date(self):
        catalog = Catalog.default()
        assert BrowseState().select_date(1, catalog).selected_date(catalog).label == "Tomorrow"

    def test_tab_titles(self):
        assert BrowseState().select_tab(Tab.BOOKINGS).tab.title == "My Bookings"
        assert Tab.HOME.title == "Now Showing"


# ---------------------------------------------------------------------------
# 4. book_message()
# ---------------------------------------------------------------------------

class TestBookMessage:

    def test_defaults_to_first_show_time(self):
        movie = Catalog.default().movies[0]
        assert book_message(movie) == "Booked The Last Stand at 10:30"

    def test_explicit_show_time(self):
        movie = Catalog.default().movies[2]
        assert book_message(movie, "17:40") == "Booked Galaxy Quest at 17:40"

    def test_no_show_times(self):
        assert book_message(Movie(title="Pilot")) == "Booked Pilot at N/A"

    def test_unknown_show_time_raises(self):
        with pytest.raises(ValueError, match="no show at 23:59"):
            book_message(Catalog.default().movies[0], "23:59")
