"""Shared fixtures for FlicksNow unit tests."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
import yaml

from flicksnow.forms import AuthResult


def run_async(coro):
    """Run a coroutine synchronously in a new event loop."""
    return asyncio.run(coro)


# ---------------------------------------------------------------------------
# Fake authentication port
# ---------------------------------------------------------------------------

class FakePort:
    """Records every call and answers with a scripted outcome.

    ``outcome`` may be an AuthResult, a bool, or an exception instance to raise.
    """

    def __init__(self, outcome=None, delay: float = 0.0) -> None:
        self.outcome = AuthResult.success() if outcome is None else outcome
        self.delay = delay
        self.login_calls: list[tuple[str, str]] = []
        self.signup_calls: list[tuple[str, str, str]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    @property
    def call_count(self) -> int:
        return len(self.login_calls) + len(self.signup_calls)

    async def _answer(self):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome

    async def authenticate_login(self, email: str, password: str):
        self.login_calls.append((email, password))
        return await self._answer()

    async def authenticate_signup(self, name: str, email: str, password: str):
        self.signup_calls.append((name, email, password))
        return await self._answer()


@pytest.fixture
def fake_port() -> FakePort:
    return FakePort()


# ---------------------------------------------------------------------------
# Fixture: temporary .flicksnow/ project with zero simulated delay
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Create a temporary .flicksnow/ project directory with a fast config."""
    project_dir = tmp_path / ".flicksnow"
    project_dir.mkdir()
    config_data = {
        "sign_in_delay": 0,
        "sign_up_delay": 0,
        "splash_duration": 0,
    }
    (project_dir / "config.yaml").write_text(
        yaml.dump(config_data, default_flow_style=False), encoding="utf-8"
    )
    return project_dir


@pytest.fixture
def sample_catalog_yaml() -> str:
    """Return a valid catalog.yaml as a string."""
    return """\
dates:
  - {label: Today, day: Sat 01}
  - {label: Tomorrow, day: Sun 02}
movies:
  - title: Night Train
    genre: Mystery
    duration: 1h 50m
    rating: "4.1"
    language: French
    certificate: A
    show_times: ["19:00", "22:15"]
bookings:
  - {movie: Night Train, day: Sat 01, time: "19:00"}
profile:
  name: Test User
  email: test@example.com
  city: Lyon
"""
