"""Authentication ports.

These protocols define the contract between the submission controller and
whatever actually checks credentials (the simulated authenticator today, a
real backend later). Consumers inject an implementation and the controller
handles validation, busy-state and failure reporting.
"""

from __future__ import annotations

import dataclasses
from typing import Protocol, runtime_checkable


@dataclasses.dataclass(frozen=True)
class AuthResult:
    """Outcome of a single authentication call."""

    ok: bool
    message: str | None = None  # Optional user-facing reason on failure

    @classmethod
    def success(cls) -> AuthResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, message: str | None = None) -> AuthResult:
        return cls(ok=False, message=message)


class AuthenticationError(Exception):
    """Raised by a port when authentication fails for a user-visible reason."""

    pass


@runtime_checkable
class LoginPort(Protocol):
    """Checks an email/password pair."""

    async def authenticate_login(self, email: str, password: str) -> AuthResult: ...


@runtime_checkable
class SignupPort(Protocol):
    """Creates an account from name, email and password."""

    async def authenticate_signup(self, name: str, email: str, password: str) -> AuthResult: ...
