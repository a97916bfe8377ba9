"""Simulated authentication backend.

Stands in for a real identity service: every sign-in and sign-up succeeds
after a fixed delay. Implements both LoginPort and SignupPort.
"""

from __future__ import annotations

import asyncio
import logging

from flicksnow.config import FlicksNowConfig
from flicksnow.forms.protocols import AuthResult
from flicksnow.models import DEFAULT_SIGN_IN_DELAY, DEFAULT_SIGN_UP_DELAY

logger = logging.getLogger("flicksnow.auth")


class SimulatedAuthenticator:
    """Always-successful authenticator with configurable latency."""

    def __init__(
        self,
        sign_in_delay: float = DEFAULT_SIGN_IN_DELAY,
        sign_up_delay: float = DEFAULT_SIGN_UP_DELAY,
    ) -> None:
        self._sign_in_delay = sign_in_delay
        self._sign_up_delay = sign_up_delay

    @classmethod
    def from_config(cls, config: FlicksNowConfig) -> SimulatedAuthenticator:
        return cls(sign_in_delay=config.sign_in_delay, sign_up_delay=config.sign_up_delay)

    async def authenticate_login(self, email: str, password: str) -> AuthResult:
        logger.info("Signing in %s", email)
        await asyncio.sleep(self._sign_in_delay)
        return AuthResult.success()

    async def authenticate_signup(self, name: str, email: str, password: str) -> AuthResult:
        logger.info("Creating account for %s <%s>", name, email)
        await asyncio.sleep(self._sign_up_delay)
        return AuthResult.success()
