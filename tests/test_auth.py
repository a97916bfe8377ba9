"""Unit tests for flicksnow.auth — the simulated authenticator."""

from __future__ import annotations

from conftest import run_async
from flicksnow.auth import SimulatedAuthenticator
from flicksnow.config import FlicksNowConfig
from flicksnow.forms import AuthResult, LoginController, LoginPort, SignupPort, SubmissionStatus


class TestSimulatedAuthenticator:
    """The simulated backend accepts everything after its configured delay."""

    def test_implements_both_ports(self):
        auth = SimulatedAuthenticator()
        assert isinstance(auth, LoginPort)
        assert isinstance(auth, SignupPort)

    def test_login_always_succeeds(self):
        auth = SimulatedAuthenticator(sign_in_delay=0)
        assert run_async(auth.authenticate_login("anyone@example.com", "whatever")) == AuthResult.success()

    def test_signup_always_succeeds(self):
        auth = SimulatedAuthenticator(sign_up_delay=0)
        result = run_async(auth.authenticate_signup("Ada", "ada@example.com", "secret1"))
        assert result.ok is True

    def test_from_config_uses_configured_delays(self):
        cfg = FlicksNowConfig(sign_in_delay=0.25, sign_up_delay=0.5)
        auth = SimulatedAuthenticator.from_config(cfg)
        assert auth._sign_in_delay == 0.25
        assert auth._sign_up_delay == 0.5

    def test_drives_login_controller_to_success(self):
        controller = LoginController(SimulatedAuthenticator(sign_in_delay=0))
        controller.set_field("email", "user@example.com")
        controller.set_field("password", "secret1")
        assert run_async(controller.submit()).status is SubmissionStatus.SUCCEEDED
