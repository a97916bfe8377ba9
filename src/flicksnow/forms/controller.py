"""Submission controller — gates credential submission on validity.

The state machine is expressed as a pure reducer over ``FlowState``
(form snapshot + submission state). ``SubmissionController`` is a thin
async driver: it dispatches actions through the reducer, performs the single
authentication call while ``SUBMITTING``, and reports the outcome through the
``on_success`` callback or the ``notify`` message sink.

    IDLE/FAILED --submit--> VALIDATING --invalid--> IDLE
                                       --valid----> SUBMITTING --ok-----> SUCCEEDED
                                                               --error--> FAILED(message)
    any --reset--> IDLE
"""

from __future__ import annotations

import asyncio
import dataclasses
import enum
import logging
from collections.abc import Awaitable, Callable
from typing import Union

from flicksnow.forms.protocols import AuthenticationError, AuthResult, LoginPort, SignupPort
from flicksnow.forms.state import FormKind, FormSnapshot
from flicksnow.models import LOGIN_FAILURE_MESSAGE, SIGNUP_FAILURE_MESSAGE

logger = logging.getLogger("flicksnow.forms.controller")


class SubmissionStatus(enum.Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclasses.dataclass(frozen=True)
class SubmissionState:
    """Current submission status; ``message`` is only set when FAILED."""

    status: SubmissionStatus = SubmissionStatus.IDLE
    message: str | None = None

    @property
    def accepts_submit(self) -> bool:
        return self.status in (SubmissionStatus.IDLE, SubmissionStatus.FAILED)

    @property
    def is_busy(self) -> bool:
        return self.status is SubmissionStatus.SUBMITTING


@dataclasses.dataclass(frozen=True)
class FlowState:
    """Everything a form screen renders: field values/errors and submission status."""

    form: FormSnapshot
    submission: SubmissionState = SubmissionState()

    @classmethod
    def initial(cls, kind: FormKind) -> FlowState:
        return cls(form=FormSnapshot.empty(kind))


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class SetField:
    name: str
    value: str


@dataclasses.dataclass(frozen=True)
class Submit:
    pass


@dataclasses.dataclass(frozen=True)
class FinishValidation:
    pass


@dataclasses.dataclass(frozen=True)
class Resolve:
    result: AuthResult
    default_message: str


@dataclasses.dataclass(frozen=True)
class Reset:
    pass


Action = Union[SetField, Submit, FinishValidation, Resolve, Reset]


def reduce(flow: FlowState, action: Action) -> FlowState:
    """Apply *action* to *flow* and return the next state. Never mutates *flow*."""
    status = flow.submission.status

    if isinstance(action, SetField):
        return dataclasses.replace(flow, form=flow.form.with_field(action.name, action.value))

    if isinstance(action, Submit):
        if not flow.submission.accepts_submit:
            return flow
        return dataclasses.replace(flow, submission=SubmissionState(SubmissionStatus.VALIDATING))

    if isinstance(action, FinishValidation):
        if status is not SubmissionStatus.VALIDATING:
            return flow
        form = flow.form.validated()
        next_status = SubmissionStatus.SUBMITTING if form.is_valid else SubmissionStatus.IDLE
        return FlowState(form=form, submission=SubmissionState(next_status))

    if isinstance(action, Resolve):
        if status is not SubmissionStatus.SUBMITTING:
            return flow
        if action.result.ok:
            return dataclasses.replace(flow, submission=SubmissionState(SubmissionStatus.SUCCEEDED))
        message = action.result.message or action.default_message
        return dataclasses.replace(flow, submission=SubmissionState(SubmissionStatus.FAILED, message))

    if isinstance(action, Reset):
        return FlowState.initial(flow.form.kind)

    raise TypeError(f"Unknown action: {action!r}")


# ---------------------------------------------------------------------------
# Async driver
# ---------------------------------------------------------------------------


class SubmissionController:
    """Drives one form instance through validation and authentication.

    Subclasses bind a form kind, its default failure message and the port
    call made with the validated values.
    """

    kind: FormKind
    failure_message: str

    def __init__(
        self,
        on_success: Callable[[], None] | None = None,
        notify: Callable[[str], None] | None = None,
        on_transition: Callable[[SubmissionState], None] | None = None,
        timeout: float | None = None,
    ) -> None:
        self._on_success = on_success
        self._notify = notify
        self._on_transition = on_transition
        self._timeout = timeout
        self._flow = FlowState.initial(self.kind)
        self._generation = 0
        self._in_flight = False
        self.history: list[SubmissionStatus] = [SubmissionStatus.IDLE]

    @property
    def flow(self) -> FlowState:
        return self._flow

    @property
    def form(self) -> FormSnapshot:
        return self._flow.form

    @property
    def submission(self) -> SubmissionState:
        return self._flow.submission

    @property
    def is_busy(self) -> bool:
        """True while an authentication call is outstanding, even after a reset."""
        return self._in_flight or self._flow.submission.is_busy

    def dispatch(self, action: Action) -> FlowState:
        previous = self._flow.submission
        self._flow = reduce(self._flow, action)
        current = self._flow.submission
        if current != previous:
            self.history.append(current.status)
            logger.debug("%s form: %s -> %s", self.kind.value, previous.status.value, current.status.value)
            if self._on_transition is not None:
                self._on_transition(current)
        return self._flow

    def set_field(self, name: str, value: str) -> None:
        self.dispatch(SetField(name, value))

    def reset(self) -> None:
        self._generation += 1
        self.dispatch(Reset())

    async def submit(self) -> SubmissionState:
        """Handle a submit action (button press or keyboard "done").

        Ignored unless the form is IDLE or FAILED and no earlier call is
        still outstanding. Returns the submission state once this attempt
        settles.
        """
        if self._in_flight:
            logger.debug("Ignoring submit for %s form: previous call still running", self.kind.value)
            return self.submission
        if not self.submission.accepts_submit:
            logger.debug("Ignoring submit for %s form while %s", self.kind.value, self.submission.status.value)
            return self.submission

        self.dispatch(Submit())
        self.dispatch(FinishValidation())
        if self.submission.status is not SubmissionStatus.SUBMITTING:
            return self.submission

        self._generation += 1
        generation = self._generation
        self._in_flight = True
        try:
            result = await self._authenticate(self.form)
        finally:
            self._in_flight = False

        if generation != self._generation:
            # Form was reset while the call was in flight; drop the outcome.
            logger.debug("Discarding stale %s result after reset", self.kind.value)
            return self.submission

        self.dispatch(Resolve(result, self.failure_message))
        if self.submission.status is SubmissionStatus.SUCCEEDED:
            if self._on_success is not None:
                self._on_success()
        elif self.submission.status is SubmissionStatus.FAILED:
            if self._notify is not None and self.submission.message:
                self._notify(self.submission.message)
        return self.submission

    async def _authenticate(self, form: FormSnapshot) -> AuthResult:
        try:
            call = self._call_port(form)
            if self._timeout is not None:
                outcome = await asyncio.wait_for(call, self._timeout)
            else:
                outcome = await call
        except asyncio.TimeoutError:
            logger.warning("%s call timed out after %.1fs", self.kind.value, self._timeout)
            return AuthResult.failure()
        except AuthenticationError as exc:
            logger.warning("%s rejected: %s", self.kind.value, exc)
            return AuthResult.failure(str(exc) or None)
        except Exception as exc:
            logger.warning("%s call failed: %s", self.kind.value, exc, exc_info=True)
            return AuthResult.failure()

        if isinstance(outcome, bool):
            return AuthResult(ok=outcome)
        if not isinstance(outcome, AuthResult):
            logger.warning("%s call returned %r instead of an AuthResult", self.kind.value, outcome)
            return AuthResult.failure()
        return outcome

    def _call_port(self, form: FormSnapshot) -> Awaitable[AuthResult]:
        raise NotImplementedError


class LoginController(SubmissionController):
    kind = FormKind.LOGIN
    failure_message = LOGIN_FAILURE_MESSAGE

    def __init__(self, port: LoginPort, **kwargs) -> None:
        self._port = port
        super().__init__(**kwargs)

    def _call_port(self, form: FormSnapshot) -> Awaitable[AuthResult]:
        return self._port.authenticate_login(form.values["email"].strip(), form.values["password"])


class SignupController(SubmissionController):
    kind = FormKind.SIGNUP
    failure_message = SIGNUP_FAILURE_MESSAGE

    def __init__(self, port: SignupPort, **kwargs) -> None:
        self._port = port
        super().__init__(**kwargs)

    def _call_port(self, form: FormSnapshot) -> Awaitable[AuthResult]:
        return self._port.authenticate_signup(
            form.values["full_name"].strip(),
            form.values["email"].strip(),
            form.values["password"],
        )
