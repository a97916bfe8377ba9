"""Credential forms — validation, form state and submission control.

Provides the login/signup core:
- validators: pure per-field rules returning the first failing message
- FormSnapshot / FormState: immutable field values + errors and their owner
- SubmissionController: async state machine gating the authentication call
- LoginPort / SignupPort: injected authentication collaborators
"""

from flicksnow.forms.controller import (
    FlowState,
    LoginController,
    SignupController,
    SubmissionController,
    SubmissionState,
    SubmissionStatus,
    reduce,
)
from flicksnow.forms.protocols import AuthenticationError, AuthResult, LoginPort, SignupPort
from flicksnow.forms.state import FormKind, FormSnapshot, FormState
from flicksnow.forms.validators import (
    validate_confirm_password,
    validate_email,
    validate_full_name,
    validate_password,
)

__all__ = [
    "AuthResult",
    "AuthenticationError",
    "FlowState",
    "FormKind",
    "FormSnapshot",
    "FormState",
    "LoginController",
    "LoginPort",
    "SignupController",
    "SignupPort",
    "SubmissionController",
    "SubmissionState",
    "SubmissionStatus",
    "reduce",
    "validate_confirm_password",
    "validate_email",
    "validate_full_name",
    "validate_password",
]
