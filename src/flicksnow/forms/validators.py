"""Field validators for the login and signup forms.

Each validator is a pure function taking the raw field value (and, for the
confirmation field, the current password) and returning either ``None``
(valid) or the message of the first failing rule. Validators never raise.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping

from flicksnow.models import MESSAGES, MIN_PASSWORD_LENGTH

# local-part @ domain, domain with at least one dot-separated label
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9+._%\-]{1,256}"
    r"@"
    r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
    r"(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)


def validate_email(value: str) -> str | None:
    email = value.strip()
    if not email:
        return MESSAGES["email_required"]
    if EMAIL_PATTERN.fullmatch(email) is None:
        return MESSAGES["email_invalid"]
    return None


def validate_password(value: str) -> str | None:
    if not value:
        return MESSAGES["password_required"]
    if len(value) < MIN_PASSWORD_LENGTH:
        return MESSAGES["password_short"]
    return None


def validate_full_name(value: str) -> str | None:
    if not value.strip():
        return MESSAGES["name_required"]
    return None


def validate_confirm_password(value: str, password: str) -> str | None:
    if not value:
        return MESSAGES["confirm_required"]
    if value != password:
        return MESSAGES["confirm_mismatch"]
    return None


# field name -> validator taking (value, all_values)
FieldValidator = Callable[[str, Mapping[str, str]], str | None]

VALIDATORS: dict[str, FieldValidator] = {
    "email": lambda value, _values: validate_email(value),
    "password": lambda value, _values: validate_password(value),
    "full_name": lambda value, _values: validate_full_name(value),
    "confirm_password": lambda value, values: validate_confirm_password(value, values.get("password", "")),
}


def validate_field(name: str, values: Mapping[str, str]) -> str | None:
    """Run the validator registered for *name* against the current form values."""
    return VALIDATORS[name](values.get(name, ""), values)
