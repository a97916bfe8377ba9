"""Form state for the credential forms.

``FormSnapshot`` is an immutable value: every edit, validation pass or reset
produces a new snapshot. ``FormState`` is the single mutable owner a screen
holds; it swaps snapshots in place and exposes the field-level contract
(``set_field`` / ``validate`` / ``reset``).
"""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Mapping
from types import MappingProxyType

from flicksnow.forms.validators import validate_field
from flicksnow.models import FIELD_ALIASES, LOGIN_FIELDS, SIGNUP_FIELDS


class FormKind(enum.Enum):
    """Which credential form a state belongs to, and the fields it validates."""

    LOGIN = "login"
    SIGNUP = "signup"

    @property
    def fields(self) -> tuple[str, ...]:
        return LOGIN_FIELDS if self is FormKind.LOGIN else SIGNUP_FIELDS


def canonical_field(kind: FormKind, name: str) -> str:
    """Resolve *name* (or an accepted alias) to a field of *kind*'s schema.

    Raises KeyError for fields the form does not have.
    """
    resolved = FIELD_ALIASES.get(name, name)
    if resolved not in kind.fields:
        raise KeyError(f"Unknown field for {kind.value} form: {name!r}")
    return resolved


def _freeze(data: Mapping) -> Mapping:
    return MappingProxyType(dict(data))


@dataclasses.dataclass(frozen=True)
class FormSnapshot:
    """Immutable field values and per-field errors for one form."""

    kind: FormKind
    values: Mapping[str, str]
    errors: Mapping[str, str | None]

    @classmethod
    def empty(cls, kind: FormKind) -> FormSnapshot:
        return cls(
            kind=kind,
            values=_freeze({name: "" for name in kind.fields}),
            errors=_freeze({name: None for name in kind.fields}),
        )

    @property
    def is_valid(self) -> bool:
        """True iff no field currently carries an error."""
        return all(error is None for error in self.errors.values())

    def value(self, name: str) -> str:
        return self.values[canonical_field(self.kind, name)]

    def error(self, name: str) -> str | None:
        return self.errors[canonical_field(self.kind, name)]

    def with_field(self, name: str, value: str) -> FormSnapshot:
        """Return a snapshot with *name* set to *value* and its stale error cleared."""
        field_name = canonical_field(self.kind, name)
        values = dict(self.values)
        values[field_name] = value
        errors = dict(self.errors)
        errors[field_name] = None
        return dataclasses.replace(self, values=_freeze(values), errors=_freeze(errors))

    def validated(self) -> FormSnapshot:
        """Return a snapshot whose errors reflect every validator in the schema."""
        errors = {name: validate_field(name, self.values) for name in self.kind.fields}
        return dataclasses.replace(self, errors=_freeze(errors))

    def cleared(self) -> FormSnapshot:
        return FormSnapshot.empty(self.kind)


class FormState:
    """Mutable owner of the current snapshot for one form screen."""

    def __init__(self, kind: FormKind) -> None:
        self._snapshot = FormSnapshot.empty(kind)

    @property
    def kind(self) -> FormKind:
        return self._snapshot.kind

    @property
    def snapshot(self) -> FormSnapshot:
        return self._snapshot

    @property
    def values(self) -> Mapping[str, str]:
        return self._snapshot.values

    @property
    def errors(self) -> Mapping[str, str | None]:
        return self._snapshot.errors

    @property
    def is_valid(self) -> bool:
        return self._snapshot.is_valid

    def error(self, name: str) -> str | None:
        return self._snapshot.error(name)

    def set_field(self, name: str, value: str) -> None:
        self._snapshot = self._snapshot.with_field(name, value)

    def validate(self) -> bool:
        self._snapshot = self._snapshot.validated()
        return self._snapshot.is_valid

    def reset(self) -> None:
        self._snapshot = self._snapshot.cleared()
