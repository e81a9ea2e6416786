"""Binding and validation of the person form.

``bind_person_form`` validates raw submitted values against
:class:`~personhub.api.models.person.PersonForm` and reports each pydantic
error as a :class:`FieldError` carrying a message key. The raw values are
kept on the binding so an invalid form can be re-rendered with what the user
typed.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import ValidationError

from personhub.api.models.person import AGE_MAX, AGE_MIN, PersonForm, PersonOut

FORM_FIELDS = ("id", "name", "age")

__all__ = [
    "AGE_MAX",
    "AGE_MIN",
    "FieldError",
    "FormBinding",
    "bind_person_form",
    "empty_form",
    "fill",
]


@dataclass(frozen=True)
class FieldError:
    field: str
    key: str
    args: tuple[Any, ...] = ()


@dataclass
class FormBinding:
    data: dict[str, str] = field(default_factory=dict)
    value: Optional[PersonForm] = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def errors_for(self, name: str) -> list[FieldError]:
        return [error for error in self.errors if error.field == name]

    def get(self, name: str) -> str:
        return self.data.get(name, "")


def empty_form() -> FormBinding:
    return FormBinding()


def fill(person: PersonOut) -> FormBinding:
    """Pre-fill a form from a stored person."""

    value = PersonForm.from_person(person)
    data = {"name": value.name, "age": str(value.age)}
    if value.id is not None:
        data["id"] = str(value.id)
    return FormBinding(data=data, value=value)


def _field_error(error: dict[str, Any]) -> FieldError:
    name = str(error["loc"][0]) if error["loc"] else ""
    kind = error["type"]
    ctx = error.get("ctx") or {}
    if kind in ("missing", "string_too_short"):
        return FieldError(name, "error.required")
    if kind == "greater_than_equal" and name == "age":
        return FieldError(name, "error.min", (ctx["ge"],))
    if kind == "less_than_equal" and name == "age":
        return FieldError(name, "error.max", (ctx["le"],))
    if kind.startswith("int_") or kind in ("greater_than_equal", "less_than_equal"):
        return FieldError(name, "error.number")
    return FieldError(name, "error.invalid")


def bind_person_form(data: Mapping[str, Any]) -> FormBinding:
    raw = {
        key: str(data[key])
        for key in FORM_FIELDS
        if key in data and data[key] is not None
    }
    # blank inputs count as not submitted
    submitted = {
        key: value if key == "name" else value.strip()
        for key, value in raw.items()
        if value.strip()
    }
    try:
        value = PersonForm.model_validate(submitted)
    except ValidationError as exc:
        errors = [_field_error(error) for error in exc.errors(include_url=False)]
        return FormBinding(data=raw, errors=errors)
    return FormBinding(data=raw, value=value)
