"""Message catalogue for form errors and page labels."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

DEFAULT_MESSAGES: dict[str, str] = {
    "error.required": "This field is required",
    "error.number": "Numeric value expected",
    "error.min": "Must be greater or equal to {0}",
    "error.max": "Must be less or equal to {0}",
    "error.invalid": "Invalid value",
    "person.name": "Name",
    "person.age": "Age",
    "person.id": "ID",
    "person.list.title": "People",
    "person.show.title": "Person",
    "person.form.title.new": "Add person",
    "person.form.title.edit": "Edit person",
    "person.form.submit": "Save",
    "person.list.empty": "No people yet.",
    "person.list.new": "Add a person",
    "index.title": "Add person",
    "index.submit": "Add person",
}


class Messages:
    """Resolve message keys to display text.

    Unknown keys are returned unchanged so a missing translation never breaks
    rendering.
    """

    def __init__(self, overrides: Mapping[str, str] | None = None):
        self._messages = dict(DEFAULT_MESSAGES)
        if overrides:
            self._messages.update(overrides)

    def __call__(self, key: str, *args: Any) -> str:
        template = self._messages.get(key)
        if template is None:
            return key
        return template.format(*args)

    def __contains__(self, key: str) -> bool:
        return key in self._messages
