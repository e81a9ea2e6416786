import pytest
from fastapi.testclient import TestClient

from personhub.api.main import create_app
from personhub.api.messages import Messages


def test_formats_arguments():
    messages = Messages()
    assert messages("error.min", 0) == "Must be greater or equal to 0"
    assert messages("error.max", 140) == "Must be less or equal to 140"
    assert messages("error.required") == "This field is required"


def test_unknown_key_falls_back_to_key():
    assert Messages()("no.such.key") == "no.such.key"


def test_overrides_replace_defaults():
    messages = Messages({"error.required": "Obligatoire"})
    assert messages("error.required") == "Obligatoire"
    assert messages("error.number") == "Numeric value expected"
    assert "error.required" in messages


class _EmptyStore:
    async def find_by_id(self, id):
        return None

    async def list(self):
        return []

    async def create(self, person):  # pragma: no cover - never reached
        raise AssertionError("create should not be called")


@pytest.mark.testclient
def test_controller_renders_custom_messages():
    app = create_app(store=_EmptyStore(), messages=Messages({"error.required": "Obligatoire"}))
    with TestClient(app) as client:
        resp = client.post("/people", data={"name": "", "age": "3"})
    assert resp.status_code == 200
    assert "Obligatoire" in resp.text
