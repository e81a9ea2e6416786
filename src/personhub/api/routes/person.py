# personhub/api/routes/person.py
"""HTML and JSON handlers for the ``Person`` resource.

Every read handler answers with JSON when the request declares
``Content-Type: application/json`` and with an HTML page otherwise. Lookups
of unknown ids redirect to the people list instead of returning 404.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from personhub.api.forms import FormBinding, bind_person_form, empty_form, fill
from personhub.api.messages import Messages
from personhub.api.models.person import PersonOut, PersonPayload
from personhub.api.negotiation import MediaType, negotiate
from personhub.db.store import PersonStore
from personhub.logging import get_logger

logger = get_logger(__file__)

TEMPLATE_DIR = Path(__file__).resolve().parents[1] / "templates"

AJAX_HEADER = "X-Requested-With"


@dataclass(frozen=True)
class FormSubmission:
    """Where a form post goes on success, and what it re-renders on failure."""

    success_route: str
    failure_template: str


RESOURCE_FORM = FormSubmission(success_route="list_people", failure_template="person/form.html")
INDEX_FORM = FormSubmission(success_route="index", failure_template="index.html")


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"status": "error", "message": message}, status_code=status_code)


def person_json(person: PersonOut) -> dict[str, Any]:
    return person.model_dump()


class PersonController:
    def __init__(
        self,
        store: PersonStore,
        messages: Messages | None = None,
        templates: Jinja2Templates | None = None,
    ):
        self.store = store
        self.messages = messages or Messages()
        self.templates = templates or Jinja2Templates(directory=str(TEMPLATE_DIR))
        self.router = APIRouter()
        self._register_routes()

    def _register_routes(self) -> None:
        router = self.router
        router.add_api_route("/", self.index, methods=["GET"], name="index")
        router.add_api_route("/person", self.add_person, methods=["POST"], name="add_person")
        router.add_api_route("/persons", self.get_persons, methods=["GET"], name="get_persons")
        router.add_api_route("/people", self.list, methods=["GET"], name="list_people")
        router.add_api_route("/people", self.create, methods=["POST"], name="create_person")
        # registered before /people/{person_id} so "new" is not read as an id
        router.add_api_route("/people/new", self.new_person, methods=["GET"], name="new_person")
        router.add_api_route("/people/{person_id}", self.show, methods=["GET"], name="show_person")
        router.add_api_route(
            "/people/{person_id}/edit", self.edit, methods=["GET"], name="edit_person"
        )

    # rendering helpers

    def render(self, request: Request, template: str, **context: Any) -> Response:
        context.setdefault("messages", self.messages)
        return self.templates.TemplateResponse(request, template, context)

    def render_form(
        self, request: Request, form: FormBinding, person_id: int | None = None
    ) -> Response:
        return self.render(request, "person/form.html", form=form, person_id=person_id)

    def redirect(self, request: Request, route: str) -> RedirectResponse:
        return RedirectResponse(str(request.url_for(route)), status_code=303)

    # handlers

    async def index(self, request: Request) -> Response:
        return self.render(request, "index.html", form=empty_form())

    async def new_person(self, request: Request) -> Response:
        return self.render_form(request, empty_form())

    async def show(self, request: Request, person_id: int) -> Response:
        person = await self.store.find_by_id(person_id)
        if person is None:
            logger.debug("person %s not found, redirecting to list", person_id)
            return self.redirect(request, "list_people")
        if negotiate(request) is MediaType.JSON:
            return JSONResponse(person_json(person))
        return self.render(request, "person/show.html", person=person)

    async def edit(self, request: Request, person_id: int) -> Response:
        person = await self.store.find_by_id(person_id)
        if person is None:
            logger.debug("person %s not found, redirecting to list", person_id)
            return self.redirect(request, "list_people")
        return self.render_form(request, fill(person), person_id=person_id)

    async def list(self, request: Request) -> Response:
        people = await self.store.list()
        if negotiate(request) is MediaType.JSON:
            return JSONResponse([person_json(p) for p in people])
        return self.render(request, "person/list.html", people=people)

    async def create(self, request: Request) -> Response:
        if negotiate(request) is MediaType.JSON:
            return await self.create_from_json(request)
        return await self.submit_person_form(request, RESOURCE_FORM)

    async def add_person(self, request: Request) -> Response:
        return await self.submit_person_form(request, INDEX_FORM)

    async def get_persons(self, request: Request) -> Response:
        people = await self.store.list()
        return JSONResponse([person_json(p) for p in people])

    # create paths

    async def create_from_json(self, request: Request) -> Response:
        if AJAX_HEADER not in request.headers:
            logger.warning("rejected JSON create without %s header", AJAX_HEADER)
            return error_response("CSRF protection")

        body = await request.body()
        if not body.strip():
            logger.warning("rejected JSON create with empty body")
            return error_response("parse error")
        try:
            payload = PersonPayload.model_validate_json(body)
        except ValidationError as exc:
            logger.warning("rejected JSON create: %s", exc.errors(include_url=False))
            return error_response("parse error")

        person = await self.store.create(payload.to_create())
        logger.info("created person %s via JSON", person.id)
        return JSONResponse({"status": "success"})

    async def submit_person_form(self, request: Request, submission: FormSubmission) -> Response:
        form_data = await request.form()
        form = bind_person_form(form_data)
        if form.has_errors:
            logger.debug(
                "form rejected: %s", [(e.field, e.key) for e in form.errors]
            )
            return self.render(request, submission.failure_template, form=form, person_id=None)

        person = await self.store.create(form.value.to_create())
        logger.info("created person %s via form", person.id)
        return self.redirect(request, submission.success_route)
