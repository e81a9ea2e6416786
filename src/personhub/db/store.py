"""Asynchronous persistence collaborator used by the web layer.

Handlers only ever see :class:`PersonStore`; :class:`SqlPersonStore` is the
SQLite implementation that ships with the service. Each call opens its own
session and runs the blocking SQLAlchemy work in the threadpool.
"""

from __future__ import annotations

from typing import Callable, ContextManager, Optional, Protocol

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from personhub.api.models.person import PersonCreate, PersonOut
from personhub.db.crud import PersonCRUD
from personhub.logging import get_logger

logger = get_logger(__file__)

SessionFactory = Callable[[], ContextManager[Session]]


class PersonStore(Protocol):
    async def find_by_id(self, id: int) -> Optional[PersonOut]: ...

    async def list(self) -> list[PersonOut]: ...

    async def create(self, person: PersonCreate) -> PersonOut: ...


class SqlPersonStore:
    def __init__(self, session_factory: SessionFactory, crud: PersonCRUD | None = None):
        self.session_factory = session_factory
        self.crud = crud or PersonCRUD()

    def _find_by_id(self, id: int) -> Optional[PersonOut]:
        with self.session_factory() as session:
            obj = self.crud.get(session, id)
            if obj is None:
                return None
            return PersonOut.model_validate(obj)

    def _list(self) -> list[PersonOut]:
        with self.session_factory() as session:
            return [PersonOut.model_validate(obj) for obj in self.crud.list(session)]

    def _create(self, person: PersonCreate) -> PersonOut:
        with self.session_factory() as session:
            obj = self.crud.create(session, person.model_dump())
            return PersonOut.model_validate(obj)

    async def find_by_id(self, id: int) -> Optional[PersonOut]:
        return await run_in_threadpool(self._find_by_id, id)

    async def list(self) -> list[PersonOut]:
        return await run_in_threadpool(self._list)

    async def create(self, person: PersonCreate) -> PersonOut:
        created = await run_in_threadpool(self._create, person)
        logger.debug("created person %s", created.id)
        return created
