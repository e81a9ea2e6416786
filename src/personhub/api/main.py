from __future__ import annotations

# src/personhub/api/main.py
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from personhub.api.messages import Messages
from personhub.api.routes.person import PersonController
from personhub.db.connect import get_db_path, make_session_factory
from personhub.db.models import sqlite_engine
from personhub.db.store import PersonStore, SqlPersonStore
from personhub.logging import get_logger

logger = get_logger(__file__)


def _cors_settings() -> tuple[list[str], bool]:
    """Origins and credentials flag from ``PERSONHUB_CORS_*``; no origins means no CORS."""

    origins = os.getenv("PERSONHUB_CORS_ORIGINS", "").split(",")
    credentials = os.getenv("PERSONHUB_CORS_ALLOW_CREDENTIALS", "").strip().lower()
    return [o.strip() for o in origins if o.strip()], credentials in ("1", "true", "yes", "on")


def default_store(db_path: str | None = None) -> SqlPersonStore:
    """Build the SQLite-backed store from ``db_path`` or the environment."""

    engine = sqlite_engine(get_db_path(db_path))
    return SqlPersonStore(make_session_factory(engine))


def create_app(store: PersonStore | None = None, messages: Messages | None = None) -> FastAPI:
    if store is None:
        store = default_store()

    app = FastAPI(title="personhub")

    # pages are served same-origin; cross-origin access is opt-in
    cors_origins, cors_credentials = _cors_settings()
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=cors_credentials,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )
        logger.info("CORS enabled for %s", ", ".join(cors_origins))

    @app.get("/status")
    def status():
        return {"ok": True}

    controller = PersonController(store, messages=messages)
    app.include_router(controller.router)
    app.state.store = store
    logger.debug("application created with store %s", type(store).__name__)
    return app
