# personhub/db/connect.py

import os
from functools import lru_cache
from pathlib import Path
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.engine import Engine

from personhub.db.models import sqlite_engine, initialize_db
from personhub.logging import get_logger

logger = get_logger(__file__)


@lru_cache(maxsize=None)
def get_db_dir() -> Path:
    db_dir = Path(os.environ.get("PERSONHUB_DB_DIR", Path.home() / "personhub"))
    db_dir.mkdir(parents=True, exist_ok=True)
    logger.info("setting db_dir to %s", str(db_dir))
    return db_dir


def get_db_path(file: str | Path | None = None) -> str:
    """Return a SQLite database URI string.

    Parameters
    ----------
    file:
        Optional path or URI of a SQLite database. When ``None`` the
        ``PERSONHUB_DB_PATH`` environment variable is consulted, then the
        default directory from :func:`get_db_dir` with ``personhub.db``.

    Returns
    -------
    str
        SQLite URI pointing to the database file.
    """

    if file is None:
        file = os.getenv("PERSONHUB_DB_PATH") or get_db_dir() / "personhub.db"
    db_uri = str(file)
    if not db_uri.startswith("sqlite"):
        db_uri = "sqlite:///" + db_uri
    logger.debug("setting db_path to %s", db_uri)
    return db_uri


def make_session_factory(engine: Engine):
    SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)
    initialize_db(engine=engine)

    @contextmanager
    def get_session() -> Iterator[Session]:
        session = SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return get_session


@contextmanager
def get_session(file_path: str | Path | None = None) -> Iterator[Session]:
    """Provide a transactional scope around a series of operations.

    Parameters
    ----------
    file_path:
        Optional path or URI to the SQLite database, resolved through
        :func:`get_db_path`.
    """

    engine = sqlite_engine(get_db_path(file_path))
    session_factory = make_session_factory(engine)
    try:
        with session_factory() as session:
            yield session
    finally:
        engine.dispose()
