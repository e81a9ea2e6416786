import pytest
from personhub.db.connect import make_session_factory
from personhub.db.models import sqlite_engine, initialize_db
from personhub.db.store import SqlPersonStore


@pytest.fixture(scope="function")
def session_factory(tmp_path):
    db_url = f"sqlite:///{tmp_path}/test.db"
    engine = sqlite_engine(db_url)
    initialize_db(engine)
    yield make_session_factory(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def store(session_factory):
    return SqlPersonStore(session_factory)
