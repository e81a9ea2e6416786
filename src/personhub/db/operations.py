# personhub/db/operations.py
from sqlalchemy import text

from personhub.db.connect import get_session
from personhub.db.crud import PersonCRUD
from personhub.api.models.person import PersonCreate, PersonOut
from personhub.logging import get_logger

logger = get_logger(__file__)


def check_status(file_path=None):
    """Query the database for its SQLite version and log/return it."""
    logger.info("checking db status...")
    with get_session(file_path=file_path) as session:
        result = session.execute(text("SELECT sqlite_version();")).fetchone()
        if result:
            version = result[0]
            logger.info("sqlite version: %s", version)
            return version
        logger.warning("sqlite version query returned no result")
        return None


def initialize(file_path=None):
    """Create the schema; the location falls back to the environment defaults."""
    with get_session(file_path=file_path) as session:
        logger.info("initialized database at %s", session.bind.url)


def add_person(person: PersonCreate, file_path=None) -> PersonOut:
    with get_session(file_path=file_path) as session:
        obj = PersonCRUD().create(session, person.model_dump())
        return PersonOut.model_validate(obj)


def list_people(file_path=None) -> list[PersonOut]:
    with get_session(file_path=file_path) as session:
        return [PersonOut.model_validate(obj) for obj in PersonCRUD().list(session)]
