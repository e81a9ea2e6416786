# personhub/db/models.py
import os

from sqlalchemy import Integer, Text, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from personhub.logging import get_logger

logger = get_logger(__file__)


class Base(DeclarativeBase):
    __table_args__ = {"sqlite_autoincrement": True}


class Person(Base):
    __tablename__ = "person"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"Person(id={self.id!r}, name={self.name!r}, age={self.age!r})"


def sqlite_engine(db_path: str = "sqlite:///./personhub.db") -> Engine:
    engine = create_engine(
        db_path,
        connect_args={"check_same_thread": False},
        echo=False,
    )

    trace_sql = os.getenv("PERSONHUB_SQL_TRACE")

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        if trace_sql:
            dbapi_connection.set_trace_callback(lambda x: logger.info(x))
        cursor.close()

    return engine


def initialize_db(engine: Engine):
    Base.metadata.create_all(bind=engine)
