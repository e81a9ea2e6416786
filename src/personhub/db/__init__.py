from .connect import get_session, make_session_factory
from .store import PersonStore, SqlPersonStore

__all__ = ["get_session", "make_session_factory", "PersonStore", "SqlPersonStore"]
