# personhub/db/crud.py
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from personhub.db.models import Person
from personhub.logging import get_logger


logger = get_logger(__file__)


class CRUDBase:

    def __init__(self, model, req_cols: Optional[List[str]] = None):
        self.model = model
        self.req_cols = req_cols

    def get_columns(self):
        return [col.name for col in self.model.__table__.columns]

    def validate_input(self, record: dict) -> dict:
        # Only keep known columns
        allowed_keys = self.get_columns()
        cleaned_record = {}
        for k, v in record.items():
            if k in allowed_keys:
                cleaned_record[k] = v
            else:
                logger.warning(f"Key '{k}' not in model columns, removing from record.")

        if self.req_cols is not None:
            for col in self.req_cols:
                if col not in cleaned_record:
                    raise ValueError(f"{col} not in input record")

        return cleaned_record

    def get(self, session: Session, id: int):
        return session.get(self.model, id)

    def list(self, session: Session):
        stmt = select(self.model).order_by(self.model.id.asc())
        return list(session.scalars(stmt))

    def create(self, session: Session, record: dict):
        record = self.validate_input(record)
        obj = self.model(**record)
        session.add(obj)
        session.commit()
        session.refresh(obj)
        logger.info(f"Inserted into {self.model.__tablename__}: {record}")
        return obj


class PersonCRUD(CRUDBase):
    def __init__(self):
        super().__init__(Person, req_cols=["name", "age"])

    def create(self, session: Session, record: dict):
        # ids are assigned by the database
        record = {k: v for k, v in record.items() if k != "id"}
        return super().create(session, record)
