# test_crud.py

import pytest

from personhub.db.crud import PersonCRUD
from personhub.db.models import Person


def test_insert_and_get(db_session):
    person_crud = PersonCRUD()
    obj = person_crud.create(db_session, {"name": "Ada", "age": 36})
    fetched = person_crud.get(db_session, obj.id)
    assert fetched.name == "Ada"
    assert fetched.age == 36
    assert fetched.id == obj.id


def test_get_missing_returns_none(db_session):
    assert PersonCRUD().get(db_session, 404) is None


def test_create_ignores_supplied_id(db_session):
    crud = PersonCRUD()
    first = crud.create(db_session, {"name": "Ada", "age": 36})
    second = crud.create(db_session, {"id": first.id, "name": "Grace", "age": 45})
    assert second.id != first.id
    assert db_session.query(Person).count() == 2


def test_unknown_keys_are_dropped(db_session):
    obj = PersonCRUD().create(db_session, {"name": "Ada", "age": 36, "nickname": "A"})
    assert not hasattr(obj, "nickname")


def test_insert_missing_required_column(db_session):
    with pytest.raises(ValueError, match="age"):
        PersonCRUD().create(db_session, {"name": "Ada"})


def test_list_is_ordered_by_id(db_session):
    crud = PersonCRUD()
    for name, age in [("Ada", 36), ("Grace", 45), ("Alan", 41)]:
        crud.create(db_session, {"name": name, "age": age})
    assert [p.name for p in crud.list(db_session)] == ["Ada", "Grace", "Alan"]
