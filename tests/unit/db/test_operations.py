from personhub.api.models.person import PersonCreate
from personhub.db import operations


def test_initialize_creates_database(tmp_path):
    db_file = tmp_path / "people.db"
    operations.initialize(file_path=str(db_file))
    assert db_file.exists()


def test_check_status_returns_sqlite_version(tmp_path):
    version = operations.check_status(file_path=str(tmp_path / "people.db"))
    assert isinstance(version, str)
    assert version.count(".") >= 1


def test_add_and_list_people(tmp_path):
    db_file = str(tmp_path / "people.db")
    added = operations.add_person(PersonCreate(name="Ada", age=36), file_path=db_file)
    assert added.id is not None
    people = operations.list_people(file_path=db_file)
    assert [(p.id, p.name, p.age) for p in people] == [(added.id, "Ada", 36)]
