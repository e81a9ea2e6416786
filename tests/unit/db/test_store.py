import asyncio

from personhub.api.models.person import PersonCreate, PersonOut


def test_create_assigns_id(store):
    created = asyncio.run(store.create(PersonCreate(name="Ada", age=36)))
    assert isinstance(created, PersonOut)
    assert created.id is not None
    assert (created.name, created.age) == ("Ada", 36)


def test_find_by_id_round_trip(store):
    created = asyncio.run(store.create(PersonCreate(name="Ada", age=36)))
    found = asyncio.run(store.find_by_id(created.id))
    assert found == created


def test_find_by_id_missing(store):
    assert asyncio.run(store.find_by_id(12345)) is None


def test_list_returns_all_in_insert_order(store):
    async def scenario():
        for name, age in [("Ada", 36), ("Grace", 45)]:
            await store.create(PersonCreate(name=name, age=age))
        return await store.list()

    people = asyncio.run(scenario())
    assert [(p.name, p.age) for p in people] == [("Ada", 36), ("Grace", 45)]


def test_list_empty(store):
    assert asyncio.run(store.list()) == []
