"""Tests for the space usecases against an in-memory repository."""
import asyncio
import pytest
from app.core.errors import ErrorKind, NotFoundError, ValidationError
from app.schemas.spaces import CreateSpaceInput, UpdateSpaceInput
from app.usecases import spaces as usecases
from fakes import FakeSpaceRepository


def test_create_returns_dto_with_generated_id_and_equal_timestamps():
    repo = FakeSpaceRepository()

    dto = asyncio.run(usecases.create_space(repo, CreateSpaceInput(name="  Room A  ", capacity=10)))

    assert dto.id
    assert dto.name == "Room A"
    assert dto.capacity == 10
    assert dto.createdAt == dto.updatedAt
    assert dto.createdAt.endswith("Z")
    assert dto.createdAt == "2026-01-07T10:00:01.000Z"


def test_create_accepts_integral_float_capacity():
    repo = FakeSpaceRepository()

    dto = asyncio.run(usecases.create_space(repo, CreateSpaceInput(name="Hall", capacity=12.0)))

    assert dto.capacity == 12
    assert isinstance(dto.capacity, int)


@pytest.mark.parametrize("capacity", [0, -1, 1.5, None, True, "10", float("nan")])
def test_create_rejects_bad_capacity_without_persisting(capacity):
    repo = FakeSpaceRepository()

    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(usecases.create_space(repo, CreateSpaceInput(name="Room", capacity=capacity)))

    assert exc_info.value.message == "capacity must be a positive integer"
    assert exc_info.value.kind == ErrorKind.VALIDATION
    assert repo.calls == []


@pytest.mark.parametrize("name", ["", "   ", "\t\n", None, 42])
def test_create_rejects_blank_name_without_persisting(name):
    repo = FakeSpaceRepository()

    with pytest.raises(ValidationError, match="name is required"):
        asyncio.run(usecases.create_space(repo, CreateSpaceInput(name=name, capacity=5)))

    assert repo.calls == []


def test_get_round_trips_created_space():
    repo = FakeSpaceRepository()
    created = asyncio.run(usecases.create_space(repo, CreateSpaceInput(name="Room A", capacity=10)))

    fetched = asyncio.run(usecases.get_space(repo, created.id))

    assert fetched == created


def test_get_requires_id():
    with pytest.raises(ValidationError, match="id is required"):
        asyncio.run(usecases.get_space(FakeSpaceRepository(), ""))


def test_list_is_newest_first_and_stable():
    repo = FakeSpaceRepository()

    async def scenario():
        for name in ("first", "second", "third"):
            await usecases.create_space(repo, CreateSpaceInput(name=name, capacity=1))
        return await usecases.list_spaces(repo), await usecases.list_spaces(repo)

    first, second = asyncio.run(scenario())

    assert [s.name for s in first] == ["third", "second", "first"]
    assert first == second


def test_list_is_empty_without_records():
    assert asyncio.run(usecases.list_spaces(FakeSpaceRepository())) == []


def test_update_without_fields_fails():
    repo = FakeSpaceRepository()
    created = asyncio.run(usecases.create_space(repo, CreateSpaceInput(name="Room", capacity=3)))

    with pytest.raises(ValidationError, match="no fields to update"):
        asyncio.run(usecases.update_space(repo, created.id, UpdateSpaceInput()))


def test_update_capacity_only_keeps_name_and_refreshes_updated_at():
    repo = FakeSpaceRepository()
    created = asyncio.run(usecases.create_space(repo, CreateSpaceInput(name="Room A", capacity=10)))

    updated = asyncio.run(usecases.update_space(repo, created.id, UpdateSpaceInput(capacity=20)))

    assert updated.capacity == 20
    assert updated.name == "Room A"
    assert updated.createdAt == created.createdAt
    assert updated.updatedAt > created.updatedAt


def test_update_trims_name():
    repo = FakeSpaceRepository()
    created = asyncio.run(usecases.create_space(repo, CreateSpaceInput(name="Room A", capacity=10)))

    updated = asyncio.run(usecases.update_space(repo, created.id, UpdateSpaceInput(name="  Room B ")))

    assert updated.name == "Room B"
    assert updated.capacity == 10


@pytest.mark.parametrize("change, message", [
    (UpdateSpaceInput(name="   "), "name cannot be empty"),
    (UpdateSpaceInput(name=7), "name must be a string"),
    (UpdateSpaceInput(capacity=0), "capacity must be a positive integer"),
    (UpdateSpaceInput(name="ok", capacity=-3), "capacity must be a positive integer"),
])
def test_update_validates_provided_fields(change, message):
    repo = FakeSpaceRepository()
    created = asyncio.run(usecases.create_space(repo, CreateSpaceInput(name="Room", capacity=3)))

    with pytest.raises(ValidationError, match=message):
        asyncio.run(usecases.update_space(repo, created.id, change))

    assert repo.rows[created.id].capacity == 3
    assert repo.rows[created.id].name == "Room"


def test_missing_space_is_not_found_everywhere():
    repo = FakeSpaceRepository()

    with pytest.raises(NotFoundError, match="space not found"):
        asyncio.run(usecases.get_space(repo, "missing"))
    with pytest.raises(NotFoundError, match="space not found"):
        asyncio.run(usecases.update_space(repo, "missing", UpdateSpaceInput(capacity=2)))
    with pytest.raises(NotFoundError, match="space not found"):
        asyncio.run(usecases.delete_space(repo, "missing"))


def test_delete_then_get_is_not_found():
    repo = FakeSpaceRepository()
    created = asyncio.run(usecases.create_space(repo, CreateSpaceInput(name="Room", capacity=3)))

    asyncio.run(usecases.delete_space(repo, created.id))

    with pytest.raises(NotFoundError):
        asyncio.run(usecases.get_space(repo, created.id))


def test_delete_requires_id():
    with pytest.raises(ValidationError, match="id is required"):
        asyncio.run(usecases.delete_space(FakeSpaceRepository(), ""))


def test_update_requires_id():
    repo = FakeSpaceRepository()

    with pytest.raises(ValidationError, match="id is required"):
        asyncio.run(usecases.update_space(repo, "", UpdateSpaceInput(capacity=2)))

    assert repo.calls == []


def test_capacity_upper_bound_is_accepted():
    repo = FakeSpaceRepository()

    created = asyncio.run(usecases.create_space(repo, CreateSpaceInput(name="Arena", capacity=usecases.MAX_CAPACITY)))
    updated = asyncio.run(usecases.update_space(repo, created.id, UpdateSpaceInput(capacity=float(usecases.MAX_CAPACITY))))

    assert created.capacity == usecases.MAX_CAPACITY
    assert updated.capacity == usecases.MAX_CAPACITY


@pytest.mark.parametrize("capacity", [2**31, 2**63, 1e20])
def test_capacity_above_upper_bound_is_rejected(capacity):
    repo = FakeSpaceRepository()
    created = asyncio.run(usecases.create_space(repo, CreateSpaceInput(name="Room", capacity=3)))

    with pytest.raises(ValidationError, match="capacity must be at most 2147483647"):
        asyncio.run(usecases.create_space(repo, CreateSpaceInput(name="Big", capacity=capacity)))
    with pytest.raises(ValidationError, match="capacity must be at most 2147483647"):
        asyncio.run(usecases.update_space(repo, created.id, UpdateSpaceInput(capacity=capacity)))

    assert repo.calls == ["create"]
    assert repo.rows[created.id].capacity == 3
