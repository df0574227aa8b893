"""Space usecases.

One coroutine per operation. Each takes the repository explicitly, validates
its input and returns DTOs. Nothing here knows about HTTP.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List
from app.core.errors import NotFoundError, RecordNotFoundError, ValidationError
from app.repos.base import SpaceRepository
from app.schemas.spaces import CreateSpaceInput, SpaceDTO, UpdateSpaceInput
from app.usecases.dto import to_space_dto

log = logging.getLogger(__name__)

SPACE_NOT_FOUND = "space not found"

# Largest value the int4 capacity column holds.
MAX_CAPACITY = 2**31 - 1


def validate_capacity(value: Any) -> int:
    """Return ``value`` as an int if it is a positive integer.

    Integral floats are accepted; booleans are not. Values above
    ``MAX_CAPACITY`` are rejected.
    """
    if isinstance(value, bool):
        raise ValidationError("capacity must be a positive integer")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or value <= 0:
        raise ValidationError("capacity must be a positive integer")
    if value > MAX_CAPACITY:
        raise ValidationError(f"capacity must be at most {MAX_CAPACITY}")
    return value


def _require_id(id: Any) -> str:
    if not isinstance(id, str) or not id:
        raise ValidationError("id is required")
    return id


async def create_space(repo: SpaceRepository, input: CreateSpaceInput) -> SpaceDTO:
    if not isinstance(input.name, str) or not input.name.strip():
        raise ValidationError("name is required")
    capacity = validate_capacity(input.capacity)

    space = await repo.create({"name": input.name.strip(), "capacity": capacity})
    log.info("Space created", extra={"operation": "create", "space_id": space.id})
    return to_space_dto(space)


async def get_space(repo: SpaceRepository, id: str) -> SpaceDTO:
    _require_id(id)

    space = await repo.get_by_id(id)
    if space is None:
        raise NotFoundError(SPACE_NOT_FOUND)
    return to_space_dto(space)


async def list_spaces(repo: SpaceRepository) -> List[SpaceDTO]:
    spaces = await repo.list()
    return [to_space_dto(space) for space in spaces]


async def update_space(repo: SpaceRepository, id: str, input: UpdateSpaceInput) -> SpaceDTO:
    _require_id(id)

    data: Dict[str, Any] = {}
    if input.name is not None:
        if not isinstance(input.name, str):
            raise ValidationError("name must be a string")
        if not input.name.strip():
            raise ValidationError("name cannot be empty")
        data["name"] = input.name.strip()
    if input.capacity is not None:
        data["capacity"] = validate_capacity(input.capacity)
    if not data:
        raise ValidationError("no fields to update")

    try:
        space = await repo.update(id, data)
    except RecordNotFoundError:
        raise NotFoundError(SPACE_NOT_FOUND)
    log.info("Space updated: %s", ", ".join(sorted(data)), extra={"operation": "update", "space_id": id})
    return to_space_dto(space)


async def delete_space(repo: SpaceRepository, id: str) -> None:
    _require_id(id)

    try:
        await repo.delete(id)
    except RecordNotFoundError:
        raise NotFoundError(SPACE_NOT_FOUND)
    log.info("Space deleted", extra={"operation": "delete", "space_id": id})
