from __future__ import annotations
from typing import List
from app.core.errors import DuplicateRecordError, ValidationError
from app.repos.base import UserRepository
from app.schemas.users import CreateUserInput, UserDTO
from app.usecases.dto import to_user_dto


async def list_users(repo: UserRepository) -> List[UserDTO]:
    users = await repo.list()
    return [to_user_dto(user) for user in users]


async def create_user(repo: UserRepository, input: CreateUserInput) -> UserDTO:
    if not isinstance(input.email, str) or not input.email.strip():
        raise ValidationError("email is required")
    email = input.email.strip()
    local, _, domain = email.partition("@")
    if not local or not domain:
        raise ValidationError("email must be a valid address")

    name = None
    if input.name is not None:
        if not isinstance(input.name, str):
            raise ValidationError("name must be a string")
        name = input.name.strip() or None

    if await repo.get_by_email(email) is not None:
        raise ValidationError("email already exists")

    try:
        user = await repo.create({"email": email, "name": name})
    except DuplicateRecordError:
        raise ValidationError("email already exists")
    return to_user_dto(user)
