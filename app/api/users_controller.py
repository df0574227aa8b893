from __future__ import annotations
from typing import Any
from fastapi import Body, Depends
from fastapi.responses import JSONResponse
from app.api.deps import get_user_repository
from app.api.errors import error_response
from app.repos.base import UserRepository
from app.schemas.users import CreateUserInput
from app.usecases import users as usecases


async def list_users(repo: UserRepository = Depends(get_user_repository)):
    try:
        dtos = await usecases.list_users(repo)
        return JSONResponse(status_code=200, content=[dto.model_dump() for dto in dtos])
    except Exception as err:
        return error_response(err, "list_users")


async def create_user(
    body: Any = Body(None),
    repo: UserRepository = Depends(get_user_repository),
):
    try:
        fields = body if isinstance(body, dict) else {}
        dto = await usecases.create_user(repo, CreateUserInput(email=fields.get("email"), name=fields.get("name")))
        return JSONResponse(status_code=201, content=dto.model_dump())
    except Exception as err:
        return error_response(err, "create_user")
