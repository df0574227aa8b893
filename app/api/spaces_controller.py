"""HTTP handlers for the spaces resource.

Handlers pull raw fields off the request, call the matching usecase and turn
the outcome into a status code and JSON body.
"""
from __future__ import annotations
import math
from typing import Any, Dict
from fastapi import Body, Depends, Response
from fastapi.responses import JSONResponse
from app.api.deps import get_space_repository
from app.api.errors import error_response
from app.core.errors import ValidationError
from app.repos.base import SpaceRepository
from app.schemas.spaces import CreateSpaceInput, UpdateSpaceInput
from app.usecases import spaces as usecases


def _as_fields(body: Any) -> Dict[str, Any]:
    return body if isinstance(body, dict) else {}


def coerce_capacity(value: Any) -> Any:
    """Turn numeric strings into numbers. Anything non-numeric is rejected."""
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            raise ValidationError("capacity must be a number")
        if math.isfinite(number):
            return number
    raise ValidationError("capacity must be a number")


async def create_space(
    body: Any = Body(None),
    repo: SpaceRepository = Depends(get_space_repository),
):
    try:
        fields = _as_fields(body)
        dto = await usecases.create_space(
            repo,
            CreateSpaceInput(name=fields.get("name"), capacity=coerce_capacity(fields.get("capacity"))),
        )
        return JSONResponse(status_code=201, content=dto.model_dump())
    except Exception as err:
        return error_response(err, "create")


async def list_spaces(repo: SpaceRepository = Depends(get_space_repository)):
    try:
        dtos = await usecases.list_spaces(repo)
        return JSONResponse(status_code=200, content=[dto.model_dump() for dto in dtos])
    except Exception as err:
        return error_response(err, "list")


async def get_space(id: str, repo: SpaceRepository = Depends(get_space_repository)):
    try:
        dto = await usecases.get_space(repo, id)
        return JSONResponse(status_code=200, content=dto.model_dump())
    except Exception as err:
        return error_response(err, "get", id)


async def update_space(
    id: str,
    body: Any = Body(None),
    repo: SpaceRepository = Depends(get_space_repository),
):
    try:
        fields = _as_fields(body)
        dto = await usecases.update_space(
            repo,
            id,
            UpdateSpaceInput(name=fields.get("name"), capacity=coerce_capacity(fields.get("capacity"))),
        )
        return JSONResponse(status_code=200, content=dto.model_dump())
    except Exception as err:
        return error_response(err, "update", id)


async def delete_space(id: str, repo: SpaceRepository = Depends(get_space_repository)):
    try:
        await usecases.delete_space(repo, id)
        return Response(status_code=204)
    except Exception as err:
        return error_response(err, "delete", id)
