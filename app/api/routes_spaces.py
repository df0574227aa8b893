from typing import List
from fastapi import APIRouter
from app.api import spaces_controller as controller
from app.schemas.health import ErrorResponse
from app.schemas.spaces import SpaceDTO

router = APIRouter(prefix="/spaces")

_errors = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}

router.add_api_route("", controller.create_space, methods=["POST"], status_code=201, response_model=SpaceDTO, responses=_errors)
router.add_api_route("", controller.list_spaces, methods=["GET"], response_model=List[SpaceDTO], responses=_errors)
router.add_api_route("/{id}", controller.get_space, methods=["GET"], response_model=SpaceDTO, responses=_errors)
router.add_api_route("/{id}", controller.update_space, methods=["PATCH"], response_model=SpaceDTO, responses=_errors)
router.add_api_route("/{id}", controller.delete_space, methods=["DELETE"], status_code=204, responses=_errors)
