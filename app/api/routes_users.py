from typing import List
from fastapi import APIRouter
from app.api import users_controller as controller
from app.schemas.health import ErrorResponse
from app.schemas.users import UserDTO

router = APIRouter(prefix="/users")

router.add_api_route("", controller.list_users, methods=["GET"], response_model=List[UserDTO])
router.add_api_route("", controller.create_user, methods=["POST"], status_code=201, response_model=UserDTO, responses={400: {"model": ErrorResponse}})
