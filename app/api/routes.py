from fastapi import APIRouter
from app.api.routes_health import router as health_router
from app.api.routes_spaces import router as spaces_router
from app.api.routes_users import router as users_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(spaces_router, tags=["spaces"])
router.include_router(users_router, tags=["users"])
