from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_db
from app.repos.base import SpaceRepository, UserRepository
from app.repos.space_repo import SqlSpaceRepository
from app.repos.user_repo import SqlUserRepository


def get_space_repository(db: AsyncSession = Depends(get_db)) -> SpaceRepository:
    return SqlSpaceRepository(db)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return SqlUserRepository(db)
