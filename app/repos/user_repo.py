from __future__ import annotations
from typing import Any, Dict, List, Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import DuplicateRecordError
from app.db.models import User, utcnow
from app.repos.base import UserRepository


class SqlUserRepository(UserRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, data: Dict[str, Any]) -> User:
        user = User(email=data["email"], name=data.get("name"), created_at=utcnow())
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError as e:
            # email is the only unique column besides the generated id
            await self.session.rollback()
            raise DuplicateRecordError("users", "email") from e
        await self.session.refresh(user)
        return user

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def list(self) -> List[User]:
        result = await self.session.execute(select(User).order_by(User.created_at.asc()))
        return list(result.scalars().all())
