from __future__ import annotations
from datetime import timedelta
from typing import Any, Dict, List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import RecordNotFoundError
from app.db.models import Space, utcnow
from app.repos.base import SpaceRepository

# DTO timestamps carry millisecond precision; every update must move updated_at
# forward by at least one visible tick.
MIN_TICK = timedelta(milliseconds=1)


class SqlSpaceRepository(SpaceRepository):
    """Space persistence over a single AsyncSession. No validation happens here."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, data: Dict[str, Any]) -> Space:
        now = utcnow()
        space = Space(name=data["name"], capacity=data["capacity"], created_at=now, updated_at=now)
        self.session.add(space)
        await self.session.commit()
        await self.session.refresh(space)
        return space

    async def get_by_id(self, id: str) -> Optional[Space]:
        return await self.session.get(Space, id)

    async def list(self) -> List[Space]:
        result = await self.session.execute(
            select(Space).order_by(Space.created_at.desc(), Space.id.desc())
        )
        return list(result.scalars().all())

    async def update(self, id: str, data: Dict[str, Any]) -> Space:
        space = await self.session.get(Space, id)
        if space is None:
            raise RecordNotFoundError(Space.__tablename__, id)
        for key, value in data.items():
            setattr(space, key, value)
        space.updated_at = max(utcnow(), space.updated_at + MIN_TICK)
        await self.session.commit()
        await self.session.refresh(space)
        return space

    async def delete(self, id: str) -> None:
        space = await self.session.get(Space, id)
        if space is None:
            raise RecordNotFoundError(Space.__tablename__, id)
        await self.session.delete(space)
        await self.session.commit()
