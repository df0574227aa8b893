from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from app.db.models import Space, User

class SpaceRepository(ABC):
    @abstractmethod
    async def create(self, data: Dict[str, Any]) -> Space:
        pass

    @abstractmethod
    async def get_by_id(self, id: str) -> Optional[Space]:
        pass

    @abstractmethod
    async def list(self) -> List[Space]:
        pass

    @abstractmethod
    async def update(self, id: str, data: Dict[str, Any]) -> Space:
        pass

    @abstractmethod
    async def delete(self, id: str) -> None:
        pass


class UserRepository(ABC):
    @abstractmethod
    async def create(self, data: Dict[str, Any]) -> User:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def list(self) -> List[User]:
        pass
