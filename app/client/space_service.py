"""Async calls for the /spaces endpoints. Failures propagate; nothing retries."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import httpx
from app.client.api import raise_for_api_error
from app.schemas.spaces import SpaceDTO

ENDPOINT = "/spaces"


@dataclass
class SpaceService:
    client: httpx.AsyncClient

    async def fetch_spaces(self) -> List[SpaceDTO]:
        r = await self.client.get(ENDPOINT)
        raise_for_api_error(r)
        return [SpaceDTO.model_validate(item) for item in r.json()]

    async def fetch_space_by_id(self, id: str) -> SpaceDTO:
        r = await self.client.get(f"{ENDPOINT}/{id}")
        raise_for_api_error(r)
        return SpaceDTO.model_validate(r.json())

    async def create_space(self, name: str, capacity: int) -> SpaceDTO:
        r = await self.client.post(ENDPOINT, json={"name": name, "capacity": capacity})
        raise_for_api_error(r)
        return SpaceDTO.model_validate(r.json())

    async def update_space(self, id: str, name: Optional[str] = None, capacity: Optional[int] = None) -> SpaceDTO:
        payload: Dict[str, Any] = {}
        if name is not None:
            payload["name"] = name
        if capacity is not None:
            payload["capacity"] = capacity
        r = await self.client.patch(f"{ENDPOINT}/{id}", json=payload)
        raise_for_api_error(r)
        return SpaceDTO.model_validate(r.json())

    async def delete_space(self, id: str) -> None:
        r = await self.client.delete(f"{ENDPOINT}/{id}")
        raise_for_api_error(r)
