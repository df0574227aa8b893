"""Cache-aware query and mutation helpers for the terminal client.

Query results are cached by key. Mutations invalidate every cached key that
starts with one of their ``invalidates`` prefixes, so the next read refetches.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Generic, Optional, Tuple, TypeVar
import httpx
from app.client.health_service import fetch_health
from app.client.space_service import SpaceService
from app.schemas.health import HealthResponse
from app.schemas.spaces import SpaceDTO

log = logging.getLogger(__name__)

T = TypeVar("T")
QueryKey = Tuple[Any, ...]

SPACES_KEY: QueryKey = ("spaces",)
HEALTH_KEY: QueryKey = ("health",)


@dataclass
class QueryResult(Generic[T]):
    data: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


class QueryClient:
    def __init__(self):
        self._cache: Dict[QueryKey, Any] = {}

    def get_query_data(self, key: QueryKey) -> Any:
        return self._cache.get(key)

    def set_query_data(self, key: QueryKey, data: Any) -> None:
        self._cache[key] = data

    def invalidate_queries(self, prefix: QueryKey) -> None:
        for key in [k for k in self._cache if k[:len(prefix)] == prefix]:
            del self._cache[key]

    async def fetch_query(self, key: QueryKey, fn: Callable[[], Awaitable[T]], retry: int = 0) -> QueryResult[T]:
        if key in self._cache:
            return QueryResult(data=self._cache[key])
        last_error: Optional[Exception] = None
        for attempt in range(retry + 1):
            try:
                data = await fn()
            except Exception as e:
                log.info("Query %s failed (attempt %d/%d): %s", key, attempt + 1, retry + 1, e)
                last_error = e
                continue
            self._cache[key] = data
            return QueryResult(data=data)
        return QueryResult(error=last_error)


@dataclass
class Mutation(Generic[T]):
    client: QueryClient
    fn: Callable[..., Awaitable[T]]
    invalidates: Tuple[QueryKey, ...] = field(default_factory=tuple)

    async def mutate_async(self, *args: Any, **kwargs: Any) -> T:
        """Run the mutation. Errors propagate; nothing is invalidated on failure."""
        result = await self.fn(*args, **kwargs)
        for prefix in self.invalidates:
            self.client.invalidate_queries(prefix)
        return result

    async def mutate(self, *args: Any, **kwargs: Any) -> QueryResult[T]:
        try:
            return QueryResult(data=await self.mutate_async(*args, **kwargs))
        except Exception as e:
            log.warning("Mutation %s failed: %s", getattr(self.fn, "__name__", self.fn), e)
            return QueryResult(error=e)


async def use_spaces(qc: QueryClient, service: SpaceService) -> QueryResult[list[SpaceDTO]]:
    return await qc.fetch_query(SPACES_KEY, service.fetch_spaces)


async def use_space(qc: QueryClient, service: SpaceService, id: str) -> QueryResult[SpaceDTO]:
    return await qc.fetch_query(SPACES_KEY + (id,), lambda: service.fetch_space_by_id(id))


async def use_health(qc: QueryClient, client: httpx.AsyncClient) -> QueryResult[HealthResponse]:
    return await qc.fetch_query(HEALTH_KEY, lambda: fetch_health(client), retry=1)


def use_create_space(qc: QueryClient, service: SpaceService) -> Mutation[SpaceDTO]:
    return Mutation(qc, service.create_space, invalidates=(SPACES_KEY,))


def use_update_space(qc: QueryClient, service: SpaceService) -> Mutation[SpaceDTO]:
    return Mutation(qc, service.update_space, invalidates=(SPACES_KEY,))


def use_delete_space(qc: QueryClient, service: SpaceService) -> Mutation[None]:
    return Mutation(qc, service.delete_space, invalidates=(SPACES_KEY,))
