import httpx
from app.client.api import raise_for_api_error
from app.schemas.health import HealthResponse


async def fetch_health(client: httpx.AsyncClient) -> HealthResponse:
    r = await client.get("/health")
    raise_for_api_error(r)
    return HealthResponse.model_validate(r.json())
