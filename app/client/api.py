from __future__ import annotations
from typing import Optional
import httpx


class ApiError(Exception):
    """A non-2xx response from the API, carrying the server's message."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def create_api_client(base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None, timeout: float = 30) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url.rstrip("/"),
        headers={"Content-Type": "application/json", "Accept": "application/json"},
        transport=transport,
        timeout=timeout,
    )


def raise_for_api_error(r: httpx.Response) -> None:
    if r.is_success:
        return
    message = r.reason_phrase or f"HTTP {r.status_code}"
    try:
        body = r.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("error") or body.get("message") or message
    raise ApiError(r.status_code, message)
