"""httpx wrapper.

Why a wrapper:
- Standardizes base URL, timeouts, headers and logging for every request.
- Makes testing easy: a `MockTransport` (or any custom transport, e.g. one with
  connection retries) is injected here and nowhere else.
"""

from __future__ import annotations

import logging
from typing import Mapping

import httpx

from pokemontcg.core.config import ClientSettings
from pokemontcg.core.errors import TransportError

_LOG = logging.getLogger(__name__)

API_KEY_HEADER = "X-Api-Key"


class _BorrowedTransport(httpx.AsyncBaseTransport):
    """Caller-owned transport shared by short-lived clients.

    Closing one `AsyncClient` must not close the pool other in-flight
    operations are using; the caller closes the real transport.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport) -> None:
        self._transport = transport

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        return await self._transport.handle_async_request(request)

    async def aclose(self) -> None:
        pass


def build_async_client(
    settings: ClientSettings | None = None,
    *,
    api_key: str = "",
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` bound to the API.

    Why a builder:
    - Every operation opens its own client, so they all must look the same.
    - The API key travels as a header and only when it is not empty
      (unauthenticated access is allowed, with lower rate limits).
    """

    settings = settings or ClientSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if api_key:
        headers[API_KEY_HEADER] = api_key
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=_BorrowedTransport(transport) if transport is not None else None,
    )


async def send_get(
    client: httpx.AsyncClient,
    path: str,
    params: Mapping[str, str] | None = None,
) -> httpx.Response:
    """GET `path` relative to the client's base URL.

    Network-level failures become `TransportError`; status codes are left to
    the caller since 404 means different things for lookups and listings.
    """

    try:
        response = await client.get(path, params=params)
    except httpx.RequestError as exc:
        url = str(client.base_url.join(path))
        raise TransportError(f"request to {url} failed: {exc!r}", url=url) from exc

    _LOG.debug("GET %s -> %s", response.request.url, response.status_code)
    return response


def error_message(response: httpx.Response) -> str | None:
    """Extract `error.message` from an API error body, if there is one."""

    try:
        payload = response.json()
    except ValueError:
        text = response.text.strip()
        return text[:200] or None
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
    return None
