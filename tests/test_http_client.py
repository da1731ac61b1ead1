import asyncio

import httpx
import pytest

from pokemontcg import ClientSettings, TransportError
from pokemontcg.adapters.http_client import build_async_client, error_message, send_get


class _CountingTransport(httpx.MockTransport):
    def __init__(self) -> None:
        super().__init__(lambda request: httpx.Response(200, json={"data": []}))
        self.closed = 0

    async def aclose(self) -> None:
        self.closed += 1


def test_client_is_bound_to_settings():
    settings = ClientSettings(base_url="https://api.test/v2", http_timeout_seconds=7.5, user_agent="ua/1")
    client = build_async_client(settings, api_key="k")

    assert str(client.base_url) == "https://api.test/v2/"
    assert client.timeout.read == 7.5
    assert client.headers["User-Agent"] == "ua/1"
    assert client.headers["X-Api-Key"] == "k"
    asyncio.run(client.aclose())


def test_caller_transport_outlives_each_client():
    transport = _CountingTransport()

    async def run():
        for _ in range(2):
            async with build_async_client(ClientSettings(base_url="https://api.test/v2"), transport=transport) as client:
                await send_get(client, "types")

    asyncio.run(run())

    assert transport.closed == 0


def test_send_get_wraps_timeouts():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    async def run():
        async with build_async_client(
            ClientSettings(base_url="https://api.test/v2"), transport=httpx.MockTransport(handler)
        ) as client:
            await send_get(client, "cards", {"page": "1"})

    with pytest.raises(TransportError, match="api.test/v2/cards"):
        asyncio.run(run())


@pytest.mark.parametrize(
    ("response", "expected"),
    [
        (httpx.Response(500, json={"error": {"message": "Internal", "code": 500}}), "Internal"),
        (httpx.Response(502, text="Bad Gateway"), "Bad Gateway"),
        (httpx.Response(500, json=["unexpected"]), None),
        (httpx.Response(500, text=""), None),
    ],
)
def test_error_message(response, expected):
    assert error_message(response) == expected
