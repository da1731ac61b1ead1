import json
import os
from pathlib import Path
from typing import Callable

import httpx
import pytest

from pokemontcg import Client, ClientSettings

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

BASE_URL = "https://api.test/v2"

Handler = Callable[[httpx.Request], httpx.Response]


def load_fixture(name: str) -> bytes:
    return (FIXTURES_DIR / name).read_bytes()


def load_json(name: str) -> dict:
    return json.loads(load_fixture(name))


def card_payload(index: int, supertype: str = "Pokémon") -> dict:
    return {"id": f"tst-{index}", "name": f"Card {index}", "supertype": supertype}


def page_body(records: list, *, page: int, page_size: int, total_count: int) -> dict:
    return {
        "data": records,
        "page": page,
        "pageSize": page_size,
        "count": len(records),
        "totalCount": total_count,
    }


class Recorder:
    """MockTransport handler that keeps every request it served."""

    def __init__(self, handler: Handler) -> None:
        self._handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(base_url=BASE_URL, page_size=3, http_timeout_seconds=5.0)


@pytest.fixture
def make_client(settings):
    """Build a client whose requests are answered by `handler`."""

    def _make(handler: Handler, api_key: str = "test-key") -> tuple[Client, Recorder]:
        recorder = Recorder(handler)
        client = Client(api_key, settings=settings, transport=httpx.MockTransport(recorder))
        return client, recorder

    return _make


@pytest.fixture
def live_api_key() -> str:
    key = os.environ.get("POKEMON_TCG_API_KEY")
    if not key:
        pytest.skip("POKEMON_TCG_API_KEY is not set")
    return key
