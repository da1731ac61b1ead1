import asyncio

import httpx
import pytest
from pydantic import ValidationError

from conftest import load_fixture
from pokemontcg import Card, Client, ClientSettings
from pokemontcg.core.config import DEFAULT_BASE_URL, MAX_PAGE_SIZE


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    for name in ("BASE_URL", "HTTP_TIMEOUT_SECONDS", "USER_AGENT", "PAGE_SIZE"):
        monkeypatch.delenv(f"POKEMON_TCG_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    settings = ClientSettings()

    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.page_size == MAX_PAGE_SIZE
    assert settings.http_timeout_seconds > 0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("POKEMON_TCG_BASE_URL", "https://mirror.example/v2")
    monkeypatch.setenv("POKEMON_TCG_PAGE_SIZE", "50")

    settings = ClientSettings()

    assert settings.base_url == "https://mirror.example/v2"
    assert settings.page_size == 50


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("POKEMON_TCG_USER_AGENT=my-deckbuilder/2.0\n", encoding="utf-8")

    assert ClientSettings().user_agent == "my-deckbuilder/2.0"


@pytest.mark.parametrize("kwargs", [{"page_size": 0}, {"page_size": 251}, {"http_timeout_seconds": 0}, {"user_agent": ""}])
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(ValidationError):
        ClientSettings(**kwargs)


def test_api_key_is_never_read_from_environment(monkeypatch):
    monkeypatch.setenv("POKEMON_TCG_API_KEY", "from-env")
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, content=load_fixture("xy1-1.json"))

    client = Client(transport=httpx.MockTransport(handler))
    asyncio.run(client.find(Card, "xy1-1"))

    assert "X-Api-Key" not in requests[0].headers
    assert str(requests[0].url) == f"{DEFAULT_BASE_URL}/cards/xy1-1"
