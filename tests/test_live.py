"""Checks against the real API; skipped unless POKEMON_TCG_API_KEY is set."""

import asyncio

import pytest

from pokemontcg import Card, CardSet, Client, Subtype, Supertype, Type

pytestmark = pytest.mark.live


def test_find_card_by_id(live_api_key):
    card = asyncio.run(Client(live_api_key).find(Card, "xy1-1"))

    assert card is not None
    assert card.id == "xy1-1"
    assert card.name


def test_find_set_by_id(live_api_key):
    card_set = asyncio.run(Client(live_api_key).find(CardSet, "xy1"))

    assert card_set is not None
    assert card_set.id == "xy1"
    assert card_set.name == "XY"


def test_missing_card_is_none(live_api_key):
    assert asyncio.run(Client(live_api_key).find(Card, "does-not-exist-0")) is None


def test_all_types(live_api_key):
    types = asyncio.run(Client(live_api_key).all(Type))

    assert Type("Lightning") in types


def test_all_supertypes_and_subtypes(live_api_key):
    client = Client(live_api_key)

    assert Supertype("Trainer") in asyncio.run(client.all(Supertype))
    assert Subtype("Supporter") in asyncio.run(client.all(Subtype))


def test_set_listing_matches_total_count(live_api_key):
    client = Client(live_api_key)

    first = asyncio.run(client.fetch_page(CardSet, page=1))
    sets = asyncio.run(client.all(CardSet))

    assert first.total_count is not None
    assert len(sets) == first.total_count
