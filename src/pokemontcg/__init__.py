"""Typed asynchronous client for the Pokémon TCG API (pokemontcg.io v2)."""

from __future__ import annotations

import logging

from pokemontcg.adapters.resources import (
    CARDS,
    POKEMON,
    RARITIES,
    SETS,
    SUBTYPES,
    SUPERTYPES,
    TYPES,
    ModelResource,
)
from pokemontcg.core.config import ClientSettings
from pokemontcg.core.domain.envelopes import Page
from pokemontcg.core.domain.models import (
    Ability,
    AncientTrait,
    Attack,
    Card,
    CardImages,
    CardMarket,
    CardSet,
    Legalities,
    Pokemon,
    Rarity,
    SetImages,
    Subtype,
    Supertype,
    TcgPlayer,
    Type,
    Weakness,
)
from pokemontcg.core.domain.outcome import Failed, Found, LookupOutcome, NotFound
from pokemontcg.core.domain.query import SearchQuery
from pokemontcg.core.errors import DecodeError, PokemonTcgError, RemoteError, TransportError
from pokemontcg.core.interfaces.resource import ResourceKind
from pokemontcg.core.services.client import Client, create_client

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Ability",
    "AncientTrait",
    "Attack",
    "CARDS",
    "Card",
    "CardImages",
    "CardMarket",
    "CardSet",
    "Client",
    "ClientSettings",
    "DecodeError",
    "Failed",
    "Found",
    "Legalities",
    "LookupOutcome",
    "ModelResource",
    "NotFound",
    "POKEMON",
    "Page",
    "Pokemon",
    "PokemonTcgError",
    "RARITIES",
    "Rarity",
    "RemoteError",
    "ResourceKind",
    "SETS",
    "SUBTYPES",
    "SUPERTYPES",
    "SearchQuery",
    "SetImages",
    "Subtype",
    "Supertype",
    "TYPES",
    "TcgPlayer",
    "TransportError",
    "Type",
    "Weakness",
    "create_client",
]
