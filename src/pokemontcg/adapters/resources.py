"""Concrete resource kinds.

Each kind is a `ModelResource`: an endpoint path plus the pydantic model that
decodes its records. The registry maps model classes to kinds so callers can
write `client.find(Card, "xy1-1")`.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from pokemontcg.core.domain.envelopes import Envelope, Page
from pokemontcg.core.domain.models import (
    Card,
    CardSet,
    Pokemon,
    Rarity,
    Subtype,
    Supertype,
    Type,
)
from pokemontcg.core.errors import DecodeError
from pokemontcg.core.interfaces.resource import ResourceKind

M = TypeVar("M", bound=BaseModel)


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0] if exc.errors() else {}
    loc = ".".join(str(part) for part in first.get("loc", ()))
    msg = first.get("msg", "invalid body")
    extra = f" (+{exc.error_count() - 1} more)" if exc.error_count() > 1 else ""
    return f"{loc}: {msg}{extra}" if loc else f"{msg}{extra}"


class ModelResource(Generic[M]):
    """`ResourceKind` backed by a pydantic model."""

    def __init__(
        self,
        model: type[M],
        path: str,
        *,
        name: str | None = None,
        findable: bool = True,
        default_query: str | None = None,
    ) -> None:
        self.model = model
        self.path = path
        self.name = name or model.__name__
        self.findable = findable
        self.default_query = default_query
        self._one = Envelope[model]  # type: ignore[valid-type]
        self._page = Page[model]  # type: ignore[valid-type]

    def __repr__(self) -> str:
        return f"ModelResource({self.name!r}, path={self.path!r})"

    def decode_one(self, body: bytes) -> M:
        try:
            return self._one.model_validate_json(body).data
        except ValidationError as exc:
            raise DecodeError(self.name, _describe(exc)) from exc

    def decode_page(self, body: bytes) -> Page[M]:
        try:
            return self._page.model_validate_json(body)
        except ValidationError as exc:
            raise DecodeError(self.name, _describe(exc)) from exc


CARDS = ModelResource(Card, "cards")
SETS = ModelResource(CardSet, "sets")
POKEMON = ModelResource(Pokemon, "cards", default_query="supertype:pokemon")
TYPES = ModelResource(Type, "types", findable=False)
SUPERTYPES = ModelResource(Supertype, "supertypes", findable=False)
SUBTYPES = ModelResource(Subtype, "subtypes", findable=False)
RARITIES = ModelResource(Rarity, "rarities", findable=False)

_REGISTRY: dict[type, ResourceKind[Any]] = {
    Card: CARDS,
    CardSet: SETS,
    Pokemon: POKEMON,
    Type: TYPES,
    Supertype: SUPERTYPES,
    Subtype: SUBTYPES,
    Rarity: RARITIES,
}


def resolve(kind: type | ResourceKind[Any]) -> ResourceKind[Any]:
    """Return the resource kind for a model class (or the kind itself)."""

    if isinstance(kind, type):
        try:
            return _REGISTRY[kind]
        except KeyError:
            raise TypeError(f"{kind.__name__} is not a registered resource kind") from None
    return kind
