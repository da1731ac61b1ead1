"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Gives strict validation and self-documenting fields (Field) without coupling
  the Core to I/O libraries.
- Decoding a response body is just `model_validate_json`; a body that does not
  match the schema never becomes a record.

Notes:
- The schema mirrors pokemontcg.io v2 (camelCase on the wire, snake_case here).
- Records are frozen: built once from a response, never mutated afterwards.
- Unknown keys are ignored so new API fields do not break decoding.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, RootModel, field_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

_RECORD_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
    frozen=True,
)


class _Record(BaseModel):
    model_config = _RECORD_CONFIG


class Legalities(_Record):
    standard: str | None = None
    expanded: str | None = None
    unlimited: str | None = None


class SetImages(_Record):
    symbol: str | None = None
    logo: str | None = None


class CardImages(_Record):
    small: str | None = None
    large: str | None = None


class Ability(_Record):
    name: str
    text: str = ""
    type: str | None = None


class AncientTrait(_Record):
    name: str
    text: str = ""


class Attack(_Record):
    name: str
    cost: list[str] = Field(default_factory=list)
    converted_energy_cost: int | None = None
    damage: str = ""
    text: str = ""


class Weakness(_Record):
    """Weakness or resistance entry (`{"type": "Fire", "value": "×2"}`)."""

    type: str
    value: str = ""


class TcgPlayer(_Record):
    url: str | None = None
    updated_at: str | None = None
    prices: dict[str, dict[str, float | None]] = Field(default_factory=dict)


class CardMarket(_Record):
    url: str | None = None
    updated_at: str | None = None
    prices: dict[str, float | None] = Field(default_factory=dict)


class CardSet(_Record):
    """An expansion set (`/sets/<id>`), also embedded in every card."""

    id: str = Field(
        ...,
        min_length=1,
        description="Opaque set identifier (e.g. 'xy1').",
    )
    name: str = Field(
        ...,
        min_length=1,
        description="Display name of the set.",
    )
    series: str | None = Field(
        default=None,
        description="Series the set belongs to (e.g. 'XY').",
    )
    printed_total: int | None = Field(
        default=None,
        ge=0,
        description="Card count printed on the cards themselves.",
    )
    total: int | None = Field(
        default=None,
        ge=0,
        description="Total cards in the set, secret rares included.",
    )
    legalities: Legalities | None = None
    ptcgo_code: str | None = Field(
        default=None,
        description="Code used by the Pokémon TCG Online client.",
    )
    release_date: str | None = Field(
        default=None,
        description="Release date as reported by the API ('YYYY/MM/DD').",
    )
    updated_at: str | None = None
    images: SetImages | None = None


class Card(_Record):
    """A single card (`/cards/<id>`).

    Only `id`, `name` and `supertype` are required; everything else depends on
    the kind of card (Pokémon, Trainer, Energy) and on the era it was printed in.
    """

    id: str = Field(
        ...,
        min_length=1,
        description="Opaque card identifier (e.g. 'xy1-1').",
    )
    name: str = Field(
        ...,
        min_length=1,
        description="Card name.",
    )
    supertype: str = Field(
        ...,
        min_length=1,
        description="'Pokémon', 'Trainer' or 'Energy'.",
    )
    subtypes: list[str] = Field(default_factory=list)
    level: str | None = None
    hp: str | None = None
    types: list[str] = Field(default_factory=list)
    evolves_from: str | None = None
    evolves_to: list[str] = Field(default_factory=list)
    rules: list[str] = Field(default_factory=list)
    ancient_trait: AncientTrait | None = None
    abilities: list[Ability] = Field(default_factory=list)
    attacks: list[Attack] = Field(default_factory=list)
    weaknesses: list[Weakness] = Field(default_factory=list)
    resistances: list[Weakness] = Field(default_factory=list)
    retreat_cost: list[str] = Field(default_factory=list)
    converted_retreat_cost: int | None = None
    card_set: CardSet | None = Field(
        default=None,
        alias="set",
        description="Embedded parent set (no referential check is made).",
    )
    number: str | None = None
    artist: str | None = None
    rarity: str | None = None
    flavor_text: str | None = None
    national_pokedex_numbers: list[int] = Field(default_factory=list)
    legalities: Legalities | None = None
    regulation_mark: str | None = None
    images: CardImages | None = None
    tcgplayer: TcgPlayer | None = None
    cardmarket: CardMarket | None = None


class Pokemon(Card):
    """A card whose supertype is Pokémon."""

    @field_validator("supertype")
    @classmethod
    def _must_be_pokemon(cls, value: str) -> str:
        if value.casefold() not in ("pokémon", "pokemon"):
            raise ValueError(f"supertype {value!r} is not a Pokémon card")
        return value


class _Name(RootModel[str]):
    """String-valued resource (`/types` and friends return bare strings)."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root


class Type(_Name):
    """Energy type ('Lightning', 'Colorless', ...)."""


class Supertype(_Name):
    pass


class Subtype(_Name):
    pass


class Rarity(_Name):
    pass
