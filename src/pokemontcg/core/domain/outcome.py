"""Lookup outcomes.

Why three variants instead of `Optional` + exceptions:
- A missing resource is a normal answer from the API, not a failure.
- Callers that want both channels (e.g. batch lookups) can branch on the
  outcome without try/except; `Client.find` flattens it for everyone else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from pokemontcg.core.errors import PokemonTcgError

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    record: T


@dataclass(frozen=True)
class NotFound:
    resource: str
    id: str


@dataclass(frozen=True)
class Failed:
    error: PokemonTcgError


LookupOutcome = Union[Found[T], NotFound, Failed]


def unwrap(outcome: LookupOutcome[T]) -> T | None:
    """Flatten an outcome: record, `None` for not-found, raise on failure."""

    if isinstance(outcome, Found):
        return outcome.record
    if isinstance(outcome, NotFound):
        return None
    raise outcome.error
