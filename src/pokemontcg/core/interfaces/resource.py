"""Resource kind contract.

Why Protocol:
- Structural contract: each kind supplies its endpoint path and how to decode
  a response body; the client is written once against it.
- Custom kinds (a subset model, a filtered endpoint) plug in without touching
  the client.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from pokemontcg.core.domain.envelopes import Page

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ResourceKind(Protocol[T_co]):
    """Minimal contract of a resource kind.

    Design rules:
    - `path` is the endpoint segment under the base URL (`cards`, `types`).
    - `findable` is False for kinds without a `/<path>/<id>` endpoint.
    - `default_query` is a `q` filter always applied when listing.
    - decoders raise `DecodeError`; they never return a partial record.
    """

    name: str
    path: str
    findable: bool
    default_query: str | None

    def decode_one(self, body: bytes) -> T_co:
        """Decode a single-record response body."""

        ...

    def decode_page(self, body: bytes) -> Page[T_co]:
        """Decode one page of a listing response body."""

        ...
