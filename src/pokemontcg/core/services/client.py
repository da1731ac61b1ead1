"""Resource client.

This module holds the only stateful object of the SDK, and its state is
immutable configuration: the API key and `ClientSettings`. Every operation
opens its own HTTP client and closes it when done, so concurrent calls from
different tasks share nothing.

Outcome rules:
- `find` answers `None` for a 404; every other failure is raised.
- `all`/`where` either return every record or raise; a failing page is never
  turned into a partial list.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, AsyncIterator, TypeVar, Union
from urllib.parse import quote

import httpx

from pokemontcg.adapters.http_client import build_async_client, error_message, send_get
from pokemontcg.adapters.resources import resolve
from pokemontcg.core.config import ClientSettings
from pokemontcg.core.domain.envelopes import Page
from pokemontcg.core.domain.outcome import Failed, Found, LookupOutcome, NotFound, unwrap
from pokemontcg.core.domain.query import SearchQuery
from pokemontcg.core.errors import PokemonTcgError, RemoteError
from pokemontcg.core.interfaces.resource import ResourceKind

_LOG = logging.getLogger(__name__)

T = TypeVar("T")

Kind = Union[type[T], ResourceKind[T]]


class Client:
    """Asynchronous client for the Pokémon TCG API.

    `kind` arguments accept a model class (`Card`, `CardSet`, `Type`, ...) or
    any object implementing `ResourceKind`.

    `transport` is the extension point for retries or stubbing: it is handed
    to every `httpx.AsyncClient` the client creates. The caller keeps
    ownership of it and closes it.
    """

    def __init__(
        self,
        api_key: str = "",
        *,
        settings: ClientSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._settings = settings or ClientSettings()
        self._transport = transport

    def __repr__(self) -> str:
        key = "set" if self._api_key else "unset"
        return f"Client(base_url={self._settings.base_url!r}, api_key={key})"

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    def _http(self) -> httpx.AsyncClient:
        return build_async_client(self._settings, api_key=self._api_key, transport=self._transport)

    async def lookup(self, kind: Kind[T], id: str) -> LookupOutcome[T]:
        """Fetch one record by id as a three-way outcome."""

        if not id:
            raise ValueError("id must be a non-empty string")
        resource = resolve(kind)
        if not resource.findable:
            # No `/<path>/<id>` endpoint exists for this kind.
            return NotFound(resource=resource.name, id=id)

        path = f"{resource.path}/{_path_segment(id)}"
        try:
            async with self._http() as client:
                response = await send_get(client, path)
            if response.status_code == 404:
                return NotFound(resource=resource.name, id=id)
            _raise_for_status(response)
            return Found(resource.decode_one(response.content))
        except PokemonTcgError as exc:
            return Failed(exc)

    async def find(self, kind: Kind[T], id: str) -> T | None:
        """Fetch one record by id; `None` when the API reports it missing."""

        return unwrap(await self.lookup(kind, id))

    async def fetch_page(
        self,
        kind: Kind[T],
        page: int | None = None,
        page_size: int | None = None,
        query: SearchQuery | None = None,
    ) -> Page[T]:
        """Fetch a single page of a listing.

        Explicit `page`/`page_size` win over the ones carried by `query`;
        both are validated like any `SearchQuery`.
        """

        resource = resolve(kind)
        query = query or SearchQuery()
        query = replace(
            query,
            page=page if page is not None else (query.page or 1),
            page_size=page_size if page_size is not None else query.page_size,
        ).merged_with(resource.default_query)
        assert query.page is not None
        async with self._http() as client:
            return await self._page(client, resource, query, query.page, query.page_size or self._settings.page_size)

    async def iter_all(self, kind: Kind[T], query: SearchQuery | None = None) -> AsyncIterator[T]:
        """Yield every record of `kind`, requesting pages as they are consumed."""

        resource = resolve(kind)
        query = (query or SearchQuery()).merged_with(resource.default_query)
        page_size = query.page_size or self._settings.page_size

        async with self._http() as client:
            page_number = query.page or 1
            collected = 0
            while True:
                page = await self._page(client, resource, query, page_number, page_size)
                collected += len(page.data)
                for record in page.data:
                    yield record
                if query.page is not None or page.is_last(collected):
                    break
                page_number += 1

        if query.page is None and page.total_count is not None and collected != page.total_count:
            _LOG.warning(
                "%s: collected %d records but the API reported %d",
                resource.name,
                collected,
                page.total_count,
            )

    async def all(self, kind: Kind[T]) -> list[T]:
        """Every record of `kind`, in the order the API returns them."""

        return [record async for record in self.iter_all(kind)]

    async def where(self, kind: Kind[T], query: SearchQuery) -> list[T]:
        """Records of `kind` matching `query` (all pages unless `query.page` is set)."""

        return [record async for record in self.iter_all(kind, query)]

    async def _page(
        self,
        client: httpx.AsyncClient,
        resource: ResourceKind[Any],
        query: SearchQuery,
        page: int,
        page_size: int,
    ) -> Page[Any]:
        params = query.to_params()
        params["page"] = str(page)
        params["pageSize"] = str(page_size)
        response = await send_get(client, resource.path, params)
        _raise_for_status(response)
        return resource.decode_page(response.content)


def _path_segment(id: str) -> str:
    segment = quote(id, safe="")
    # "." and ".." would be resolved as dot segments and leave the resource path.
    if not segment.strip("."):
        segment = segment.replace(".", "%2E")
    return segment


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    raise RemoteError(
        response.status_code,
        url=str(response.request.url),
        message=error_message(response),
    )


def create_client(
    api_key: str = "",
    *,
    settings: ClientSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Client:
    """Build a `Client`; an empty key means unauthenticated (rate-limited) access."""

    return Client(api_key, settings=settings, transport=transport)
