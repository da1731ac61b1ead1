"""Search parameters for listing endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from pokemontcg.core.config import MAX_PAGE_SIZE


@dataclass(frozen=True)
class SearchQuery:
    """Filters for `Client.where`.

    `q` uses the API's Lucene-like syntax (`name:charizard subtypes:mega`).
    When `page` is set only that page is fetched; otherwise every page is
    followed.
    """

    q: str | None = None
    order_by: str | None = None
    page: int | None = None
    page_size: int | None = None

    def __post_init__(self) -> None:
        if self.page is not None and self.page < 1:
            raise ValueError("page must be >= 1")
        if self.page_size is not None and not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}")

    def to_params(self) -> dict[str, str]:
        """Query-string parameters, without pagination counters."""

        params: dict[str, str] = {}
        if self.q:
            params["q"] = self.q
        if self.order_by:
            params["orderBy"] = self.order_by
        return params

    def merged_with(self, default_q: str | None) -> "SearchQuery":
        """Combine a resource-level filter (e.g. `supertype:pokemon`) with `q`."""

        if not default_q:
            return self
        q = f"{default_q} ({self.q})" if self.q else default_q
        return SearchQuery(q=q, order_by=self.order_by, page=self.page, page_size=self.page_size)
