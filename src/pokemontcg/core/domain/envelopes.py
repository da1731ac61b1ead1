"""Response envelopes.

Every pokemontcg.io response wraps its payload in `{"data": ...}`. Listing
endpoints add pagination counters next to it; endpoints that are not paginated
(`/types`, `/rarities`, ...) return only `data`.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Single-record response (`/cards/<id>`)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    data: T


class Page(BaseModel, Generic[T]):
    """One page of a listing response."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    data: list[T]
    page: int | None = Field(default=None, ge=1)
    page_size: int | None = Field(default=None, ge=1)
    count: int | None = Field(default=None, ge=0)
    total_count: int | None = Field(
        default=None,
        ge=0,
        description="Total records across all pages; absent when not paginated.",
    )

    @property
    def paginated(self) -> bool:
        return self.total_count is not None

    def is_last(self, collected: int) -> bool:
        """Whether no further page should be requested.

        `collected` is the number of records gathered so far, this page included.
        """

        if not self.paginated or not self.data:
            return True
        assert self.total_count is not None
        if collected >= self.total_count:
            return True
        if self.page_size is not None and len(self.data) < self.page_size:
            return True
        return False
