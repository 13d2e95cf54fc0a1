"""Offset pagination for platform list endpoints.

Design:
- SDK makes a single HTTP round-trip per page, returning the items and the
  options that produced them.
- No hidden pagination state; ``Page.next_page()`` derives the next
  ``FindOptions`` value and the caller decides whether to continue.
- A page shorter than ``limit`` ends the collection. A full page always
  yields next options, so an exactly-full last page costs one extra call
  that comes back empty.

Example:
    options = FindOptions(limit=50)
    while options is not None:
        page = await client.buckets.find_buckets(options)
        for bucket in page.items:
            process(bucket)
        options = page.next_page()
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Awaitable, Callable, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class FindOptions(BaseModel):
    """Paging and ordering parameters for one list query.

    Attributes:
        limit: Max items per page; None lets the server return everything left
        offset: Number of items to skip
        descending: True for newest-first, False for oldest-first
    """

    model_config = ConfigDict(frozen=True)

    limit: int | None = Field(default=None, ge=1)
    offset: int = Field(default=0, ge=0)
    descending: bool = True

    def advance(self, count: int) -> FindOptions:
        """Return a copy with offset moved forward by ``count``."""
        return self.model_copy(update={"offset": self.offset + count})

    def to_params(self) -> dict[str, Any]:
        """Render as query parameters.

        An unset limit is returned as None; HTTPClient drops None params.
        """
        return {
            "limit": self.limit,
            "offset": self.offset,
            "descending": self.descending,
        }


class Page(BaseModel, Generic[T]):
    """One page of a list query."""

    model_config = ConfigDict(frozen=True)

    items: list[T]
    options: FindOptions = Field(default_factory=FindOptions)
    total_hint: int | None = None
    links: dict[str, str | None] = Field(default_factory=dict)

    @classmethod
    def empty(cls, options: FindOptions | None = None) -> Page[T]:
        return cls(items=[], options=options or FindOptions())

    def next_page(self) -> FindOptions | None:
        """Options for the following page, or None when this page was short.

        Pages fetched without a limit are always the last one.
        """
        limit = self.options.limit
        if limit is None or len(self.items) < limit:
            return None
        return self.options.advance(len(self.items))


async def iter_pages(
    fetch: Callable[[FindOptions], Awaitable[Page[T]]],
    options: FindOptions | None = None,
) -> AsyncIterator[Page[T]]:
    """Fetch pages in order until the collection is exhausted.

    Empty pages are not yielded.

    Args:
        fetch: Coroutine function returning the page for given options
        options: Options of the first page
    """
    current: FindOptions | None = options or FindOptions()
    while current is not None:
        page = await fetch(current)
        if page.items:
            yield page
        current = page.next_page()
