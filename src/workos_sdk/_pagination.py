"""Cursor pagination for WorkOS list endpoints.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from ._base import BaseClient, RequestConfig
from ._serializers import deserialize_list, serialize
from .models.common import ListMetadata, ListResponse

T = TypeVar("T")

DEFAULT_ORDER = "desc"

FetchPage = Callable[[dict[str, Any]], Awaitable[ListResponse[T]]]


class AutoPaginatable(Generic[T]):
    """A list page that knows how to fetch the pages after it.

    Iterating with ``async for`` walks every item across pages. Each new
    iteration starts again from the first page.
    """

    def __init__(
        self,
        first_page: ListResponse[T],
        fetch_page: FetchPage[T],
        params: dict[str, Any] | None = None,
    ) -> None:
        self._first_page = first_page
        self._fetch_page = fetch_page
        self.params = dict(params or {})

    @property
    def data(self) -> list[T]:
        """Items of the first page."""
        return self._first_page.data

    @property
    def list_metadata(self) -> ListMetadata:
        """Cursor metadata of the first page."""
        return self._first_page.list_metadata

    async def pages(self) -> AsyncIterator[ListResponse[T]]:
        """Yield the first page, then every following page.

        Stops once a page comes back empty or without an ``after`` cursor.
        """
        page = self._first_page
        yield page

        while page.data and page.list_metadata.after:
            page = await self._fetch_page(
                {**self.params, "before": None, "after": page.list_metadata.after}
            )
            yield page

    async def __aiter__(self) -> AsyncIterator[T]:
        async for page in self.pages():
            for item in page.data:
                yield item

    async def auto_pagination(self) -> list[T]:
        """Collect every item across all pages.

        Returns only the first page when the caller asked for an explicit limit.
        """
        if self.params.get("limit"):
            return list(self.data)

        return [item async for item in self]


async def fetch_list(
    client: BaseClient,
    path: str,
    deserializer: Callable[[Any], T],
    options: BaseModel | dict[str, Any] | None = None,
    *,
    warrant_token: str | None = None,
    default_order: str | None = DEFAULT_ORDER,
) -> AutoPaginatable[T]:
    """Fetch the first page of a list endpoint.

    Args:
        client: The base HTTP client
        path: List endpoint path
        deserializer: Turns one wire item into a model
        options: Query options, as a model or an already serialized dict
        warrant_token: Optional FGA consistency token
        default_order: Order applied when the caller gave none, or None to omit

    Returns:
        An AutoPaginatable seeded with the first page.

    """
    params = serialize(options) if isinstance(options, BaseModel) else dict(options or {})
    if default_order is not None and not params.get("order"):
        params["order"] = default_order

    async def fetch_page(page_params: dict[str, Any]) -> ListResponse[T]:
        config = RequestConfig(params=page_params, warrant_token=warrant_token)
        data = await client.request("GET", path, config=config)
        return deserialize_list(data or {}, deserializer)

    first_page = await fetch_page(params)
    return AutoPaginatable(first_page, fetch_page, params)
